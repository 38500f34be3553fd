"""cdecl command line interface."""

from __future__ import annotations

import functools
from pathlib import Path
from typing import Callable

import click

from cdecl import __version__
from cdecl.config import OUTPUT_FORMATS, CdeclConfig, resolve_config
from cdecl.errors import CdeclError, DiagnosticRenderer
from cdecl.lexer import Lexer
from cdecl.pronouncer import Pronouncer
from cdecl.source import CharSource
from cdecl.tokens import ArrayMarker, Identifier, Specifier, Token, TypeKeyword


def _input_options(func: Callable) -> Callable:
    """Options shared by every command that reads a declaration."""

    @click.argument("declaration", required=False)
    @click.option("--file", "file_path", type=click.Path(exists=True, dir_okay=False),
                  help="Read the declaration from a file instead of stdin.")
    @click.option("--max-token-len", type=click.IntRange(min=1), default=None,
                  help="Override the maximum identifier length.")
    @click.option("--stack-capacity", type=click.IntRange(min=1), default=None,
                  help="Override the maximum number of tokens before the identifier.")
    @click.option("--format", "fmt", type=click.Choice(OUTPUT_FORMATS), default=None,
                  help="Diagnostic style.")
    @click.option("--no-color", is_flag=True, help="Disable colored diagnostics.")
    @click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False),
                  help="Use this cdecl.toml instead of searching for one.")
    @functools.wraps(func)
    def wrapper(
        declaration: str | None,
        file_path: str | None,
        max_token_len: int | None,
        stack_capacity: int | None,
        fmt: str | None,
        no_color: bool,
        config_path: str | None,
    ) -> None:
        try:
            config = resolve_config(Path(config_path) if config_path else None)
        except ValueError as e:
            click.echo(f"error: {e}", err=True)
            raise SystemExit(1)

        if max_token_len is not None:
            config.limits.max_token_len = max_token_len
        if stack_capacity is not None:
            config.limits.stack_capacity = stack_capacity
        if fmt is not None:
            config.output.format = fmt
        if no_color:
            config.output.color = False

        if declaration is not None and file_path is not None:
            raise click.UsageError("give either DECLARATION or --file, not both")
        if declaration is not None:
            text, filename = declaration, "<argument>"
        elif file_path is not None:
            text, filename = Path(file_path).read_text(), file_path
        else:
            text, filename = click.get_text_stream("stdin").read(), "<stdin>"

        renderer = DiagnosticRenderer(color=config.output.color)
        renderer.add_source(filename, text)
        lexer = Lexer(
            CharSource.from_string(text, filename),
            config.limits.max_token_len,
        )
        try:
            func(lexer, config)
        except CdeclError as e:
            _report(renderer, e, config)
            raise SystemExit(1)

    return wrapper


def _report(renderer: DiagnosticRenderer, error: CdeclError, config: CdeclConfig) -> None:
    if config.output.format == "full":
        click.echo(renderer.render(error.diagnostic), err=True)
    else:
        click.echo(renderer.render_short(error.diagnostic), err=True)


@click.group()
@click.version_option(__version__, prog_name="cdecl")
def main() -> None:
    """Pronounce C declarations in English."""


@main.command()
@_input_options
def explain(lexer: Lexer, config: CdeclConfig) -> None:
    """Explain a declaration such as 'int *x[];'."""
    pronouncer = Pronouncer(lexer, config.limits.stack_capacity)
    click.echo(str(pronouncer.pronounce()))


@main.command()
@_input_options
def tokens(lexer: Lexer, config: CdeclConfig) -> None:
    """Dump the tokens of a declaration."""
    for token in lexer.lex():
        _dump_token(token)


def _dump_token(token: Token) -> None:
    span = token.span
    match token:
        case TypeKeyword(name=name) | Specifier(name=name) | Identifier(name=name):
            payload = name
        case ArrayMarker(size=None):
            payload = "[]"
        case ArrayMarker(size=size):
            payload = f"[{size}]"
        case _:
            payload = ""
    click.echo(
        f"{token.kind.name:<15} {payload:<16} "
        f"{span.start_line}:{span.start_col}".rstrip()
    )
