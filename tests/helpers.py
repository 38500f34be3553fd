"""Shared test helpers for the cdecl test suite."""

from __future__ import annotations

from cdecl.lexer import Lexer
from cdecl.pronouncer import Pronouncer
from cdecl.source import CharSource
from cdecl.tokens import Token, TokenKind


def make_lexer(text: str, **kwargs) -> Lexer:
    return Lexer(CharSource.from_string(text, "<test>"), **kwargs)


def lex(text: str) -> list[Token]:
    """Lex a declaration up to and including its End token."""
    return make_lexer(text).lex()


def kinds(text: str) -> list[TokenKind]:
    """Token kinds of a declaration, excluding End."""
    return [t.kind for t in lex(text) if t.kind != TokenKind.END]


def pronounce(text: str, **kwargs) -> str:
    """Pronounce a declaration and return the sentence."""
    capacity = kwargs.pop("capacity", 128)
    return str(Pronouncer(make_lexer(text, **kwargs), capacity).pronounce())
