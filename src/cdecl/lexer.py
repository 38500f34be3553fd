"""Lexer for C declarations.

Produces tokens on demand from a character source, one token per
``next_token()`` call. Parameter lists are skipped lexically, never
tokenized.
"""

from __future__ import annotations

from cdecl.errors import TokenTooLong, UnexpectedEndOfInput, UnrecognizedCharacter
from cdecl.source import EOF, CharSource, Span
from cdecl.tokens import (
    PUNCTUATION,
    SPECIFIERS,
    TYPE_KEYWORDS,
    ArrayMarker,
    CloseGroup,
    End,
    Identifier,
    OpenGroup,
    Specifier,
    Token,
    TypeKeyword,
)

MAX_TOKEN_LEN = 64


class Lexer:
    """Tokenizes a single C declaration."""

    def __init__(self, source: CharSource, max_token_len: int = MAX_TOKEN_LEN) -> None:
        self.source = source
        self.max_token_len = max_token_len

    @property
    def position(self) -> Span:
        return self.source.span()

    def next_token(self) -> Token:
        """Read the next token from the source."""
        self._skip_spaces()
        ch = self.source.read_char()
        start_line = self.source.line
        start_col = self.source.column

        if ch in PUNCTUATION:
            return PUNCTUATION[ch](self._span(start_line, start_col))
        if ch.isascii() and ch.isalpha():
            self.source.push_back(ch)
            return self._lex_word()
        if ch == '[':
            self._skip_to(']')
            return ArrayMarker(self._span(start_line, start_col))
        raise UnrecognizedCharacter(
            f"unexpected character: {ch!r}", self.position,
        )

    def skip_group(self) -> CloseGroup:
        """Skip the rest of a parameter list whose '(' was just read."""
        depth = 1
        while True:
            ch = self._read_or_fail()
            if ch == '(':
                depth += 1
            elif ch == ')':
                depth -= 1
                if depth == 0:
                    return CloseGroup(self._span(self.source.line, self.source.column))

    def lex(self) -> list[Token]:
        """Tokenize up to and including the terminating ';'.

        Parameter lists after the identifier are skipped the same way the
        pronouncer skips them, leaving just their group markers.
        """
        tokens: list[Token] = []
        seen_identifier = False
        while True:
            tok = self.next_token()
            tokens.append(tok)
            if isinstance(tok, Identifier):
                seen_identifier = True
            elif isinstance(tok, OpenGroup) and seen_identifier:
                tokens.append(self.skip_group())
            elif isinstance(tok, End):
                return tokens

    # ── Helpers ───────────────────────────────────────────────────

    def _span(self, start_line: int, start_col: int) -> Span:
        return Span(
            self.source.filename, start_line, start_col,
            self.source.line, self.source.column,
        )

    def _read_or_fail(self) -> str:
        ch = self.source.read_char()
        if ch == EOF:
            raise UnexpectedEndOfInput("unexpected end of input", self.position)
        return ch

    def _skip_spaces(self) -> None:
        while True:
            ch = self._read_or_fail()
            if not ch.isspace():
                self.source.push_back(ch)
                return

    def _skip_to(self, end: str) -> None:
        while self._read_or_fail() != end:
            pass

    # ── Identifiers and Keywords ─────────────────────────────────

    def _lex_word(self) -> Token:
        text: list[str] = []
        start_line = self.source.line
        start_col = self.source.column + 1
        while True:
            ch = self._read_or_fail()
            if not (ch.isascii() and (ch.isalnum() or ch == '_')):
                self.source.push_back(ch)
                break
            if len(text) >= self.max_token_len:
                raise TokenTooLong(
                    f"token longer than {self.max_token_len} characters",
                    self._span(start_line, start_col),
                )
            text.append(ch)
        word = ''.join(text)
        span = self._span(start_line, start_col)

        if word in TYPE_KEYWORDS:
            return TypeKeyword(word, span)
        if word in SPECIFIERS:
            return Specifier(word, span)
        return Identifier(word, span)
