"""Token kinds and token variants for the declaration lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, ClassVar, Union

if TYPE_CHECKING:
    from cdecl.source import Span


class TokenKind(Enum):
    TYPE_KEYWORD = auto()
    SPECIFIER = auto()
    IDENTIFIER = auto()
    ARRAY_MARKER = auto()
    POINTER_MARKER = auto()
    OPEN_GROUP = auto()
    CLOSE_GROUP = auto()
    END = auto()


@dataclass(frozen=True)
class TypeKeyword:
    name: str
    span: Span
    kind: ClassVar[TokenKind] = TokenKind.TYPE_KEYWORD


@dataclass(frozen=True)
class Specifier:
    name: str
    span: Span
    kind: ClassVar[TokenKind] = TokenKind.SPECIFIER


@dataclass(frozen=True)
class Identifier:
    name: str
    span: Span
    kind: ClassVar[TokenKind] = TokenKind.IDENTIFIER


@dataclass(frozen=True)
class ArrayMarker:
    span: Span
    size: int | None = None  # arrays are always unsized for now
    kind: ClassVar[TokenKind] = TokenKind.ARRAY_MARKER


@dataclass(frozen=True)
class PointerMarker:
    span: Span
    kind: ClassVar[TokenKind] = TokenKind.POINTER_MARKER


@dataclass(frozen=True)
class OpenGroup:
    span: Span
    kind: ClassVar[TokenKind] = TokenKind.OPEN_GROUP


@dataclass(frozen=True)
class CloseGroup:
    span: Span
    kind: ClassVar[TokenKind] = TokenKind.CLOSE_GROUP


@dataclass(frozen=True)
class End:
    span: Span
    kind: ClassVar[TokenKind] = TokenKind.END


Token = Union[
    TypeKeyword,
    Specifier,
    Identifier,
    ArrayMarker,
    PointerMarker,
    OpenGroup,
    CloseGroup,
    End,
]


TYPE_KEYWORDS: frozenset[str] = frozenset({
    "int",
    "char",
    "void",
    "signed",
    "unsigned",
    "short",
    "long",
    "float",
    "double",
})

SPECIFIERS: frozenset[str] = frozenset({
    "const",
    "volatile",
})

PUNCTUATION: dict[str, type] = {
    ';': End,
    '(': OpenGroup,
    ')': CloseGroup,
    '*': PointerMarker,
}
