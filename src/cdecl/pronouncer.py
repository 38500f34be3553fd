"""Two-pass pronunciation of C declarations.

Tokens read before the identifier are kept on a stack. The sentence is then
built by alternating a right scan over the remaining input with a left scan
that drains the stack, switching direction at every group boundary.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from cdecl.errors import StackOverflow, StackUnderflow
from cdecl.lexer import MAX_TOKEN_LEN, Lexer
from cdecl.source import CharSource
from cdecl.tokens import (
    ArrayMarker,
    CloseGroup,
    End,
    Identifier,
    OpenGroup,
    PointerMarker,
    Specifier,
    Token,
    TypeKeyword,
)

STACK_CAPACITY = 128

_BASE_TYPE = (TypeKeyword, Specifier)


class DeclarationStack:
    """LIFO of the tokens to the left of the identifier."""

    def __init__(self, lexer: Lexer, capacity: int = STACK_CAPACITY) -> None:
        self.lexer = lexer
        self.capacity = capacity
        self._items: list[Token] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def push(self, token: Token) -> None:
        if len(self._items) >= self.capacity:
            raise StackOverflow(
                f"declaration longer than {self.capacity} tokens",
                self.lexer.position,
            )
        self._items.append(token)

    def pop(self) -> Token:
        if not self._items:
            raise StackUnderflow(
                "stack underflow: invalid declaration", self.lexer.position,
            )
        return self._items.pop()

    def peek(self) -> Token | None:
        return self._items[-1] if self._items else None

    def is_empty(self) -> bool:
        return not self._items


def gloss(token: Token) -> str | None:
    """The English phrase for a token, or None for structural tokens."""
    match token:
        case TypeKeyword(name=name):
            return name
        case Specifier(name="const"):
            return "read-only"
        case Specifier(name=name):
            return name
        case ArrayMarker():
            return "array of"
        case PointerMarker():
            return "pointer to"
        case OpenGroup():
            return "function returning"
        case _:
            return None


@dataclass
class Pronunciation:
    subject: str
    phrases: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        return " ".join([f"{self.subject} is", *self.phrases])


class Pronouncer:
    """Pronounces one declaration read through a lexer."""

    def __init__(self, lexer: Lexer, capacity: int = STACK_CAPACITY) -> None:
        self.lexer = lexer
        self.stack = DeclarationStack(lexer, capacity)
        self.right_finished = False
        self.left_finished = False
        self._phrases: list[str] = []

    def pronounce(self) -> Pronunciation:
        subject = self.build()
        while not (self.left_finished and self.right_finished):
            if not self.right_finished:
                self._scan_right()
            if not self.left_finished:
                self._scan_left()
        return Pronunciation(subject.name, self._phrases)

    def _say(self, token: Token) -> None:
        phrase = gloss(token)
        if phrase is not None:
            self._phrases.append(phrase)

    def build(self) -> Identifier:
        """Push tokens until the identifier shows up and return it."""
        while True:
            token = self.lexer.next_token()
            if isinstance(token, Identifier):
                return token
            self.stack.push(token)

    def _scan_right(self) -> None:
        while True:
            token = self.lexer.next_token()
            self._say(token)
            if isinstance(token, OpenGroup):
                # parameter list
                self.lexer.skip_group()
            elif isinstance(token, End):
                self.right_finished = True
                return
            elif isinstance(token, CloseGroup):
                return

    def _scan_left(self) -> None:
        while True:
            token = self.stack.pop()
            if isinstance(token, OpenGroup):
                if self.stack.is_empty():
                    self.left_finished = True
                return
            if isinstance(token, _BASE_TYPE):
                # keep "unsigned long", "read-only int" in source order
                run = [token]
                while isinstance(self.stack.peek(), _BASE_TYPE):
                    run.append(self.stack.pop())
                for word in reversed(run):
                    self._say(word)
            else:
                self._say(token)
            if self.stack.is_empty():
                self.left_finished = True
                return


def explain(
    text: str,
    filename: str = "<stdin>",
    *,
    max_token_len: int = MAX_TOKEN_LEN,
    capacity: int = STACK_CAPACITY,
) -> str:
    """Pronounce the declaration in ``text``."""
    lexer = Lexer(CharSource.from_string(text, filename), max_token_len)
    return str(Pronouncer(lexer, capacity).pronounce())
