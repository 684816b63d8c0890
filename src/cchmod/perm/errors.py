"""Parse failures raised by the permission and mode codecs."""

from __future__ import annotations

from typing import List, Optional, Tuple


class ParseError(Exception):
    """Base class for codec failures. *pos* is an index into the input.

    Constructor arguments are kept in ``args`` with *pos* first, so a shifted
    copy can be rebuilt from them.
    """

    def __init__(self, pos: int, *details) -> None:
        self.pos = pos
        super().__init__(pos, *details)

    def offset(self, n: int) -> ParseError:
        """Return a copy of this error with its position shifted by *n*."""
        return type(self)(self.pos + n, *self.args[1:])

    def __str__(self) -> str:
        return self._describe()

    def _describe(self) -> str:
        return f"parse error at position {self.pos}"


class UnexpectedChar(ParseError):
    """An invalid character *c* was found at *pos*.

    *expected* holds the acceptable characters, or ``None`` when only the
    end of input was acceptable there.
    """

    def __init__(self, pos: int, c: str, expected: Optional[Tuple[str, ...]]) -> None:
        self.c = c
        self.expected = expected
        super().__init__(pos, c, expected)

    def _describe(self) -> str:
        if self.expected is None:
            wanted = "end of input"
        else:
            wanted = "one of " + ", ".join(repr(e) for e in self.expected)
        return f"unexpected {self.c!r} at position {self.pos}, expected {wanted}"


class UnexpectedEoi(ParseError):
    """Input ended before the character required at *pos*."""

    def _describe(self) -> str:
        return f"unexpected end of input at position {self.pos}"


class MalformedInput(Exception):
    """Raised when text parses as neither a Mode nor a Permission."""

    def __init__(self, text: str, errors: List[Tuple[str, ParseError]]) -> None:
        self.text = text
        self.errors = errors  # (attempt name, failure) in attempt order
        super().__init__(f"{text}: malformed permission or mode")
