"""Numeric and symbolic parsers for Permissions and Modes.

Permission parsers only know positions relative to their own input. The
Mode parsers slice the input into per-field windows and shift any error a
field parser raises by the window's start, so every reported position is an
index into the original, unsplit string.
"""

from __future__ import annotations

from typing import Callable, List, Tuple, Union

from cchmod.perm.constants import BY_DIGIT
from cchmod.perm.errors import MalformedInput, ParseError, UnexpectedChar, UnexpectedEoi
from cchmod.perm.models import SYMBOLS, Mode, Permission

DIGITS: Tuple[str, ...] = tuple("01234567")

# Width of one field in each encoding.
_NUM_WIDTH = 1
_SYM_WIDTH = 3


def _expect_end(text: str, pos: int) -> None:
    """Fail if *text* has anything left at *pos*."""
    if len(text) > pos:
        raise UnexpectedChar(pos, text[pos], None)


# --- Permission ---


def parse_permission_num(text: str) -> Permission:
    """Parse a single octal digit, e.g. ``"5"``."""
    if not text:
        raise UnexpectedEoi(0)
    c = text[0]
    if c not in DIGITS:
        raise UnexpectedChar(0, c, DIGITS)
    _expect_end(text, _NUM_WIDTH)
    return BY_DIGIT[int(c)]


def parse_permission_sym(text: str) -> Permission:
    """Parse a fixed-width symbolic triple, e.g. ``"r-x"``."""
    flags: List[bool] = []
    for pos, letter in enumerate(SYMBOLS):
        if pos >= len(text):
            raise UnexpectedEoi(pos)
        c = text[pos]
        if c == letter:
            flags.append(True)
        elif c == "-":
            flags.append(False)
        else:
            raise UnexpectedChar(pos, c, (letter, "-"))
    _expect_end(text, _SYM_WIDTH)
    return Permission(*flags)


# --- Mode ---


def _parse_fields(
    text: str,
    width: int,
    parse_field: Callable[[str], Permission],
) -> Mode:
    fields: List[Permission] = []
    for start in range(0, 3 * width, width):
        window = text[start:start + width]
        try:
            fields.append(parse_field(window))
        except ParseError as exc:
            raise exc.offset(start) from exc
    _expect_end(text, 3 * width)
    return Mode(*fields)


def parse_mode_num(text: str) -> Mode:
    """Parse three octal digits, e.g. ``"755"``."""
    return _parse_fields(text, _NUM_WIDTH, parse_permission_num)


def parse_mode_sym(text: str) -> Mode:
    """Parse nine symbolic characters, e.g. ``"rwxr-xr-x"``."""
    return _parse_fields(text, _SYM_WIDTH, parse_permission_sym)


# --- Dispatch ---

_ATTEMPTS: Tuple[Tuple[str, Callable[[str], Union[Mode, Permission]]], ...] = (
    ("mode (numeric)", parse_mode_num),
    ("mode (symbolic)", parse_mode_sym),
    ("permission (numeric)", parse_permission_num),
    ("permission (symbolic)", parse_permission_sym),
)


def try_parse(text: str) -> Union[Mode, Permission]:
    """Parse *text* as a Mode, falling back to a single Permission.

    Raises MalformedInput carrying every attempt's failure if nothing fits.
    """
    errors: List[Tuple[str, ParseError]] = []
    for name, parse in _ATTEMPTS:
        try:
            return parse(text)
        except ParseError as exc:
            errors.append((name, exc))
    raise MalformedInput(text, errors)
