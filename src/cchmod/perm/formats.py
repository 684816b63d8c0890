"""Uniform numeric/symbolic rendering for Permissions and Modes.

Lets a caller holding either value render it without checking which one it
has. The symbolic rendering of a Permission is the fixed-width form, so both
types render symbolically with ``-`` placeholders.
"""

from __future__ import annotations

from enum import Enum
from functools import singledispatch
from typing import Union

from cchmod.perm.models import Mode, Permission


class OutputFormat(str, Enum):
    NUM = "num"
    SYM = "sym"


@singledispatch
def as_num(value) -> str:
    raise TypeError(f"cannot render {type(value).__name__} as numeric")


@as_num.register(Permission)
def _(value: Permission) -> str:
    return value.as_num()


@as_num.register(Mode)
def _(value: Mode) -> str:
    return value.as_num()


@singledispatch
def as_sym(value) -> str:
    raise TypeError(f"cannot render {type(value).__name__} as symbolic")


@as_sym.register(Permission)
def _(value: Permission) -> str:
    return value.as_sym_full()


@as_sym.register(Mode)
def _(value: Mode) -> str:
    return value.as_sym()


def render(value: Union[Mode, Permission], fmt: OutputFormat) -> str:
    """Render *value* in the requested output format."""
    if fmt is OutputFormat.NUM:
        return as_num(value)
    return as_sym(value)
