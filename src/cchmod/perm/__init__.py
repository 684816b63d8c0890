"""Permission and mode value types, codecs, and diff engine."""

from cchmod.perm.codec import (
    parse_mode_num,
    parse_mode_sym,
    parse_permission_num,
    parse_permission_sym,
    try_parse,
)
from cchmod.perm.diff import diff_bit, diff_mode, diff_permission
from cchmod.perm.errors import MalformedInput, ParseError, UnexpectedChar, UnexpectedEoi
from cchmod.perm.formats import OutputFormat, as_num, as_sym, render
from cchmod.perm.models import DiffOp, Mode, ModeDiff, Permission, PermissionDiff

__all__ = [
    "DiffOp",
    "MalformedInput",
    "Mode",
    "ModeDiff",
    "OutputFormat",
    "ParseError",
    "Permission",
    "PermissionDiff",
    "UnexpectedChar",
    "UnexpectedEoi",
    "as_num",
    "as_sym",
    "diff_bit",
    "diff_mode",
    "diff_permission",
    "parse_mode_num",
    "parse_mode_sym",
    "parse_permission_num",
    "parse_permission_sym",
    "render",
    "try_parse",
]
