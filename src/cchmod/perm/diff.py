"""Bit-wise comparison of Permissions and Modes."""

from __future__ import annotations

from cchmod.perm.models import DiffOp, Mode, ModeDiff, Permission, PermissionDiff


def diff_bit(a: bool, b: bool) -> DiffOp:
    """Classify the change of one flag going from *a* to *b*."""
    if a == b:
        return DiffOp.SAME
    return DiffOp.MINUS if a else DiffOp.PLUS


def diff_permission(a: Permission, b: Permission) -> PermissionDiff:
    return PermissionDiff(
        read=diff_bit(a.read, b.read),
        write=diff_bit(a.write, b.write),
        execute=diff_bit(a.execute, b.execute),
    )


def diff_mode(a: Mode, b: Mode) -> ModeDiff:
    return ModeDiff(
        user=diff_permission(a.user, b.user),
        group=diff_permission(a.group, b.group),
        other=diff_permission(a.other, b.other),
    )
