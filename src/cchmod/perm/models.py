"""Value types for permission triples, modes, and their diffs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple

SUBJECTS: Tuple[str, ...] = ("user", "group", "other")
FLAGS: Tuple[str, ...] = ("read", "write", "execute")
SYMBOLS: Tuple[str, ...] = ("r", "w", "x")


class DiffOp(str, Enum):
    PLUS = "plus"
    SAME = "same"
    MINUS = "minus"

    @property
    def symbol(self) -> str:
        return _DIFF_OP_SYMBOL[self]

    @property
    def inverse(self) -> DiffOp:
        if self is DiffOp.PLUS:
            return DiffOp.MINUS
        if self is DiffOp.MINUS:
            return DiffOp.PLUS
        return DiffOp.SAME

    @property
    def sort_key(self) -> int:
        return DIFF_OP_ORDER[self]

    # Order by DIFF_OP_ORDER, not by the underlying string values.
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DiffOp):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DiffOp):
            return NotImplemented
        return self.sort_key <= other.sort_key

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DiffOp):
            return NotImplemented
        return self.sort_key > other.sort_key

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DiffOp):
            return NotImplemented
        return self.sort_key >= other.sort_key


DIFF_OP_ORDER: dict[DiffOp, int] = {
    DiffOp.PLUS: 0,
    DiffOp.SAME: 1,
    DiffOp.MINUS: 2,
}

_DIFF_OP_SYMBOL = {
    DiffOp.PLUS: "+",
    DiffOp.SAME: "=",
    DiffOp.MINUS: "-",
}


@dataclass(frozen=True, slots=True)
class Permission:
    """A read/write/execute triple for a single subject class."""

    read: bool = False
    write: bool = False
    execute: bool = False

    def as_num(self) -> str:
        """Single octal digit, ``4*read + 2*write + execute``."""
        return str(4 * self.read + 2 * self.write + self.execute)

    def as_sym(self) -> str:
        """Letters of the set flags only, e.g. ``"rx"``."""
        return "".join(s for s, flag in zip(SYMBOLS, self._flags()) if flag)

    def as_sym_full(self) -> str:
        """Fixed-width form with ``-`` for unset flags, e.g. ``"r-x"``."""
        return "".join(s if flag else "-" for s, flag in zip(SYMBOLS, self._flags()))

    def diff(self, other: Permission) -> PermissionDiff:
        from cchmod.perm.diff import diff_permission

        return diff_permission(self, other)

    @classmethod
    def from_num(cls, text: str) -> Permission:
        from cchmod.perm.codec import parse_permission_num

        return parse_permission_num(text)

    @classmethod
    def from_sym_full(cls, text: str) -> Permission:
        from cchmod.perm.codec import parse_permission_sym

        return parse_permission_sym(text)

    def _flags(self) -> Tuple[bool, bool, bool]:
        return (self.read, self.write, self.execute)

    def __str__(self) -> str:
        return self.as_sym_full()


@dataclass(frozen=True, slots=True)
class Mode:
    """User, group and other permission triples."""

    user: Permission = Permission()
    group: Permission = Permission()
    other: Permission = Permission()

    def as_num(self) -> str:
        return self.user.as_num() + self.group.as_num() + self.other.as_num()

    def as_sym(self) -> str:
        return self.user.as_sym_full() + self.group.as_sym_full() + self.other.as_sym_full()

    def diff(self, other: Mode) -> ModeDiff:
        from cchmod.perm.diff import diff_mode

        return diff_mode(self, other)

    @classmethod
    def from_num(cls, text: str) -> Mode:
        from cchmod.perm.codec import parse_mode_num

        return parse_mode_num(text)

    @classmethod
    def from_sym(cls, text: str) -> Mode:
        from cchmod.perm.codec import parse_mode_sym

        return parse_mode_sym(text)

    def __str__(self) -> str:
        return self.as_sym()


@dataclass(frozen=True, slots=True)
class PermissionDiff:
    """Per-flag change between two Permissions."""

    read: DiffOp = DiffOp.SAME
    write: DiffOp = DiffOp.SAME
    execute: DiffOp = DiffOp.SAME

    @property
    def is_unchanged(self) -> bool:
        return all(op is DiffOp.SAME for op in self.ops())

    def ops(self) -> Tuple[DiffOp, DiffOp, DiffOp]:
        return (self.read, self.write, self.execute)

    def inverse(self) -> PermissionDiff:
        return PermissionDiff(self.read.inverse, self.write.inverse, self.execute.inverse)

    def changes(self) -> Iterator[Tuple[str, DiffOp]]:
        """Yield ``(flag, op)`` for every flag that changed."""
        for flag, op in zip(FLAGS, self.ops()):
            if op is not DiffOp.SAME:
                yield flag, op


@dataclass(frozen=True, slots=True)
class ModeDiff:
    """Per-subject PermissionDiffs between two Modes."""

    user: PermissionDiff = PermissionDiff()
    group: PermissionDiff = PermissionDiff()
    other: PermissionDiff = PermissionDiff()

    @property
    def is_unchanged(self) -> bool:
        return all(d.is_unchanged for d in self.fields())

    def fields(self) -> Tuple[PermissionDiff, PermissionDiff, PermissionDiff]:
        return (self.user, self.group, self.other)

    def inverse(self) -> ModeDiff:
        return ModeDiff(self.user.inverse(), self.group.inverse(), self.other.inverse())

    def changes(self) -> Iterator[Tuple[str, str, DiffOp]]:
        """Yield ``(subject, flag, op)`` for every bit that changed."""
        for subject, perm_diff in zip(SUBJECTS, self.fields()):
            for flag, op in perm_diff.changes():
                yield subject, flag, op
