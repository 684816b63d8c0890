"""Named Permission constants, one per octal digit."""

from __future__ import annotations

from typing import Tuple

from cchmod.perm.models import Permission

RWX = Permission(read=True, write=True, execute=True)  # 7
RW = Permission(read=True, write=True, execute=False)  # 6
RX = Permission(read=True, write=False, execute=True)  # 5
R = Permission(read=True, write=False, execute=False)  # 4
WX = Permission(read=False, write=True, execute=True)  # 3
W = Permission(read=False, write=True, execute=False)  # 2
X = Permission(read=False, write=False, execute=True)  # 1
EMPTY = Permission(read=False, write=False, execute=False)  # 0

# Indexed by octal digit value.
BY_DIGIT: Tuple[Permission, ...] = (EMPTY, X, W, WX, R, RX, RW, RWX)
