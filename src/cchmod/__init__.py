"""cchmod — convert and compare Unix permission modes."""

from cchmod.perm import DiffOp, Mode, ModeDiff, Permission, PermissionDiff

__version__ = "0.1.0"

__all__ = ["DiffOp", "Mode", "ModeDiff", "Permission", "PermissionDiff", "__version__"]
