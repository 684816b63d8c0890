"""JSON reporter for parsed values and diffs."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Union

from cchmod.perm.models import FLAGS, SUBJECTS, Mode, Permission, PermissionDiff


def _kind(value: Union[Mode, Permission]) -> str:
    return "mode" if isinstance(value, Mode) else "permission"


def value_to_dict(value: Union[Mode, Permission]) -> Dict[str, Any]:
    """Describe a Mode or Permission in both encodings."""
    if isinstance(value, Mode):
        sym = value.as_sym()
    else:
        sym = value.as_sym_full()
    return {"kind": _kind(value), "num": value.as_num(), "sym": sym}


def _perm_diff_to_dict(perm_diff: PermissionDiff) -> Dict[str, str]:
    return {flag: op.value for flag, op in zip(FLAGS, perm_diff.ops())}


def to_dict(
    before: Union[Mode, Permission],
    after: Union[Mode, Permission],
) -> Dict[str, Any]:
    """Convert a before/after comparison to a JSON-serialisable dict."""
    changes: List[Dict[str, str]] = []
    if isinstance(before, Mode) and isinstance(after, Mode):
        mode_diff = before.diff(after)
        diff = {
            subject: _perm_diff_to_dict(d)
            for subject, d in zip(SUBJECTS, mode_diff.fields())
        }
        for subject, flag, op in mode_diff.changes():
            changes.append({"subject": subject, "flag": flag, "op": op.value})
        unchanged = mode_diff.is_unchanged
    elif isinstance(before, Permission) and isinstance(after, Permission):
        perm_diff = before.diff(after)
        diff = _perm_diff_to_dict(perm_diff)
        for flag, op in perm_diff.changes():
            changes.append({"flag": flag, "op": op.value})
        unchanged = perm_diff.is_unchanged
    else:
        raise TypeError("cannot compare a mode with a permission")

    return {
        "kind": _kind(before),
        "before": value_to_dict(before),
        "after": value_to_dict(after),
        "unchanged": unchanged,
        "diff": diff,
        "changes": changes,
    }


def render(before: Union[Mode, Permission], after: Union[Mode, Permission]) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(before, after), indent=2)
