"""Rich terminal reporter for permission diffs."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple, Union

from rich.console import Console
from rich.table import Table
from rich.text import Text

from cchmod.perm.models import (
    FLAGS,
    SUBJECTS,
    SYMBOLS,
    DiffOp,
    Mode,
    Permission,
    PermissionDiff,
)

_OP_STYLE = {
    DiffOp.PLUS: "bold green",
    DiffOp.SAME: "dim",
    DiffOp.MINUS: "bold red",
}


def _cell(symbol: str, after: bool, op: DiffOp) -> Text:
    if op is DiffOp.SAME:
        return Text(symbol if after else "-", style=_OP_STYLE[op])
    return Text(f"{op.symbol}{symbol}", style=_OP_STYLE[op])


def _rows(
    before: Union[Mode, Permission], after: Union[Mode, Permission]
) -> Iterator[Tuple[str, Permission, PermissionDiff]]:
    if isinstance(before, Mode) and isinstance(after, Mode):
        diff = before.diff(after)
        for subject, perm, perm_diff in zip(
            SUBJECTS, (after.user, after.group, after.other), diff.fields()
        ):
            yield subject, perm, perm_diff
    elif isinstance(before, Permission) and isinstance(after, Permission):
        yield "permission", after, before.diff(after)
    else:
        raise TypeError("cannot compare a mode with a permission")


def render(
    before: Union[Mode, Permission],
    after: Union[Mode, Permission],
    *,
    show_unchanged: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print a per-bit change table for *before* → *after*."""
    console = console or Console()

    table = Table(
        title=f"{before} → {after}",
        title_style="bold",
        border_style="dim",
    )
    table.add_column("Subject", style="cyan")
    for flag in FLAGS:
        table.add_column(flag.capitalize(), justify="center")

    granted: List[str] = []
    revoked: List[str] = []
    for subject, perm, perm_diff in _rows(before, after):
        for flag, op in perm_diff.changes():
            (granted if op is DiffOp.PLUS else revoked).append(f"{subject}.{flag}")
        if perm_diff.is_unchanged and not show_unchanged:
            continue
        flags = (perm.read, perm.write, perm.execute)
        table.add_row(
            subject,
            *(_cell(s, f, op) for s, f, op in zip(SYMBOLS, flags, perm_diff.ops())),
        )

    console.print(table)

    if not granted and not revoked:
        console.print("[dim]No changes.[/dim]")
        return
    console.print(f"[green]Granted:[/green] {', '.join(granted) or '-'}")
    console.print(f"[red]Revoked:[/red] {', '.join(revoked) or '-'}")
