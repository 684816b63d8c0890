"""cchmod CLI — Typer application with convert, diff, and init commands."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from cchmod import __version__

app = typer.Typer(
    name="cchmod",
    help="Convert and compare Unix permission modes.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _load_config(config: Optional[str], verbose: bool = False):
    """Load .cchmod.toml from the working directory, exit 2 on failure."""
    from cchmod.config.loader import ConfigError, find_config_file, load_config

    try:
        cfg = load_config(Path.cwd(), config)
        if verbose:
            path = find_config_file(Path.cwd(), config)
            console.print(f"[dim]Config: {path or 'defaults'}[/dim]")
        return cfg
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _parse_or_exit(text: str, verbose: bool = False):
    """Parse *text* as a Mode or Permission, exit 1 when malformed."""
    from cchmod.perm.codec import try_parse
    from cchmod.perm.errors import MalformedInput

    try:
        return try_parse(text)
    except MalformedInput as exc:
        if verbose:
            for name, err in exc.errors:
                console.print(f"[dim]{name}: {escape(str(err))}[/dim]")
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


# ── convert ───────────────────────────────────────────────────────────────────


@app.command()
def convert(
    value: str = typer.Argument(..., help="Mode or permission, e.g. 755, rwxr-xr-x, 6, rw-"),
    num: bool = typer.Option(False, "--num", "-n", help="Output the octal form"),
    sym: bool = typer.Option(False, "--sym", "-s", help="Output the symbolic form"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .cchmod.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Explain parse failures"),
) -> None:
    """Print a mode or permission in octal or symbolic form."""
    from cchmod.perm.formats import OutputFormat, render

    if num and sym:
        console.print("[bold red]Error:[/bold red] --num and --sym are exclusive")
        raise typer.Exit(code=1)

    if num or sym:
        fmt = OutputFormat.NUM if num else OutputFormat.SYM
        if verbose:
            console.print("[dim]Config: not loaded (format given on command line)[/dim]")
    else:
        cfg = _load_config(config, verbose)
        if cfg.output.format is None:
            console.print("[bold red]Error:[/bold red] --num or --sym must be supplied")
            raise typer.Exit(code=1)
        fmt = OutputFormat(cfg.output.format)

    parsed = _parse_or_exit(value, verbose)
    if verbose:
        console.print(f"[dim]Parsed as {type(parsed).__name__.lower()}[/dim]")
    print(render(parsed, fmt))


# ── diff ──────────────────────────────────────────────────────────────────────


@app.command()
def diff(
    before: str = typer.Argument(..., help="Original mode or permission"),
    after: str = typer.Argument(..., help="New mode or permission"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .cchmod.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Explain parse failures"),
) -> None:
    """Show which permission bits are granted or revoked going from BEFORE to AFTER."""
    from cchmod.output import json_report, terminal

    cfg = _load_config(config, verbose)

    if format:
        if format not in ("terminal", "json"):
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=1)
        cfg.diff.format = format  # type: ignore[assignment]

    old = _parse_or_exit(before, verbose)
    new = _parse_or_exit(after, verbose)
    if type(old) is not type(new):
        console.print(
            f"[bold red]Error:[/bold red] cannot compare {_kind(old)} {before} "
            f"with {_kind(new)} {after}"
        )
        raise typer.Exit(code=1)

    if cfg.diff.format == "json":
        print(json_report.render(old, new))
    else:
        terminal.render(old, new, show_unchanged=cfg.diff.show_unchanged)


def _kind(value: object) -> str:
    return type(value).__name__.lower()


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .cchmod.toml in the working directory."""
    from cchmod.config.defaults import DEFAULT_TOML
    from cchmod.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"cchmod {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """cchmod — convert and compare Unix permission modes."""
