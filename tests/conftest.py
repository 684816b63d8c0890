"""Shared test fixtures — sample modes, permissions, config files."""

from __future__ import annotations

import textwrap
from itertools import product
from pathlib import Path
from typing import List

import pytest

from cchmod.perm.models import Mode, Permission


@pytest.fixture
def mode_755() -> Mode:
    return Mode(
        user=Permission(read=True, write=True, execute=True),
        group=Permission(read=True, write=False, execute=True),
        other=Permission(read=True, write=False, execute=True),
    )


@pytest.fixture
def mode_644() -> Mode:
    return Mode(
        user=Permission(read=True, write=True, execute=False),
        group=Permission(read=True, write=False, execute=False),
        other=Permission(read=True, write=False, execute=False),
    )


@pytest.fixture
def all_permissions() -> List[Permission]:
    """Every one of the eight possible triples."""
    return [Permission(r, w, x) for r, w, x in product((False, True), repeat=3)]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove CCHMOD_* overrides so tests see file/default config only."""
    monkeypatch.delenv("CCHMOD_FORMAT", raising=False)
    monkeypatch.delenv("CCHMOD_DIFF_FORMAT", raising=False)


@pytest.fixture
def sym_config(tmp_path: Path, clean_env) -> Path:
    """A working directory whose .cchmod.toml defaults to symbolic output."""
    (tmp_path / ".cchmod.toml").write_text(textwrap.dedent("""\
        version = "1.0"
        [output]
        format = "sym"
    """))
    return tmp_path
