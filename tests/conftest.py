"""Shared pytest fixtures for the cdecl test suite."""

from __future__ import annotations

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def tmp_project(tmp_path):
    """A directory holding a cdecl.toml with a tiny stack."""
    toml = tmp_path / "cdecl.toml"
    toml.write_text(
        "[limits]\nmax_token_len = 8\nstack_capacity = 2\n"
        '[output]\nformat = "full"\ncolor = false\n'
    )
    (tmp_path / "src").mkdir()
    return tmp_path
