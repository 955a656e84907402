"""Shared test fixtures: temporary home, sample configs, rule sets."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from sshwrap.rules.models import Rule


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Keep the real user's SSHWRAP_* settings out of every test."""
    for name in ("SSHWRAP_CONFIG", "SSHWRAP_SSH", "SSHWRAP_DEBUG"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_home(tmp_path: Path, monkeypatch) -> Path:
    """A temporary $HOME with an empty ~/.ssh directory."""
    home = tmp_path / "home"
    (home / ".ssh").mkdir(parents=True)
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def sample_toml() -> str:
    """A config with two rules using both template spellings."""
    return textwrap.dedent("""\
        version = "1.0"

        [ssh]
        binary = "ssh"

        [[patterns]]
        pattern = "dev-(\\\\d+)"
        template = "10.0.0.{1}"

        [[patterns]]
        pattern = "(\\\\w+)\\\\.corp"
        add = "{1}.internal.example.com"
    """)


@pytest.fixture
def home_with_config(fake_home: Path, sample_toml: str) -> Path:
    (fake_home / ".ssh" / "wrapper.toml").write_text(sample_toml)
    return fake_home


@pytest.fixture
def dev_rules() -> list[Rule]:
    return [Rule(pattern=r"dev-(\d+)", template="10.0.0.{1}")]
