"""Shared test fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def isolate_config(tmp_path_factory, monkeypatch):
    """Point XDG_CONFIG_HOME at an empty temp directory."""
    config_home = tmp_path_factory.mktemp("config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def sample_tree(tmp_path):
    """Build root/{a.txt, sub/{b.txt, deep/c.txt}}."""
    root = tmp_path / "root"
    (root / "sub" / "deep").mkdir(parents=True)
    (root / "a.txt").write_bytes(b"a" * 10)
    (root / "sub" / "b.txt").write_bytes(b"b" * 20)
    (root / "sub" / "deep" / "c.txt").write_bytes(b"c" * 30)
    return root
