# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path

import pytest

from tests.helpers.filesystem import FakeFileSystem

RepoFactory = Callable[[Mapping[str, str]], Path]


@pytest.fixture
def make_repo(tmp_path: Path) -> RepoFactory:
    """Return a factory writing ``hooks/<file>`` entries under a fresh repository."""

    def _factory(files: Mapping[str, str]) -> Path:
        repo = tmp_path / "repo.git"
        hooks_dir = repo / "hooks"
        hooks_dir.mkdir(parents=True, exist_ok=True)
        for name, content in files.items():
            (hooks_dir / name).write_bytes(content.encode("utf-8"))
        return repo

    return _factory


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    """Return an in-memory filesystem holding an empty ``/r/hooks`` directory."""

    return FakeFileSystem(dirs={Path("/r/hooks")})
