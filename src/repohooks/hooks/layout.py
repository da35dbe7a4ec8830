# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Immutable description of where hooks live inside a repository."""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .registry import SERVER_SIDE_HOOKS, select_hooks

DEFAULT_HOOKS_DIR: Final[str] = "hooks"
SAMPLE_SUFFIX: Final[str] = ".sample"

RepoPath = str | PathLike[str]


class HookLayout(BaseModel):
    """Describe the hooks directory, sample suffix, and ordered hook catalog.

    Attributes:
        hooks_dir: Directory, relative to the repository root, holding hook files.
        sample_suffix: Suffix appended to an active hook path to locate its template.
        catalog: Ordered hook names recognised during enumeration.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    hooks_dir: str = DEFAULT_HOOKS_DIR
    sample_suffix: str = SAMPLE_SUFFIX
    catalog: tuple[str, ...] = Field(default=SERVER_SIDE_HOOKS)

    @field_validator("hooks_dir")
    @classmethod
    def _validate_hooks_dir(cls, value: str) -> str:
        """Return ``value`` when it names a relative directory."""

        if not value.strip():
            raise ValueError("hooks_dir must not be blank")
        if PurePosixPath(value).is_absolute() or PureWindowsPath(value).is_absolute():
            raise ValueError("hooks_dir must be relative to the repository root")
        return value

    @field_validator("sample_suffix")
    @classmethod
    def _validate_sample_suffix(cls, value: str) -> str:
        """Return ``value`` when it is a usable file suffix."""

        if not value.strip():
            raise ValueError("sample_suffix must not be blank")
        if "/" in value or "\\" in value:
            raise ValueError("sample_suffix must not contain path separators")
        return value

    @field_validator("catalog")
    @classmethod
    def _validate_catalog(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Return ``value`` when every hook name is unique and path-safe."""

        if not value:
            raise ValueError("catalog must contain at least one hook name")
        seen: set[str] = set()
        for name in value:
            if not name.strip():
                raise ValueError("hook names must not be blank")
            if "/" in name or "\\" in name or name in {".", ".."}:
                raise ValueError(f"hook name {name!r} must not contain path separators")
            if name in seen:
                raise ValueError(f"duplicate hook name {name!r} in catalog")
            seen.add(name)
        return value

    def hooks_path(self, repo_path: RepoPath) -> Path:
        """Return the hooks directory for ``repo_path``."""

        return Path(repo_path) / self.hooks_dir

    def active_path(self, repo_path: RepoPath, name: str) -> Path:
        """Return the canonical active hook location for ``name``."""

        return self.hooks_path(repo_path) / name

    def sample_path(self, active_path: Path) -> Path:
        """Return the sample template location paired with ``active_path``."""

        return active_path.with_name(active_path.name + self.sample_suffix)

    def with_catalog(self, names: Iterable[str] | None) -> HookLayout:
        """Return a copy restricted to ``names``, preserving catalog order.

        Args:
            names: Hook names to keep. ``None`` keeps the full catalog.

        Returns:
            HookLayout: Layout whose catalog only contains the selected names.

        Raises:
            UnknownHookError: If a name is not part of the current catalog.
        """

        return self.model_copy(update={"catalog": select_hooks(names, self.catalog)})


DEFAULT_LAYOUT: Final[HookLayout] = HookLayout()

__all__ = [
    "DEFAULT_HOOKS_DIR",
    "DEFAULT_LAYOUT",
    "HookLayout",
    "RepoPath",
    "SAMPLE_SUFFIX",
]
