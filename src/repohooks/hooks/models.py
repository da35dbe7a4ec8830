# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Dataclasses describing resolved hooks and resolution outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Hook:
    """Snapshot of a single hook script.

    Attributes:
        name: Hook name drawn from the catalog.
        path: Active hook location, also used as the write target for new hooks.
        content: Script text as resolved; empty for a freshly constructed hook.
        is_sample: ``True`` when ``content`` came from the sample template.
    """

    name: str
    path: Path
    content: str = ""
    is_sample: bool = False

    @property
    def state(self) -> str:
        """Return ``"sample"`` or ``"active"`` for display purposes."""

        return "sample" if self.is_sample else "active"

    def to_dict(self) -> dict[str, str | bool]:
        """Return a JSON-serialisable mapping of the hook fields."""

        return {
            "name": self.name,
            "path": str(self.path),
            "is_sample": self.is_sample,
            "content": self.content,
        }


@dataclass(frozen=True, slots=True)
class HookNotFound:
    """Resolution outcome when neither the active nor sample file exists."""

    name: str
    path: Path
    sample_path: Path


HookResolution: TypeAlias = Hook | HookNotFound


__all__ = ["Hook", "HookNotFound", "HookResolution"]
