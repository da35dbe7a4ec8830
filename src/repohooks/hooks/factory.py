# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Construct unpersisted hook handles."""

from __future__ import annotations

from .layout import DEFAULT_LAYOUT, HookLayout, RepoPath
from .models import Hook


def new_hook(repo_path: RepoPath, name: str, *, layout: HookLayout = DEFAULT_LAYOUT) -> Hook:
    """Return an empty hook handle pointing at the active location for ``name``.

    No filesystem access happens here; the returned hook stays inert until a
    writer persists its content to ``hook.path``.

    Args:
        repo_path: Repository root that owns the hooks directory.
        name: Hook name, conventionally a catalog member.
        layout: Layout describing where hooks are stored.

    Returns:
        Hook: Handle with empty content and ``is_sample`` cleared.
    """

    return Hook(name=name, path=layout.active_path(repo_path, name))


__all__ = ["new_hook"]
