# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Enumerate the catalog hooks present in a repository."""

from __future__ import annotations

import logging

from ..errors import HookReadError
from ..filesystem import HookFileSystem, LocalHookFileSystem
from .layout import DEFAULT_LAYOUT, HookLayout, RepoPath
from .models import Hook, HookNotFound
from .resolver import resolve_hook

LOGGER = logging.getLogger(__name__)


def list_hooks(
    repo_path: RepoPath,
    *,
    layout: HookLayout = DEFAULT_LAYOUT,
    filesystem: HookFileSystem | None = None,
) -> list[Hook]:
    """Return every catalog hook that resolves in ``repo_path``.

    A repository without a hooks directory has no hooks. Names that do not
    resolve are skipped; the first read failure aborts the whole listing.

    Args:
        repo_path: Repository root that owns the hooks directory.
        layout: Layout providing the hooks directory and ordered catalog.
        filesystem: Filesystem capability; defaults to the local disk.

    Returns:
        list[Hook]: Resolved hooks in catalog order, possibly empty.

    Raises:
        HookReadError: If the hooks directory or any hook cannot be read.
    """

    fs = filesystem if filesystem is not None else LocalHookFileSystem()
    hooks_path = layout.hooks_path(repo_path)
    try:
        has_hooks_dir = fs.is_dir(hooks_path)
    except OSError as exc:
        raise HookReadError(hooks_path, exc.strerror or str(exc)) from exc
    if not has_hooks_dir:
        LOGGER.debug("no hooks directory at %s", hooks_path)
        return []

    hooks: list[Hook] = []
    for name in layout.catalog:
        resolution = resolve_hook(repo_path, name, layout=layout, filesystem=fs)
        if isinstance(resolution, HookNotFound):
            continue
        hooks.append(resolution)
    LOGGER.debug("found %d of %d catalog hooks in %s", len(hooks), len(layout.catalog), hooks_path)
    return hooks


__all__ = ["list_hooks"]
