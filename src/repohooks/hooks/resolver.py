# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve a hook name to its active script or sample template."""

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import HookNotFoundError, HookReadError
from ..filesystem import HookFileSystem, LocalHookFileSystem
from .layout import DEFAULT_LAYOUT, HookLayout, RepoPath
from .models import Hook, HookNotFound, HookResolution

LOGGER = logging.getLogger(__name__)

_ENCODING = "utf-8"


def resolve_hook(
    repo_path: RepoPath,
    name: str,
    *,
    layout: HookLayout = DEFAULT_LAYOUT,
    filesystem: HookFileSystem | None = None,
) -> HookResolution:
    """Return the hook stored for ``name`` or a :class:`HookNotFound` marker.

    An active hook always wins over its sample template. Both outcomes report
    the active location as ``path`` so callers know where activation writes.

    Args:
        repo_path: Repository root that owns the hooks directory.
        name: Hook name to resolve.
        layout: Layout describing where hooks are stored.
        filesystem: Filesystem capability; defaults to the local disk.

    Returns:
        HookResolution: The resolved :class:`Hook`, or :class:`HookNotFound`
        when neither file exists.

    Raises:
        HookReadError: If an existence check or read fails for a reason other
            than the file being absent.
    """

    fs = filesystem if filesystem is not None else LocalHookFileSystem()
    active_path = layout.active_path(repo_path, name)
    if _is_file(fs, active_path):
        content = _read_text(fs, active_path)
        LOGGER.debug("resolved active hook %s at %s", name, active_path)
        return Hook(name=name, path=active_path, content=content, is_sample=False)

    sample_path = layout.sample_path(active_path)
    if _is_file(fs, sample_path):
        content = _read_text(fs, sample_path)
        LOGGER.debug("resolved sample hook %s at %s", name, sample_path)
        return Hook(name=name, path=active_path, content=content, is_sample=True)

    LOGGER.debug("hook %s not found under %s", name, active_path.parent)
    return HookNotFound(name=name, path=active_path, sample_path=sample_path)


def get_hook(
    repo_path: RepoPath,
    name: str,
    *,
    layout: HookLayout = DEFAULT_LAYOUT,
    filesystem: HookFileSystem | None = None,
) -> Hook:
    """Return the hook for ``name``, raising when it is absent.

    Args:
        repo_path: Repository root that owns the hooks directory.
        name: Hook name to resolve.
        layout: Layout describing where hooks are stored.
        filesystem: Filesystem capability; defaults to the local disk.

    Returns:
        Hook: Resolved active or sample hook.

    Raises:
        HookNotFoundError: If neither the active nor the sample file exists.
        HookReadError: If the filesystem reports any other failure.
    """

    resolution = resolve_hook(repo_path, name, layout=layout, filesystem=filesystem)
    if isinstance(resolution, HookNotFound):
        raise HookNotFoundError(resolution)
    return resolution


def _is_file(fs: HookFileSystem, path: Path) -> bool:
    try:
        return fs.is_file(path)
    except OSError as exc:
        raise HookReadError(path, exc.strerror or str(exc)) from exc


def _read_text(fs: HookFileSystem, path: Path) -> str:
    # A file removed after the existence check surfaces here as a read error.
    try:
        payload = fs.read_bytes(path)
    except OSError as exc:
        raise HookReadError(path, exc.strerror or str(exc)) from exc
    return payload.decode(_ENCODING, errors="surrogateescape")


__all__ = ["get_hook", "resolve_hook"]
