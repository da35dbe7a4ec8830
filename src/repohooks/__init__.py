# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve and enumerate server-side hooks stored in a repository."""

from __future__ import annotations

from importlib import metadata

from .errors import ConfigError, HookError, HookNotFoundError, HookReadError, UnknownHookError
from .filesystem import HookFileSystem, LocalHookFileSystem
from .hooks import (
    DEFAULT_LAYOUT,
    SERVER_SIDE_HOOKS,
    Hook,
    HookLayout,
    HookName,
    HookNotFound,
    HookResolution,
    get_hook,
    list_hooks,
    new_hook,
    resolve_hook,
)

__all__ = [
    "ConfigError",
    "DEFAULT_LAYOUT",
    "SERVER_SIDE_HOOKS",
    "Hook",
    "HookError",
    "HookFileSystem",
    "HookLayout",
    "HookName",
    "HookNotFound",
    "HookNotFoundError",
    "HookReadError",
    "HookResolution",
    "LocalHookFileSystem",
    "UnknownHookError",
    "__version__",
    "get_hook",
    "list_hooks",
    "new_hook",
    "resolve_hook",
]

try:
    __version__ = metadata.version("repohooks")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
