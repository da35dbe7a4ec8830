# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Hook resolution, enumeration, and construction services."""

from __future__ import annotations

from .enumerator import list_hooks
from .factory import new_hook
from .layout import DEFAULT_LAYOUT, HookLayout
from .models import Hook, HookNotFound, HookResolution
from .registry import SERVER_SIDE_HOOKS, HookName, available_hooks, is_supported, select_hooks
from .resolver import get_hook, resolve_hook

HOOK_NAMES: tuple[str, ...] = available_hooks()

__all__ = [
    "DEFAULT_LAYOUT",
    "HOOK_NAMES",
    "SERVER_SIDE_HOOKS",
    "Hook",
    "HookLayout",
    "HookName",
    "HookNotFound",
    "HookResolution",
    "available_hooks",
    "get_hook",
    "is_supported",
    "list_hooks",
    "new_hook",
    "resolve_hook",
    "select_hooks",
]
