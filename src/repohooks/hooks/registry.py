# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Registry helpers describing recognised server-side git hooks."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Final

from ..errors import UnknownHookError


class HookName(str, Enum):
    """Enumerate the server-side hook names understood by default."""

    PRE_RECEIVE = "pre-receive"
    UPDATE = "update"
    POST_RECEIVE = "post-receive"
    POST_UPDATE = "post-update"


SERVER_SIDE_HOOKS: Final[tuple[str, ...]] = tuple(member.value for member in HookName)


def available_hooks() -> tuple[str, ...]:
    """Return the default ordered catalog of server-side hook names.

    Returns:
        tuple[str, ...]: Supported hook identifiers in enumeration order.
    """

    return SERVER_SIDE_HOOKS


def is_supported(name: str, catalog: Iterable[str] = SERVER_SIDE_HOOKS) -> bool:
    """Return whether ``name`` identifies a hook in ``catalog``.

    Args:
        name: Hook name supplied by the caller.
        catalog: Ordered catalog to check against.

    Returns:
        bool: ``True`` when the hook is recognised by the catalog.
    """

    return name in tuple(catalog)


def select_hooks(
    names: Iterable[str] | None,
    catalog: Iterable[str] = SERVER_SIDE_HOOKS,
) -> tuple[str, ...]:
    """Return the requested hook names ordered consistently with ``catalog``.

    Args:
        names: Optional iterable of hook names provided by the caller. ``None``
            or an empty iterable selects the whole catalog.
        catalog: Ordered catalog that defines membership and order.

    Returns:
        tuple[str, ...]: Requested names without duplicates, in catalog order.

    Raises:
        UnknownHookError: If a requested name is not part of ``catalog``.
    """

    ordered_catalog = tuple(catalog)
    if names is None:
        return ordered_catalog
    requested: set[str] = set()
    for name in names:
        if name not in ordered_catalog:
            known = ", ".join(ordered_catalog)
            raise UnknownHookError(f"Unknown hook {name!r}; expected one of: {known}")
        requested.add(name)
    if not requested:
        return ordered_catalog
    return tuple(name for name in ordered_catalog if name in requested)


__all__ = [
    "HookName",
    "SERVER_SIDE_HOOKS",
    "available_hooks",
    "is_supported",
    "select_hooks",
]
