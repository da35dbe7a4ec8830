# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised by hook resolution and enumeration."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .hooks.models import HookNotFound


class HookError(RuntimeError):
    """Base class for hook related failures."""


class HookReadError(HookError):
    """Raised when a hook file or directory cannot be inspected or read."""

    def __init__(self, path: Path, reason: str) -> None:
        """Initialise the error with the offending path.

        Args:
            path: Filesystem location that failed to stat or read.
            reason: Description of the underlying operating system failure.
        """

        super().__init__(f"Unable to read hook at {path}: {reason}")
        self.path = path


class HookNotFoundError(HookError, LookupError):
    """Raised when neither an active nor a sample hook exists for a name."""

    def __init__(self, missing: HookNotFound) -> None:
        """Initialise the error from the resolver's not-found result.

        Args:
            missing: Result describing the probed active and sample locations.
        """

        super().__init__(f"Hook {missing.name!r} not found at {missing.path}")
        self.missing = missing

    @property
    def name(self) -> str:
        """Return the hook name that failed to resolve."""

        return self.missing.name


class UnknownHookError(HookError, ValueError):
    """Raised when a hook name is not part of the configured catalog."""


class ConfigError(HookError):
    """Raised when hook layout configuration is invalid."""


__all__ = [
    "ConfigError",
    "HookError",
    "HookNotFoundError",
    "HookReadError",
    "UnknownHookError",
]
