# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Read-only filesystem capability consumed by hook resolution."""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Protocol, runtime_checkable

_ABSENT_ERRORS: tuple[type[Exception], ...] = (FileNotFoundError, NotADirectoryError, ValueError)


@runtime_checkable
class HookFileSystem(Protocol):
    """Answer existence checks and read whole files for hook resolution."""

    def is_file(self, path: Path) -> bool:
        """Return ``True`` when ``path`` is a regular file.

        Implementations return ``False`` when the path does not exist and
        raise :class:`OSError` for any other failure.
        """

        raise NotImplementedError

    def is_dir(self, path: Path) -> bool:
        """Return ``True`` when ``path`` is a directory."""

        raise NotImplementedError

    def read_bytes(self, path: Path) -> bytes:
        """Return the full contents of ``path``."""

        raise NotImplementedError


class LocalHookFileSystem:
    """Inspect the local disk with ``os.stat`` and surface unexpected faults."""

    def is_file(self, path: Path) -> bool:
        mode = _stat_mode(path)
        return mode is not None and stat.S_ISREG(mode)

    def is_dir(self, path: Path) -> bool:
        mode = _stat_mode(path)
        return mode is not None and stat.S_ISDIR(mode)

    def read_bytes(self, path: Path) -> bytes:
        return path.read_bytes()


def _stat_mode(path: Path) -> int | None:
    """Return the ``st_mode`` of ``path`` or ``None`` when it does not exist.

    A path the OS cannot represent, such as one holding a null byte, cannot
    exist and is treated as absent.

    Raises:
        OSError: For failures other than the path being absent.
    """

    try:
        return os.stat(path).st_mode
    except _ABSENT_ERRORS:
        return None


__all__ = ["HookFileSystem", "LocalHookFileSystem"]
