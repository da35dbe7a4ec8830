# SPDX-License-Identifier: MIT
"""Data structures for the hooks CLI commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

ROOT_OPTION = Annotated[
    Path,
    typer.Option("--root", "-r", help="Repository root holding the hooks directory."),
]
CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="TOML file overriding the hook layout."),
]
HOOK_FILTER_OPTION = Annotated[
    list[str] | None,
    typer.Option("--hook", help="Restrict the listing to this hook (repeatable)."),
]
JSON_OPTION = Annotated[
    bool,
    typer.Option("--json", help="Emit hooks as a JSON array."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
HOOK_NAME_ARGUMENT = Annotated[str, typer.Argument(help="Hook name, e.g. pre-receive.")]


@dataclass(slots=True)
class HookCLIOptions:
    """Capture CLI options shared by the hook commands."""

    root: Path
    config: Path | None
    emoji: bool

    @classmethod
    def from_cli(cls, root: Path, config: Path | None, *, emoji: bool) -> HookCLIOptions:
        """Return options parsed from CLI arguments."""

        return cls(
            root=root.expanduser().resolve(),
            config=config.expanduser().resolve() if config is not None else None,
            emoji=emoji,
        )


@dataclass(slots=True)
class ListCLIOptions:
    """Capture options specific to ``repohooks list``."""

    common: HookCLIOptions
    hooks: tuple[str, ...]
    as_json: bool


__all__ = [
    "CONFIG_OPTION",
    "EMOJI_OPTION",
    "HOOK_FILTER_OPTION",
    "HOOK_NAME_ARGUMENT",
    "HookCLIOptions",
    "JSON_OPTION",
    "ListCLIOptions",
    "ROOT_OPTION",
]
