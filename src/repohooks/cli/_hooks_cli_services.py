# SPDX-License-Identifier: MIT
"""Helper services used by the hooks CLI commands."""

from __future__ import annotations

import json
from collections.abc import Sequence

from rich import box
from rich.table import Table

from ..config import load_layout
from ..errors import ConfigError, HookNotFoundError, HookReadError, UnknownHookError
from ..hooks import DEFAULT_LAYOUT, Hook, HookLayout, get_hook, list_hooks
from ._hooks_cli_models import HookCLIOptions, ListCLIOptions
from .shared import CLIError, CLILogger

USAGE_EXIT_CODE = 2


def load_cli_layout(options: HookCLIOptions, *, logger: CLILogger) -> HookLayout:
    """Return the layout configured for the CLI invocation.

    Raises:
        CLIError: Raised when the configuration file is invalid.
    """

    if options.config is None:
        return DEFAULT_LAYOUT
    try:
        return load_layout(options.config)
    except ConfigError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc)) from exc


def collect_hooks(options: ListCLIOptions, *, logger: CLILogger) -> list[Hook]:
    """Return the hooks requested by ``repohooks list``.

    Args:
        options: Normalised list options.
        logger: Logger used to emit user-facing messages.

    Returns:
        list[Hook]: Hooks found in the repository in catalog order.

    Raises:
        CLIError: Raised for unknown hook names, invalid configuration, or
            unreadable hook files.
    """

    layout = load_cli_layout(options.common, logger=logger)
    try:
        layout = layout.with_catalog(options.hooks or None)
    except UnknownHookError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc), exit_code=USAGE_EXIT_CODE) from exc
    try:
        return list_hooks(options.common.root, layout=layout)
    except HookReadError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc)) from exc


def fetch_hook(options: HookCLIOptions, name: str, *, logger: CLILogger) -> Hook:
    """Return the hook ``name`` for ``repohooks show``.

    Raises:
        CLIError: Raised when the hook is missing or cannot be read.
    """

    layout = load_cli_layout(options, logger=logger)
    try:
        return get_hook(options.root, name, layout=layout)
    except HookNotFoundError as exc:
        logger.fail(f"No active or sample hook named {name!r} in {exc.missing.path.parent}")
        raise CLIError(str(exc)) from exc
    except HookReadError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc)) from exc


def emit_hook_table(hooks: Sequence[Hook], options: ListCLIOptions, *, logger: CLILogger) -> None:
    """Render ``hooks`` as a Rich table, or an info line when none exist."""

    if not hooks:
        logger.info(f"No hooks found in {options.common.root}")
        return
    table = Table(title="Repository Hooks", box=box.SIMPLE, show_header=True)
    table.add_column("Hook")
    table.add_column("State")
    table.add_column("Path", overflow="fold")
    for hook in hooks:
        table.add_row(hook.name, hook.state, str(hook.path))
    logger.console.print(table)
    logger.ok(f"Found {len(hooks)} hook(s) in {options.common.root}")


def emit_hook_json(hooks: Sequence[Hook], *, logger: CLILogger) -> None:
    """Write ``hooks`` to stdout as a JSON array."""

    logger.echo(json.dumps([hook.to_dict() for hook in hooks], indent=2))


__all__ = [
    "USAGE_EXIT_CODE",
    "collect_hooks",
    "emit_hook_json",
    "emit_hook_table",
    "fetch_hook",
    "load_cli_layout",
]
