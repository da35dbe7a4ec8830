# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application exposing hook lookup and enumeration."""

from __future__ import annotations

from pathlib import Path

import typer

from ..hooks import is_supported, new_hook
from ..logging import section
from ._hooks_cli_models import (
    CONFIG_OPTION,
    EMOJI_OPTION,
    HOOK_FILTER_OPTION,
    HOOK_NAME_ARGUMENT,
    JSON_OPTION,
    ROOT_OPTION,
    HookCLIOptions,
    ListCLIOptions,
)
from ._hooks_cli_services import (
    collect_hooks,
    emit_hook_json,
    emit_hook_table,
    fetch_hook,
    load_cli_layout,
)
from .shared import CLIError, build_cli_logger

app = typer.Typer(
    name="repohooks",
    help="Inspect server-side hooks stored in a repository.",
    no_args_is_help=True,
    add_completion=False,
)


@app.command("list")
def list_command(
    root: ROOT_OPTION = Path("."),
    hook: HOOK_FILTER_OPTION = None,
    config: CONFIG_OPTION = None,
    as_json: JSON_OPTION = False,
    emoji: EMOJI_OPTION = True,
) -> None:
    """List the catalog hooks present in the repository, in catalog order."""

    options = ListCLIOptions(
        common=HookCLIOptions.from_cli(root, config, emoji=emoji),
        hooks=tuple(hook or ()),
        as_json=as_json,
    )
    logger = build_cli_logger(emoji=options.common.emoji)
    try:
        hooks = collect_hooks(options, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    if options.as_json:
        emit_hook_json(hooks, logger=logger)
    else:
        emit_hook_table(hooks, options, logger=logger)


@app.command("show")
def show_command(
    name: HOOK_NAME_ARGUMENT,
    root: ROOT_OPTION = Path("."),
    config: CONFIG_OPTION = None,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Print the content of an active hook, falling back to its sample."""

    options = HookCLIOptions.from_cli(root, config, emoji=emoji)
    logger = build_cli_logger(emoji=options.emoji)
    try:
        hook = fetch_hook(options, name, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    if hook.is_sample:
        logger.warn(f"{name} is not active; showing its sample template")
    section(f"{hook.name} ({hook.state})", use_color=False)
    # Undecodable bytes were read with surrogateescape; write them back unchanged.
    payload = hook.content.encode("utf-8", errors="surrogateescape")
    logger.echo(payload, newline=not payload.endswith(b"\n"))


@app.command("path")
def path_command(
    name: HOOK_NAME_ARGUMENT,
    root: ROOT_OPTION = Path("."),
    config: CONFIG_OPTION = None,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Print where the active hook for ``name`` is, or would be, written."""

    options = HookCLIOptions.from_cli(root, config, emoji=emoji)
    logger = build_cli_logger(emoji=options.emoji)
    try:
        layout = load_cli_layout(options, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    if not is_supported(name, layout.catalog):
        logger.warn(f"{name} is not a recognised server-side hook")
    logger.echo(str(new_hook(options.root, name, layout=layout).path))


def main() -> None:
    """Run the ``repohooks`` console script."""

    app()


__all__ = ["app", "main"]
