# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Load hook layout configuration from TOML documents."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from .errors import ConfigError
from .hooks.layout import DEFAULT_LAYOUT, HookLayout

LOGGER = logging.getLogger(__name__)

TOOL_SECTION: Final[str] = "repohooks"


def load_layout(path: Path) -> HookLayout:
    """Return the hook layout declared in the TOML document at ``path``.

    The document may either hold the settings at its top level or nest them
    under ``[tool.repohooks]`` as a ``pyproject.toml`` would.

    Args:
        path: TOML file to read.

    Returns:
        HookLayout: Validated layout, or the default layout when ``path`` is missing.

    Raises:
        ConfigError: If the document cannot be parsed or holds invalid values.
    """

    if not path.exists():
        LOGGER.debug("layout config %s not found; using defaults", path)
        return DEFAULT_LAYOUT
    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration {path}: {exc}") from exc
    return layout_from_mapping(_extract_section(document), source=str(path))


def layout_from_mapping(data: Mapping[str, Any], *, source: str = "<mapping>") -> HookLayout:
    """Return a validated layout built from ``data``.

    Args:
        data: Raw configuration values keyed by layout field name.
        source: Description of where ``data`` came from, used in error messages.

    Returns:
        HookLayout: Validated layout instance.

    Raises:
        ConfigError: If ``data`` contains unknown keys or invalid values.
    """

    payload = dict(data)
    catalog = payload.get("catalog")
    if isinstance(catalog, list):
        payload["catalog"] = tuple(catalog)
    try:
        return HookLayout.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid hook configuration in {source}: {exc}") from exc


def _extract_section(document: Mapping[str, Any]) -> Mapping[str, Any]:
    tool = document.get("tool")
    if isinstance(tool, Mapping) and TOOL_SECTION in tool:
        section = tool[TOOL_SECTION]
        if not isinstance(section, Mapping):
            raise ConfigError(f"[tool.{TOOL_SECTION}] must be a table")
        return section
    return {key: value for key, value in document.items() if key != "tool"}


__all__ = ["TOOL_SECTION", "layout_from_mapping", "load_layout"]
