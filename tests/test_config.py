# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for hook layout configuration."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from repohooks.config import layout_from_mapping, load_layout
from repohooks.errors import ConfigError, UnknownHookError
from repohooks.hooks import DEFAULT_LAYOUT, SERVER_SIDE_HOOKS, HookLayout


def test_default_layout_values() -> None:
    assert DEFAULT_LAYOUT.hooks_dir == "hooks"
    assert DEFAULT_LAYOUT.sample_suffix == ".sample"
    assert DEFAULT_LAYOUT.catalog == SERVER_SIDE_HOOKS


def test_layout_paths() -> None:
    active = DEFAULT_LAYOUT.active_path("/r", "pre-receive")
    assert active == Path("/r/hooks/pre-receive")
    assert DEFAULT_LAYOUT.sample_path(active) == Path("/r/hooks/pre-receive.sample")
    assert DEFAULT_LAYOUT.hooks_path(Path("/r")) == Path("/r/hooks")


def test_layout_is_frozen() -> None:
    with pytest.raises(ValidationError):
        DEFAULT_LAYOUT.hooks_dir = "other"  # type: ignore[misc]


@pytest.mark.parametrize(
    "overrides",
    [
        {"catalog": ()},
        {"catalog": ("update", "update")},
        {"catalog": ("../escape",)},
        {"catalog": (" ",)},
        {"hooks_dir": ""},
        {"hooks_dir": "/abs/hooks"},
        {"sample_suffix": ""},
        {"unexpected": True},
    ],
)
def test_layout_rejects_invalid_values(overrides: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        HookLayout(**overrides)


def test_with_catalog_keeps_catalog_order() -> None:
    layout = DEFAULT_LAYOUT.with_catalog(["post-update", "pre-receive"])
    assert layout.catalog == ("pre-receive", "post-update")
    assert DEFAULT_LAYOUT.catalog == SERVER_SIDE_HOOKS


def test_with_catalog_rejects_unknown_names() -> None:
    with pytest.raises(UnknownHookError):
        DEFAULT_LAYOUT.with_catalog(["pre-commit"])


def test_load_layout_missing_file_returns_defaults(tmp_path: Path) -> None:
    assert load_layout(tmp_path / "absent.toml") is DEFAULT_LAYOUT


def test_load_layout_from_pyproject_section(tmp_path: Path) -> None:
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text(
        '[project]\nname = "demo"\n\n'
        '[tool.repohooks]\nhooks_dir = "custom"\ncatalog = ["update", "pre-receive"]\n',
        encoding="utf-8",
    )

    layout = load_layout(pyproject)

    assert layout.hooks_dir == "custom"
    assert layout.catalog == ("update", "pre-receive")
    assert layout.sample_suffix == ".sample"


def test_load_layout_from_top_level_document(tmp_path: Path) -> None:
    config = tmp_path / "hooks.toml"
    config.write_text('sample_suffix = ".tmpl"\n', encoding="utf-8")

    assert load_layout(config).sample_suffix == ".tmpl"


def test_load_layout_reports_invalid_toml(tmp_path: Path) -> None:
    config = tmp_path / "hooks.toml"
    config.write_text("catalog = [", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_layout(config)


def test_load_layout_reports_invalid_values(tmp_path: Path) -> None:
    config = tmp_path / "hooks.toml"
    config.write_text('catalog = ["update", "update"]\n', encoding="utf-8")

    with pytest.raises(ConfigError, match="duplicate hook name"):
        load_layout(config)


def test_load_layout_rejects_non_table_section(tmp_path: Path) -> None:
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[tool]\nrepohooks = "nope"\n', encoding="utf-8")

    with pytest.raises(ConfigError, match="must be a table"):
        load_layout(pyproject)


def test_layout_from_mapping_accepts_lists() -> None:
    layout = layout_from_mapping({"catalog": ["update"]})
    assert layout.catalog == ("update",)
