# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for hook construction and the hook catalog registry."""

from __future__ import annotations

from pathlib import Path

import pytest

import repohooks
from repohooks.errors import UnknownHookError
from repohooks.hooks import (
    HOOK_NAMES,
    SERVER_SIDE_HOOKS,
    Hook,
    HookLayout,
    HookName,
    available_hooks,
    is_supported,
    new_hook,
    select_hooks,
)


def test_new_hook_does_not_touch_filesystem(tmp_path: Path) -> None:
    missing_repo = tmp_path / "does-not-exist"

    hook = new_hook(missing_repo, "pre-receive")

    assert hook == Hook(name="pre-receive", path=missing_repo / "hooks" / "pre-receive")
    assert hook.content == ""
    assert hook.is_sample is False
    assert not missing_repo.exists()


def test_new_hook_accepts_names_outside_catalog() -> None:
    hook = new_hook("/r", "pre-commit")
    assert hook.path == Path("/r/hooks/pre-commit")


def test_new_hook_honours_layout() -> None:
    layout = HookLayout(hooks_dir="custom_hooks")
    hook = new_hook("/r", "update", layout=layout)
    assert hook.path == Path("/r/custom_hooks/update")


def test_hook_is_immutable_snapshot() -> None:
    hook = new_hook("/r", "update")
    with pytest.raises(AttributeError):
        hook.content = "#!/bin/sh\n"  # type: ignore[misc]


def test_hook_to_dict_is_json_friendly() -> None:
    hook = Hook(name="update", path=Path("/r/hooks/update"), content="X", is_sample=True)
    assert hook.to_dict() == {
        "name": "update",
        "path": "/r/hooks/update",
        "is_sample": True,
        "content": "X",
    }
    assert hook.state == "sample"


def test_default_catalog_order() -> None:
    assert SERVER_SIDE_HOOKS == ("pre-receive", "update", "post-receive", "post-update")
    assert available_hooks() == SERVER_SIDE_HOOKS
    assert HOOK_NAMES == SERVER_SIDE_HOOKS
    assert HookName.POST_RECEIVE == "post-receive"


def test_is_supported_checks_catalog() -> None:
    assert is_supported("update")
    assert not is_supported("pre-commit")
    assert is_supported("pre-commit", catalog=("pre-commit",))


def test_select_hooks_orders_by_catalog_and_deduplicates() -> None:
    assert select_hooks(["post-receive", "pre-receive", "post-receive"]) == (
        "pre-receive",
        "post-receive",
    )


def test_select_hooks_defaults_to_full_catalog() -> None:
    assert select_hooks(None) == SERVER_SIDE_HOOKS
    assert select_hooks([]) == SERVER_SIDE_HOOKS


def test_select_hooks_rejects_unknown_names() -> None:
    with pytest.raises(UnknownHookError, match="pre-commit"):
        select_hooks(["pre-commit"])


def test_package_exports_core_operations() -> None:
    assert repohooks.new_hook is new_hook
    assert callable(repohooks.resolve_hook)
    assert callable(repohooks.list_hooks)
    assert isinstance(repohooks.__version__, str)
