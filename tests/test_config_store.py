"""Tests for the configuration store."""

import json
import os
import stat

import pytest

from hookpilot.core.models import ConfigError, HooksConfig, Tool


def test_exists(store, make_config):
    assert not store.exists()

    make_config()

    assert store.exists()


def test_save_writes_complete_record_with_two_space_indent(store):
    record = HooksConfig.for_tool(Tool.HUSKY)
    store.add_hook(record, "pre-commit", {"template": "lint", "command": "npm run lint"})

    store.save(record)

    text = store.path.read_text()
    assert text.startswith('{\n  "name": "husky",')
    assert json.loads(text) == {
        "name": "husky",
        "directory": ".husky",
        "hooks": ["pre-commit"],
        "config": {"pre-commit": {"template": "lint", "command": "npm run lint"}},
    }


def test_save_leaves_no_temporary_files(store, project_dir):
    store.save(HooksConfig.for_tool(Tool.GIT))
    store.save(HooksConfig.for_tool(Tool.GIT))

    assert [p.name for p in project_dir.iterdir()] == ["hooks-config.json"]


def test_load_normalizes_tool_casing(store):
    store.path.write_text(json.dumps({
        "name": "Lefthook",
        "directory": ".lefthook",
        "hooks": [],
        "config": {},
    }))

    record = store.load()
    store.save(record)

    assert record.name is Tool.LEFTHOOK
    assert json.loads(store.path.read_text())["name"] == "lefthook"


def test_load_fails_loudly_on_corrupt_file(store):
    store.path.write_text('{"name": "git", "hooks": [')

    with pytest.raises(ConfigError, match="corrompido"):
        store.load()


def test_load_fails_when_missing(store):
    with pytest.raises(ConfigError):
        store.load()


def test_add_hook_is_idempotent_on_list(store):
    record = HooksConfig.for_tool(Tool.GIT)

    assert store.add_hook(record, "pre-commit", {"template": "lint"}) is True
    assert store.add_hook(record, "pre-commit", {"template": "test"}) is False

    assert record.hooks == ["pre-commit"]
    assert record.config["pre-commit"] == {"template": "test"}


def test_remove_hooks_strips_list_and_config(store):
    record = HooksConfig.for_tool(Tool.GIT)
    store.add_hook(record, "pre-commit", {"template": "lint"})
    store.add_hook(record, "commit-msg", {"template": "commit-msg-conventional"})
    store.add_hook(record, "pre-push", {"template": "test"})

    removed = store.remove_hooks(record, ["pre-commit", "pre-push", "post-merge"])

    assert removed == ["pre-commit", "pre-push"]
    assert record.hooks == ["commit-msg"]
    assert list(record.config) == ["commit-msg"]


def test_remove_missing_hook_is_noop(store):
    record = HooksConfig.for_tool(Tool.GIT)
    store.add_hook(record, "pre-commit", {"template": "lint"})

    assert store.remove_hooks(record, ["commit-msg"]) == []
    assert record.hooks == ["pre-commit"]


def test_delete(store, make_config):
    make_config()

    assert store.delete() is True
    assert not store.exists()
    assert store.delete() is False


def test_save_uses_umask_mode_for_new_file(store):
    umask = os.umask(0o022)
    try:
        store.save(HooksConfig.for_tool(Tool.GIT))
    finally:
        os.umask(umask)

    assert stat.S_IMODE(store.path.stat().st_mode) == 0o644


def test_save_keeps_existing_mode(store, make_config):
    make_config(Tool.GIT)
    store.path.chmod(0o664)

    record = store.load()
    store.add_hook(record, "pre-commit", {"template": "lint"})
    store.save(record)

    assert stat.S_IMODE(store.path.stat().st_mode) == 0o664
