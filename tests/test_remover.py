"""Tests for hook removal and listing."""

import json

from conftest import FakePrompter
from hookpilot.core.models import Tool
from hookpilot.hooks.install import HookInstaller
from hookpilot.hooks.remove import HookRemover, list_hooks


def _write_hook(project_dir, tool, hook_type):
    target = project_dir / tool.directory / hook_type
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text("#!/bin/sh\nexit 0\n")
    return target


def test_remove_selected_hooks(store, make_config, project_dir):
    make_config(
        Tool.GIT,
        hooks=["pre-commit", "commit-msg"],
        config={"pre-commit": {"template": "lint"}, "commit-msg": {"template": "custom"}},
    )
    pre_commit = _write_hook(project_dir, Tool.GIT, "pre-commit")
    commit_msg = _write_hook(project_dir, Tool.GIT, "commit-msg")
    prompter = FakePrompter(multiselects=[["pre-commit"]])

    assert HookRemover(store, prompter).remove() is True

    assert prompter.calls[0][2] == ["pre-commit", "commit-msg"]
    assert not pre_commit.exists()
    assert commit_msg.exists()

    record = store.load()
    assert record.hooks == ["commit-msg"]
    assert list(record.config) == ["commit-msg"]


def test_remove_tolerates_missing_file(store, make_config, project_dir, capsys):
    make_config(Tool.HUSKY, hooks=["pre-commit", "pre-push"])
    pre_push = _write_hook(project_dir, Tool.HUSKY, "pre-push")

    assert HookRemover(store, FakePrompter()).remove(["pre-commit", "pre-push"]) is True

    out = capsys.readouterr().out
    assert "⚠️" in out and "apagado manualmente" in out
    assert not pre_push.exists()
    assert store.load().hooks == []
    assert store.load().config == {}


def test_remove_lefthook_only_updates_config(store, make_config):
    make_config(Tool.LEFTHOOK, hooks=["pre-commit"])

    assert HookRemover(store, FakePrompter()).remove(["pre-commit"]) is True
    assert store.load().hooks == []


def test_nothing_to_remove(store, make_config, capsys):
    make_config(Tool.GIT)
    prompter = FakePrompter()

    assert HookRemover(store, prompter).remove() is True

    assert "Nenhum hook configurado" in capsys.readouterr().out
    assert prompter.calls == []


def test_empty_selection_keeps_config(store, make_config):
    make_config(Tool.GIT, hooks=["pre-commit"])
    before = store.path.read_text()

    assert HookRemover(store, FakePrompter(multiselects=[[]])).remove() is True
    assert store.path.read_text() == before


def test_remove_requires_config(store, capsys):
    assert HookRemover(store, FakePrompter()).remove(["pre-commit"]) is False
    assert "Configuração não inicializada" in capsys.readouterr().out


def test_list_round_trip(store, catalog, make_config, capsys):
    make_config(Tool.GIT)
    HookInstaller(store, catalog, FakePrompter(selects=["lint"])).install("pre-commit")
    capsys.readouterr()

    assert list_hooks(store) == ["pre-commit"]
    assert "📃 pre-commit (lint)" in capsys.readouterr().out

    HookRemover(store, FakePrompter()).remove(["pre-commit"])
    capsys.readouterr()

    assert list_hooks(store) == []
    out = capsys.readouterr().out
    assert "pre-commit" not in out
    assert "Nenhum hook encontrado" in out


def test_list_flags_missing_script(store, make_config, capsys):
    make_config(Tool.GIT, hooks=["pre-push"], config={"pre-push": {"template": "test"}})

    list_hooks(store)

    assert "Script de pre-push ausente" in capsys.readouterr().out


def test_list_degrades_on_malformed_hooks(store, capsys):
    store.path.write_text(json.dumps({"name": "git", "hooks": "pre-commit"}))

    assert list_hooks(store) == []
    assert "Nenhum hook encontrado" in capsys.readouterr().out


def test_list_degrades_on_corrupt_file(store, capsys):
    store.path.write_text("{ not json")

    assert list_hooks(store) == []
    assert "Nenhum hook encontrado" in capsys.readouterr().out


def test_remove_rejects_path_like_hook_names(store, make_config, project_dir, capsys):
    make_config(Tool.GIT, hooks=["pre-commit", "../package.json"])
    pre_commit = _write_hook(project_dir, Tool.GIT, "pre-commit")
    manifest = project_dir / "package.json"
    manifest.write_text("{}")
    before = store.path.read_text()

    assert HookRemover(store, FakePrompter()).remove(["pre-commit", "../package.json"]) is False

    assert manifest.exists()
    assert pre_commit.exists()
    assert store.path.read_text() == before
    assert "Nome de hook inválido" in capsys.readouterr().out


def test_list_skips_file_check_for_path_like_names(store, make_config, capsys):
    make_config(Tool.GIT, hooks=["../package.json"])

    assert list_hooks(store) == ["../package.json"]
    assert "ausente" not in capsys.readouterr().out
