"""Pytest configuration and fixtures."""

import json

import pytest

from hookpilot.core.catalog import load_template_catalog
from hookpilot.core.config_store import ConfigStore
from hookpilot.core.models import HooksConfig, Tool
from hookpilot.tools.commands import CommandError


class FakePrompter:
    """Prompter com respostas roteirizadas; registra cada pergunta."""

    def __init__(self, selects=None, multiselects=None, confirms=None, texts=None):
        self.selects = list(selects or [])
        self.multiselects = list(multiselects or [])
        self.confirms = list(confirms or [])
        self.texts = list(texts or [])
        self.calls = []

    def select(self, message, choices, labels=None):
        self.calls.append(("select", message, list(choices)))
        answer = self.selects.pop(0)
        assert answer in choices, f"{answer!r} não é uma opção: {list(choices)}"
        return answer

    def multiselect(self, message, choices):
        self.calls.append(("multiselect", message, list(choices)))
        return self.multiselects.pop(0)

    def confirm(self, message, default=None):
        self.calls.append(("confirm", message, None))
        return self.confirms.pop(0)

    def text(self, message, default=None):
        self.calls.append(("text", message, default))
        if self.texts:
            return self.texts.pop(0)
        assert default is not None, f"Sem resposta para: {message}"
        return default


class FakeRunner:
    """Registra comandos em vez de executá-los."""

    def __init__(self, failures=None):
        self.commands = []
        self.failures = failures or {}

    def run(self, cmd):
        self.commands.append(list(cmd))
        key = tuple(cmd)
        if key in self.failures:
            raise CommandError(list(cmd), self.failures[key])
        return ""


@pytest.fixture
def project_dir(tmp_path):
    """Diretório de projeto vazio."""
    project = tmp_path / "project"
    project.mkdir()
    return project


@pytest.fixture
def catalog():
    return load_template_catalog()


@pytest.fixture
def store(project_dir):
    return ConfigStore(project_dir)


@pytest.fixture
def make_config(store):
    """Grava um hooks-config.json para a ferramenta informada."""

    def _make(tool=Tool.GIT, hooks=None, config=None):
        record = HooksConfig(
            name=tool,
            directory=tool.directory,
            hooks=list(hooks or []),
            config=dict(config or {}),
        )
        store.save(record)
        return record

    return _make


@pytest.fixture
def make_manifest(project_dir):
    """Grava um package.json com os scripts informados."""

    def _make(scripts=None):
        path = project_dir / "package.json"
        data = {"name": "demo", "version": "1.0.0"}
        if scripts is not None:
            data["scripts"] = scripts
        path.write_text(json.dumps(data, indent=2))
        return path

    return _make


@pytest.fixture
def temp_git_repo(tmp_path):
    """Cria repositório git temporário."""
    import subprocess

    repo_dir = tmp_path / "test_repo"
    repo_dir.mkdir()

    subprocess.run(["git", "init"], cwd=repo_dir, check=True, capture_output=True)
    subprocess.run(
        ["git", "config", "user.email", "test@example.com"],
        cwd=repo_dir,
        check=True
    )
    subprocess.run(
        ["git", "config", "user.name", "Test User"],
        cwd=repo_dir,
        check=True
    )

    return repo_dir
