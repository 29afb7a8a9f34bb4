"""Tests for package.json setup script automation."""

from hookpilot.core.models import Tool
from hookpilot.tools.manifest import inject_setup_scripts, strip_setup_scripts


def test_inject_creates_scripts():
    manifest = inject_setup_scripts({"name": "demo"}, Tool.HUSKY)

    assert manifest["scripts"] == {
        "setup:git-hooks": "git config core.hooksPath .husky",
        "postinstall": "npm run setup:git-hooks",
    }


def test_inject_appends_to_existing_postinstall_once():
    manifest = {"scripts": {"postinstall": "node build.js"}}

    inject_setup_scripts(manifest, Tool.GIT)
    inject_setup_scripts(manifest, Tool.GIT)

    assert manifest["scripts"]["postinstall"] == "node build.js && npm run setup:git-hooks"
    assert manifest["scripts"]["setup:git-hooks"] == "git config core.hooksPath .git-hooks"


def test_strip_removes_only_injected_entries():
    manifest = {
        "scripts": {
            "test": "jest",
            "setup:git-hooks": "git config core.hooksPath .husky",
            "postinstall": "node build.js && npm run setup:git-hooks",
        }
    }

    strip_setup_scripts(manifest)

    assert manifest["scripts"] == {"test": "jest", "postinstall": "node build.js"}


def test_strip_deletes_empty_postinstall():
    manifest = inject_setup_scripts({"scripts": {"lint": "eslint ."}}, Tool.GIT)

    strip_setup_scripts(manifest)

    assert manifest["scripts"] == {"lint": "eslint ."}


def test_strip_keeps_commands_around_fragment():
    manifest = {"scripts": {"postinstall": "npm run setup:git-hooks && node a.js"}}

    strip_setup_scripts(manifest)

    assert manifest["scripts"]["postinstall"] == "node a.js"


def test_strip_without_scripts_is_noop():
    assert strip_setup_scripts({"name": "demo"}) == {"name": "demo"}
