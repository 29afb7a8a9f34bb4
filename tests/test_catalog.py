"""Tests for the template catalog loader."""

import json

import pytest

from hookpilot.core.catalog import CatalogLoader, CatalogLoadError, load_template_catalog
from hookpilot.hooks.templates import CUSTOM_TEMPLATE, TEMPLATE_BODIES


def test_default_catalog_loads(catalog):
    assert "pre-commit" in catalog
    assert "commit-msg" in catalog
    assert catalog.templates_for("commit-msg") == ["commit-msg-conventional", "custom"]


def test_default_catalog_only_references_known_templates(catalog):
    known = set(TEMPLATE_BODIES) | {CUSTOM_TEMPLATE}

    for hook_type in catalog.hook_types:
        assert set(catalog.templates_for(hook_type)) <= known


def test_unknown_hook_type_has_no_templates(catalog):
    assert catalog.templates_for("pre-deploy") == []
    assert not catalog.is_compatible("pre-deploy", "lint")
    assert not catalog.is_compatible("commit-msg", "lint")


@pytest.mark.parametrize("data", [
    {},
    [],
    {"pre-commit": []},
    {"pre-commit": "lint"},
    {"pre-commit": ["lint", "lint"]},
    {"pre-commit": ["lint", ""]},
])
def test_loader_rejects_malformed_catalog(data):
    with pytest.raises(CatalogLoadError):
        CatalogLoader().load_from_dict(data)


def test_loader_rejects_missing_file(tmp_path):
    with pytest.raises(CatalogLoadError, match="não encontrado"):
        load_template_catalog(tmp_path / "missing.json")


def test_loader_rejects_invalid_json(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text("{not json")

    with pytest.raises(CatalogLoadError, match="JSON"):
        load_template_catalog(path)


def test_loader_preserves_order(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"pre-push": ["test", "custom"], "pre-commit": ["custom"]}))

    catalog = load_template_catalog(path)

    assert catalog.hook_types == ["pre-push", "pre-commit"]
    assert catalog.templates_for("pre-push") == ["test", "custom"]
