"""Configuration files and constants for HOOKPILOT."""

from pathlib import Path

CONFIG_DIR = Path(__file__).parent
TEMPLATE_CATALOG_FILE = CONFIG_DIR / "hook_templates.json"

CONFIG_FILE_NAME = "hooks-config.json"
PACKAGE_MANIFEST_NAME = "package.json"
LEFTHOOK_CONFIG_NAME = "lefthook.yml"
SETUP_SCRIPT_NAME = "setup:git-hooks"

__all__ = [
    "CONFIG_DIR",
    "TEMPLATE_CATALOG_FILE",
    "CONFIG_FILE_NAME",
    "PACKAGE_MANIFEST_NAME",
    "LEFTHOOK_CONFIG_NAME",
    "SETUP_SCRIPT_NAME",
]
