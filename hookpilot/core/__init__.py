"""Core modules for HOOKPILOT."""

from .catalog import CatalogLoadError, load_template_catalog
from .config_store import ConfigStore
from .models import (
    ConfigError,
    GeneratedTemplate,
    HookPilotError,
    HooksConfig,
    TemplateCatalog,
    Tool,
    hook_path,
)
from .prompts import Prompter
from .validator import validate_template

__all__ = [
    # Store
    "ConfigStore",
    # Models
    "ConfigError",
    "GeneratedTemplate",
    "HookPilotError",
    "HooksConfig",
    "TemplateCatalog",
    "Tool",
    "hook_path",
    # Catalog
    "CatalogLoadError",
    "load_template_catalog",
    # Collaborators
    "Prompter",
    "validate_template",
]
