"""Git hooks installation and management."""

from .install import HookInstaller
from .remove import HookRemover, list_hooks
from .selector import TemplateSelectionError, TemplateSelector

__all__ = [
    "HookInstaller",
    "HookRemover",
    "TemplateSelectionError",
    "TemplateSelector",
    "list_hooks",
]
