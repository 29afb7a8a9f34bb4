"""Hook tool lifecycle: init, restore and uninstall."""

from .commands import CommandError, CommandRunner
from .setup import ToolManager

__all__ = [
    "CommandError",
    "CommandRunner",
    "ToolManager",
]
