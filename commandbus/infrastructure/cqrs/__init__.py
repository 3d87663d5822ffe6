"""CQRS infrastructure for command routing."""

from .command_bus import Command, CommandHandler, CommandRegistry, CommandBus, Tag, command_tag
from .composer import merge, merge_overwrite
from .decorators import command_handler, register_handlers

__all__ = [
    "Command",
    "CommandHandler",
    "CommandRegistry",
    "CommandBus",
    "Tag",
    "command_tag",
    "merge",
    "merge_overwrite",
    "command_handler",
    "register_handlers",
]
