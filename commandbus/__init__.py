"""Command dispatch registry: route tagged commands to their handlers."""

from .infrastructure.cqrs import (
    Command,
    CommandHandler,
    CommandRegistry,
    CommandBus,
    command_tag,
    merge,
    merge_overwrite,
    command_handler,
    register_handlers,
)
from .shared_kernel import (
    ConflictError,
    DispatchError,
    HandlerError,
    RegistryFrozenError,
    Result,
    UnknownCommandError,
)

__all__ = [
    "Command",
    "CommandHandler",
    "CommandRegistry",
    "CommandBus",
    "command_tag",
    "merge",
    "merge_overwrite",
    "command_handler",
    "register_handlers",
    "ConflictError",
    "DispatchError",
    "HandlerError",
    "RegistryFrozenError",
    "Result",
    "UnknownCommandError",
]
