"""Decorators for CQRS handlers."""
from __future__ import annotations

from typing import Callable, Type, TypeVar

from .command_bus import CommandHandler, CommandRegistry

T = TypeVar("T")


def command_handler(command_type: Type) -> Callable[[T], T]:
    def decorator(handler_cls: T) -> T:
        setattr(handler_cls, "_command_type", command_type)
        return handler_cls
    return decorator


def register_handlers(registry: CommandRegistry, *handlers: CommandHandler) -> CommandRegistry:
    """Register handler instances under the command type their class declares."""
    for handler in handlers:
        command_type = getattr(handler, "_command_type", None)
        if command_type is None:
            raise TypeError(f"{type(handler).__name__} is not decorated with @command_handler")
        registry.register(command_type, handler)
    return registry
