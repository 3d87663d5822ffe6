"""Timeout helpers for async handler calls."""
from __future__ import annotations

import asyncio
from typing import Any, Awaitable

from commandbus.infrastructure.cqrs.command_bus import CommandHandler, TCommand, TResult


async def with_timeout(coro: Awaitable[Any], timeout: float) -> Any:
    return await asyncio.wait_for(coro, timeout=timeout)


class TimeoutHandler(CommandHandler[TCommand, TResult]):
    """Bound a wrapped handler's ``handle`` call to ``timeout`` seconds."""

    def __init__(self, inner: CommandHandler[TCommand, TResult], timeout: float) -> None:
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        self.inner = inner
        self.timeout = timeout
        command_type = getattr(inner, "_command_type", None)
        if command_type is not None:
            self._command_type = command_type

    async def handle(self, command: TCommand) -> TResult:
        return await with_timeout(self.inner.handle(command), self.timeout)
