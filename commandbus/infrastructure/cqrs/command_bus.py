"""Command bus for CQRS.

Commands are routed by tag. A command's tag is its concrete type, so a
registry keyed by command classes routes every instance of a class to the
same handler. Registries are built during startup, frozen, and then shared
read-only by any number of concurrent dispatches.
"""
from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Hashable, Iterable, Iterator, List, Optional, Tuple, TypeVar

from commandbus.core.config import settings
from commandbus.shared_kernel.exceptions import (
    ConflictError,
    RegistryFrozenError,
    UnknownCommandError,
    describe_tag,
)
from commandbus.shared_kernel.result import Result

logger = logging.getLogger(__name__)

TCommand = TypeVar("TCommand", bound="Command")
TResult = TypeVar("TResult")

Tag = Hashable


class Command(ABC):
    """Marker base class for commands."""


def command_tag(command: Command) -> Tag:
    return type(command)


class CommandHandler(ABC, Generic[TCommand, TResult]):
    @abstractmethod
    async def handle(self, command: TCommand) -> TResult:
        raise NotImplementedError


class CommandRegistry:
    """Tag to handler table with single and batch dispatch."""

    def __init__(self) -> None:
        self._handlers: Dict[Tag, CommandHandler] = {}
        self._frozen = False

    def register(self, tag: Tag, handler: CommandHandler) -> None:
        if self._frozen:
            raise RegistryFrozenError(tag)
        if tag in self._handlers:
            raise ConflictError([tag])
        self._handlers[tag] = handler
        logger.debug("Registered %s for %s", type(handler).__name__, describe_tag(tag))

    def freeze(self) -> "CommandRegistry":
        if not self._frozen:
            self._frozen = True
            logger.info("Registry frozen with %d handlers", len(self._handlers))
        return self

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def handler_for(self, tag: Tag) -> Optional[CommandHandler]:
        return self._handlers.get(tag)

    def tags(self) -> List[Tag]:
        return list(self._handlers)

    def items(self) -> List[Tuple[Tag, CommandHandler]]:
        return list(self._handlers.items())

    def __contains__(self, tag: object) -> bool:
        return tag in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self) -> Iterator[Tag]:
        return iter(self.tags())

    async def dispatch(self, command: Command) -> Any:
        tag = command_tag(command)
        handler = self._handlers.get(tag)
        if handler is None:
            raise UnknownCommandError(tag)
        logger.debug("Dispatching %s", describe_tag(tag))
        return await handler.handle(command)

    async def dispatch_all(
        self,
        commands: Iterable[Command],
        max_concurrency: Optional[int] = None,
    ) -> List[Result[Any, Exception]]:
        """Dispatch every command and collect one outcome per command.

        Outcomes are returned in input order. A failing command never stops
        its siblings; its exception is captured in the matching ``Result``.
        With ``max_concurrency`` above 1 dispatches overlap, bounded by a
        semaphore.
        """
        commands = list(commands)
        limit = max_concurrency if max_concurrency is not None else settings.DISPATCH_MAX_CONCURRENCY
        if limit < 1:
            raise ValueError("max_concurrency must be at least 1")

        if limit == 1:
            return [await self._outcome(command) for command in commands]

        semaphore = asyncio.Semaphore(limit)

        async def bounded(command: Command) -> Result[Any, Exception]:
            async with semaphore:
                return await self._outcome(command)

        return list(await asyncio.gather(*(bounded(command) for command in commands)))

    async def _outcome(self, command: Command) -> Result[Any, Exception]:
        try:
            return Result.success(await self.dispatch(command))
        except Exception as exc:
            logger.warning(
                "Command %s failed: %s: %s",
                describe_tag(command_tag(command)),
                type(exc).__name__,
                exc,
            )
            return Result.failure(exc)


CommandBus = CommandRegistry
