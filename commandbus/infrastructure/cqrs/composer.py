"""Compose independently built registries into one."""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from commandbus.shared_kernel.exceptions import ConflictError, describe_tag
from .command_bus import CommandHandler, CommandRegistry, Tag

logger = logging.getLogger(__name__)


def merge(registries: Iterable[CommandRegistry]) -> CommandRegistry:
    """Merge registries, rejecting any tag bound to two different handlers.

    The same handler object bound in several inputs is not a conflict.
    Inputs are walked in order and merging stops at the first registry that
    collides with what is already merged; the ``ConflictError`` names every
    tag that registry collides on. A nested ``merge([merge([A, B]), C])``
    walks the same registries in the same order, so it reports the same tags
    as ``merge([A, B, C])``.
    """
    merged: Dict[Tag, CommandHandler] = {}
    for registry in registries:
        conflicts: List[Tag] = []
        for tag, handler in registry.items():
            bound = merged.get(tag)
            if bound is not None and bound is not handler:
                conflicts.append(tag)
        if conflicts:
            logger.error("Merge conflict on %s", ", ".join(describe_tag(tag) for tag in conflicts))
            raise ConflictError(conflicts)
        for tag, handler in registry.items():
            merged.setdefault(tag, handler)
    return _build(merged)


def merge_overwrite(registries: Iterable[CommandRegistry]) -> CommandRegistry:
    """Merge registries letting later bindings replace earlier ones."""
    merged: Dict[Tag, CommandHandler] = {}
    for registry in registries:
        for tag, handler in registry.items():
            bound = merged.get(tag)
            if bound is not None and bound is not handler:
                logger.warning(
                    "Handler for %s overridden: %s replaced by %s",
                    describe_tag(tag),
                    type(bound).__name__,
                    type(handler).__name__,
                )
            merged[tag] = handler
    return _build(merged)


def _build(bindings: Dict[Tag, CommandHandler]) -> CommandRegistry:
    registry = CommandRegistry()
    for tag, handler in bindings.items():
        registry.register(tag, handler)
    return registry
