"""Shared kernel exception hierarchy."""
from typing import Any, Dict, Hashable, List, Optional


def describe_tag(tag: Hashable) -> str:
    """Human readable name of a command tag."""
    return getattr(tag, "__name__", None) or str(tag)


class DomainException(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str, code: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class ExternalServiceError(DomainException):
    """Raised when an external service fails."""


class HandlerError(DomainException):
    """Raised by a command handler when its action could not complete."""

    def __init__(
        self,
        message: str,
        code: str = "HANDLER_FAILED",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code=code, details=details)


class DispatchError(DomainException):
    """Base exception for registry build and routing errors."""


class ConflictError(DispatchError):
    """Raised when two bindings collide on the same tag."""

    def __init__(self, tags: List[Hashable]) -> None:
        names = [describe_tag(tag) for tag in tags]
        super().__init__(
            f"Conflicting handlers for: {', '.join(names)}",
            code="TAG_CONFLICT",
            details={"tags": names},
        )
        self.tags = list(tags)


class UnknownCommandError(DispatchError):
    """Raised when a command's tag has no bound handler."""

    def __init__(self, tag: Hashable) -> None:
        super().__init__(
            f"No handler registered for {describe_tag(tag)}",
            code="UNKNOWN_COMMAND",
            details={"tag": describe_tag(tag)},
        )
        self.tag = tag


class RegistryFrozenError(DispatchError):
    """Raised when registering into a frozen registry."""

    def __init__(self, tag: Hashable) -> None:
        super().__init__(
            f"Registry is frozen, cannot register {describe_tag(tag)}",
            code="REGISTRY_FROZEN",
            details={"tag": describe_tag(tag)},
        )
        self.tag = tag
