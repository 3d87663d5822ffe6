"""Shared kernel primitives (errors, results)."""

from .exceptions import (
    DomainException,
    ExternalServiceError,
    HandlerError,
    DispatchError,
    ConflictError,
    UnknownCommandError,
    RegistryFrozenError,
    describe_tag,
)
from .result import Result

__all__ = [
    "DomainException",
    "ExternalServiceError",
    "HandlerError",
    "DispatchError",
    "ConflictError",
    "UnknownCommandError",
    "RegistryFrozenError",
    "describe_tag",
    "Result",
]
