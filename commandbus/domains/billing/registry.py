"""Registry wiring for the billing context."""
from __future__ import annotations

from typing import List, Optional

from commandbus.core.config import settings
from commandbus.infrastructure.cqrs import CommandHandler, CommandRegistry, register_handlers
from commandbus.infrastructure.resilience import TimeoutHandler
from commandbus.domains.billing.domain.gateway import PaymentGateway
from commandbus.domains.billing.application.handlers.command_handlers import (
    CancelSubscriptionHandler,
    SubscribeHandler,
)


def build_billing_registry(
    gateway: PaymentGateway,
    handler_timeout: Optional[float] = None,
) -> CommandRegistry:
    """Return a frozen registry routing billing commands to ``gateway``."""
    timeout = handler_timeout if handler_timeout is not None else settings.HANDLER_TIMEOUT_SECONDS
    handlers: List[CommandHandler] = [CancelSubscriptionHandler(gateway), SubscribeHandler(gateway)]
    if timeout is not None:
        handlers = [TimeoutHandler(handler, timeout) for handler in handlers]
    return register_handlers(CommandRegistry(), *handlers).freeze()
