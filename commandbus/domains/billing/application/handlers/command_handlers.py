"""Command handlers for the billing context."""
from __future__ import annotations

import logging

from commandbus.infrastructure.cqrs import CommandHandler, command_handler
from commandbus.shared_kernel.exceptions import ExternalServiceError, HandlerError
from commandbus.domains.billing.domain.gateway import PaymentGateway, Subscription
from commandbus.domains.billing.application.commands.subscriptions import (
    CancelSubscriptionCommand,
    SubscribeCommand,
)

logger = logging.getLogger(__name__)


@command_handler(CancelSubscriptionCommand)
class CancelSubscriptionHandler(CommandHandler[CancelSubscriptionCommand, Subscription]):
    """Cancel a subscription with the payment provider."""

    def __init__(self, gateway: PaymentGateway) -> None:
        self.gateway = gateway

    async def handle(self, command: CancelSubscriptionCommand) -> Subscription:
        try:
            return await self.gateway.cancel_subscription(command.subscription_id)
        except ExternalServiceError as exc:
            logger.warning("Cancel of %s rejected: %s", command.subscription_id, exc)
            raise HandlerError(
                f"Could not cancel subscription {command.subscription_id}: {exc}",
                details={"subscription_id": command.subscription_id, "provider_code": exc.code},
            ) from exc


@command_handler(SubscribeCommand)
class SubscribeHandler(CommandHandler[SubscribeCommand, Subscription]):
    """Subscribe a user to a plan with the payment provider."""

    def __init__(self, gateway: PaymentGateway) -> None:
        self.gateway = gateway

    async def handle(self, command: SubscribeCommand) -> Subscription:
        try:
            return await self.gateway.create_subscription(command.user_id, command.plan_id)
        except ExternalServiceError as exc:
            logger.warning("Subscribe %s to %s rejected: %s", command.user_id, command.plan_id, exc)
            raise HandlerError(
                f"Could not subscribe {command.user_id} to {command.plan_id}: {exc}",
                details={
                    "user_id": command.user_id,
                    "plan_id": command.plan_id,
                    "provider_code": exc.code,
                },
            ) from exc
