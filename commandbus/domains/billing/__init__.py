"""Billing bounded context."""

from .domain.gateway import PaymentGateway, Subscription
from .application.commands.subscriptions import CancelSubscriptionCommand, SubscribeCommand
from .application.handlers.command_handlers import CancelSubscriptionHandler, SubscribeHandler
from .registry import build_billing_registry

__all__ = [
    "PaymentGateway",
    "Subscription",
    "CancelSubscriptionCommand",
    "SubscribeCommand",
    "CancelSubscriptionHandler",
    "SubscribeHandler",
    "build_billing_registry",
]
