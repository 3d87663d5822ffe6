"""Commands for the billing context."""
from dataclasses import dataclass

from commandbus.infrastructure.cqrs import Command


@dataclass(frozen=True)
class CancelSubscriptionCommand(Command):
    subscription_id: str


@dataclass(frozen=True)
class SubscribeCommand(Command):
    user_id: str
    plan_id: str
