"""Payment provider collaborator for the billing context."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Subscription:
    subscription_id: str
    user_id: str
    plan_id: str
    status: str = "active"


class PaymentGateway(ABC):
    """Payment provider client.

    Implementations raise ``ExternalServiceError`` when the provider rejects
    a request or cannot be reached.
    """

    @abstractmethod
    async def cancel_subscription(self, subscription_id: str) -> Subscription:
        raise NotImplementedError

    @abstractmethod
    async def create_subscription(self, user_id: str, plan_id: str) -> Subscription:
        raise NotImplementedError
