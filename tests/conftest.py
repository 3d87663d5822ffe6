import os
from typing import List, Set, Tuple

import pytest

os.environ.setdefault("LOG_LEVEL", "DEBUG")

from commandbus.domains.billing import PaymentGateway, Subscription  # noqa: E402
from commandbus.shared_kernel.exceptions import ExternalServiceError  # noqa: E402


class FakeGateway(PaymentGateway):
    """In-memory payment provider that records calls."""

    def __init__(self, rejected_subscriptions: Set[str] = frozenset()) -> None:
        self.calls: List[Tuple[str, ...]] = []
        self.rejected_subscriptions = set(rejected_subscriptions)

    async def cancel_subscription(self, subscription_id: str) -> Subscription:
        self.calls.append(("cancel", subscription_id))
        if subscription_id in self.rejected_subscriptions:
            raise ExternalServiceError("No such subscription", code="resource_missing")
        return Subscription(subscription_id, user_id="unknown", plan_id="unknown", status="canceled")

    async def create_subscription(self, user_id: str, plan_id: str) -> Subscription:
        self.calls.append(("subscribe", user_id, plan_id))
        return Subscription(f"sub_{user_id}_{plan_id}", user_id=user_id, plan_id=plan_id)


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def make_gateway():
    return FakeGateway
