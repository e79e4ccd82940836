"""Core test fixtures — a fixed timezone-aware instant and a card factory.

Invariants:
    - Core tests never read the wall clock; every "now" derives from NOW
"""

from datetime import datetime, timedelta, timezone

import pytest

from lifedeck.core.card import Card
from lifedeck.core.domain_types import CardPriority, LifeDomain

NOW = datetime(2026, 3, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def make_card():
    """Build a pending card; created_at defaults to one hour before NOW."""
    def _make(
        domain: LifeDomain = LifeDomain.HEALTH,
        priority: CardPriority = CardPriority.MEDIUM,
        created_at: datetime | None = None,
        title: str = "Drink water",
    ) -> Card:
        return Card.create(
            domain=domain,
            title=title,
            action_text="Drink 500ml of water",
            priority=priority,
            now=created_at or NOW - timedelta(hours=1),
        )
    return _make
