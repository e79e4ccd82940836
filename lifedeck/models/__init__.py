"""ORM Models — SQLAlchemy declarative models for persisted LifeDeck values.

Invariants:
    - All models inherit from Base (db/base.py)
    - Rows are scoped by user_id; cards and progress are never deleted

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all/autogenerate
"""

from lifedeck.models.card import CardModel  # noqa: F401
from lifedeck.models.user_progress import UserProgressModel  # noqa: F401
from lifedeck.models.unlocked_achievement import UnlockedAchievement  # noqa: F401
