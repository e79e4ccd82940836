"""Card Schemas — the persisted/exchanged Card record with field-level validation.

Invariants:
    - CardRecord mirrors Card field-for-field; camelCase on the wire
    - A record whose timestamps disagree with its status fails validation
    - Timestamps must be timezone-aware (AwareDatetime)

Design Decisions:
    - alias_generator=to_camel plus populate_by_name: accepts both the wire shape and
      Python field names, so repositories and tests build records either way
    - from_card / to_card are the only Card <-> record conversions in the codebase
"""

from uuid import UUID

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from lifedeck.core.card import Card
from lifedeck.core.domain_types import (
    ActionType, CardId, CardPriority, CardStatus, LifeDomain,
)


class CardRecord(BaseModel):
    """Card{id, domain, actionType, priority, title, ..., aiGenerated}."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: UUID
    domain: LifeDomain
    action_type: ActionType = ActionType.STANDARD
    priority: CardPriority = CardPriority.MEDIUM
    title: str = Field(min_length=1, max_length=200)
    description: str = ""
    action_text: str = Field(min_length=1, max_length=500)
    icon: str = ""
    tips: list[str] = []
    benefits: list[str] = []
    status: CardStatus = CardStatus.PENDING
    created_at: AwareDatetime
    completed_at: AwareDatetime | None = None
    dismissed_at: AwareDatetime | None = None
    snoozed_until: AwareDatetime | None = None
    ai_generated: bool = False

    @model_validator(mode="after")
    def check_status_timestamps(self) -> "CardRecord":
        problems = self.to_card().check_invariants()
        if problems:
            raise ValueError("; ".join(problems))
        return self

    @classmethod
    def from_card(cls, card: Card) -> "CardRecord":
        return cls(
            id=card.id,
            domain=card.domain,
            action_type=card.action_type,
            priority=card.priority,
            title=card.title,
            description=card.description,
            action_text=card.action_text,
            icon=card.icon,
            tips=list(card.tips),
            benefits=list(card.benefits),
            status=card.status,
            created_at=card.created_at,
            completed_at=card.completed_at,
            dismissed_at=card.dismissed_at,
            snoozed_until=card.snoozed_until,
            ai_generated=card.ai_generated,
        )

    def to_card(self) -> Card:
        return Card(
            id=CardId(self.id),
            domain=self.domain,
            title=self.title,
            action_text=self.action_text,
            created_at=self.created_at,
            description=self.description,
            action_type=self.action_type,
            priority=self.priority,
            icon=self.icon,
            tips=list(self.tips),
            benefits=list(self.benefits),
            status=self.status,
            completed_at=self.completed_at,
            dismissed_at=self.dismissed_at,
            snoozed_until=self.snoozed_until,
            ai_generated=self.ai_generated,
        )

    def to_wire(self) -> dict:
        """JSON-safe dict in the camelCase record shape."""
        return self.model_dump(mode="json", by_alias=True)
