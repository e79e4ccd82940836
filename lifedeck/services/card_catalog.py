"""Card Catalog — curated static cards used when no generated cards are available.

Invariants:
    - Catalog cards are materialized fresh (new id, status PENDING) for each user
    - ai_generated is always False for catalog cards
"""

from datetime import datetime

from lifedeck.core.card import Card
from lifedeck.core.domain_types import ActionType, CardPriority, LifeDomain

CATALOG: tuple[dict, ...] = (
    {
        "domain": LifeDomain.HEALTH,
        "title": "Morning Hydration",
        "description": "Start your day with a full glass of water to kickstart your metabolism.",
        "action_text": "Drink 500ml of water right now",
        "action_type": ActionType.QUICK,
        "priority": CardPriority.LOW,
        "icon": "drop.fill",
        "tips": ["Keep a glass by your bed", "Add lemon for flavor"],
        "benefits": ["Improves energy", "Supports digestion"],
    },
    {
        "domain": LifeDomain.HEALTH,
        "title": "Take a Mindful Walk",
        "description": "Step outside for a 10-minute walk and focus on your breathing.",
        "action_text": "Walk for 10 minutes outside",
        "action_type": ActionType.STANDARD,
        "priority": CardPriority.MEDIUM,
        "icon": "figure.walk",
        "tips": ["Leave your phone behind", "Focus on your breathing"],
        "benefits": ["Improves cardiovascular health", "Reduces stress"],
    },
    {
        "domain": LifeDomain.FINANCE,
        "title": "Review Yesterday's Expenses",
        "description": "Take 5 minutes to review what you spent money on yesterday.",
        "action_text": "Review and categorize yesterday's spending",
        "action_type": ActionType.STANDARD,
        "priority": CardPriority.MEDIUM,
        "icon": "chart.line.uptrend.xyaxis",
        "tips": ["Use your banking app", "Look for unnecessary purchases"],
        "benefits": ["Increases spending awareness", "Helps identify waste"],
    },
    {
        "domain": LifeDomain.FINANCE,
        "title": "Subscription Check",
        "description": "Recurring charges add up quietly.",
        "action_text": "Review your recurring subscriptions",
        "action_type": ActionType.EXTENDED,
        "priority": CardPriority.HIGH,
        "icon": "creditcard",
        "tips": ["Sort by amount", "Cancel one you have not used this month"],
        "benefits": ["Frees monthly budget"],
    },
    {
        "domain": LifeDomain.PRODUCTIVITY,
        "title": "Email Triage",
        "description": "Process your inbox efficiently with the 2-minute rule.",
        "action_text": "Triage 10 emails in 2 minutes",
        "action_type": ActionType.QUICK,
        "priority": CardPriority.HIGH,
        "icon": "envelope",
        "tips": ["Archive aggressively", "Reply now if it takes under 2 minutes"],
        "benefits": ["Reduces inbox anxiety"],
    },
    {
        "domain": LifeDomain.MINDFULNESS,
        "title": "Mindful Minute",
        "description": "A short breathing reset for mental clarity.",
        "action_text": "Take 10 deep breaths",
        "action_type": ActionType.QUICK,
        "priority": CardPriority.MEDIUM,
        "icon": "wind",
        "tips": ["Breathe in for 4, out for 6"],
        "benefits": ["Lowers stress", "Improves focus"],
    },
    {
        "domain": LifeDomain.MINDFULNESS,
        "title": "Gratitude Journal",
        "description": "Write down three things you're grateful for today.",
        "action_text": "Write 3 gratitudes in your journal",
        "action_type": ActionType.REFLECTION,
        "priority": CardPriority.MEDIUM,
        "icon": "book",
        "tips": ["Be specific", "Include one person"],
        "benefits": ["Improves mood"],
    },
)


def load_catalog_cards(
    now: datetime, domains: set[LifeDomain] | None = None,
) -> list[Card]:
    """Materialize catalog entries as fresh pending cards created at now."""
    return [
        Card.create(now=now, ai_generated=False, **entry)
        for entry in CATALOG
        if not domains or entry["domain"] in domains
    ]
