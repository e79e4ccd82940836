"""Error Hierarchy — typed, categorized exceptions for all LifeDeck failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Core errors (transition, argument, not-found) are recoverable local validation failures
    - Infrastructure errors (database) are the only critical ones
    - to_response() produces a uniform error envelope for any outer surface

Design Decisions:
    - Single hierarchy with LifeDeckError base: callers catch one type for all core failures
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Rejections never mutate: raising happens before any field is assigned
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    card_id: str | None = None
    transition: str | None = None
    debug_info: dict[str, Any] | None = None


class LifeDeckError(Exception):
    """Base exception for all LifeDeck errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    @property
    def recoverable(self) -> bool:
        return self.severity in (ErrorSeverity.INFO, ErrorSeverity.WARNING)

    def to_response(self) -> dict:
        """Convert to standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "recoverable": self.recoverable,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "user_id": self.context.user_id,
                    "card_id": self.context.card_id,
                    "transition": self.context.transition,
                },
            }
        }


# ─── Domain Errors (recoverable) ────────────────────────────────

class InvalidTransitionError(LifeDeckError):
    """Card status does not permit the requested lifecycle move."""
    def __init__(
        self, card_id: str, from_status: str, action: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.card_id = card_id
        ctx.transition = action
        super().__init__(
            f"Cannot {action} card '{card_id}' while it is {from_status}.",
            "INVALID_TRANSITION", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, ctx,
        )
        self.card_id = card_id
        self.from_status = from_status
        self.action = action


class InvalidArgumentError(LifeDeckError):
    """Input rejected by validation (e.g. snooze deadline not in the future)."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_ARGUMENT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context,
        )
        self.field = field


class CardNotFoundError(LifeDeckError):
    """Card id absent from the pool — caller treats it as already resolved."""
    def __init__(self, card_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.card_id = card_id
        super().__init__(
            f"Card '{card_id}' not found",
            "CARD_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx,
        )
        self.card_id = card_id


class ProgressNotFoundError(LifeDeckError):
    """User has no progress record (onboarding not completed)."""
    def __init__(self, user_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_id = user_id
        super().__init__(
            f"No progress recorded for user '{user_id}'",
            "PROGRESS_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx,
        )
        self.user_id = user_id


# ─── Infrastructure Errors ──────────────────────────────────────

class DatabaseError(LifeDeckError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context,
        )
        self.operation = operation
