"""User Locks — the per-user serialization point for card and progress mutations.

Invariants:
    - One asyncio.Lock per user id, created on first use
    - Different users never contend; one user's transitions run one at a time
    - default_locks is the one registry shared by every DeckService in the process

Design Decisions:
    - The lifecycle legality check rejects a second completion only when the second
      caller loads after the first commits; holding the lock across load -> apply ->
      save -> commit guarantees that order
    - Process-wide registry: serializes callers within one interpreter, not across
      worker processes
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
import asyncio

from lifedeck.core.domain_types import UserId


class UserLockRegistry:
    """Hands out exclusive, scoped access to one user's state."""

    def __init__(self) -> None:
        self._locks: dict[UserId, asyncio.Lock] = {}

    def lock_for(self, user_id: UserId) -> asyncio.Lock:
        return self._locks.setdefault(user_id, asyncio.Lock())

    def is_held(self, user_id: UserId) -> bool:
        lock = self._locks.get(user_id)
        return lock is not None and lock.locked()

    @asynccontextmanager
    async def hold(self, user_id: UserId) -> AsyncIterator[None]:
        async with self.lock_for(user_id):
            yield


# Shared by every DeckService unless a caller injects its own
default_locks = UserLockRegistry()
