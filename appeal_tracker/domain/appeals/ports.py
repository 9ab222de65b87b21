"""
Port interfaces (ABCs) for the appeals bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import datetime
from typing import Optional

from appeal_tracker.domain.appeals.entities import Appeal, AppealStatus


class AppealRepository(ABC):
    """Port for persisting and querying appeals.

    Every mutating call is durable before it returns, or has no effect.
    Implementations must be safe to call concurrently.
    """

    @abstractmethod
    def create(self, theme: str, message: str) -> Appeal:
        """Persist a new appeal in status New and return it.

        The repository assigns the id and sets created_at == updated_at.
        """
        raise NotImplementedError

    @abstractmethod
    def get(self, appeal_id: str) -> Appeal:
        """Return the appeal with the given id.

        Raises:
            AppealNotFoundError: If no such appeal exists.
        """
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Appeal]:
        """Return every stored appeal (empty list when there are none)."""
        raise NotImplementedError

    @abstractmethod
    def list_by_created_range(
        self, start: datetime, end: datetime
    ) -> list[Appeal]:
        """Return appeals whose created_at lies in [start, end], inclusive."""
        raise NotImplementedError

    @abstractmethod
    def update(
        self, appeal: Appeal, expected_status: Optional[AppealStatus] = None
    ) -> Appeal:
        """Overwrite the mutable fields of an existing appeal.

        Theme, message, status, solution and cancel_reason are written
        as given; updated_at is refreshed. This is a full overwrite, so
        ``appeal`` must come from a prior :meth:`get`.

        Args:
            appeal: The complete desired state.
            expected_status: When set, the write only applies if the stored
                status still equals this value.

        Returns:
            The appeal as persisted.

        Raises:
            AppealNotFoundError: If no appeal has ``appeal.id``.
            AppealConflictError: If ``expected_status`` no longer matches.
        """
        raise NotImplementedError

    @abstractmethod
    def bulk_cancel(self, from_statuses: Iterable[AppealStatus]) -> int:
        """Atomically cancel every appeal currently in ``from_statuses``.

        Returns:
            Number of appeals that were cancelled (zero is not an error).
        """
        raise NotImplementedError

    @abstractmethod
    def ping(self) -> None:
        """Check that the backing store answers a trivial query.

        Raises:
            AppealStorageError: If the store is unreachable.
        """
        raise NotImplementedError
