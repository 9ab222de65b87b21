"""
Adapter: Appeal repository.

Implements AppealRepository port.
Persists appeals in a single ``appeals`` table through SQLAlchemy Core,
so any SQLAlchemy-supported database works (SQLite by default).
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from sqlalchemy import (
    Column,
    DateTime,
    Index,
    MetaData,
    String,
    Table,
    Text,
    insert,
    literal,
    select,
    update,
)
from sqlalchemy.engine import Engine, Row
from sqlalchemy.exc import SQLAlchemyError

from appeal_tracker.domain.appeals.entities import Appeal, AppealStatus
from appeal_tracker.domain.appeals.errors import (
    AppealConflictError,
    AppealNotFoundError,
    AppealStorageError,
)
from appeal_tracker.domain.appeals.ports import AppealRepository

logger = logging.getLogger(__name__)

metadata = MetaData()

appeals_table = Table(
    "appeals",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("theme", Text, nullable=False),
    Column("message", Text, nullable=False),
    Column("status", String(20), nullable=False),
    Column("solution", Text, nullable=False, default=""),
    Column("cancel_reason", Text, nullable=False, default=""),
    Column("created_at", DateTime, nullable=False),
    Column("updated_at", DateTime, nullable=False),
    Index("ix_appeals_created_at", "created_at"),
)


def utcnow() -> datetime:
    """Return the current UTC time as a naive datetime."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _row_to_appeal(row: Row) -> Appeal:
    """Map a result row onto the Appeal entity."""
    return Appeal(
        id=row.id,
        theme=row.theme,
        message=row.message,
        status=AppealStatus(row.status),
        solution=row.solution or "",
        cancel_reason=row.cancel_reason or "",
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlAlchemyAppealRepository(AppealRepository):
    """SQL implementation of the appeal repository.

    Implements the AppealRepository port defined in the domain layer.
    Each mutating call runs in its own transaction. Database failures
    surface as AppealStorageError.
    """

    def __init__(
        self, engine: Engine, clock: Callable[[], datetime] = utcnow
    ) -> None:
        """Initialize the repository.

        Args:
            engine: Shared SQLAlchemy engine.
            clock: Source of "now" for created_at/updated_at.
        """
        self._engine = engine
        self._clock = clock

    @contextmanager
    def _storage_errors(self, operation: str) -> Iterator[None]:
        """Translate SQLAlchemy failures into AppealStorageError."""
        try:
            yield
        except SQLAlchemyError as exc:
            logger.error("Appeal storage failure during %s: %s", operation, exc)
            raise AppealStorageError(operation, type(exc).__name__) from exc

    def init_schema(self) -> None:
        """Create the appeals table and its indexes if they do not exist."""
        with self._storage_errors("init_schema"):
            metadata.create_all(self._engine)
        logger.info("Appeals table initialized or already exists.")

    def ping(self) -> None:
        """Run SELECT 1 against the appeals database."""
        with self._storage_errors("ping"), self._engine.connect() as conn:
            conn.execute(select(literal(1)))

    def create(self, theme: str, message: str) -> Appeal:
        """Persist a new appeal in status New.

        Args:
            theme: Appeal subject.
            message: Appeal body.

        Returns:
            The stored appeal with its generated id and timestamps.
        """
        now = self._clock()
        appeal = Appeal(
            id=str(uuid4()),
            theme=theme,
            message=message,
            status=AppealStatus.NEW,
            solution="",
            cancel_reason="",
            created_at=now,
            updated_at=now,
        )

        with self._storage_errors("create"), self._engine.begin() as conn:
            conn.execute(
                insert(appeals_table).values(
                    id=appeal.id,
                    theme=appeal.theme,
                    message=appeal.message,
                    status=appeal.status.value,
                    solution=appeal.solution,
                    cancel_reason=appeal.cancel_reason,
                    created_at=appeal.created_at,
                    updated_at=appeal.updated_at,
                )
            )

        logger.debug("Created appeal id=%s.", appeal.id)
        return appeal

    def get(self, appeal_id: str) -> Appeal:
        """Return the appeal with the given id.

        Raises:
            AppealNotFoundError: If no such appeal exists.
        """
        query = select(appeals_table).where(appeals_table.c.id == appeal_id)

        with self._storage_errors("get"), self._engine.connect() as conn:
            row = conn.execute(query).first()

        if row is None:
            raise AppealNotFoundError(appeal_id)
        return _row_to_appeal(row)

    def list_all(self) -> list[Appeal]:
        """Return every stored appeal, oldest first."""
        query = select(appeals_table).order_by(
            appeals_table.c.created_at, appeals_table.c.id
        )

        with self._storage_errors("list_all"), self._engine.connect() as conn:
            rows = conn.execute(query).fetchall()

        return [_row_to_appeal(row) for row in rows]

    def list_by_created_range(
        self, start: datetime, end: datetime
    ) -> list[Appeal]:
        """Return appeals whose created_at lies in [start, end].

        Args:
            start: Lower bound (inclusive).
            end: Upper bound (inclusive). Callers widen it to the end of
                the day when a whole day is intended.

        Returns:
            Matching appeals, oldest first.
        """
        query = (
            select(appeals_table)
            .where(appeals_table.c.created_at.between(start, end))
            .order_by(appeals_table.c.created_at, appeals_table.c.id)
        )

        with self._storage_errors("list_by_created_range"), self._engine.connect() as conn:
            rows = conn.execute(query).fetchall()

        logger.debug(
            "Fetched %d appeals created between %s and %s.", len(rows), start, end
        )
        return [_row_to_appeal(row) for row in rows]

    def update(
        self, appeal: Appeal, expected_status: Optional[AppealStatus] = None
    ) -> Appeal:
        """Overwrite the mutable fields of an existing appeal.

        When ``expected_status`` is given, the UPDATE is conditional on the
        row still holding that status, so a concurrent change is reported
        instead of silently overwritten.

        Args:
            appeal: The complete desired state, sourced from a prior get().
            expected_status: Status the row must still have for the write to apply.

        Returns:
            The appeal as persisted, with a refreshed updated_at.

        Raises:
            AppealNotFoundError: If no appeal has ``appeal.id``.
            AppealConflictError: If the stored status no longer matches.
        """
        now = self._clock()
        statement = update(appeals_table).where(appeals_table.c.id == appeal.id)
        if expected_status is not None:
            statement = statement.where(
                appeals_table.c.status == expected_status.value
            )
        statement = statement.values(
            theme=appeal.theme,
            message=appeal.message,
            status=appeal.status.value,
            solution=appeal.solution,
            cancel_reason=appeal.cancel_reason,
            updated_at=now,
        )

        with self._storage_errors("update"), self._engine.begin() as conn:
            result = conn.execute(statement)
            if result.rowcount == 0:
                exists = conn.execute(
                    select(appeals_table.c.id).where(appeals_table.c.id == appeal.id)
                ).first()
                if exists is None or expected_status is None:
                    raise AppealNotFoundError(appeal.id)
                raise AppealConflictError(appeal.id, expected_status.value)

            row = conn.execute(
                select(appeals_table).where(appeals_table.c.id == appeal.id)
            ).one()

        logger.debug("Updated appeal id=%s to status=%s.", appeal.id, row.status)
        return _row_to_appeal(row)

    def bulk_cancel(self, from_statuses: Iterable[AppealStatus]) -> int:
        """Cancel every appeal currently in one of ``from_statuses``.

        Expressed as a single set-based UPDATE, so it needs no prior read
        and is safe to run concurrently with other operations.

        Args:
            from_statuses: Statuses eligible for cancellation.

        Returns:
            Number of appeals cancelled.
        """
        values = sorted(status.value for status in from_statuses)
        if not values:
            return 0

        statement = (
            update(appeals_table)
            .where(appeals_table.c.status.in_(values))
            .values(status=AppealStatus.CANCELLED.value, updated_at=self._clock())
        )

        with self._storage_errors("bulk_cancel"), self._engine.begin() as conn:
            cancelled = conn.execute(statement).rowcount

        logger.info("Bulk-cancelled %d appeals from statuses %s.", cancelled, values)
        return cancelled
