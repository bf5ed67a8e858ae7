"""Explicit transaction context for multi-step writes.

A ``TransactionContext`` bounds one atomic unit of work on a single
``AsyncSession``. It is handed explicitly to every data-layer call that must
take part in the unit of work; nothing reads it from ambient state.

Lifecycle: ``open`` -> ``commit`` or ``abort`` -> ``release``. ``release``
is pure resource cleanup and is safe to call on every exit path.
"""

from enum import Enum

import structlog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

logger = structlog.get_logger(__name__)


class TransactionOutcome(Enum):
    COMMITTED = "committed"
    ABORTED = "aborted"


class TransactionContext:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.outcome: TransactionOutcome | None = None
        self.released = False

    @classmethod
    async def open(cls, session_factory: async_sessionmaker[AsyncSession]) -> "TransactionContext":
        session = session_factory()
        try:
            await session.begin()
        except BaseException:
            await session.close()
            raise
        return cls(session)

    @property
    def is_active(self) -> bool:
        return self.outcome is None and not self.released

    async def commit(self) -> None:
        if not self.is_active:
            raise RuntimeError("Cannot commit a finished transaction")
        await self.session.commit()
        self.outcome = TransactionOutcome.COMMITTED

    async def abort(self) -> None:
        """Roll back everything written through this context. No-op once finished."""
        if not self.is_active:
            return
        await self.session.rollback()
        self.outcome = TransactionOutcome.ABORTED

    async def release(self) -> None:
        if self.released:
            return
        if self.outcome is None:
            logger.warning("Releasing transaction that was never committed or aborted")
        # Closing an unfinished session rolls it back.
        await self.session.close()
        self.released = True
