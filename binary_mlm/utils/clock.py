# binary_mlm/utils/clock.py
"""
Clock used for ledger dates and the royalty month window.
Can be frozen at a fixed moment for replays and tests.
"""
from datetime import datetime, timezone
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class PlanClock:

    def __init__(self):
        self._frozenAt: Optional[datetime] = None

    @property
    def now(self) -> datetime:
        return self._frozenAt or datetime.now(timezone.utc)

    @property
    def isFrozen(self) -> bool:
        return self._frozenAt is not None

    def isCurrentMonth(self, moment: Optional[datetime]) -> bool:
        """True when moment falls in the same calendar month and year as now."""
        if moment is None:
            return False
        now = self.now
        return (moment.year, moment.month) == (now.year, now.month)

    def freeze(self, moment: datetime):
        """Stop the clock at moment. Naive moments are taken as UTC."""
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        self._frozenAt = moment
        logger.info(f"Clock frozen at {moment.isoformat()}")

    def unfreeze(self):
        if self._frozenAt is not None:
            logger.info("Clock back to real time")
        self._frozenAt = None


planClock = PlanClock()
