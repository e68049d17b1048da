# binary_mlm/services/royalty_service.py
"""
Royalty bonus for sponsors with two strong legs.
"""
from decimal import Decimal
from typing import Optional
import logging

from binary_mlm.config.plan import ROYALTY_LEG_THRESHOLD, TURNOVER_TYPES
from binary_mlm.services.bonus_service import BonusService
from binary_mlm.storage.base import CommissionStorage
from binary_mlm.utils.clock import planClock

logger = logging.getLogger(__name__)


class RoyaltyService:

    def __init__(self, storage: CommissionStorage, bonusService: BonusService):
        self.storage = storage
        self.bonusService = bonusService

    @staticmethod
    def isQualified(leftCount: int, rightCount: int) -> bool:
        return leftCount > ROYALTY_LEG_THRESHOLD and rightCount > ROYALTY_LEG_THRESHOLD

    async def calculateMonthlyTurnover(self) -> Decimal:
        """
        Absolute sum of retail profit and repurchase entries this month.
        Negative deduction entries add to turnover instead of cancelling it.
        """
        transactions = await self.storage.getAllTransactions()

        turnover = Decimal("0")
        for transaction in transactions:
            if transaction.type in TURNOVER_TYPES and planClock.isCurrentMonth(transaction.date):
                turnover += abs(Decimal(str(transaction.amount)))

        return turnover

    async def processRoyalty(
            self,
            sponsorId: str,
            sponsorName: str,
            leftCount: int,
            rightCount: int
    ) -> Optional[Decimal]:
        """Returns the turnover credited, or None when nothing was credited."""
        if not self.isQualified(leftCount, rightCount):
            return None

        turnover = await self.calculateMonthlyTurnover()
        if turnover <= 0:
            return None

        logger.info(f"Adding royalty bonus for {sponsorName} based on turnover: {turnover}")
        await self.bonusService.addRoyaltyBonus(sponsorId, turnover)
        return turnover
