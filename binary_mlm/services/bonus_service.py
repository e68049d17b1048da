# binary_mlm/services/bonus_service.py
"""
Bonus posting - repurchase, team matching and royalty bonuses.
"""
from decimal import Decimal
import logging

from models import Transaction
from binary_mlm.config.plan import (
    TransactionType, REPURCHASE_BONUS_PERCENTAGE, PAIR_BONUS_AMOUNT, ROYALTY_BONUS_PERCENTAGE
)
from binary_mlm.services.ledger_service import LedgerService

logger = logging.getLogger(__name__)


class BonusService:
    """Turns evaluated bonus bases into ledger entries."""

    def __init__(self, ledger: LedgerService):
        self.ledger = ledger

    async def addRepurchaseBonus(self, userId: str, amount: Decimal, productName: str) -> Transaction:
        bonusAmount = Decimal(str(amount)) * REPURCHASE_BONUS_PERCENTAGE
        transaction = await self.ledger.post(
            userId=userId,
            amount=bonusAmount,
            transactionType=TransactionType.REPURCHASE_BONUS,
            description=f"Repurchase bonus for {productName}"
        )
        logger.info(f"Repurchase bonus {bonusAmount} for user {userId}")
        return transaction

    async def addTeamMatchingBonus(self, userId: str, pairCount: int) -> Transaction:
        bonusAmount = PAIR_BONUS_AMOUNT * pairCount
        transaction = await self.ledger.post(
            userId=userId,
            amount=bonusAmount,
            transactionType=TransactionType.TEAM_MATCHING_BONUS,
            description=f"Team matching bonus for {pairCount} pairs"
        )
        logger.info(f"Team matching bonus {bonusAmount} for user {userId} ({pairCount} pairs)")
        return transaction

    async def addRoyaltyBonus(self, userId: str, turnoverAmount: Decimal) -> Transaction:
        bonusAmount = Decimal(str(turnoverAmount)) * ROYALTY_BONUS_PERCENTAGE
        transaction = await self.ledger.post(
            userId=userId,
            amount=bonusAmount,
            transactionType=TransactionType.ROYALTY_BONUS,
            description=f"Royalty bonus on monthly turnover {turnoverAmount}"
        )
        logger.info(f"Royalty bonus {bonusAmount} for user {userId}")
        return transaction
