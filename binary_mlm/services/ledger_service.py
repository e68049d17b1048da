# binary_mlm/services/ledger_service.py
"""
Ledger writer - builds Transaction rows and appends them through storage.
"""
from decimal import Decimal
from typing import List, Optional
import logging
import uuid

from models import Transaction
from binary_mlm.config.plan import TransactionType, TransactionStatus
from binary_mlm.services.deduction_service import Deductions
from binary_mlm.storage.base import CommissionStorage
from binary_mlm.utils.clock import planClock

logger = logging.getLogger(__name__)


class LedgerWriteError(Exception):
    """Storage refused a ledger append."""


class LedgerService:
    """Append-only writer; entries are never updated or deleted."""

    def __init__(self, storage: CommissionStorage):
        self.storage = storage

    async def post(
            self,
            userId: str,
            amount: Decimal,
            transactionType: TransactionType,
            description: str,
            level: Optional[int] = None,
            paymentId: Optional[str] = None
    ) -> Transaction:
        transaction = Transaction(
            transactionID=str(uuid.uuid4()),
            userID=userId,
            amount=amount,
            type=transactionType.value,
            description=description,
            date=planClock.now,
            status=TransactionStatus.COMPLETED.value,
            level=level,
            paymentID=paymentId
        )

        stored = await self.storage.addTransaction(transaction)
        if not stored:
            raise LedgerWriteError(
                f"Ledger rejected {transactionType.value} entry for user {userId}: {amount}"
            )

        logger.debug(f"Posted {transactionType.value} {amount} to {userId}: {description}")
        return transaction

    async def postDeductionItems(
            self,
            userId: str,
            deductions: Deductions,
            productName: str,
            level: Optional[int] = None
    ) -> List[Transaction]:
        """
        Negative audit entries for TDS, admin fee and repurchase allocation.
        No money moves for these.
        """
        items = [
            (-deductions.tds, TransactionType.RETAIL_PROFIT,
             f"TDS deduction for {productName} commission"),
            (-deductions.adminFee, TransactionType.RETAIL_PROFIT,
             f"Admin fee for {productName} commission"),
            (-deductions.repurchaseAllocation, TransactionType.REPURCHASE_BONUS,
             f"Repurchase allocation from {productName} commission"),
        ]

        posted = []
        for amount, transactionType, description in items:
            posted.append(await self.post(
                userId=userId,
                amount=amount,
                transactionType=transactionType,
                description=description,
                level=level
            ))

        return posted
