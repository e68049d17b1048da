# binary_mlm/services/purchase_service.py
"""
Purchase recorder - the buyer's own retail transaction.
"""
import logging

from models import Product, Transaction
from binary_mlm.config.plan import TransactionType
from binary_mlm.services.ledger_service import LedgerService

logger = logging.getLogger(__name__)


class PurchaseService:
    """Records purchases in the ledger. No deductions apply here."""

    def __init__(self, ledger: LedgerService):
        self.ledger = ledger

    async def recordPurchase(self, userId: str, product: Product, paymentId: str) -> Transaction:
        transaction = await self.ledger.post(
            userId=userId,
            amount=product.price,
            transactionType=TransactionType.RETAIL_PROFIT,
            description=f"Purchase of {product.name}",
            paymentId=paymentId
        )

        logger.info(f"Recorded purchase for user {userId}: {product.name}")
        return transaction
