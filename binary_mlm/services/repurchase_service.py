# binary_mlm/services/repurchase_service.py
import logging

from binary_mlm.storage.base import CommissionStorage

logger = logging.getLogger(__name__)


class RepurchaseService:
    """Detects repeat purchases of the same product by the buyer."""

    def __init__(self, storage: CommissionStorage):
        self.storage = storage

    async def isRepurchase(self, buyerId: str, productId: str) -> bool:
        priorPurchases = await self.storage.getPriorPurchases(buyerId)
        return any(purchase.productID == productId for purchase in priorPurchases)
