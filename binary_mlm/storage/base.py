# binary_mlm/storage/base.py
"""
Collaborator contracts consumed by the commission core.
"""
from typing import List, Optional

from models import User, Product, Purchase, Transaction, CommissionStructure
from binary_mlm.network.tree import NetworkMember


class CommissionStorage:
    """Users, ledger, purchase history and plan settings."""

    async def getAllUsers(self) -> List[User]:
        raise NotImplementedError

    async def getUserNetworkMembers(self, userId: str) -> NetworkMember:
        """Binary tree rooted at userId."""
        raise NotImplementedError

    async def getCommissionStructure(self) -> CommissionStructure:
        raise NotImplementedError

    async def addTransaction(self, transaction: Transaction) -> bool:
        """Append one ledger entry. Returns False if it was not stored."""
        raise NotImplementedError

    async def getAllTransactions(self) -> List[Transaction]:
        raise NotImplementedError

    async def getPriorPurchases(self, userId: str) -> List[Purchase]:
        raise NotImplementedError

    async def addPurchaseRecord(
            self,
            userId: str,
            productId: str,
            paymentId: str,
            orderId: Optional[str] = None
    ) -> Purchase:
        raise NotImplementedError


class ProductCatalog:
    """Source of purchasable products."""

    async def getProductCatalog(self) -> List[Product]:
        raise NotImplementedError

    async def findProduct(self, productId: str) -> Optional[Product]:
        products = await self.getProductCatalog()
        return next((p for p in products if p.productID == productId), None)
