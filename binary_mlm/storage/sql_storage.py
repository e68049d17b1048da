# binary_mlm/storage/sql_storage.py
"""
SQLAlchemy-backed collaborators.
"""
from collections import deque
from typing import Dict, List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
import logging

import config
from models import User, Product, Purchase, Transaction, CommissionStructure
from binary_mlm.network.tree import NetworkMember
from binary_mlm.storage.base import CommissionStorage, ProductCatalog

logger = logging.getLogger(__name__)

SIDE_SLOTS = {"left": 0, "right": 1}


class SqlCommissionStorage(CommissionStorage):
    """Storage over a SQLAlchemy session."""

    def __init__(self, session: Session):
        self.session = session

    async def getAllUsers(self) -> List[User]:
        return self.session.query(User).order_by(User.createdAt, User.userID).all()

    async def getUserNetworkMembers(self, userId: str) -> NetworkMember:
        """
        Read the stored binary placement below userId.
        Placement rows are produced by the tree builder; only read here.
        """
        root = self.session.query(User).filter_by(userID=userId).first()
        rootNode = NetworkMember(userID=userId, name=root.name if root else "")

        placed = self.session.query(User).filter(User.placementParentID.isnot(None)).all()
        childrenByParent: Dict[str, List[User]] = {}
        for user in placed:
            childrenByParent.setdefault(user.placementParentID, []).append(user)

        seen = {userId}
        queue = deque([rootNode])
        while queue:
            node = queue.popleft()
            slots: List[Optional[NetworkMember]] = [None, None]

            for child in childrenByParent.get(node.userID, []):
                slot = SIDE_SLOTS.get((child.placementSide or "").lower())
                if slot is None or slots[slot] is not None or child.userID in seen:
                    logger.warning(
                        f"Skipping placement of {child.userID} under {node.userID} "
                        f"(side={child.placementSide})"
                    )
                    continue

                seen.add(child.userID)
                slots[slot] = NetworkMember(userID=child.userID, name=child.name)
                queue.append(slots[slot])

            if slots[1] is not None:
                node.children = slots
            elif slots[0] is not None:
                node.children = [slots[0]]

        return rootNode

    async def getCommissionStructure(self) -> CommissionStructure:
        structure = self.session.query(CommissionStructure).filter_by(
            isActive=True
        ).order_by(CommissionStructure.structureID.desc()).first()

        if structure:
            return structure

        logger.info("No active commission structure stored, using defaults from config")
        return CommissionStructure(
            tdsPercentage=config.DEFAULT_TDS_PERCENTAGE,
            adminFeePercentage=config.DEFAULT_ADMIN_FEE_PERCENTAGE,
            repurchasePercentage=config.DEFAULT_REPURCHASE_PERCENTAGE,
            levelCommissions={str(level): str(rate) for level, rate in config.DEFAULT_LEVEL_COMMISSIONS.items()},
            isActive=True
        )

    async def addTransaction(self, transaction: Transaction) -> bool:
        try:
            self.session.add(transaction)
            self.session.commit()
            return True
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Failed to store transaction {transaction.transactionID}: {e}")
            return False

    async def getAllTransactions(self) -> List[Transaction]:
        return self.session.query(Transaction).order_by(Transaction.date).all()

    async def getPriorPurchases(self, userId: str) -> List[Purchase]:
        return self.session.query(Purchase).filter_by(userID=userId).all()

    async def addPurchaseRecord(
            self,
            userId: str,
            productId: str,
            paymentId: str,
            orderId: Optional[str] = None
    ) -> Purchase:
        purchase = Purchase(
            userID=userId,
            productID=productId,
            paymentID=paymentId,
            orderID=orderId
        )
        try:
            self.session.add(purchase)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Failed to store purchase of {productId} by {userId}: {e}")
            raise

        return purchase


class SqlProductCatalog(ProductCatalog):
    """Products from the local products table."""

    def __init__(self, session: Session):
        self.session = session

    async def getProductCatalog(self) -> List[Product]:
        return self.session.query(Product).all()

    async def findProduct(self, productId: str) -> Optional[Product]:
        return self.session.query(Product).filter_by(productID=productId).first()
