# models/purchase.py
from sqlalchemy import Column, Integer, String
from models.base import Base, AuditMixin


class Purchase(Base, AuditMixin):
    __tablename__ = 'purchases'

    # Primary key
    purchaseID = Column(Integer, primary_key=True, autoincrement=True)

    userID = Column(String(64), nullable=False, index=True)
    productID = Column(String(64), nullable=False, index=True)

    # Payment correlation
    paymentID = Column(String, nullable=True)
    orderID = Column(String, nullable=True)

    def __repr__(self):
        return f"<Purchase(purchaseID={self.purchaseID}, user={self.userID}, product={self.productID})>"
