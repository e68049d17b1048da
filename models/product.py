# models/product.py
from sqlalchemy import Column, String, DECIMAL
from models.base import Base, AuditMixin


class Product(Base, AuditMixin):
    __tablename__ = 'products'

    productID = Column(String(64), primary_key=True)
    name = Column(String, nullable=False)
    price = Column(DECIMAL(12, 2), nullable=False, default=0)
    commissionRate = Column(DECIMAL(5, 2), nullable=False, default=0)  # Проценты, 0-100

    def __repr__(self):
        return f"<Product(productID={self.productID}, name={self.name}, price={self.price})>"
