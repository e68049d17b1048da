# models/transaction.py
"""
Transaction model - append-only ledger of purchases, commissions and bonuses.
"""
from sqlalchemy import Column, Integer, String, DECIMAL, DateTime, Text
from datetime import datetime, timezone
from models.base import Base


class Transaction(Base):
    __tablename__ = 'transactions'

    # Primary key (uuid4)
    transactionID = Column(String(36), primary_key=True)

    # Beneficiary
    userID = Column(String(64), nullable=False, index=True)

    # Signed amount: negative entries are deductions kept for audit
    amount = Column(DECIMAL(14, 4), nullable=False)
    type = Column(String, nullable=False, index=True)  # retail_profit, repurchase_bonus, ...
    description = Column(Text, nullable=True)
    date = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    status = Column(String, default="completed")

    # Optional correlation
    level = Column(Integer, nullable=True)  # Уровень аплайна (1, 2, 3...)
    paymentID = Column(String, nullable=True, index=True)

    def __repr__(self):
        return f"<Transaction(user={self.userID}, type={self.type}, amount={self.amount})>"
