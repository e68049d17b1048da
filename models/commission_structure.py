# models/commission_structure.py
"""
CommissionStructure model - deduction rates and level override rates.
"""
from decimal import Decimal
from typing import Dict
from sqlalchemy import Column, Integer, DECIMAL, Boolean, JSON
from models.base import Base, AuditMixin


class CommissionStructure(Base, AuditMixin):
    __tablename__ = 'commission_structures'

    structureID = Column(Integer, primary_key=True, autoincrement=True)

    # Fractions of a gross commission (0.05 = 5%)
    tdsPercentage = Column(DECIMAL(6, 4), default=0)
    adminFeePercentage = Column(DECIMAL(6, 4), default=0)
    repurchasePercentage = Column(DECIMAL(6, 4), default=0)

    levelCommissions = Column(JSON, nullable=True)
    # {
    #   "1": "0.05",   # fraction of product price for level 1
    #   "2": "0.03"
    # }

    isActive = Column(Boolean, default=True, index=True)

    def getLevelRates(self) -> Dict[int, Decimal]:
        """Level commission rates with integer keys and Decimal values."""
        if not self.levelCommissions:
            return {}
        return {
            int(level): Decimal(str(rate))
            for level, rate in self.levelCommissions.items()
        }

    def __repr__(self):
        return (
            f"<CommissionStructure(tds={self.tdsPercentage}, admin={self.adminFeePercentage}, "
            f"repurchase={self.repurchasePercentage}, levels={self.levelCommissions})>"
        )
