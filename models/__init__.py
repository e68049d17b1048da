# models/__init__.py
"""
Database models for the commission core.
Import all models here for easy access.
"""

# Base and mixins
from models.base import Base, AuditMixin

# Core models
from models.user import User
from models.product import Product
from models.purchase import Purchase
from models.transaction import Transaction
from models.commission_structure import CommissionStructure

__all__ = [
    # Base
    'Base',
    'AuditMixin',

    # Core
    'User',
    'Product',
    'Purchase',
    'Transaction',
    'CommissionStructure',
]
