# binary_mlm/__init__.py
"""
Binary MLM commission core - purchase recording and commission distribution.
"""

# Services
from binary_mlm.services.commission_service import CommissionService
from binary_mlm.services.deduction_service import applyDeductions, Deductions
from binary_mlm.services.ledger_service import LedgerService, LedgerWriteError
from binary_mlm.services.bonus_service import BonusService

# Network
from binary_mlm.network.tree import NetworkMember, subtreeSize, pairCount

# Storage
from binary_mlm.storage.base import CommissionStorage, ProductCatalog
from binary_mlm.storage.sql_storage import SqlCommissionStorage, SqlProductCatalog
from binary_mlm.storage.product_catalog import HttpProductCatalog

# Config
from binary_mlm.config.plan import TransactionType, TransactionStatus

# Utilities
from binary_mlm.utils.clock import planClock
from binary_mlm.utils.sponsor_resolver import resolveSponsor

# Events
from binary_mlm.events.event_bus import eventBus, PlanEvents

__all__ = [
    # Services
    'CommissionService',
    'applyDeductions',
    'Deductions',
    'LedgerService',
    'LedgerWriteError',
    'BonusService',

    # Network
    'NetworkMember',
    'subtreeSize',
    'pairCount',

    # Storage
    'CommissionStorage',
    'ProductCatalog',
    'SqlCommissionStorage',
    'SqlProductCatalog',
    'HttpProductCatalog',

    # Config
    'TransactionType',
    'TransactionStatus',

    # Utils
    'planClock',
    'resolveSponsor',

    # Events
    'eventBus',
    'PlanEvents',
]
