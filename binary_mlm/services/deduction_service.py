# binary_mlm/services/deduction_service.py
"""
Deduction pipeline: gross commission -> net plus three audit line items.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class Deductions:
    gross: Decimal
    net: Decimal
    tds: Decimal
    adminFee: Decimal
    repurchaseAllocation: Decimal


def _rate(structure: Any, name: str) -> Decimal:
    value = getattr(structure, name, None) if structure is not None else None
    if value is None:
        return Decimal("0")
    return Decimal(str(value))


def applyDeductions(grossAmount, structure) -> Deductions:
    """
    Split a gross commission using the structure's TDS, admin fee and
    repurchase rates. Missing rates count as zero.
    net + tds + adminFee + repurchaseAllocation == gross.
    """
    gross = Decimal(str(grossAmount))

    tds = gross * _rate(structure, "tdsPercentage")
    adminFee = gross * _rate(structure, "adminFeePercentage")
    repurchaseAllocation = gross * _rate(structure, "repurchasePercentage")

    net = gross - tds - adminFee - repurchaseAllocation

    return Deductions(
        gross=gross,
        net=net,
        tds=tds,
        adminFee=adminFee,
        repurchaseAllocation=repurchaseAllocation
    )
