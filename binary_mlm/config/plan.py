# binary_mlm/config/plan.py
"""
Compensation plan configuration and constants.
"""
from enum import Enum
from decimal import Decimal


class TransactionType(Enum):
    RETAIL_PROFIT = "retail_profit"
    REPURCHASE_BONUS = "repurchase_bonus"
    TEAM_MATCHING_BONUS = "team_matching_bonus"
    ROYALTY_BONUS = "royalty_bonus"
    REFERRAL_BONUS = "referral_bonus"


class TransactionStatus(Enum):
    COMPLETED = "completed"


# Ledger categories that make up company turnover
TURNOVER_TYPES = (
    TransactionType.RETAIL_PROFIT.value,
    TransactionType.REPURCHASE_BONUS.value,
)

# Bonus rates
REPURCHASE_BONUS_PERCENTAGE = Decimal("0.05")  # 5% от цены при повторной покупке
PAIR_BONUS_AMOUNT = Decimal("100")  # За каждую пару левой/правой ноги
ROYALTY_BONUS_PERCENTAGE = Decimal("0.01")  # 1% от оборота месяца

# Thresholds
ROYALTY_LEG_THRESHOLD = 10  # Обе ноги должны быть строго больше

# Level commission deductions are computed but not written to the ledger
LEDGER_LEVEL_DEDUCTIONS = False
