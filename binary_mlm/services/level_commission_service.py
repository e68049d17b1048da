# binary_mlm/services/level_commission_service.py
"""
Level commission walker - per-level overrides up the sponsor chain.
"""
from decimal import Decimal
from typing import List, Dict
import logging

from models import User, Product, CommissionStructure
from binary_mlm.config.plan import TransactionType, LEDGER_LEVEL_DEDUCTIONS
from binary_mlm.services.deduction_service import applyDeductions
from binary_mlm.services.ledger_service import LedgerService
from binary_mlm.storage.base import CommissionStorage
from binary_mlm.utils.sponsor_resolver import resolveSponsor

logger = logging.getLogger(__name__)


class LevelCommissionService:
    """Pays levelCommissions[n] of the product price to the n-th upline sponsor."""

    def __init__(
            self,
            storage: CommissionStorage,
            ledger: LedgerService,
            ledgerDeductions: bool = LEDGER_LEVEL_DEDUCTIONS
    ):
        self.storage = storage
        self.ledger = ledger
        self.ledgerDeductions = ledgerDeductions

    async def processLevelCommissions(
            self,
            sponsor: User,
            product: Product,
            structure: CommissionStructure
    ) -> List[Dict]:
        """
        Walk the upline starting above the sponsor.
        The level counter bounds the walk, so a cyclic sponsor chain
        still stops after maxLevel steps.
        """
        commissions = []

        try:
            levelRates = structure.getLevelRates()
            if not levelRates:
                return commissions

            allUsers = await self.storage.getAllUsers()
            usersById = {user.userID: user for user in allUsers}

            currentUserId = sponsor.userID
            currentLevel = 1
            maxLevel = max(levelRates)

            while currentLevel <= maxLevel:
                currentUser = usersById.get(currentUserId)
                if not currentUser or not currentUser.sponsorID:
                    break  # End of upline

                uplineSponsor = resolveSponsor(currentUser.sponsorID, allUsers)
                if not uplineSponsor:
                    break

                levelRate = levelRates.get(currentLevel)
                if levelRate:
                    commissions.append(
                        await self._payLevel(uplineSponsor, product, structure, currentLevel, levelRate)
                    )

                currentUserId = uplineSponsor.userID
                currentLevel += 1

        except Exception as e:
            logger.error(f"Error processing level commissions: {e}", exc_info=True)

        return commissions

    async def _payLevel(
            self,
            uplineSponsor: User,
            product: Product,
            structure: CommissionStructure,
            level: int,
            levelRate: Decimal
    ) -> Dict:
        levelCommissionAmount = Decimal(str(product.price)) * levelRate
        deductions = applyDeductions(levelCommissionAmount, structure)

        await self.ledger.post(
            userId=uplineSponsor.userID,
            amount=deductions.net,
            transactionType=TransactionType.RETAIL_PROFIT,
            description=f"Level {level} commission for product purchase ({levelRate * 100}%)",
            level=level
        )

        if self.ledgerDeductions:
            await self.ledger.postDeductionItems(
                uplineSponsor.userID, deductions, product.name, level=level
            )

        logger.info(
            f"Distributed level {level} commission to {uplineSponsor.name}: {deductions.net} "
            f"(tds={deductions.tds}, admin={deductions.adminFee}, "
            f"repurchase={deductions.repurchaseAllocation})"
        )

        return {
            "userId": uplineSponsor.userID,
            "level": level,
            "percentage": levelRate,
            "gross": deductions.gross,
            "amount": deductions.net,
            "type": "level"
        }
