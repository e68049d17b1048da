# binary_mlm/services/commission_service.py
"""
Commission distribution for a single retail purchase.
Main entry point: recordProductPurchase.
"""
from decimal import Decimal
from typing import Dict, Optional
import logging

from models import User, Product, CommissionStructure
from binary_mlm.config.plan import TransactionType, LEDGER_LEVEL_DEDUCTIONS
from binary_mlm.events.event_bus import eventBus, PlanEvents
from binary_mlm.services.bonus_service import BonusService
from binary_mlm.services.deduction_service import applyDeductions
from binary_mlm.services.ledger_service import LedgerService
from binary_mlm.services.level_commission_service import LevelCommissionService
from binary_mlm.services.matching_bonus_service import MatchingBonusService
from binary_mlm.services.purchase_service import PurchaseService
from binary_mlm.services.repurchase_service import RepurchaseService
from binary_mlm.services.royalty_service import RoyaltyService
from binary_mlm.storage.base import CommissionStorage, ProductCatalog
from binary_mlm.utils.sponsor_resolver import resolveSponsor

logger = logging.getLogger(__name__)


class CommissionService:
    """Records a purchase and distributes the commissions it generates."""

    def __init__(
            self,
            storage: CommissionStorage,
            catalog: ProductCatalog,
            bonusService: Optional[BonusService] = None,
            ledgerLevelDeductions: bool = LEDGER_LEVEL_DEDUCTIONS
    ):
        self.storage = storage
        self.catalog = catalog
        self.ledger = LedgerService(storage)
        self.bonusService = bonusService or BonusService(self.ledger)

        self.purchaseService = PurchaseService(self.ledger)
        self.levelService = LevelCommissionService(storage, self.ledger, ledgerLevelDeductions)
        self.repurchaseService = RepurchaseService(storage)
        self.matchingService = MatchingBonusService(self.bonusService)
        self.royaltyService = RoyaltyService(storage, self.bonusService)

    async def recordProductPurchase(
            self,
            currentUser: Optional[User],
            productId: str,
            paymentId: str,
            orderId: Optional[str] = None
    ) -> bool:
        """
        Record a purchase by currentUser and distribute commissions.

        Returns False when nobody is logged in, the product is unknown, or
        the purchase itself could not be recorded. Commission failures
        after the purchase is recorded are logged and do not change the
        result.
        """
        try:
            if not currentUser:
                logger.error("No user logged in")
                return False

            buyerId = currentUser.userID
            allUsers = await self.storage.getAllUsers()
            sponsor = resolveSponsor(currentUser.sponsorID, allUsers)

            product = await self.catalog.findProduct(productId)
            if not product:
                logger.error(f"Product {productId} not found")
                return False

            structure = await self.storage.getCommissionStructure()

            await self.purchaseService.recordPurchase(buyerId, product, paymentId)
        except Exception as e:
            logger.error(f"Error processing product purchase: {e}", exc_info=True)
            return False

        await eventBus.emit(PlanEvents.PURCHASE_RECORDED, {
            "userId": buyerId,
            "productId": productId,
            "paymentId": paymentId,
            "orderId": orderId
        })

        if sponsor:
            results = await self.distributeCommissions(currentUser, sponsor, product, structure)
            await eventBus.emit(PlanEvents.COMMISSIONS_DISTRIBUTED, results)

        await self._rememberPurchase(buyerId, productId, paymentId, orderId)
        return True

    async def distributeCommissions(
            self,
            buyer: User,
            sponsor: User,
            product: Product,
            structure: CommissionStructure
    ) -> Dict:
        """
        Best effort: an error stops the remaining steps but nothing already
        posted is rolled back.
        """
        results = {
            "success": True,
            "buyer": buyer.userID,
            "sponsor": sponsor.userID,
            "commissions": [],
            "totalDistributed": Decimal("0"),
            "isRepurchase": False,
            "matchingPairs": 0,
            "royaltyTurnover": None
        }

        try:
            # 1. Direct retail profit to the sponsor
            direct = await self._postDirectCommission(sponsor, product, structure)
            results["commissions"].append(direct)
            results["totalDistributed"] += direct["amount"]

            # 2. Level commissions up the chain
            if structure.levelCommissions:
                levelCommissions = await self.levelService.processLevelCommissions(
                    sponsor, product, structure
                )
                for commission in levelCommissions:
                    results["commissions"].append(commission)
                    results["totalDistributed"] += commission["amount"]
                    await eventBus.emit(PlanEvents.LEVEL_COMMISSION_PAID, commission)

            # 3. Repurchase bonus
            if await self.repurchaseService.isRepurchase(buyer.userID, product.productID):
                logger.info(f"This is a repurchase of {product.name} by {buyer.name}")
                results["isRepurchase"] = True
                await self.bonusService.addRepurchaseBonus(sponsor.userID, product.price, product.name)
                await eventBus.emit(PlanEvents.REPURCHASE_DETECTED, {
                    "userId": buyer.userID,
                    "sponsorId": sponsor.userID,
                    "productId": product.productID
                })

            # 4. Team matching bonus and royalty from the sponsor's tree
            sponsorNetwork = await self.storage.getUserNetworkMembers(sponsor.userID)

            matching = await self.matchingService.processMatchingBonus(
                sponsor.userID, sponsor.name, sponsorNetwork
            )
            results["matchingPairs"] = matching.creditedPairs
            if matching.creditedPairs > 0:
                await eventBus.emit(PlanEvents.MATCHING_BONUS_CREDITED, {
                    "sponsorId": sponsor.userID,
                    "pairs": matching.creditedPairs
                })

            turnover = await self.royaltyService.processRoyalty(
                sponsor.userID, sponsor.name, matching.leftCount, matching.rightCount
            )
            results["royaltyTurnover"] = turnover
            if turnover is not None:
                await eventBus.emit(PlanEvents.ROYALTY_BONUS_CREDITED, {
                    "sponsorId": sponsor.userID,
                    "turnover": turnover
                })

        except Exception as e:
            logger.error(f"Error distributing commissions: {e}", exc_info=True)
            results["success"] = False
            results["error"] = str(e)

        logger.info(
            f"Processed purchase of {product.name} by {buyer.userID}: "
            f"{len(results['commissions'])} commissions, "
            f"total {results['totalDistributed']}"
        )

        return results

    async def _postDirectCommission(
            self,
            sponsor: User,
            product: Product,
            structure: CommissionStructure
    ) -> Dict:
        commissionRate = Decimal(str(product.commissionRate)) / Decimal("100")
        commissionAmount = Decimal(str(product.price)) * commissionRate
        deductions = applyDeductions(commissionAmount, structure)

        await self.ledger.post(
            userId=sponsor.userID,
            amount=deductions.net,
            transactionType=TransactionType.RETAIL_PROFIT,
            description=(
                f"Retail profit commission for {product.name} purchase "
                f"({product.commissionRate}%)"
            )
        )
        await self.ledger.postDeductionItems(sponsor.userID, deductions, product.name)

        logger.info(f"Distributed retail profit commission to {sponsor.name}: {deductions.net}")

        return {
            "userId": sponsor.userID,
            "level": 0,
            "percentage": commissionRate,
            "gross": deductions.gross,
            "amount": deductions.net,
            "tds": deductions.tds,
            "adminFee": deductions.adminFee,
            "repurchaseAllocation": deductions.repurchaseAllocation,
            "type": "direct"
        }

    async def _rememberPurchase(
            self,
            buyerId: str,
            productId: str,
            paymentId: str,
            orderId: Optional[str]
    ):
        """Purchase history feeds repurchase detection on the next order."""
        try:
            await self.storage.addPurchaseRecord(buyerId, productId, paymentId, orderId)
        except Exception as e:
            logger.error(
                f"Failed to save purchase history for {buyerId} / {productId}: {e}",
                exc_info=True
            )
