# binary_mlm/services/matching_bonus_service.py
"""
Team matching bonus - pairs of left/right recruits in the sponsor's tree.
"""
from dataclasses import dataclass
import logging

from binary_mlm.network.tree import NetworkMember, subtreeSize, pairCount
from binary_mlm.services.bonus_service import BonusService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchingResult:
    leftCount: int
    rightCount: int
    rootPairs: int
    totalTreePairs: int
    creditedPairs: int


class MatchingBonusService:

    def __init__(self, bonusService: BonusService):
        self.bonusService = bonusService

    @staticmethod
    def calculatePairs(root: NetworkMember) -> MatchingResult:
        leftCount = subtreeSize(root.left)
        rightCount = subtreeSize(root.right)
        rootPairs = min(leftCount, rightCount)

        # totalTreePairs already contains rootPairs, so the credited count
        # equals max(rootPairs, totalTreePairs).
        totalTreePairs = pairCount(root)
        additionalPairs = max(0, totalTreePairs - rootPairs)

        return MatchingResult(
            leftCount=leftCount,
            rightCount=rightCount,
            rootPairs=rootPairs,
            totalTreePairs=totalTreePairs,
            creditedPairs=rootPairs + additionalPairs
        )

    async def processMatchingBonus(self, sponsorId: str, sponsorName: str, root: NetworkMember) -> MatchingResult:
        result = self.calculatePairs(root)

        if result.creditedPairs > 0:
            logger.info(
                f"Adding {result.creditedPairs} team matching pairs for {sponsorName} "
                f"(root={result.rootPairs}, tree={result.totalTreePairs})"
            )
            await self.bonusService.addTeamMatchingBonus(sponsorId, result.creditedPairs)

        return result
