"""Integration tests for the SQLAlchemy collaborators."""

from decimal import Decimal

import pytest

import config
from binary_mlm.services.bonus_service import BonusService
from binary_mlm.services.ledger_service import LedgerService


class TestNetworkTree:

    @pytest.mark.asyncio
    async def test_reads_placement_into_binary_tree(self, storage, add_user):
        add_user("root")
        add_user("a", parent="root", side="left")
        add_user("b", parent="root", side="right")
        add_user("c", parent="a", side="right")

        tree = await storage.getUserNetworkMembers("root")

        assert tree.userID == "root"
        assert tree.left.userID == "a"
        assert tree.right.userID == "b"
        assert tree.left.left is None
        assert tree.left.right.userID == "c"
        assert tree.right.children == []

    @pytest.mark.asyncio
    async def test_single_left_leg(self, storage, add_user):
        add_user("root")
        add_user("a", parent="root", side="LEFT")

        tree = await storage.getUserNetworkMembers("root")

        assert len(tree.children) == 1
        assert tree.left.userID == "a"

    @pytest.mark.asyncio
    async def test_duplicate_slot_is_skipped(self, storage, add_user):
        add_user("root")
        add_user("a", parent="root", side="left")
        add_user("z", parent="root", side="left")

        tree = await storage.getUserNetworkMembers("root")

        assert tree.left.userID in ("a", "z")
        assert tree.right is None

    @pytest.mark.asyncio
    async def test_unknown_root_is_empty(self, storage):
        tree = await storage.getUserNetworkMembers("ghost")

        assert tree.userID == "ghost"
        assert tree.children == []


class TestCommissionStructure:

    @pytest.mark.asyncio
    async def test_defaults_when_nothing_stored(self, storage):
        structure = await storage.getCommissionStructure()

        assert structure.tdsPercentage == config.DEFAULT_TDS_PERCENTAGE
        assert structure.adminFeePercentage == config.DEFAULT_ADMIN_FEE_PERCENTAGE
        assert structure.repurchasePercentage == config.DEFAULT_REPURCHASE_PERCENTAGE
        assert structure.getLevelRates() == config.DEFAULT_LEVEL_COMMISSIONS

    @pytest.mark.asyncio
    async def test_latest_active_structure_wins(self, storage, add_structure):
        add_structure(tds="0.01")
        add_structure(tds="0.10", levels={"3": "0.02"})

        structure = await storage.getCommissionStructure()

        assert structure.tdsPercentage == Decimal("0.10")
        assert structure.getLevelRates() == {3: Decimal("0.02")}


class TestBonusPosting:

    @pytest.fixture
    def bonuses(self, storage):
        return BonusService(LedgerService(storage))

    @pytest.mark.asyncio
    async def test_bonus_amounts(self, bonuses, storage):
        await bonuses.addRepurchaseBonus("s", Decimal("1000"), "Herbal Tea")
        await bonuses.addTeamMatchingBonus("s", 3)
        await bonuses.addRoyaltyBonus("s", Decimal("2500"))

        byType = {t.type: t.amount for t in await storage.getAllTransactions()}
        assert byType == {
            "repurchase_bonus": Decimal("50"),
            "team_matching_bonus": Decimal("300"),
            "royalty_bonus": Decimal("25"),
        }

    @pytest.mark.asyncio
    async def test_prior_purchases_by_user(self, storage):
        await storage.addPurchaseRecord("b", "p1", "pay-1")
        await storage.addPurchaseRecord("c", "p2", "pay-2", orderId="o-2")

        assert [p.productID for p in await storage.getPriorPurchases("b")] == ["p1"]
        assert await storage.getPriorPurchases("nobody") == []
