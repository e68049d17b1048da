"""Pytest configuration and shared fixtures for all tests."""

import os
import sys
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

# Добавить корень проекта в PYTHONPATH
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from models import Base, User, Product, CommissionStructure
from binary_mlm.events.event_bus import eventBus
from binary_mlm.storage.sql_storage import SqlCommissionStorage, SqlProductCatalog
from binary_mlm.services.commission_service import CommissionService
from binary_mlm.utils.clock import planClock


FIXED_NOW = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def session():
    """In-memory SQLite session with all tables created."""
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    db = sessionmaker(bind=engine)()
    yield db
    db.close()
    engine.dispose()


@pytest.fixture(autouse=True)
def frozen_time():
    """Pin the system clock so monthly turnover is deterministic."""
    planClock.freeze(FIXED_NOW)
    yield planClock
    planClock.unfreeze()


@pytest.fixture(autouse=True)
def clean_event_bus():
    eventBus.clear()
    yield eventBus
    eventBus.clear()


@pytest.fixture
def storage(session):
    return SqlCommissionStorage(session)


@pytest.fixture
def catalog(session):
    return SqlProductCatalog(session)


@pytest.fixture
def service(storage, catalog):
    return CommissionService(storage, catalog)


@pytest.fixture
def add_user(session):
    """Factory: add_user("u1", sponsor="u0", parent="u0", side="left")."""

    def _add(userId, sponsor=None, parent=None, side=None, referralCode=None, name=None):
        user = User(
            userID=userId,
            name=name or userId.upper(),
            referralCode=referralCode or f"REF-{userId}",
            sponsorID=sponsor,
            placementParentID=parent,
            placementSide=side
        )
        session.add(user)
        session.commit()
        return user

    return _add


@pytest.fixture
def add_product(session):

    def _add(productId="p1", name="Herbal Tea", price="1000", commissionRate="10"):
        product = Product(
            productID=productId,
            name=name,
            price=Decimal(price),
            commissionRate=Decimal(commissionRate)
        )
        session.add(product)
        session.commit()
        return product

    return _add


@pytest.fixture
def add_structure(session):

    def _add(tds="0.05", admin="0.02", repurchase="0.03", levels=None):
        structure = CommissionStructure(
            tdsPercentage=Decimal(tds),
            adminFeePercentage=Decimal(admin),
            repurchasePercentage=Decimal(repurchase),
            levelCommissions=levels or {},
            isActive=True
        )
        session.add(structure)
        session.commit()
        return structure

    return _add


@pytest.fixture
def add_chain(add_user):
    """Place `count` users as a left-only chain hanging off parent on `side`."""

    def _add(prefix, parent, side, count):
        previous, previousSide = parent, side
        for index in range(count):
            userId = f"{prefix}{index}"
            add_user(userId, parent=previous, side=previousSide)
            previous, previousSide = userId, "left"

    return _add
