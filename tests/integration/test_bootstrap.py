"""Tests for database bootstrap and logging setup."""

import logging
from datetime import datetime, timezone

from sqlalchemy import inspect

import init


def test_init_tables_creates_schema():
    sessionFactory, engine = init.get_session("sqlite://")
    init.init_tables(engine)

    tables = set(inspect(engine).get_table_names())
    assert {"users", "products", "purchases", "transactions", "commission_structures"} <= tables

    session = sessionFactory()
    session.close()
    engine.dispose()


def test_setup_logging_quiets_sqlalchemy():
    init.setupLogging("debug")

    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING


def test_setup_clock_freezes_at_system_time(frozen_time):
    clock = init.setupClock("2025-12-31T22:00:00")

    assert clock.now == datetime(2025, 12, 31, 22, 0, tzinfo=timezone.utc)
    assert clock.isCurrentMonth(datetime(2025, 12, 1))


def test_setup_clock_without_system_time(frozen_time, monkeypatch):
    monkeypatch.setattr(init.config, "SYSTEM_TIME", None)
    frozen_time.unfreeze()

    assert not init.setupClock().isFrozen
