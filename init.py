from datetime import datetime
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from models import Base
import config


def get_session(databaseUrl: str = None):
    """Создает и возвращает фабрику сессий SQLAlchemy и движок базы данных"""
    url = databaseUrl or config.DATABASE_URL
    connectArgs = {"check_same_thread": False} if url.startswith("sqlite") else {}
    engine = create_engine(url, connect_args=connectArgs)
    session_factory = sessionmaker(bind=engine)
    return session_factory, engine


def init_tables(engine):
    """Инициализирует таблицы базы данных"""
    Base.metadata.create_all(engine)


def setupLogging(level: str = None):
    """Настраивает корневой логгер по LOG_LEVEL из окружения"""
    logging.basicConfig(
        level=getattr(logging, (level or config.LOG_LEVEL).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)


def setupClock(systemTime: str = None):
    """Замораживает часы плана, если задано SYSTEM_TIME"""
    from binary_mlm.utils.clock import planClock

    value = systemTime or config.SYSTEM_TIME
    if value:
        planClock.freeze(datetime.fromisoformat(value))
    return planClock
