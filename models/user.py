# models/user.py
"""
User model - a member of the compensation plan.
"""
from sqlalchemy import Column, String, DateTime
from datetime import datetime, timezone
from models.base import Base


class User(Base):
    __tablename__ = 'users'

    # Primary identification
    userID = Column(String(64), primary_key=True)
    name = Column(String, nullable=False)
    referralCode = Column(String, unique=True, nullable=False, index=True)
    sponsorID = Column(String, nullable=True)  # userID или referralCode спонсора
    createdAt = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    # Binary placement, written by the tree builder and only read here
    placementParentID = Column(String(64), nullable=True, index=True)
    placementSide = Column(String(5), nullable=True)  # left, right

    def __repr__(self):
        return f"<User(userID={self.userID}, name={self.name}, sponsor={self.sponsorID})>"
