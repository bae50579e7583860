"""
Category database model.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, Boolean, DateTime, Numeric
from expense_buddy.database import Base


class Category(Base):
    """Spending category with an optional monthly budget ceiling."""

    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(100), nullable=False, unique=True)
    budget = Column(Numeric(12, 2), nullable=True)  # NULL = unlimited, 0 = no spending allowed
    active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
