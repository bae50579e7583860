"""
Recurring expense template database model.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, Boolean, DateTime, Integer, Numeric, Text
from expense_buddy.database import Base


class RecurringTemplate(Base):
    """Blueprint for an expense that is generated once every month."""

    __tablename__ = "recurring_templates"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    amount = Column(Numeric(12, 2), nullable=False)
    category = Column(String(100), nullable=False)
    payment_method = Column(String(50), nullable=False)
    description = Column(Text, nullable=False, default="")
    day_of_month = Column(Integer, nullable=False, default=1)  # 1-31, clamped to month length
    active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
