"""Shared test fixtures."""

import os

# Keep the app's own engine off disk and skip startup seeding during tests
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SEED_DEFAULT_CATEGORIES", "false")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient
from datetime import date
from decimal import Decimal
import uuid

from expense_buddy.database import Base
from expense_buddy.dependencies import get_db
from expense_buddy.main import app
from expense_buddy.models import Category, Expense, RecurringTemplate


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test using in-memory SQLite."""
    # Use StaticPool to ensure all connections use the same in-memory database
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    Base.metadata.create_all(bind=engine)

    # Create session
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_category(db_session):
    """Create a sample category with a budget."""
    category = Category(
        id=str(uuid.uuid4()),
        name="Food",
        budget=Decimal("300.00"),
        active=True
    )
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture
def sample_expense(db_session, sample_category):
    """Create a sample expense in the current month."""
    expense = Expense(
        id=str(uuid.uuid4()),
        date=date.today(),
        amount=Decimal("50.00"),
        category=sample_category.name,
        payment_method="Card",
        description="Weekly groceries"
    )
    db_session.add(expense)
    db_session.commit()
    db_session.refresh(expense)
    return expense


@pytest.fixture
def sample_template(db_session):
    """Create a sample rent template with its category."""
    rent = Category(id=str(uuid.uuid4()), name="Rent", budget=Decimal("1200.00"), active=True)
    template = RecurringTemplate(
        id=str(uuid.uuid4()),
        amount=Decimal("1200.00"),
        category="Rent",
        payment_method="Bank Transfer",
        description="Monthly rent",
        day_of_month=1,
        active=True
    )
    db_session.add_all([rent, template])
    db_session.commit()
    db_session.refresh(template)
    return template
