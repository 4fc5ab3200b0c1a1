"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from life_mapper.api.dependencies import get_today
from life_mapper.api.main import create_app
from life_mapper.infrastructure.database.models import Base
from life_mapper.infrastructure.database.session import get_db
from life_mapper.domain.models import (
    BNPLProvider,
    BNPLPurchase,
    Expense,
    ExpenseCategory,
    Frequency,
    Income,
)


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TODAY = date(2026, 1, 15)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database and a fixed 'today'"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: TODAY
    return TestClient(app)


@pytest.fixture
def sample_incomes() -> list[Income]:
    return [
        Income("inc-1", "Main job", 1000.0, Frequency.FORTNIGHTLY, date(2026, 1, 9)),
        Income("inc-2", "Partner job", 500.0, Frequency.WEEKLY, date(2026, 1, 12), include=False),
    ]


@pytest.fixture
def sample_expenses() -> list[Expense]:
    return [
        Expense("exp-1", "Rent", 1500.0, Frequency.MONTHLY, ExpenseCategory.HOUSING, date(2026, 2, 1)),
        Expense("exp-2", "Car insurance", 120.0, Frequency.YEARLY, ExpenseCategory.INSURANCE),
        Expense("exp-3", "Power", 90.0, Frequency.QUARTERLY, ExpenseCategory.UTILITIES),
    ]


@pytest.fixture
def sample_purchases() -> list[BNPLPurchase]:
    """One purchase spanning January and February"""
    return [
        BNPLPurchase("bnpl-1", BNPLProvider.AFTERPAY, 100.0, date(2026, 1, 29), Frequency.WEEKLY, 4),
    ]
