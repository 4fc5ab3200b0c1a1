"""Unit tests for the record repository over an in-memory store"""

import pytest
from datetime import date
from life_mapper.domain.exceptions import InvalidRecordError, RecordNotFoundError
from life_mapper.domain.models import ExpenseCategory, Frequency, Goal, Income, Profile, ReportMonth
from life_mapper.infrastructure.database.repositories import InMemoryRecordStore, LifeRepository


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def repo(store: InMemoryRecordStore) -> LifeRepository:
    return LifeRepository(store)


def test_empty_collections(repo: LifeRepository):
    assert repo.incomes() == []
    assert repo.reports() == []


def test_add_and_get_round_trip(repo: LifeRepository, store: InMemoryRecordStore):
    income = Income("inc-1", "Main job", 1000.0, Frequency.FORTNIGHTLY, date(2026, 1, 9))

    repo.add_record("incomes", income)

    # Stored as JSON-friendly payloads
    assert store.data["incomes"][0]["next_date"] == "2026-01-09"
    assert store.data["incomes"][0]["frequency"] == "fortnightly"
    assert repo.get_record("incomes", "inc-1") == income


def test_replace_and_delete(repo: LifeRepository):
    repo.add_record("goals", Goal("g1", "Emergency fund", 1000.0))

    repo.replace_record("goals", Goal("g1", "Emergency fund", 2000.0, saved=500.0))
    assert repo.get_record("goals", "g1").target == 2000.0

    repo.delete_record("goals", "g1")
    assert repo.goals() == []


def test_unknown_record_raises(repo: LifeRepository):
    with pytest.raises(RecordNotFoundError):
        repo.get_record("goals", "missing")
    with pytest.raises(RecordNotFoundError):
        repo.replace_record("goals", Goal("missing", "x", 1.0))
    with pytest.raises(RecordNotFoundError):
        repo.delete_record("goals", "missing")


def test_stored_unknown_category_loads_as_other():
    """Test one stale category does not make the whole expense list unreadable"""
    repo = LifeRepository(
        InMemoryRecordStore(
            {"expenses": [{"id": "e1", "name": "Gym", "amount": 40.0, "frequency": "monthly", "category": "Fitness"}]}
        )
    )

    expenses = repo.expenses()

    assert expenses[0].category == ExpenseCategory.OTHER


def test_malformed_payload_raises_invalid_record():
    repo = LifeRepository(InMemoryRecordStore({"incomes": [{"id": "x", "amount": "lots"}]}))

    with pytest.raises(InvalidRecordError):
        repo.incomes()


def test_immigration_steps_seeded_once(repo: LifeRepository, store: InMemoryRecordStore):
    first = repo.list_records("immigration_steps")
    second = repo.list_records("immigration_steps")

    assert len(first) == 6
    assert [s.id for s in first] == [s.id for s in second]
    assert "immigrationSteps" in store.data


def test_documents_fall_back_to_defaults(repo: LifeRepository):
    assert repo.profile() == Profile(currency="USD")
    assert repo.has_document("health") is False

    repo.save_document("profile", Profile(name="Sam", currency="AUD"))

    assert repo.profile().currency == "AUD"
    assert repo.has_document("profile") is True


def test_save_report_replaces_same_month(repo: LifeRepository):
    repo.save_report(ReportMonth("2026-01", 3000.0, 2000.0, 1000.0, {}, 0.0))
    history = repo.save_report(ReportMonth("2026-01", 3000.0, 2500.0, 500.0, {}, 0.0))

    assert len(history) == 1
    assert repo.reports()[0].savings == 500.0
