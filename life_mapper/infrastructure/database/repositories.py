"""Data access layer for life-tracking record collections"""

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from life_mapper.config import settings
from life_mapper.domain.exceptions import InvalidRecordError, RecordNotFoundError, StorageError
from life_mapper.domain.models import (
    BabyCostConfig,
    BNPLPurchase,
    Expense,
    FeelLog,
    Goal,
    HealthData,
    ImmigrationStep,
    Income,
    Profile,
    RelationshipData,
    ReportMonth,
)
from life_mapper.domain.planning import default_immigration_steps
from life_mapper.domain.reports import merge_reports
from life_mapper.infrastructure.database.models import RecordCollection


class RecordStore(ABC):
    """Key -> JSON document storage; the only way the app touches persistence"""

    @abstractmethod
    def load(self, key: str) -> Optional[Any]:
        """Return the stored JSON payload, or None if the key was never saved"""

    @abstractmethod
    def save(self, key: str, payload: Any) -> None:
        """Replace the payload stored under key"""

    def commit(self) -> None:
        """Make pending saves durable"""

    def rollback(self) -> None:
        """Discard pending saves"""


class SqlRecordStore(RecordStore):
    """RecordStore backed by the record_collection table"""

    def __init__(self, db: Session):
        self.db = db

    def load(self, key: str) -> Optional[Any]:
        try:
            row = self.db.get(RecordCollection, key)
        except SQLAlchemyError as e:
            raise StorageError(f"Could not load {key}: {e}") from e
        return row.payload if row is not None else None

    def save(self, key: str, payload: Any) -> None:
        try:
            row = self.db.get(RecordCollection, key)
            if row is None:
                self.db.add(RecordCollection(key=key, payload=payload))
            else:
                row.payload = payload
            self.db.flush()
        except SQLAlchemyError as e:
            raise StorageError(f"Could not save {key}: {e}") from e

    def commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(f"Could not commit: {e}") from e

    def rollback(self) -> None:
        self.db.rollback()


class InMemoryRecordStore(RecordStore):
    """Dict-backed store for tests and scripting"""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self.data: Dict[str, Any] = dict(initial or {})

    def load(self, key: str) -> Optional[Any]:
        return self.data.get(key)

    def save(self, key: str, payload: Any) -> None:
        self.data[key] = payload


@dataclass(frozen=True)
class CollectionSpec:
    """Storage key and record type of a list collection"""

    key: str
    record_type: type

    @property
    def adapter(self) -> TypeAdapter:
        return _list_adapter(self.record_type)


@dataclass(frozen=True)
class DocumentSpec:
    """Storage key, type and default of a single-record document"""

    key: str
    record_type: type
    default: Callable[[], Any]


LIST_COLLECTIONS: Dict[str, CollectionSpec] = {
    "incomes": CollectionSpec("incomes", Income),
    "expenses": CollectionSpec("expenses", Expense),
    "bnpl": CollectionSpec("bnpl", BNPLPurchase),
    "goals": CollectionSpec("goals", Goal),
    "immigration_steps": CollectionSpec("immigrationSteps", ImmigrationStep),
    "feel_logs": CollectionSpec("feelLogs", FeelLog),
    "reports": CollectionSpec("reports", ReportMonth),
}

DOCUMENTS: Dict[str, DocumentSpec] = {
    "profile": DocumentSpec("profile", Profile, lambda: Profile(currency=settings.default_currency)),
    "relationship": DocumentSpec("relationship", RelationshipData, RelationshipData),
    "health": DocumentSpec("health", HealthData, HealthData),
    "baby": DocumentSpec("babyCfg", BabyCostConfig, BabyCostConfig),
}

_adapters: Dict[Any, TypeAdapter] = {}


def _list_adapter(record_type: type) -> TypeAdapter:
    if (list, record_type) not in _adapters:
        _adapters[(list, record_type)] = TypeAdapter(List[record_type])
    return _adapters[(list, record_type)]


def _adapter(record_type: type) -> TypeAdapter:
    if record_type not in _adapters:
        _adapters[record_type] = TypeAdapter(record_type)
    return _adapters[record_type]


def new_record_id() -> str:
    return str(uuid.uuid4())


class LifeRepository:
    """
    Typed repository over a RecordStore.

    Records are converted between domain dataclasses and JSON payloads with
    pydantic TypeAdapters. Every mutation replaces the whole collection.
    """

    def __init__(self, store: RecordStore):
        self.store = store

    def commit(self) -> None:
        self.store.commit()

    def rollback(self) -> None:
        self.store.rollback()

    # --- list collections ---

    def list_records(self, collection: str) -> List[Any]:
        spec = LIST_COLLECTIONS[collection]
        payload = self.store.load(spec.key)
        if payload is None:
            return self._default_records(collection)
        try:
            return spec.adapter.validate_python(payload)
        except ValidationError as e:
            raise InvalidRecordError(f"Stored {spec.key} are malformed: {e}") from e

    def save_records(self, collection: str, records: List[Any]) -> None:
        spec = LIST_COLLECTIONS[collection]
        self.store.save(spec.key, spec.adapter.dump_python(records, mode="json"))

    def get_record(self, collection: str, record_id: str) -> Any:
        for record in self.list_records(collection):
            if record.id == record_id:
                return record
        raise RecordNotFoundError(collection, record_id)

    def add_record(self, collection: str, record: Any) -> Any:
        records = self.list_records(collection)
        records.append(record)
        self.save_records(collection, records)
        return record

    def replace_record(self, collection: str, record: Any) -> Any:
        """Full-record replace by id"""
        records = self.list_records(collection)
        if not any(r.id == record.id for r in records):
            raise RecordNotFoundError(collection, record.id)
        self.save_records(collection, [record if r.id == record.id else r for r in records])
        return record

    def delete_record(self, collection: str, record_id: str) -> None:
        records = self.list_records(collection)
        remaining = [r for r in records if r.id != record_id]
        if len(remaining) == len(records):
            raise RecordNotFoundError(collection, record_id)
        self.save_records(collection, remaining)

    def _default_records(self, collection: str) -> List[Any]:
        if collection == "immigration_steps":
            # Persist the starter steps so their ids stay stable across reads
            steps = default_immigration_steps(new_record_id)
            self.save_records(collection, steps)
            return steps
        return []

    # --- single-record documents ---

    def get_document(self, name: str) -> Any:
        spec = DOCUMENTS[name]
        payload = self.store.load(spec.key)
        if payload is None:
            return spec.default()
        try:
            return _adapter(spec.record_type).validate_python(payload)
        except ValidationError as e:
            raise InvalidRecordError(f"Stored {spec.key} is malformed: {e}") from e

    def has_document(self, name: str) -> bool:
        return self.store.load(DOCUMENTS[name].key) is not None

    def save_document(self, name: str, document: Any) -> Any:
        spec = DOCUMENTS[name]
        self.store.save(spec.key, _adapter(spec.record_type).dump_python(document, mode="json"))
        return document

    # --- typed shortcuts used by the engine routes ---

    def incomes(self) -> List[Income]:
        return self.list_records("incomes")

    def expenses(self) -> List[Expense]:
        return self.list_records("expenses")

    def purchases(self) -> List[BNPLPurchase]:
        return self.list_records("bnpl")

    def goals(self) -> List[Goal]:
        return self.list_records("goals")

    def reports(self) -> List[ReportMonth]:
        return self.list_records("reports")

    def profile(self) -> Profile:
        return self.get_document("profile")

    def save_report(self, snapshot: ReportMonth) -> List[ReportMonth]:
        """Merge snapshot into history (same month is replaced) and persist"""
        history = merge_reports(self.reports(), snapshot)
        self.save_records("reports", history)
        return history
