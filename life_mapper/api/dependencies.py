"""Dependency injection for FastAPI endpoints"""

from datetime import date

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from life_mapper.infrastructure.database.repositories import LifeRepository, SqlRecordStore
from life_mapper.infrastructure.database.session import get_db
from life_mapper.utils.date_utils import month_key


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_repository(db: Session = Depends(get_db)) -> LifeRepository:
    """Provide the record repository bound to the request's session"""
    return LifeRepository(SqlRecordStore(db))


def get_today() -> date:
    """Current date; the engine never reads the clock itself"""
    return date.today()


def resolve_month(month: str | None, today: date) -> str:
    return month or month_key(today)
