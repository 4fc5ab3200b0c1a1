"""POST /v1/reports/close and GET /v1/reports - monthly snapshots"""

import time
import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from life_mapper.api.dependencies import get_repository, get_request_id, get_today, resolve_month
from life_mapper.api.v1.schemas import CloseMonthRequest
from life_mapper.domain.exceptions import InvalidRecordError, StorageError
from life_mapper.domain.models import ReportMonth
from life_mapper.domain.reports import close_month
from life_mapper.infrastructure.database.repositories import LifeRepository
from life_mapper.infrastructure.observability.logging import log_report_saved
from life_mapper.infrastructure.observability.metrics import record_report_snapshot, storage_failures_counter

router = APIRouter()


@router.post("/reports/close", response_model=ReportMonth)
def close_report_month(
    request: Request,
    request_body: Optional[CloseMonthRequest] = None,
    repo: LifeRepository = Depends(get_repository),
    today: date = Depends(get_today),
):
    """
    Snapshot a month's totals into the report history.

    Flow:
    1. Load incomes, expenses, BNPL purchases and profile currency
    2. Aggregate the target month once and freeze it as a ReportMonth
    3. Merge into history by month key (an existing snapshot is replaced)
    4. Persist and return the snapshot
    """
    start_time = time.time()
    request_id = get_request_id(request)
    month = resolve_month(request_body.month if request_body else None, today)

    try:
        snapshot = close_month(
            repo.incomes(),
            repo.expenses(),
            repo.purchases(),
            repo.profile().currency,
            month,
        )
        history = repo.save_report(snapshot)
        repo.commit()

        duration_ms = (time.time() - start_time) * 1000
        record_report_snapshot(snapshot.savings)
        log_report_saved(request_id, snapshot.month, snapshot.savings, len(history), duration_ms)

        return snapshot

    except StorageError as e:
        storage_failures_counter.inc()
        repo.rollback()
        logging.error(f"Storage error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Could not save report. Please try again.")

    except InvalidRecordError as e:
        repo.rollback()
        logging.warning(f"Invalid stored records: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/reports", response_model=List[ReportMonth])
def get_reports(repo: LifeRepository = Depends(get_repository)):
    """Report history sorted by month"""
    return sorted(repo.reports(), key=lambda r: r.month)
