"""Baby budgeting, immigration progress and feelings journal endpoints"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from life_mapper.api.dependencies import get_repository, get_request_id, get_today, resolve_month
from life_mapper.api.v1.schemas import MONTH_PATTERN, BabyCostIn, FeelingTallyResponse, FeelLogIn
from life_mapper.domain.models import BabyCostConfig, BabyCostEstimate, FeelLog, ImmigrationProgress
from life_mapper.domain.planning import (
    estimate_baby_costs,
    immigration_progress,
    tally_feelings,
    upsert_feel_log,
)
from life_mapper.infrastructure.database.repositories import LifeRepository
from life_mapper.infrastructure.observability.logging import log_record_change
from life_mapper.infrastructure.observability.metrics import record_mutation_counter

router = APIRouter()


@router.get("/baby", response_model=BabyCostConfig)
def get_baby_config(repo: LifeRepository = Depends(get_repository)):
    return repo.get_document("baby")


@router.put("/baby", response_model=BabyCostConfig)
def put_baby_config(
    body: BabyCostIn,
    repo: LifeRepository = Depends(get_repository),
    request_id: str = Depends(get_request_id),
):
    cfg = repo.save_document("baby", body.to_domain())
    repo.commit()
    record_mutation_counter.labels(collection="baby", action="replace").inc()
    log_record_change(request_id, "baby", "replace", None)
    return cfg


@router.get("/baby/estimate", response_model=BabyCostEstimate)
def get_baby_estimate(repo: LifeRepository = Depends(get_repository)):
    return estimate_baby_costs(repo.get_document("baby"))


@router.get("/immigration/progress", response_model=ImmigrationProgress)
def get_immigration_progress(repo: LifeRepository = Depends(get_repository)):
    progress = immigration_progress(repo.list_records("immigration_steps"))
    repo.commit()
    return progress


@router.get("/journal", response_model=List[FeelLog])
def get_journal(repo: LifeRepository = Depends(get_repository)):
    return repo.list_records("feel_logs")


@router.put("/journal/{day}", response_model=FeelLog)
def put_journal_entry(
    day: date,
    body: FeelLogIn,
    repo: LifeRepository = Depends(get_repository),
    request_id: str = Depends(get_request_id),
):
    """Save the journal entry for a day, replacing any earlier entry for it"""
    entry = FeelLog(date=day, feelings=body.feelings, morning=body.morning or None, evening=body.evening or None)
    repo.save_records("feel_logs", upsert_feel_log(repo.list_records("feel_logs"), entry))
    repo.commit()
    record_mutation_counter.labels(collection="feel_logs", action="replace").inc()
    log_record_change(request_id, "feel_logs", "replace", day.isoformat())
    return entry


@router.get("/journal/tally", response_model=FeelingTallyResponse)
def get_journal_tally(
    month: Optional[str] = Query(None, pattern=MONTH_PATTERN),
    repo: LifeRepository = Depends(get_repository),
    today: date = Depends(get_today),
):
    target = resolve_month(month, today)
    tally = tally_feelings(repo.list_records("feel_logs"), target)
    return FeelingTallyResponse(month=target, tally=tally, has_entries=any(tally.values()))
