"""GET /v1/calendar.ics - export paydays, bills, BNPL installments and workouts"""

from datetime import date

from fastapi import APIRouter, Depends, Request
from starlette.responses import Response

from life_mapper.api.dependencies import get_repository, get_request_id, get_today
from life_mapper.config import settings
from life_mapper.domain.calendar import collect_calendar_entries
from life_mapper.infrastructure.database.repositories import LifeRepository
from life_mapper.infrastructure.export.ics import build_ics
from life_mapper.infrastructure.observability.logging import log_calendar_export
from life_mapper.infrastructure.observability.metrics import record_calendar_export

router = APIRouter()

CALENDAR_FILENAME = "life-mapper-calendar.ics"


@router.get("/calendar.ics")
def export_calendar(
    request: Request,
    repo: LifeRepository = Depends(get_repository),
    today: date = Depends(get_today),
):
    """Download an .ics file importable into phone or Google calendars"""
    health = repo.get_document("health") if repo.has_document("health") else None
    entries = collect_calendar_entries(
        repo.profile(),
        repo.incomes(),
        repo.expenses(),
        repo.purchases(),
        health,
        settings.calendar_occurrences,
    )
    content = build_ics(entries, settings.calendar_prodid, today)

    record_calendar_export(len(entries))
    log_calendar_export(get_request_id(request), len(entries))

    return Response(
        content=content,
        media_type="text/calendar",
        headers={"Content-Disposition": f'attachment; filename="{CALENDAR_FILENAME}"'},
    )
