"""GET /v1/advisor - quick rule-based guidance"""

from datetime import date

from fastapi import APIRouter, Depends

from life_mapper.api.dependencies import get_repository, get_today, resolve_month
from life_mapper.api.v1.schemas import AdvisorResponse
from life_mapper.config import settings
from life_mapper.domain.advisor import build_advice
from life_mapper.domain.aggregation import estimate_monthly_savings
from life_mapper.infrastructure.database.repositories import LifeRepository

router = APIRouter()


@router.get("/advisor", response_model=AdvisorResponse)
def get_advice(
    repo: LifeRepository = Depends(get_repository),
    today: date = Depends(get_today),
):
    month = resolve_month(None, today)
    monthly_savings = estimate_monthly_savings(repo.incomes(), repo.expenses(), repo.purchases(), month)
    health = repo.get_document("health") if repo.has_document("health") else None

    return AdvisorResponse(
        month=month,
        monthly_savings=monthly_savings,
        advice=build_advice(monthly_savings, repo.goals(), health, settings.advisor_savings_threshold),
    )
