"""GET /v1/finance/* - derived monthly totals, BNPL schedules and goal ETAs"""

from datetime import date
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from life_mapper.api.dependencies import get_repository, get_today, resolve_month
from life_mapper.api.v1.schemas import MONTH_PATTERN, BNPLScheduleItem, SummaryResponse
from life_mapper.domain.aggregation import aggregate_month, estimate_monthly_savings
from life_mapper.domain.goals import project_goals
from life_mapper.domain.installments import bnpl_due_by_month, generate_bnpl_schedule
from life_mapper.domain.models import GoalProjection
from life_mapper.infrastructure.database.repositories import LifeRepository

router = APIRouter()


@router.get("/finance/summary", response_model=SummaryResponse)
def get_summary(
    month: Optional[str] = Query(None, pattern=MONTH_PATTERN, description="Target month YYYY-MM"),
    repo: LifeRepository = Depends(get_repository),
    today: date = Depends(get_today),
):
    """
    Monthly totals for a target month.

    Income/expense totals are cadence-normalized rates; only BNPL
    installments are filtered to the month.
    """
    target = resolve_month(month, today)
    aggregate = aggregate_month(repo.incomes(), repo.expenses(), repo.purchases(), target)

    return SummaryResponse(
        month=aggregate.month,
        currency=repo.profile().currency,
        income_total=aggregate.income_total,
        expense_total=aggregate.expense_total,
        by_category=aggregate.by_category,
        bnpl_due=aggregate.bnpl_due,
        monthly_savings=max(0.0, aggregate.income_total - aggregate.expense_total - aggregate.bnpl_due),
    )


@router.get("/finance/bnpl-schedules", response_model=List[BNPLScheduleItem])
def get_bnpl_schedules(repo: LifeRepository = Depends(get_repository)):
    """Remaining installments for every BNPL purchase"""
    return [
        BNPLScheduleItem(
            purchase_id=purchase.id,
            provider=purchase.provider,
            installments=generate_bnpl_schedule(purchase),
        )
        for purchase in repo.purchases()
    ]


@router.get("/finance/bnpl-due", response_model=Dict[str, float])
def get_bnpl_due(repo: LifeRepository = Depends(get_repository)):
    """Month key -> BNPL installments due"""
    return bnpl_due_by_month(repo.purchases())


@router.get("/finance/goal-projections", response_model=List[GoalProjection])
def get_goal_projections(
    repo: LifeRepository = Depends(get_repository),
    today: date = Depends(get_today),
):
    """
    Project goals against the current monthly savings rate.

    Returns:
        Projections ordered by priority; ASAP goals carry months_needed and
        eta_month (null when already met or unreachable), deadline goals echo
        their deadline.
    """
    monthly_savings = estimate_monthly_savings(
        repo.incomes(), repo.expenses(), repo.purchases(), resolve_month(None, today)
    )
    return project_goals(repo.goals(), monthly_savings, today)
