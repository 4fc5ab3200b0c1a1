"""Baby budgeting, immigration savings steps and feelings journal"""

from typing import Dict, Iterable, List

from life_mapper.domain.models import (
    BabyCostConfig,
    BabyCostEstimate,
    Feeling,
    FeelLog,
    ImmigrationProgress,
    ImmigrationStep,
)
from life_mapper.utils.date_utils import month_key

DEFAULT_IMMIGRATION_STEPS = (
    ("Emergency fund", 5000.0),
    ("Reliable car", 0.0),
    ("University savings", 0.0),
    ("PR application", 0.0),
    ("Dream car (2nd)", 0.0),
    ("House deposit", 0.0),
)


def baby_monthly_cost(cfg: BabyCostConfig) -> float:
    return (
        cfg.diapers
        + cfg.formula
        + cfg.health
        + cfg.clothing
        + cfg.misc
        + cfg.childcare
        + cfg.parent_leave_lost_income
    )


def estimate_baby_costs(cfg: BabyCostConfig) -> BabyCostEstimate:
    """Monthly running cost and the upfront target (setup + buffer months of running cost)"""
    monthly = baby_monthly_cost(cfg)
    return BabyCostEstimate(monthly_cost=monthly, upfront_target=cfg.setup + monthly * cfg.buffer_months)


def default_immigration_steps(id_factory) -> List[ImmigrationStep]:
    return [
        ImmigrationStep(id=id_factory(), title=title, target=target)
        for title, target in DEFAULT_IMMIGRATION_STEPS
    ]


def immigration_progress(steps: Iterable[ImmigrationStep]) -> ImmigrationProgress:
    steps = list(steps)
    return ImmigrationProgress(
        saved_total=sum(s.saved for s in steps),
        target_total=sum(s.target for s in steps),
        achieved_count=sum(1 for s in steps if s.achieved),
        step_count=len(steps),
    )


def upsert_feel_log(logs: Iterable[FeelLog], entry: FeelLog) -> List[FeelLog]:
    """Replace any log for the same date with entry"""
    kept = [log for log in logs if log.date != entry.date]
    return sorted(kept + [entry], key=lambda log: log.date)


def tally_feelings(logs: Iterable[FeelLog], month: str) -> Dict[str, int]:
    """Count of each feeling logged in month; every feeling is present, most frequent first"""
    tally = {feeling.value: 0 for feeling in Feeling}
    for log in logs:
        if month_key(log.date) != month:
            continue
        for feeling in log.feelings:
            tally[Feeling(feeling).value] += 1
    return dict(sorted(tally.items(), key=lambda item: item[1], reverse=True))
