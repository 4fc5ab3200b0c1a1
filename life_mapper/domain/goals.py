"""Goal completion projection"""

import math
from datetime import date
from typing import List, Optional

from life_mapper.domain.models import Goal, GoalProjection
from life_mapper.utils.date_utils import add_months, month_key, month_name


def months_needed(target: float, saved: float, monthly_savings: float) -> Optional[int]:
    """
    Whole months of saving required to close the gap.

    Returns None when the goal is already met (target <= saved) or can never
    be reached at the current rate (monthly_savings <= 0).
    """
    if target <= saved or monthly_savings <= 0:
        return None
    return math.ceil((target - saved) / monthly_savings)


def project_goal(goal: Goal, monthly_savings: float, as_of: date) -> GoalProjection:
    """
    Estimate when a goal completes.

    ASAP goals get an ETA month (as_of advanced by months_needed); deadline
    goals skip projection and echo their stored deadline.
    """
    projection = GoalProjection(
        goal_id=goal.id,
        title=goal.title,
        priority=goal.priority,
        asap=goal.asap,
        achieved=goal.achieved,
    )

    if not goal.asap:
        projection.deadline = goal.deadline
        return projection

    needed = months_needed(goal.target, goal.saved, monthly_savings)
    if needed is not None:
        projection.months_needed = needed
        projection.eta_month = month_key(add_months(as_of, needed))
        projection.eta_label = month_name(projection.eta_month)
    return projection


def project_goals(goals: List[Goal], monthly_savings: float, as_of: date) -> List[GoalProjection]:
    """Project every goal, highest priority (1) first"""
    ordered = sorted(goals, key=lambda g: g.priority or 3)
    return [project_goal(goal, monthly_savings, as_of) for goal in ordered]
