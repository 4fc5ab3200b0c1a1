"""Rule-based financial advisor"""

import re
from typing import List, Optional

from life_mapper.domain.models import Goal, HealthData

EMERGENCY_PATTERN = re.compile(r"emergency", re.IGNORECASE)


def build_advice(
    monthly_savings: float,
    goals: List[Goal],
    health: Optional[HealthData],
    savings_threshold: float = 200.0,
) -> List[str]:
    """
    Quick guidance from current savings, goals and health tracking.

    Rules (in order):
    - monthly savings below threshold -> push income/expenses
    - no goal mentioning "emergency" -> suggest an emergency fund
    - health tracking never initialized -> nudge to open it
    Falls back to a single encouragement when nothing triggers.
    """
    advice: List[str] = []

    if monthly_savings < savings_threshold:
        advice.append("Increase income or cut expenses to reach goals faster.")
    if not any(EMERGENCY_PATTERN.search(goal.title or "") for goal in goals):
        advice.append("Add an 'Emergency fund' goal to build resilience.")
    if health is None:
        advice.append("Open Health tab once to initialize tracking.")

    if not advice:
        advice.append("Great work — keep executing your plan!")
    return advice
