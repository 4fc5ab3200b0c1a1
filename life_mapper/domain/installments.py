"""Installment schedule generation for BNPL purchases"""

from collections import defaultdict
from typing import Dict, Iterable, List

from life_mapper.domain.frequency import advance
from life_mapper.domain.models import BNPLPurchase, Installment
from life_mapper.utils.date_utils import month_key
from life_mapper.utils.numbers import clamp, round_money

MAX_INSTALLMENTS = 4


def installment_amount(total: float) -> float:
    """Every installment is a quarter of the purchase total, rounded to cents"""
    return round_money(total / MAX_INSTALLMENTS)


def generate_bnpl_schedule(purchase: BNPLPurchase) -> List[Installment]:
    """
    Expand a purchase into its remaining installments.

    Requirements:
    - min(4, payments_left) installments
    - First due on start_date, then every 7 (weekly) or 14 (fortnightly) days
    - Each amount is round(total / 4, 2), even when fewer than 4 payments remain

    Example:
        total=100, payments_left=4, weekly from 2026-01-01
        -> 25.00 on 01-01, 01-08, 01-15, 01-22
        total=100, payments_left=2
        -> 25.00 twice (not 50.00)
    """
    count = int(clamp(purchase.payments_left, 0, MAX_INSTALLMENTS))
    amount = installment_amount(purchase.total)

    return [
        Installment(due_date=advance(purchase.start_date, purchase.frequency, i), amount=amount)
        for i in range(count)
    ]


def bnpl_due_in_month(purchases: Iterable[BNPLPurchase], month: str) -> float:
    """Sum of installments across all purchases whose due date falls in month"""
    return sum(
        inst.amount
        for purchase in purchases
        for inst in generate_bnpl_schedule(purchase)
        if month_key(inst.due_date) == month
    )


def bnpl_due_by_month(purchases: Iterable[BNPLPurchase]) -> Dict[str, float]:
    """Month key -> total BNPL installments due"""
    due: Dict[str, float] = defaultdict(float)
    for purchase in purchases:
        for inst in generate_bnpl_schedule(purchase):
            due[month_key(inst.due_date)] += inst.amount
    return dict(sorted(due.items()))
