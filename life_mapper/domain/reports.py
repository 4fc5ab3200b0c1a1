"""Monthly report snapshots and history merging"""

from typing import Dict, Iterable, List

from life_mapper.domain.aggregation import aggregate_month
from life_mapper.domain.models import BNPLPurchase, Expense, Income, ReportMonth
from life_mapper.utils.date_utils import month_name


def close_month(
    incomes: List[Income],
    expenses: List[Expense],
    purchases: List[BNPLPurchase],
    currency: str,
    month: str,
) -> ReportMonth:
    """
    Freeze the month's aggregate into a ReportMonth.

    The expense total includes BNPL installments due in the month, and
    savings never go below 0. Currency is carried for display only.
    """
    aggregate = aggregate_month(incomes, expenses, purchases, month)
    expense_total = aggregate.expense_total + aggregate.bnpl_due

    return ReportMonth(
        month=month,
        income_total=aggregate.income_total,
        expense_total=expense_total,
        savings=max(0.0, aggregate.income_total - expense_total),
        by_category=dict(aggregate.by_category),
        bnpl_due=aggregate.bnpl_due,
        currency=currency,
        label=month_name(month),
    )


def merge_reports(history: Iterable[ReportMonth], snapshot: ReportMonth) -> List[ReportMonth]:
    """Merge a snapshot into history by month key; the snapshot replaces any existing month"""
    merged: Dict[str, ReportMonth] = {report.month: report for report in history}
    merged[snapshot.month] = snapshot
    return sorted(merged.values(), key=lambda r: r.month)
