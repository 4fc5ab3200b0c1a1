"""Monthly aggregation of incomes, expenses and BNPL obligations"""

from collections import defaultdict
from typing import Dict, Iterable, List

from life_mapper.domain.frequency import monthly_equivalent
from life_mapper.domain.installments import bnpl_due_in_month
from life_mapper.domain.models import BNPLPurchase, Expense, ExpenseCategory, Income, MonthlyAggregate


def total_monthly_income(incomes: Iterable[Income]) -> float:
    """Monthly-equivalent income, skipping records flagged as excluded"""
    return sum(
        monthly_equivalent(income.amount, income.frequency)
        for income in incomes
        if income.include is not False
    )


def total_monthly_expense(expenses: Iterable[Expense]) -> float:
    return sum(monthly_equivalent(expense.amount, expense.frequency) for expense in expenses)


def expenses_by_category(expenses: Iterable[Expense]) -> Dict[str, float]:
    """Monthly-equivalent expense per category, in first-seen order"""
    totals: Dict[str, float] = defaultdict(float)
    for expense in expenses:
        category = ExpenseCategory.parse(expense.category)
        totals[category.value] += monthly_equivalent(expense.amount, expense.frequency)
    return dict(totals)


def aggregate_month(
    incomes: List[Income],
    expenses: List[Expense],
    purchases: List[BNPLPurchase],
    month: str,
) -> MonthlyAggregate:
    """
    Compute monthly totals for a target month.

    Income and expense totals are cadence-normalized rates and are the same
    for every month. Only BNPL installments are discrete dated events, so only
    they are filtered by the target month.
    """
    return MonthlyAggregate(
        month=month,
        income_total=total_monthly_income(incomes),
        expense_total=total_monthly_expense(expenses),
        by_category=expenses_by_category(expenses),
        bnpl_due=bnpl_due_in_month(purchases, month),
    )


def estimate_monthly_savings(
    incomes: List[Income],
    expenses: List[Expense],
    purchases: List[BNPLPurchase],
    month: str,
) -> float:
    """Monthly savings rate used for goal projection, floored at 0"""
    aggregate = aggregate_month(incomes, expenses, purchases, month)
    return max(0.0, aggregate.income_total - aggregate.expense_total - aggregate.bnpl_due)
