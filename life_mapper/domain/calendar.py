"""Dated calendar entries for paydays, bills, BNPL installments and workouts"""

from typing import List, Optional

from life_mapper.domain.frequency import occurrences
from life_mapper.domain.installments import generate_bnpl_schedule
from life_mapper.domain.models import (
    BNPLProvider,
    BNPLPurchase,
    CalendarEntry,
    Expense,
    ExpenseCategory,
    Frequency,
    HealthData,
    Income,
    Profile,
)


def _fmt_amount(amount: float) -> str:
    return f"{amount:g}"


def collect_calendar_entries(
    profile: Profile,
    incomes: List[Income],
    expenses: List[Expense],
    purchases: List[BNPLPurchase],
    health: Optional[HealthData],
    occurrence_count: int = 6,
) -> List[CalendarEntry]:
    """
    Build (date, label, amount) entries for the calendar exporter.

    - Each income yields occurrence_count paydays from its next date
    - Each expense with a next-due date yields occurrence_count bills
    - Every BNPL installment in each purchase schedule
    - Every logged workout
    """
    currency = profile.currency
    entries: List[CalendarEntry] = []

    for income in incomes:
        frequency = Frequency(income.frequency).value
        for day in occurrences(income.next_date, income.frequency, occurrence_count):
            entries.append(
                CalendarEntry(
                    date=day,
                    label=f"Payday — {income.name} ({currency})",
                    amount=income.amount,
                    description=f"Amount: {_fmt_amount(income.amount)} • {frequency}",
                )
            )

    for expense in expenses:
        if expense.next_due is None:
            continue
        category = ExpenseCategory.parse(expense.category).value
        for day in occurrences(expense.next_due, expense.frequency, occurrence_count):
            entries.append(
                CalendarEntry(
                    date=day,
                    label=f"Bill — {expense.name}",
                    amount=expense.amount,
                    description=f"Amount: {_fmt_amount(expense.amount)} {currency} • {category}",
                )
            )

    for purchase in purchases:
        provider = BNPLProvider(purchase.provider).value
        for inst in generate_bnpl_schedule(purchase):
            entries.append(
                CalendarEntry(
                    date=inst.due_date,
                    label=f"BNPL — {provider}",
                    amount=inst.amount,
                    description=f"Amount: {_fmt_amount(inst.amount)} {currency}",
                )
            )

    if health is not None:
        for workout in health.workouts_done:
            entries.append(
                CalendarEntry(
                    date=workout.date,
                    label=f"Workout ({workout.minutes}min)",
                    description="Logged via Life Mapper",
                )
            )

    return entries
