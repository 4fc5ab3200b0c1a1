"""Unit tests for monthly aggregation and report snapshots"""

import pytest
from dataclasses import replace
from life_mapper.domain.aggregation import (
    aggregate_month,
    estimate_monthly_savings,
    expenses_by_category,
    total_monthly_income,
)
from life_mapper.domain.models import Expense, Frequency, ReportMonth
from life_mapper.domain.reports import close_month, merge_reports


def test_excluded_income_is_ignored(sample_incomes):
    """Test an income flagged include=False contributes nothing"""
    included_only = [income for income in sample_incomes if income.include]

    assert total_monthly_income(sample_incomes) == pytest.approx(total_monthly_income(included_only))
    assert total_monthly_income(sample_incomes) == pytest.approx(1000 * 26 / 12)


def test_aggregate_month(sample_incomes, sample_expenses, sample_purchases):
    aggregate = aggregate_month(sample_incomes, sample_expenses, sample_purchases, "2026-01")

    assert aggregate.month == "2026-01"
    assert aggregate.income_total == pytest.approx(2166.6667, abs=1e-4)
    assert aggregate.expense_total == pytest.approx(1500 + 10 + 30)
    assert aggregate.by_category == {
        "Housing": pytest.approx(1500.0),
        "Insurance": pytest.approx(10.0),
        "Utilities": pytest.approx(30.0),
    }
    assert aggregate.bnpl_due == pytest.approx(25.0)


def test_aggregate_month_only_bnpl_varies(sample_incomes, sample_expenses, sample_purchases):
    january = aggregate_month(sample_incomes, sample_expenses, sample_purchases, "2026-01")
    february = aggregate_month(sample_incomes, sample_expenses, sample_purchases, "2026-02")

    assert january.income_total == february.income_total
    assert january.expense_total == february.expense_total
    assert february.bnpl_due == pytest.approx(75.0)


def test_aggregate_month_is_idempotent(sample_incomes, sample_expenses, sample_purchases):
    first = aggregate_month(sample_incomes, sample_expenses, sample_purchases, "2026-01")
    second = aggregate_month(sample_incomes, sample_expenses, sample_purchases, "2026-01")

    assert first == second


def test_unknown_category_groups_as_other():
    expenses = [
        Expense("e1", "Gym", 40.0, Frequency.MONTHLY, "fitness"),
        Expense("e2", "Gift", 20.0, Frequency.MONTHLY, "Other"),
        Expense("e3", "Groceries", 100.0, Frequency.MONTHLY, "groceries"),
    ]

    assert expenses_by_category(expenses) == {"Other": 60.0, "Groceries": 100.0}


def test_empty_inputs_aggregate_to_zero():
    aggregate = aggregate_month([], [], [], "2026-05")

    assert aggregate.income_total == 0
    assert aggregate.expense_total == 0
    assert aggregate.by_category == {}
    assert aggregate.bnpl_due == 0


def test_estimate_monthly_savings_floors_at_zero(sample_incomes, sample_expenses, sample_purchases):
    assert estimate_monthly_savings(sample_incomes, sample_expenses, sample_purchases, "2026-01") == pytest.approx(
        2166.6667 - 1540 - 25, abs=1e-4
    )
    assert estimate_monthly_savings([], sample_expenses, [], "2026-01") == 0


def test_close_month_folds_bnpl_into_expenses(sample_incomes, sample_expenses, sample_purchases):
    report = close_month(sample_incomes, sample_expenses, sample_purchases, "AUD", "2026-02")

    assert report.month == "2026-02"
    assert report.currency == "AUD"
    assert report.label == "February 2026"
    assert report.bnpl_due == pytest.approx(75.0)
    assert report.expense_total == pytest.approx(1540 + 75)
    assert report.savings == pytest.approx(report.income_total - report.expense_total)


def test_close_month_savings_never_negative(sample_expenses):
    report = close_month([], sample_expenses, [], "USD", "2026-01")

    assert report.savings == 0
    assert report.expense_total > 0


def make_report(month: str, savings: float) -> ReportMonth:
    return ReportMonth(month, 1000.0, 1000.0 - savings, savings, {}, 0.0)


def test_merge_reports_replaces_same_month():
    """Test closing a month twice keeps one record, the later one"""
    history = merge_reports([], make_report("2026-01", 100.0))
    history = merge_reports(history, make_report("2026-01", 250.0))

    assert len(history) == 1
    assert history[0].savings == 250.0


def test_merge_reports_sorted_by_month():
    history = [make_report("2026-03", 1.0), make_report("2025-12", 2.0)]

    merged = merge_reports(history, make_report("2026-01", 3.0))

    assert [report.month for report in merged] == ["2025-12", "2026-01", "2026-03"]


def test_merge_reports_does_not_mutate_history():
    history = [make_report("2026-01", 1.0)]

    merge_reports(history, replace(history[0], savings=9.0))

    assert history[0].savings == 1.0
