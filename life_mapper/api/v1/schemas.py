"""Pydantic schemas for API request/response validation"""

import datetime as dt
from datetime import date
from typing import Annotated, Dict, List, Optional

from pydantic import AfterValidator, BaseModel, BeforeValidator, Field

from life_mapper.domain.models import (
    Addictions,
    BabyCostConfig,
    BNPLProvider,
    BNPL_FREQUENCIES,
    BNPLPurchase,
    CategoryField,
    ControllingBehaviour,
    DietAdvice,
    Expense,
    ExpenseCategory,
    Feeling,
    FinancialAbuse,
    FitnessGoal,
    Frequency,
    Gender,
    Goal,
    HealthData,
    ImmigrationStep,
    INCOME_FREQUENCIES,
    Income,
    Installment,
    JobType,
    Profile,
    RelationshipData,
    RelationshipStatus,
    WorkoutDay,
)
from life_mapper.utils.numbers import clamp, round_half_up, to_number


def _non_negative(value: object) -> float:
    return max(0.0, to_number(value))


def _whole(value: object) -> int:
    return int(round_half_up(to_number(value)))


def _payments_left(value: object) -> int:
    return int(clamp(_whole(value), 0, 4))


def _priority(value: object) -> int:
    return int(clamp(_whole(value) or 3, 1, 3))


def _rating(value: object) -> int:
    return int(clamp(_whole(value) or 1, 1, 5))


def _cadence_in(allowed):
    def check(value: Frequency) -> Frequency:
        if value not in allowed:
            raise ValueError(f"frequency must be one of: {', '.join(f.value for f in allowed)}")
        return value

    return check


# Invalid numbers coerce to 0 at the data-entry boundary instead of failing
Money = Annotated[float, BeforeValidator(_non_negative)]
Number = Annotated[float, BeforeValidator(to_number)]
WholeNumber = Annotated[int, BeforeValidator(_whole)]
PaymentsLeft = Annotated[int, BeforeValidator(_payments_left)]
Priority = Annotated[int, BeforeValidator(_priority)]
Rating = Annotated[int, BeforeValidator(_rating)]
Category = CategoryField
IncomeFrequency = Annotated[Frequency, AfterValidator(_cadence_in(INCOME_FREQUENCIES))]
BNPLFrequency = Annotated[Frequency, AfterValidator(_cadence_in(BNPL_FREQUENCIES))]

MONTH_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"


class IncomeIn(BaseModel):
    """Request body for creating/replacing an income"""

    name: str = "Main job"
    amount: Money = 0.0
    frequency: IncomeFrequency = Frequency.FORTNIGHTLY
    next_date: date = Field(default_factory=date.today)
    include: bool = True

    def to_domain(self, record_id: str) -> Income:
        return Income(id=record_id, **self.model_dump())


class ExpenseIn(BaseModel):
    name: str = ""
    amount: Money = 0.0
    frequency: Frequency = Frequency.MONTHLY
    category: Category = ExpenseCategory.OTHER
    next_due: Optional[date] = None

    def to_domain(self, record_id: str) -> Expense:
        return Expense(id=record_id, **self.model_dump())


class BNPLPurchaseIn(BaseModel):
    provider: BNPLProvider = BNPLProvider.AFTERPAY
    total: Money = 0.0
    start_date: date = Field(default_factory=date.today)
    frequency: BNPLFrequency = Frequency.WEEKLY
    payments_left: PaymentsLeft = 4
    note: Optional[str] = None

    def to_domain(self, record_id: str) -> BNPLPurchase:
        return BNPLPurchase(id=record_id, **self.model_dump())


class GoalIn(BaseModel):
    title: str = "New goal"
    target: Money = 0.0
    saved: Money = 0.0
    deadline: Optional[date] = None
    asap: bool = True
    priority: Priority = 3
    achieved: bool = False

    def to_domain(self, record_id: str) -> Goal:
        return Goal(id=record_id, **self.model_dump())


class ImmigrationStepIn(BaseModel):
    title: str = "New step"
    target: Money = 0.0
    saved: Money = 0.0
    notes: Optional[str] = None
    achieved: bool = False

    def to_domain(self, record_id: str) -> ImmigrationStep:
        return ImmigrationStep(id=record_id, **self.model_dump())


class ProfileIn(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    country: str = ""
    currency: str = Field("USD", min_length=1, description="Display-only currency code")

    def to_domain(self) -> Profile:
        return Profile(**self.model_dump())


class RelationshipIn(BaseModel):
    """Relationship check-in; ratings are rounded and clamped into 1..5"""

    status: RelationshipStatus = RelationshipStatus.SINGLE
    partner_name: Optional[str] = None
    months_together: Optional[WholeNumber] = None
    values_alignment: Rating = 3
    financial_habits: Rating = 3
    communication: Rating = 3
    conflict_resolution: Rating = 3
    supportiveness: Rating = 3
    trust_safety: Rating = 3
    work_reliability: Rating = 3
    growth_mindset: Rating = 3
    kids_alignment: Rating = 3
    lifestyle_alignment: Rating = 3
    addictions: Addictions = Addictions.NONE
    controlling_behaviour: ControllingBehaviour = ControllingBehaviour.NO
    financial_abuse: FinancialAbuse = FinancialAbuse.NO
    planning_marriage_months: Optional[WholeNumber] = None
    planning_baby_months: Optional[WholeNumber] = None
    notes: Optional[str] = None

    def to_domain(self) -> RelationshipData:
        return RelationshipData(**self.model_dump())


class HealthIn(BaseModel):
    """Health profile; logged weigh-ins/workouts are kept when the profile is replaced"""

    gender: Gender = Gender.MALE
    age: WholeNumber = 30
    height_cm: Number = 175
    weight_kg: Number = 75
    job_type: JobType = JobType.DESK
    hours_per_week: Number = 4
    goal: FitnessGoal = FitnessGoal.FAT_LOSS
    conditions: str = ""


class WeighInIn(BaseModel):
    date: dt.date = Field(default_factory=dt.date.today)
    weight_kg: Number = 0.0


class WorkoutIn(BaseModel):
    date: dt.date = Field(default_factory=dt.date.today)
    minutes: WholeNumber = 45


class BabyCostIn(BaseModel):
    diapers: Money = 120
    formula: Money = 0
    health: Money = 50
    clothing: Money = 40
    misc: Money = 50
    childcare: Money = 0
    parent_leave_lost_income: Money = 0
    setup: Money = 1500
    buffer_months: WholeNumber = 3

    def to_domain(self) -> BabyCostConfig:
        return BabyCostConfig(**self.model_dump())


class FeelLogIn(BaseModel):
    feelings: List[Feeling] = Field(default_factory=list)
    morning: Optional[str] = None
    evening: Optional[str] = None


class CloseMonthRequest(BaseModel):
    """Request body for POST /v1/reports/close; month defaults to the current month"""

    month: Optional[str] = Field(None, pattern=MONTH_PATTERN)


class SummaryResponse(BaseModel):
    """Response for GET /v1/finance/summary"""

    month: str
    currency: str
    income_total: float
    expense_total: float
    by_category: Dict[str, float]
    bnpl_due: float
    monthly_savings: float


class BNPLScheduleItem(BaseModel):
    purchase_id: str
    provider: BNPLProvider
    installments: List[Installment]


class HealthPlanResponse(BaseModel):
    bmi: float
    workout_plan: List[WorkoutDay]
    diet: DietAdvice


class AdvisorResponse(BaseModel):
    month: str
    monthly_savings: float
    advice: List[str]


class FeelingTallyResponse(BaseModel):
    month: str
    tally: Dict[str, int]
    has_entries: bool


def health_to_domain(body: HealthIn, existing: HealthData) -> HealthData:
    return HealthData(
        **body.model_dump(),
        weigh_ins=list(existing.weigh_ins),
        workouts_done=list(existing.workouts_done),
    )
