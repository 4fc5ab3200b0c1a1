"""Domain models - pure Python dataclasses representing life-tracking records"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Annotated, Dict, List, Optional

from pydantic import BeforeValidator


class Frequency(str, Enum):
    """Recurrence interval of a financial record"""

    WEEKLY = "weekly"
    FORTNIGHTLY = "fortnightly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


INCOME_FREQUENCIES = (Frequency.WEEKLY, Frequency.FORTNIGHTLY, Frequency.MONTHLY)
BNPL_FREQUENCIES = (Frequency.WEEKLY, Frequency.FORTNIGHTLY)


class ExpenseCategory(str, Enum):
    HOUSING = "Housing"
    UTILITIES = "Utilities"
    GROCERIES = "Groceries"
    TRANSPORT = "Transport"
    LOANS = "Loans"
    INSURANCE = "Insurance"
    HEALTHCARE = "Healthcare"
    EDUCATION = "Education"
    CHILDCARE = "Childcare"
    ENTERTAINMENT = "Entertainment"
    UNEXPECTED = "Unexpected"
    OTHER = "Other"

    @classmethod
    def parse(cls, value: object) -> "ExpenseCategory":
        """Match free text case-insensitively, falling back to Other"""
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        for category in cls:
            if category.value.lower() == text:
                return category
        return cls.OTHER


# Stored and submitted categories both fall back to Other instead of failing validation
CategoryField = Annotated[ExpenseCategory, BeforeValidator(ExpenseCategory.parse)]


class BNPLProvider(str, Enum):
    AFTERPAY = "Afterpay"
    STEPPAY = "StepPay"


class RiskBand(str, Enum):
    HEALTHY = "healthy"
    NEEDS_WORK = "needs-work"
    HIGH_RISK = "high-risk"


class RelationshipStatus(str, Enum):
    SINGLE = "single"
    DATING = "dating"
    ENGAGED = "engaged"
    MARRIED = "married"


class Addictions(str, Enum):
    NONE = "none"
    RECOVERING = "recovering"
    ACTIVE = "active"


class ControllingBehaviour(str, Enum):
    NO = "no"
    SOMETIMES = "sometimes"
    YES = "yes"


class FinancialAbuse(str, Enum):
    NO = "no"
    MAYBE = "maybe"
    YES = "yes"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class JobType(str, Enum):
    DESK = "desk"
    PHYSICAL = "physical"


class FitnessGoal(str, Enum):
    FAT_LOSS = "fat-loss"
    MUSCLE_GAIN = "muscle-gain"
    STRENGTH = "strength"
    ENDURANCE = "endurance"


class Feeling(str, Enum):
    JOY = "Joy"
    GRATITUDE = "Gratitude"
    CALM = "Calm"
    PROUD = "Proud"
    HOPEFUL = "Hopeful"
    MOTIVATED = "Motivated"
    NEUTRAL = "Neutral"
    STRESSED = "Stressed"
    ANXIOUS = "Anxious"
    SAD = "Sad"
    ANGRY = "Angry"
    LONELY = "Lonely"
    OVERWHELMED = "Overwhelmed"
    TIRED = "Tired"


# --- Finance records ---


@dataclass
class Profile:
    name: str = ""
    email: str = ""
    phone: str = ""
    country: str = ""
    currency: str = "USD"


@dataclass
class Income:
    """Recurring income stream"""

    id: str
    name: str
    amount: float
    frequency: Frequency  # weekly | fortnightly | monthly
    next_date: date
    include: bool = True  # False excludes it from totals (e.g. partner income)


@dataclass
class Expense:
    """Recurring expense"""

    id: str
    name: str
    amount: float
    frequency: Frequency
    category: CategoryField = ExpenseCategory.OTHER
    next_due: Optional[date] = None  # only used by the calendar export


@dataclass
class BNPLPurchase:
    """Buy-now-pay-later purchase split into at most 4 installments"""

    id: str
    provider: BNPLProvider
    total: float
    start_date: date
    frequency: Frequency  # weekly | fortnightly
    payments_left: int = 4  # 0..4
    note: Optional[str] = None


@dataclass
class Installment:
    """Single payment in a BNPL schedule"""

    due_date: date
    amount: float


@dataclass
class Goal:
    id: str
    title: str
    target: float
    saved: float = 0.0
    deadline: Optional[date] = None
    asap: bool = True  # deadline is ignored for projection when set
    priority: int = 3  # 1 (first) .. 3
    achieved: bool = False


@dataclass
class GoalProjection:
    """Estimated completion for a goal; months_needed/eta_month are None when indeterminate"""

    goal_id: str
    title: str
    priority: int
    asap: bool
    achieved: bool
    months_needed: Optional[int] = None
    eta_month: Optional[str] = None
    eta_label: Optional[str] = None  # e.g. "May 2026"
    deadline: Optional[date] = None


@dataclass
class MonthlyAggregate:
    """Aggregator output for one target month"""

    month: str
    income_total: float
    expense_total: float
    by_category: Dict[str, float]
    bnpl_due: float


@dataclass(frozen=True)
class ReportMonth:
    """Immutable monthly snapshot keyed by month"""

    month: str
    income_total: float
    expense_total: float  # includes BNPL due that month
    savings: float  # never negative
    by_category: Dict[str, float]
    bnpl_due: float
    currency: str = "USD"
    label: str = ""  # e.g. "October 2026"


# --- Relationship ---


@dataclass
class RelationshipData:
    """Single relationship check-in record; ratings are 1..5"""

    status: RelationshipStatus = RelationshipStatus.SINGLE
    partner_name: Optional[str] = None
    months_together: Optional[int] = None
    values_alignment: int = 3
    financial_habits: int = 3
    communication: int = 3
    conflict_resolution: int = 3
    supportiveness: int = 3
    trust_safety: int = 3
    work_reliability: int = 3
    growth_mindset: int = 3
    kids_alignment: int = 3
    lifestyle_alignment: int = 3
    addictions: Addictions = Addictions.NONE
    controlling_behaviour: ControllingBehaviour = ControllingBehaviour.NO
    financial_abuse: FinancialAbuse = FinancialAbuse.NO
    planning_marriage_months: Optional[int] = None
    planning_baby_months: Optional[int] = None
    notes: Optional[str] = None


@dataclass
class RelationshipAssessment:
    score: int  # 0..100
    band: RiskBand
    red_flags: List[str]
    suggestions: List[str]


# --- Health ---


@dataclass
class WeighIn:
    date: date
    weight_kg: float


@dataclass
class WorkoutLog:
    date: date
    minutes: int


@dataclass
class HealthData:
    gender: Gender = Gender.MALE
    age: int = 30
    height_cm: float = 175
    weight_kg: float = 75
    job_type: JobType = JobType.DESK
    hours_per_week: float = 4
    goal: FitnessGoal = FitnessGoal.FAT_LOSS
    conditions: str = ""
    weigh_ins: List[WeighIn] = field(default_factory=list)
    workouts_done: List[WorkoutLog] = field(default_factory=list)


@dataclass
class Exercise:
    name: str
    sets: int
    reps: str


@dataclass
class WorkoutDay:
    day: str
    items: List[Exercise]


@dataclass
class DietAdvice:
    bmi: float
    protein_g: int
    kcal_hint: str
    focus: List[str]
    avoid: List[str]


# --- Planning ---


@dataclass
class BabyCostConfig:
    """Monthly baby cost inputs plus one-off setup and buffer months"""

    diapers: float = 120
    formula: float = 0
    health: float = 50
    clothing: float = 40
    misc: float = 50
    childcare: float = 0
    parent_leave_lost_income: float = 0
    setup: float = 1500
    buffer_months: int = 3


@dataclass
class BabyCostEstimate:
    monthly_cost: float
    upfront_target: float


@dataclass
class ImmigrationStep:
    id: str
    title: str
    target: float = 0.0
    saved: float = 0.0
    notes: Optional[str] = None
    achieved: bool = False


@dataclass
class ImmigrationProgress:
    saved_total: float
    target_total: float
    achieved_count: int
    step_count: int


@dataclass
class FeelLog:
    """Journal entry; one per date"""

    date: date
    feelings: List[Feeling] = field(default_factory=list)
    morning: Optional[str] = None
    evening: Optional[str] = None


# --- Calendar ---


@dataclass
class CalendarEntry:
    """Dated item handed to the calendar exporter"""

    date: date
    label: str
    amount: Optional[float] = None
    description: Optional[str] = None
