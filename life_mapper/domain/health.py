"""Health planning - BMI, weekly workout split and diet guidance"""

from typing import List

from life_mapper.domain.models import (
    DietAdvice,
    Exercise,
    FitnessGoal,
    HealthData,
    JobType,
    WorkoutDay,
)
from life_mapper.utils.numbers import round_half_up

PUSH = [Exercise("Barbell Bench Press", 4, "6-8"), Exercise("Overhead Press", 3, "8-10"), Exercise("Incline DB Press", 3, "10-12")]
PULL = [Exercise("Deadlift", 3, "3-5"), Exercise("Bent-Over Row", 4, "6-8"), Exercise("Lat Pulldown / Pull-ups", 3, "8-12")]
LEGS = [Exercise("Back Squat", 4, "5-8"), Exercise("Romanian Deadlift", 3, "8-10"), Exercise("Lunges / Leg Press", 3, "10-12")]
FULL = [Exercise("Goblet Squat", 3, "10-12"), Exercise("Push-ups", 3, "8-15"), Exercise("DB Row", 3, "10-12"), Exercise("Plank", 3, "30-45s")]

PHYSICAL_JOB_VOLUME = 0.9


def bmi(weight_kg: float, height_cm: float) -> float:
    """Body mass index to one decimal; 0 when weight or height is missing"""
    if not weight_kg or not height_cm:
        return 0.0
    metres = height_cm / 100
    return round(weight_kg / (metres * metres), 1)


def training_days(hours_per_week: float) -> int:
    if hours_per_week >= 7:
        return 5
    if hours_per_week >= 5:
        return 4
    return 3


def _split_for_goal(goal: FitnessGoal, days: int) -> List[WorkoutDay]:
    extra = days >= 4

    if goal == FitnessGoal.STRENGTH:
        split = [WorkoutDay("Day 1 — Legs", LEGS), WorkoutDay("Day 2 — Push", PUSH), WorkoutDay("Day 3 — Pull", PULL)]
        if extra:
            split.append(WorkoutDay("Day 4 — Full body", FULL))
    elif goal == FitnessGoal.MUSCLE_GAIN:
        split = [
            WorkoutDay("Day 1 — Push (Hypertrophy)", PUSH + [Exercise("Cable Fly", 3, "12-15")]),
            WorkoutDay("Day 2 — Pull (Hypertrophy)", PULL + [Exercise("Face Pulls", 3, "12-15")]),
            WorkoutDay("Day 3 — Legs (Hypertrophy)", LEGS + [Exercise("Calf Raises", 3, "12-15")]),
        ]
        if extra:
            split.append(
                WorkoutDay(
                    "Day 4 — Upper pump",
                    [Exercise("DB Press", 3, "10-12"), Exercise("Lat Pulldown", 3, "10-12"), Exercise("Curls", 3, "10-12")],
                )
            )
    elif goal == FitnessGoal.ENDURANCE:
        split = [
            WorkoutDay("Day 1 — Full-body strength", FULL),
            WorkoutDay("Day 2 — Cardio Intervals", [Exercise("Bike/Row/Run intervals", 8, "45s hard / 75s easy")]),
            WorkoutDay("Day 3 — Tempo cardio", [Exercise("Steady state 35–45min", 1, "Zone 2–3")]),
        ]
        if extra:
            split.append(WorkoutDay("Day 4 — Mobility + core", [Exercise("Hip flow + plank", 4, "60–90s")]))
    else:
        split = [
            WorkoutDay("Day 1 — Push + Cardio", PUSH + [Exercise("Incline walk 20–30min", 1, "Zone 2")]),
            WorkoutDay("Day 2 — Legs", LEGS),
            WorkoutDay("Day 3 — Pull + Cardio", PULL + [Exercise("Row/Bike 15–20min", 1, "Zone 2")]),
        ]
        if extra:
            split.append(WorkoutDay("Day 4 — Full body circuit", FULL))

    return split


def build_workout_plan(health: HealthData) -> List[WorkoutDay]:
    """
    Weekly split for the user's goal.

    More weekly hours unlock a fourth day. Physical jobs get ~10% fewer sets
    per exercise (never below 2).
    """
    split = _split_for_goal(FitnessGoal(health.goal), training_days(health.hours_per_week))

    if health.job_type == JobType.PHYSICAL:
        split = [
            WorkoutDay(
                day.day,
                [
                    Exercise(item.name, max(2, int(round_half_up(item.sets * PHYSICAL_JOB_VOLUME))), item.reps)
                    for item in day.items
                ],
            )
            for day in split
        ]
    return split


def build_diet_advice(health: HealthData) -> DietAdvice:
    goal = FitnessGoal(health.goal)
    grams_per_kg = 1.8 if goal in (FitnessGoal.MUSCLE_GAIN, FitnessGoal.STRENGTH) else 1.6
    protein_g = int(round_half_up(health.weight_kg * grams_per_kg))

    if goal == FitnessGoal.FAT_LOSS:
        kcal_hint = "aim ~300–500 kcal deficit"
    elif goal == FitnessGoal.MUSCLE_GAIN:
        kcal_hint = "aim ~200–300 kcal surplus"
    else:
        kcal_hint = "aim maintenance kcal"

    focus = [
        f"Protein {protein_g} g/day (lean meats, fish, eggs, Greek yogurt, tofu)",
        "Complex carbs (oats, brown rice, quinoa, legumes, fruit/veg)",
        "Healthy fats (olive oil, avocado, nuts, seeds)",
        "Hydration 2–3L/day; electrolytes if training hard",
        "Micronutrients: leafy greens, colorful veg, berries",
    ]
    avoid = [
        "Ultra-processed snacks, high added sugars",
        "Sugary drinks / heavy alcohol",
        "Trans fats; limit deep-fried foods",
        "Late-night large meals if sleep suffers",
    ]
    if goal == FitnessGoal.ENDURANCE:
        focus.append("Carb timing: more carbs around long/interval sessions")
    if goal in (FitnessGoal.STRENGTH, FitnessGoal.MUSCLE_GAIN):
        focus.append("Creatine monohydrate 3–5g/day (if appropriate)")
    if health.job_type == JobType.PHYSICAL:
        focus.append("Extra carbs around shifts; prioritize sleep 7–9h")

    return DietAdvice(
        bmi=bmi(health.weight_kg, health.height_cm),
        protein_g=protein_g,
        kcal_hint=kcal_hint,
        focus=focus,
        avoid=avoid,
    )
