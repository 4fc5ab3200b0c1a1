"""Health profile, weigh-ins, workout log and training plan endpoints"""

from fastapi import APIRouter, Depends

from life_mapper.api.dependencies import get_repository, get_request_id
from life_mapper.api.v1.schemas import HealthIn, HealthPlanResponse, WeighInIn, WorkoutIn, health_to_domain
from life_mapper.domain.health import build_diet_advice, build_workout_plan
from life_mapper.domain.models import HealthData, WeighIn, WorkoutLog
from life_mapper.infrastructure.database.repositories import LifeRepository
from life_mapper.infrastructure.observability.logging import log_record_change
from life_mapper.infrastructure.observability.metrics import record_mutation_counter

router = APIRouter()


def _save_health(repo: LifeRepository, health: HealthData, action: str, request_id: str) -> HealthData:
    repo.save_document("health", health)
    repo.commit()
    record_mutation_counter.labels(collection="health", action=action).inc()
    log_record_change(request_id, "health", action, None)
    return health


@router.get("/wellbeing", response_model=HealthData)
def get_health(repo: LifeRepository = Depends(get_repository)):
    return repo.get_document("health")


@router.put("/wellbeing", response_model=HealthData)
def put_health(
    body: HealthIn,
    repo: LifeRepository = Depends(get_repository),
    request_id: str = Depends(get_request_id),
):
    health = health_to_domain(body, repo.get_document("health"))
    return _save_health(repo, health, "replace", request_id)


@router.post("/wellbeing/weigh-ins", response_model=HealthData, status_code=201)
def add_weigh_in(
    body: WeighInIn,
    repo: LifeRepository = Depends(get_repository),
    request_id: str = Depends(get_request_id),
):
    """Log a weigh-in; the latest weight also becomes the current weight"""
    health = repo.get_document("health")
    health.weigh_ins.append(WeighIn(date=body.date, weight_kg=body.weight_kg or health.weight_kg))
    if body.weight_kg:
        health.weight_kg = body.weight_kg
    return _save_health(repo, health, "create", request_id)


@router.post("/wellbeing/workouts", response_model=HealthData, status_code=201)
def add_workout(
    body: WorkoutIn,
    repo: LifeRepository = Depends(get_repository),
    request_id: str = Depends(get_request_id),
):
    health = repo.get_document("health")
    health.workouts_done.append(WorkoutLog(date=body.date, minutes=body.minutes))
    return _save_health(repo, health, "create", request_id)


@router.get("/wellbeing/plan", response_model=HealthPlanResponse)
def get_health_plan(repo: LifeRepository = Depends(get_repository)):
    """Weekly workout split and diet guidance for the stored profile"""
    health = repo.get_document("health")
    diet = build_diet_advice(health)
    return HealthPlanResponse(bmi=diet.bmi, workout_plan=build_workout_plan(health), diet=diet)
