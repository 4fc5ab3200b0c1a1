"""GET/PUT /v1/profile"""

from fastapi import APIRouter, Depends

from life_mapper.api.dependencies import get_repository, get_request_id
from life_mapper.api.v1.schemas import ProfileIn
from life_mapper.domain.models import Profile
from life_mapper.infrastructure.database.repositories import LifeRepository
from life_mapper.infrastructure.observability.logging import log_record_change
from life_mapper.infrastructure.observability.metrics import record_mutation_counter

router = APIRouter()


@router.get("/profile", response_model=Profile)
def get_profile(repo: LifeRepository = Depends(get_repository)):
    return repo.profile()


@router.put("/profile", response_model=Profile)
def put_profile(
    body: ProfileIn,
    repo: LifeRepository = Depends(get_repository),
    request_id: str = Depends(get_request_id),
):
    profile = repo.save_document("profile", body.to_domain())
    repo.commit()
    record_mutation_counter.labels(collection="profile", action="replace").inc()
    log_record_change(request_id, "profile", "replace", None)
    return profile
