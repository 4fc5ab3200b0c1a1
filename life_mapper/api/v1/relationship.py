"""Relationship check-in and assessment endpoints"""

from fastapi import APIRouter, Depends

from life_mapper.api.dependencies import get_repository, get_request_id
from life_mapper.api.v1.schemas import RelationshipIn
from life_mapper.domain.models import RelationshipAssessment, RelationshipData
from life_mapper.domain.scoring import score_relationship
from life_mapper.infrastructure.database.repositories import LifeRepository
from life_mapper.infrastructure.observability.logging import log_record_change
from life_mapper.infrastructure.observability.metrics import record_mutation_counter

router = APIRouter()


@router.get("/relationship", response_model=RelationshipData)
def get_relationship(repo: LifeRepository = Depends(get_repository)):
    return repo.get_document("relationship")


@router.put("/relationship", response_model=RelationshipData)
def put_relationship(
    body: RelationshipIn,
    repo: LifeRepository = Depends(get_repository),
    request_id: str = Depends(get_request_id),
):
    data = repo.save_document("relationship", body.to_domain())
    repo.commit()
    record_mutation_counter.labels(collection="relationship", action="replace").inc()
    log_record_change(request_id, "relationship", "replace", None)
    return data


@router.get("/relationship/assessment", response_model=RelationshipAssessment)
def get_relationship_assessment(repo: LifeRepository = Depends(get_repository)):
    """
    Score the stored check-in.

    Returns:
        0-100 score, risk band, red flags and improvement suggestions
    """
    return score_relationship(repo.get_document("relationship"))
