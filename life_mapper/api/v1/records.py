"""CRUD endpoints for list collections (incomes, expenses, BNPL, goals, immigration steps)"""

from typing import List, Type

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from life_mapper.api.dependencies import get_repository, get_request_id
from life_mapper.api.v1.schemas import BNPLPurchaseIn, ExpenseIn, GoalIn, ImmigrationStepIn, IncomeIn
from life_mapper.domain.models import BNPLPurchase, Expense, Goal, ImmigrationStep, Income
from life_mapper.infrastructure.database.repositories import LifeRepository, new_record_id
from life_mapper.infrastructure.observability.logging import log_record_change
from life_mapper.infrastructure.observability.metrics import record_mutation_counter

router = APIRouter()


def register_collection(path: str, collection: str, schema: Type[BaseModel], record_type: type) -> None:
    """
    Register list/get/create/replace/delete routes for one collection.

    Create generates the id; PUT is a full-record replace by id; unknown ids
    surface as RecordNotFoundError (404).
    """

    @router.get(f"/{path}", response_model=List[record_type], name=f"list_{collection}")
    def list_records(repo: LifeRepository = Depends(get_repository)):
        records = repo.list_records(collection)
        repo.commit()
        return records

    @router.get(f"/{path}/{{record_id}}", response_model=record_type, name=f"get_{collection}")
    def get_record(record_id: str, repo: LifeRepository = Depends(get_repository)):
        return repo.get_record(collection, record_id)

    @router.post(f"/{path}", response_model=record_type, status_code=201, name=f"create_{collection}")
    def create_record(
        body: schema,
        repo: LifeRepository = Depends(get_repository),
        request_id: str = Depends(get_request_id),
    ):
        record = repo.add_record(collection, body.to_domain(new_record_id()))
        repo.commit()
        record_mutation_counter.labels(collection=collection, action="create").inc()
        log_record_change(request_id, collection, "create", record.id)
        return record

    @router.put(f"/{path}/{{record_id}}", response_model=record_type, name=f"replace_{collection}")
    def replace_record(
        record_id: str,
        body: schema,
        repo: LifeRepository = Depends(get_repository),
        request_id: str = Depends(get_request_id),
    ):
        record = repo.replace_record(collection, body.to_domain(record_id))
        repo.commit()
        record_mutation_counter.labels(collection=collection, action="update").inc()
        log_record_change(request_id, collection, "update", record_id)
        return record

    @router.delete(f"/{path}/{{record_id}}", status_code=204, name=f"delete_{collection}")
    def delete_record(
        record_id: str,
        repo: LifeRepository = Depends(get_repository),
        request_id: str = Depends(get_request_id),
    ):
        repo.delete_record(collection, record_id)
        repo.commit()
        record_mutation_counter.labels(collection=collection, action="delete").inc()
        log_record_change(request_id, collection, "delete", record_id)
        return Response(status_code=204)


register_collection("incomes", "incomes", IncomeIn, Income)
register_collection("expenses", "expenses", ExpenseIn, Expense)
register_collection("bnpl", "bnpl", BNPLPurchaseIn, BNPLPurchase)
register_collection("goals", "goals", GoalIn, Goal)
register_collection("immigration-steps", "immigration_steps", ImmigrationStepIn, ImmigrationStep)
