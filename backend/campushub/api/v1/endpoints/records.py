"""
Generic record endpoints

Every managed collection exposes the same five routes. Collection-specific
routes (promotion, payments, approvals, ...) are declared on the router
first, then register_crud_routes adds the shared ones.

    GET    /               list in default order, optional equality filters
    GET    /{record_id}
    POST   /               201
    PUT    /{record_id}
    DELETE /{record_id}    204
"""

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import BaseModel
from typing import Any, Dict, List, Tuple, Type

from campushub.core.exceptions import ValidationError
from campushub.core.permissions import Action
from campushub.core.session import Session
from campushub.modules.auth.dependencies import get_registry, require
from campushub.schemas.common import EntityType
from campushub.services.registry import CampusRegistry


def _field_names(model: Type[BaseModel]) -> Dict[str, str]:
    """Map both the wire alias and the Python name of each field to the Python name"""
    names = {}
    for name, info in model.model_fields.items():
        names[name] = name
        if info.alias:
            names[info.alias] = name
    return names


def _matches(value: Any, wanted: str) -> bool:
    if isinstance(value, (list, tuple)):
        return wanted in [str(item) for item in value]
    if value is None:
        return wanted == ""
    return str(value) == wanted


def query_filters(request: Request, model: Type[BaseModel]) -> List[Tuple[str, str]]:
    names = _field_names(model)
    filters = []
    unknown = {}
    for key, value in request.query_params.items():
        if key not in names:
            unknown[key] = ["Unknown filter field"]
            continue
        filters.append((names[key], value))
    if unknown:
        raise ValidationError(unknown, message="Unknown filter field")
    return filters


def register_crud_routes(
    router: APIRouter,
    entity_type: EntityType,
    create_model: Type[BaseModel],
    record_model: Type[BaseModel],
) -> APIRouter:
    @router.get("", response_model=List[record_model])
    async def list_records(
        request: Request,
        session: Session = Depends(require(Action.VIEW, entity_type)),
        registry: CampusRegistry = Depends(get_registry),
    ):
        filters = query_filters(request, record_model)
        manager = registry.manager(entity_type)
        if not filters:
            return list(manager.query())
        return list(manager.query(
            lambda record: all(_matches(getattr(record, name), wanted) for name, wanted in filters)
        ))

    @router.get("/{record_id}", response_model=record_model)
    async def get_record(
        record_id: str,
        session: Session = Depends(require(Action.VIEW, entity_type)),
        registry: CampusRegistry = Depends(get_registry),
    ):
        return registry.manager(entity_type).get(record_id)

    @router.post("", response_model=record_model, status_code=status.HTTP_201_CREATED)
    async def create_record(
        payload: create_model,
        session: Session = Depends(require(Action.CREATE, entity_type)),
        registry: CampusRegistry = Depends(get_registry),
    ):
        return registry.manager(entity_type).create(payload.model_dump())

    @router.put("/{record_id}", response_model=record_model)
    async def update_record(
        record_id: str,
        payload: create_model,
        session: Session = Depends(require(Action.UPDATE, entity_type)),
        registry: CampusRegistry = Depends(get_registry),
    ):
        return registry.manager(entity_type).update(record_id, payload.model_dump())

    @router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_record(
        record_id: str,
        session: Session = Depends(require(Action.DELETE, entity_type)),
        registry: CampusRegistry = Depends(get_registry),
    ):
        registry.manager(entity_type).delete(record_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
