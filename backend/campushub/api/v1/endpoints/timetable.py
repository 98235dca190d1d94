from fastapi import APIRouter, Depends
from typing import List

from campushub.api.v1.endpoints.records import register_crud_routes
from campushub.core.permissions import Action
from campushub.core.session import Session
from campushub.modules.auth.dependencies import get_registry, require
from campushub.schemas.common import EntityType
from campushub.schemas.timetable import TimetableEntry, TimetableEntryCreate
from campushub.services.registry import CampusRegistry

router = APIRouter(prefix="/timetable", tags=["Timetable"])


@router.get("/classes", response_model=List[str])
async def timetable_classes(
    session: Session = Depends(require(Action.VIEW, EntityType.TIMETABLE)),
    registry: CampusRegistry = Depends(get_registry),
):
    """Classes that have at least one timetable entry"""
    return registry.timetable.class_ids()


@router.get("/classes/{class_id}", response_model=List[TimetableEntry])
async def timetable_for_class(
    class_id: str,
    session: Session = Depends(require(Action.VIEW, EntityType.TIMETABLE)),
    registry: CampusRegistry = Depends(get_registry),
):
    return list(registry.timetable.for_class(class_id))


register_crud_routes(router, EntityType.TIMETABLE, TimetableEntryCreate, TimetableEntry)
