from fastapi import APIRouter, Depends

from campushub.api.v1.endpoints.records import register_crud_routes
from campushub.core.permissions import Action
from campushub.core.session import Session
from campushub.modules.auth.dependencies import get_registry, require
from campushub.schemas.common import EntityType
from campushub.schemas.students import PromotionResult, Student, StudentCreate
from campushub.services.registry import CampusRegistry

router = APIRouter(prefix="/students", tags=["Students"])


@router.post("/{student_id}/promote", response_model=PromotionResult)
async def promote_student(
    student_id: str,
    session: Session = Depends(require(Action.UPDATE, EntityType.STUDENTS)),
    registry: CampusRegistry = Depends(get_registry),
):
    """Move a student up one class (12 graduates; graduated students stay put)"""
    return registry.students.promote(student_id)


register_crud_routes(router, EntityType.STUDENTS, StudentCreate, Student)
