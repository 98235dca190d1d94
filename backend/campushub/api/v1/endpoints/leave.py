from fastapi import APIRouter, Depends

from campushub.api.v1.endpoints.records import register_crud_routes
from campushub.core.permissions import Action
from campushub.core.session import Session
from campushub.modules.auth.dependencies import get_registry, require
from campushub.schemas.common import EntityType
from campushub.schemas.leave import LeaveRequest, LeaveRequestCreate
from campushub.services.registry import CampusRegistry

router = APIRouter(prefix="/leave-requests", tags=["Leave"])


@router.post("/{request_id}/approve", response_model=LeaveRequest)
async def approve_leave_request(
    request_id: str,
    session: Session = Depends(require(Action.UPDATE, EntityType.LEAVE_REQUESTS)),
    registry: CampusRegistry = Depends(get_registry),
):
    return registry.leave.approve(request_id)


@router.post("/{request_id}/reject", response_model=LeaveRequest)
async def reject_leave_request(
    request_id: str,
    session: Session = Depends(require(Action.UPDATE, EntityType.LEAVE_REQUESTS)),
    registry: CampusRegistry = Depends(get_registry),
):
    return registry.leave.reject(request_id)


register_crud_routes(router, EntityType.LEAVE_REQUESTS, LeaveRequestCreate, LeaveRequest)
