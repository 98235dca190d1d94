from fastapi import APIRouter, Depends
from typing import List

from campushub.api.v1.endpoints.records import register_crud_routes
from campushub.core.permissions import Action
from campushub.core.session import Session
from campushub.modules.auth.dependencies import get_registry, require
from campushub.schemas.common import EntityType
from campushub.schemas.notices import Notice, NoticeCreate
from campushub.services.registry import CampusRegistry

router = APIRouter(prefix="/notices", tags=["Notices"])


@router.get("/active", response_model=List[Notice])
async def active_notices(
    session: Session = Depends(require(Action.VIEW, EntityType.NOTICES)),
    registry: CampusRegistry = Depends(get_registry),
):
    return list(registry.notices.active())


@router.get("/expired", response_model=List[Notice])
async def expired_notices(
    session: Session = Depends(require(Action.VIEW, EntityType.NOTICES)),
    registry: CampusRegistry = Depends(get_registry),
):
    return list(registry.notices.expired())


register_crud_routes(router, EntityType.NOTICES, NoticeCreate, Notice)
