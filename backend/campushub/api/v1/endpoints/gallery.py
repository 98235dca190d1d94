from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from campushub.api.v1.endpoints.records import register_crud_routes
from campushub.core.permissions import Action
from campushub.core.session import Session
from campushub.modules.auth.dependencies import get_registry, require
from campushub.schemas.common import EntityType
from campushub.schemas.gallery import GalleryItem, GalleryItemCreate
from campushub.services.registry import CampusRegistry

router = APIRouter(prefix="/gallery", tags=["Gallery"])


@router.get("/tags", response_model=List[str])
async def gallery_tags(
    session: Session = Depends(require(Action.VIEW, EntityType.GALLERY)),
    registry: CampusRegistry = Depends(get_registry),
):
    return registry.gallery.event_tags()


@router.get("/browse", response_model=List[GalleryItem])
async def browse_gallery(
    event_tag: Optional[str] = Query(None, alias="eventTag"),
    order: str = Query("newest"),
    session: Session = Depends(require(Action.VIEW, EntityType.GALLERY)),
    registry: CampusRegistry = Depends(get_registry),
):
    return list(registry.gallery.browse(event_tag=event_tag, order=order))


register_crud_routes(router, EntityType.GALLERY, GalleryItemCreate, GalleryItem)
