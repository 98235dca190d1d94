from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from campushub.core.config import settings
from campushub.core.exceptions import ValidationError
from campushub.schemas.common import EntityType
from campushub.schemas.gallery import GalleryItem, GalleryItemCreate
from campushub.services.entity_manager import EntityDefinition, EntityListManager

ALL_TAGS = "All"
BROWSE_ORDERS = ("newest", "oldest")


def _derive_gallery_item(values: Dict[str, Any], existing: Optional[GalleryItem]) -> Dict[str, Any]:
    image_url = values.get("image_url")
    derived = {"image_url": str(image_url) if image_url else settings.PLACEHOLDER_IMAGE_URL}
    if existing is None:
        derived["date"] = date.today()
    return derived


GALLERY_DEFINITION = EntityDefinition(
    entity_type=EntityType.GALLERY,
    label="Gallery item",
    id_prefix="G",
    form_model=GalleryItemCreate,
    record_model=GalleryItem,
    sort_key=lambda item: item.date,
    sort_reverse=True,
    preserved_fields=("date",),
    derive=_derive_gallery_item,
)


class GalleryService:
    def __init__(self, manager: EntityListManager[GalleryItem]):
        self.manager = manager

    def event_tags(self) -> List[str]:
        return sorted({item.event_tag for item in self.manager.query() if item.event_tag})

    def browse(self, event_tag: Optional[str] = None, order: str = "newest") -> Tuple[GalleryItem, ...]:
        if order not in BROWSE_ORDERS:
            raise ValidationError.for_field("order", "Order must be 'newest' or 'oldest'.")

        predicate = None
        if event_tag and event_tag != ALL_TAGS:
            predicate = lambda item: item.event_tag == event_tag  # noqa: E731

        return self.manager.query(
            predicate,
            sort_key=lambda item: item.date,
            reverse=(order == "newest"),
        )
