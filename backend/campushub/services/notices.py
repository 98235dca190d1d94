"""
Notice board.

A notice is expired once its expiry date has begun; notices without an
expiry date stay active until deleted.
"""

from datetime import date, datetime
from typing import Any, Dict, Optional, Tuple

from campushub.schemas.common import EntityType
from campushub.schemas.notices import Notice, NoticeCreate
from campushub.services.entity_manager import EntityDefinition, EntityListManager


def _derive_notice(values: Dict[str, Any], existing: Optional[Notice]) -> Dict[str, Any]:
    if existing is not None:
        return {}
    return {"issued_date": datetime.utcnow()}


def is_expired(notice: Notice, today: Optional[date] = None) -> bool:
    if notice.expiry_date is None:
        return False
    return notice.expiry_date <= (today or date.today())


NOTICE_DEFINITION = EntityDefinition(
    entity_type=EntityType.NOTICES,
    label="Notice",
    id_prefix="N",
    form_model=NoticeCreate,
    record_model=Notice,
    sort_key=lambda notice: notice.issued_date,
    sort_reverse=True,
    preserved_fields=("issued_date",),
    derive=_derive_notice,
)


class NoticeService:
    def __init__(self, manager: EntityListManager[Notice]):
        self.manager = manager

    def active(self, today: Optional[date] = None) -> Tuple[Notice, ...]:
        return self.manager.query(lambda notice: not is_expired(notice, today))

    def expired(self, today: Optional[date] = None) -> Tuple[Notice, ...]:
        return self.manager.query(lambda notice: is_expired(notice, today))
