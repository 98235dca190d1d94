from datetime import date
from typing import Any, Dict, Optional

from campushub.core.exceptions import ValidationError
from campushub.core.logging_config import logger
from campushub.schemas.common import EntityType
from campushub.schemas.leave import LeaveRequest, LeaveRequestCreate
from campushub.services.entity_manager import EntityDefinition, EntityListManager


def _derive_leave_request(values: Dict[str, Any], existing: Optional[LeaveRequest]) -> Dict[str, Any]:
    if existing is not None:
        return {}
    return {"status": "Pending", "applied_date": date.today()}


LEAVE_DEFINITION = EntityDefinition(
    entity_type=EntityType.LEAVE_REQUESTS,
    label="Leave request",
    id_prefix="LR",
    form_model=LeaveRequestCreate,
    record_model=LeaveRequest,
    sort_key=lambda request: request.applied_date,
    sort_reverse=True,
    preserved_fields=("status", "applied_date"),
    derive=_derive_leave_request,
)


class LeaveService:
    def __init__(self, manager: EntityListManager[LeaveRequest]):
        self.manager = manager

    def pending(self):
        return self.manager.filter_by(status="Pending")

    def approve(self, request_id: str) -> LeaveRequest:
        return self._decide(request_id, "Approved")

    def reject(self, request_id: str) -> LeaveRequest:
        return self._decide(request_id, "Rejected")

    def _decide(self, request_id: str, status: str) -> LeaveRequest:
        request = self.manager.get(request_id)
        if request.status != "Pending":
            raise ValidationError.for_field(
                "status", f"Leave request is already {request.status.lower()}."
            )
        decided = self.manager.apply(request_id, {"status": status})
        logger.info(f"[Leave] {decided.id} for {decided.employee_name} {status.lower()}")
        return decided
