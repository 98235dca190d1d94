"""
Fee Management API Endpoints
- Fee structures per class
- Student fee records and payments
"""

from fastapi import APIRouter, Depends

from campushub.api.v1.endpoints.records import register_crud_routes
from campushub.core.permissions import Action
from campushub.core.session import Session
from campushub.modules.auth.dependencies import get_registry, require
from campushub.schemas.common import EntityType
from campushub.schemas.fees import (
    FeeRecordView,
    FeeStructure,
    FeeStructureCreate,
    PaymentCreate,
    StudentFeeRecord,
    StudentFeeRecordCreate,
)
from campushub.services.registry import CampusRegistry

structures_router = APIRouter(prefix="/fee-structures", tags=["Fees"])
records_router = APIRouter(prefix="/fee-records", tags=["Fees"])


@records_router.get("/{record_id}/summary", response_model=FeeRecordView)
async def fee_record_summary(
    record_id: str,
    session: Session = Depends(require(Action.VIEW, EntityType.FEE_RECORDS)),
    registry: CampusRegistry = Depends(get_registry),
):
    """Fee record with outstanding balance and whether a payment can be taken"""
    record = registry.fees.manager.get(record_id)
    return registry.fees.view(record)


@records_router.post("/{record_id}/payments", response_model=StudentFeeRecord)
async def record_payment(
    record_id: str,
    payment: PaymentCreate,
    session: Session = Depends(require(Action.UPDATE, EntityType.FEE_RECORDS)),
    registry: CampusRegistry = Depends(get_registry),
):
    return registry.fees.record_payment(
        record_id,
        amount=payment.payment_amount,
        payment_date=payment.payment_date,
        notes=payment.notes,
    )


register_crud_routes(structures_router, EntityType.FEE_STRUCTURES, FeeStructureCreate, FeeStructure)
register_crud_routes(records_router, EntityType.FEE_RECORDS, StudentFeeRecordCreate, StudentFeeRecord)
