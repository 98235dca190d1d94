"""
Fee structures, student fee records and payments.

Fee status is never entered by hand: it follows from what has been paid
against what is due, and whether the due date has passed.
"""

from datetime import date
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from campushub.core.exceptions import ValidationError
from campushub.core.logging_config import logger
from campushub.schemas.common import CLASS_FORM_OPTIONS, EntityType
from campushub.schemas.fees import (
    FeeRecordView,
    FeeStructure,
    FeeStructureCreate,
    PaymentCreate,
    StudentFeeRecord,
    StudentFeeRecordCreate,
)
from campushub.services.entity_manager import (
    EntityDefinition,
    EntityListManager,
    errors_from_pydantic,
)


def class_order(label: str) -> int:
    if label in CLASS_FORM_OPTIONS:
        return CLASS_FORM_OPTIONS.index(label)
    return len(CLASS_FORM_OPTIONS)


def fee_status(amount_due: float, amount_paid: float, due_date: date,
               today: Optional[date] = None) -> str:
    today = today or date.today()
    if amount_paid >= amount_due:
        return "Paid"
    if amount_paid > 0:
        return "Partially Paid"
    if due_date < today:
        return "Overdue"
    return "Pending"


def _derive_fee_record(values: Dict[str, Any], existing: Optional[StudentFeeRecord]) -> Dict[str, Any]:
    return {
        "status": fee_status(values["amount_due"], values["amount_paid"], values["due_date"]),
    }


FEE_STRUCTURE_DEFINITION = EntityDefinition(
    entity_type=EntityType.FEE_STRUCTURES,
    label="Fee structure",
    id_prefix="FS",
    form_model=FeeStructureCreate,
    record_model=FeeStructure,
    sort_key=lambda structure: (class_order(structure.class_name), structure.fee_type.lower()),
)

FEE_RECORD_DEFINITION = EntityDefinition(
    entity_type=EntityType.FEE_RECORDS,
    label="Fee record",
    id_prefix="SFR",
    form_model=StudentFeeRecordCreate,
    record_model=StudentFeeRecord,
    sort_key=lambda record: record.due_date,
    preserved_fields=("last_payment_date",),
    derive=_derive_fee_record,
)


class FeeService:
    def __init__(self, manager: EntityListManager[StudentFeeRecord]):
        self.manager = manager

    @staticmethod
    def outstanding(record: StudentFeeRecord) -> float:
        return max(round(record.amount_due - record.amount_paid, 2), 0.0)

    @staticmethod
    def can_manage_payment(record: StudentFeeRecord) -> bool:
        return record.status != "Paid"

    def view(self, record: StudentFeeRecord) -> FeeRecordView:
        return FeeRecordView(
            record=record,
            outstanding=self.outstanding(record),
            can_manage_payment=self.can_manage_payment(record),
        )

    def record_payment(self, record_id: str, amount: float, payment_date: date,
                       notes: Optional[str] = None) -> StudentFeeRecord:
        """Add a payment to a fee record and re-derive its status"""
        try:
            payment = PaymentCreate.model_validate({
                "payment_amount": amount,
                "payment_date": payment_date,
                "notes": notes,
            })
        except PydanticValidationError as e:
            raise ValidationError(errors_from_pydantic(e, PaymentCreate))

        record = self.manager.get(record_id)
        if not self.can_manage_payment(record):
            raise ValidationError.for_field("payment_amount", "This fee has already been paid in full.")

        outstanding = self.outstanding(record)
        if payment.payment_amount > outstanding:
            raise ValidationError.for_field(
                "payment_amount",
                f"Payment cannot exceed the outstanding amount of {outstanding:.2f}.",
            )

        amount_paid = round(record.amount_paid + payment.payment_amount, 2)
        changes: Dict[str, Any] = {
            "amount_paid": amount_paid,
            "status": fee_status(record.amount_due, amount_paid, record.due_date),
            "last_payment_date": payment.payment_date,
        }
        if payment.notes is not None:
            changes["notes"] = payment.notes

        updated = self.manager.apply(record_id, changes)
        logger.info(
            f"[Fees] Payment of {payment.payment_amount:.2f} recorded for {updated.student_name} "
            f"({updated.id}); status {updated.status}"
        )
        return updated
