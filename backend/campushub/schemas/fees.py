from pydantic import Field, ValidationInfo, field_validator
from typing import Literal, Optional
from datetime import date

from campushub.schemas.common import CamelModel, RecordBase, OptionalDate, OptionalStr

FeeFrequency = Literal["Monthly", "Quarterly", "Annually", "One-time"]
FeeStatus = Literal["Paid", "Pending", "Overdue", "Partially Paid"]


class FeeStructureBase(CamelModel):
    class_name: str = Field(..., min_length=1)
    fee_type: str = Field(..., min_length=3)
    amount: float = Field(..., gt=0)
    frequency: FeeFrequency


class FeeStructureCreate(FeeStructureBase):
    pass


class FeeStructure(RecordBase, FeeStructureBase):
    pass


class StudentFeeRecordBase(CamelModel):
    student_name: str = Field(..., min_length=2)
    class_name: str = Field(..., min_length=1)
    fee_type_description: str = Field(..., min_length=3)
    amount_due: float = Field(..., gt=0)
    amount_paid: float = Field(0, ge=0)
    due_date: date
    notes: OptionalStr = None

    @field_validator('amount_paid')
    @classmethod
    def paid_within_due(cls, v: float, info: ValidationInfo) -> float:
        due = info.data.get('amount_due')
        if due is not None and v > due:
            raise ValueError("Amount paid cannot exceed amount due.")
        return v


class StudentFeeRecordCreate(StudentFeeRecordBase):
    pass


class StudentFeeRecord(RecordBase, StudentFeeRecordBase):
    status: FeeStatus
    last_payment_date: OptionalDate = None


class PaymentCreate(CamelModel):
    payment_amount: float = Field(..., gt=0)
    payment_date: date
    notes: OptionalStr = None


class FeeRecordView(CamelModel):
    """A fee record plus what the payment screen needs to render it"""
    record: StudentFeeRecord
    outstanding: float
    can_manage_payment: bool
