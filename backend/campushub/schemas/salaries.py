from pydantic import Field, field_validator
from typing import Literal, Optional
from datetime import date, datetime

from campushub.schemas.common import CamelModel, RecordBase

PaymentStatus = Literal["Paid", "Pending"]

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


class SalaryRecordBase(CamelModel):
    teacher_id: str = Field(..., min_length=1)
    month: int = Field(..., ge=1, le=12)
    year: int
    basic_salary: float = Field(..., gt=0)
    total_allowances: float = Field(0, ge=0)
    total_deductions: float = Field(0, ge=0)
    payment_status: PaymentStatus

    @field_validator('year')
    @classmethod
    def year_in_payroll_window(cls, v: int) -> int:
        current = date.today().year
        if not current - 5 <= v <= current + 1:
            raise ValueError(f"Year must be between {current - 5} and {current + 1}.")
        return v


class SalaryRecordCreate(SalaryRecordBase):
    pass


class SalaryRecord(RecordBase, SalaryRecordBase):
    teacher_name: str
    net_salary: float
    payment_date: Optional[datetime] = None

    @property
    def period_label(self) -> str:
        return f"{MONTH_NAMES[self.month - 1]} {self.year}"
