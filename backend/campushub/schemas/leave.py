from pydantic import Field, ValidationInfo, field_validator
from typing import Literal
from datetime import date

from campushub.schemas.common import CamelModel, RecordBase

LeaveType = Literal["Annual", "Sick", "Casual", "Unpaid"]
LeaveStatus = Literal["Pending", "Approved", "Rejected"]


class LeaveRequestBase(CamelModel):
    employee_name: str = Field(..., min_length=2)
    employee_id: str = Field(..., min_length=1)
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: str = Field(..., min_length=3)

    @field_validator('end_date')
    @classmethod
    def end_not_before_start(cls, v: date, info: ValidationInfo) -> date:
        start = info.data.get('start_date')
        if start is not None and v < start:
            raise ValueError("End date cannot be before start date.")
        return v


class LeaveRequestCreate(LeaveRequestBase):
    pass


class LeaveRequest(RecordBase, LeaveRequestBase):
    status: LeaveStatus = "Pending"
    applied_date: date
