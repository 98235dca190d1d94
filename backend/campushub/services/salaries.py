"""
Teacher salary records.

A salary record names its teacher by id; the display name is copied from
the teacher list when the record is saved. Net salary is always computed.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from campushub.core.exceptions import ValidationError
from campushub.schemas.common import EntityType
from campushub.schemas.salaries import SalaryRecord, SalaryRecordCreate
from campushub.schemas.teachers import Teacher
from campushub.services.entity_manager import EntityDefinition, EntityListManager


def net_salary(basic_salary: float, total_allowances: float, total_deductions: float) -> float:
    return round(basic_salary + total_allowances - total_deductions, 2)


def payment_date_for(status: str, existing: Optional[SalaryRecord]) -> Optional[datetime]:
    """Paid records keep their original payment date; Pending records have none"""
    if status != "Paid":
        return None
    if existing is not None and existing.payment_date is not None:
        return existing.payment_date
    return datetime.utcnow()


def salary_definition(teachers: EntityListManager[Teacher]) -> EntityDefinition[SalaryRecord]:
    def derive(values: Dict[str, Any], existing: Optional[SalaryRecord]) -> Dict[str, Any]:
        teacher = teachers.find(values["teacher_id"])
        if teacher is None:
            raise ValidationError.for_field("teacher_id", "Selected teacher not found.")
        return {
            "teacher_name": teacher.name,
            "net_salary": net_salary(
                values["basic_salary"], values["total_allowances"], values["total_deductions"]
            ),
            "payment_date": payment_date_for(values["payment_status"], existing),
        }

    return EntityDefinition(
        entity_type=EntityType.SALARIES,
        label="Salary record",
        id_prefix="SR",
        form_model=SalaryRecordCreate,
        record_model=SalaryRecord,
        sort_key=lambda record: (-record.year, -record.month, record.teacher_name.lower()),
        derive=derive,
    )
