"""Student records and class promotion."""

from typing import Optional, Tuple

from campushub.core.exceptions import ValidationError
from campushub.core.logging_config import logger
from campushub.schemas.common import CLASS_FORM_OPTIONS, GRADUATED, EntityType
from campushub.schemas.students import PromotionResult, Student, StudentCreate
from campushub.services.entity_manager import EntityDefinition, EntityListManager

ALL_CLASSES = "All"


def keep_graduation_behind_promotion(values, existing: Optional[Student]):
    """Graduated is reachable only through promotion.

    An edit may resubmit the class a graduated student already has.
    """
    if values["class_name"] == GRADUATED and (existing is None or existing.class_name != GRADUATED):
        raise ValidationError.for_field("class_name", "Class is required.")
    return {}


STUDENT_DEFINITION = EntityDefinition(
    entity_type=EntityType.STUDENTS,
    label="Student",
    id_prefix="S",
    form_model=StudentCreate,
    record_model=Student,
    sort_key=lambda student: student.name.lower(),
    derive=keep_graduation_behind_promotion,
)


def next_class(current: str) -> Optional[str]:
    """NC -> 1, n -> n+1, 12 -> Graduated. None when there is nowhere to go."""
    if current not in CLASS_FORM_OPTIONS:
        return None
    position = CLASS_FORM_OPTIONS.index(current)
    if position == len(CLASS_FORM_OPTIONS) - 1:
        return GRADUATED
    return CLASS_FORM_OPTIONS[position + 1]


class StudentService:
    def __init__(self, manager: EntityListManager[Student]):
        self.manager = manager

    def by_class(self, label: str = ALL_CLASSES) -> Tuple[Student, ...]:
        if not label or label == ALL_CLASSES:
            return self.manager.query()
        return self.manager.filter_by(class_name=label)

    def promote(self, student_id: str) -> PromotionResult:
        student = self.manager.get(student_id)
        previous = student.class_name
        target = next_class(previous)

        if target is None:
            logger.info(f"[Students] {student.id} not promoted from '{previous}'")
            return PromotionResult(
                student=student,
                previous_class=previous,
                promoted=False,
                message=f"{student.name} cannot be promoted further.",
            )

        promoted = self.manager.apply(student_id, {"class_name": target})
        if target == GRADUATED:
            message = f"{promoted.name} has graduated."
        else:
            message = f"{promoted.name} promoted to Class {target}."

        return PromotionResult(
            student=promoted,
            previous_class=previous,
            promoted=True,
            message=message,
        )
