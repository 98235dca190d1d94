from campushub.schemas.common import EntityType
from campushub.schemas.exams import ExamSchedule, ExamScheduleCreate
from campushub.services.entity_manager import EntityDefinition

# newest first, like the exam schedule screen
EXAM_DEFINITION = EntityDefinition(
    entity_type=EntityType.EXAMS,
    label="Exam schedule",
    id_prefix="EXM",
    form_model=ExamScheduleCreate,
    record_model=ExamSchedule,
    sort_key=lambda exam: exam.start_date,
    sort_reverse=True,
)
