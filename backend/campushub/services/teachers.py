from campushub.schemas.common import EntityType
from campushub.schemas.teachers import Teacher, TeacherCreate
from campushub.services.entity_manager import EntityDefinition

TEACHER_DEFINITION = EntityDefinition(
    entity_type=EntityType.TEACHERS,
    label="Teacher",
    id_prefix="T",
    form_model=TeacherCreate,
    record_model=Teacher,
    sort_key=lambda teacher: teacher.name.lower(),
)
