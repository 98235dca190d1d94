"""
Campus Registry

Builds one EntityListManager per collection plus the domain services that
sit on top of them. Created once at application start and kept on
``app.state``; a new registry is the in-memory equivalent of a fresh load.
"""

from typing import Any, Dict, List, Mapping, Optional

from campushub.core.logging_config import logger
from campushub.schemas.common import EntityType
from campushub.services.entity_manager import EntityDefinition, EntityListManager
from campushub.services.exams import EXAM_DEFINITION
from campushub.services.fees import FEE_RECORD_DEFINITION, FEE_STRUCTURE_DEFINITION, FeeService
from campushub.services.gallery import GALLERY_DEFINITION, GalleryService
from campushub.services.leave import LEAVE_DEFINITION, LeaveService
from campushub.services.library import BOOK_DEFINITION
from campushub.services.notices import NOTICE_DEFINITION, NoticeService
from campushub.services.salaries import salary_definition
from campushub.services.students import STUDENT_DEFINITION, StudentService
from campushub.services.teachers import TEACHER_DEFINITION
from campushub.services.timetable import TIMETABLE_DEFINITION, TimetableService

SeedData = Mapping[EntityType, List[Mapping[str, Any]]]


class CampusRegistry:
    def __init__(self, seed: Optional[SeedData] = None):
        seed = seed or {}
        self.managers: Dict[EntityType, EntityListManager] = {}

        def build(definition: EntityDefinition) -> EntityListManager:
            manager = EntityListManager(definition, seed.get(definition.entity_type, ()))
            self.managers[definition.entity_type] = manager
            return manager

        build(STUDENT_DEFINITION)
        teachers = build(TEACHER_DEFINITION)
        build(FEE_STRUCTURE_DEFINITION)
        build(FEE_RECORD_DEFINITION)
        build(salary_definition(teachers))
        build(BOOK_DEFINITION)
        build(EXAM_DEFINITION)
        build(TIMETABLE_DEFINITION)
        build(NOTICE_DEFINITION)
        build(GALLERY_DEFINITION)
        build(LEAVE_DEFINITION)

        self.students = StudentService(self.managers[EntityType.STUDENTS])
        self.fees = FeeService(self.managers[EntityType.FEE_RECORDS])
        self.timetable = TimetableService(self.managers[EntityType.TIMETABLE])
        self.notices = NoticeService(self.managers[EntityType.NOTICES])
        self.gallery = GalleryService(self.managers[EntityType.GALLERY])
        self.leave = LeaveService(self.managers[EntityType.LEAVE_REQUESTS])

    @classmethod
    def with_demo_data(cls) -> "CampusRegistry":
        from campushub.db.seed_data import demo_seed

        registry = cls(demo_seed())
        logger.info(f"[Registry] Loaded demo data: {registry.counts()}")
        return registry

    def manager(self, entity_type: EntityType) -> EntityListManager:
        return self.managers[EntityType(entity_type)]

    def counts(self, entity_types=None) -> Dict[str, int]:
        if entity_types is None:
            entity_types = list(self.managers)
        return {entity_type.value: len(self.managers[entity_type]) for entity_type in entity_types}
