from fastapi import APIRouter

from campushub.api.v1.endpoints.records import register_crud_routes
from campushub.schemas.common import EntityType
from campushub.schemas.exams import ExamSchedule, ExamScheduleCreate

router = APIRouter(prefix="/exams", tags=["Exams"])

register_crud_routes(router, EntityType.EXAMS, ExamScheduleCreate, ExamSchedule)
