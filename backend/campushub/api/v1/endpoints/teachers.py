from fastapi import APIRouter

from campushub.api.v1.endpoints.records import register_crud_routes
from campushub.schemas.common import EntityType
from campushub.schemas.teachers import Teacher, TeacherCreate

router = APIRouter(prefix="/teachers", tags=["Teachers"])

register_crud_routes(router, EntityType.TEACHERS, TeacherCreate, Teacher)
