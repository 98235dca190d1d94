from fastapi import APIRouter

from campushub.api.v1.endpoints.records import register_crud_routes
from campushub.schemas.common import EntityType
from campushub.schemas.salaries import SalaryRecord, SalaryRecordCreate

router = APIRouter(prefix="/salaries", tags=["Salaries"])

register_crud_routes(router, EntityType.SALARIES, SalaryRecordCreate, SalaryRecord)
