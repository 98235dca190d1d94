from typing import Dict, List

from campushub.core.session import UserRole
from campushub.schemas.common import CamelModel


class DashboardSummary(CamelModel):
    role: UserRole
    name: str
    counts: Dict[str, int]
    can_manage: List[str]
    can_generate_study_questions: bool
