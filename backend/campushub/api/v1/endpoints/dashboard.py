from fastapi import APIRouter, Depends

from campushub.core.permissions import can_create, can_generate_study_questions, visible_entity_types
from campushub.core.session import Session
from campushub.modules.auth.dependencies import get_current_session, get_registry
from campushub.schemas.dashboard import DashboardSummary
from campushub.services.registry import CampusRegistry

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("", response_model=DashboardSummary)
async def dashboard(
    session: Session = Depends(get_current_session),
    registry: CampusRegistry = Depends(get_registry),
):
    """Record counts for every collection the caller's role can see"""
    visible = visible_entity_types(session.role)
    return DashboardSummary(
        role=session.role,
        name=session.name,
        counts=registry.counts(visible),
        can_manage=[entity_type.value for entity_type in visible if can_create(session.role, entity_type)],
        can_generate_study_questions=can_generate_study_questions(session.role),
    )
