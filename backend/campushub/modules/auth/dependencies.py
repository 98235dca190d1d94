from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Callable, Optional

from campushub.core.exceptions import AuthenticationError, AuthorizationError
from campushub.core.logging_config import set_user_id
from campushub.core.permissions import Action, authorize, can_generate_study_questions
from campushub.core.session import Session, SessionManager
from campushub.schemas.common import EntityType
from campushub.services.enquiry_service import EnquiryService
from campushub.services.registry import CampusRegistry
from campushub.services.study_questions import StudyQuestionGenerator

security = HTTPBearer(auto_error=False)


def get_registry(request: Request) -> CampusRegistry:
    return request.app.state.registry


def get_session_manager(request: Request) -> SessionManager:
    return request.app.state.sessions


def get_question_generator(request: Request) -> StudyQuestionGenerator:
    return request.app.state.question_generator


def get_enquiry_service(request: Request) -> EnquiryService:
    return request.app.state.enquiry_service


async def get_current_session(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    sessions: SessionManager = Depends(get_session_manager),
) -> Session:
    """Resolve the bearer token to a live session"""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Not signed in")

    session = sessions.resolve(credentials.credentials)

    request.state.user_id = session.user_id
    set_user_id(session.user_id)
    return session


def require(action: Action, entity_type: EntityType) -> Callable:
    """Dependency factory: the current session, if it may perform action on entity_type"""

    async def dependency(session: Session = Depends(get_current_session)) -> Session:
        authorize(session, action, entity_type)
        return session

    return dependency


async def require_study_questions(
    session: Session = Depends(get_current_session),
) -> Session:
    if not can_generate_study_questions(session.role):
        raise AuthorizationError(
            f"Role '{session.role.value}' may not generate study questions",
            action="generate",
        )
    return session
