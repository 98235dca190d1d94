from fastapi import APIRouter, Depends, status

from campushub.core.session import Session, SessionManager
from campushub.modules.auth.dependencies import get_current_session, get_session_manager
from campushub.schemas.auth import LoginRequest, LoginResponse, UserResponse

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: LoginRequest,
    sessions: SessionManager = Depends(get_session_manager),
):
    """Mock sign-in: any e-mail address, the role picked on the login screen"""
    session = sessions.login(credentials.email, role=credentials.role, name=credentials.name)
    return LoginResponse(access_token=session.token, user=UserResponse.from_session(session))


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    session: Session = Depends(get_current_session),
    sessions: SessionManager = Depends(get_session_manager),
):
    sessions.logout(session.token)


@router.get("/me", response_model=UserResponse)
async def me(session: Session = Depends(get_current_session)):
    return UserResponse.from_session(session)
