from pydantic import EmailStr
from typing import Optional
from datetime import datetime

from campushub.core.session import Session, UserRole
from campushub.schemas.common import CamelModel, OptionalStr


class LoginRequest(CamelModel):
    email: EmailStr
    role: UserRole = UserRole.STUDENT
    name: OptionalStr = None


class UserResponse(CamelModel):
    id: str
    name: Optional[str] = None
    email: str
    role: UserRole
    issued_at: datetime

    @classmethod
    def from_session(cls, session: Session) -> "UserResponse":
        return cls(
            id=session.user_id,
            name=session.name,
            email=session.email,
            role=session.role,
            issued_at=session.issued_at,
        )


class LoginResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
