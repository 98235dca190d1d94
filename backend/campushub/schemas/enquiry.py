from pydantic import EmailStr, Field

from campushub.schemas.common import CamelModel, OptionalStr


class EnquiryFormInput(CamelModel):
    full_name: str = Field(..., min_length=1)
    email: EmailStr
    phone: OptionalStr = None
    class_interested: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)


class EnquiryFormOutput(CamelModel):
    success: bool
    message: str
