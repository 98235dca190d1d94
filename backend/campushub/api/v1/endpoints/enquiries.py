from fastapi import APIRouter, Depends, Request

from campushub.core.rate_limiter import enquiry_rate_limit
from campushub.schemas.enquiry import EnquiryFormInput, EnquiryFormOutput
from campushub.services.enquiry_service import EnquiryService
from campushub.modules.auth.dependencies import get_enquiry_service

router = APIRouter(prefix="/enquiries", tags=["Enquiries"])


@router.post("", response_model=EnquiryFormOutput)
@enquiry_rate_limit()
async def submit_enquiry(
    request: Request,
    enquiry: EnquiryFormInput,
    service: EnquiryService = Depends(get_enquiry_service),
):
    """Public admission enquiry form (no sign-in, rate limited)"""
    return await service.submit(enquiry)
