"""
Admission enquiry handling.

Public visitors submit an enquiry from the landing page. The enquiry is
logged and handed to a notifier; storing it or e-mailing the office is up
to whichever notifier is plugged in.
"""

from typing import Optional, Protocol

from campushub.core.logging_config import logger
from campushub.schemas.enquiry import EnquiryFormInput, EnquiryFormOutput

ACKNOWLEDGEMENT = (
    "Thank you for your enquiry, {full_name}. We have received your message "
    "regarding class {class_interested} and will get back to you shortly."
)


class EnquiryNotifier(Protocol):
    async def notify(self, enquiry: EnquiryFormInput) -> None:
        ...


class LoggingEnquiryNotifier:
    """Default notifier: writes the enquiry to the application log"""

    async def notify(self, enquiry: EnquiryFormInput) -> None:
        logger.info(
            f"[Enquiry] New enquiry from {enquiry.full_name} for class {enquiry.class_interested}",
            extra={
                "event_type": "enquiry_received",
                "enquiry_email": enquiry.email,
                "enquiry_phone": enquiry.phone,
                "class_interested": enquiry.class_interested,
            },
        )


class EnquiryService:
    def __init__(self, notifier: Optional[EnquiryNotifier] = None):
        self.notifier = notifier or LoggingEnquiryNotifier()

    async def submit(self, enquiry: EnquiryFormInput) -> EnquiryFormOutput:
        await self.notifier.notify(enquiry)
        return EnquiryFormOutput(
            success=True,
            message=ACKNOWLEDGEMENT.format(
                full_name=enquiry.full_name,
                class_interested=enquiry.class_interested,
            ),
        )
