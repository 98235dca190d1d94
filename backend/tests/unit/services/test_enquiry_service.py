"""
Unit Tests for Enquiry Service
"""
import pytest
from unittest.mock import AsyncMock
from faker import Faker

from campushub.schemas.enquiry import EnquiryFormInput
from campushub.services.enquiry_service import EnquiryService

fake = Faker()


def enquiry(**overrides) -> EnquiryFormInput:
    fields = {
        "fullName": "Priya Raman",
        "email": fake.email(),
        "classInterested": "5",
        "message": "Is there a bus service from the east side?",
    }
    fields.update(overrides)
    return EnquiryFormInput.model_validate(fields)


class TestEnquiryService:
    """Test EnquiryService.submit"""

    @pytest.mark.asyncio
    async def test_acknowledgement_message(self):
        result = await EnquiryService().submit(enquiry())

        assert result.success is True
        assert result.message == (
            "Thank you for your enquiry, Priya Raman. We have received your message "
            "regarding class 5 and will get back to you shortly."
        )

    @pytest.mark.asyncio
    async def test_enquiry_handed_to_notifier(self):
        notifier = AsyncMock()
        submitted = enquiry(phone="555-123-4567")

        await EnquiryService(notifier=notifier).submit(submitted)

        notifier.notify.assert_awaited_once_with(submitted)

    @pytest.mark.asyncio
    async def test_notifier_failure_propagates(self):
        notifier = AsyncMock()
        notifier.notify.side_effect = ConnectionError("mail server down")

        with pytest.raises(ConnectionError):
            await EnquiryService(notifier=notifier).submit(enquiry())
