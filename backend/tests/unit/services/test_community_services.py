"""
Unit Tests for Notices, Gallery and Leave
"""
from datetime import date, datetime, timedelta
from types import SimpleNamespace

import pytest

from campushub.core.config import settings
from campushub.core.exceptions import ValidationError
from campushub.schemas.common import EntityType
from campushub.services.notices import is_expired


def notice_form(**overrides):
    fields = {
        "title": "Sports Week Schedule",
        "content": "Sports week begins on Monday with the opening ceremony.",
        "author": "Sports Office",
        "notice_type": "Event",
    }
    fields.update(overrides)
    return fields


class TestNotices:
    """Test notice board views"""

    def test_issued_date_set_on_create(self, registry):
        notice = registry.manager(EntityType.NOTICES).create(notice_form())

        assert isinstance(notice.issued_date, datetime)
        assert notice.target_audience == ["All"]
        assert notice.id.startswith("N")

    def test_issued_date_preserved_on_edit(self, registry):
        manager = registry.manager(EntityType.NOTICES)
        original = manager.get("N2")

        updated = manager.update("N2", notice_form(title="Holiday Announcement: Winter Break"))

        assert updated.issued_date == original.issued_date

    def test_newest_first(self, registry):
        notices = registry.manager(EntityType.NOTICES).query()

        assert notices[0].id == "N6"
        assert notices[-1].id == "N5"

    def test_expiry(self):
        today = date(2024, 7, 20)
        notice = SimpleNamespace(expiry_date=today)

        assert is_expired(notice, today) is True
        assert is_expired(notice, today - timedelta(days=1)) is False

    def test_active_and_expired_partition(self, registry):
        active = registry.notices.active(today=date(2024, 7, 21))
        expired = registry.notices.expired(today=date(2024, 7, 21))

        assert {n.id for n in active} == {"N1", "N2", "N4", "N6"}
        assert {n.id for n in expired} == {"N3", "N5"}

    def test_target_audience_deduplicated(self, registry):
        notice = registry.manager(EntityType.NOTICES).create(
            notice_form(target_audience=["Parents", "Parents", "Students"])
        )

        assert notice.target_audience == ["Parents", "Students"]

    def test_short_title_rejected(self, registry):
        with pytest.raises(ValidationError) as exc_info:
            registry.manager(EntityType.NOTICES).create(notice_form(title="Hi"))

        assert "title" in exc_info.value.errors


class TestGallery:
    """Test gallery items"""

    def test_blank_image_url_uses_placeholder(self, registry):
        item = registry.manager(EntityType.GALLERY).create({
            "title": "Sports Day",
            "image_url": "",
            "image_hint": "sports",
        })

        assert item.image_url == settings.PLACEHOLDER_IMAGE_URL
        assert item.date == date.today()

    def test_date_preserved_on_edit(self, registry):
        updated = registry.manager(EntityType.GALLERY).update("G1", {
            "title": "Annual Sports Day 2024",
            "image_url": "https://example.com/sports.png",
            "image_hint": "sports children",
            "event_tag": "Sports",
        })

        assert updated.date == date(2024, 3, 15)
        assert updated.image_url == "https://example.com/sports.png"

    def test_hint_must_be_one_or_two_words(self, registry):
        with pytest.raises(ValidationError) as exc_info:
            registry.manager(EntityType.GALLERY).create({
                "title": "Sports Day",
                "image_hint": "children running on track",
            })

        assert "image_hint" in exc_info.value.errors

    def test_invalid_url_rejected(self, registry):
        with pytest.raises(ValidationError) as exc_info:
            registry.manager(EntityType.GALLERY).create({
                "title": "Sports Day",
                "image_url": "not a url",
                "image_hint": "sports",
            })

        assert "image_url" in exc_info.value.errors

    def test_event_tags_sorted_distinct(self, registry):
        assert registry.gallery.event_tags() == [
            "Academics", "Ceremony", "Culture", "Social", "Sports", "Workshop",
        ]

    def test_browse_by_tag_and_order(self, registry):
        newest = registry.gallery.browse()
        oldest = registry.gallery.browse(order="oldest")

        assert newest[0].id == "G4"
        assert oldest[0].id == "G6"
        assert [i.id for i in registry.gallery.browse(event_tag="Sports")] == ["G1"]
        assert len(registry.gallery.browse(event_tag="All")) == 6

    def test_browse_unknown_order(self, registry):
        with pytest.raises(ValidationError):
            registry.gallery.browse(order="random")


class TestLeave:
    """Test leave requests"""

    def test_new_request_is_pending(self, registry):
        request = registry.manager(EntityType.LEAVE_REQUESTS).create({
            "employee_name": "Mr. David Lee",
            "employee_id": "T2004",
            "leave_type": "Sick",
            "start_date": "2024-09-02",
            "end_date": "2024-09-03",
            "reason": "Fever",
        })

        assert request.status == "Pending"
        assert request.applied_date == date.today()

    def test_end_before_start_rejected(self, registry):
        with pytest.raises(ValidationError) as exc_info:
            registry.manager(EntityType.LEAVE_REQUESTS).create({
                "employee_name": "Mr. David Lee",
                "employee_id": "T2004",
                "leave_type": "Sick",
                "start_date": "2024-09-03",
                "end_date": "2024-09-02",
                "reason": "Fever",
            })

        assert exc_info.value.errors == {"end_date": ["End date cannot be before start date."]}

    def test_approve_and_reject(self, registry):
        assert registry.leave.approve("LR001").status == "Approved"
        assert registry.leave.reject("LR003").status == "Rejected"
        assert registry.leave.pending() == ()

    def test_decided_request_cannot_be_decided_again(self, registry):
        with pytest.raises(ValidationError) as exc_info:
            registry.leave.approve("LR002")

        assert exc_info.value.fields == ["status"]

    def test_sorted_by_applied_date_desc(self, registry):
        ids = [r.id for r in registry.manager(EntityType.LEAVE_REQUESTS).query()]

        assert ids == ["LR004", "LR003", "LR002", "LR001"]
