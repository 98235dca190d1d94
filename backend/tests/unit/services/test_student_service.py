"""
Unit Tests for Student Service
Tests for: class promotion, class filtering, student form rules
"""
import pytest

from campushub.core.exceptions import RecordNotFoundError, ValidationError
from campushub.schemas.common import EntityType
from campushub.services.students import next_class


class TestNextClass:
    """Test the promotion ladder"""

    @pytest.mark.parametrize("current,expected", [
        ("NC", "1"),
        ("1", "2"),
        ("9", "10"),
        ("11", "12"),
        ("12", "Graduated"),
    ])
    def test_next_class(self, current, expected):
        assert next_class(current) == expected

    def test_graduated_has_no_next_class(self):
        assert next_class("Graduated") is None


class TestPromote:
    """Test StudentService.promote"""

    def test_promote_moves_up_one_class(self, registry):
        """Alice (class 10) moves to 11"""
        result = registry.students.promote("S1001")

        assert result.promoted is True
        assert result.previous_class == "10"
        assert result.student.class_name == "11"
        assert registry.students.manager.get("S1001").class_name == "11"

    def test_promote_nursery_to_first(self, registry):
        """NC promotes to 1"""
        result = registry.students.promote("S1004")

        assert result.student.class_name == "1"

    def test_promote_twelve_graduates(self, registry):
        """Class 12 graduates"""
        result = registry.students.promote("S1005")

        assert result.student.class_name == "Graduated"
        assert "graduated" in result.message

    def test_promote_graduated_is_noop(self, registry):
        """A graduated student is left unchanged without error"""
        before = registry.students.manager.get("S1006")

        result = registry.students.promote("S1006")

        assert result.promoted is False
        assert registry.students.manager.get("S1006") == before

    def test_promote_unknown_student(self, registry):
        with pytest.raises(RecordNotFoundError):
            registry.students.promote("S0000")


class TestStudentRecords:
    """Test student create rules through the manager"""

    def test_by_class_all_returns_everyone(self, registry):
        assert len(registry.students.by_class("All")) == 6

    def test_by_class_filters(self, registry):
        assert [s.name for s in registry.students.by_class("10")] == ["Alice Johnson"]

    def test_students_sorted_by_name(self, registry):
        names = [s.name for s in registry.manager(EntityType.STUDENTS).query()]
        assert names == sorted(names, key=str.lower)

    def test_cannot_enrol_directly_as_graduated(self, registry):
        """Graduated is reachable only through promotion"""
        with pytest.raises(ValidationError) as exc_info:
            registry.manager(EntityType.STUDENTS).create({
                "name": "Gina Hart",
                "class_name": "Graduated",
                "section": "A",
                "admission_date": "2024-06-01",
            })

        assert "class_name" in exc_info.value.errors

    def test_graduated_student_can_still_be_edited(self, registry):
        """Resubmitting a graduate's own class keeps the record editable"""
        students = registry.manager(EntityType.STUDENTS)
        graduate = students.get("S1006")
        fields = graduate.model_dump(exclude={"id"})
        fields["address"] = "12 Harbour View, Anytown"

        updated = students.update("S1006", fields)

        assert updated.class_name == "Graduated"
        assert updated.address == "12 Harbour View, Anytown"

    def test_cannot_graduate_through_an_edit(self, registry):
        """An enrolled student only graduates by promotion"""
        students = registry.manager(EntityType.STUDENTS)
        fields = students.get("S1005").model_dump(exclude={"id"})
        fields["class_name"] = "Graduated"

        with pytest.raises(ValidationError) as exc_info:
            students.update("S1005", fields)

        assert "class_name" in exc_info.value.errors
        assert students.get("S1005").class_name == "12"

    def test_section_is_upper_cased(self, registry):
        student = registry.manager(EntityType.STUDENTS).create({
            "name": "Gina Hart",
            "class_name": "3",
            "section": "b",
            "admission_date": "2024-06-01",
            "gender": "",
        })

        assert student.section == "B"
        assert student.gender is None
        assert student.id.startswith("S")

    def test_invalid_admission_date(self, registry):
        with pytest.raises(ValidationError) as exc_info:
            registry.manager(EntityType.STUDENTS).create({
                "name": "Gina Hart",
                "class_name": "3",
                "section": "B",
                "admission_date": "not-a-date",
            })

        assert list(exc_info.value.errors) == ["admission_date"]
