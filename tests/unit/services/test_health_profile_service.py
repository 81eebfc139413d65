"""Tests for the health profile service."""

import pytest

from app.core.exceptions import NotFoundError
from app.schemas.health_profile import HealthConditionsUpdate, HealthProfileSave
from app.services.health_profile_service import HealthProfileService, is_profile_complete


@pytest.fixture
def service(db):
    return HealthProfileService(db)


def _complete(**overrides) -> HealthProfileSave:
    data = dict(name="Ada", age="adult", activity_level="active", outdoor_exposure="high",
                has_respiratory_condition=True, conditions=["asthma"], medications=["salbutamol"])
    data.update(overrides)
    return HealthProfileSave(**data)


class TestIsComplete:
    def test_all_essentials(self):
        assert is_profile_complete(_complete())

    @pytest.mark.parametrize("missing", ["age", "activity_level", "outdoor_exposure"])
    def test_missing_essential(self, missing):
        assert not is_profile_complete(_complete(**{missing: None}))

    def test_empty_string_is_missing(self):
        assert not is_profile_complete(_complete(age=""))


class TestSave:
    def test_create_then_update(self, service):
        created = service.save("u1", _complete())
        assert created.is_new is True

        updated = service.save("u1", _complete(age=None, conditions=[]))
        assert updated.is_new is False
        assert updated.profile_id == created.profile_id

        profile = service.get("u1")
        assert profile.age is None
        assert profile.conditions == []
        assert profile.is_complete is False
        assert profile.updated_at >= profile.created_at

    def test_get_missing(self, service):
        assert service.get("nobody") is None


class TestStatus:
    def test_missing(self, service):
        status = service.get_status("nobody")
        assert status.exists is False
        assert status.is_complete is False
        assert status.profile is None

    def test_existing(self, service):
        service.save("u1", _complete())
        status = service.get_status("u1")
        assert status.exists is True
        assert status.is_complete is True
        assert status.profile.user_key == "u1"


class TestUpdateConditions:
    def test_requires_existing_profile(self, service):
        with pytest.raises(NotFoundError):
            service.update_conditions("nobody", HealthConditionsUpdate(has_respiratory_condition=False))
        assert service.get("nobody") is None

    def test_patches_condition_fields_only(self, service):
        service.save("u1", _complete())
        result = service.update_conditions(
            "u1", HealthConditionsUpdate(has_respiratory_condition=True, conditions=["copd"],
                                         condition_severity="severe", medications=[]))
        assert result.success is True

        profile = service.get("u1")
        assert profile.conditions == ["copd"]
        assert profile.condition_severity == "severe"
        assert profile.medications == []
        assert profile.name == "Ada"
        assert profile.is_complete is True


class TestDelete:
    def test_delete(self, service):
        service.save("u1", _complete())
        assert service.delete("u1").success is True
        assert service.get("u1") is None

    def test_delete_missing(self, service):
        result = service.delete("nobody")
        assert result.success is False
        assert result.message == "Profile not found"
