"""Unit tests for User entity."""

from datetime import datetime, timezone

import pytest
from freezegun import freeze_time

from domain.shared.errors import InvalidFormatError, RequiredFieldError, UnsetFieldError
from domain.user.core.entities.user import User
from domain.user.core.value_objects.email import Email
from domain.user.core.value_objects.gender import Gender
from domain.user.core.value_objects.person_name import PersonName
from domain.user.core.value_objects.user_role import UserRole

CREATED = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def new_user(**overrides) -> User:
    params = dict(
        email="Taro@Example.com",
        role=UserRole.USER,
        first_name="太郎",
        last_name="山田",
        gender=Gender.MALE,
        acting_user_id="system",
    )
    params.update(overrides)
    return User.create_new(**params)


def stored_user(**overrides) -> User:
    params = dict(
        id="01HZX0000000000000000000AA",
        email=Email.create("taro@example.com"),
        role=UserRole.USER,
        name=PersonName.create(first_name="太郎", last_name="山田"),
        gender=Gender.MALE,
        created_at=CREATED,
        created_by="system",
        updated_at=CREATED,
        updated_by="system",
    )
    params.update(overrides)
    return User.reconstruct(**params)


class TestCreateNew:
    """Test User.create_new()."""

    def test_sets_fields_and_audit(self):
        user = new_user()

        assert user.email == "taro@example.com"
        assert user.role == UserRole.USER
        assert user.first_name == "太郎"
        assert user.last_name == "山田"
        assert user.full_name == "山田 太郎"
        assert user.gender == Gender.MALE
        assert user.created_by == "system"
        assert user.updated_by == "system"
        assert user.deleted_at is None
        assert user.deleted_by is None
        assert user.is_deleted is False

    def test_gender_is_optional(self):
        assert new_user(gender=None).gender is None

    def test_leaves_store_fields_unset(self):
        user = new_user()

        assert user.is_persisted is False
        with pytest.raises(UnsetFieldError, match="id is not set"):
            _ = user.id
        with pytest.raises(UnsetFieldError, match="created_at is not set"):
            _ = user.created_at
        with pytest.raises(UnsetFieldError, match="updated_at is not set"):
            _ = user.updated_at

    def test_to_primitives_before_persistence_fails(self):
        with pytest.raises(UnsetFieldError):
            new_user().to_primitives()

    def test_invalid_email(self):
        with pytest.raises(InvalidFormatError):
            new_user(email="no-at-sign")

    def test_blank_name(self):
        with pytest.raises(RequiredFieldError):
            new_user(first_name="  ")


class TestMutations:
    """Test mutation methods touch audit fields."""

    @freeze_time("2025-01-02 09:30:00")
    def test_change_name(self):
        user = stored_user()

        user.change_name("次郎", "山田", "admin1")

        assert user.first_name == "次郎"
        assert user.full_name == "山田 次郎"
        assert user.updated_by == "admin1"
        assert user.updated_at == datetime(2025, 1, 2, 9, 30, tzinfo=timezone.utc)
        assert user.created_by == "system"
        assert user.created_at == CREATED

    @freeze_time("2025-01-02 09:30:00")
    def test_change_email_normalizes(self):
        user = stored_user()

        user.change_email("  NEW@Example.com", "admin1")

        assert user.email == "new@example.com"
        assert user.updated_by == "admin1"

    def test_change_email_invalid_keeps_previous(self):
        user = stored_user()

        with pytest.raises(InvalidFormatError):
            user.change_email("broken", "admin1")

        assert user.email == "taro@example.com"
        assert user.updated_by == "system"

    @freeze_time("2025-01-02 09:30:00")
    def test_change_role_and_gender(self):
        user = stored_user()

        user.change_role(UserRole.ADMIN, "admin1")
        user.change_gender(None, "admin2")

        assert user.role == UserRole.ADMIN
        assert user.gender is None
        assert user.updated_by == "admin2"

    @freeze_time("2025-01-03 00:00:00")
    def test_delete_uses_supplied_timestamp(self):
        user = stored_user()
        deleted_at = datetime(2024, 12, 31, 23, 59, tzinfo=timezone.utc)

        user.delete("admin1", deleted_at)

        assert user.is_deleted is True
        assert user.deleted_at == deleted_at
        assert user.deleted_by == "admin1"
        assert user.updated_by == "admin1"
        assert user.updated_at == datetime(2025, 1, 3, tzinfo=timezone.utc)


class TestSerialization:
    """Test to_primitives() and identity."""

    def test_to_primitives(self):
        primitives = stored_user(gender=None).to_primitives()

        assert primitives == {
            "id": "01HZX0000000000000000000AA",
            "email": "taro@example.com",
            "role": "user",
            "first_name": "太郎",
            "last_name": "山田",
            "full_name": "山田 太郎",
            "gender": None,
            "created_at": CREATED,
            "created_by": "system",
            "updated_at": CREATED,
            "updated_by": "system",
            "deleted_at": None,
            "deleted_by": None,
        }

    def test_equality_by_id(self):
        assert stored_user() == stored_user(role=UserRole.ADMIN)
        assert stored_user() != stored_user(id="other")

    def test_unpersisted_users_equal_only_to_themselves(self):
        first = new_user()

        assert first == first
        assert first != new_user()
