"""Unit tests for user value objects."""

import dataclasses

import pytest

from domain.shared.errors import InvalidFormatError, RequiredFieldError, ValidationError
from domain.user.core.value_objects.email import Email
from domain.user.core.value_objects.gender import Gender
from domain.user.core.value_objects.person_name import PersonName
from domain.user.core.value_objects.user_role import UserRole


class TestEmail:
    """Test Email value object."""

    def test_trims_and_lowercases(self):
        assert Email.create("  Taro.Yamada@Example.COM ").value == "taro.yamada@example.com"

    def test_equality_by_normalized_value(self):
        assert Email.create("a@b.com") == Email.create("A@B.COM")
        assert hash(Email.create("a@b.com")) == hash(Email.create("A@B.com"))

    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_blank_is_required_error(self, raw):
        with pytest.raises(RequiredFieldError) as exc_info:
            Email.create(raw)

        assert exc_info.value.field == "email"

    def test_missing_at_sign_is_format_error(self):
        with pytest.raises(InvalidFormatError) as exc_info:
            Email.create("not-an-address")

        assert exc_info.value.field == "email"
        assert isinstance(exc_info.value, ValidationError)

    def test_is_immutable(self):
        email = Email.create("a@b.com")

        with pytest.raises(dataclasses.FrozenInstanceError):
            email.value = "c@d.com"  # type: ignore[misc]

    def test_str(self):
        assert str(Email.create("A@b.com")) == "a@b.com"


class TestPersonName:
    """Test PersonName value object."""

    def test_full_name_is_last_then_first(self):
        name = PersonName.create(first_name="太郎", last_name="山田")

        assert name.full_name == "山田 太郎"
        assert str(name) == "山田 太郎"

    def test_trims_both_parts(self):
        name = PersonName.create(first_name="  Taro ", last_name=" Yamada  ")

        assert name.first_name == "Taro"
        assert name.last_name == "Yamada"

    @pytest.mark.parametrize(
        "first_name,last_name",
        [("", "Yamada"), ("Taro", ""), ("   ", "Yamada"), ("Taro", "  ")],
    )
    def test_blank_part_is_required_error(self, first_name, last_name):
        with pytest.raises(RequiredFieldError, match="first/last name is required"):
            PersonName.create(first_name=first_name, last_name=last_name)


class TestEnums:
    """Test role and gender enums."""

    def test_role_values(self):
        assert {role.value for role in UserRole} == {"user", "admin"}
        assert UserRole("admin") is UserRole.ADMIN

    def test_gender_values(self):
        assert {gender.value for gender in Gender} == {"male", "female", "other"}

    def test_invalid_role_rejected(self):
        with pytest.raises(ValueError):
            UserRole("owner")
