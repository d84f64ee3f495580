"""
Tests for the domain errors and guard functions.

Pure functions and plain exceptions; no IO required.
"""

from datetime import datetime, timezone
from uuid import UUID, uuid4

import pytest

from postboard.domain.entities import Post, User
from postboard.domain.errors import (
    AuthenticationError,
    BadCredentialsError,
    BadParamsError,
    DocumentNotFoundError,
    DomainError,
    OwnershipError,
    UserValidationError,
)
from postboard.domain.guards import (
    canonical_id,
    handle_404,
    require_ownership,
    same_id,
    validate_user,
)

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _user(user_id: UUID) -> User:
    return User(
        id=user_id,
        email="a@example.com",
        hashed_password="x",
        nickname="alice",
        created_at=NOW,
        updated_at=NOW,
    )


def _post(owner: UUID) -> Post:
    return Post(
        id=uuid4(),
        title="Hello",
        body="",
        owner=owner,
        created_at=NOW,
        updated_at=NOW,
    )


class TestDomainErrors:
    """The closed set of domain errors and their fixed messages."""

    @pytest.mark.parametrize(
        "error_type, name, message",
        [
            (
                OwnershipError,
                "OwnershipError",
                "The provided token does not match the owner of this document",
            ),
            (
                UserValidationError,
                "UserValidationError",
                "The provided token does not match the current user ID",
            ),
            (
                DocumentNotFoundError,
                "DocumentNotFoundError",
                "The provided ID doesn't match any documents",
            ),
            (
                BadParamsError,
                "BadParamsError",
                "A required parameter was omitted or invalid",
            ),
        ],
    )
    def test_name_and_message(self, error_type, name, message) -> None:
        error = error_type()
        assert error.name == name
        assert error.message == message
        assert str(error) == message
        assert isinstance(error, DomainError)

    def test_domain_error_set_is_closed(self) -> None:
        assert set(DomainError.__subclasses__()) == {
            OwnershipError,
            UserValidationError,
            DocumentNotFoundError,
            BadParamsError,
        }

    def test_authentication_errors_are_not_domain_errors(self) -> None:
        assert not issubclass(AuthenticationError, DomainError)
        assert issubclass(BadCredentialsError, AuthenticationError)


class TestSameId:
    """Identifier-level equality."""

    def test_uuid_equals_its_string_form(self) -> None:
        value = uuid4()
        assert same_id(value, str(value))
        assert same_id(str(value).upper(), value)
        assert same_id(value.hex, value)

    def test_distinct_objects_with_same_value(self) -> None:
        value = uuid4()
        assert same_id(UUID(str(value)), UUID(str(value)))

    def test_plain_strings(self) -> None:
        assert same_id("u1", "u1")
        assert not same_id("u1", "u2")

    def test_none_never_matches(self) -> None:
        assert not same_id(None, None)
        assert not same_id(None, "u1")
        assert not same_id("u1", None)

    def test_canonical_id(self) -> None:
        value = uuid4()
        assert canonical_id(value.hex) == str(value)
        assert canonical_id("u1") == "u1"
        assert canonical_id(None) is None


class TestRequireOwnership:

    def test_owner_passes(self) -> None:
        assert require_ownership({"id": "u1"}, {"owner": "u1"}) is None

    def test_non_owner_raises(self) -> None:
        with pytest.raises(OwnershipError) as exc_info:
            require_ownership({"id": "u1"}, {"owner": "u2"})
        assert exc_info.value.name == "OwnershipError"
        assert exc_info.value.message == (
            "The provided token does not match the owner of this document"
        )

    def test_entities(self) -> None:
        owner_id = uuid4()
        require_ownership(_user(owner_id), _post(owner_id))
        with pytest.raises(OwnershipError):
            require_ownership(_user(uuid4()), _post(owner_id))

    def test_resource_without_owner_raises(self) -> None:
        with pytest.raises(OwnershipError):
            require_ownership({"id": "u1"}, {})


class TestValidateUser:

    def test_same_user_passes(self) -> None:
        user_id = uuid4()
        assert validate_user(_user(user_id), _user(UUID(str(user_id)))) is None

    def test_other_user_raises(self) -> None:
        with pytest.raises(UserValidationError) as exc_info:
            validate_user(_user(uuid4()), _user(uuid4()))
        assert exc_info.value.name == "UserValidationError"

    def test_compares_against_id_not_owner(self) -> None:
        with pytest.raises(UserValidationError):
            validate_user({"id": "u1"}, {"id": "u2", "owner": "u1"})


class TestHandle404:

    def test_none_raises(self) -> None:
        with pytest.raises(DocumentNotFoundError) as exc_info:
            handle_404(None)
        assert exc_info.value.name == "DocumentNotFoundError"

    def test_record_is_returned_unchanged(self) -> None:
        record = {"id": "p1"}
        assert handle_404(record) is record
        assert handle_404(record) == {"id": "p1"}

    def test_empty_mapping_is_a_record(self) -> None:
        record: dict = {}
        assert handle_404(record) is record
