"""Tests for custom exception hierarchy."""

from account_analytics.exceptions import (
    AccountAnalyticsError,
    ConfigurationError,
    DuplicateKeyError,
    EntityNotFoundError,
    InvalidEmailError,
    SinkError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_base_error_is_exception(self) -> None:
        assert isinstance(AccountAnalyticsError("test"), Exception)

    def test_entity_not_found_is_base_error(self) -> None:
        assert isinstance(EntityNotFoundError("test"), AccountAnalyticsError)

    def test_duplicate_key_is_base_error(self) -> None:
        assert isinstance(DuplicateKeyError(1), AccountAnalyticsError)

    def test_not_found_and_duplicate_are_distinct(self) -> None:
        assert not issubclass(DuplicateKeyError, EntityNotFoundError)
        assert not issubclass(EntityNotFoundError, DuplicateKeyError)

    def test_invalid_email_is_value_error(self) -> None:
        err = InvalidEmailError("bad")
        assert isinstance(err, ValueError)
        assert isinstance(err, AccountAnalyticsError)

    def test_configuration_error_is_base_error(self) -> None:
        assert isinstance(ConfigurationError("test"), AccountAnalyticsError)

    def test_sink_error_is_base_error(self) -> None:
        assert isinstance(SinkError("test"), AccountAnalyticsError)


class TestExceptionMessages:
    """Test messages and carried keys."""

    def test_not_found_carries_key(self) -> None:
        err = EntityNotFoundError("Cannot find Account by email=a@b.c", key="a@b.c")
        assert str(err) == "Cannot find Account by email=a@b.c"
        assert err.key == "a@b.c"

    def test_not_found_key_optional(self) -> None:
        assert EntityNotFoundError("missing").key is None

    def test_duplicate_key_message(self) -> None:
        err = DuplicateKeyError(7)
        assert str(err) == "Duplicate key 7"
        assert err.key == 7

    def test_duplicate_key_message_with_values(self) -> None:
        err = DuplicateKeyError("k", "old", "new")
        assert str(err) == "Duplicate key k (attempted merging values 'old' and 'new')"
