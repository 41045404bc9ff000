"""Tests for the clock adapters.

Tests cover:
- SystemTimeProvider returns the current UTC time
- FixedTimeProvider is controllable with set_time() and advance()
- FixedTimeProvider only accepts tzinfo=UTC values
"""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from cashdesk_payments.application.ports import TimeProvider
from cashdesk_payments.infrastructure.time_provider import (
    FixedTimeProvider,
    SystemTimeProvider,
)

NOON = datetime(2024, 5, 13, 12, 0, 0, tzinfo=UTC)
VIENNA_SUMMER = timezone(timedelta(hours=2))


class TestSystemTimeProvider:
    def test_implements_time_provider_interface(self) -> None:
        assert isinstance(SystemTimeProvider(), TimeProvider)

    def test_now_returns_utc_datetime(self) -> None:
        assert SystemTimeProvider().now().tzinfo is UTC

    def test_now_returns_current_time(self) -> None:
        provider = SystemTimeProvider()
        before = datetime.now(UTC)

        result = provider.now()

        assert before <= result <= datetime.now(UTC)


class TestFixedTimeProvider:
    def test_now_returns_fixed_time(self) -> None:
        provider = FixedTimeProvider(NOON)

        assert provider.now() == NOON
        assert provider.now() == provider.now()

    def test_set_time_changes_returned_time(self) -> None:
        provider = FixedTimeProvider(NOON)
        earlier = NOON - timedelta(hours=2)

        provider.set_time(earlier)

        assert provider.now() == earlier

    def test_advance_moves_clock_forward(self) -> None:
        provider = FixedTimeProvider(NOON)

        returned = provider.advance(timedelta(minutes=5))

        assert returned == NOON + timedelta(minutes=5)
        assert provider.now() == returned

    def test_advance_accumulates(self) -> None:
        provider = FixedTimeProvider(NOON)

        provider.advance(timedelta(seconds=30))
        provider.advance(timedelta(seconds=45))

        assert provider.now() == NOON + timedelta(seconds=75)

    def test_advance_keeps_utc(self) -> None:
        provider = FixedTimeProvider(NOON)

        assert provider.advance(timedelta(days=1)).tzinfo is UTC


class TestFixedTimeProviderUtcValidation:
    """FixedTimeProvider requires tzinfo=UTC specifically, not just any aware value."""

    def test_creation_raises_for_naive_datetime(self) -> None:
        with pytest.raises(ValueError, match="tzinfo=UTC"):
            FixedTimeProvider(datetime(2024, 5, 13, 12, 0, 0))

    def test_creation_raises_for_non_utc_timezone(self) -> None:
        with pytest.raises(ValueError, match="tzinfo=UTC"):
            FixedTimeProvider(datetime(2024, 5, 13, 14, 0, 0, tzinfo=VIENNA_SUMMER))

    def test_set_time_raises_for_naive_datetime(self) -> None:
        provider = FixedTimeProvider(NOON)

        with pytest.raises(ValueError, match="tzinfo=UTC"):
            provider.set_time(datetime(2024, 5, 13, 13, 0, 0))

    def test_failed_set_time_keeps_previous_value(self) -> None:
        provider = FixedTimeProvider(NOON)

        with pytest.raises(ValueError):
            provider.set_time(datetime(2024, 5, 13, 14, 0, 0, tzinfo=VIENNA_SUMMER))

        assert provider.now() == NOON
