"""
Unit tests for the retry policy.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from trade360_common.cancellation import CancellationToken
from trade360_common.errors import HeaderMissingError, RequestCancelledError, TransientTransportError
from trade360_common.retry import RetryConfig, RetryPolicy, calculate_delay, is_transient_status


class TestRetryConfig:
    """Test cases for retry configuration and delays."""

    def test_exponential_delays_are_capped(self):
        """Test exponential growth up to max_delay."""
        config = RetryConfig(base_delay=2.0, max_delay=5.0, jitter=False)

        assert calculate_delay(1, config) == 2.0
        assert calculate_delay(2, config) == 4.0
        assert calculate_delay(3, config) == 5.0

    def test_jitter_stays_within_ten_percent(self):
        """Test jittered delays."""
        config = RetryConfig(base_delay=1.0, jitter=True)

        for _ in range(50):
            assert 0.9 <= calculate_delay(1, config) <= 1.1

    def test_invalid_attempts(self):
        """Test max_attempts validation."""
        with pytest.raises(ValueError):
            RetryConfig(max_attempts=0)

    @pytest.mark.parametrize("status,expected", [
        (500, True), (503, True), (408, True), (429, True), (400, False), (404, False), (200, False)
    ])
    def test_transient_statuses(self, status, expected):
        """Test status classification."""
        assert is_transient_status(status) is expected


class TestRetryPolicy:
    """Test cases for RetryPolicy."""

    @pytest.fixture
    def policy(self):
        """Policy without waits."""
        return RetryPolicy(RetryConfig(max_attempts=3, base_delay=0.0, jitter=False), name="test")

    @pytest.mark.asyncio
    async def test_succeeds_after_transient_failures(self, policy):
        """Test retry until success."""
        func = AsyncMock(side_effect=[TransientTransportError(), TransientTransportError(), "ok"])

        result = await policy.execute(func, "a", key="b")

        assert result == "ok"
        assert func.await_count == 3
        func.assert_awaited_with("a", key="b")

    @pytest.mark.asyncio
    async def test_exhaustion_raises_last_error_with_attempts(self, policy):
        """Test the last transient error surfaces after max attempts."""
        errors = [TransientTransportError(f"failure {i}") for i in range(3)]
        func = AsyncMock(side_effect=errors)

        with pytest.raises(TransientTransportError) as exc_info:
            await policy.execute(func)

        assert exc_info.value is errors[-1]
        assert exc_info.value.attempts == 3
        assert func.await_count == 3

    @pytest.mark.asyncio
    async def test_non_transient_errors_are_not_retried(self, policy):
        """Test protocol violations propagate immediately."""
        func = AsyncMock(side_effect=HeaderMissingError())

        with pytest.raises(HeaderMissingError):
            await policy.execute(func)

        assert func.await_count == 1

    @pytest.mark.asyncio
    async def test_native_cancellation_is_not_retried(self, policy):
        """Test asyncio cancellation propagates untouched."""
        func = AsyncMock(side_effect=asyncio.CancelledError())

        with pytest.raises(asyncio.CancelledError):
            await policy.execute(func)

        assert func.await_count == 1

    @pytest.mark.asyncio
    async def test_no_attempt_after_cancellation(self, policy):
        """Test a cancelled token stops further attempts."""
        token = CancellationToken()

        async def fail_and_cancel():
            token.cancel()
            raise TransientTransportError()

        func = AsyncMock(side_effect=fail_and_cancel)

        with pytest.raises(RequestCancelledError):
            await policy.execute(func, cancellation=token)

        assert func.await_count == 1

    @pytest.mark.asyncio
    async def test_cancellation_interrupts_backoff_wait(self):
        """Test a pending retry wait is aborted by the token."""
        policy = RetryPolicy(RetryConfig(max_attempts=3, base_delay=30.0, jitter=False))
        token = CancellationToken()
        func = AsyncMock(side_effect=TransientTransportError())

        task = asyncio.create_task(policy.execute(func, cancellation=token))
        await asyncio.sleep(0.01)
        token.cancel()

        with pytest.raises(RequestCancelledError):
            await asyncio.wait_for(task, timeout=1.0)
        assert func.await_count == 1

    @pytest.mark.asyncio
    async def test_retry_after_raises_the_wait(self):
        """Test Retry-After is honoured up to max_delay."""
        on_retry = MagicMock()
        policy = RetryPolicy(
            RetryConfig(max_attempts=2, base_delay=0.0, max_delay=0.05, jitter=False),
            on_retry=on_retry
        )
        func = AsyncMock(side_effect=[TransientTransportError(status_code=429, retry_after=10.0), "ok"])

        assert await policy.execute(func) == "ok"

        attempt, error, delay = on_retry.call_args.args
        assert attempt == 1
        assert error.status_code == 429
        assert delay == 0.05
