"""
Retry mechanism for transient outbound failures.
"""

import random
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Tuple, Type

from .cancellation import CancellationToken, sleep
from .errors import TransientTransportError
from .logging import get_logger

# 408 Request Timeout, 429 Too Many Requests and every 5xx
TRANSIENT_STATUS_CODES = frozenset({408, 429})


def is_transient_status(status_code: int) -> bool:
    """True for HTTP statuses that are worth retrying."""
    return status_code >= 500 or status_code in TRANSIENT_STATUS_CODES


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for retry behavior."""

    max_attempts: int = 4
    base_delay: float = 2.0
    max_delay: float = 30.0
    exponential_base: float = 2.0
    jitter: bool = True
    backoff_strategy: str = "exponential"

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.base_delay < 0 or self.max_delay < 0:
            raise ValueError("retry delays cannot be negative")


def calculate_delay(attempt: int, config: RetryConfig) -> float:
    """Calculate delay between retry attempts."""
    if config.backoff_strategy == "exponential":
        delay = config.base_delay * (config.exponential_base ** (attempt - 1))
    elif config.backoff_strategy == "linear":
        delay = config.base_delay * attempt
    elif config.backoff_strategy == "fixed":
        delay = config.base_delay
    else:
        delay = config.base_delay

    # Apply max delay cap
    delay = min(delay, config.max_delay)

    # Add jitter if enabled
    if config.jitter:
        jitter_amount = delay * 0.1  # 10% jitter
        delay += random.uniform(-jitter_amount, jitter_amount)

    return max(0.0, delay)


class RetryPolicy:
    """Retries a call on transient failures with backoff between attempts.

    Only exceptions listed in ``retry_on`` are retried; everything else,
    including ``RequestCancelledError`` and ``asyncio.CancelledError``,
    propagates from the attempt that raised it. When attempts run out the
    last transient error is re-raised with ``attempts`` set, so the caller
    sees exactly one failure.
    """

    def __init__(self,
                 config: Optional[RetryConfig] = None,
                 retry_on: Tuple[Type[BaseException], ...] = (TransientTransportError,),
                 name: str = "default",
                 on_retry: Optional[Callable[[int, BaseException, float], None]] = None):
        self.config = config or RetryConfig()
        self.retry_on = retry_on
        self.name = name
        self.on_retry = on_retry
        self.logger = get_logger(f"trade360.retry.{name}")

    def _delay_for(self, attempt: int, error: BaseException) -> float:
        delay = calculate_delay(attempt, self.config)
        retry_after = getattr(error, "retry_after", None)
        if retry_after:
            delay = max(delay, min(float(retry_after), self.config.max_delay))
        return delay

    async def execute(self,
                      func: Callable[..., Awaitable[Any]],
                      *args,
                      cancellation: Optional[CancellationToken] = None,
                      **kwargs) -> Any:
        """Run ``func`` until it succeeds or attempts are exhausted."""
        for attempt in range(1, self.config.max_attempts + 1):
            if cancellation is not None:
                cancellation.raise_if_cancelled()

            try:
                result = await func(*args, **kwargs)
            except self.retry_on as e:
                if hasattr(e, "attempts"):
                    e.attempts = attempt

                if attempt == self.config.max_attempts:
                    self.logger.error(
                        "All retry attempts exhausted",
                        attempt=attempt,
                        max_attempts=self.config.max_attempts,
                        error=str(e)
                    )
                    raise

                delay = self._delay_for(attempt, e)
                self.logger.warning(
                    "Retry attempt failed, waiting before next attempt",
                    attempt=attempt,
                    delay=round(delay, 3),
                    error=str(e)
                )
                if self.on_retry is not None:
                    self.on_retry(attempt, e, delay)

                await sleep(delay, cancellation)
                continue

            if attempt > 1:
                self.logger.info("Retry succeeded", attempt=attempt)
            return result

        # max_attempts >= 1 is enforced by RetryConfig
        raise AssertionError("unreachable")
