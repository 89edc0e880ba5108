"""
Circuit breaker pattern implementation for resilient provider calls.
"""

import threading
import time
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Deque, Dict, Optional, Tuple, Type

from .errors import CircuitOpenError, TransientTransportError
from .logging import get_logger


class CircuitBreakerState(Enum):
    """Circuit breaker states."""
    CLOSED = "closed"      # Normal operation
    OPEN = "open"          # Failing, requests blocked
    HALF_OPEN = "half_open"  # Testing if provider recovered


@dataclass(frozen=True)
class CircuitBreakerConfig:
    """Configuration for circuit breaker behavior."""

    failure_threshold: int = 3
    recovery_timeout: float = 30.0
    # Failures older than this no longer count toward the threshold.
    sampling_window: Optional[float] = None

    def __post_init__(self):
        if self.failure_threshold < 1:
            raise ValueError("failure_threshold must be at least 1")
        if self.recovery_timeout < 0:
            raise ValueError("recovery_timeout cannot be negative")
        if self.sampling_window is not None and self.sampling_window <= 0:
            raise ValueError("sampling_window must be positive")


class CircuitBreaker:
    """Circuit breaker shared by every call of one named client.

    Only exceptions in ``failure_exceptions`` count as failures. Any other
    outcome leaves the failure count unchanged; when it ends a half-open
    trial, the trial slot is released so the next caller can try again.
    """

    def __init__(self,
                 config: Optional[CircuitBreakerConfig] = None,
                 failure_exceptions: Tuple[Type[BaseException], ...] = (TransientTransportError,),
                 name: str = "default",
                 clock: Callable[[], float] = time.monotonic,
                 on_state_change: Optional[Callable[[CircuitBreakerState], None]] = None):
        self.config = config or CircuitBreakerConfig()
        self.failure_exceptions = failure_exceptions
        self.name = name
        self.logger = get_logger(f"trade360.circuit_breaker.{name}")
        self._clock = clock
        self._on_state_change = on_state_change
        self._lock = threading.Lock()

        self._state = CircuitBreakerState.CLOSED
        self._failure_times: Deque[float] = deque()
        self._success_count = 0
        self._last_failure_time = 0.0
        self._opened_at = 0.0
        self._trial_in_flight = False

    @property
    def failure_threshold(self) -> int:
        return self.config.failure_threshold

    @property
    def recovery_timeout(self) -> float:
        return self.config.recovery_timeout

    @property
    def state(self) -> CircuitBreakerState:
        with self._lock:
            return self._state

    def _transition(self, new_state: CircuitBreakerState):
        # Caller holds the lock.
        if self._state == new_state:
            return
        self._state = new_state
        if self._on_state_change is not None:
            self._on_state_change(new_state)

    def _acquire_permission(self) -> bool:
        """Returns True when the call is the half-open trial."""
        with self._lock:
            if self._state == CircuitBreakerState.CLOSED:
                return False

            now = self._clock()
            if self._state == CircuitBreakerState.OPEN:
                elapsed = now - self._opened_at
                if elapsed < self.config.recovery_timeout:
                    raise CircuitOpenError(self.name, self.config.recovery_timeout - elapsed)
                self._transition(CircuitBreakerState.HALF_OPEN)
                self.logger.info("Circuit breaker transitioning to half-open")

            # HALF_OPEN: a single trial call at a time
            if self._trial_in_flight:
                raise CircuitOpenError(self.name)
            self._trial_in_flight = True
            return True

    async def call(self, func: Callable[..., Awaitable[Any]], *args, **kwargs) -> Any:
        """Execute function with circuit breaker protection."""
        is_trial = self._acquire_permission()

        try:
            result = await func(*args, **kwargs)
        except self.failure_exceptions as e:
            self._record_failure(is_trial, e)
            raise
        except BaseException:
            if is_trial:
                self._release_trial()
            raise

        self._record_success(is_trial)
        return result

    def _record_success(self, is_trial: bool):
        with self._lock:
            self._success_count += 1
            self._failure_times.clear()
            if is_trial:
                self._trial_in_flight = False
                self._transition(CircuitBreakerState.CLOSED)
                self.logger.info("Circuit breaker reset to CLOSED after successful call")

    def _release_trial(self):
        with self._lock:
            self._trial_in_flight = False

    def _record_failure(self, is_trial: bool, error: BaseException):
        """Record a failure and update state."""
        with self._lock:
            now = self._clock()
            self._failure_times.append(now)
            window = self.config.sampling_window
            if window is not None:
                while now - self._failure_times[0] > window:
                    self._failure_times.popleft()
            self._last_failure_time = now
            self._success_count = 0

            if is_trial:
                self._trial_in_flight = False
                self._opened_at = now
                self._transition(CircuitBreakerState.OPEN)
                self.logger.warning("Circuit breaker re-opened after failed trial call", error=str(error))
            elif (self._state == CircuitBreakerState.CLOSED
                  and len(self._failure_times) >= self.config.failure_threshold):
                self._opened_at = now
                self._transition(CircuitBreakerState.OPEN)
                self.logger.warning(
                    "Circuit breaker opened due to failures",
                    failure_count=len(self._failure_times),
                    threshold=self.config.failure_threshold
                )

    def get_state(self) -> Dict[str, Any]:
        """Get current circuit breaker state."""
        with self._lock:
            return {
                "name": self.name,
                "state": self._state.value,
                "failure_count": len(self._failure_times),
                "success_count": self._success_count,
                "last_failure_time": self._last_failure_time,
                "failure_threshold": self.config.failure_threshold,
                "recovery_timeout": self.config.recovery_timeout
            }

    def is_open(self) -> bool:
        """Check if circuit breaker is in OPEN state."""
        return self.state == CircuitBreakerState.OPEN

    def reset(self):
        """Force the breaker back to CLOSED."""
        with self._lock:
            self._failure_times.clear()
            self._trial_in_flight = False
            self._transition(CircuitBreakerState.CLOSED)
