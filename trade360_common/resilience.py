"""
Composed retry + circuit breaker policy applied to every outbound call.
"""

import time
from typing import Any, Awaitable, Callable, Dict, Optional

from .cancellation import CancellationToken
from .circuit_breaker import CircuitBreaker, CircuitBreakerConfig
from .config import Trade360Settings
from .metrics import ClientMetrics
from .retry import RetryConfig, RetryPolicy


class ResiliencePolicy:
    """Retry as the inner policy, circuit breaker as the outer one.

    The breaker sees the final outcome of a retried sequence: a call that
    succeeds on its third attempt is one success, a call that exhausts its
    attempts is one failure.
    """

    def __init__(self,
                 name: str,
                 retry_config: Optional[RetryConfig] = None,
                 breaker_config: Optional[CircuitBreakerConfig] = None,
                 metrics: Optional[ClientMetrics] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.name = name
        self.metrics = metrics
        self.retry = RetryPolicy(
            retry_config,
            name=name,
            on_retry=self._on_retry if metrics is not None else None
        )
        self.circuit_breaker = CircuitBreaker(
            breaker_config,
            name=name,
            clock=clock,
            on_state_change=self._on_state_change if metrics is not None else None
        )
        if metrics is not None:
            metrics.set_breaker_state(name, self.circuit_breaker.state)

    @property
    def retry_config(self) -> RetryConfig:
        return self.retry.config

    @property
    def breaker_config(self) -> CircuitBreakerConfig:
        return self.circuit_breaker.config

    def _on_retry(self, attempt: int, error: BaseException, delay: float):
        self.metrics.record_retry(self.name)

    def _on_state_change(self, state):
        self.metrics.set_breaker_state(self.name, state)

    async def execute(self,
                      func: Callable[..., Awaitable[Any]],
                      *args,
                      cancellation: Optional[CancellationToken] = None,
                      **kwargs) -> Any:
        """Run one logical call under the policy."""
        return await self.circuit_breaker.call(
            self.retry.execute, func, *args, cancellation=cancellation, **kwargs
        )

    def get_state(self) -> Dict[str, Any]:
        return self.circuit_breaker.get_state()


def standard_policy(name: str,
                    settings: Optional[Trade360Settings] = None,
                    metrics: Optional[ClientMetrics] = None) -> ResiliencePolicy:
    """Build the standard policy for a named client from settings."""
    if settings is None:
        return ResiliencePolicy(name, metrics=metrics)

    return ResiliencePolicy(
        name,
        retry_config=RetryConfig(
            max_attempts=settings.retry_max_attempts,
            base_delay=settings.retry_base_delay,
            max_delay=settings.retry_max_delay,
            jitter=settings.retry_jitter
        ),
        breaker_config=CircuitBreakerConfig(
            failure_threshold=settings.breaker_failure_threshold,
            recovery_timeout=settings.breaker_recovery_timeout,
            sampling_window=settings.breaker_sampling_window
        ),
        metrics=metrics
    )
