"""
Shared metrics for Trade360 SDK clients.
"""

import threading
from typing import Dict, Any, Optional

from prometheus_client import Counter, Histogram, Gauge, CollectorRegistry, REGISTRY

from .circuit_breaker import CircuitBreakerState

_BREAKER_STATE_VALUES = {
    CircuitBreakerState.CLOSED: 0,
    CircuitBreakerState.HALF_OPEN: 1,
    CircuitBreakerState.OPEN: 2,
}


class ClientMetrics:
    """Prometheus metrics for outbound provider calls."""

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.registry = registry if registry is not None else REGISTRY
        self._metrics: Dict[str, Any] = {}
        self._setup_metrics()

    def _setup_metrics(self):
        """Set up client metrics."""
        self._metrics["client_requests_total"] = Counter(
            "trade360_client_requests_total",
            "Total provider calls by final outcome",
            ["client", "endpoint", "outcome"],
            registry=self.registry
        )

        self._metrics["client_request_duration_seconds"] = Histogram(
            "trade360_client_request_duration_seconds",
            "Provider call duration in seconds, retries included",
            ["client", "endpoint"],
            registry=self.registry
        )

        self._metrics["client_retries_total"] = Counter(
            "trade360_client_retries_total",
            "Total retried attempts",
            ["client"],
            registry=self.registry
        )

        self._metrics["circuit_breaker_state"] = Gauge(
            "trade360_circuit_breaker_state",
            "Circuit breaker state (0=closed, 1=half_open, 2=open)",
            ["client"],
            registry=self.registry
        )

    def record_request(self, client: str, endpoint: str, outcome: str, duration: float):
        """Record a completed logical call."""
        self._metrics["client_requests_total"].labels(
            client=client,
            endpoint=endpoint,
            outcome=outcome
        ).inc()

        self._metrics["client_request_duration_seconds"].labels(
            client=client,
            endpoint=endpoint
        ).observe(duration)

    def record_retry(self, client: str):
        self._metrics["client_retries_total"].labels(client=client).inc()

    def set_breaker_state(self, client: str, state: CircuitBreakerState):
        self._metrics["circuit_breaker_state"].labels(client=client).set(_BREAKER_STATE_VALUES[state])


_default_collector: Optional[ClientMetrics] = None
_default_lock = threading.Lock()


def get_metrics_collector(registry: Optional[CollectorRegistry] = None) -> ClientMetrics:
    """Get a metrics collector.

    Without a registry the process-wide collector on the default
    Prometheus registry is returned, created on first use.
    """
    global _default_collector
    if registry is not None:
        return ClientMetrics(registry)
    with _default_lock:
        if _default_collector is None:
            _default_collector = ClientMetrics()
        return _default_collector
