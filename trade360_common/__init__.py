"""
Shared building blocks for the Trade360 SDK.

This package aggregates the pieces every endpoint client is built on:

- config: SDK settings via pydantic-settings, package credentials
- logging: Structured logging with call correlation
- metrics: Prometheus metrics for outbound calls
- errors: Canonical error types and responses
- envelope: Request encoding and response envelope decoding
- cancellation: Cancellation tokens and deadlines
- retry / circuit_breaker / resilience: Outbound call protection
- http_client: Base typed client used by every endpoint client

Do not import from the registry or endpoint packages into trade360_common.
"""
