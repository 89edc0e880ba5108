"""
End-to-end integration tests: settings -> registry -> client -> provider.
"""

import json
from datetime import datetime

import httpx
import pytest
from prometheus_client import CollectorRegistry

from trade360_common.errors import BodyMissingError, CircuitOpenError, HeaderMissingError, TransientTransportError
from trade360_common.metrics import ClientMetrics
from trade360_common.test_helpers import EnvelopeFactory, ProviderStub
from trade360_customers.models import GetFixtureMetadataRequestDto, GetTranslationsRequestDto
from trade360_registry.registration import (
    CUSTOMERS_METADATA,
    CUSTOMERS_SUBSCRIPTION,
    SNAPSHOT_INPLAY,
    SNAPSHOT_PREMATCH,
    create_client_registry,
)
from trade360_snapshot.models import GetFixturesRequestDto


class TestEndToEndFlow:
    """End-to-end tests over a scripted provider."""

    @pytest.fixture
    def stub(self):
        return ProviderStub()

    @pytest.fixture
    def metrics(self):
        return ClientMetrics(CollectorRegistry())

    @pytest.fixture
    def registry(self, stub, metrics):
        return create_client_registry(EnvelopeFactory.settings(), metrics=metrics, transport=stub.transport)

    @pytest.mark.asyncio
    async def test_prematch_fixtures_empty_body(self, registry, stub):
        """Test an empty body list is a valid, empty result."""
        stub.replies = [EnvelopeFactory.envelope([])]

        async with registry:
            client = registry.resolve(SNAPSHOT_PREMATCH)
            fixtures = await client.get_fixtures(GetFixturesRequestDto())

        assert fixtures == []
        request = stub.requests[0]
        assert str(request.url) == "https://snapshot.example.com/Prematch/GetFixtures"
        body = stub.last_json()
        assert (body["PackageId"], body["UserName"], body["Password"]) == (123, "u", "p")

    @pytest.mark.asyncio
    async def test_prematch_fixtures_missing_body(self, registry, stub):
        """Test a header-only envelope is a protocol violation."""
        stub.replies = [EnvelopeFactory.envelope(include_body=False)]

        async with registry:
            with pytest.raises(BodyMissingError):
                await registry.resolve(SNAPSHOT_PREMATCH).get_fixtures(GetFixturesRequestDto())

        assert stub.calls == 1

    @pytest.mark.asyncio
    async def test_prematch_fixtures_missing_header(self, registry, stub):
        """Test a body-only envelope is a protocol violation."""
        stub.replies = [EnvelopeFactory.envelope([], include_header=False)]

        async with registry:
            with pytest.raises(HeaderMissingError):
                await registry.resolve(SNAPSHOT_PREMATCH).get_fixtures()

    @pytest.mark.asyncio
    async def test_products_use_their_own_packages(self, registry, stub):
        """Test prematch and inplay calls carry different package ids."""
        async with registry:
            await registry.resolve(SNAPSHOT_PREMATCH).get_fixtures()
            await registry.resolve(SNAPSHOT_INPLAY).get_fixtures()

        assert [request.url.path for request in stub.requests] == ["/Prematch/GetFixtures", "/Inplay/GetFixtures"]
        assert [json.loads(request.content)["PackageId"] for request in stub.requests] == [123, 456]

    @pytest.mark.asyncio
    async def test_customers_with_resolved_credentials(self, registry, stub):
        """Test customers clients take credentials at resolution time."""
        stub.replies = [
            EnvelopeFactory.envelope({"Sports": {"1": []}}),
            EnvelopeFactory.envelope({"SubscribedFixtures": []}),
        ]
        credentials = EnvelopeFactory.credentials(package_id=789)

        async with registry:
            metadata = registry.resolve(CUSTOMERS_METADATA, credentials=credentials)
            await metadata.get_translations(GetTranslationsRequestDto(sport_ids=[6046], languages=[1]))
            subscription = registry.resolve(CUSTOMERS_SUBSCRIPTION, credentials=credentials)
            await subscription.get_fixture_metadata(GetFixtureMetadataRequestDto(
                from_date=datetime(2024, 5, 1), to_date=datetime(2024, 5, 2)
            ))

        assert stub.requests[0].url == "https://customers.example.com/Translation/Get"
        assert stub.requests[1].url.params["PackageId"] == "789"
        assert stub.requests[1].url.params["FromDate"] == "05/01/2024"

    @pytest.mark.asyncio
    async def test_outage_opens_breaker_for_one_client_only(self, registry, stub, metrics):
        """Test a failing product does not affect the other product."""
        def failing_prematch(request):
            if request.url.path.startswith("/Prematch"):
                return httpx.Response(503)
            return EnvelopeFactory.response([])

        stub.replies = [failing_prematch]

        async with registry:
            prematch = registry.resolve(SNAPSHOT_PREMATCH)
            for _ in range(3):
                with pytest.raises(TransientTransportError):
                    await prematch.get_fixtures()
            with pytest.raises(CircuitOpenError):
                await prematch.get_fixtures()

            assert await registry.resolve(SNAPSHOT_INPLAY).get_fixtures() == []

        assert registry.circuit_states()[SNAPSHOT_PREMATCH]["state"] == "open"
        assert registry.circuit_states()[SNAPSHOT_INPLAY]["state"] == "closed"
        assert metrics.registry.get_sample_value(
            "trade360_client_requests_total",
            {"client": SNAPSHOT_PREMATCH, "endpoint": "Prematch/GetFixtures", "outcome": "circuit_open"}
        ) == 1.0
