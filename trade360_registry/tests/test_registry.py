"""
Unit tests for the named client registry.
"""

from unittest.mock import MagicMock

import pytest

from trade360_common.config import ClientSettings
from trade360_common.errors import (
    ConfigurationError,
    InvalidBaseUrlError,
    MissingCredentialsError,
    UnknownClientError,
)
from trade360_common.http_client import BaseHttpClient
from trade360_common.test_helpers import SNAPSHOT_BASE_URL, EnvelopeFactory, ProviderStub, fast_policy
from trade360_registry.registry import ClientRegistryBuilder, ClientState
from trade360_registry.validation import validate_base_url, validate_client_settings


class CredentialedClient(BaseHttpClient):
    requires_credentials = True


class TestClientRegistry:
    """Test cases for ClientRegistry resolution."""

    @pytest.fixture
    def stub(self):
        return ProviderStub()

    @pytest.fixture
    def builder(self, stub):
        return ClientRegistryBuilder(transport=stub.transport)

    def test_resolution_is_lazy(self, builder):
        """Test nothing is read at registration or build time."""
        provider = MagicMock(return_value=ClientSettings(base_url=None))
        builder.add_client("lazy", BaseHttpClient, provider)

        registry = builder.build()

        provider.assert_not_called()
        assert registry.state("lazy") == ClientState.REGISTERED

    def test_resolve_valid_settings(self, builder):
        """Test a valid registration becomes READY."""
        credentials = EnvelopeFactory.credentials()
        builder.add_client(
            "snapshot",
            CredentialedClient,
            lambda: ClientSettings(base_url=SNAPSHOT_BASE_URL, credentials=credentials),
            policy=fast_policy("snapshot")
        )
        registry = builder.build()

        client = registry.resolve("snapshot")

        assert isinstance(client, CredentialedClient)
        assert client.credentials == credentials
        assert client.name == "snapshot"
        assert str(client.base_url) == SNAPSHOT_BASE_URL
        assert registry.state("snapshot") == ClientState.READY

    def test_transport_handle_is_shared(self, builder):
        """Test each resolve returns a new client over one transport handle."""
        provider = MagicMock(return_value=ClientSettings(base_url=SNAPSHOT_BASE_URL))
        builder.add_client("shared", BaseHttpClient, provider)
        registry = builder.build()

        first = registry.resolve("shared")
        second = registry.resolve("shared")

        assert first is not second
        assert first._http is second._http
        assert first.policy is second.policy
        provider.assert_called_once()

    def test_missing_base_url_fails(self, builder):
        """Test a missing base URL."""
        builder.add_client("no-url", BaseHttpClient, lambda: ClientSettings(base_url=None))
        registry = builder.build()

        with pytest.raises(InvalidBaseUrlError):
            registry.resolve("no-url")
        assert registry.state("no-url") == ClientState.FAILED

    def test_missing_credentials_fails(self, builder):
        """Test a credential-requiring role without credentials."""
        builder.add_client("no-creds", CredentialedClient, lambda: ClientSettings(base_url=SNAPSHOT_BASE_URL))
        registry = builder.build()

        with pytest.raises(MissingCredentialsError) as exc_info:
            registry.resolve("no-creds")

        assert exc_info.value.details["name"] == "no-creds"

    def test_failure_is_cached(self, builder):
        """Test settings are not re-read after a failure."""
        provider = MagicMock(return_value=ClientSettings(base_url="not a url"))
        builder.add_client("broken", BaseHttpClient, provider)
        registry = builder.build()

        with pytest.raises(InvalidBaseUrlError) as first:
            registry.resolve("broken")
        provider.return_value = ClientSettings(base_url=SNAPSHOT_BASE_URL)
        with pytest.raises(InvalidBaseUrlError) as second:
            registry.resolve("broken")

        assert first.value is second.value
        provider.assert_called_once()

    def test_settings_provider_error_is_configuration_error(self, builder):
        """Test a provider that raises."""
        builder.add_client("raising", BaseHttpClient, MagicMock(side_effect=KeyError("base_url")))
        registry = builder.build()

        with pytest.raises(ConfigurationError) as exc_info:
            registry.resolve("raising")

        assert exc_info.value.code == "SETTINGS_UNAVAILABLE"
        assert registry.state("raising") == ClientState.FAILED

    def test_mapping_settings_are_accepted(self, builder):
        """Test providers may return plain mappings."""
        builder.add_client("mapping", BaseHttpClient, lambda: {"base_url": SNAPSHOT_BASE_URL})

        assert builder.build().try_resolve("mapping").ok

    def test_credentials_override(self, builder):
        """Test per-resolution credentials."""
        builder.add_client("customers", BaseHttpClient, lambda: ClientSettings(base_url=SNAPSHOT_BASE_URL))
        registry = builder.build()
        credentials = EnvelopeFactory.credentials(package_id=999)

        client = registry.resolve("customers", credentials=credentials)

        assert client.credentials.package_id == 999
        assert registry.resolve("customers").credentials is None

    def test_unknown_name(self, builder):
        """Test unregistered names."""
        registry = builder.build()

        with pytest.raises(UnknownClientError):
            registry.resolve("missing")
        assert registry.try_resolve("missing").error.code == "UNKNOWN_CLIENT"

    def test_try_resolve_returns_error_value(self, builder):
        """Test try_resolve does not raise configuration errors."""
        builder.add_client("ok", BaseHttpClient, lambda: ClientSettings(base_url=SNAPSHOT_BASE_URL))
        builder.add_client("bad", BaseHttpClient, lambda: ClientSettings(base_url="ftp://example.com"))
        registry = builder.build()

        good = registry.try_resolve("ok")
        bad = registry.try_resolve("bad")

        assert good.ok and isinstance(good.client, BaseHttpClient)
        assert not bad.ok and bad.client is None
        assert bad.error.code == "INVALID_BASE_URL"

    def test_duplicate_registration_rejected(self, builder):
        """Test duplicate names."""
        builder.add_client("dup", BaseHttpClient, lambda: ClientSettings())

        with pytest.raises(ValueError):
            builder.add_client("dup", BaseHttpClient, lambda: ClientSettings())

    def test_requires_credentials_defaults_to_client_class(self, builder):
        """Test the role default and its override."""
        builder.add_client("default", CredentialedClient, lambda: ClientSettings())
        builder.add_client("override", CredentialedClient, lambda: ClientSettings(), requires_credentials=False)
        registry = builder.build()

        assert registry.registration("default").requires_credentials is True
        assert registry.registration("override").requires_credentials is False

    def test_circuit_states(self, builder):
        """Test breaker state per name."""
        builder.add_client("a", BaseHttpClient, lambda: ClientSettings())
        registry = builder.build()

        assert registry.names == ["a"]
        assert registry.circuit_states()["a"]["state"] == "closed"

    @pytest.mark.asyncio
    async def test_resolved_client_calls_provider(self, builder, stub):
        """Test a resolved client sends through the registry transport."""
        builder.add_client("call", BaseHttpClient, lambda: ClientSettings(base_url=SNAPSHOT_BASE_URL),
                           headers={"X-Client": "trade360"})
        registry = builder.build()

        async with registry:
            result = await registry.resolve("call").send("Sports/Get", None, list)

        assert result == []
        assert stub.requests[0].headers["X-Client"] == "trade360"
        assert registry.state("call") == ClientState.VALIDATED

    @pytest.mark.asyncio
    async def test_aclose_closes_transport(self, builder):
        """Test transport handles are closed and rebuilt on next resolve."""
        builder.add_client("closing", BaseHttpClient, lambda: ClientSettings(base_url=SNAPSHOT_BASE_URL))
        registry = builder.build()
        http = registry.resolve("closing")._http

        await registry.aclose()

        assert http.is_closed
        assert registry.resolve("closing")._http is not http
        await registry.aclose()


class TestValidation:
    """Test cases for settings validation."""

    @pytest.mark.parametrize("base_url", [
        "https://snapshot.example.com/", "http://localhost:8080", "  https://api.example.com/v1/  "
    ])
    def test_valid_urls(self, base_url):
        assert validate_base_url(base_url) is None

    @pytest.mark.parametrize("base_url", [None, "", "   ", "not a url", "ftp://example.com", "/relative/path"])
    def test_invalid_urls(self, base_url):
        error = validate_base_url(base_url)

        assert isinstance(error, InvalidBaseUrlError)
        assert error.code == "INVALID_BASE_URL"

    def test_credentials_checked_only_when_required(self):
        settings = ClientSettings(base_url=SNAPSHOT_BASE_URL)

        assert validate_client_settings(settings, requires_credentials=False) is None
        assert isinstance(validate_client_settings(settings, requires_credentials=True), MissingCredentialsError)

    def test_url_error_reported_before_credentials(self):
        error = validate_client_settings(ClientSettings(), requires_credentials=True)

        assert isinstance(error, InvalidBaseUrlError)

    def test_url_without_host(self):
        assert isinstance(validate_base_url("https://"), InvalidBaseUrlError)
