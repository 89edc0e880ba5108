"""
Named client registry.

Each registered name moves through ``REGISTERED -> VALIDATED -> READY`` the
first time it is resolved. Settings are read once; a validation failure
moves the name to ``FAILED`` and the same error is raised on every later
resolution without reading settings again.
"""

import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Type, Union

import httpx

from trade360_common.config import ClientSettings, PackageCredentials
from trade360_common.errors import ConfigurationError, UnknownClientError
from trade360_common.http_client import BaseHttpClient
from trade360_common.logging import get_logger
from trade360_common.metrics import ClientMetrics
from trade360_common.resilience import ResiliencePolicy

from .validation import validate_client_settings

SettingsProvider = Callable[[], Union[ClientSettings, Mapping[str, Any]]]

DEFAULT_TIMEOUT = 30.0


class ClientState(Enum):
    """Lifecycle of a named client."""
    REGISTERED = "registered"
    VALIDATED = "validated"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class NamedClientRegistration:
    """How to materialize one named client."""

    name: str
    client_class: Type[BaseHttpClient]
    settings_provider: SettingsProvider
    policy: ResiliencePolicy
    requires_credentials: bool
    timeout: float = DEFAULT_TIMEOUT
    headers: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Resolution:
    """Outcome of ``ClientRegistry.try_resolve``: a client or an error."""

    client: Optional[BaseHttpClient] = None
    error: Optional[ConfigurationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class _Slot:
    """Mutable per-name state, guarded by its own lock."""

    def __init__(self, registration: NamedClientRegistration):
        self.registration = registration
        self.lock = threading.Lock()
        self.state = ClientState.REGISTERED
        self.settings: Optional[ClientSettings] = None
        self.error: Optional[ConfigurationError] = None
        self.http_client: Optional[httpx.AsyncClient] = None


class ClientRegistryBuilder:
    """Accumulates named client registrations."""

    def __init__(self,
                 metrics: Optional[ClientMetrics] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.metrics = metrics
        self.transport = transport
        self._registrations: Dict[str, NamedClientRegistration] = {}

    def add_client(self,
                   name: str,
                   client_class: Type[BaseHttpClient],
                   settings_provider: SettingsProvider,
                   policy: Optional[ResiliencePolicy] = None,
                   requires_credentials: Optional[bool] = None,
                   timeout: float = DEFAULT_TIMEOUT,
                   headers: Optional[Mapping[str, str]] = None) -> "ClientRegistryBuilder":
        """Register ``name``. Nothing is read or validated yet."""
        if not name:
            raise ValueError("Client name cannot be empty")
        if name in self._registrations:
            raise ValueError(f"Client '{name}' is already registered")

        if requires_credentials is None:
            requires_credentials = client_class.requires_credentials

        self._registrations[name] = NamedClientRegistration(
            name=name,
            client_class=client_class,
            settings_provider=settings_provider,
            policy=policy or ResiliencePolicy(name, metrics=self.metrics),
            requires_credentials=requires_credentials,
            timeout=timeout,
            headers=dict(headers or {})
        )
        return self

    def has_client(self, name: str) -> bool:
        return name in self._registrations

    def build(self) -> "ClientRegistry":
        return ClientRegistry(list(self._registrations.values()), self.metrics, self.transport)


class ClientRegistry:
    """Resolves registered names into ready-to-use endpoint clients.

    One ``httpx.AsyncClient`` is built per name on first successful
    resolution and shared by every client resolved afterwards. Each
    ``resolve`` call returns a fresh endpoint client over it.
    """

    def __init__(self,
                 registrations: List[NamedClientRegistration],
                 metrics: Optional[ClientMetrics] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self._slots = {registration.name: _Slot(registration) for registration in registrations}
        self._metrics = metrics
        self._transport = transport
        self.logger = get_logger("trade360.registry")

    @property
    def names(self) -> List[str]:
        return list(self._slots)

    def _slot(self, name: str) -> _Slot:
        slot = self._slots.get(name)
        if slot is None:
            raise UnknownClientError(name)
        return slot

    def state(self, name: str) -> ClientState:
        slot = self._slot(name)
        with slot.lock:
            return slot.state

    def registration(self, name: str) -> NamedClientRegistration:
        return self._slot(name).registration

    def resolve(self, name: str, credentials: Optional[PackageCredentials] = None) -> BaseHttpClient:
        """Return a new client for ``name``.

        ``credentials`` overrides the configured package credentials for
        this client instance only.

        Raises:
            UnknownClientError: ``name`` was never registered.
            InvalidBaseUrlError: the base URL is missing or invalid.
            MissingCredentialsError: the role requires credentials and none are set.
        """
        slot = self._slot(name)
        registration = slot.registration

        with slot.lock:
            if slot.state == ClientState.FAILED:
                raise slot.error
            if slot.state == ClientState.REGISTERED:
                self._validate(slot)
            if slot.state == ClientState.VALIDATED:
                self._materialize(slot)
            http_client = slot.http_client
            settings = slot.settings

        return registration.client_class(
            http_client,
            policy=registration.policy,
            credentials=credentials or settings.credentials,
            name=name,
            metrics=self._metrics
        )

    def try_resolve(self, name: str, credentials: Optional[PackageCredentials] = None) -> Resolution:
        """Like ``resolve`` but returns configuration errors instead of raising."""
        try:
            return Resolution(client=self.resolve(name, credentials))
        except ConfigurationError as e:
            return Resolution(error=e)

    def _validate(self, slot: _Slot):
        # Caller holds slot.lock.
        registration = slot.registration
        try:
            raw = registration.settings_provider()
            settings = raw if isinstance(raw, ClientSettings) else ClientSettings.model_validate(raw)
        except ConfigurationError as e:
            self._fail(slot, e)
            raise
        except Exception as exc:
            error = ConfigurationError(
                "SETTINGS_UNAVAILABLE",
                "Client settings could not be read",
                {"name": registration.name, "error": str(exc)}
            )
            self._fail(slot, error)
            raise error from exc

        error = validate_client_settings(settings, registration.requires_credentials)
        if error is not None:
            error.details.setdefault("name", registration.name)
            self._fail(slot, error)
            raise error

        slot.settings = settings
        slot.state = ClientState.VALIDATED
        self.logger.info("Client settings validated", name=registration.name, base_url=settings.base_url)

    def _fail(self, slot: _Slot, error: ConfigurationError):
        slot.state = ClientState.FAILED
        slot.error = error
        self.logger.error(
            "Client configuration invalid",
            name=slot.registration.name,
            code=error.code,
            error=error.message
        )

    def _materialize(self, slot: _Slot):
        # Caller holds slot.lock.
        registration = slot.registration
        kwargs: Dict[str, Any] = {
            "base_url": slot.settings.base_url.strip(),
            "timeout": registration.timeout,
            "headers": dict(registration.headers),
        }
        if self._transport is not None:
            kwargs["transport"] = self._transport
        slot.http_client = httpx.AsyncClient(**kwargs)
        slot.state = ClientState.READY
        self.logger.info("Client ready", name=registration.name)

    def circuit_states(self) -> Dict[str, Dict[str, Any]]:
        """Circuit breaker state of every registered name."""
        return {
            name: slot.registration.policy.get_state()
            for name, slot in self._slots.items()
        }

    async def aclose(self):
        """Close every transport handle; names resolve again afterwards."""
        for slot in self._slots.values():
            with slot.lock:
                http_client = slot.http_client
                slot.http_client = None
                if slot.state == ClientState.READY:
                    slot.state = ClientState.VALIDATED
            if http_client is not None:
                await http_client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()
