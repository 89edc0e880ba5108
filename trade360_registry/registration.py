"""
Standard registrations for the Trade360 product clients.

Settings may be passed as a ``Trade360Settings`` object or as a
zero-argument callable returning one. Base URLs and credentials are only
checked when a client is first resolved. Retry, breaker and timeout values
come from a settings object; a callable gets the default policy.
"""

from typing import Callable, Optional, Union

import httpx

from trade360_common.config import ClientSettings, Trade360Settings, get_settings
from trade360_common.metrics import ClientMetrics
from trade360_common.resilience import standard_policy
from trade360_customers.metadata_client import MetadataApiClient
from trade360_customers.package_distribution_client import PackageDistributionApiClient
from trade360_customers.subscription_client import SubscriptionApiClient
from trade360_snapshot.inplay_client import SnapshotInplayApiClient
from trade360_snapshot.prematch_client import SnapshotPrematchApiClient

from .registry import ClientRegistry, ClientRegistryBuilder

CUSTOMERS_METADATA = "customers-metadata"
CUSTOMERS_PACKAGE_DISTRIBUTION = "customers-package-distribution"
CUSTOMERS_SUBSCRIPTION = "customers-subscription"
SNAPSHOT_PREMATCH = "snapshot-prematch"
SNAPSHOT_INPLAY = "snapshot-inplay"

SettingsSource = Union[Trade360Settings, Callable[[], Trade360Settings]]


def _settings_getter(settings: SettingsSource) -> Callable[[], Trade360Settings]:
    if callable(settings) and not isinstance(settings, Trade360Settings):
        return settings
    return lambda: settings


def _register(builder: ClientRegistryBuilder, name: str, client_class, settings: SettingsSource,
              provider: Callable[[Trade360Settings], ClientSettings]):
    get = _settings_getter(settings)
    # Policy settings are read eagerly; base URL and credentials stay lazy.
    policy_settings = settings if isinstance(settings, Trade360Settings) else None
    builder.add_client(
        name,
        client_class,
        lambda: provider(get()),
        policy=standard_policy(name, policy_settings, builder.metrics),
        timeout=policy_settings.request_timeout if policy_settings is not None else 30.0
    )


def add_customers_api_clients(builder: ClientRegistryBuilder,
                              settings: SettingsSource) -> ClientRegistryBuilder:
    """Register the three Customers API clients; credentials are optional."""

    def provider(values: Trade360Settings) -> ClientSettings:
        return ClientSettings(base_url=values.customers_api_base_url)

    _register(builder, CUSTOMERS_METADATA, MetadataApiClient, settings, provider)
    _register(builder, CUSTOMERS_PACKAGE_DISTRIBUTION, PackageDistributionApiClient, settings, provider)
    _register(builder, CUSTOMERS_SUBSCRIPTION, SubscriptionApiClient, settings, provider)
    return builder


def add_prematch_snapshot_client(builder: ClientRegistryBuilder,
                                 settings: SettingsSource) -> ClientRegistryBuilder:
    def provider(values: Trade360Settings) -> ClientSettings:
        return ClientSettings(
            base_url=values.snapshot_api_base_url,
            credentials=values.prematch_package_credentials
        )

    _register(builder, SNAPSHOT_PREMATCH, SnapshotPrematchApiClient, settings, provider)
    return builder


def add_inplay_snapshot_client(builder: ClientRegistryBuilder,
                               settings: SettingsSource) -> ClientRegistryBuilder:
    def provider(values: Trade360Settings) -> ClientSettings:
        return ClientSettings(
            base_url=values.snapshot_api_base_url,
            credentials=values.inplay_package_credentials
        )

    _register(builder, SNAPSHOT_INPLAY, SnapshotInplayApiClient, settings, provider)
    return builder


def register_trade360_clients(builder: ClientRegistryBuilder,
                              settings: SettingsSource) -> ClientRegistryBuilder:
    """Register all five product clients."""
    add_customers_api_clients(builder, settings)
    add_prematch_snapshot_client(builder, settings)
    add_inplay_snapshot_client(builder, settings)
    return builder


def create_client_registry(settings: Optional[SettingsSource] = None,
                           metrics: Optional[ClientMetrics] = None,
                           transport: Optional[httpx.AsyncBaseTransport] = None) -> ClientRegistry:
    """Registry with every product client registered.

    Without ``settings`` they are loaded from the environment once, here.
    """
    builder = ClientRegistryBuilder(metrics=metrics, transport=transport)
    register_trade360_clients(builder, settings if settings is not None else get_settings())
    return builder.build()
