"""
Customers API client for subscriptions and manual suspensions.
"""

from typing import Optional

from trade360_common.cancellation import CancellationToken
from trade360_common.http_client import BaseHttpClient

from . import mapping
from .metadata_client import FIXTURE_METADATA_PATH
from .models import (
    ChangeManualSuspensionRequestDto,
    ChangeManualSuspensionResponse,
    CompetitionSubscriptionCollectionResponse,
    CompetitionSubscriptionRequestDto,
    FixtureScheduleCollectionResponse,
    FixtureSubscriptionCollectionResponse,
    FixtureSubscriptionRequestDto,
    GetFixtureMetadataCollectionResponse,
    GetFixtureMetadataRequestDto,
    GetFixtureScheduleRequestDto,
    GetManualSuspensionResponse,
    GetProviderOddsTypeResponse,
    GetSubscriptionRequestDto,
    GetSubscriptionResponse,
    LeagueSubscriptionCollectionResponse,
    LeagueSubscriptionRequestDto,
    PackageQuotaResponse,
)


class SubscriptionApiClient(BaseHttpClient):
    default_name = "customers-subscription"

    async def get_package_quota(self, cancellation: Optional[CancellationToken] = None) -> PackageQuotaResponse:
        return await self.send("/package/GetPackageQuota", None, PackageQuotaResponse, cancellation=cancellation)

    async def get_provider_odds_type(self, cancellation: Optional[CancellationToken] = None
                                     ) -> GetProviderOddsTypeResponse:
        return await self.send("Package/GetProviderOddsType", None, GetProviderOddsTypeResponse,
                               cancellation=cancellation, method="GET")

    async def get_inplay_fixture_schedule(self, request: Optional[GetFixtureScheduleRequestDto] = None,
                                          cancellation: Optional[CancellationToken] = None
                                          ) -> FixtureScheduleCollectionResponse:
        return await self.send("Fixtures/InPlaySchedule", mapping.to_fixture_schedule_request(request),
                               FixtureScheduleCollectionResponse, cancellation=cancellation)

    async def subscribe_by_fixture(self, request: FixtureSubscriptionRequestDto,
                                   cancellation: Optional[CancellationToken] = None
                                   ) -> FixtureSubscriptionCollectionResponse:
        return await self.send("Fixtures/Subscribe", mapping.to_fixture_subscription_request(request),
                               FixtureSubscriptionCollectionResponse, cancellation=cancellation)

    async def unsubscribe_by_fixture(self, request: FixtureSubscriptionRequestDto,
                                     cancellation: Optional[CancellationToken] = None
                                     ) -> FixtureSubscriptionCollectionResponse:
        return await self.send("Fixtures/UnSubscribe", mapping.to_fixture_subscription_request(request),
                               FixtureSubscriptionCollectionResponse, cancellation=cancellation)

    async def subscribe_by_league(self, request: LeagueSubscriptionRequestDto,
                                  cancellation: Optional[CancellationToken] = None
                                  ) -> LeagueSubscriptionCollectionResponse:
        return await self.send("Leagues/Subscribe", mapping.to_league_subscription_request(request),
                               LeagueSubscriptionCollectionResponse, cancellation=cancellation)

    async def unsubscribe_by_league(self, request: LeagueSubscriptionRequestDto,
                                    cancellation: Optional[CancellationToken] = None
                                    ) -> LeagueSubscriptionCollectionResponse:
        return await self.send("Leagues/UnSubscribe", mapping.to_league_subscription_request(request),
                               LeagueSubscriptionCollectionResponse, cancellation=cancellation)

    async def get_subscriptions(self, request: Optional[GetSubscriptionRequestDto] = None,
                                cancellation: Optional[CancellationToken] = None) -> GetSubscriptionResponse:
        return await self.send("Fixtures/Get", mapping.to_subscription_request(request),
                               GetSubscriptionResponse, cancellation=cancellation)

    async def subscribe_by_competition(self, request: CompetitionSubscriptionRequestDto,
                                       cancellation: Optional[CancellationToken] = None
                                       ) -> CompetitionSubscriptionCollectionResponse:
        return await self.send("Outright/Subscribe", mapping.to_competition_subscription_request(request),
                               CompetitionSubscriptionCollectionResponse, cancellation=cancellation)

    async def unsubscribe_by_competition(self, request: CompetitionSubscriptionRequestDto,
                                         cancellation: Optional[CancellationToken] = None
                                         ) -> CompetitionSubscriptionCollectionResponse:
        return await self.send("Outright/UnSubscribe", mapping.to_competition_subscription_request(request),
                               CompetitionSubscriptionCollectionResponse, cancellation=cancellation)

    async def get_all_manual_suspensions(self, cancellation: Optional[CancellationToken] = None
                                         ) -> GetManualSuspensionResponse:
        return await self.send("Markets/ManualSuspension/GetAll", None, GetManualSuspensionResponse,
                               cancellation=cancellation)

    async def add_manual_suspension(self, request: ChangeManualSuspensionRequestDto,
                                    cancellation: Optional[CancellationToken] = None
                                    ) -> ChangeManualSuspensionResponse:
        return await self.send("Markets/ManualSuspension/Activate", mapping.to_manual_suspension_request(request),
                               ChangeManualSuspensionResponse, cancellation=cancellation)

    async def remove_manual_suspension(self, request: ChangeManualSuspensionRequestDto,
                                       cancellation: Optional[CancellationToken] = None
                                       ) -> ChangeManualSuspensionResponse:
        return await self.send("Markets/ManualSuspension/Deactivate", mapping.to_manual_suspension_request(request),
                               ChangeManualSuspensionResponse, cancellation=cancellation)

    async def get_fixture_metadata(self, request: GetFixtureMetadataRequestDto,
                                   cancellation: Optional[CancellationToken] = None
                                   ) -> GetFixtureMetadataCollectionResponse:
        return await self.send(FIXTURE_METADATA_PATH, mapping.to_fixture_metadata_request(request),
                               GetFixtureMetadataCollectionResponse, cancellation=cancellation, method="GET")
