"""
Snapshot API client for prematch data.
"""

from typing import List, Optional

from trade360_common.cancellation import CancellationToken
from trade360_common.http_client import BaseHttpClient

from .mapping import to_outright_request, to_standard_request
from .models import (
    FixtureEvent,
    GetEventsResponse,
    GetFixturesRequestDto,
    GetLivescoreRequestDto,
    GetMarketRequestDto,
    GetOutrightEventsResponse,
    GetOutrightFixtureResponse,
    GetOutrightFixturesRequestDto,
    GetOutrightLeaguesFixturesResponse,
    GetOutrightLeaguesMarketsResponse,
    GetOutrightLivescoreRequestDto,
    GetOutrightLivescoreResponse,
    GetOutrightMarketsRequestDto,
    GetOutrightMarketsResponse,
    LivescoreEvent,
    MarketEvent,
)


class SnapshotPrematchApiClient(BaseHttpClient):
    """Prematch snapshot queries, made on behalf of the prematch package."""

    requires_credentials = True
    default_name = "snapshot-prematch"

    async def get_fixtures(self, request: Optional[GetFixturesRequestDto] = None,
                           cancellation: Optional[CancellationToken] = None) -> List[FixtureEvent]:
        return await self.send("Prematch/GetFixtures", to_standard_request(request), List[FixtureEvent],
                               cancellation=cancellation)

    async def get_livescore(self, request: Optional[GetLivescoreRequestDto] = None,
                            cancellation: Optional[CancellationToken] = None) -> List[LivescoreEvent]:
        return await self.send("Prematch/GetScores", to_standard_request(request), List[LivescoreEvent],
                               cancellation=cancellation)

    async def get_fixture_markets(self, request: Optional[GetMarketRequestDto] = None,
                                  cancellation: Optional[CancellationToken] = None) -> List[MarketEvent]:
        return await self.send("Prematch/GetFixtureMarkets", to_standard_request(request), List[MarketEvent],
                               cancellation=cancellation)

    async def get_events(self, request: Optional[GetMarketRequestDto] = None,
                         cancellation: Optional[CancellationToken] = None) -> List[GetEventsResponse]:
        return await self.send("Prematch/GetEvents", to_standard_request(request), List[GetEventsResponse],
                               cancellation=cancellation)

    async def get_outright_fixture(self, request: Optional[GetOutrightFixturesRequestDto] = None,
                                   cancellation: Optional[CancellationToken] = None
                                   ) -> List[GetOutrightFixtureResponse]:
        return await self.send("Prematch/GetOutrightFixture", to_outright_request(request),
                               List[GetOutrightFixtureResponse], cancellation=cancellation)

    async def get_outright_scores(self, request: Optional[GetOutrightLivescoreRequestDto] = None,
                                  cancellation: Optional[CancellationToken] = None
                                  ) -> List[GetOutrightLivescoreResponse]:
        return await self.send("Prematch/GetOutrightScores", to_outright_request(request),
                               List[GetOutrightLivescoreResponse], cancellation=cancellation)

    async def get_outright_fixture_markets(self, request: Optional[GetOutrightMarketsRequestDto] = None,
                                           cancellation: Optional[CancellationToken] = None
                                           ) -> List[GetOutrightMarketsResponse]:
        return await self.send("Prematch/GetOutrightFixtureMarkets", to_outright_request(request),
                               List[GetOutrightMarketsResponse], cancellation=cancellation)

    async def get_outright_events(self, request: Optional[GetOutrightMarketsRequestDto] = None,
                                  cancellation: Optional[CancellationToken] = None
                                  ) -> List[GetOutrightEventsResponse]:
        return await self.send("Prematch/GetOutrightEvents", to_outright_request(request),
                               List[GetOutrightEventsResponse], cancellation=cancellation)

    async def get_outright_leagues(self, request: Optional[GetFixturesRequestDto] = None,
                                   cancellation: Optional[CancellationToken] = None
                                   ) -> List[GetOutrightLeaguesFixturesResponse]:
        return await self.send("Prematch/GetOutrightLeagues", to_standard_request(request),
                               List[GetOutrightLeaguesFixturesResponse], cancellation=cancellation)

    async def get_outright_league_markets(self, request: Optional[GetMarketRequestDto] = None,
                                          cancellation: Optional[CancellationToken] = None
                                          ) -> List[GetOutrightLeaguesMarketsResponse]:
        return await self.send("Prematch/GetOutrightLeagueMarkets", to_standard_request(request),
                               List[GetOutrightLeaguesMarketsResponse], cancellation=cancellation)
