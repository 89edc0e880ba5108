"""
Snapshot API client for inplay data.
"""

from typing import List, Optional

from trade360_common.cancellation import CancellationToken
from trade360_common.http_client import BaseHttpClient

from .mapping import to_outright_request, to_standard_request
from .models import (
    FixtureEvent,
    GetEventsResponse,
    GetFixturesRequestDto,
    GetLiveScoreResponse,
    GetLivescoreRequestDto,
    GetMarketRequestDto,
    GetOutrightLeagueEventsResponse,
    GetOutrightLeaguesFixturesResponse,
    GetOutrightLeaguesMarketsResponse,
    GetOutrightMarketsRequestDto,
    MarketEvent,
)


class SnapshotInplayApiClient(BaseHttpClient):
    """Inplay snapshot queries, made on behalf of the inplay package."""

    requires_credentials = True
    default_name = "snapshot-inplay"

    async def get_fixtures(self, request: Optional[GetFixturesRequestDto] = None,
                           cancellation: Optional[CancellationToken] = None) -> List[FixtureEvent]:
        return await self.send("Inplay/GetFixtures", to_standard_request(request), List[FixtureEvent],
                               cancellation=cancellation)

    async def get_livescore(self, request: Optional[GetLivescoreRequestDto] = None,
                            cancellation: Optional[CancellationToken] = None) -> List[GetLiveScoreResponse]:
        return await self.send("Inplay/GetScores", to_standard_request(request), List[GetLiveScoreResponse],
                               cancellation=cancellation)

    async def get_fixture_markets(self, request: Optional[GetMarketRequestDto] = None,
                                  cancellation: Optional[CancellationToken] = None) -> List[MarketEvent]:
        return await self.send("Inplay/GetFixtureMarkets", to_standard_request(request), List[MarketEvent],
                               cancellation=cancellation)

    async def get_events(self, request: Optional[GetMarketRequestDto] = None,
                         cancellation: Optional[CancellationToken] = None) -> List[GetEventsResponse]:
        return await self.send("Inplay/GetEvents", to_standard_request(request), List[GetEventsResponse],
                               cancellation=cancellation)

    async def get_outright_leagues(self, request: Optional[GetFixturesRequestDto] = None,
                                   cancellation: Optional[CancellationToken] = None
                                   ) -> List[GetOutrightLeaguesFixturesResponse]:
        return await self.send("Inplay/GetOutrightLeagues", to_standard_request(request),
                               List[GetOutrightLeaguesFixturesResponse], cancellation=cancellation)

    async def get_outright_league_markets(self, request: Optional[GetMarketRequestDto] = None,
                                          cancellation: Optional[CancellationToken] = None
                                          ) -> List[GetOutrightLeaguesMarketsResponse]:
        return await self.send("Inplay/GetOutrightLeagueMarkets", to_standard_request(request),
                               List[GetOutrightLeaguesMarketsResponse], cancellation=cancellation)

    async def get_outright_league_events(self, request: Optional[GetOutrightMarketsRequestDto] = None,
                                         cancellation: Optional[CancellationToken] = None
                                         ) -> List[GetOutrightLeagueEventsResponse]:
        return await self.send("Inplay/GetOutrightLeagueEvents", to_outright_request(request),
                               List[GetOutrightLeagueEventsResponse], cancellation=cancellation)
