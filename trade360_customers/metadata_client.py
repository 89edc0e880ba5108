"""
Customers API client for metadata queries.
"""

from typing import List, Optional

from trade360_common.cancellation import CancellationToken
from trade360_common.http_client import BaseHttpClient

from . import mapping
from .models import (
    City,
    CompetitionCollectionResponse,
    GetCitiesRequestDto,
    GetCitiesResponse,
    GetCompetitionsRequestDto,
    GetFixtureMetadataCollectionResponse,
    GetFixtureMetadataRequestDto,
    GetIncidentsRequestDto,
    GetIncidentsResponse,
    GetLeaguesRequestDto,
    GetMarketsRequestDto,
    GetParticipantsRequestDto,
    GetParticipantsResponse,
    GetStatesRequestDto,
    GetStatesResponse,
    GetTranslationsRequestDto,
    GetVenuesRequestDto,
    GetVenuesResponse,
    Incident,
    League,
    LeaguesCollectionResponse,
    Location,
    LocationsCollectionResponse,
    MarketMetadata,
    MarketsCollectionResponse,
    ParticipantInfo,
    Sport,
    SportsCollectionResponse,
    State,
    TranslationResponse,
    Venue,
)
from .validators import validate_translations_request

FIXTURE_METADATA_PATH = "Fixtures/GetSubscribedMetaData"


class MetadataApiClient(BaseHttpClient):
    """Sports, locations, leagues, markets and related reference data.

    Collection endpoints wrap their items in a named field; the methods
    unwrap it and return a list.
    """

    default_name = "customers-metadata"

    async def get_sports(self, cancellation: Optional[CancellationToken] = None) -> List[Sport]:
        response = await self.send("Sports/Get", None, SportsCollectionResponse, cancellation=cancellation)
        return response.sports or []

    async def get_locations(self, cancellation: Optional[CancellationToken] = None) -> List[Location]:
        response = await self.send("Locations/Get", None, LocationsCollectionResponse, cancellation=cancellation)
        return response.locations or []

    async def get_leagues(self, request: Optional[GetLeaguesRequestDto] = None,
                          cancellation: Optional[CancellationToken] = None) -> List[League]:
        response = await self.send("Leagues/get", mapping.to_leagues_request(request),
                                   LeaguesCollectionResponse, cancellation=cancellation)
        return response.leagues or []

    async def get_markets(self, request: Optional[GetMarketsRequestDto] = None,
                          cancellation: Optional[CancellationToken] = None) -> List[MarketMetadata]:
        response = await self.send("Markets/get", mapping.to_markets_request(request),
                                   MarketsCollectionResponse, cancellation=cancellation)
        return response.markets or []

    async def get_translations(self, request: GetTranslationsRequestDto,
                               cancellation: Optional[CancellationToken] = None) -> TranslationResponse:
        """Translations for the given ids.

        Raises:
            RequestValidationError: before any network call, when the filter is incomplete.
        """
        wire_request = mapping.to_translations_request(request)
        validate_translations_request(wire_request)
        return await self.send("Translation/Get", wire_request, TranslationResponse, cancellation=cancellation)

    async def get_competitions(self, request: Optional[GetCompetitionsRequestDto] = None,
                               cancellation: Optional[CancellationToken] = None) -> CompetitionCollectionResponse:
        return await self.send("Outright/GetCompetitions", mapping.to_competitions_request(request),
                               CompetitionCollectionResponse, cancellation=cancellation)

    async def get_incidents(self, request: Optional[GetIncidentsRequestDto] = None,
                            cancellation: Optional[CancellationToken] = None) -> List[Incident]:
        response = await self.send("Incidents/Get", mapping.to_incidents_request(request),
                                   GetIncidentsResponse, cancellation=cancellation)
        return response.data or []

    async def get_venues(self, request: Optional[GetVenuesRequestDto] = None,
                         cancellation: Optional[CancellationToken] = None) -> List[Venue]:
        response = await self.send("Venues/Get", mapping.to_venues_request(request),
                                   GetVenuesResponse, cancellation=cancellation)
        return response.data or []

    async def get_cities(self, request: Optional[GetCitiesRequestDto] = None,
                         cancellation: Optional[CancellationToken] = None) -> List[City]:
        response = await self.send("Cities/Get", mapping.to_cities_request(request),
                                   GetCitiesResponse, cancellation=cancellation)
        return response.data or []

    async def get_states(self, request: Optional[GetStatesRequestDto] = None,
                         cancellation: Optional[CancellationToken] = None) -> List[State]:
        response = await self.send("States/Get", mapping.to_states_request(request),
                                   GetStatesResponse, cancellation=cancellation)
        return response.data or []

    async def get_participants(self, request: Optional[GetParticipantsRequestDto] = None,
                               cancellation: Optional[CancellationToken] = None) -> List[ParticipantInfo]:
        response = await self.send("Participants/Get", mapping.to_participants_request(request),
                                   GetParticipantsResponse, cancellation=cancellation)
        return response.data or []

    async def get_fixture_metadata(self, request: GetFixtureMetadataRequestDto,
                                   cancellation: Optional[CancellationToken] = None
                                   ) -> GetFixtureMetadataCollectionResponse:
        return await self.send(FIXTURE_METADATA_PATH, mapping.to_fixture_metadata_request(request),
                               GetFixtureMetadataCollectionResponse, cancellation=cancellation, method="GET")
