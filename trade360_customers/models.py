"""
Customers API request and response models.

Caller-facing ``*RequestDto`` models carry filters only; the wire
``*Request`` models derive from ``BaseRequest`` and get package
credentials from the client.
"""

from datetime import datetime
from enum import IntEnum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from trade360_common.envelope import BaseRequest, Trade360Model


class SubscriptionState(IntEnum):
    ALL = 0
    NOT_SUBSCRIBED = 1
    SUBSCRIBED = 2


class MarketType(IntEnum):
    ALL = 0
    STANDARD = 1
    OUTRIGHT = 2


# Metadata filters

class GetLeaguesRequestDto(BaseModel):
    sport_ids: Optional[List[int]] = None
    location_ids: Optional[List[int]] = None
    subscription_status: SubscriptionState = SubscriptionState.ALL
    language_id: Optional[int] = None


class GetMarketsRequestDto(BaseModel):
    sport_ids: Optional[List[int]] = None
    location_ids: Optional[List[int]] = None
    league_ids: Optional[List[int]] = None
    market_ids: Optional[List[int]] = None
    is_settleable: Optional[bool] = None
    market_type: MarketType = MarketType.ALL
    language_id: Optional[int] = None


class GetTranslationsRequestDto(BaseModel):
    sport_ids: List[int] = Field(default_factory=list)
    location_ids: List[int] = Field(default_factory=list)
    league_ids: List[int] = Field(default_factory=list)
    market_ids: List[int] = Field(default_factory=list)
    participant_ids: List[int] = Field(default_factory=list)
    languages: Optional[List[int]] = None


class GetCompetitionsRequestDto(BaseModel):
    competition_ids: Optional[List[int]] = None
    sport_ids: Optional[List[int]] = None
    location_ids: Optional[List[int]] = None
    subscription_status: SubscriptionState = SubscriptionState.ALL
    language_id: Optional[int] = None


class DateRangeDto(BaseModel):
    start: Optional[datetime] = None
    end: Optional[datetime] = None


class IncidentFilterDto(BaseModel):
    ids: Optional[List[int]] = None
    sports: Optional[List[int]] = None
    creation_date: Optional[DateRangeDto] = None
    search_text: Optional[List[str]] = None


class GetIncidentsRequestDto(BaseModel):
    filter: Optional[IncidentFilterDto] = None


class VenueFilterDto(BaseModel):
    venue_ids: Optional[List[int]] = None
    country_ids: Optional[List[int]] = None
    state_ids: Optional[List[int]] = None
    city_ids: Optional[List[int]] = None


class GetVenuesRequestDto(BaseModel):
    filter: Optional[VenueFilterDto] = None


class CityFilterDto(BaseModel):
    country_ids: Optional[List[int]] = None
    state_ids: Optional[List[int]] = None
    city_ids: Optional[List[int]] = None


class GetCitiesRequestDto(BaseModel):
    filter: Optional[CityFilterDto] = None


class StateFilterDto(BaseModel):
    country_ids: Optional[List[int]] = None
    state_ids: Optional[List[int]] = None


class GetStatesRequestDto(BaseModel):
    filter: Optional[StateFilterDto] = None


class ParticipantFilterDto(BaseModel):
    ids: Optional[List[int]] = None
    sport_ids: Optional[List[int]] = None
    location_ids: Optional[List[int]] = None
    name: Optional[str] = None
    gender: Optional[int] = None
    age_category: Optional[int] = None
    type: Optional[int] = None


class GetParticipantsRequestDto(BaseModel):
    filter: Optional[ParticipantFilterDto] = None
    page: int = 1
    page_size: int = 100


class GetFixtureMetadataRequestDto(BaseModel):
    from_date: datetime
    to_date: datetime


# Subscription filters

class GetFixtureScheduleRequestDto(BaseModel):
    sport_ids: Optional[List[int]] = None
    location_ids: Optional[List[int]] = None
    league_ids: Optional[List[int]] = None


class FixtureSubscriptionRequestDto(BaseModel):
    fixtures: List[int] = Field(default_factory=list)


class LeagueSubscriptionDto(BaseModel):
    sport_id: int
    location_id: int
    league_id: int


class LeagueSubscriptionRequestDto(BaseModel):
    subscriptions: List[LeagueSubscriptionDto] = Field(default_factory=list)


class GetSubscriptionRequestDto(BaseModel):
    fixture_ids: Optional[List[int]] = None
    sport_ids: Optional[List[int]] = None
    location_ids: Optional[List[int]] = None
    league_ids: Optional[List[int]] = None


class CompetitionSubscriptionDto(BaseModel):
    sport_id: int
    location_id: int
    competition_id: int


class CompetitionSubscriptionRequestDto(BaseModel):
    subscriptions: List[CompetitionSubscriptionDto] = Field(default_factory=list)


class SuspendedMarketDto(BaseModel):
    market_id: int
    line: Optional[str] = None


class SuspensionDto(BaseModel):
    sport_id: Optional[int] = None
    location_id: Optional[int] = None
    competition_id: Optional[int] = None
    fixture_id: Optional[int] = None
    markets: Optional[List[SuspendedMarketDto]] = None


class ChangeManualSuspensionRequestDto(BaseModel):
    suspensions: List[SuspensionDto] = Field(default_factory=list)


# Wire requests

class GetLeaguesRequest(BaseRequest):
    sport_ids: Optional[List[int]] = None
    location_ids: Optional[List[int]] = None
    subscription_status: int = SubscriptionState.ALL
    language_id: Optional[int] = None


class GetMarketsRequest(BaseRequest):
    sport_ids: Optional[List[int]] = None
    location_ids: Optional[List[int]] = None
    league_ids: Optional[List[int]] = None
    market_ids: Optional[List[int]] = None
    is_settleable: Optional[bool] = None
    market_type: int = MarketType.ALL
    language_id: Optional[int] = None


class GetTranslationsRequest(BaseRequest):
    sport_ids: List[int] = Field(default_factory=list)
    location_ids: List[int] = Field(default_factory=list)
    league_ids: List[int] = Field(default_factory=list)
    market_ids: List[int] = Field(default_factory=list)
    participant_ids: List[int] = Field(default_factory=list)
    languages: List[int] = Field(default_factory=list)


class GetCompetitionsRequest(BaseRequest):
    competition_ids: Optional[List[int]] = None
    sport_ids: Optional[List[int]] = None
    location_ids: Optional[List[int]] = None
    subscription_status: int = SubscriptionState.ALL
    language_id: Optional[int] = None


class DateRangeFilter(Trade360Model):
    start: Optional[datetime] = Field(default=None, alias="From")
    end: Optional[datetime] = Field(default=None, alias="To")


class IncidentFilter(Trade360Model):
    ids: Optional[List[int]] = None
    sports: Optional[List[int]] = None
    creation_date: Optional[DateRangeFilter] = Field(default=None, alias="creationDate")
    search_text: Optional[List[str]] = Field(default=None, alias="searchText")


class GetIncidentsRequest(BaseRequest):
    filter: Optional[IncidentFilter] = None


class LocationFilter(Trade360Model):
    venue_ids: Optional[List[int]] = None
    country_ids: Optional[List[int]] = None
    state_ids: Optional[List[int]] = None
    city_ids: Optional[List[int]] = None


class GetVenuesRequest(BaseRequest):
    filter: Optional[LocationFilter] = None


class GetCitiesRequest(BaseRequest):
    filter: Optional[LocationFilter] = None


class GetStatesRequest(BaseRequest):
    filter: Optional[LocationFilter] = None


class ParticipantFilter(Trade360Model):
    ids: Optional[List[int]] = None
    sport_ids: Optional[List[int]] = None
    location_ids: Optional[List[int]] = None
    name: Optional[str] = None
    gender: Optional[int] = None
    age_category: Optional[int] = None
    type: Optional[int] = None


class GetParticipantsRequest(BaseRequest):
    filter: Optional[ParticipantFilter] = None
    page: int = 1
    page_size: int = 100


class GetFixtureMetadataRequest(BaseRequest):
    from_date: str
    to_date: str


class GetFixtureScheduleRequest(BaseRequest):
    sport_ids: Optional[List[int]] = None
    location_ids: Optional[List[int]] = None
    league_ids: Optional[List[int]] = None


class FixtureSubscriptionRequest(BaseRequest):
    fixtures: List[int] = Field(default_factory=list)


class LeagueSubscription(Trade360Model):
    sport_id: int
    location_id: int
    league_id: int


class LeagueSubscriptionRequest(BaseRequest):
    subscriptions: List[LeagueSubscription] = Field(default_factory=list)


class GetSubscriptionRequest(BaseRequest):
    fixture_ids: Optional[List[int]] = None
    sport_ids: Optional[List[int]] = None
    location_ids: Optional[List[int]] = None
    league_ids: Optional[List[int]] = None


class CompetitionSubscription(Trade360Model):
    sport_id: int
    location_id: int
    competition_id: int


class CompetitionSubscriptionRequest(BaseRequest):
    subscriptions: List[CompetitionSubscription] = Field(default_factory=list)


class SuspendedMarket(Trade360Model):
    market_id: int
    line: Optional[str] = None


class Suspension(Trade360Model):
    sport_id: Optional[int] = None
    location_id: Optional[int] = None
    competition_id: Optional[int] = None
    fixture_id: Optional[int] = None
    markets: Optional[List[SuspendedMarket]] = None


class ChangeManualSuspensionRequest(BaseRequest):
    suspensions: List[Suspension] = Field(default_factory=list)


# Responses

class Sport(Trade360Model):
    id: int
    name: Optional[str] = None


class Location(Trade360Model):
    id: int
    name: Optional[str] = None


class League(Trade360Model):
    id: int
    name: Optional[str] = None
    sport: Optional[Sport] = None
    location: Optional[Location] = None
    season: Optional[str] = None


class MarketMetadata(Trade360Model):
    id: int
    name: Optional[str] = None
    is_settleable: Optional[bool] = None


class SportsCollectionResponse(Trade360Model):
    sports: Optional[List[Sport]] = None


class LocationsCollectionResponse(Trade360Model):
    locations: Optional[List[Location]] = None


class LeaguesCollectionResponse(Trade360Model):
    leagues: Optional[List[League]] = None


class MarketsCollectionResponse(Trade360Model):
    markets: Optional[List[MarketMetadata]] = None


class TranslationResponse(Trade360Model):
    sports: Optional[Dict[str, Any]] = None
    locations: Optional[Dict[str, Any]] = None
    leagues: Optional[Dict[str, Any]] = None
    markets: Optional[Dict[str, Any]] = None
    participants: Optional[Dict[str, Any]] = None


class Competition(Trade360Model):
    id: int
    name: Optional[str] = None
    type: Optional[int] = None
    track_id: Optional[int] = None
    sport_id: Optional[int] = None
    location_id: Optional[int] = None


class CompetitionCollectionResponse(Trade360Model):
    competitions: Optional[List[Competition]] = None


class Incident(Trade360Model):
    sport_id: Optional[int] = None
    sport_name: Optional[str] = None
    incident_id: int
    incident_name: Optional[str] = None
    description: Optional[str] = None
    last_update: Optional[datetime] = None
    creation_date: Optional[datetime] = None


class GetIncidentsResponse(Trade360Model):
    data: Optional[List[Incident]] = None


class Venue(Trade360Model):
    venue_id: int
    name: Optional[str] = None
    capacity: Optional[int] = None
    country: Optional[Dict[str, Any]] = None
    state: Optional[Dict[str, Any]] = None
    city: Optional[Dict[str, Any]] = None


class GetVenuesResponse(Trade360Model):
    data: Optional[List[Venue]] = None


class City(Trade360Model):
    city_id: int
    name: Optional[str] = None
    country: Optional[Dict[str, Any]] = None
    state: Optional[Dict[str, Any]] = None


class GetCitiesResponse(Trade360Model):
    data: Optional[List[City]] = None


class State(Trade360Model):
    state_id: int
    name: Optional[str] = None
    country: Optional[Dict[str, Any]] = None


class GetStatesResponse(Trade360Model):
    data: Optional[List[State]] = None


class ParticipantInfo(Trade360Model):
    id: int
    sport_id: Optional[int] = None
    location_id: Optional[int] = None
    name: Optional[str] = None
    gender: Optional[int] = None
    age_category: Optional[int] = None
    type: Optional[int] = None


class GetParticipantsResponse(Trade360Model):
    data: Optional[List[ParticipantInfo]] = None
    total_items: Optional[int] = None


class SubscribedFixtureParticipant(Trade360Model):
    participant_id: int
    participant_name: Optional[str] = None


class SubscribedFixture(Trade360Model):
    fixture_id: int
    fixture_name: Optional[str] = None
    start_date: Optional[datetime] = None
    last_update: Optional[datetime] = None
    sport_id: Optional[int] = None
    location_id: Optional[int] = None
    league_id: Optional[int] = None
    fixture_status: Optional[int] = None
    participants: Optional[List[SubscribedFixtureParticipant]] = None


class GetFixtureMetadataCollectionResponse(Trade360Model):
    subscribed_fixtures: Optional[List[SubscribedFixture]] = None


class PackageQuotaResponse(Trade360Model):
    credit_remaining: Optional[int] = None
    credit_limit: Optional[int] = None
    used_credit: Optional[int] = None
    used_in_percents: Optional[float] = None
    current_period_start_date: Optional[datetime] = None
    current_period_end_date: Optional[datetime] = None


class GetProviderOddsTypeResponse(Trade360Model):
    """Odds format the package receives; unlisted provider fields are kept as extras."""

    package_id: Optional[int] = None
    odds_type: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None


class FixtureSchedule(Trade360Model):
    fixture_id: int
    sport: Optional[Dict[str, Any]] = None
    location: Optional[Dict[str, Any]] = None
    league: Optional[Dict[str, Any]] = None
    start_date: Optional[datetime] = None
    participants: Optional[List[Dict[str, Any]]] = None


class FixtureScheduleCollectionResponse(Trade360Model):
    fixtures: Optional[List[FixtureSchedule]] = None


class FixtureSubscription(Trade360Model):
    fixture_id: int
    success: Optional[bool] = None
    message: Optional[str] = None


class FixtureSubscriptionCollectionResponse(Trade360Model):
    fixtures: Optional[List[FixtureSubscription]] = None


class LeagueSubscriptionResponse(Trade360Model):
    league_id: int
    sport_id: Optional[int] = None
    location_id: Optional[int] = None
    success: Optional[bool] = None
    message: Optional[str] = None


class LeagueSubscriptionCollectionResponse(Trade360Model):
    subscription: Optional[List[LeagueSubscriptionResponse]] = None


class GetSubscriptionResponse(Trade360Model):
    fixtures: Optional[List[Dict[str, Any]]] = None


class CompetitionSubscriptionResponse(Trade360Model):
    competition_id: int
    sport_id: Optional[int] = None
    location_id: Optional[int] = None
    success: Optional[bool] = None
    message: Optional[str] = None


class CompetitionSubscriptionCollectionResponse(Trade360Model):
    subscription: Optional[List[CompetitionSubscriptionResponse]] = None


class ManualSuspension(Trade360Model):
    succeeded: Optional[bool] = None
    sport_id: Optional[int] = None
    location_id: Optional[int] = None
    competition_id: Optional[int] = None
    fixture_id: Optional[int] = None
    creation_date: Optional[datetime] = None
    markets: Optional[List[SuspendedMarket]] = None
    reason: Optional[str] = None


class GetManualSuspensionResponse(Trade360Model):
    succeeded: Optional[bool] = None
    suspensions: Optional[List[ManualSuspension]] = None
    reason: Optional[str] = None


class SuspensionChangeResponse(Trade360Model):
    succeeded: Optional[bool] = None
    reason: Optional[str] = None
    fixture_id: Optional[int] = None
    markets: Optional[List[SuspendedMarket]] = None
    creation_date: Optional[datetime] = None


class ChangeManualSuspensionResponse(Trade360Model):
    suspensions: Optional[List[SuspensionChangeResponse]] = None


class GetDistributionStatusResponse(Trade360Model):
    is_distribution_on: Optional[bool] = None
    consumers: Optional[List[str]] = None
    number_messages_in_queue: Optional[int] = None
    messages_per_second: Optional[float] = None


class StartDistributionResponse(Trade360Model):
    message: Optional[str] = None


class StopDistributionResponse(Trade360Model):
    message: Optional[str] = None
