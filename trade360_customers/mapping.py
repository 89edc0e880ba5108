"""
Mapping from caller filters to Customers API wire requests.

Credential fields are never copied here; the client fills them in.
"""

from typing import Optional

from .models import (
    ChangeManualSuspensionRequest,
    ChangeManualSuspensionRequestDto,
    CompetitionSubscription,
    CompetitionSubscriptionRequest,
    CompetitionSubscriptionRequestDto,
    DateRangeFilter,
    FixtureSubscriptionRequest,
    FixtureSubscriptionRequestDto,
    GetCitiesRequest,
    GetCitiesRequestDto,
    GetCompetitionsRequest,
    GetCompetitionsRequestDto,
    GetFixtureMetadataRequest,
    GetFixtureMetadataRequestDto,
    GetFixtureScheduleRequest,
    GetFixtureScheduleRequestDto,
    GetIncidentsRequest,
    GetIncidentsRequestDto,
    GetLeaguesRequest,
    GetLeaguesRequestDto,
    GetMarketsRequest,
    GetMarketsRequestDto,
    GetParticipantsRequest,
    GetParticipantsRequestDto,
    GetStatesRequest,
    GetStatesRequestDto,
    GetSubscriptionRequest,
    GetSubscriptionRequestDto,
    GetTranslationsRequest,
    GetTranslationsRequestDto,
    GetVenuesRequest,
    GetVenuesRequestDto,
    IncidentFilter,
    LeagueSubscription,
    LeagueSubscriptionRequest,
    LeagueSubscriptionRequestDto,
    LocationFilter,
    ParticipantFilter,
    SuspendedMarket,
    Suspension,
)

# Date format expected by the subscribed-fixtures metadata query
METADATA_DATE_FORMAT = "%m/%d/%Y"


def to_leagues_request(dto: Optional[GetLeaguesRequestDto]) -> GetLeaguesRequest:
    dto = dto or GetLeaguesRequestDto()
    return GetLeaguesRequest(
        sport_ids=dto.sport_ids,
        location_ids=dto.location_ids,
        subscription_status=int(dto.subscription_status),
        language_id=dto.language_id,
    )


def to_markets_request(dto: Optional[GetMarketsRequestDto]) -> GetMarketsRequest:
    dto = dto or GetMarketsRequestDto()
    return GetMarketsRequest(
        sport_ids=dto.sport_ids,
        location_ids=dto.location_ids,
        league_ids=dto.league_ids,
        market_ids=dto.market_ids,
        is_settleable=dto.is_settleable,
        market_type=int(dto.market_type),
        language_id=dto.language_id,
    )


def to_translations_request(dto: GetTranslationsRequestDto) -> GetTranslationsRequest:
    return GetTranslationsRequest(
        sport_ids=list(dto.sport_ids),
        location_ids=list(dto.location_ids),
        league_ids=list(dto.league_ids),
        market_ids=list(dto.market_ids),
        participant_ids=list(dto.participant_ids),
        languages=list(dto.languages or []),
    )


def to_competitions_request(dto: Optional[GetCompetitionsRequestDto]) -> GetCompetitionsRequest:
    dto = dto or GetCompetitionsRequestDto()
    return GetCompetitionsRequest(
        competition_ids=dto.competition_ids,
        sport_ids=dto.sport_ids,
        location_ids=dto.location_ids,
        subscription_status=int(dto.subscription_status),
        language_id=dto.language_id,
    )


def to_incidents_request(dto: Optional[GetIncidentsRequestDto]) -> GetIncidentsRequest:
    if dto is None or dto.filter is None:
        return GetIncidentsRequest()
    source = dto.filter
    creation_date = None
    if source.creation_date is not None:
        creation_date = DateRangeFilter(start=source.creation_date.start, end=source.creation_date.end)
    return GetIncidentsRequest(filter=IncidentFilter(
        ids=source.ids,
        sports=source.sports,
        creation_date=creation_date,
        search_text=source.search_text,
    ))


def to_venues_request(dto: Optional[GetVenuesRequestDto]) -> GetVenuesRequest:
    if dto is None or dto.filter is None:
        return GetVenuesRequest()
    source = dto.filter
    return GetVenuesRequest(filter=LocationFilter(
        venue_ids=source.venue_ids,
        country_ids=source.country_ids,
        state_ids=source.state_ids,
        city_ids=source.city_ids,
    ))


def to_cities_request(dto: Optional[GetCitiesRequestDto]) -> GetCitiesRequest:
    if dto is None or dto.filter is None:
        return GetCitiesRequest()
    source = dto.filter
    return GetCitiesRequest(filter=LocationFilter(
        country_ids=source.country_ids,
        state_ids=source.state_ids,
        city_ids=source.city_ids,
    ))


def to_states_request(dto: Optional[GetStatesRequestDto]) -> GetStatesRequest:
    if dto is None or dto.filter is None:
        return GetStatesRequest()
    source = dto.filter
    return GetStatesRequest(filter=LocationFilter(
        country_ids=source.country_ids,
        state_ids=source.state_ids,
    ))


def to_participants_request(dto: Optional[GetParticipantsRequestDto]) -> GetParticipantsRequest:
    dto = dto or GetParticipantsRequestDto()
    participant_filter = None
    if dto.filter is not None:
        participant_filter = ParticipantFilter(
            ids=dto.filter.ids,
            sport_ids=dto.filter.sport_ids,
            location_ids=dto.filter.location_ids,
            name=dto.filter.name,
            gender=dto.filter.gender,
            age_category=dto.filter.age_category,
            type=dto.filter.type,
        )
    return GetParticipantsRequest(filter=participant_filter, page=dto.page, page_size=dto.page_size)


def to_fixture_metadata_request(dto: GetFixtureMetadataRequestDto) -> GetFixtureMetadataRequest:
    return GetFixtureMetadataRequest(
        from_date=dto.from_date.strftime(METADATA_DATE_FORMAT),
        to_date=dto.to_date.strftime(METADATA_DATE_FORMAT),
    )


def to_fixture_schedule_request(dto: Optional[GetFixtureScheduleRequestDto]) -> GetFixtureScheduleRequest:
    dto = dto or GetFixtureScheduleRequestDto()
    return GetFixtureScheduleRequest(
        sport_ids=dto.sport_ids,
        location_ids=dto.location_ids,
        league_ids=dto.league_ids,
    )


def to_fixture_subscription_request(dto: FixtureSubscriptionRequestDto) -> FixtureSubscriptionRequest:
    return FixtureSubscriptionRequest(fixtures=list(dto.fixtures))


def to_league_subscription_request(dto: LeagueSubscriptionRequestDto) -> LeagueSubscriptionRequest:
    return LeagueSubscriptionRequest(subscriptions=[
        LeagueSubscription(sport_id=item.sport_id, location_id=item.location_id, league_id=item.league_id)
        for item in dto.subscriptions
    ])


def to_subscription_request(dto: Optional[GetSubscriptionRequestDto]) -> GetSubscriptionRequest:
    dto = dto or GetSubscriptionRequestDto()
    return GetSubscriptionRequest(
        fixture_ids=dto.fixture_ids,
        sport_ids=dto.sport_ids,
        location_ids=dto.location_ids,
        league_ids=dto.league_ids,
    )


def to_competition_subscription_request(dto: CompetitionSubscriptionRequestDto) -> CompetitionSubscriptionRequest:
    return CompetitionSubscriptionRequest(subscriptions=[
        CompetitionSubscription(
            sport_id=item.sport_id,
            location_id=item.location_id,
            competition_id=item.competition_id
        )
        for item in dto.subscriptions
    ])


def to_manual_suspension_request(dto: ChangeManualSuspensionRequestDto) -> ChangeManualSuspensionRequest:
    suspensions = []
    for item in dto.suspensions:
        markets = None
        if item.markets is not None:
            markets = [SuspendedMarket(market_id=market.market_id, line=market.line) for market in item.markets]
        suspensions.append(Suspension(
            sport_id=item.sport_id,
            location_id=item.location_id,
            competition_id=item.competition_id,
            fixture_id=item.fixture_id,
            markets=markets,
        ))
    return ChangeManualSuspensionRequest(suspensions=suspensions)
