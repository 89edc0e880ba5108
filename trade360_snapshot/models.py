"""
Snapshot API request and response models.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from trade360_common.envelope import BaseRequest, Trade360Model


# Caller-facing filters

class GetFixturesRequestDto(BaseModel):
    """Filter for fixtures, livescore and outright league queries."""

    timestamp: Optional[int] = None
    from_date: Optional[int] = None
    to_date: Optional[int] = None
    sports: List[int] = Field(default_factory=list)
    locations: List[int] = Field(default_factory=list)
    fixtures: List[int] = Field(default_factory=list)
    leagues: List[int] = Field(default_factory=list)


class GetLivescoreRequestDto(GetFixturesRequestDto):
    pass


class GetMarketRequestDto(GetFixturesRequestDto):
    markets: List[int] = Field(default_factory=list)


class GetOutrightFixturesRequestDto(BaseModel):
    """Filter for outright queries, scoped by tournament."""

    timestamp: Optional[int] = None
    from_date: Optional[int] = None
    to_date: Optional[int] = None
    sports: List[int] = Field(default_factory=list)
    locations: List[int] = Field(default_factory=list)
    fixtures: List[int] = Field(default_factory=list)
    tournaments: List[int] = Field(default_factory=list)


class GetOutrightLivescoreRequestDto(GetOutrightFixturesRequestDto):
    pass


class GetOutrightMarketsRequestDto(GetOutrightFixturesRequestDto):
    markets: List[int] = Field(default_factory=list)


# Wire requests

class StandardRequest(BaseRequest):
    timestamp: Optional[int] = None
    from_date: Optional[int] = None
    to_date: Optional[int] = None
    sports: List[int] = Field(default_factory=list)
    locations: List[int] = Field(default_factory=list)
    fixtures: List[int] = Field(default_factory=list)
    leagues: List[int] = Field(default_factory=list)
    markets: List[int] = Field(default_factory=list)


class OutrightRequest(BaseRequest):
    timestamp: Optional[int] = None
    from_date: Optional[int] = None
    to_date: Optional[int] = None
    sports: List[int] = Field(default_factory=list)
    locations: List[int] = Field(default_factory=list)
    fixtures: List[int] = Field(default_factory=list)
    tournaments: List[int] = Field(default_factory=list)
    markets: List[int] = Field(default_factory=list)


# Responses

class IdNamePair(Trade360Model):
    id: int
    name: Optional[str] = None


class Participant(Trade360Model):
    id: int
    name: Optional[str] = None
    position: Optional[str] = None


class Fixture(Trade360Model):
    sport: Optional[IdNamePair] = None
    location: Optional[IdNamePair] = None
    league: Optional[IdNamePair] = None
    start_date: Optional[datetime] = None
    last_update: Optional[datetime] = None
    status: Optional[int] = None
    participants: Optional[List[Participant]] = None


class Bet(Trade360Model):
    id: int
    name: Optional[str] = None
    line: Optional[str] = None
    base_line: Optional[str] = None
    status: Optional[int] = None
    price: Optional[str] = None
    last_update: Optional[datetime] = None


class Market(Trade360Model):
    id: int
    name: Optional[str] = None
    bets: Optional[List[Bet]] = None


class FixtureEvent(Trade360Model):
    fixture_id: int
    fixture: Optional[Fixture] = None


class LivescoreEvent(Trade360Model):
    fixture_id: int
    livescore: Optional[Dict[str, Any]] = None


class MarketEvent(Trade360Model):
    fixture_id: int
    markets: Optional[List[Market]] = None


class GetEventsResponse(Trade360Model):
    fixture_id: int
    fixture: Optional[Fixture] = None
    livescore: Optional[Dict[str, Any]] = None
    markets: Optional[List[Market]] = None


class OutrightFixture(Trade360Model):
    fixture_name: Optional[str] = None
    sport: Optional[IdNamePair] = None
    location: Optional[IdNamePair] = None
    start_date: Optional[datetime] = None
    last_update: Optional[datetime] = None
    status: Optional[int] = None
    participants: Optional[List[Participant]] = None


class OutrightFixtureEvent(Trade360Model):
    fixture_id: int
    outright_fixture: Optional[OutrightFixture] = None


class OutrightScoreEvent(Trade360Model):
    fixture_id: int
    outright_score: Optional[Dict[str, Any]] = None


class OutrightMarketEvent(Trade360Model):
    fixture_id: int
    markets: Optional[List[Market]] = None


class OutrightEvent(Trade360Model):
    fixture_id: int
    outright_fixture: Optional[OutrightFixture] = None
    outright_score: Optional[Dict[str, Any]] = None
    markets: Optional[List[Market]] = None


class OutrightCompetition(Trade360Model):
    """Competition header shared by every outright response."""

    id: int
    name: Optional[str] = None
    type: Optional[int] = None


class GetOutrightFixtureResponse(OutrightCompetition):
    events: Optional[List[OutrightFixtureEvent]] = None


class GetOutrightLivescoreResponse(OutrightCompetition):
    events: Optional[List[OutrightScoreEvent]] = None


class GetOutrightMarketsResponse(OutrightCompetition):
    events: Optional[List[OutrightMarketEvent]] = None


class GetOutrightEventsResponse(OutrightCompetition):
    events: Optional[List[OutrightEvent]] = None


class OutrightLeagueEvents(OutrightCompetition):
    events: Optional[List[Dict[str, Any]]] = None


class GetOutrightLeaguesFixturesResponse(OutrightCompetition):
    competitions: Optional[List[OutrightLeagueEvents]] = None


class GetOutrightLeaguesMarketsResponse(OutrightCompetition):
    competitions: Optional[List[OutrightLeagueEvents]] = None


class GetOutrightLeagueEventsResponse(OutrightCompetition):
    competitions: Optional[List[OutrightLeagueEvents]] = None


class GetLiveScoreResponse(Trade360Model):
    fixture_id: int
    livescore: Optional[Dict[str, Any]] = None
