"""
Mapping from caller filters to Snapshot API wire requests.

Credential fields are never copied here; the client fills them in.
"""

from typing import Optional

from .models import (
    GetFixturesRequestDto,
    GetMarketRequestDto,
    GetOutrightFixturesRequestDto,
    GetOutrightMarketsRequestDto,
    OutrightRequest,
    StandardRequest,
)


def to_standard_request(dto: Optional[GetFixturesRequestDto]) -> StandardRequest:
    """Fixtures, livescore and market filters -> ``StandardRequest``.

    Only market filters carry ``markets``; other filters send an empty list.
    """
    if dto is None:
        return StandardRequest()
    return StandardRequest(
        timestamp=dto.timestamp,
        from_date=dto.from_date,
        to_date=dto.to_date,
        sports=list(dto.sports),
        locations=list(dto.locations),
        fixtures=list(dto.fixtures),
        leagues=list(dto.leagues),
        markets=list(dto.markets) if isinstance(dto, GetMarketRequestDto) else [],
    )


def to_outright_request(dto: Optional[GetOutrightFixturesRequestDto]) -> OutrightRequest:
    if dto is None:
        return OutrightRequest()
    return OutrightRequest(
        timestamp=dto.timestamp,
        from_date=dto.from_date,
        to_date=dto.to_date,
        sports=list(dto.sports),
        locations=list(dto.locations),
        fixtures=list(dto.fixtures),
        tournaments=list(dto.tournaments),
        markets=list(dto.markets) if isinstance(dto, GetOutrightMarketsRequestDto) else [],
    )
