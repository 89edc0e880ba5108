"""
Unit tests for snapshot filter mapping.
"""

from trade360_snapshot.mapping import to_outright_request, to_standard_request
from trade360_snapshot.models import (
    GetFixturesRequestDto,
    GetLivescoreRequestDto,
    GetMarketRequestDto,
    GetOutrightFixturesRequestDto,
    GetOutrightMarketsRequestDto,
    OutrightRequest,
    StandardRequest,
)


class TestStandardMapping:
    """Test cases for to_standard_request."""

    def test_none_is_empty_request(self):
        assert to_standard_request(None) == StandardRequest()

    def test_fixture_filter(self):
        request = to_standard_request(GetFixturesRequestDto(
            timestamp=1, from_date=2, to_date=3, sports=[4], locations=[5], fixtures=[6], leagues=[7]
        ))

        assert request.timestamp == 1
        assert request.from_date == 2
        assert request.to_date == 3
        assert request.sports == [4]
        assert request.locations == [5]
        assert request.fixtures == [6]
        assert request.leagues == [7]
        assert request.markets == []
        assert request.package_id is None

    def test_livescore_filter_has_no_markets(self):
        assert to_standard_request(GetLivescoreRequestDto(sports=[1])).markets == []

    def test_market_filter_copies_markets(self):
        assert to_standard_request(GetMarketRequestDto(markets=[1, 2])).markets == [1, 2]

    def test_lists_are_copied(self):
        dto = GetFixturesRequestDto(sports=[1])

        request = to_standard_request(dto)
        request.sports.append(2)

        assert dto.sports == [1]


class TestOutrightMapping:
    """Test cases for to_outright_request."""

    def test_none_is_empty_request(self):
        assert to_outright_request(None) == OutrightRequest()

    def test_tournaments(self):
        request = to_outright_request(GetOutrightFixturesRequestDto(tournaments=[9], fixtures=[1]))

        assert request.tournaments == [9]
        assert request.fixtures == [1]
        assert request.markets == []

    def test_outright_market_filter(self):
        assert to_outright_request(GetOutrightMarketsRequestDto(markets=[3])).markets == [3]
