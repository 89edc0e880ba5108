"""
Unit tests for the envelope codec.
"""

import json
from typing import List, Optional

import pytest

from trade360_common.envelope import BaseRequest, MessageHeader, Trade360Model, decode, encode, to_query_params
from trade360_common.errors import (
    BodyMissingError,
    HeaderMissingError,
    MalformedPayloadError,
    ProtocolViolation,
    RequestValidationError,
)
from trade360_common.test_helpers import EnvelopeFactory


class Item(Trade360Model):
    id: int
    name: str


class FilterRequest(BaseRequest):
    sport_ids: List[int] = []
    is_settleable: bool = False
    language_id: Optional[int] = None


class TestDecode:
    """Test cases for decode."""

    def test_decode_list_body(self):
        """Test a well-formed envelope with a list body."""
        raw = json.dumps(EnvelopeFactory.envelope([{"Id": 1, "Name": "Football"}]))

        envelope = decode(raw, List[Item])

        assert envelope.body == [Item(id=1, name="Football")]
        assert isinstance(envelope.header, MessageHeader)
        assert envelope.header.msg_seq == 1

    def test_empty_list_is_a_valid_body(self):
        """Test that an empty list is distinct from a missing body."""
        envelope = decode(json.dumps(EnvelopeFactory.envelope([])), List[Item])

        assert envelope.body == []

    def test_keys_match_case_insensitively(self):
        """Test lower-case and camelCase keys."""
        raw = json.dumps({
            "header": {"msgSeq": 7, "msg_guid": "abc", "creationDate": "2024-01-01T00:00:00"},
            "body": {"id": 3, "NAME": "Tennis"}
        })

        envelope = decode(raw, Item)

        assert envelope.header.msg_seq == 7
        assert envelope.header.msg_guid == "abc"
        assert envelope.body == Item(id=3, name="Tennis")

    def test_missing_body_raises(self):
        """Test body key absent."""
        raw = json.dumps(EnvelopeFactory.envelope(include_body=False))

        with pytest.raises(BodyMissingError) as exc_info:
            decode(raw, List[Item])

        assert exc_info.value.message == "body missing"
        assert exc_info.value.code == "BODY_MISSING"

    def test_null_body_raises(self):
        """Test explicit null body."""
        raw = json.dumps(EnvelopeFactory.envelope(None))

        with pytest.raises(BodyMissingError):
            decode(raw, List[Item])

    def test_missing_body_carries_header_errors(self):
        """Test provider errors are attached to the body-missing error."""
        header = EnvelopeFactory.header(Errors=[{"Message": "Invalid credentials"}])
        raw = json.dumps(EnvelopeFactory.envelope(header=header, include_body=False))

        with pytest.raises(BodyMissingError) as exc_info:
            decode(raw)

        assert exc_info.value.errors == ["Invalid credentials"]
        assert exc_info.value.details["errors"] == ["Invalid credentials"]

    def test_missing_header_raises(self):
        """Test header key absent."""
        raw = json.dumps(EnvelopeFactory.envelope([], include_header=False))

        with pytest.raises(HeaderMissingError) as exc_info:
            decode(raw, List[Item])

        assert exc_info.value.message == "header missing"
        assert isinstance(exc_info.value, ProtocolViolation)

    @pytest.mark.parametrize("raw", ["not json", "[1, 2]", '"text"', '{"Header": 5, "Body": []}'])
    def test_malformed_payload(self, raw):
        """Test payloads that are not envelopes."""
        with pytest.raises(MalformedPayloadError):
            decode(raw, List[Item])

    def test_body_type_mismatch(self):
        """Test a body that cannot be converted to the expected type."""
        raw = json.dumps(EnvelopeFactory.envelope({"unexpected": True}))

        with pytest.raises(MalformedPayloadError):
            decode(raw, List[Item])


class TestEncode:
    """Test cases for encode and query parameters."""

    def test_encode_uses_wire_names_and_omits_none(self):
        """Test PascalCase keys and None omission."""
        request = FilterRequest(sport_ids=[1, 2])

        payload = json.loads(encode(request))

        assert payload == {"SportIds": [1, 2], "IsSettleable": False}

    def test_encode_with_credentials(self):
        """Test credentials are copied without mutating the caller's request."""
        request = FilterRequest(sport_ids=[1])

        filled = request.with_credentials(EnvelopeFactory.credentials())
        payload = json.loads(encode(filled))

        assert payload["PackageId"] == 123
        assert payload["UserName"] == "u"
        assert payload["Password"] == "p"
        assert request.package_id is None

    def test_encode_mapping(self):
        """Test plain mappings are encoded as-is."""
        assert json.loads(encode({"A": 1})) == {"A": 1}
        assert encode(None) == b"{}"

    def test_encode_unserializable_mapping(self):
        """Test unserializable values are rejected client-side."""
        with pytest.raises(RequestValidationError):
            encode({"A": object()})

    def test_round_trip(self):
        """Test an encoded request decodes back to an equal model."""
        request = FilterRequest(sport_ids=[4, 5], is_settleable=True, language_id=2)
        raw = json.dumps({"Header": EnvelopeFactory.header(), "Body": json.loads(encode(request))})

        assert decode(raw, FilterRequest).body == request

    def test_query_params_repeat_list_keys(self):
        """Test list flattening and boolean rendering."""
        request = FilterRequest(sport_ids=[1, 2], is_settleable=True)

        params = to_query_params(request)

        assert params == [("SportIds", "1"), ("SportIds", "2"), ("IsSettleable", "true")]
