"""
Envelope codec for the Trade360 REST protocol.

Every response from the provider is wrapped as ``{"header": {...}, "body": ...}``.
The structural rules are enforced here, once, for every endpoint:

- the payload must be a JSON object, otherwise ``MalformedPayloadError``;
- ``header`` must be present, otherwise ``HeaderMissingError``;
- ``body`` must be present and not null, otherwise ``BodyMissingError``
  (an empty list is a valid body).

Keys are matched case-insensitively, so ``Header``/``header`` and
``MsgSeq``/``msgSeq``/``msg_seq`` are equivalent.
"""

import json
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Generic, List, Mapping, Optional, Tuple, TypeVar, Union

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError, model_validator
from pydantic.alias_generators import to_pascal

from .config import PackageCredentials
from .errors import (
    BodyMissingError,
    HeaderMissingError,
    MalformedPayloadError,
    RequestValidationError,
)

T = TypeVar("T")


def _fold(key: str) -> str:
    return key.replace("_", "").lower()


class Trade360Model(BaseModel):
    """Base for wire models: PascalCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True, extra="allow")

    @model_validator(mode="before")
    @classmethod
    def _match_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        lookup = {}
        for name, field in cls.model_fields.items():
            alias = field.alias or name
            lookup[_fold(alias)] = alias
        return {
            lookup.get(_fold(key), key) if isinstance(key, str) else key: value
            for key, value in data.items()
        }


class HeaderError(Trade360Model):
    message: Optional[str] = None


class MessageHeader(Trade360Model):
    """Envelope metadata."""

    creation_date: Optional[Union[str, int]] = None
    type: Optional[int] = None
    msg_seq: Optional[int] = None
    msg_guid: Optional[str] = None
    server_timestamp: Optional[Union[int, str]] = None
    message_broker_timestamp: Optional[Union[str, int]] = None
    http_status_code: Optional[Union[int, str]] = None
    errors: Optional[List[HeaderError]] = None

    def error_messages(self) -> List[str]:
        return [error.message for error in self.errors or [] if error.message]


class BaseRequest(Trade360Model):
    """Fields shared by every request; credentials are filled by the client."""

    model_config = ConfigDict(extra="ignore")

    package_id: Optional[int] = None
    user_name: Optional[str] = None
    password: Optional[str] = None

    def with_credentials(self, credentials: Optional[PackageCredentials]) -> "BaseRequest":
        """Copy of the request carrying ``credentials``."""
        if credentials is None:
            return self
        return self.model_copy(update={
            "package_id": credentials.package_id,
            "user_name": credentials.username,
            "password": credentials.password,
        })


@dataclass(frozen=True)
class Envelope(Generic[T]):
    header: MessageHeader
    body: T


@lru_cache(maxsize=None)
def _adapter(body_type: Any) -> TypeAdapter:
    return TypeAdapter(body_type)


def _to_payload(request: Union[BaseModel, Mapping[str, Any], None]) -> Dict[str, Any]:
    if request is None:
        return {}
    if isinstance(request, BaseModel):
        return request.model_dump(mode="json", by_alias=True, exclude_none=True)
    return dict(request)


def encode(request: Union[BaseModel, Mapping[str, Any], None]) -> bytes:
    """Serialize a request to a JSON body."""
    try:
        return json.dumps(_to_payload(request), separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise RequestValidationError("Request is not serializable", {"error": str(exc)}) from exc


def to_query_params(request: Union[BaseModel, Mapping[str, Any], None]) -> List[Tuple[str, str]]:
    """Flatten a request into query parameters; lists become repeated keys."""
    params: List[Tuple[str, str]] = []
    for key, value in _to_payload(request).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            params.extend((key, _query_value(item)) for item in value)
        else:
            params.append((key, _query_value(value)))
    return params


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def decode(raw: Union[bytes, str], body_type: Any = Any) -> Envelope:
    """Parse a response envelope and validate its body as ``body_type``."""
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise MalformedPayloadError("Response is not valid JSON", {"error": str(exc)}) from exc

    if not isinstance(data, dict):
        raise MalformedPayloadError("Response is not a JSON object")

    fields = {_fold(key): value for key, value in data.items()}

    header_data = fields.get("header")
    if header_data is None:
        raise HeaderMissingError()
    if not isinstance(header_data, dict):
        raise MalformedPayloadError("Envelope header is not an object")
    try:
        header = MessageHeader.model_validate(header_data)
    except ValidationError as exc:
        raise MalformedPayloadError("Envelope header is invalid", {"error": str(exc)}) from exc

    body_data = fields.get("body")
    if body_data is None:
        raise BodyMissingError(errors=header.error_messages())
    try:
        body = _adapter(body_type).validate_python(body_data)
    except ValidationError as exc:
        raise MalformedPayloadError("Envelope body does not match the expected type",
                                    {"error": str(exc)}) from exc

    return Envelope(header=header, body=body)
