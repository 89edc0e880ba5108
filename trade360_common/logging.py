"""
Structured logging for the Trade360 SDK.

The SDK only obtains loggers; applications call ``configure_logging`` once
to get JSON (or console) output carrying the current call's correlation
fields.
"""

import logging
import sys
import uuid
from contextvars import ContextVar
from typing import Any, Dict, List, Optional

import structlog

LOGGER_NAMESPACE = "trade360"

# Fields whose values never reach a log line
REDACTED_FIELDS = frozenset({"password", "Password", "authorization", "Authorization"})

_call_context: ContextVar[Dict[str, Any]] = ContextVar("trade360_call_context", default={})


def configure_logging(log_level: str = "info", json_output: bool = True) -> None:
    """Configure structlog and the ``trade360`` stdlib logger."""
    level = getattr(logging, log_level.upper())
    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=_shared_processors() + [renderer],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    logging.getLogger(LOGGER_NAMESPACE).setLevel(level)


def _shared_processors() -> List[Any]:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        add_component,
        add_call_context,
        redact_secrets,
    ]


def add_component(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """``trade360.client.snapshot-prematch`` -> ``component=client``."""
    parts = event_dict.get("logger", "").split(".")
    if len(parts) > 1 and parts[0] == LOGGER_NAMESPACE:
        event_dict["component"] = parts[1]
    return event_dict


def add_call_context(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Copy the bound call fields; explicit event fields win."""
    for key, value in _call_context.get().items():
        event_dict.setdefault(key, value)
    return event_dict


def redact_secrets(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    for key in REDACTED_FIELDS.intersection(event_dict):
        event_dict[key] = "***"
    return event_dict


def bind_call_context(client: Optional[str] = None,
                      package_id: Optional[int] = None,
                      call_id: Optional[str] = None) -> str:
    """Bind correlation fields for the current provider call and return its id."""
    call_id = call_id or str(uuid.uuid4())
    context = {"call_id": call_id}
    if client:
        context["client"] = client
    if package_id is not None:
        context["package_id"] = package_id
    _call_context.set(context)
    return call_id


def current_call_context() -> Dict[str, Any]:
    return dict(_call_context.get())


def clear_call_context():
    _call_context.set({})


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
