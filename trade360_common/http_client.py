"""
Base typed client shared by every Trade360 endpoint client.
"""

import time
from typing import Any, List, Optional, Tuple, Union

import httpx
from pydantic import BaseModel

from .cancellation import CancellationToken
from .config import PackageCredentials
from .envelope import BaseRequest, decode, encode, to_query_params
from .errors import (
    HttpStatusError,
    MalformedPayloadError,
    MissingCredentialsError,
    Trade360Exception,
    TransientTransportError,
    TransportError,
)
from .logging import bind_call_context, get_logger
from .metrics import ClientMetrics
from .resilience import ResiliencePolicy
from .retry import is_transient_status

JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


def _retry_after(response: httpx.Response) -> Optional[float]:
    value = response.headers.get("Retry-After")
    if value is None:
        return None
    try:
        return max(0.0, float(value))
    except ValueError:
        # HTTP-date form is not honoured
        return None


class BaseHttpClient:
    """Single choke point through which endpoint methods call the provider.

    The client holds one transport handle (an ``httpx.AsyncClient`` whose
    ``base_url`` is already set), the resilience policy of its named client
    and, optionally, package credentials. It keeps no state between calls.
    """

    requires_credentials: bool = False
    default_name: str = "trade360"

    def __init__(self,
                 http_client: httpx.AsyncClient,
                 policy: Optional[ResiliencePolicy] = None,
                 credentials: Optional[PackageCredentials] = None,
                 name: Optional[str] = None,
                 metrics: Optional[ClientMetrics] = None,
                 owns_transport: bool = False):
        self.name = name or self.default_name
        self.policy = policy or ResiliencePolicy(self.name)
        self.credentials = credentials
        self.metrics = metrics
        self._http = http_client
        self._owns_transport = owns_transport
        self.logger = get_logger(f"trade360.client.{self.name}")

    @property
    def base_url(self) -> httpx.URL:
        return self._http.base_url

    async def send(self,
                   path: str,
                   request: Union[BaseModel, None],
                   response_type: Any,
                   *,
                   cancellation: Optional[CancellationToken] = None,
                   method: str = "POST") -> Any:
        """Send ``request`` to ``path`` and return the envelope body.

        Raises:
            MissingCredentialsError: credentials required but not configured.
            RequestCancelledError: the token fired before or during the call.
            CircuitOpenError: the named client's breaker is open.
            TransientTransportError: transient failure after all retries.
            ProtocolViolation: the response broke the envelope contract.
            HttpStatusError: non-success status without an envelope.
        """
        if self.requires_credentials and self.credentials is None:
            raise MissingCredentialsError(details={"client": self.name})
        if cancellation is not None:
            cancellation.raise_if_cancelled()

        if request is None:
            request = BaseRequest()
        if isinstance(request, BaseRequest):
            request = request.with_credentials(self.credentials)

        method = method.upper()
        content: Optional[bytes] = None
        params: Optional[List[Tuple[str, str]]] = None
        if method == "GET":
            params = to_query_params(request)
        else:
            content = encode(request)

        call_id = bind_call_context(self.name, self.credentials.package_id if self.credentials else None)
        start = time.perf_counter()
        outcome = "error"
        try:
            response = await self.policy.execute(
                self._dispatch, method, path, content, params, cancellation,
                cancellation=cancellation
            )
            body = self._handle_response(response, path, response_type)
            outcome = "success"
            return body
        except Trade360Exception as e:
            outcome = e.code.lower()
            self.logger.warning(
                "Provider call failed",
                path=path,
                call_id=call_id,
                code=e.code,
                error=e.message
            )
            raise
        finally:
            if self.metrics is not None:
                self.metrics.record_request(self.name, path, outcome, time.perf_counter() - start)

    async def _dispatch(self,
                        method: str,
                        path: str,
                        content: Optional[bytes],
                        params: Optional[List[Tuple[str, str]]],
                        cancellation: Optional[CancellationToken]) -> httpx.Response:
        """One HTTP attempt, with httpx failures classified."""
        if method == "GET":
            call = self._http.get(path, params=params, headers={"Accept": "application/json"})
        else:
            call = self._http.request(method, path, content=content, headers=JSON_HEADERS)

        try:
            if cancellation is not None:
                response = await cancellation.run(call)
            else:
                response = await call
        except httpx.TimeoutException as exc:
            raise TransientTransportError(f"Request timed out: {exc}", details={"path": path}) from exc
        except (httpx.NetworkError, httpx.RemoteProtocolError) as exc:
            raise TransientTransportError(f"Connection failure: {exc}", details={"path": path}) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"Transport error: {exc}", details={"path": path}) from exc

        if is_transient_status(response.status_code):
            raise TransientTransportError(
                f"Transient HTTP status {response.status_code}",
                status_code=response.status_code,
                retry_after=_retry_after(response) if response.status_code == 429 else None,
                details={"path": path}
            )

        self.logger.debug("Provider call completed", path=path, status_code=response.status_code)
        return response

    def _handle_response(self, response: httpx.Response, path: str, response_type: Any) -> Any:
        if response.is_success:
            envelope = decode(response.content, response_type)
        else:
            try:
                envelope = decode(response.content, response_type)
            except MalformedPayloadError as exc:
                raise HttpStatusError(response.status_code, response.text) from exc
            self.logger.info(
                "Provider returned an envelope with error status",
                path=path,
                status_code=response.status_code
            )

        errors = envelope.header.error_messages()
        if errors:
            self.logger.warning("Provider reported errors in envelope header", path=path, errors=errors)
        return envelope.body

    async def aclose(self):
        """Close the transport handle if this client owns it."""
        if self._owns_transport:
            await self._http.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()
