"""HTTP transport for the gateway REST API.

Every call returns ``Ok(payload)`` or ``Err(ErrorResponse)``; no expected
failure (HTTP error status, unreachable host, undecodable body) is raised.
"""

import time
from typing import Any

import requests

from gateway_sdk.config import GatewayConfig
from gateway_sdk.logging import get_logger
from gateway_sdk.models.enums import ErrorKind
from gateway_sdk.models.result import Err, ErrorResponse, Ok, Result
from gateway_sdk.serialization import serialize_value

logger = get_logger(__name__)

STATUS_KINDS = {
    401: ErrorKind.UNAUTHORIZED,
    403: ErrorKind.FORBIDDEN,
    404: ErrorKind.NOT_FOUND,
    408: ErrorKind.REQUEST_TIMEOUT,
    422: ErrorKind.VALIDATION,
    426: ErrorKind.UPGRADE_REQUIRED,
    429: ErrorKind.TOO_MANY_REQUESTS,
    500: ErrorKind.SERVER_ERROR,
    503: ErrorKind.SERVICE_UNAVAILABLE,
}


class HTTPClient:
    """Issue authenticated JSON requests against one merchant's endpoints."""

    def __init__(
        self,
        config: GatewayConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the client.

        Parameters
        ----------
        config : GatewayConfig | None
            Connection settings. Read from the environment when omitted.
        session : requests.Session | None
            Session to reuse; a new one is created (and owned) otherwise.
        """
        self.config = config or GatewayConfig.from_env()
        self._owns_session = session is None
        self.session = session or requests.Session()

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying session if this client created it."""
        if self._owns_session:
            self.session.close()

    def get(self, path: str, **opts: Any) -> Result:
        return self.request("GET", path, **opts)

    def post(self, path: str, body: Any = None, **opts: Any) -> Result:
        return self.request("POST", path, body, **opts)

    def put(self, path: str, body: Any = None, **opts: Any) -> Result:
        return self.request("PUT", path, body, **opts)

    def delete(self, path: str, **opts: Any) -> Result:
        return self.request("DELETE", path, **opts)

    def request(self, method: str, path: str, body: Any = None, **opts: Any) -> Result:
        """Send one request and decode the response.

        Parameters
        ----------
        method : str
            HTTP verb.
        path : str
            Resource path relative to the merchant URL (e.g. ``customers/abc``).
        body : Any
            Request parameters, JSON-encoded after serialization.
        **opts
            Per-call config overrides (``environment``, ``merchant_id``,
            ``public_key``, ``private_key``, ``timeout``, ``api_version``).

        Returns
        -------
        Result
            ``Ok`` with the decoded payload (``{}`` for an empty body) or
            ``Err`` with an ``ErrorResponse``.

        Raises
        ------
        ConfigurationError
            If merchant id or keys are missing.
        """
        config = self.config.merge(**opts)
        config.require_credentials()
        url = f"{config.merchant_url}/{path.lstrip('/')}"
        kwargs = config.http_options()
        if body is not None:
            kwargs["json"] = serialize_value(body)

        started = time.perf_counter()
        context = {"method": method, "path": path, "environment": config.environment.value}
        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as exc:
            context["elapsed_ms"] = _elapsed_ms(started)
            logger.warning("%s %s failed: %s", method, path, exc, extra={"extra": context})
            return Err(ErrorResponse(kind=ErrorKind.NETWORK, message=str(exc)))

        context["status"] = response.status_code
        context["elapsed_ms"] = _elapsed_ms(started)
        logger.debug(
            "%s %s -> %d in %dms",
            method,
            path,
            response.status_code,
            context["elapsed_ms"],
            extra={"extra": context},
        )
        return self._handle_response(response, context)

    def _handle_response(self, response: requests.Response, context: dict[str, Any]) -> Result:
        method, path = context["method"], context["path"]
        status = response.status_code
        if 200 <= status < 300:
            if not response.content:
                return Ok({})
            try:
                return Ok(response.json())
            except ValueError:
                logger.warning(
                    "%s %s returned an undecodable body", method, path, extra={"extra": context}
                )
                return Err(
                    ErrorResponse(
                        kind=ErrorKind.MALFORMED_RESPONSE,
                        message="Response body is not valid JSON",
                        status=status,
                    )
                )

        kind = STATUS_KINDS.get(status, ErrorKind.UNKNOWN)
        logger.warning(
            "%s %s -> %d (%s)",
            method,
            path,
            status,
            kind.value,
            extra={"extra": {**context, "error_kind": kind.value}},
        )
        if kind is ErrorKind.VALIDATION:
            return Err(_validation_error(response))
        return Err(ErrorResponse(kind=kind, message=response.reason or "", status=status))


def _elapsed_ms(started: float) -> int:
    return round((time.perf_counter() - started) * 1000)


def _validation_error(response: requests.Response) -> ErrorResponse:
    """Build the error value from an ``api_error_response`` body."""
    try:
        payload = response.json()
    except ValueError:
        payload = {}
    if not isinstance(payload, dict):
        payload = {}
    details = payload.get("api_error_response", payload)
    if not isinstance(details, dict):
        details = {}
    return ErrorResponse(
        kind=ErrorKind.VALIDATION,
        message=details.get("message") or "",
        errors=details.get("errors") or {},
        params=details.get("params") or {},
        status=response.status_code,
    )
