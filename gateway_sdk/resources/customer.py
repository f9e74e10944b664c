"""Customer resource operations.

A customer can be created on its own, with a payment method, or with a credit
card and billing address. Deleting a customer also removes its payment
methods and cancels its subscriptions; that cascade happens on the gateway.
"""

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from gateway_sdk import search as _search
from gateway_sdk.exceptions import InvalidArgumentError, MalformedPayloadError
from gateway_sdk.http import HTTPClient
from gateway_sdk.logging import get_logger
from gateway_sdk.models import customer as customer_model
from gateway_sdk.models.enums import ErrorKind
from gateway_sdk.models.result import Err, ErrorResponse, Ok, Result

logger = get_logger(__name__)

COLLECTION_PATH = "customers"


class CustomerResource:
    """Create, find, update, delete and search vaulted customers."""

    def __init__(self, client: HTTPClient | None = None) -> None:
        self.client = client or HTTPClient()

    def create(self, params: Mapping[str, Any] | None = None, **opts: Any) -> Result:
        """Create a customer, or return the validation error.

        Examples
        --------
        >>> result = resource.create({"first_name": "Jen", "company": "Braintree"})
        >>> result.value.company
        'Braintree'
        """
        params = _require_mapping("params", params if params is not None else {})
        result = self.client.post(COLLECTION_PATH, {"customer": params}, **opts)
        return self._build(result)

    def find(self, customer_id: str, **opts: Any) -> Result:
        """Look up a single customer by id."""
        result = self.client.get(_member_path(customer_id), **opts)
        return self._build(result)

    def update(self, customer_id: str, params: Mapping[str, Any], **opts: Any) -> Result:
        """Update a customer; attributes not passed keep their current values."""
        path = _member_path(customer_id)
        params = _require_mapping("params", params)
        result = self.client.put(path, {"customer": params}, **opts)
        return self._build(result)

    def delete(self, customer_id: str, **opts: Any) -> Result:
        """Delete a customer. Returns ``Ok(None)`` on success."""
        result = self.client.delete(_member_path(customer_id), **opts)
        if isinstance(result, Err):
            return result
        return Ok(None)

    def search(self, criteria: Mapping[str, Any], **opts: Any) -> Result:
        """Search customers, e.g. ``{"first_name": {"is": "Jenna"}}``."""
        criteria = _require_mapping("criteria", criteria)
        try:
            return _search.perform(
                criteria, COLLECTION_PATH, customer_model.new, self.client, **opts
            )
        except MalformedPayloadError as exc:
            return _malformed(exc)

    def _build(self, result: Result) -> Result:
        if isinstance(result, Err):
            return result
        try:
            return Ok(customer_model.new(result.value))
        except MalformedPayloadError as exc:
            return _malformed(exc)


def _member_path(customer_id: str) -> str:
    if not isinstance(customer_id, str) or not customer_id.strip():
        raise InvalidArgumentError(f"customer_id must be a non-empty string, got {customer_id!r}")
    return f"{COLLECTION_PATH}/{quote(customer_id, safe='')}"


def _require_mapping(name: str, value: Any) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise InvalidArgumentError(f"{name} must be a mapping, got {type(value).__name__}")
    return value


def _malformed(exc: MalformedPayloadError) -> Err:
    logger.error("Gateway returned an unusable customer payload: %s", exc)
    return Err(ErrorResponse(kind=ErrorKind.MALFORMED_RESPONSE, message=str(exc)))


_default_resource: CustomerResource | None = None


def default_resource() -> CustomerResource:
    """Get the shared resource, configured from the environment on first use."""
    global _default_resource
    if _default_resource is None:
        _default_resource = CustomerResource()
    return _default_resource


def create(params: Mapping[str, Any] | None = None, **opts: Any) -> Result:
    return default_resource().create(params, **opts)


def find(customer_id: str, **opts: Any) -> Result:
    return default_resource().find(customer_id, **opts)


def update(customer_id: str, params: Mapping[str, Any], **opts: Any) -> Result:
    return default_resource().update(customer_id, params, **opts)


def delete(customer_id: str, **opts: Any) -> Result:
    return default_resource().delete(customer_id, **opts)


def search(criteria: Mapping[str, Any], **opts: Any) -> Result:
    return default_resource().search(criteria, **opts)
