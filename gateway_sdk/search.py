"""Advanced search execution shared by searchable resources.

A search is two requests: the criteria are posted to
``<resource>/advanced_search_ids`` to collect matching ids, then the ids are
posted to ``<resource>/advanced_search`` to fetch the records themselves.
"""

from collections.abc import Callable, Mapping
from typing import Any

from gateway_sdk.http import HTTPClient
from gateway_sdk.logging import get_logger
from gateway_sdk.models.enums import ErrorKind
from gateway_sdk.models.result import Err, ErrorResponse, Ok, Result

logger = get_logger(__name__)


def perform(
    criteria: Mapping[str, Any],
    resource: str,
    initializer: Callable[[Any], Any],
    client: HTTPClient,
    **opts: Any,
) -> Result:
    """Run a search and build the matching records.

    Parameters
    ----------
    criteria : Mapping[str, Any]
        Search criteria, e.g. ``{"first_name": {"is": "Jenna"}}``.
    resource : str
        Collection path, which is also the key the records are listed under.
    initializer : Callable
        Normalizer applied to the list of raw records.
    client : HTTPClient
        Transport used for both requests.
    **opts
        Per-call config overrides forwarded to the transport.

    Returns
    -------
    Result
        ``Ok`` with the list of records, ``Err`` with ``NOT_FOUND`` when no
        ids match, or the transport's ``Err`` unchanged.
    """
    found = client.post(f"{resource}/advanced_search_ids", {"search": criteria}, **opts)
    if isinstance(found, Err):
        return found

    ids = _extract_ids(found.value)
    if not ids:
        logger.debug("Search on %s matched no records", resource)
        return Err(ErrorResponse(kind=ErrorKind.NOT_FOUND, message="No records matched the search"))

    fetched = client.post(f"{resource}/advanced_search", {"search": {"ids": ids}}, **opts)
    if isinstance(fetched, Err):
        return fetched

    payload = fetched.value
    records = payload.get(resource, []) if isinstance(payload, Mapping) else payload
    return Ok(initializer(records))


def _extract_ids(payload: Any) -> list[str]:
    """Pull the id list out of ``{"search_results": {"ids": [...]}}``."""
    if not isinstance(payload, Mapping):
        return []
    results = payload.get("search_results", payload)
    if not isinstance(results, Mapping):
        return []
    return list(results.get("ids") or [])
