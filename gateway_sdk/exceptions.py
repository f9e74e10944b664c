"""Custom exception hierarchy for gateway-sdk.

Expected request failures (validation, not found, network) are never raised;
they come back as ``Err`` values. These exceptions cover programming and
configuration faults only.
"""


class GatewayError(Exception):
    """Base exception for all gateway-sdk errors."""


class ConfigurationError(GatewayError):
    """Raised when configuration is invalid or missing."""


class InvalidArgumentError(GatewayError):
    """Raised when a resource operation is called with arguments of the wrong shape."""


class MalformedPayloadError(GatewayError):
    """Raised when a payload is neither a mapping nor a sequence of mappings."""

    def __init__(self, record_name: str, payload: object) -> None:
        self.record_name = record_name
        self.payload = payload
        super().__init__(
            f"Cannot build {record_name} from {type(payload).__name__} payload"
        )
