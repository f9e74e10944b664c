"""Payment gateway SDK: customer resource client and payload normalization."""

from gateway_sdk.config import GatewayConfig
from gateway_sdk.http import HTTPClient
from gateway_sdk.models import Customer, Err, ErrorKind, ErrorResponse, Ok
from gateway_sdk.resources import CustomerResource

__version__ = "0.1.0"

__all__ = [
    "Customer",
    "CustomerResource",
    "Err",
    "ErrorKind",
    "ErrorResponse",
    "GatewayConfig",
    "HTTPClient",
    "Ok",
    "__version__",
]
