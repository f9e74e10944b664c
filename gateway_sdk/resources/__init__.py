"""Resource clients for the gateway REST API."""

from gateway_sdk.resources.customer import CustomerResource

__all__ = ["CustomerResource"]
