"""Typed records built from gateway payloads."""

from gateway_sdk.models.customer import Customer
from gateway_sdk.models.enums import Environment, ErrorKind
from gateway_sdk.models.payment_methods import (
    AndroidPayCard,
    ApplePayCard,
    CreditCard,
    PaypalAccount,
    UsBankAccount,
)
from gateway_sdk.models.result import Err, ErrorResponse, Ok, Result

__all__ = [
    "AndroidPayCard",
    "ApplePayCard",
    "CreditCard",
    "Customer",
    "Environment",
    "Err",
    "ErrorKind",
    "ErrorResponse",
    "Ok",
    "PaypalAccount",
    "Result",
    "UsBankAccount",
]
