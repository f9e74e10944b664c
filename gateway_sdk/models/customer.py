"""Customer aggregate and its payload normalizer."""

from dataclasses import dataclass, field, replace
from typing import Any

from gateway_sdk.models.base import normalize
from gateway_sdk.models.payment_methods import (
    AndroidPayCard,
    ApplePayCard,
    CreditCard,
    PaypalAccount,
    UsBankAccount,
)

ENVELOPE_KEY = "customer"


@dataclass(frozen=True)
class Customer:
    """Customer record as stored in the gateway vault.

    Timestamps are kept as the gateway's strings. ``addresses`` and
    ``coinbase_accounts`` are left as decoded mappings. Records are frozen
    but not hashable; derive changed copies with ``dataclasses.replace``.
    """

    id: str = ""
    company: str = ""
    email: str = ""
    fax: str = ""
    first_name: str = ""
    last_name: str = ""
    phone: str = ""
    website: str = ""
    created_at: str = ""
    updated_at: str = ""
    custom_fields: dict = field(default_factory=dict)
    addresses: list[dict] = field(default_factory=list)
    android_pay_cards: list[AndroidPayCard] = field(default_factory=list)
    apple_pay_cards: list[ApplePayCard] = field(default_factory=list)
    credit_cards: list[CreditCard] = field(default_factory=list)
    coinbase_accounts: list[dict] = field(default_factory=list)
    paypal_accounts: list[PaypalAccount] = field(default_factory=list)
    us_bank_accounts: list[UsBankAccount] = field(default_factory=list)

    __hash__ = None  # list and dict fields

    @property
    def payment_methods(self) -> list[Any]:
        """All typed payment methods, in field order."""
        return [
            method
            for name, _ in PAYMENT_METHOD_FIELDS
            for method in getattr(self, name)
        ]

    @property
    def default_payment_method(self) -> Any | None:
        """The payment method flagged as default, if any."""
        return next((m for m in self.payment_methods if m.default), None)


PAYMENT_METHOD_FIELDS = (
    ("android_pay_cards", AndroidPayCard.new),
    ("apple_pay_cards", ApplePayCard.new),
    ("credit_cards", CreditCard.new),
    ("paypal_accounts", PaypalAccount.new),
    ("us_bank_accounts", UsBankAccount.new),
)


def type_payment_methods(customer: Customer) -> Customer:
    """Return a copy whose payment method lists hold typed records."""
    return replace(
        customer,
        **{name: build(getattr(customer, name)) for name, build in PAYMENT_METHOD_FIELDS},
    )


def new(raw: Any) -> Customer | list[Customer]:
    """Convert a payload into a customer with typed payment methods.

    Parameters
    ----------
    raw : Any
        A customer mapping, the same mapping wrapped as ``{"customer": ...}``,
        or a list of either.

    Returns
    -------
    Customer | list[Customer]
        One customer per payload, mirroring the input's shape.

    Raises
    ------
    MalformedPayloadError
        If ``raw`` is neither a mapping nor a list of mappings.

    Examples
    --------
    >>> customer = new({"company": "Soren", "email": "parker@example.com"})
    >>> customer.company
    'Soren'
    >>> customer.credit_cards
    []
    """
    return normalize(raw, Customer, envelope=ENVELOPE_KEY, post=type_payment_methods)
