"""Payment method records attached to a customer.

Each record type exposes ``new(raw_list)``, which turns the raw list found in
a customer payload into typed records. Nested structures (billing address,
subscriptions, verifications) stay as the decoded mappings.
"""

from dataclasses import dataclass, field
from typing import Any

from gateway_sdk.models.base import normalize_list


@dataclass(frozen=True)
class AndroidPayCard:
    """Google Pay (formerly Android Pay) card."""

    token: str = ""
    bin: str = ""
    card_type: str = ""
    source_card_type: str = ""
    source_card_last_4: str = ""
    source_description: str = ""
    virtual_card_type: str = ""
    virtual_card_last_4: str = ""
    expiration_month: str = ""
    expiration_year: str = ""
    google_transaction_id: str = ""
    image_url: str = ""
    customer_id: str = ""
    default: bool = False
    is_network_tokenized: bool = False
    created_at: str = ""
    updated_at: str = ""
    subscriptions: list[dict] = field(default_factory=list)

    __hash__ = None  # list and dict fields

    @classmethod
    def new(cls, raw: Any) -> list["AndroidPayCard"]:
        """Convert a raw list of payloads into cards."""
        return normalize_list(raw, cls)


@dataclass(frozen=True)
class ApplePayCard:
    """Apple Pay card."""

    token: str = ""
    bin: str = ""
    card_type: str = ""
    cardholder_name: str = ""
    payment_instrument_name: str = ""
    source_description: str = ""
    last_4: str = ""
    expiration_month: str = ""
    expiration_year: str = ""
    expired: bool = False
    image_url: str = ""
    customer_id: str = ""
    default: bool = False
    created_at: str = ""
    updated_at: str = ""
    subscriptions: list[dict] = field(default_factory=list)

    __hash__ = None  # list and dict fields

    @classmethod
    def new(cls, raw: Any) -> list["ApplePayCard"]:
        """Convert a raw list of payloads into cards."""
        return normalize_list(raw, cls)


@dataclass(frozen=True)
class CreditCard:
    """Vaulted credit or debit card.

    The boolean-looking card attributes (``debit``, ``prepaid``, ...) are the
    gateway's tri-state strings ``"Yes"``, ``"No"`` or ``"Unknown"``.
    """

    token: str = ""
    bin: str = ""
    card_type: str = ""
    cardholder_name: str = ""
    last_4: str = ""
    number_masked: str = ""
    masked_number: str = ""
    expiration_month: str = ""
    expiration_year: str = ""
    expired: bool = False
    country_of_issuance: str = ""
    issuing_bank: str = ""
    unique_number_identifier: str = ""
    image_url: str = ""
    customer_id: str = ""
    customer_location: str = ""
    debit: str = ""
    prepaid: str = ""
    commercial: str = ""
    payroll: str = ""
    healthcare: str = ""
    durbin_regulated: str = ""
    product_id: str = ""
    default: bool = False
    venmo_sdk: bool = False
    billing_address: dict = field(default_factory=dict)
    created_at: str = ""
    updated_at: str = ""
    subscriptions: list[dict] = field(default_factory=list)
    verifications: list[dict] = field(default_factory=list)

    __hash__ = None  # list and dict fields

    @classmethod
    def new(cls, raw: Any) -> list["CreditCard"]:
        """Convert a raw list of payloads into cards."""
        return normalize_list(raw, cls)


@dataclass(frozen=True)
class PaypalAccount:
    """Vaulted PayPal account."""

    token: str = ""
    email: str = ""
    billing_agreement_id: str = ""
    image_url: str = ""
    payer_id: str = ""
    customer_id: str = ""
    default: bool = False
    is_channel_initiated: bool = False
    created_at: str = ""
    updated_at: str = ""
    subscriptions: list[dict] = field(default_factory=list)

    __hash__ = None  # list and dict fields

    @classmethod
    def new(cls, raw: Any) -> list["PaypalAccount"]:
        """Convert a raw list of payloads into accounts."""
        return normalize_list(raw, cls)


@dataclass(frozen=True)
class UsBankAccount:
    """ACH-enabled US bank account."""

    token: str = ""
    account_holder_name: str = ""
    account_type: str = ""  # checking, savings
    bank_name: str = ""
    last_4: str = ""
    routing_number: str = ""
    ownership_type: str = ""  # personal, business
    verified: bool = False
    image_url: str = ""
    customer_id: str = ""
    default: bool = False
    ach_mandate: dict = field(default_factory=dict)
    verifications: list[dict] = field(default_factory=list)
    created_at: str = ""
    updated_at: str = ""

    __hash__ = None  # list and dict fields

    @classmethod
    def new(cls, raw: Any) -> list["UsBankAccount"]:
        """Convert a raw list of payloads into accounts."""
        return normalize_list(raw, cls)
