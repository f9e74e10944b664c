"""Pytest configuration and fixtures."""

from typing import Any, Callable
from unittest.mock import MagicMock

import pytest
from faker import Faker

from gateway_sdk.config import GatewayConfig
from gateway_sdk.http import HTTPClient


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def fake(seed: int) -> Faker:
    """Seeded Faker instance."""
    faker = Faker("en_US")
    faker.seed_instance(seed)
    return faker


@pytest.fixture
def sample_customer_id() -> str:
    """Sample customer ID."""
    return "cust-test-001"


@pytest.fixture
def gateway_config() -> GatewayConfig:
    """Sandbox config with dummy credentials."""
    return GatewayConfig(
        merchant_id="merchant-test",
        public_key="public-test",
        private_key="private-test",
    )


@pytest.fixture
def customer_payload(fake: Faker, sample_customer_id: str) -> Callable[..., dict[str, Any]]:
    """Factory for decoded customer payloads as the gateway returns them."""

    def _make(**overrides: Any) -> dict[str, Any]:
        payload = {
            "id": sample_customer_id,
            "company": fake.company(),
            "email": fake.email(),
            "fax": fake.phone_number(),
            "first_name": fake.first_name(),
            "last_name": fake.last_name(),
            "phone": fake.phone_number(),
            "website": fake.url(),
            "created_at": "2024-03-01T12:00:00Z",
            "updated_at": "2024-03-02T08:30:00Z",
            "custom_fields": {},
            "addresses": [],
            "credit_cards": [],
            "paypal_accounts": [],
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def credit_card_payload(fake: Faker, sample_customer_id: str) -> Callable[..., dict[str, Any]]:
    """Factory for decoded credit card payloads."""

    def _make(**overrides: Any) -> dict[str, Any]:
        last_4 = fake.numerify("####")
        payload = {
            "token": fake.bothify("??##??").lower(),
            "bin": "411111",
            "card_type": "Visa",
            "cardholder_name": fake.name(),
            "last_4": last_4,
            "masked_number": f"411111******{last_4}",
            "expiration_month": "12",
            "expiration_year": "2030",
            "customer_id": sample_customer_id,
            "default": True,
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def mock_client(gateway_config: GatewayConfig) -> MagicMock:
    """Transport double; set ``get/post/put/delete.return_value`` per test."""
    client = MagicMock(spec=HTTPClient)
    client.config = gateway_config
    return client
