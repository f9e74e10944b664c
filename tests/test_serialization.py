"""Tests for shared serialization utilities."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from gateway_sdk.models import Customer, CreditCard, ErrorKind, ErrorResponse
from gateway_sdk.serialization import dataclass_to_dict, serialize_value, to_dict


class _SampleEnum(str, Enum):
    VALUE_A = "VALUE_A"
    VALUE_B = "VALUE_B"


@dataclass
class _SampleData:
    name: str
    amount: Decimal
    created_at: datetime


class TestToDict:
    """Tests for to_dict function."""

    def test_dataclass(self) -> None:
        obj = _SampleData(name="test", amount=Decimal("100.50"), created_at=datetime(2024, 1, 1))
        result = to_dict(obj)
        assert result["name"] == "test"
        assert result["amount"] == "100.50"
        assert result["created_at"] == "2024-01-01T00:00:00"

    def test_dict(self) -> None:
        d = {"key": "value", _SampleEnum.VALUE_A: 1}
        assert to_dict(d) == {"key": "value", "VALUE_A": 1}

    def test_other_type(self) -> None:
        result = to_dict(42)
        assert result == {"value": "42"}


class TestDataclassToDict:
    """Tests for dataclass_to_dict function."""

    def test_nested_records(self) -> None:
        customer = Customer(id="c1", credit_cards=[CreditCard(token="t1")])

        result = dataclass_to_dict(customer)

        assert result["id"] == "c1"
        assert result["credit_cards"][0]["token"] == "t1"
        assert result["paypal_accounts"] == []

    def test_error_response(self) -> None:
        error = ErrorResponse(kind=ErrorKind.NOT_FOUND, status=404)

        result = dataclass_to_dict(error)

        assert result == {
            "kind": "NOT_FOUND",
            "message": "",
            "errors": {},
            "params": {},
            "status": 404,
        }


class TestSerializeValue:
    """Tests for serialize_value function."""

    def test_decimal(self) -> None:
        assert serialize_value(Decimal("99.99")) == "99.99"

    def test_datetime(self) -> None:
        dt = datetime(2024, 6, 15, 10, 30, 0)
        assert serialize_value(dt) == "2024-06-15T10:30:00"

    def test_date(self) -> None:
        d = date(2024, 6, 15)
        assert serialize_value(d) == "2024-06-15"

    def test_enum(self) -> None:
        assert serialize_value(_SampleEnum.VALUE_B) == "VALUE_B"

    def test_nested_dict(self) -> None:
        data = {"amount": Decimal("50.00"), "info": {"date": datetime(2024, 1, 1)}}
        result = serialize_value(data)
        assert result["amount"] == "50.00"
        assert result["info"]["date"] == "2024-01-01T00:00:00"

    def test_tuple_becomes_list(self) -> None:
        assert serialize_value((Decimal("1"), "a")) == ["1", "a"]

    def test_plain_values_unchanged(self) -> None:
        assert serialize_value("text") == "text"
        assert serialize_value(5) == 5
        assert serialize_value(None) is None
