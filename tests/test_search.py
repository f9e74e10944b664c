"""Tests for the advanced search pipeline."""

from unittest.mock import MagicMock, call

from gateway_sdk.models import customer as customer_model
from gateway_sdk.models.customer import Customer
from gateway_sdk.models.enums import ErrorKind
from gateway_sdk.models.result import Err, ErrorResponse, Ok
from gateway_sdk.search import perform

CRITERIA = {"first_name": {"is": "Jenna"}}


class TestPerform:
    """Tests for perform."""

    def test_two_step_search(self, mock_client: MagicMock) -> None:
        mock_client.post.side_effect = [
            Ok({"search_results": {"ids": ["a", "b"], "page_size": 50}}),
            Ok({"customers": [{"id": "a", "first_name": "Jenna"}, {"id": "b", "first_name": "Jenna"}]}),
        ]

        result = perform(CRITERIA, "customers", customer_model.new, mock_client)

        assert result == Ok([Customer(id="a", first_name="Jenna"), Customer(id="b", first_name="Jenna")])
        assert mock_client.post.call_args_list == [
            call("customers/advanced_search_ids", {"search": CRITERIA}),
            call("customers/advanced_search", {"search": {"ids": ["a", "b"]}}),
        ]

    def test_opts_forwarded(self, mock_client: MagicMock) -> None:
        mock_client.post.side_effect = [
            Ok({"search_results": {"ids": ["a"]}}),
            Ok({"customers": [{"id": "a"}]}),
        ]

        perform(CRITERIA, "customers", customer_model.new, mock_client, environment="qa")

        for made in mock_client.post.call_args_list:
            assert made.kwargs == {"environment": "qa"}

    def test_no_matches(self, mock_client: MagicMock) -> None:
        mock_client.post.return_value = Ok({"search_results": {"ids": []}})

        result = perform(CRITERIA, "customers", customer_model.new, mock_client)

        assert isinstance(result, Err)
        assert result.error.kind is ErrorKind.NOT_FOUND
        assert mock_client.post.call_count == 1

    def test_unexpected_ids_payload(self, mock_client: MagicMock) -> None:
        mock_client.post.return_value = Ok({"search_results": "nope"})

        result = perform(CRITERIA, "customers", customer_model.new, mock_client)

        assert result.error.kind is ErrorKind.NOT_FOUND

    def test_id_request_error_propagated(self, mock_client: MagicMock) -> None:
        error = Err(ErrorResponse(kind=ErrorKind.UNAUTHORIZED, status=401))
        mock_client.post.return_value = error

        assert perform(CRITERIA, "customers", customer_model.new, mock_client) is error

    def test_fetch_error_propagated(self, mock_client: MagicMock) -> None:
        error = Err(ErrorResponse(kind=ErrorKind.SERVER_ERROR, status=500))
        mock_client.post.side_effect = [Ok({"search_results": {"ids": ["a"]}}), error]

        assert perform(CRITERIA, "customers", customer_model.new, mock_client) is error

    def test_missing_collection_key(self, mock_client: MagicMock) -> None:
        mock_client.post.side_effect = [Ok({"search_results": {"ids": ["a"]}}), Ok({})]

        result = perform(CRITERIA, "customers", customer_model.new, mock_client)

        assert result == Ok([])

    def test_records_nested_under_envelope(self, mock_client: MagicMock) -> None:
        mock_client.post.side_effect = [
            Ok({"search_results": {"ids": ["a", "b"]}}),
            Ok({"customers": {"customer": [{"id": "a"}, {"id": "b"}]}}),
        ]

        result = perform(CRITERIA, "customers", customer_model.new, mock_client)

        assert result == Ok([Customer(id="a"), Customer(id="b")])
