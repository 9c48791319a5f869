"""Tests for the requests-based GroceryStoreAPI client."""

from unittest.mock import MagicMock

import pytest
import requests

from grocery_store_client import GroceryStoreAPI


def _response(status_code: int, json_data=None, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.content = b"" if json_data is None and not text else b"x"
    response.text = text
    if json_data is None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = json_data
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    return response


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(session: MagicMock) -> GroceryStoreAPI:
    return GroceryStoreAPI(base_url="http://store.test/", session=session)


class TestGroceryStoreAPI:
    """Tests for GroceryStoreAPI."""

    def test_base_url_trailing_slash_stripped(self, api: GroceryStoreAPI) -> None:
        assert api.base_url == "http://store.test"

    def test_list_customers(self, api: GroceryStoreAPI, session: MagicMock) -> None:
        session.request.return_value = _response(200, [{"id": 1, "name": "Alice"}])

        customers, error = api.list_customers()

        assert customers == [{"id": 1, "name": "Alice"}]
        assert error is None
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["url"] == "http://store.test/api/v1/customers/"

    def test_list_customers_empty_store(self, api: GroceryStoreAPI, session: MagicMock) -> None:
        session.request.return_value = _response(404, {"detail": "Customer not found"})

        assert api.list_customers() == ([], None)

    def test_list_customers_server_error(self, api: GroceryStoreAPI, session: MagicMock) -> None:
        session.request.return_value = _response(500, text="boom")

        customers, error = api.list_customers()

        assert customers == []
        assert error == {"status_code": 500, "message": "boom"}

    def test_get_customer_not_found(self, api: GroceryStoreAPI, session: MagicMock) -> None:
        session.request.return_value = _response(404, {"detail": "Customer not found"})

        customer, error = api.get_customer(9)

        assert customer is None
        assert error == {"status_code": 404, "message": "Customer not found"}
        assert session.request.call_args.kwargs["url"] == "http://store.test/api/v1/customers/9"

    def test_create_customer(self, api: GroceryStoreAPI, session: MagicMock) -> None:
        session.request.return_value = _response(201, {"id": 2, "name": "Bob"})

        customer, error = api.create_customer({"id": 2, "name": "Bob"})

        assert customer == {"id": 2, "name": "Bob"}
        assert error is None
        assert session.request.call_args.kwargs["json"] == {"id": 2, "name": "Bob"}

    def test_create_customer_bad_request(self, api: GroceryStoreAPI, session: MagicMock) -> None:
        session.request.return_value = _response(400, {"detail": "Invalid model object"})

        customer, error = api.create_customer({"id": 2})

        assert customer is None
        assert error["status_code"] == 400
        assert error["message"] == "Invalid model object"

    def test_update_customer(self, api: GroceryStoreAPI, session: MagicMock) -> None:
        session.request.return_value = _response(204)

        assert api.update_customer(1, {"id": 1, "name": "Alicia"}) == (True, None)
        assert session.request.call_args.kwargs["method"] == "PUT"

    def test_update_customer_missing(self, api: GroceryStoreAPI, session: MagicMock) -> None:
        session.request.return_value = _response(404, {"detail": "Customer not found"})

        success, error = api.update_customer(5, {"id": 5, "name": "X"})

        assert success is False
        assert error["status_code"] == 404

    def test_connection_error(self, api: GroceryStoreAPI, session: MagicMock) -> None:
        session.request.side_effect = requests.ConnectionError("refused")

        customer, error = api.get_customer(1)

        assert customer is None
        assert error["status_code"] is None
        assert "refused" in error["message"]

    def test_api_key_header(self, session: MagicMock) -> None:
        session.request.return_value = _response(200, [])
        api = GroceryStoreAPI(base_url="http://store.test", api_key="secret", session=session)

        api.list_customers()

        assert session.request.call_args.kwargs["headers"] == {"Authorization": "Bearer secret"}
