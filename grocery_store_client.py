"""Grocery store API client.

A small wrapper around the customer endpoints of the Grocery Store
API, built on the ``requests`` library.  Every operation returns a
``(data, error)`` tuple instead of raising: ``error`` is ``None`` on
success and otherwise a dictionary with ``status_code`` and
``message`` keys, where ``message`` carries the server's ``detail``
when one was sent.

* :meth:`list_customers` – return every stored customer.
* :meth:`get_customer` – fetch a single customer by identifier.
* :meth:`create_customer` – add a customer.
* :meth:`update_customer` – rename an existing customer.

The server answers the list route with HTTP 404 when the store is
empty; the client reports that case as an empty list without an
error.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)


class GroceryStoreAPI:
    """Client for the customer endpoints."""

    customers_path = "/api/v1/customers"

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            api_key: Optional token sent as ``Authorization: Bearer <api_key>``
                for deployments behind an authenticating proxy.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success (``None`` for empty bodies) and
            ``error`` is ``None``. On failure, ``data`` is ``None`` and
            ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Customer operations
    # ------------------------------------------------------------------
    def list_customers(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all customers.

        Returns:
            A tuple ``(customers, error)``. ``customers`` is empty when
            the store is empty or the request failed.
        """
        data, error = self._request("GET", f"{self.customers_path}/")
        if error:
            if error["status_code"] == 404:
                return [], None
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def get_customer(self, customer_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve a single customer by ID."""
        return self._request("GET", f"{self.customers_path}/{customer_id}")

    def create_customer(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Create a customer from ``payload`` (``{"id": ..., "name": ...}``)."""
        return self._request("POST", f"{self.customers_path}/", json_body=payload)

    def update_customer(self, customer_id: int, payload: Dict[str, Any]) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Rename a customer.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("PUT", f"{self.customers_path}/{customer_id}", json_body=payload)
        if error:
            return False, error
        return True, None
