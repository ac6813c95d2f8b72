"""Marketplace API client.

A thin wrapper around the REST API served by ``marketplace_api``.  It
uses the ``requests`` library and exposes high‑level methods for the
operations a bot or another service typically needs:

* :meth:`list_jobs`, :meth:`get_job`, :meth:`post_job`,
  :meth:`apply_for_job` – browse and post jobs.
* :meth:`list_marketplace` – browse goods for sale.
* :meth:`list_events`, :meth:`buy_ticket` – events and tickets.
* :meth:`deposit`, :meth:`withdraw` – wallet movements.
* :meth:`get_notifications` – a user's notifications.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dict with
``status_code`` and ``message`` keys, the message being taken from the
``detail`` field of the error response.

Authentication via an API key is optional: when set, it is sent as
``Authorization: Bearer <api_key>``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class MarketplaceAPI:
    """Client for the marketplace REST API."""

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
            base_url: Base URL of the API including the ``/api`` prefix,
                e.g. ``http://localhost:5000/api``.
            api_key: Optional bearer token sent with every request.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/jobs``).
            params: Query parameters; ``None`` values are dropped.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        if params:
            params = {key: value for key, value in params.items() if value is not None}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params or None,
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

    def _list(self, path: str, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    # ------------------------------------------------------------------
    # Jobs
    # ------------------------------------------------------------------
    def list_jobs(
        self, *, category: Optional[str] = None, location: Optional[str] = None, search: Optional[str] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Active jobs, newest first, optionally filtered."""
        return self._list("/jobs", {"category": category, "location": location, "search": search})

    def get_job(self, job_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/jobs/{job_id}")

    def post_job(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/jobs", json_body=payload)

    def apply_for_job(
        self, job_id: int, user_id: int, message: Optional[str] = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request(
            "POST", f"/jobs/{job_id}/applications", json_body={"userId": user_id, "message": message}
        )

    # ------------------------------------------------------------------
    # Marketplace
    # ------------------------------------------------------------------
    def list_marketplace(
        self, *, category: Optional[str] = None, location: Optional[str] = None, search: Optional[str] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/marketplace", {"category": category, "location": location, "search": search})

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def list_events(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Active events, soonest first."""
        return self._list("/events")

    def buy_ticket(self, event_id: int, user_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", f"/events/{event_id}/tickets", json_body={"userId": user_id})

    # ------------------------------------------------------------------
    # Wallet and notifications
    # ------------------------------------------------------------------
    def deposit(self, user_id: int, amount: float, method: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request(
            "POST", f"/users/{user_id}/wallet/deposit", json_body={"amount": amount, "method": method}
        )

    def withdraw(self, user_id: int, amount: float, method: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request(
            "POST", f"/users/{user_id}/wallet/withdraw", json_body={"amount": amount, "method": method}
        )

    def get_notifications(self, user_id: int) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(f"/users/{user_id}/notifications")
