"""Hotel Reviews API client.

A thin wrapper around the REST API served by ``hotel_reviews_api``.  It
uses the ``requests`` library and exposes one method per endpoint:

* :meth:`login` – upsert a profile and store the returned access token.
* :meth:`current_user` – fetch the authenticated user.
* :meth:`list_hotels` / :meth:`get_hotel` / :meth:`create_hotel`.
* :meth:`top_reviews` / :meth:`create_review`.
* :meth:`top_destinations`.

Every method returns a ``(data, error)`` tuple.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with ``status_code`` and ``message`` keys.  Methods never raise for
HTTP or network errors.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class HotelReviewsAPI:
    """Client for interacting with the hotel reviews API.

    Payload dictionaries use the API's camelCase keys (``videoUrl``,
    ``hotelId``) and results are returned exactly as decoded from the
    JSON response.
    """

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
            base_url: Base URL of the versioned API, e.g.
                ``https://example.com/api/v1``.
            api_key: Optional bearer token sent in the ``Authorization``
                header.  :meth:`login` sets it automatically.
            session: Optional requests session.  Anything with a
                compatible ``request`` method works, which lets tests
                pass a FastAPI ``TestClient``.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns a tuple ``(data, error)`` where ``data`` is the parsed
        JSON body on success.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method,
                url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            try:
                err_json = response.json()
                message = err_json.get("detail") or err_json.get("message") or str(err_json)
            except ValueError:
                message = response.text
            if not isinstance(message, str):
                message = str(message)
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}
        if not response.content:
            return None, None
        try:
            return response.json(), None
        except ValueError:
            logger.error("API returned a non-JSON body (%s)", response.status_code)
            return None, {
                "status_code": response.status_code,
                "message": f"Invalid JSON response: {response.text[:200]}",
            }

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------
    def login(self, profile: Dict[str, Any]) -> Tuple[Optional[str], Optional[Error]]:
        """Upsert ``profile`` and keep the returned token for later calls.

        Args:
            profile: User profile; ``id`` is required.
        Returns:
            A tuple ``(token, error)``.
        """
        data, error = self._request("POST", "/auth/token", json_body=profile)
        if error:
            return None, error
        self.api_key = data["access_token"]
        return self.api_key, None

    def current_user(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/auth/user")

    # ------------------------------------------------------------------
    # Hotels
    # ------------------------------------------------------------------
    def list_hotels(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all hotels with their reviews and average rating."""
        data, error = self._request("GET", "/hotels")
        if error:
            return [], error
        return data or [], None

    def get_hotel(self, hotel_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/hotels/{hotel_id}")

    def create_hotel(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a hotel, or get the existing one with the same name and location.

        Args:
            payload: ``name``, ``location``, ``latitude`` and ``longitude``.
        """
        return self._request("POST", "/hotels", json_body=payload)

    # ------------------------------------------------------------------
    # Reviews
    # ------------------------------------------------------------------
    def top_reviews(self, limit: int = 10) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/reviews/top", params={"limit": limit})
        if error:
            return [], error
        return data or [], None

    def create_review(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Submit a review as the logged‑in user.

        Args:
            payload: ``hotelId``, ``rating``, ``comment`` and ``videoUrl``.
        """
        return self._request("POST", "/reviews", json_body=payload)

    # ------------------------------------------------------------------
    # Destinations
    # ------------------------------------------------------------------
    def top_destinations(self, limit: int = 10) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/destinations/top", params={"limit": limit})
        if error:
            return [], error
        return data or [], None
