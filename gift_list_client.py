"""Gift List API client.

This module defines a small client wrapper around the Gift List REST
API.  It uses the ``requests`` library internally and exposes one
method per route:

* :meth:`GiftListClient.list_gifts` – return every gift item.
* :meth:`GiftListClient.add_gift` – add (or overwrite) a gift item.
* :meth:`GiftListClient.update_gift` – apply a partial update.
* :meth:`GiftListClient.delete_gift` – delete a gift item.
* :meth:`GiftListClient.search` – look up gift ideas.

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is ``None`` (or an empty list) and
``error`` is a dictionary with ``status_code``, ``message`` and, when
the server sent them, validation ``details``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class GiftListClient:
    """Client for interacting with the Gift List API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``
                or ``http://localhost:8000/api/v1``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` contains the parsed JSON
            response on success.  On failure ``error`` describes the
            issue using the server's ``error``/``details`` envelope when
            one is available.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            error: Error = {"status_code": status, "message": ""}
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                except ValueError:
                    error["message"] = exc.response.text
                else:
                    if isinstance(err_json, dict):
                        error["message"] = err_json.get("error") or err_json.get("detail") or ""
                        if "details" in err_json:
                            error["details"] = err_json["details"]
                    else:
                        error["message"] = str(err_json)
            if not error["message"]:
                error["message"] = str(exc)
            logger.error("API request failed (%s): %s", status, error["message"])
            return None, error
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _gift_path(gift_id: str) -> str:
        return f"/gifts/{quote(str(gift_id), safe='')}"

    # ------------------------------------------------------------------
    # Gift list operations
    # ------------------------------------------------------------------
    def list_gifts(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all gift items.  ``gifts`` is empty on failure."""
        data, error = self._request("GET", "/gifts")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def add_gift(
        self, gift_id: str, name: str, gift: str, purchased: bool = False
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Add a gift item, overwriting any item with the same id."""
        payload = {"id": gift_id, "name": name, "gift": gift, "purchased": purchased}
        return self._request("POST", "/gifts", json_body=payload)

    def update_gift(self, gift_id: str, **changes: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Apply ``changes`` (any of ``name``, ``gift``, ``purchased``) to a gift."""
        return self._request("PUT", self._gift_path(gift_id), json_body=changes)

    def mark_purchased(self, gift_id: str, purchased: bool = True) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self.update_gift(gift_id, purchased=purchased)

    def delete_gift(self, gift_id: str) -> Tuple[bool, Optional[Error]]:
        """Delete a gift item.  Returns ``(True, None)`` on success."""
        _, error = self._request("DELETE", self._gift_path(gift_id))
        if error:
            return False, error
        return True, None

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def search(self, query: str) -> Tuple[Optional[Any], Optional[Error]]:
        """Search for gift ideas; returns the upstream ``result`` object."""
        data, error = self._request("GET", f"/search/{quote(query, safe='')}")
        if error:
            return None, error
        if isinstance(data, dict):
            return data.get("result"), None
        return data, None
