"""User Management API client.

A thin wrapper around the ``/api/users`` REST resource using the
``requests`` library.  Configuration (base URL and timeout) is passed
in explicitly through :class:`ClientConfig`; there is no module-level
client instance.

Every public method returns a ``(result, error)`` tuple.  On success
``error`` is ``None``.  On failure ``result`` is ``None`` (or an empty
list / ``False``) and ``error`` is a dictionary with the keys
``status_code`` and ``message``, where ``message`` is taken from the
server's error body when one is available.

The client exposes:

* :meth:`UserRestClient.create_user`
* :meth:`UserRestClient.get_user_by_id`
* :meth:`UserRestClient.get_all_users`
* :meth:`UserRestClient.update_user`
* :meth:`UserRestClient.delete_user`
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import requests

from user_management_api.app.core.config import Settings, settings as default_settings


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


@dataclass
class ClientConfig:
    """Connection settings for :class:`UserRestClient`.

    Attributes:
        base_url: URL of the users collection, e.g.
            ``http://localhost:8000/api/users``.
        timeout: Per-request timeout in seconds.
    """

    base_url: str = "http://localhost:8000/api/users"
    timeout: float = 15.0

    @classmethod
    def from_settings(cls, app_settings: Optional[Settings] = None) -> "ClientConfig":
        cfg = app_settings or default_settings
        return cls(base_url=cfg.client_base_url, timeout=cfg.client_timeout)


class UserRestClient:
    """Client for the users resource of the User Management API."""

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            config: Base URL and timeout to use for every request.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.config = config
        self.base_url = config.base_url.rstrip("/")
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str = "", *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/5``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` holds the parsed JSON
            response, or ``None`` when the response has no body.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.config.timeout,
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
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _payload(user: Dict[str, Any]) -> Dict[str, Any]:
        """Return the wire representation of ``user`` without its id."""
        return {
            "firstName": user.get("firstName"),
            "lastName": user.get("lastName"),
            "email": user.get("email"),
            "dateOfBirth": user.get("dateOfBirth"),
        }

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def create_user(self, user: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a new user.

        Args:
            user: Mapping with ``firstName``, ``lastName``, ``email`` and
                optionally ``dateOfBirth`` (``YYYY-MM-DD``).  Any ``id``
                is not sent.
        Returns:
            A tuple ``(user, error)`` where ``user`` carries the assigned id.
        """
        return self._request("POST", json_body=self._payload(user))

    def get_user_by_id(self, user_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single user by ID."""
        data, error = self._request("GET", f"/{user_id}")
        if error and error.get("status_code") == 404:
            logger.warning("User not found with ID: %s", user_id)
        return data, error

    def get_all_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all users.

        Returns:
            A tuple ``(users, error)``.  ``users`` is empty on failure.
        """
        data, error = self._request("GET")
        if error:
            return [], error
        return data or [], None

    def update_user(
        self, user_id: int, user: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace all fields of an existing user."""
        return self._request("PUT", f"/{user_id}", json_body=self._payload(user))

    def delete_user(self, user_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete a user.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/{user_id}")
        return error is None, error
