"""Post store API client.

This module defines a small client wrapper around the post store REST
API.  The client uses the ``requests`` library internally to make HTTP
calls and exposes one method per route:

* :meth:`list_posts` – return every post.
* :meth:`list_posts_by_category` – return the posts of one category.
* :meth:`get_post` – fetch a single post by its identifier.
* :meth:`create_post` – create a post.
* :meth:`add_comment` – append a comment to a post.
* :meth:`update_post` – partially update a post.
* :meth:`delete_post` – delete a post.

Every method returns a ``(result, error)`` tuple.  On success ``error``
is ``None``.  On failure ``error`` is a dictionary with the keys
``status_code`` (``None`` for network errors) and ``message``, taken
from the ``message`` field the service answers with.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class PostStoreAPI:
    """Client for interacting with the post store API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: URL the ``/posts`` routes are mounted under, e.g.
                ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/posts/``).
            json_body: JSON body to send with the request (for POST/PATCH).
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success (``None`` for empty bodies) and
            ``error`` is ``None``. On failure, ``data`` is ``None``.
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
    def _post_path(post_id: Any, suffix: str = "") -> str:
        return f"/posts/{quote(str(post_id), safe='')}{suffix}"

    # ------------------------------------------------------------------
    # Post operations
    # ------------------------------------------------------------------
    def list_posts(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve all posts.

        Returns:
            A tuple ``(posts, error)``. ``posts`` is empty on failure.
        """
        data, error = self._request("GET", "/posts/")
        if error:
            return [], error
        return data or [], None

    def list_posts_by_category(self, category: str) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve the posts of one category (exact, case-sensitive match)."""
        data, error = self._request("GET", f"/posts/category/{quote(category, safe='')}")
        if error:
            return [], error
        return data or [], None

    def get_post(self, post_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve a single post by ID."""
        return self._request("GET", self._post_path(post_id))

    def create_post(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Create a post.

        Args:
            payload: Post fields: ``title``, ``image``, ``description``,
                ``category`` and ``comments``.
        Returns:
            A tuple ``(post, error)`` where ``post`` includes the new ``id``.
        """
        return self._request("POST", "/posts/", json_body=payload)

    def add_comment(
        self, post_id: Any, author: str, content: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Append a comment to a post.

        Returns:
            A tuple ``(comment, error)``.
        """
        payload = {"author": author, "content": content}
        return self._request("POST", self._post_path(post_id, "/comments"), json_body=payload)

    def update_post(
        self, post_id: Any, changes: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Partially update a post.

        Falsy values in ``changes`` are ignored by the service.
        """
        return self._request("PATCH", self._post_path(post_id), json_body=changes)

    def delete_post(self, post_id: Any) -> Tuple[bool, Optional[ApiError]]:
        """Delete a post.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", self._post_path(post_id))
        if error:
            return False, error
        return True, None
