"""HTTP access to the clinic REST backend."""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class BackendUnavailableError(RuntimeError):
    """Raised when a backend request fails or returns an unusable response."""

    def __init__(self, method: str, path: str, reason: str, *, status_code: int | None = None) -> None:
        super().__init__(f"{method} {path} failed: {reason}")
        self.method = method
        self.path = path
        self.status_code = status_code


class BackendClient:
    """Thin JSON client bound to one backend base URL."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    def get(self, path: str, *, params: dict[str, str] | None = None) -> Any:
        return self._request("GET", path, params=params or None)

    def post(self, path: str, *, json: Any = None, data: Any = None, files: Any = None) -> Any:
        return self._request("POST", path, json=json, data=data, files=files)

    def put(self, path: str, *, json: Any = None) -> Any:
        return self._request("PUT", path, json=json)

    def delete(self, path: str) -> Any:
        return self._request("DELETE", path)

    def get_bytes(self, path: str, *, params: dict[str, str] | None = None) -> bytes:
        response = self._send("GET", path, params=params or None)
        return response.content

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        response = self._send(method, path, **kwargs)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise BackendUnavailableError(
                method, path, "response body is not valid JSON", status_code=response.status_code
            ) from exc

    def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        request_kwargs = {key: value for key, value in kwargs.items() if value is not None}
        try:
            response = self._client.request(method, path, **request_kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise BackendUnavailableError(
                method, path, f"status {exc.response.status_code}", status_code=exc.response.status_code
            ) from exc
        except httpx.HTTPError as exc:
            raise BackendUnavailableError(method, path, str(exc) or type(exc).__name__) from exc
        logger.debug("%s %s -> %s", method, path, response.status_code)
        return response


__all__ = ["BackendClient", "BackendUnavailableError"]
