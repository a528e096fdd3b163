from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests
from requests import Response

from ..errors import UpstreamError


logger = logging.getLogger(__name__)


@dataclass
class RequestConfig:
    # None keeps the transport default; no retries are ever attempted.
    timeout: Optional[float] = None


class HttpProvider:
    """Base class for providers that issue a single GET per call."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(self.__class__.__name__)

    def _handle_response(self, response: Response) -> Response:
        if response.status_code != 200:
            self._log.error("Provider returned %s: %s", response.status_code, response.text)
            raise UpstreamError(response.status_code, response.text)
        return response

    def _get(self, url: str, params: dict) -> Response:
        try:
            response = self.session.get(url, params=params, timeout=self.request_config.timeout)
        except requests.RequestException as exc:
            self._log.error("Request failed", exc_info=exc)
            raise UpstreamError(None, "", message=f"Weather request failed: {exc}") from exc
        return self._handle_response(response)

    def _json(self, response: Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise UpstreamError(response.status_code, response.text) from exc


__all__ = ["HttpProvider", "RequestConfig"]
