"""Sleeper API client with minimal GET support."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import requests

logger = logging.getLogger(__name__)


class SleeperApiError(RuntimeError):
    """Raised for Sleeper API request failures."""


@dataclass(frozen=True)
class SleeperClient:
    base_url: str = "https://api.sleeper.app/v1/"
    timeout_seconds: int = 10

    def url_for(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    def get_json(
        self, path: str, params: Optional[Mapping[str, Any]] = None
    ) -> Any:
        url = self.url_for(path)
        logger.debug("GET %s params=%s", url, params)
        try:
            response = requests.get(
                url,
                params=params,
                headers={"User-Agent": "allplay-standings"},
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else "?"
            error_body = exc.response.text if exc.response is not None else ""
            raise SleeperApiError(
                f"HTTP {status} for {url}: {error_body or exc}"
            ) from exc
        except requests.RequestException as exc:
            raise SleeperApiError(f"Request failed for {url}: {exc}") from exc

        if not response.text:
            raise SleeperApiError(f"Empty response for {response.url}")

        try:
            return response.json()
        except (json.JSONDecodeError, ValueError) as exc:
            raise SleeperApiError(f"Invalid JSON from {response.url}") from exc
