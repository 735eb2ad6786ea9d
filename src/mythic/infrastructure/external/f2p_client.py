"""Client for the public FreeToGame API (https://www.freetogame.com/api)."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from mythic.domain.exceptions import NotFoundError, UpstreamError

logger = logging.getLogger(__name__)


class FreeToGameClient:
    """Thin synchronous wrapper; every call is bounded by ``timeout``."""

    def __init__(
        self,
        api_base: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.api_base = api_base.rstrip("/")
        self._client = httpx.Client(
            base_url=self.api_base,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def list_games(self) -> list[dict[str, Any]]:
        return self._get("/games")

    def get_game(self, game_id: str) -> dict[str, Any]:
        return self._get("/game", params={"id": game_id})

    def close(self) -> None:
        self._client.close()

    def _get(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        try:
            response = self._client.get(endpoint, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.TimeoutException as exc:
            logger.warning("FreeToGame request %s timed out", endpoint)
            raise UpstreamError("The games service did not answer in time") from exc
        except httpx.HTTPStatusError as exc:
            if exc.response.status_code == 404:
                raise NotFoundError("Game not found") from exc
            logger.warning(
                "FreeToGame request %s failed with HTTP %s", endpoint, exc.response.status_code
            )
            raise UpstreamError(
                f"The games service answered with HTTP {exc.response.status_code}"
            ) from exc
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("FreeToGame request %s failed: %s", endpoint, exc)
            raise UpstreamError("The games service is unavailable") from exc
