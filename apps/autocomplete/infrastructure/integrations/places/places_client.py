"""Places Autocomplete HTTP 클라이언트.

- 자동완성: GET {base_url}?input={query}
- 응답: [{"placeId": ..., "mainText": ..., "secondaryText": ...}, ...]

httpx 예외와 파싱 실패는 모두 PlacesClientError 계열로 변환합니다.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from autocomplete.application.common.exceptions.places import (
    PlacesResponseError,
    PlacesTransportError,
)
from autocomplete.application.ports.places_client import PlaceDTO, PlacesClientPort

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class PlacesHttpClient(PlacesClientPort):
    """장소 자동완성 HTTP 클라이언트."""

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._base_url = base_url
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def autocomplete(self, query: str) -> list[PlaceDTO]:
        """검색어로 장소 후보 조회."""
        client = await self._get_client()

        try:
            response = await client.get(self._base_url, params={"input": query})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.debug(
                "Places API HTTP error",
                extra={"status_code": e.response.status_code, "query": query},
            )
            raise PlacesTransportError(
                f"Places API returned HTTP {e.response.status_code}", query=query
            ) from e
        except httpx.TimeoutException as e:
            logger.debug("Places API timeout", extra={"query": query})
            raise PlacesTransportError("Places API timeout", query=query) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug("Places API request failed", extra={"query": query, "error": str(e)})
            raise PlacesTransportError(f"Places API request failed: {e}", query=query) from e
        except UnicodeError as e:
            # 인코딩할 수 없는 검색어 (예: lone surrogate)
            logger.debug("Places API request URL invalid", extra={"query": query})
            raise PlacesTransportError("Places API request URL is invalid", query=query) from e

        try:
            data = response.json()
        except ValueError as e:
            raise PlacesResponseError("Places API response is not valid JSON", query=query) from e

        return self._parse_response(data, query)

    def _parse_response(self, data: Any, query: str) -> list[PlaceDTO]:
        if not isinstance(data, list):
            raise PlacesResponseError("Places API response is not a JSON array", query=query)

        places: list[PlaceDTO] = []
        for doc in data:
            if not isinstance(doc, dict):
                raise PlacesResponseError("Places API record is not an object", query=query)
            places.append(
                PlaceDTO(
                    place_id=self._optional_str(doc, "placeId", query),
                    main_text=self._optional_str(doc, "mainText", query),
                    secondary_text=self._optional_str(doc, "secondaryText", query),
                )
            )
        return places

    @staticmethod
    def _optional_str(doc: dict[str, Any], key: str, query: str) -> str | None:
        value = doc.get(key)
        if value is not None and not isinstance(value, str):
            raise PlacesResponseError(f"Places API field '{key}' is not a string", query=query)
        return value

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
