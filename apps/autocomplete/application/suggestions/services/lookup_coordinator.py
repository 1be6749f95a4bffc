"""Lookup Coordinator.

location 입력 변경 시 동작 결정:
1. 최소 길이 미만 → 목록 비우기, 네트워크 호출 없음
2. 캐시 히트 → 캐시된 목록을 즉시 전달
3. 캐시 미스 → 비동기 조회 후 캐시 저장 + 전달 (실패 시 아무것도 하지 않음)

모든 캐시 변경과 전달은 같은 이벤트 루프에서 일어나므로 락이 필요 없습니다.
겹치는 조회는 취소/중복 제거 없이 각자 완료되며, 마지막으로 도착한 응답이
화면 목록을 결정합니다. discard_stale_responses=True면 최신 요청보다 먼저
보낸 요청의 응답은 캐시에만 저장하고 화면에는 전달하지 않습니다.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Callable

from autocomplete.application.common.exceptions.places import PlacesClientError
from autocomplete.application.suggestions.dto import LookupResult

if TYPE_CHECKING:
    from autocomplete.application.ports.places_client import PlacesClientPort
    from autocomplete.application.suggestions.services.suggestion_cache import (
        SuggestionCache,
    )

logger = logging.getLogger(__name__)

DEFAULT_MIN_QUERY_LENGTH = 3

DisplayCallback = Callable[[list[str]], None]


class LookupCoordinator:
    """자동완성 조회 코디네이터."""

    def __init__(
        self,
        cache: "SuggestionCache",
        places_client: "PlacesClientPort",
        on_suggestions_ready: DisplayCallback,
        min_query_length: int = DEFAULT_MIN_QUERY_LENGTH,
        discard_stale_responses: bool = False,
    ) -> None:
        self._cache = cache
        self._places = places_client
        self._on_suggestions_ready = on_suggestions_ready
        self._min_query_length = min_query_length
        self._discard_stale = discard_stale_responses
        self._pending: set[asyncio.Task[LookupResult]] = set()
        self._latest_token = 0

    @property
    def pending(self) -> set[asyncio.Task[LookupResult]]:
        """진행 중인 조회 태스크."""
        return set(self._pending)

    def on_input_changed(self, current_text: str) -> asyncio.Task[LookupResult] | None:
        """입력 변경 이벤트를 처리합니다.

        실행 중인 이벤트 루프 안에서 호출해야 합니다.

        Returns:
            원격 조회를 시작했으면 해당 태스크, 아니면 None
        """
        if len(current_text) < self._min_query_length:
            self._on_suggestions_ready([])
            return None

        cached = self._cache.get(current_text)
        if cached is not None:
            logger.debug("Suggestion cache hit", extra={"query": current_text})
            self._on_suggestions_ready(cached)
            return None

        self._latest_token += 1
        task = asyncio.create_task(self._lookup_and_deliver(current_text, self._latest_token))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def lookup(self, query: str) -> LookupResult:
        """원격 API로 조회해 main_text가 있는 레코드만 순서대로 반환합니다."""
        try:
            places = await self._places.autocomplete(query)
        except PlacesClientError as e:
            return LookupResult.failure(query, e.message)

        suggestions = [place.main_text for place in places if place.main_text is not None]
        return LookupResult.success(query, suggestions)

    async def _lookup_and_deliver(self, query: str, token: int) -> LookupResult:
        result = await self.lookup(query)

        if not result.ok:
            logger.warning(
                "Suggestion lookup failed",
                extra={"query": query, "reason": result.error},
            )
            return result

        self._cache.put(query, result.suggestions)

        if self._discard_stale and token < self._latest_token:
            logger.debug(
                "Stale suggestion response not displayed",
                extra={"query": query, "token": token, "latest_token": self._latest_token},
            )
            return result

        logger.info(
            "Suggestion lookup completed",
            extra={"query": query, "results_count": len(result.suggestions)},
        )
        self._on_suggestions_ready(result.suggestions)
        return result

    async def aclose(self) -> None:
        """진행 중인 조회를 취소합니다."""
        tasks = list(self._pending)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._pending.clear()
