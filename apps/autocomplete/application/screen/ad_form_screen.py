"""Ad Form Screen.

광고 등록 화면 한 개의 세션 상태:
- 입력 필드 4종 (AdForm)
- 세션 전용 SuggestionCache + LookupCoordinator
- 현재 표시 중인 제안 목록
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from autocomplete.application.common.exceptions.screen import (
    SuggestionIndexError,
    UnknownFieldError,
)
from autocomplete.application.suggestions.dto import LookupResult
from autocomplete.application.suggestions.services import (
    LookupCoordinator,
    SuggestionCache,
)
from autocomplete.application.suggestions.services.lookup_coordinator import (
    DEFAULT_MIN_QUERY_LENGTH,
)
from autocomplete.domain.entities.ad_form import FORM_FIELDS, AdForm
from autocomplete.domain.services.ad_form_validator import AdFormValidator

if TYPE_CHECKING:
    from autocomplete.application.ports.places_client import PlacesClientPort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmitResult:
    """제출 성공 결과."""

    payload: dict[str, str]
    json_text: str


class AdFormScreen:
    """광고 등록 화면."""

    def __init__(
        self,
        places_client: "PlacesClientPort",
        min_query_length: int = DEFAULT_MIN_QUERY_LENGTH,
        cache_max_entries: int | None = None,
        discard_stale_responses: bool = False,
    ) -> None:
        self._form = AdForm()
        self._cache = SuggestionCache(max_entries=cache_max_entries)
        self._displayed: list[str] = []
        self._coordinator = LookupCoordinator(
            cache=self._cache,
            places_client=places_client,
            on_suggestions_ready=self._show_suggestions,
            min_query_length=min_query_length,
            discard_stale_responses=discard_stale_responses,
        )
        self._validator = AdFormValidator(self._cache)

    @property
    def form(self) -> AdForm:
        return self._form

    @property
    def coordinator(self) -> LookupCoordinator:
        return self._coordinator

    @property
    def displayed_suggestions(self) -> list[str]:
        return list(self._displayed)

    def _show_suggestions(self, suggestions: list[str]) -> None:
        self._displayed = list(suggestions)

    def set_field(self, name: str, value: str) -> asyncio.Task[LookupResult] | None:
        """필드 값을 설정합니다. location이면 자동완성 흐름을 시작합니다."""
        if name not in FORM_FIELDS:
            raise UnknownFieldError(field=name, allowed=list(FORM_FIELDS))

        setattr(self._form, name, value)
        if name == "location":
            return self._coordinator.on_input_changed(value)
        return None

    def select_suggestion(self, index: int) -> str:
        """표시 중인 제안을 선택해 location에 반영합니다.

        프로그램적으로 값을 넣는 것이므로 새 조회는 일으키지 않습니다.
        """
        if not 0 <= index < len(self._displayed):
            raise SuggestionIndexError(index=index, size=len(self._displayed))

        selected = self._displayed[index]
        self._form.location = selected
        return selected

    def submit(self) -> SubmitResult:
        """검증 후 JSON을 만들고 필드를 비웁니다.

        Raises:
            TitleRequiredError: 제목 누락 (필드 유지)
            ValidLocationRequiredError: 제안에 없는 위치 (필드 유지)
        """
        self._validator.validate(self._form)

        result = SubmitResult(payload=self._form.to_payload(), json_text=self._form.to_json())
        self._form.clear()
        logger.info("Ad form submitted", extra={"location": result.payload["location"]})
        return result

    def clear(self) -> None:
        self._form.clear()

    async def aclose(self) -> None:
        """진행 중인 조회를 정리합니다. 캐시는 화면과 함께 버려집니다."""
        await self._coordinator.aclose()
