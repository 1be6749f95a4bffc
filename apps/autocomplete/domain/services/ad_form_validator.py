"""Ad Form Validator.

제출 시점 검증 규칙:
- title: 빈 문자열/공백만 있는 문자열은 무효 (저장값은 trim하지 않음)
- location: 이번 세션에서 성공한 조회 결과 중 하나와 정확히 일치해야 함
"""

from __future__ import annotations

from typing import Protocol

from autocomplete.domain.entities.ad_form import AdForm
from autocomplete.domain.exceptions.validation import (
    TitleRequiredError,
    ValidLocationRequiredError,
)


class SuggestionLookup(Protocol):
    """location 검증에 필요한 캐시 인터페이스."""

    def contains_suggestion(self, value: str) -> bool: ...


class AdFormValidator:
    """광고 폼 검증 서비스."""

    def __init__(self, suggestions: SuggestionLookup) -> None:
        self._suggestions = suggestions

    @staticmethod
    def title_valid(title: str) -> bool:
        return bool(title) and not title.isspace()

    def location_valid(self, location: str) -> bool:
        return self._suggestions.contains_suggestion(location)

    def validate(self, form: AdForm) -> None:
        """title → location 순서로 검증하고 첫 실패에서 중단합니다.

        Raises:
            TitleRequiredError: 제목이 비어 있음
            ValidLocationRequiredError: 제안 목록에 없는 위치
        """
        if not self.title_valid(form.title):
            raise TitleRequiredError()
        if not self.location_valid(form.location):
            raise ValidLocationRequiredError()
