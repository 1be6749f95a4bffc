"""Suggestion Cache.

이미 조회한 검색어(query)의 제안 목록을 보관해 중복 API 호출을 막습니다.
- 키는 입력된 그대로의 문자열 (대소문자/공백 정규화 없음)
- 기본값은 무제한, 만료 없음 (화면 세션 동안만 유지)
"""

from __future__ import annotations

from collections import OrderedDict


class SuggestionCache:
    """검색어 → 제안 목록 캐시.

    max_entries를 지정하면 가장 먼저 저장된 항목부터 제거합니다.
    제거된 항목의 제안은 contains_suggestion()에서도 더 이상 보이지 않습니다.
    """

    def __init__(self, max_entries: int | None = None) -> None:
        if max_entries is not None and max_entries < 1:
            raise ValueError("max_entries must be positive or None")
        self._max_entries = max_entries
        self._entries: OrderedDict[str, list[str]] = OrderedDict()

    @property
    def max_entries(self) -> int | None:
        return self._max_entries

    def get(self, query: str) -> list[str] | None:
        """캐시된 제안 목록 (없으면 None)."""
        suggestions = self._entries.get(query)
        if suggestions is None:
            return None
        return list(suggestions)

    def put(self, query: str, suggestions: list[str]) -> None:
        """항목을 저장하거나 덮어씁니다."""
        if query in self._entries:
            self._entries.move_to_end(query)
        self._entries[query] = list(suggestions)

        if self._max_entries is not None:
            while len(self._entries) > self._max_entries:
                self._entries.popitem(last=False)

    def contains_suggestion(self, value: str) -> bool:
        """value가 어떤 캐시 항목의 제안으로 존재하는지 확인합니다.

        전체 항목을 선형 탐색합니다. 화면당 조회 횟수가 작아 별도 인덱스는
        두지 않습니다.
        """
        for suggestions in self._entries.values():
            if value in suggestions:
                return True
        return False

    def __contains__(self, query: object) -> bool:
        return query in self._entries

    def __len__(self) -> int:
        return len(self._entries)
