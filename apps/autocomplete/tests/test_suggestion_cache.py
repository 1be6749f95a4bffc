"""SuggestionCache 단위 테스트."""

from __future__ import annotations

import pytest

from autocomplete.application.suggestions.services import SuggestionCache


class TestGetPut:
    """get/put 테스트."""

    def test_get_missing_returns_none(self, cache: SuggestionCache) -> None:
        """없는 키는 None."""
        assert cache.get("ath") is None

    def test_put_then_get(self, cache: SuggestionCache) -> None:
        cache.put("ath", ["Athens", "Athens Airport"])
        assert cache.get("ath") == ["Athens", "Athens Airport"]

    def test_key_is_exact_match(self, cache: SuggestionCache) -> None:
        """대소문자/공백 정규화 없음."""
        cache.put("ath", ["Athens"])
        assert cache.get("Ath") is None
        assert cache.get("ath ") is None

    def test_put_overwrites(self, cache: SuggestionCache) -> None:
        cache.put("ath", ["Athens"])
        cache.put("ath", ["Athina"])
        assert cache.get("ath") == ["Athina"]
        assert len(cache) == 1

    def test_put_is_idempotent(self, cache: SuggestionCache) -> None:
        cache.put("ath", ["Athens"])
        cache.put("ath", ["Athens"])
        assert cache.get("ath") == ["Athens"]
        assert len(cache) == 1

    def test_empty_list_is_a_hit(self, cache: SuggestionCache) -> None:
        """빈 결과도 캐시 히트."""
        cache.put("zzz", [])
        assert cache.get("zzz") == []
        assert "zzz" in cache

    def test_returned_list_does_not_mutate_cache(self, cache: SuggestionCache) -> None:
        cache.put("ath", ["Athens"])
        cache.get("ath").append("Sparta")
        assert cache.get("ath") == ["Athens"]

    def test_stored_list_is_copied(self, cache: SuggestionCache) -> None:
        suggestions = ["Athens"]
        cache.put("ath", suggestions)
        suggestions.append("Sparta")
        assert cache.get("ath") == ["Athens"]


class TestContainsSuggestion:
    """contains_suggestion 테스트."""

    def test_empty_cache(self, cache: SuggestionCache) -> None:
        assert cache.contains_suggestion("Athens") is False

    def test_found_in_any_entry(self, cache: SuggestionCache) -> None:
        cache.put("ath", ["Athens"])
        cache.put("par", ["Paris", "Parma"])
        assert cache.contains_suggestion("Athens") is True
        assert cache.contains_suggestion("Parma") is True

    def test_query_key_is_not_a_suggestion(self, cache: SuggestionCache) -> None:
        """검색어 자체는 제안이 아님."""
        cache.put("ath", ["Athens"])
        assert cache.contains_suggestion("ath") is False

    def test_exact_match_only(self, cache: SuggestionCache) -> None:
        cache.put("ath", ["Athens"])
        assert cache.contains_suggestion("athens") is False
        assert cache.contains_suggestion("Athens ") is False


class TestBoundedCache:
    """max_entries 테스트."""

    def test_unbounded_by_default(self) -> None:
        cache = SuggestionCache()
        for i in range(500):
            cache.put(f"q{i:03d}", [f"s{i}"])
        assert cache.max_entries is None
        assert len(cache) == 500

    def test_evicts_oldest_entry(self) -> None:
        cache = SuggestionCache(max_entries=2)
        cache.put("ath", ["Athens"])
        cache.put("par", ["Paris"])
        cache.put("rom", ["Rome"])

        assert len(cache) == 2
        assert cache.get("ath") is None
        assert cache.contains_suggestion("Athens") is False
        assert cache.contains_suggestion("Rome") is True

    def test_overwrite_refreshes_position(self) -> None:
        cache = SuggestionCache(max_entries=2)
        cache.put("ath", ["Athens"])
        cache.put("par", ["Paris"])
        cache.put("ath", ["Athina"])
        cache.put("rom", ["Rome"])

        assert cache.get("par") is None
        assert cache.get("ath") == ["Athina"]

    @pytest.mark.parametrize("max_entries", [0, -1])
    def test_invalid_bound(self, max_entries: int) -> None:
        with pytest.raises(ValueError):
            SuggestionCache(max_entries=max_entries)
