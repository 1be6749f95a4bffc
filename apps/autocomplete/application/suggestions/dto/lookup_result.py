"""Lookup Result DTO."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LookupResult:
    """원격 조회 결과 (성공 시 제안 목록, 실패 시 사유)."""

    query: str
    suggestions: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, query: str, suggestions: list[str]) -> LookupResult:
        return cls(query=query, suggestions=list(suggestions))

    @classmethod
    def failure(cls, query: str, reason: str) -> LookupResult:
        return cls(query=query, error=reason)
