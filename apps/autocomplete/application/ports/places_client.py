"""Places Autocomplete API Port.

원격 장소 자동완성 API와의 통신을 위한 포트 인터페이스.
- GET {base_url}?input={query} → JSON 배열
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class PlaceDTO:
    """자동완성 장소 레코드.

    모든 필드는 누락/null 허용. 제안 라벨로는 main_text만 사용합니다.
    """

    place_id: str | None = None
    main_text: str | None = None
    secondary_text: str | None = None


class PlacesClientPort(ABC):
    """장소 자동완성 API 포트."""

    @abstractmethod
    async def autocomplete(self, query: str) -> list[PlaceDTO]:
        """검색어에 대한 장소 레코드 목록.

        Raises:
            PlacesTransportError: 전송 실패
            PlacesResponseError: 응답 파싱 실패
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """리소스 정리."""
        ...
