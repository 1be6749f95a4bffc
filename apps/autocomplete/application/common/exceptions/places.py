"""Places API 예외.

자동완성 조회는 부가 기능이므로 Coordinator가 이 예외들을 삼키고
로그만 남깁니다.
"""

from autocomplete.application.common.exceptions.base import ApplicationError


class PlacesClientError(ApplicationError):
    """Places API 조회 실패."""

    def __init__(self, message: str, query: str) -> None:
        self.query = query
        super().__init__(message)


class PlacesTransportError(PlacesClientError):
    """네트워크/타임아웃/HTTP 상태/잘못된 URL."""


class PlacesResponseError(PlacesClientError):
    """응답 본문이 장소 레코드 배열이 아님."""
