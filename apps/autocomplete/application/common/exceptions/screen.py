"""화면 세션 관련 예외."""

from autocomplete.application.common.exceptions.base import ApplicationError


class ScreenNotFoundError(ApplicationError):
    """열려 있지 않은 화면."""

    def __init__(self, screen_id: str) -> None:
        self.screen_id = screen_id
        super().__init__(f"Screen '{screen_id}' not found")


class SuggestionIndexError(ApplicationError):
    """표시 중인 제안 목록 범위를 벗어난 선택."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Suggestion index {index} out of range (displayed: {size})")


class UnknownFieldError(ApplicationError):
    """폼에 없는 필드."""

    def __init__(self, field: str, allowed: list[str]) -> None:
        super().__init__(f"Unknown field '{field}'. Allowed values: {allowed}.")
