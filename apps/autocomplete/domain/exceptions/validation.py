"""광고 폼 검증 예외.

사용자에게 제목(title)과 메시지로 표시됩니다.
"""

from autocomplete.domain.exceptions.base import DomainError


class AdValidationError(DomainError):
    """제출 불가 사유."""

    code = "AD_VALIDATION_ERROR"

    def __init__(self, title: str, message: str) -> None:
        self.title = title
        super().__init__(message)


class TitleRequiredError(AdValidationError):
    """제목 누락."""

    code = "TITLE_REQUIRED"

    def __init__(self) -> None:
        super().__init__(
            "Title required",
            "You cannot submit the ad. You must provide a title.",
        )


class ValidLocationRequiredError(AdValidationError):
    """제안 목록에 없는 위치."""

    code = "VALID_LOCATION_REQUIRED"

    def __init__(self) -> None:
        super().__init__(
            "Valid location required",
            "You cannot submit the ad. You must provide a location provided from the suggestions.",
        )
