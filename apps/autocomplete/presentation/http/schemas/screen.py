"""Ad Form Screen HTTP Schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FieldUpdate(BaseModel):
    """필드 입력 요청."""

    value: str = Field("", max_length=1000)

    @field_validator("value")
    @classmethod
    def _encodable(cls, value: str) -> str:
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ValueError("value must be valid UTF-8 text") from e
        return value


class ScreenState(BaseModel):
    """화면 상태 응답 스키마."""

    screen_id: str
    title: str
    location: str
    price: str
    description: str
    suggestions: list[str]


class SuggestionSelected(BaseModel):
    """제안 선택 응답 스키마."""

    location: str


class SubmitResponse(BaseModel):
    """제출 결과 응답 스키마."""

    model_config = ConfigDict(populate_by_name=True)

    payload: dict[str, str]
    json_text: str = Field(..., alias="json")
