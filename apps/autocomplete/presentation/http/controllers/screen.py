"""Ad Form Screen Controller."""

from __future__ import annotations

import asyncio
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response, status

from autocomplete.application.screen import AdFormScreen
from autocomplete.infrastructure.persistence_memory import InMemoryScreenRegistry
from autocomplete.presentation.http.schemas import (
    FieldUpdate,
    ScreenState,
    SubmitResponse,
    SuggestionSelected,
)
from autocomplete.setup.dependencies import get_screen_registry

router = APIRouter(prefix="/ad-form/screens", tags=["ad-form"])

Registry = Annotated[InMemoryScreenRegistry, Depends(get_screen_registry)]


@router.post(
    "",
    response_model=ScreenState,
    status_code=status.HTTP_201_CREATED,
    summary="Open an ad form screen",
)
async def open_screen(registry: Registry) -> ScreenState:
    """새 광고 등록 화면을 엽니다."""
    screen_id, screen = registry.open()
    return _to_state(screen_id, screen)


@router.get("/{screen_id}", response_model=ScreenState, summary="Get screen state")
async def get_screen(screen_id: str, registry: Registry) -> ScreenState:
    """화면 상태 (필드 + 표시 중인 제안)를 조회합니다."""
    return _to_state(screen_id, registry.get(screen_id))


@router.put(
    "/{screen_id}/fields/{field}",
    response_model=ScreenState,
    summary="Update a form field",
)
async def update_field(
    screen_id: str,
    field: str,
    body: FieldUpdate,
    registry: Registry,
    wait: bool = Query(False, description="location 조회 완료까지 대기"),
) -> ScreenState:
    """필드를 입력합니다. location은 자동완성 조회를 시작합니다."""
    screen = registry.get(screen_id)
    task = screen.set_field(field, body.value)
    if task is not None and wait:
        await asyncio.wait({task})
    return _to_state(screen_id, screen)


@router.post(
    "/{screen_id}/suggestions/{index}/select",
    response_model=SuggestionSelected,
    summary="Select a displayed suggestion",
)
async def select_suggestion(
    screen_id: str,
    registry: Registry,
    index: int = Path(..., ge=0),
) -> SuggestionSelected:
    """표시 중인 제안을 location으로 선택합니다."""
    location = registry.get(screen_id).select_suggestion(index)
    return SuggestionSelected(location=location)


@router.post(
    "/{screen_id}/submit",
    response_model=SubmitResponse,
    response_model_by_alias=True,
    summary="Submit the ad form",
)
async def submit(screen_id: str, registry: Registry) -> SubmitResponse:
    """검증 후 입력값을 JSON으로 반환하고 필드를 비웁니다."""
    result = registry.get(screen_id).submit()
    return SubmitResponse(payload=result.payload, json_text=result.json_text)


@router.post("/{screen_id}/clear", response_model=ScreenState, summary="Clear all fields")
async def clear(screen_id: str, registry: Registry) -> ScreenState:
    """모든 필드를 비웁니다."""
    screen = registry.get(screen_id)
    screen.clear()
    return _to_state(screen_id, screen)


@router.delete(
    "/{screen_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Close the screen",
)
async def close_screen(screen_id: str, registry: Registry) -> Response:
    """화면을 닫고 세션 캐시를 버립니다."""
    await registry.close(screen_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _to_state(screen_id: str, screen: AdFormScreen) -> ScreenState:
    form = screen.form
    return ScreenState(
        screen_id=screen_id,
        title=form.title,
        location=form.location,
        price=form.price,
        description=form.description,
        suggestions=screen.displayed_suggestions,
    )
