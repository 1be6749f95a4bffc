"""In-memory Screen Registry.

열린 광고 등록 화면을 id로 보관합니다. 프로세스가 끝나면 함께 사라집니다.
"""

from __future__ import annotations

import logging
import uuid
from typing import Callable

from autocomplete.application.common.exceptions.screen import ScreenNotFoundError
from autocomplete.application.screen import AdFormScreen

logger = logging.getLogger(__name__)

ScreenFactory = Callable[[], AdFormScreen]


class InMemoryScreenRegistry:
    """화면 세션 저장소."""

    def __init__(self, screen_factory: ScreenFactory) -> None:
        self._screen_factory = screen_factory
        self._screens: dict[str, AdFormScreen] = {}

    def open(self) -> tuple[str, AdFormScreen]:
        screen_id = uuid.uuid4().hex
        screen = self._screen_factory()
        self._screens[screen_id] = screen
        logger.debug("Screen opened", extra={"screen_id": screen_id})
        return screen_id, screen

    def get(self, screen_id: str) -> AdFormScreen:
        screen = self._screens.get(screen_id)
        if screen is None:
            raise ScreenNotFoundError(screen_id)
        return screen

    async def close(self, screen_id: str) -> None:
        screen = self._screens.pop(screen_id, None)
        if screen is None:
            raise ScreenNotFoundError(screen_id)
        await screen.aclose()
        logger.debug("Screen closed", extra={"screen_id": screen_id})

    async def close_all(self) -> None:
        screens = list(self._screens.values())
        self._screens.clear()
        for screen in screens:
            await screen.aclose()

    def __len__(self) -> int:
        return len(self._screens)
