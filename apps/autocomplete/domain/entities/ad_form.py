"""Ad Form Entity.

광고 등록 화면의 입력 필드 4종 (title, location, price, description).
"""

from __future__ import annotations

import json
from dataclasses import dataclass

FORM_FIELDS: tuple[str, ...] = ("title", "location", "price", "description")


@dataclass
class AdForm:
    """광고 입력 폼.

    모든 값은 입력된 그대로의 문자열이며 trim/형변환을 하지 않습니다.
    """

    title: str = ""
    location: str = ""
    price: str = ""
    description: str = ""

    def clear(self) -> None:
        """모든 필드를 비웁니다."""
        for name in FORM_FIELDS:
            setattr(self, name, "")

    def to_payload(self) -> dict[str, str]:
        return {name: getattr(self, name) for name in FORM_FIELDS}

    def to_json(self) -> str:
        """확인용 pretty-printed JSON 문자열을 반환합니다."""
        return json.dumps(self.to_payload(), ensure_ascii=False, indent=2)
