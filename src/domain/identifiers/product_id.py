"""商品識別子の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidProductIdError

MAX_LENGTH = 100


@dataclass(frozen=True)
class ProductId:
    """商品の識別子（前後の空白を除いて1〜100文字）."""

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidProductIdError("ProductId must be a non-empty string")
        trimmed = self.value.strip()
        if len(trimmed) > MAX_LENGTH:
            raise InvalidProductIdError(f"ProductId cannot exceed {MAX_LENGTH} characters")
        object.__setattr__(self, "value", trimmed)

    def __str__(self) -> str:
        """文字列表現."""
        return self.value
