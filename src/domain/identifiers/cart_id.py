"""カート識別子の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidCartIdError


@dataclass(frozen=True)
class CartId:
    """カートの識別子（セッションIDをそのまま用いる）.

    前後の空白は取り除かれる。
    """

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidCartIdError()
        object.__setattr__(self, "value", self.value.strip())

    def __str__(self) -> str:
        """文字列表現."""
        return self.value
