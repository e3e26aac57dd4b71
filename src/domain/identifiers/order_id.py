"""注文識別子の値オブジェクト."""
from __future__ import annotations

import secrets
import string
import time
from dataclasses import dataclass

_ALPHABET = string.digits + string.ascii_lowercase
_SUFFIX_LENGTH = 9


@dataclass(frozen=True)
class OrderId:
    """チェックアウト時に払い出す注文ID.

    時刻（ミリ秒）とランダムな接尾辞から生成する。一意性はベストエフォート。
    """

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.value:
            raise ValueError("OrderId cannot be empty")

    @classmethod
    def generate(cls) -> OrderId:
        """新しいOrderIdを生成する（例: order-1718000000000-k3j9x0a1b）."""
        millis = int(time.time() * 1000)
        suffix = "".join(secrets.choice(_ALPHABET) for _ in range(_SUFFIX_LENGTH))
        return cls(f"order-{millis}-{suffix}")

    def __str__(self) -> str:
        """文字列表現."""
        return self.value
