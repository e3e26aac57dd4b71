"""値オブジェクトモジュール."""
from .money import DEFAULT_CURRENCY, Money

__all__ = [
    "DEFAULT_CURRENCY",
    "Money",
]
