"""インフラストラクチャ層モジュール."""
from .repositories import (
    DynamoDBCartRepository,
    InMemoryCartRepository,
)

__all__ = [
    "DynamoDBCartRepository",
    "InMemoryCartRepository",
]
