"""依存性注入コンテナ."""
import logging
import os

from src.domain.ports import CartRepository
from src.infrastructure.repositories import InMemoryCartRepository

logger = logging.getLogger(__name__)


def _use_dynamodb() -> bool:
    """DynamoDBを使用するか判定する."""
    # CART_TABLE_NAME が設定されていればDynamoDBを使用
    return os.environ.get("CART_TABLE_NAME") is not None


class Dependencies:
    """依存性を管理するコンテナ.

    CART_TABLE_NAME 環境変数が設定されている場合はDynamoDB実装を使用。
    そうでない場合はインメモリ実装を使用（ローカル開発・テスト用）。
    """

    _cart_repository: CartRepository | None = None

    @classmethod
    def get_cart_repository(cls) -> CartRepository:
        """カートリポジトリを取得する."""
        if cls._cart_repository is None:
            if _use_dynamodb():
                from src.infrastructure.repositories import DynamoDBCartRepository

                cls._cart_repository = DynamoDBCartRepository()
            else:
                cls._cart_repository = InMemoryCartRepository()
            logger.info("Using %s", type(cls._cart_repository).__name__)
        return cls._cart_repository

    @classmethod
    def set_cart_repository(cls, repository: CartRepository) -> None:
        """カートリポジトリを設定する（テスト用）."""
        cls._cart_repository = repository

    @classmethod
    def reset(cls) -> None:
        """全ての依存性をリセットする（テスト用）."""
        cls._cart_repository = None
