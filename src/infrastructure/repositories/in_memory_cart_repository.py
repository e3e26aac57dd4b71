"""カートリポジトリのインメモリ実装."""
import logging
import threading
from dataclasses import replace

from src.domain.entities import Cart
from src.domain.errors import CartVersionConflictError
from src.domain.identifiers import CartId
from src.domain.ports import CartRepository

logger = logging.getLogger(__name__)


class InMemoryCartRepository(CartRepository):
    """カートリポジトリのインメモリ実装.

    プロセス内の辞書に保持する。保存時のバージョン比較と書き込みは
    ロック内で行う。
    """

    def __init__(self) -> None:
        """初期化."""
        self._carts: dict[str, Cart] = {}
        self._lock = threading.Lock()

    def save(self, cart: Cart) -> None:
        """カートを保存する."""
        key = cart.cart_id.value
        with self._lock:
            stored = self._carts.get(key)
            stored_version = stored.version if stored is not None else 0
            if stored_version != cart.version:
                raise CartVersionConflictError(cart.cart_id, cart.version, stored_version)
            self._carts[key] = replace(cart, version=cart.version + 1)
        logger.debug("Saved cart %s (version %d)", key, cart.version + 1)

    def find_by_id(self, cart_id: CartId) -> Cart | None:
        """カートIDで検索する."""
        return self._carts.get(cart_id.value)

    def delete(self, cart_id: CartId) -> None:
        """カートを削除する."""
        with self._lock:
            removed = self._carts.pop(cart_id.value, None)
        if removed is not None:
            logger.debug("Deleted cart %s", cart_id)

    def clear(self) -> None:
        """全カートを削除する（テスト用）."""
        with self._lock:
            self._carts.clear()

    def count(self) -> int:
        """保存されているカート数を返す."""
        return len(self._carts)

    def find_all(self) -> list[Cart]:
        """保存されている全カートを返す."""
        return list(self._carts.values())
