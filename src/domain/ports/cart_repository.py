"""カートリポジトリインターフェース."""
from abc import ABC, abstractmethod

from ..entities import Cart
from ..identifiers import CartId


class CartRepository(ABC):
    """カートリポジトリのインターフェース.

    saveはカートIDをキーとした全置換（upsert）。保存済みのバージョンが
    読み込み時と異なる場合はCartVersionConflictErrorを送出する。
    """

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """カートを保存する.

        Raises:
            CartVersionConflictError: 他の書き込みで既に更新されていた場合
        """
        pass

    @abstractmethod
    def find_by_id(self, cart_id: CartId) -> Cart | None:
        """カートIDで検索する."""
        pass

    @abstractmethod
    def delete(self, cart_id: CartId) -> None:
        """カートを削除する（存在しない場合は何もしない）."""
        pass
