"""カート集約ルート."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from ..errors import ProductNotFoundError
from ..identifiers import CartId, ProductId
from ..value_objects import DEFAULT_CURRENCY, Money

from .cart_item import CartItem


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Cart:
    """セッションに紐づく購入予定商品のコンテナ（集約ルート）.

    変更操作はいずれも新しいCartを返し、自身は変更しない。
    同じ商品IDのアイテムは高々1つしか持たない。
    """

    cart_id: CartId
    items: tuple[CartItem, ...] = ()
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)
    # 保存済み回数（楽観的排他制御用）。未保存のカートは0
    version: int = 0

    @classmethod
    def create(cls, cart_id: CartId | str) -> Cart:
        """空のカートを作成する.

        Raises:
            InvalidCartIdError: カートIDが空の場合
        """
        if not isinstance(cart_id, CartId):
            cart_id = CartId(cart_id)
        now = _now()
        return cls(cart_id=cart_id, items=(), created_at=now, updated_at=now)

    def add_item(self, item: CartItem) -> Cart:
        """アイテムを追加した新しいカートを返す.

        同じ商品が既にある場合は数量を合算し、単価は追加側のものを採用する。
        """
        index = self._index_of(item.product_id)
        if index is None:
            items = (*self.items, item)
        else:
            existing = self.items[index]
            merged = CartItem.create(
                item.product_id, existing.quantity + item.quantity, item.unit_price
            )
            items = self.items[:index] + (merged,) + self.items[index + 1:]
        return replace(self, items=items, updated_at=_now())

    def update_item_quantity(self, product_id: ProductId, quantity: int) -> Cart:
        """指定商品の数量を変更した新しいカートを返す.

        数量が0以下の場合は商品を削除する。

        Raises:
            ProductNotFoundError: 商品がカートに無い場合
        """
        index = self._index_of(product_id)
        if index is None:
            raise ProductNotFoundError(product_id)
        if quantity <= 0:
            return self.remove_item(product_id)

        updated = self.items[index].with_quantity(quantity)
        items = self.items[:index] + (updated,) + self.items[index + 1:]
        return replace(self, items=items, updated_at=_now())

    def remove_item(self, product_id: ProductId) -> Cart:
        """指定商品を除いた新しいカートを返す（存在しなくてもエラーにしない）."""
        items = tuple(item for item in self.items if item.product_id != product_id)
        return replace(self, items=items, updated_at=_now())

    def get_total_amount(self) -> Money:
        """合計金額を計算する.

        空のカートは0 USD。通貨が混在している場合はCurrencyMismatchErrorとなる。
        """
        if not self.items:
            return Money.zero(DEFAULT_CURRENCY)

        total = Money.zero(self.items[0].unit_price.currency)
        for item in self.items:
            total = total.add(item.get_total())
        return total

    def get_item_count(self) -> int:
        """数量の合計を取得する."""
        return sum(item.quantity for item in self.items)

    def is_empty(self) -> bool:
        """カートが空か判定する."""
        return len(self.items) == 0

    def get_item(self, product_id: ProductId) -> CartItem | None:
        """指定商品のアイテムを取得する."""
        index = self._index_of(product_id)
        return None if index is None else self.items[index]

    def has_item(self, product_id: ProductId) -> bool:
        """指定商品がカートにあるか判定する."""
        return self._index_of(product_id) is not None

    def _index_of(self, product_id: ProductId) -> int | None:
        for i, item in enumerate(self.items):
            if item.product_id == product_id:
                return i
        return None
