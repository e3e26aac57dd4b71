"""カートアイテムエンティティ."""
from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidQuantityError
from ..identifiers import ProductId
from ..value_objects import Money


@dataclass(frozen=True)
class CartItem:
    """カート内の1商品分の明細（商品・数量・単価）."""

    product_id: ProductId
    quantity: int
    unit_price: Money

    def __post_init__(self) -> None:
        """バリデーション."""
        if (
            isinstance(self.quantity, bool)
            or not isinstance(self.quantity, int)
            or self.quantity <= 0
        ):
            raise InvalidQuantityError(self.quantity)

    @classmethod
    def create(cls, product_id: ProductId, quantity: int, unit_price: Money) -> CartItem:
        """新しいカートアイテムを作成する."""
        return cls(product_id=product_id, quantity=quantity, unit_price=unit_price)

    def get_total(self) -> Money:
        """小計（単価 × 数量）を計算する."""
        return self.unit_price.multiply(self.quantity)

    def with_quantity(self, quantity: int) -> CartItem:
        """数量を変更した新しいアイテムを返す."""
        return CartItem.create(self.product_id, quantity, self.unit_price)
