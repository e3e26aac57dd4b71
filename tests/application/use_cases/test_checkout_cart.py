"""CheckoutCartUseCaseのテスト."""
import re
from unittest.mock import MagicMock

import pytest

from src.application.use_cases import (
    AddItemToCartRequest,
    AddItemToCartUseCase,
    CheckoutCartRequest,
    CheckoutCartUseCase,
)
from src.domain.entities import Cart, CartItem
from src.domain.enums import ErrorKind
from src.domain.identifiers import CartId, ProductId
from src.domain.ports import CartRepository
from src.domain.value_objects import Money
from src.infrastructure.repositories import InMemoryCartRepository


@pytest.fixture
def repository() -> InMemoryCartRepository:
    return InMemoryCartRepository()


def _add(repository, product_id: str, quantity: int, unit_price: float, currency: str = "USD") -> None:
    result = AddItemToCartUseCase(repository).execute(
        AddItemToCartRequest(
            cart_id="session-1",
            product_id=product_id,
            quantity=quantity,
            unit_price=unit_price,
            currency=currency,
        )
    )
    assert result.success is True


class TestCheckoutCartUseCase:
    """CheckoutCartUseCaseの単体テスト."""

    def test_チェックアウトで合計と明細を返しカートを削除する(self, repository) -> None:
        """合計・件数・明細を返し、カートがリポジトリから削除されることを確認."""
        _add(repository, "product-1", 2, 10.99)
        _add(repository, "product-2", 1, 5.99)

        result = CheckoutCartUseCase(repository).execute(CheckoutCartRequest(cart_id="session-1"))

        assert result.success is True
        assert result.item_count == 3
        assert result.total == Money.of(27.97)
        assert [(item.product_id, item.quantity) for item in result.items] == [
            ("product-1", 2),
            ("product-2", 1),
        ]
        assert result.items[0].unit_price == Money.of(10.99)
        assert re.fullmatch(r"order-\d+-[0-9a-z]{9}", str(result.order_id))
        assert repository.find_by_id(CartId("session-1")) is None

    def test_チェックアウトごとに異なる注文IDを払い出す(self, repository) -> None:
        """2回のチェックアウトで注文IDが異なることを確認."""
        use_case = CheckoutCartUseCase(repository)
        _add(repository, "product-1", 1, 1)
        first = use_case.execute(CheckoutCartRequest(cart_id="session-1"))
        _add(repository, "product-1", 1, 1)
        second = use_case.execute(CheckoutCartRequest(cart_id="session-1"))

        assert first.order_id != second.order_id

    def test_存在しないカートはNOT_FOUND(self, repository) -> None:
        """未作成のカートIDでは Cart not found を返すことを確認."""
        result = CheckoutCartUseCase(repository).execute(CheckoutCartRequest(cart_id="unknown"))

        assert result.success is False
        assert result.error == "Cart not found"
        assert result.error_kind is ErrorKind.NOT_FOUND

    def test_空のカートはチェックアウトできない(self, repository) -> None:
        """空のカートでは失敗しカートは残ることを確認."""
        repository.save(Cart.create("session-1"))

        result = CheckoutCartUseCase(repository).execute(CheckoutCartRequest(cart_id="session-1"))

        assert result.success is False
        assert result.error == "Cannot checkout empty cart"
        assert result.error_kind is ErrorKind.VALIDATION
        assert repository.find_by_id(CartId("session-1")) is not None

    @pytest.mark.parametrize("cart_id", ["", "  "])
    def test_カートIDが空なら失敗(self, repository, cart_id) -> None:
        """カートIDが空の場合は Cart ID is required を返すことを確認."""
        result = CheckoutCartUseCase(repository).execute(CheckoutCartRequest(cart_id=cart_id))

        assert result.success is False
        assert result.error == "Cart ID is required"

    def test_通貨が混在するカートは失敗しカートを残す(self, repository) -> None:
        """通貨混在では合計計算が失敗し、カートは削除されないことを確認."""
        _add(repository, "product-1", 1, 1, "USD")
        _add(repository, "product-2", 1, 1, "EUR")

        result = CheckoutCartUseCase(repository).execute(CheckoutCartRequest(cart_id="session-1"))

        assert result.success is False
        assert result.error == "Currency mismatch: USD vs EUR"
        assert repository.find_by_id(CartId("session-1")) is not None

    def test_削除の失敗はINTERNALを返す(self) -> None:
        """削除時の例外が失敗結果に変換されることを確認."""
        repository = MagicMock(spec=CartRepository)
        cart = Cart.create("session-1")
        repository.find_by_id.return_value = cart.add_item(
            CartItem.create(ProductId("p1"), 1, Money.of(1))
        )
        repository.delete.side_effect = RuntimeError("table unavailable")

        result = CheckoutCartUseCase(repository).execute(CheckoutCartRequest(cart_id="session-1"))

        assert result.success is False
        assert result.error_kind is ErrorKind.INTERNAL
