"""ドメイン例外."""
from __future__ import annotations


class DomainError(ValueError):
    """ドメイン不変条件違反の基底例外."""


class InvalidAmountError(DomainError):
    """金額が不正."""

    def __init__(self, amount: object) -> None:
        self.amount = amount
        super().__init__("Money amount must be a non-negative finite number")


class InvalidCurrencyError(DomainError):
    """通貨が不正."""

    def __init__(self, currency: object) -> None:
        self.currency = currency
        super().__init__("Currency must be a non-empty string")


class CurrencyMismatchError(DomainError):
    """通貨の不一致."""

    def __init__(self, left: str, right: str) -> None:
        self.left = left
        self.right = right
        super().__init__(f"Currency mismatch: {left} vs {right}")


class InvalidProductIdError(DomainError):
    """商品IDが不正."""


class InvalidQuantityError(DomainError):
    """数量が不正."""

    def __init__(self, quantity: object) -> None:
        self.quantity = quantity
        super().__init__("Cart item quantity must be a positive integer")


class InvalidCartIdError(DomainError):
    """カートIDが不正."""

    def __init__(self) -> None:
        super().__init__("Cart ID must be a non-empty string")


class ProductNotFoundError(DomainError):
    """カート内に商品が存在しない."""

    def __init__(self, product_id: object) -> None:
        self.product_id = product_id
        super().__init__("Product not found in cart")


class CartVersionConflictError(Exception):
    """保存時にカートが他の書き込みで更新されていた."""

    def __init__(self, cart_id: object, expected: int, actual: int | None = None) -> None:
        self.cart_id = cart_id
        self.expected = expected
        self.actual = actual
        found = "unknown" if actual is None else actual
        super().__init__(
            f"Cart {cart_id} was modified concurrently "
            f"(expected version {expected}, found {found})"
        )
