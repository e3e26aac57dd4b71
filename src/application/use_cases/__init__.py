"""ユースケースモジュール."""
from .add_item_to_cart import AddItemToCartRequest, AddItemToCartResult, AddItemToCartUseCase
from .checkout_cart import (
    CheckoutCartRequest,
    CheckoutCartResult,
    CheckoutCartUseCase,
    CheckoutItem,
)
from .get_cart import GetCartRequest, GetCartResult, GetCartUseCase
from .remove_item_from_cart import (
    RemoveItemFromCartRequest,
    RemoveItemFromCartResult,
    RemoveItemFromCartUseCase,
)
from .result import UseCaseResult

__all__ = [
    "AddItemToCartRequest",
    "AddItemToCartResult",
    "AddItemToCartUseCase",
    "CheckoutCartRequest",
    "CheckoutCartResult",
    "CheckoutCartUseCase",
    "CheckoutItem",
    "GetCartRequest",
    "GetCartResult",
    "GetCartUseCase",
    "RemoveItemFromCartRequest",
    "RemoveItemFromCartResult",
    "RemoveItemFromCartUseCase",
    "UseCaseResult",
]
