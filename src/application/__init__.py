"""アプリケーション層モジュール."""
from .use_cases import (
    AddItemToCartRequest,
    AddItemToCartResult,
    AddItemToCartUseCase,
    CheckoutCartRequest,
    CheckoutCartResult,
    CheckoutCartUseCase,
    CheckoutItem,
    GetCartRequest,
    GetCartResult,
    GetCartUseCase,
    RemoveItemFromCartRequest,
    RemoveItemFromCartResult,
    RemoveItemFromCartUseCase,
    UseCaseResult,
)

__all__ = [
    "AddItemToCartRequest",
    "AddItemToCartResult",
    "AddItemToCartUseCase",
    "GetCartRequest",
    "GetCartResult",
    "GetCartUseCase",
    "CheckoutCartRequest",
    "CheckoutCartResult",
    "CheckoutCartUseCase",
    "CheckoutItem",
    "RemoveItemFromCartRequest",
    "RemoveItemFromCartResult",
    "RemoveItemFromCartUseCase",
    "UseCaseResult",
]
