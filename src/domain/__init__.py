"""ドメイン層モジュール."""
from .entities import Cart, CartItem
from .enums import ErrorKind
from .errors import (
    CartVersionConflictError,
    CurrencyMismatchError,
    DomainError,
    InvalidAmountError,
    InvalidCartIdError,
    InvalidCurrencyError,
    InvalidProductIdError,
    InvalidQuantityError,
    ProductNotFoundError,
)
from .identifiers import CartId, OrderId, ProductId
from .ports import CartRepository
from .value_objects import Money

__all__ = [
    # Identifiers
    "CartId",
    "OrderId",
    "ProductId",
    # Enums
    "ErrorKind",
    # Errors
    "CartVersionConflictError",
    "CurrencyMismatchError",
    "DomainError",
    "InvalidAmountError",
    "InvalidCartIdError",
    "InvalidCurrencyError",
    "InvalidProductIdError",
    "InvalidQuantityError",
    "ProductNotFoundError",
    # Value Objects
    "Money",
    # Entities
    "Cart",
    "CartItem",
    # Ports
    "CartRepository",
]
