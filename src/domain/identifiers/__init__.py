"""識別子モジュール."""
from .cart_id import CartId
from .order_id import OrderId
from .product_id import ProductId

__all__ = [
    "CartId",
    "OrderId",
    "ProductId",
]
