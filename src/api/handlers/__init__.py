"""Lambdaハンドラーモジュール."""
from .cart import add_item, checkout, get_cart, remove_item

__all__ = [
    "add_item",
    "checkout",
    "get_cart",
    "remove_item",
]
