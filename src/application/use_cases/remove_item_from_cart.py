"""カート商品削除ユースケース."""
import logging
from dataclasses import dataclass

from src.domain.entities import Cart
from src.domain.enums import ErrorKind
from src.domain.errors import CartVersionConflictError, InvalidProductIdError
from src.domain.identifiers import CartId, ProductId
from src.domain.ports import CartRepository

from .result import UseCaseResult

logger = logging.getLogger(__name__)

IDS_REQUIRED = "Session ID and item ID are required"
CART_NOT_FOUND = "Cart not found"
ITEM_NOT_FOUND = "Item not found in cart"
REMOVE_FAILED = "Failed to remove item from cart"


@dataclass(frozen=True)
class RemoveItemFromCartRequest:
    """カート商品削除リクエスト."""

    session_id: str
    item_id: str


@dataclass(frozen=True)
class RemoveItemFromCartResult(UseCaseResult):
    """カート商品削除結果."""

    cart: Cart | None = None


def _is_blank(value: object) -> bool:
    return not isinstance(value, str) or not value.strip()


class RemoveItemFromCartUseCase:
    """カートから商品を削除するユースケース.

    カート・商品のどちらかが存在しない場合は失敗として返す。
    """

    def __init__(self, cart_repository: CartRepository) -> None:
        """初期化.

        Args:
            cart_repository: カートリポジトリ
        """
        self._cart_repository = cart_repository

    def execute(self, request: RemoveItemFromCartRequest) -> RemoveItemFromCartResult:
        """商品をカートから削除する.

        Args:
            request: 削除リクエスト（session_id はカートID、item_id は商品ID）

        Returns:
            削除結果（成功時は更新後のカート）
        """
        if _is_blank(request.session_id) or _is_blank(request.item_id):
            return RemoveItemFromCartResult.failure(IDS_REQUIRED)

        try:
            cart = self._cart_repository.find_by_id(CartId(request.session_id))
            if cart is None:
                return RemoveItemFromCartResult.failure(CART_NOT_FOUND, ErrorKind.NOT_FOUND)

            try:
                product_id = ProductId(request.item_id)
            except InvalidProductIdError:
                return RemoveItemFromCartResult.failure(ITEM_NOT_FOUND, ErrorKind.NOT_FOUND)
            if not cart.has_item(product_id):
                return RemoveItemFromCartResult.failure(ITEM_NOT_FOUND, ErrorKind.NOT_FOUND)

            updated_cart = cart.remove_item(product_id)
            self._cart_repository.save(updated_cart)
        except CartVersionConflictError as e:
            logger.warning("Conflict while removing item from cart: %s", e)
            return RemoveItemFromCartResult.failure(str(e), ErrorKind.CONFLICT)
        except Exception:
            logger.exception("Error in RemoveItemFromCart use case")
            return RemoveItemFromCartResult.failure(REMOVE_FAILED, ErrorKind.INTERNAL)

        return RemoveItemFromCartResult(success=True, cart=updated_cart)
