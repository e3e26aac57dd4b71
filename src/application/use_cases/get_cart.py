"""カート取得ユースケース."""
import logging
from dataclasses import dataclass

from src.domain.entities import Cart
from src.domain.enums import ErrorKind
from src.domain.errors import CartVersionConflictError, DomainError
from src.domain.identifiers import CartId
from src.domain.ports import CartRepository

from .result import UseCaseResult

logger = logging.getLogger(__name__)

CART_ID_REQUIRED = "Cart ID is required"


@dataclass(frozen=True)
class GetCartRequest:
    """カート取得リクエスト."""

    cart_id: str


@dataclass(frozen=True)
class GetCartResult(UseCaseResult):
    """カート取得結果."""

    cart: Cart | None = None


class GetCartUseCase:
    """カート取得ユースケース.

    存在しないカートIDが指定された場合は空のカートを作成・保存して返す。
    """

    def __init__(self, cart_repository: CartRepository) -> None:
        """初期化.

        Args:
            cart_repository: カートリポジトリ
        """
        self._cart_repository = cart_repository

    def execute(self, request: GetCartRequest) -> GetCartResult:
        """カートを取得する.

        Args:
            request: 取得リクエスト

        Returns:
            取得結果（未作成の場合は新規の空カート）
        """
        if not isinstance(request.cart_id, str) or not request.cart_id.strip():
            return GetCartResult.failure(CART_ID_REQUIRED)

        try:
            cart_id = CartId(request.cart_id)
            cart = self._cart_repository.find_by_id(cart_id)
            if cart is None:
                logger.info("Cart %s not found, creating an empty cart", cart_id)
                cart = Cart.create(cart_id)
                self._cart_repository.save(cart)
        except CartVersionConflictError as e:
            logger.warning("Conflict while provisioning cart: %s", e)
            return GetCartResult.failure(str(e), ErrorKind.CONFLICT)
        except DomainError as e:
            return GetCartResult.failure(str(e))
        except Exception as e:
            logger.exception("Unexpected error in GetCart use case")
            return GetCartResult.failure(str(e) or "Unknown error occurred", ErrorKind.INTERNAL)

        return GetCartResult(success=True, cart=cart)
