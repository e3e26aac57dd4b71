"""チェックアウトユースケース."""
import logging
from dataclasses import dataclass, field

from src.domain.enums import ErrorKind
from src.domain.errors import DomainError
from src.domain.identifiers import CartId, OrderId
from src.domain.ports import CartRepository
from src.domain.value_objects import Money

from .result import UseCaseResult

logger = logging.getLogger(__name__)

CART_ID_REQUIRED = "Cart ID is required"
CART_NOT_FOUND = "Cart not found"
EMPTY_CART = "Cannot checkout empty cart"


@dataclass(frozen=True)
class CheckoutCartRequest:
    """チェックアウトリクエスト."""

    cart_id: str


@dataclass(frozen=True)
class CheckoutItem:
    """チェックアウト時点の明細スナップショット."""

    product_id: str
    quantity: int
    unit_price: Money


@dataclass(frozen=True)
class CheckoutCartResult(UseCaseResult):
    """チェックアウト結果."""

    order_id: OrderId | None = None
    total: Money | None = None
    items: list[CheckoutItem] = field(default_factory=list)
    item_count: int = 0


class CheckoutCartUseCase:
    """カートをチェックアウトするユースケース.

    合計と明細を確定して注文IDを払い出し、最後にカートを削除する。
    決済・在庫引当・通知は行わず、注文レコードも保存しない。
    """

    def __init__(self, cart_repository: CartRepository) -> None:
        """初期化.

        Args:
            cart_repository: カートリポジトリ
        """
        self._cart_repository = cart_repository

    def execute(self, request: CheckoutCartRequest) -> CheckoutCartResult:
        """チェックアウトする.

        Args:
            request: チェックアウトリクエスト

        Returns:
            チェックアウト結果
        """
        if not isinstance(request.cart_id, str) or not request.cart_id.strip():
            return CheckoutCartResult.failure(CART_ID_REQUIRED)

        try:
            cart_id = CartId(request.cart_id)
            cart = self._cart_repository.find_by_id(cart_id)
            if cart is None:
                return CheckoutCartResult.failure(CART_NOT_FOUND, ErrorKind.NOT_FOUND)
            if cart.is_empty():
                return CheckoutCartResult.failure(EMPTY_CART)

            total = cart.get_total_amount()
            item_count = cart.get_item_count()
            order_id = OrderId.generate()
            # 削除前に明細を確定しておく
            items = [
                CheckoutItem(
                    product_id=str(item.product_id),
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                )
                for item in cart.items
            ]

            self._cart_repository.delete(cart_id)
        except DomainError as e:
            return CheckoutCartResult.failure(str(e))
        except Exception as e:
            logger.exception("Unexpected error in CheckoutCart use case")
            return CheckoutCartResult.failure(str(e) or "Unknown error occurred", ErrorKind.INTERNAL)

        logger.info(
            "Checked out cart %s as %s (%d items, total %s)", cart_id, order_id, item_count, total
        )
        return CheckoutCartResult(
            success=True,
            order_id=order_id,
            total=total,
            items=items,
            item_count=item_count,
        )
