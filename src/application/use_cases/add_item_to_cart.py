"""カート商品追加ユースケース."""
import logging
from dataclasses import dataclass
from decimal import Decimal

from src.domain.entities import Cart, CartItem
from src.domain.enums import ErrorKind
from src.domain.errors import CartVersionConflictError, DomainError
from src.domain.identifiers import CartId, ProductId
from src.domain.ports import CartRepository
from src.domain.value_objects import DEFAULT_CURRENCY, Money

from .result import UseCaseResult

logger = logging.getLogger(__name__)

INVALID_PARAMETERS = "Invalid request parameters"


@dataclass(frozen=True)
class AddItemToCartRequest:
    """カート商品追加リクエスト."""

    cart_id: str
    product_id: str
    quantity: int
    unit_price: int | float | Decimal
    currency: str | None = DEFAULT_CURRENCY


@dataclass(frozen=True)
class AddItemToCartResult(UseCaseResult):
    """カート商品追加結果."""

    cart: Cart | None = None


def _is_present(value: object) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _is_positive_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return False
    if isinstance(value, Decimal) and not value.is_finite():
        return False
    return value > 0


class AddItemToCartUseCase:
    """カートに商品を追加するユースケース.

    カートが存在しない場合は指定IDで新規作成する。
    """

    def __init__(self, cart_repository: CartRepository) -> None:
        """初期化.

        Args:
            cart_repository: カートリポジトリ
        """
        self._cart_repository = cart_repository

    def execute(self, request: AddItemToCartRequest) -> AddItemToCartResult:
        """商品をカートに追加する.

        Args:
            request: 追加リクエスト

        Returns:
            追加結果（成功時は更新後のカート）
        """
        if not (
            _is_present(request.cart_id)
            and _is_present(request.product_id)
            and _is_positive_number(request.quantity)
            and _is_positive_number(request.unit_price)
        ):
            return AddItemToCartResult.failure(INVALID_PARAMETERS)

        try:
            cart_id = CartId(request.cart_id)
            cart = self._cart_repository.find_by_id(cart_id)
            if cart is None:
                logger.info("Creating cart %s", cart_id)
                cart = Cart.create(cart_id)

            item = CartItem.create(
                product_id=ProductId(request.product_id),
                quantity=request.quantity,
                unit_price=Money.of(request.unit_price, request.currency or DEFAULT_CURRENCY),
            )
            updated_cart = cart.add_item(item)
            self._cart_repository.save(updated_cart)
        except CartVersionConflictError as e:
            logger.warning("Conflict while adding item to cart: %s", e)
            return AddItemToCartResult.failure(str(e), ErrorKind.CONFLICT)
        except DomainError as e:
            return AddItemToCartResult.failure(str(e))
        except Exception as e:
            logger.exception("Unexpected error in AddItemToCart use case")
            return AddItemToCartResult.failure(str(e) or "Unknown error occurred", ErrorKind.INTERNAL)

        return AddItemToCartResult(success=True, cart=updated_cart)
