"""カートAPI ハンドラー."""
import logging
import os
from typing import Any

from src.api.dependencies import Dependencies
from src.api.request import get_body, get_path_parameter
from src.api.response import bad_request_response, error_response, success_response
from src.application.use_cases import (
    AddItemToCartRequest,
    AddItemToCartUseCase,
    CheckoutCartRequest,
    CheckoutCartUseCase,
    GetCartRequest,
    GetCartUseCase,
    RemoveItemFromCartRequest,
    RemoveItemFromCartUseCase,
    UseCaseResult,
)
from src.domain.entities import Cart
from src.domain.errors import CurrencyMismatchError

logger = logging.getLogger(__name__)
logger.setLevel(os.environ.get("LOG_LEVEL", "INFO"))


def serialize_cart(cart: Cart) -> dict:
    """カートをレスポンス用の辞書に変換する."""
    try:
        total = cart.get_total_amount().to_dict()
    except CurrencyMismatchError:
        # 通貨混在のカートは合計を出さない
        total = None

    return {
        "id": str(cart.cart_id),
        "items": [
            {
                "productId": str(item.product_id),
                "quantity": item.quantity,
                "unitPrice": item.unit_price.to_dict(),
                "total": item.get_total().to_dict(),
            }
            for item in cart.items
        ],
        "total": total,
        "itemCount": cart.get_item_count(),
        "createdAt": cart.created_at.isoformat(),
        "updatedAt": cart.updated_at.isoformat(),
    }


def _failure_response(result: UseCaseResult, event: dict) -> dict:
    """失敗結果を種別に応じたエラーレスポンスに変換する."""
    kind = result.error_kind
    logger.info("Cart request failed (%s): %s", kind.name, result.error)
    return error_response(
        result.error or "Unknown error occurred",
        status_code=kind.get_status_code(),
        error_code=kind.name,
        event=event,
    )


def add_item(event: dict, context: Any) -> dict:
    """カートに商品を追加する.

    POST /carts/{cart_id}/items

    Request Body:
        productId: 商品ID
        quantity: 数量（正の整数）
        unitPrice: 単価（数値、または {amount, currency}）
        currency: 通貨（オプション、デフォルト USD）

    Returns:
        更新後のカート
    """
    try:
        body = get_body(event)
    except ValueError as e:
        return bad_request_response(str(e), event=event)

    missing = [name for name in ("productId", "quantity", "unitPrice") if body.get(name) is None]
    if missing:
        return bad_request_response(
            f"Missing required fields: {', '.join(missing)}", event=event
        )

    unit_price = body["unitPrice"]
    currency = body.get("currency")
    if isinstance(unit_price, dict):
        currency = unit_price.get("currency", currency)
        unit_price = unit_price.get("amount")

    use_case = AddItemToCartUseCase(Dependencies.get_cart_repository())
    result = use_case.execute(
        AddItemToCartRequest(
            cart_id=get_path_parameter(event, "cart_id") or body.get("cartId") or "",
            product_id=body["productId"],
            quantity=body["quantity"],
            unit_price=unit_price,
            currency=currency,
        )
    )
    if not result.success:
        return _failure_response(result, event)

    return success_response(serialize_cart(result.cart), event=event)


def get_cart(event: dict, context: Any) -> dict:
    """カートを取得する（存在しない場合は空のカートを作成する）.

    GET /carts/{cart_id}
    """
    use_case = GetCartUseCase(Dependencies.get_cart_repository())
    result = use_case.execute(GetCartRequest(cart_id=get_path_parameter(event, "cart_id") or ""))
    if not result.success:
        return _failure_response(result, event)

    return success_response(serialize_cart(result.cart), event=event)


def checkout(event: dict, context: Any) -> dict:
    """カートをチェックアウトする.

    POST /carts/{cart_id}/checkout

    Returns:
        orderId, total, items, itemCount
    """
    use_case = CheckoutCartUseCase(Dependencies.get_cart_repository())
    result = use_case.execute(
        CheckoutCartRequest(cart_id=get_path_parameter(event, "cart_id") or "")
    )
    if not result.success:
        return _failure_response(result, event)

    return success_response(
        {
            "orderId": str(result.order_id),
            "total": result.total.to_dict(),
            "items": [
                {
                    "productId": item.product_id,
                    "quantity": item.quantity,
                    "unitPrice": item.unit_price.to_dict(),
                }
                for item in result.items
            ],
            "itemCount": result.item_count,
        },
        event=event,
    )


def remove_item(event: dict, context: Any) -> dict:
    """カートから商品を削除する.

    DELETE /carts/{cart_id}/items/{item_id}
    """
    use_case = RemoveItemFromCartUseCase(Dependencies.get_cart_repository())
    result = use_case.execute(
        RemoveItemFromCartRequest(
            session_id=get_path_parameter(event, "cart_id") or "",
            item_id=get_path_parameter(event, "item_id") or "",
        )
    )
    if not result.success:
        return _failure_response(result, event)

    return success_response(serialize_cart(result.cart), event=event)
