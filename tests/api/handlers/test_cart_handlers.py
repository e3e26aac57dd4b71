"""カートAPIハンドラーのテスト."""
import json
from unittest.mock import MagicMock

import pytest

from src.api.dependencies import Dependencies
from src.api.handlers.cart import add_item, checkout, get_cart, remove_item
from src.domain.identifiers import CartId
from src.domain.ports import CartRepository
from src.infrastructure.repositories import InMemoryCartRepository


@pytest.fixture(autouse=True)
def reset_dependencies():
    """各テスト前に依存性をリセット."""
    Dependencies.reset()
    yield
    Dependencies.reset()


@pytest.fixture
def repository() -> InMemoryCartRepository:
    repository = InMemoryCartRepository()
    Dependencies.set_cart_repository(repository)
    return repository


def _add_event(cart_id: str = "session-1", **body) -> dict:
    payload = {"productId": "product-1", "quantity": 2, "unitPrice": 10.99}
    payload.update(body)
    return {"pathParameters": {"cart_id": cart_id}, "body": json.dumps(payload)}


def _body(response: dict) -> dict:
    return json.loads(response["body"])


class TestAddItemHandler:
    """POST /carts/{cart_id}/items のテスト."""

    def test_商品を追加するとカートを返す(self, repository) -> None:
        """追加後のカートが200で返ることを確認."""
        response = add_item(_add_event(), None)

        assert response["statusCode"] == 200
        body = _body(response)
        assert body["id"] == "session-1"
        assert body["itemCount"] == 2
        assert body["items"][0] == {
            "productId": "product-1",
            "quantity": 2,
            "unitPrice": {"amount": 10.99, "currency": "USD"},
            "total": {"amount": 21.98, "currency": "USD"},
        }
        assert body["total"] == {"amount": 21.98, "currency": "USD"}

    def test_unitPriceはオブジェクト形式も受け付ける(self, repository) -> None:
        """{amount, currency}形式の単価を受け付けることを確認."""
        response = add_item(_add_event(unitPrice={"amount": 3, "currency": "EUR"}), None)

        assert response["statusCode"] == 200
        assert _body(response)["items"][0]["unitPrice"] == {"amount": 3.0, "currency": "EUR"}

    def test_通貨が文字列でなければ400(self, repository) -> None:
        """単価オブジェクトの通貨が数値の場合に400とVALIDATIONコードになることを確認."""
        response = add_item(_add_event(unitPrice={"amount": 1, "currency": 5}), None)

        assert response["statusCode"] == 400
        assert _body(response)["error"] == {
            "message": "Currency must be a non-empty string",
            "code": "VALIDATION",
        }
        assert repository.count() == 0

    def test_必須項目が無いと400(self, repository) -> None:
        """必須項目の欠落で400が返ることを確認."""
        event = {"pathParameters": {"cart_id": "session-1"}, "body": json.dumps({"productId": "p1"})}

        response = add_item(event, None)

        assert response["statusCode"] == 400
        assert _body(response)["error"]["message"] == "Missing required fields: quantity, unitPrice"

    def test_不正なJSONは400(self, repository) -> None:
        """JSONとして解釈できないボディで400が返ることを確認."""
        event = {"pathParameters": {"cart_id": "session-1"}, "body": "{not json"}

        assert add_item(event, None)["statusCode"] == 400

    def test_数量が0以下なら400(self, repository) -> None:
        """ユースケースの検証エラーが400とVALIDATIONコードになることを確認."""
        response = add_item(_add_event(quantity=0), None)

        assert response["statusCode"] == 400
        assert _body(response)["error"] == {
            "message": "Invalid request parameters",
            "code": "VALIDATION",
        }


class TestGetCartHandler:
    """GET /carts/{cart_id} のテスト."""

    def test_未作成のカートは空で返す(self, repository) -> None:
        """未作成のIDでも空のカートが200で返り保存されることを確認."""
        response = get_cart({"pathParameters": {"cart_id": "session-1"}}, None)

        assert response["statusCode"] == 200
        body = _body(response)
        assert body["items"] == []
        assert body["total"] == {"amount": 0.0, "currency": "USD"}
        assert repository.find_by_id(CartId("session-1")) is not None

    def test_カートIDが無いと400(self, repository) -> None:
        """パスパラメータが無い場合は400が返ることを確認."""
        response = get_cart({"pathParameters": None}, None)

        assert response["statusCode"] == 400
        assert _body(response)["error"]["message"] == "Cart ID is required"

    def test_URLエンコードされたIDをデコードする(self, repository) -> None:
        """URLエンコードされたカートIDがデコードされることを確認."""
        response = get_cart({"pathParameters": {"cart_id": "session%201"}}, None)

        assert _body(response)["id"] == "session 1"

    def test_通貨混在のカートは合計をnullで返す(self, repository) -> None:
        """通貨が混在するカートでも取得はでき、合計がnullになることを確認."""
        add_item(_add_event(productId="p1", currency="USD"), None)
        add_item(_add_event(productId="p2", currency="EUR"), None)

        body = _body(get_cart({"pathParameters": {"cart_id": "session-1"}}, None))

        assert body["total"] is None
        assert len(body["items"]) == 2


class TestCheckoutHandler:
    """POST /carts/{cart_id}/checkout のテスト."""

    def test_チェックアウトで注文情報を返す(self, repository) -> None:
        """注文ID・合計・明細・件数が返りカートが削除されることを確認."""
        add_item(_add_event(), None)
        add_item(_add_event(productId="product-2", quantity=1, unitPrice=5.99), None)

        response = checkout({"pathParameters": {"cart_id": "session-1"}}, None)

        assert response["statusCode"] == 200
        body = _body(response)
        assert body["orderId"].startswith("order-")
        assert body["total"] == {"amount": 27.97, "currency": "USD"}
        assert body["itemCount"] == 3
        assert body["items"][1] == {
            "productId": "product-2",
            "quantity": 1,
            "unitPrice": {"amount": 5.99, "currency": "USD"},
        }
        assert repository.find_by_id(CartId("session-1")) is None

    def test_存在しないカートは404(self, repository) -> None:
        """存在しないカートのチェックアウトで404が返ることを確認."""
        response = checkout({"pathParameters": {"cart_id": "unknown"}}, None)

        assert response["statusCode"] == 404
        assert _body(response)["error"] == {"message": "Cart not found", "code": "NOT_FOUND"}

    def test_空のカートは400(self, repository) -> None:
        """空のカートのチェックアウトで400が返ることを確認."""
        get_cart({"pathParameters": {"cart_id": "session-1"}}, None)

        response = checkout({"pathParameters": {"cart_id": "session-1"}}, None)

        assert response["statusCode"] == 400
        assert _body(response)["error"]["message"] == "Cannot checkout empty cart"


class TestRemoveItemHandler:
    """DELETE /carts/{cart_id}/items/{item_id} のテスト."""

    def test_商品を削除できる(self, repository) -> None:
        """削除後のカートが200で返ることを確認."""
        add_item(_add_event(), None)
        add_item(_add_event(productId="product-2"), None)

        response = remove_item(
            {"pathParameters": {"cart_id": "session-1", "item_id": "product-1"}}, None
        )

        assert response["statusCode"] == 200
        assert [item["productId"] for item in _body(response)["items"]] == ["product-2"]

    def test_存在しないカートは404(self, repository) -> None:
        """存在しないカートで404が返ることを確認."""
        response = remove_item(
            {"pathParameters": {"cart_id": "unknown", "item_id": "product-1"}}, None
        )

        assert response["statusCode"] == 404
        assert _body(response)["error"]["message"] == "Cart not found"

    def test_存在しない商品は404(self, repository) -> None:
        """カートに無い商品で404が返ることを確認."""
        add_item(_add_event(), None)

        response = remove_item(
            {"pathParameters": {"cart_id": "session-1", "item_id": "product-9"}}, None
        )

        assert response["statusCode"] == 404
        assert _body(response)["error"]["message"] == "Item not found in cart"

    def test_IDが無いと400(self, repository) -> None:
        """パスパラメータが欠けている場合は400が返ることを確認."""
        response = remove_item({"pathParameters": {"cart_id": "session-1"}}, None)

        assert response["statusCode"] == 400
        assert _body(response)["error"]["message"] == "Session ID and item ID are required"

    def test_予期しない例外は500(self) -> None:
        """リポジトリの予期しない例外が500とINTERNALコードになることを確認."""
        repository = MagicMock(spec=CartRepository)
        repository.find_by_id.side_effect = RuntimeError("connection lost")
        Dependencies.set_cart_repository(repository)

        response = remove_item(
            {"pathParameters": {"cart_id": "session-1", "item_id": "product-1"}}, None
        )

        assert response["statusCode"] == 500
        assert _body(response)["error"] == {
            "message": "Failed to remove item from cart",
            "code": "INTERNAL",
        }
