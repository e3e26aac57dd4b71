"""カートリポジトリのDynamoDB実装."""
import logging
import os
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any

import boto3
from botocore.exceptions import ClientError

from src.domain.entities import Cart, CartItem
from src.domain.errors import CartVersionConflictError
from src.domain.identifiers import CartId, ProductId
from src.domain.ports import CartRepository
from src.domain.value_objects import Money

logger = logging.getLogger(__name__)

# TTL: 24時間
TTL_HOURS = 24


class DynamoDBCartRepository(CartRepository):
    """カートリポジトリのDynamoDB実装.

    version属性の条件付き書き込みで楽観的排他制御を行う。
    """

    def __init__(self, table_name: str | None = None) -> None:
        """初期化."""
        self._table_name = table_name or os.environ.get("CART_TABLE_NAME", "shopping-cart")
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)

    def save(self, cart: Cart) -> None:
        """カートを保存する."""
        item = self._to_dynamodb_item(cart)
        if cart.version == 0:
            condition = {"ConditionExpression": "attribute_not_exists(cart_id)"}
        else:
            condition = {
                "ConditionExpression": "#version = :expected",
                "ExpressionAttributeNames": {"#version": "version"},
                "ExpressionAttributeValues": {":expected": cart.version},
            }

        try:
            self._table.put_item(Item=item, **condition)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise CartVersionConflictError(cart.cart_id, cart.version) from e
            raise
        logger.debug("Saved cart %s (version %d)", cart.cart_id, cart.version + 1)

    def find_by_id(self, cart_id: CartId) -> Cart | None:
        """カートIDで検索する."""
        response = self._table.get_item(Key={"cart_id": cart_id.value})
        item = response.get("Item")
        if item is None:
            return None
        return self._from_dynamodb_item(item)

    def delete(self, cart_id: CartId) -> None:
        """カートを削除する."""
        self._table.delete_item(Key={"cart_id": cart_id.value})
        logger.debug("Deleted cart %s", cart_id)

    def _to_dynamodb_item(self, cart: Cart) -> dict[str, Any]:
        """CartエンティティをDynamoDBアイテムに変換."""
        ttl = int((datetime.now(timezone.utc) + timedelta(hours=TTL_HOURS)).timestamp())

        items = [
            {
                "product_id": item.product_id.value,
                "quantity": item.quantity,
                "unit_price": item.unit_price.amount,
                "currency": item.unit_price.currency,
            }
            for item in cart.items
        ]

        return {
            "cart_id": cart.cart_id.value,
            "items": items,
            "created_at": cart.created_at.isoformat(),
            "updated_at": cart.updated_at.isoformat(),
            "version": cart.version + 1,
            "ttl": ttl,
        }

    def _from_dynamodb_item(self, item: dict[str, Any]) -> Cart:
        """DynamoDBアイテムをCartエンティティに変換."""
        cart_items = tuple(
            CartItem(
                product_id=ProductId(item_data["product_id"]),
                # Decimal を int に変換
                quantity=self._to_int(item_data["quantity"]),
                unit_price=Money.of(Decimal(item_data["unit_price"]), item_data["currency"]),
            )
            for item_data in item.get("items", [])
        )

        return Cart(
            cart_id=CartId(item["cart_id"]),
            items=cart_items,
            created_at=datetime.fromisoformat(item["created_at"]),
            updated_at=datetime.fromisoformat(item["updated_at"]),
            version=self._to_int(item.get("version", 0)),
        )

    @staticmethod
    def _to_int(value: Any) -> int:
        """DynamoDBのDecimalをintに変換."""
        return int(value)
