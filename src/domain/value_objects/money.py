"""金額を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from ..errors import CurrencyMismatchError, InvalidAmountError, InvalidCurrencyError

DEFAULT_CURRENCY = "USD"

# 小数点以下2桁
_CENT = Decimal("0.01")

# 金額計算の有効桁数（整数部98桁 + 小数部2桁）
_PRECISION = 100


def _to_decimal(amount: object) -> Decimal:
    """数値をDecimalに変換する."""
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        raise InvalidAmountError(amount)
    # floatは表示上の値で変換する（0.1 → Decimal("0.1")）
    value = Decimal(str(amount)) if isinstance(amount, float) else Decimal(amount)
    if not value.is_finite() or value < 0:
        raise InvalidAmountError(amount)
    return value


def _round_to_cent(value: Decimal) -> Decimal:
    """小数点以下2桁に丸める（有効桁数を超える金額は不正とする）."""
    try:
        with localcontext() as ctx:
            ctx.prec = _PRECISION
            return value.quantize(_CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise InvalidAmountError(value) from None


@dataclass(frozen=True)
class Money:
    """通貨付きの金額を表現する値オブジェクト.

    金額は生成時に小数点以下2桁へ丸められる（ROUND_HALF_UP）。
    通貨の異なるMoney同士は加算できない。
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        """バリデーションと丸め."""
        if not isinstance(self.currency, str) or not self.currency.strip():
            raise InvalidCurrencyError(self.currency)
        object.__setattr__(self, "amount", _round_to_cent(_to_decimal(self.amount)))

    @classmethod
    def of(cls, amount: int | float | Decimal, currency: str = DEFAULT_CURRENCY) -> Money:
        """指定金額でMoneyを生成する."""
        return cls(amount, currency)

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> Money:
        """ゼロ金額を生成する."""
        return cls(Decimal(0), currency)

    def add(self, other: Money) -> Money:
        """金額を加算して新しいMoneyを返す."""
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency, other.currency)
        with localcontext() as ctx:
            ctx.prec = _PRECISION
            total = self.amount + other.amount
        return Money(total, self.currency)

    def multiply(self, factor: int) -> Money:
        """金額を乗算して新しいMoneyを返す."""
        if factor < 0:
            raise ValueError("Factor cannot be negative")
        with localcontext() as ctx:
            ctx.prec = _PRECISION
            product = self.amount * factor
        return Money(product, self.currency)

    def is_zero(self) -> bool:
        """ゼロ金額か判定する."""
        return self.amount == 0

    def to_dict(self) -> dict:
        """シリアライズ用の辞書に変換する."""
        return {"amount": float(self.amount), "currency": self.currency}

    def format(self) -> str:
        """表示用フォーマット（例: "27.97 USD"）."""
        return f"{self.amount} {self.currency}"

    def __str__(self) -> str:
        """文字列表現."""
        return self.format()
