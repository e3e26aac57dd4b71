"""ユースケース失敗種別の列挙型."""
from enum import Enum


class ErrorKind(Enum):
    """ユースケースが返す失敗の種別."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"

    def get_status_code(self) -> int:
        """対応するHTTPステータスコードを返す."""
        codes = {
            ErrorKind.VALIDATION: 400,
            ErrorKind.NOT_FOUND: 404,
            ErrorKind.CONFLICT: 409,
            ErrorKind.INTERNAL: 500,
        }
        return codes[self]
