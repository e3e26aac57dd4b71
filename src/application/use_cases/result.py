"""ユースケース結果の共通部分."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

from src.domain.enums import ErrorKind

ResultT = TypeVar("ResultT", bound="UseCaseResult")


@dataclass(frozen=True)
class UseCaseResult:
    """ユースケース結果の基底.

    失敗時は success=False とし、error にメッセージ、error_kind に種別を持つ。
    ユースケースは例外を送出せず、失敗は必ずこの形で返す。
    """

    success: bool
    error: str | None = None
    error_kind: ErrorKind | None = None

    @classmethod
    def failure(
        cls: type[ResultT], message: str, kind: ErrorKind = ErrorKind.VALIDATION
    ) -> ResultT:
        """失敗結果を生成する."""
        return cls(success=False, error=message, error_kind=kind)
