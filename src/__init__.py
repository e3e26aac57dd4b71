"""ショッピングカートサービスのパッケージ."""
from . import domain

# infrastructure は boto3 に依存する実装を含むため、
# 必要な場所で明示的にインポートする
# from . import infrastructure

__all__ = ["domain"]
