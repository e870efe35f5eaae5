"""wargamingApi 例外定義

トランスポート由来の失敗 (requests.RequestException 系) はラップせずそのまま伝播させる。
ここではライブラリ自身が判定するエラーのみを定義する。
"""
from __future__ import annotations


class WgApiError(Exception):
    """wargamingApi が送出する例外の基底クラス"""


class UnknownOperationError(WgApiError, LookupError):
    """レジストリに存在しない (product, operation) の組を参照した

    設定ミス (プログラムの欠陥) であり、実行時に回復すべき状態ではない。
    """

    def __init__(self, product: str, operation: str) -> None:
        super().__init__(f"Unknown operation {operation!r} for product {product!r}")
        self.product = product
        self.operation = operation


class NotImplementedOperationError(WgApiError, NotImplementedError):
    """列挙済みだがリモート仕様が未定義のオペレーション"""

    def __init__(self, product: str, operation: str) -> None:
        super().__init__(f"{product}: operation {operation!r} is not implemented yet")
        self.product = product
        self.operation = operation
