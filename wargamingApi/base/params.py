"""クエリパラメータのマージ処理"""
from __future__ import annotations

from typing import Any, Mapping, Optional


def merge_params(
    mandatory: Mapping[str, Any],
    optional: Optional[Mapping[str, Any]] = None,
) -> dict[str, Any]:
    """任意パラメータに必須パラメータを上書きマージした新しい辞書を返す。

    必須パラメータは最後に書き込まれるため、同名キーは常に必須側が勝つ。
    呼び出し元の optional は変更しない。値の型・長さ・リスト結合は行わない。

    Args:
        mandatory: application_id や account_id などの必須パラメータ
        optional: 呼び出し元が指定した追加パラメータ

    Returns:
        マージ済みパラメータ
    """
    merged: dict[str, Any] = dict(optional) if optional else {}
    merged.update(mandatory)
    return merged
