"""リージョンコード -> ホスト名セグメント解決"""
from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

KNOWN_REGIONS = frozenset({"na", "eu", "ru", "asia"})


def resolve_region(code: str) -> str:
    """リージョンコードをURLのホスト名末尾セグメントに変換する。

    "na" のみ "com" に変換され、それ以外はそのまま返る。
    未知のコードも拒否せず素通しする (警告ログのみ)。

    Args:
        code: リージョンコード (例: "na", "eu", "ru", "asia")

    Returns:
        ホスト名セグメント (例: "na" -> "com", "eu" -> "eu")
    """
    if code not in KNOWN_REGIONS:
        logger.warning("Unknown region %r, using it as host segment as-is", code)
    if code == "na":
        return "com"
    return code
