"""wargamingApi 共通設定

プロダクト (ゲームタイトル) ごとの識別子と既定ホスト名を集約する。
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductConfig:
    """プロダクト設定

    Attributes:
        name: レジストリ上のプロダクト名 (例: "tanks")
        title: 表示名
        default_host: api.<host>.<segment> の <host> 部分の既定値
    """

    name: str
    title: str
    default_host: str = "worldoftanks"


# 既定ホストは3タイトルとも worldoftanks。
# タイトル別のホストは WgApiConfig(hosts=...) で明示的に与える。
TANKS = ProductConfig(name="tanks", title="World of Tanks")
WARPLANES = ProductConfig(name="warplanes", title="World of Warplanes")
WARSHIPS = ProductConfig(name="warships", title="World of Warships")

PRODUCTS: dict[str, ProductConfig] = {
    p.name: p for p in (TANKS, WARPLANES, WARSHIPS)
}

DEFAULT_HOSTS: dict[str, str] = {
    name: p.default_host for name, p in PRODUCTS.items()
}
