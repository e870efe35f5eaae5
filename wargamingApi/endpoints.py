"""エンドポイント定義

(product, operation) -> URLパス の静的テーブル。
パスが None のオペレーションはリモート仕様が未定義 (未実装) であることを示す。
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from wargamingApi.base.errors import UnknownOperationError

tanks_endpoints = {
    "account.list": "wgn/account/list/",
    "account.info": "wgn/account/info/",

    "clans.list": "wgn/clans/list/",
    "clans.info": "wgn/clans/info/",
    "clans.membersinfo": "wgn/clans/membersinfo/",
    "clans.glossary": "wgn/clans/glossary/",
    "clans.messageboard": "wgn/clans/messageboard/",
    "clans.memberhistory": "wgn/clans/memberhistory/",

    "wgtv.wgs": "wgn/wgtv/wgs/",
    "wgtv.videos": "wgn/wgtv/videos/",
    "wgtv.vehicles": "wgn/wgtv/vehicles/",

    "servers.info": "wgn/servers/info/",
}

warplanes_endpoints: dict[str, Optional[str]] = dict.fromkeys([
    "account.list",
    "account.info",
    "account.planes",
    "account.achievements",

    "encyclopedia.planes",
    "encyclopedia.planeinfo",
    "encyclopedia.planemodules",
    "encyclopedia.planeupgrades",
    "encyclopedia.planespecification",
    "encyclopedia.achievements",
    "encyclopedia.info",

    "ratings.types",
    "ratings.accounts",
    "ratings.neighbors",
    "ratings.top",
    "ratings.dates",

    "planes.stats",
    "planes.achievements",
])

warships_endpoints: dict[str, Optional[str]] = dict.fromkeys([
    "account.list",
    "account.info",
    "account.achievements",
    "account.statsbydate",

    "encyclopedia.info",
    "encyclopedia.ships",
    "encyclopedia.achievements",
    "encyclopedia.shipprofile",
    "encyclopedia.modules",
    "encyclopedia.accountlevels",
    "encyclopedia.crews",
    "encyclopedia.crewskills",
    "encyclopedia.crewranks",
    "encyclopedia.battletypes",
    "encyclopedia.consumables",
    "encyclopedia.collections",
    "encyclopedia.collectioncards",
    "encyclopedia.battlearenas",

    "ships.stats",

    "seasons.info",
    "seasons.shipstats",
    "seasons.accountinfo",

    "clans.list",
    "clans.info",
    "clans.accountinfo",
    "clans.glossary",
    "clans.season",
])


class EndpointRegistry:
    """(product, operation) からURLパスを引く読み取り専用レジストリ"""

    def __init__(self, table: Mapping[str, Mapping[str, Optional[str]]]) -> None:
        self._table = MappingProxyType({
            product: MappingProxyType(dict(ops))
            for product, ops in table.items()
        })

    @property
    def products(self) -> list[str]:
        return list(self._table)

    def operations(self, product: str) -> list[str]:
        """プロダクトに列挙されている全オペレーション名"""
        try:
            return list(self._table[product])
        except KeyError:
            raise UnknownOperationError(product, "*") from None

    def lookup(self, product: str, operation: str) -> Optional[str]:
        """オペレーションのURLパスを返す。

        Returns:
            パス (例: "wgn/account/info/")。未実装オペレーションは None。

        Raises:
            UnknownOperationError: product / operation が列挙されていない
        """
        try:
            return self._table[product][operation]
        except KeyError:
            raise UnknownOperationError(product, operation) from None

    def is_implemented(self, product: str, operation: str) -> bool:
        return self.lookup(product, operation) is not None


registry = EndpointRegistry({
    "tanks": tanks_endpoints,
    "warplanes": warplanes_endpoints,
    "warships": warships_endpoints,
})
