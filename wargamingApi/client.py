"""統合クライアント

application_id とリージョンを1回だけ保持し、プロダクト別クライアントを払い出す。

    with WargamingClient("my-app-id", region="eu") as wg:
        tanks = wg.get_tanks_client()
        info = tanks.get_account_information(123).result()
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from wargamingApi.base import HttpExecutor, RequestsExecutor, WgApiConfig
from wargamingApi.products import TanksClient, WarplanesClient, WarshipsClient

logger = logging.getLogger(__name__)


class WargamingClient:
    """3タイトル共通の入口

    Wargaming.net 共通メソッド (get_list_of_accounts など) は
    TanksClient に委譲して直接呼び出せる。
    """

    # TanksClient へそのまま委譲するメソッド
    PLATFORM_METHODS = frozenset({
        "get_list_of_accounts",
        "get_account_information",
        "get_clans",
        "get_clan_details",
        "get_clan_member_details",
        "get_clan_glossary",
        "get_message_board",
        "get_players_clan_history",
        "get_wgtv_tags",
        "get_wgtv_list_of_videos",
        "get_wgtv_vehicles",
        "get_server_online_players",
    })

    def __init__(
        self,
        application_id: str,
        region: str = "na",
        *,
        hosts: Optional[Mapping[str, str]] = None,
        timeout: float = 10,
        max_workers: int = 6,
        executor: Optional[HttpExecutor] = None,
    ) -> None:
        config = WgApiConfig(
            application_id=application_id,
            region=region,
            timeout=timeout,
            max_workers=max_workers,
            hosts=dict(hosts or {}),
        )
        self._init_from_config(config, executor)

    @classmethod
    def from_config(
        cls,
        config: WgApiConfig,
        executor: Optional[HttpExecutor] = None,
    ) -> "WargamingClient":
        client = cls.__new__(cls)
        client._init_from_config(config, executor)
        return client

    def _init_from_config(
        self, config: WgApiConfig, executor: Optional[HttpExecutor],
    ) -> None:
        self._config = config
        self._owns_executor = executor is None
        self._executor = executor or RequestsExecutor(
            timeout=config.timeout, max_workers=config.max_workers,
        )
        self._tanks = TanksClient(config, self._executor)
        logger.debug(
            "WargamingClient created (region=%s, segment=%s)",
            config.region, config.wire_segment,
        )

    # ------------------------------------------------------------------
    # read-only properties
    # ------------------------------------------------------------------
    @property
    def config(self) -> WgApiConfig:
        return self._config

    @property
    def application_id(self) -> str:
        return self._config.application_id

    @property
    def region(self) -> str:
        return self._config.region

    @property
    def wire_segment(self) -> str:
        return self._config.wire_segment

    # ------------------------------------------------------------------
    # Product clients
    # ------------------------------------------------------------------
    def get_tanks_client(self) -> TanksClient:
        """World of Tanks 用クライアントを作成する。"""
        return TanksClient(self._config, self._executor)

    def get_warplanes_client(self) -> WarplanesClient:
        """World of Warplanes 用クライアントを作成する。"""
        return WarplanesClient(self._config, self._executor)

    def get_warships_client(self) -> WarshipsClient:
        """World of Warships 用クライアントを作成する。"""
        return WarshipsClient(self._config, self._executor)

    def __getattr__(self, name: str) -> Any:
        # __getattr__ は通常の属性解決で見つからない場合のみ呼ばれる
        if name in WargamingClient.PLATFORM_METHODS:
            return getattr(self._tanks, name)
        raise AttributeError(
            f"{type(self).__name__!r} object has no attribute {name!r}"
        )

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | self.PLATFORM_METHODS)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def close(self, wait: bool = True) -> None:
        """自前で作成したトランスポートを停止する (注入されたものは停止しない)。"""
        if self._owns_executor:
            self._executor.shutdown(wait=wait)

    def __enter__(self) -> "WargamingClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
