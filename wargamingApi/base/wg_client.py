"""Wargaming API共通基盤クラス

各プロダクトクライアントが共有するリクエスト組み立て・送信処理を提供する。
- リージョン -> ホスト名セグメント解決 (構築時に1回だけ)
- application_id などの必須パラメータの注入
- (product, operation) -> URLパス解決
- 1回のGET送信と Future (保留中の結果) の返却
"""
from __future__ import annotations

import logging
import os
from abc import ABC
from concurrent.futures import Future
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

from dotenv import load_dotenv

from wargamingApi.base.errors import NotImplementedOperationError
from wargamingApi.base.executor import HttpExecutor, RequestsExecutor
from wargamingApi.base.params import merge_params
from wargamingApi.base.region import resolve_region
from wargamingApi.config import DEFAULT_HOSTS, ProductConfig
from wargamingApi.endpoints import EndpointRegistry, registry as default_registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WgApiConfig:
    """Wargaming API接続設定

    Attributes:
        application_id: Wargaming Application ID
        region: リージョンコード ("na", "eu", "ru", "asia")
        timeout: HTTPタイムアウト(秒)
        max_workers: 既定トランスポートの並列スレッド数
        hosts: プロダクト名 -> ホスト名 の上書き (例: {"warships": "worldofwarships"})
        wire_segment: region から解決済みのホスト名セグメント (自動設定)
    """

    application_id: str
    region: str = "na"
    timeout: float = 10
    max_workers: int = 6
    hosts: Mapping[str, str] = field(default_factory=dict, repr=False)
    wire_segment: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "wire_segment", resolve_region(self.region))
        object.__setattr__(
            self, "hosts", MappingProxyType({**DEFAULT_HOSTS, **self.hosts}),
        )

    @classmethod
    def from_env(cls, env_file: Optional[str] = None, **kwargs: Any) -> "WgApiConfig":
        """環境変数 (および .env ファイル) から設定を作成する。

        WG_APPLICATION_ID (必須) と WG_REGION (既定 "na") を読む。
        region を引数で渡した場合は WG_REGION より優先する。
        """
        load_dotenv(env_file)
        application_id = os.getenv("WG_APPLICATION_ID")
        if not application_id:
            raise ValueError("WG_APPLICATION_ID is not set")
        kwargs.setdefault("region", os.getenv("WG_REGION", "na"))
        return cls(application_id=application_id, **kwargs)

    def host_for(self, product: str) -> str:
        """プロダクトのホスト名 (例: tanks -> worldoftanks)"""
        return self.hosts[product]

    def base_url(self, product: str) -> str:
        """プロダクトのAPIベースURL (例: https://api.worldoftanks.com)"""
        return f"https://api.{self.host_for(product)}.{self.wire_segment}"


@dataclass(frozen=True)
class WgRequest:
    """送信直前のリクエスト (URL + クエリパラメータ)"""

    url: str
    params: Mapping[str, Any]


class BaseWgClient(ABC):
    """Wargaming API呼び出しの共通基盤クラス

    プロダクトごとの差分は PRODUCT (ProductConfig) だけで、
    サブクラスは invoke() に固定のオペレーション名を渡すメソッドを並べる。

    サブクラス:
        - TanksClient: World of Tanks / Wargaming.net 共通メソッド
        - WarplanesClient: World of Warplanes
        - WarshipsClient: World of Warships
    """

    PRODUCT: ProductConfig

    def __init__(
        self,
        config: WgApiConfig,
        executor: Optional[HttpExecutor] = None,
        registry: Optional[EndpointRegistry] = None,
    ) -> None:
        self._config = config
        self._owns_executor = executor is None
        self._executor = executor or RequestsExecutor(
            timeout=config.timeout, max_workers=config.max_workers,
        )
        self._registry = registry or default_registry

    @property
    def config(self) -> WgApiConfig:
        return self._config

    @property
    def product(self) -> str:
        return self.PRODUCT.name

    @property
    def base_url(self) -> str:
        return self._config.base_url(self.product)

    # ------------------------------------------------------------------
    # Request building / dispatch
    # ------------------------------------------------------------------
    def build_request(
        self,
        operation: str,
        queries: Optional[Mapping[str, Any]] = None,
        **mandatory: Any,
    ) -> WgRequest:
        """オペレーションのリクエストを組み立てる (送信はしない)。

        Args:
            operation: オペレーション名 (例: "account.info")
            queries: 呼び出し元の追加パラメータ (変更されない)
            **mandatory: account_id などの必須パラメータ

        Raises:
            UnknownOperationError: 列挙されていないオペレーション
            NotImplementedOperationError: パス未定義のオペレーション
        """
        path = self._registry.lookup(self.product, operation)
        if path is None:
            raise NotImplementedOperationError(self.product, operation)
        params = merge_params(
            {"application_id": self._config.application_id, **mandatory},
            queries,
        )
        return WgRequest(url=f"{self.base_url}/{path}", params=params)

    def invoke(
        self,
        operation: str,
        queries: Optional[Mapping[str, Any]] = None,
        **mandatory: Any,
    ) -> Future:
        """リクエストを1回送信し、パース済みJSONの Future を返す。

        未実装オペレーションは送信せず、NotImplementedOperationError で
        失敗済みの Future を返す。
        """
        try:
            request = self.build_request(operation, queries, **mandatory)
        except NotImplementedOperationError as e:
            logger.warning("%s", e)
            future: Future = Future()
            future.set_exception(e)
            return future

        logger.debug("%s %s -> GET %s", self.product, operation, request.url)
        return self._executor.get(request.url, request.params)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def close(self, wait: bool = True) -> None:
        """自前で作成したトランスポートを停止する (注入されたものは停止しない)。"""
        if self._owns_executor:
            self._executor.shutdown(wait=wait)

    def __enter__(self) -> "BaseWgClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class query_operation:
    """必須パラメータを持たないオペレーションのメソッドを生成するディスクリプタ

    生成されるメソッドのシグネチャは (self, queries=None) -> Future。
    クラスに束縛された時点で __name__ / __qualname__ を属性名に合わせる。
    """

    def __init__(self, operation: str, doc: Optional[str] = None) -> None:
        self.operation = operation
        self._doc = doc

        def method(self: BaseWgClient, queries: Optional[Mapping[str, Any]] = None) -> Future:
            return self.invoke(operation, queries)

        self._method = method

    def __set_name__(self, owner: type, name: str) -> None:
        self._method.__name__ = name
        self._method.__qualname__ = f"{owner.__qualname__}.{name}"
        product = getattr(owner, "PRODUCT", None)
        title = product.title if product is not None else owner.__name__
        self._method.__doc__ = self._doc or (
            f"{title} の {self.operation} を呼び出す。\n\n"
            "Args:\n"
            "    queries: 追加パラメータ\n\n"
            "Returns:\n"
            "    パース済みJSONを結果とする Future"
        )

    def __get__(self, obj: Any, objtype: Optional[type] = None) -> Callable[..., Future]:
        return self._method.__get__(obj, objtype)
