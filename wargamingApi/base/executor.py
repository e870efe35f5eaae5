"""HTTP GET 実行層

BaseWgClient が組み立てたリクエストを実際に送信する。
- 1回の get() につき1回のGETリクエスト (リトライ・キャッシュなし)
- 結果は concurrent.futures.Future として即座に返す
- 失敗 (接続エラー / タイムアウト / 非2xx / 不正JSON) は Future の例外になる
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Mapping

import requests

logger = logging.getLogger(__name__)


class HttpExecutor(ABC):
    """GETリクエストを非同期に実行するトランスポートの抽象基底クラス

    サブクラス:
        - RequestsExecutor: requests + スレッドプールによる既定実装
    """

    @abstractmethod
    def get(self, url: str, params: Mapping[str, Any]) -> Future:
        """GETを発行し、パース済みJSONを結果とする Future を返す。"""

    def shutdown(self, wait: bool = True) -> None:
        """保持しているリソースを解放する。"""


class RequestsExecutor(HttpExecutor):
    """requests.get をスレッドプール上で実行する既定トランスポート

    呼び出しスレッドはブロックされない。asyncio から使う場合は
    asyncio.wrap_future(future) で await 可能になる。
    """

    def __init__(self, timeout: float = 10, max_workers: int = 6) -> None:
        self._timeout = timeout
        self._pool = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="wgapi",
        )

    @property
    def timeout(self) -> float:
        return self._timeout

    def get(self, url: str, params: Mapping[str, Any]) -> Future:
        return self._pool.submit(self._fetch, url, dict(params))

    def _fetch(self, url: str, params: dict[str, Any]) -> Any:
        try:
            resp = requests.get(url, params=params, timeout=self._timeout)
            resp.raise_for_status()
            return resp.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("GET %s failed: %s", url, e)
            raise

    def shutdown(self, wait: bool = True) -> None:
        self._pool.shutdown(wait=wait)
