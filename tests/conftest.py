"""共通テストフィクスチャ"""
from __future__ import annotations

from concurrent.futures import Future
from typing import Any, Mapping

import pytest

from wargamingApi.base import HttpExecutor, WgApiConfig


class RecordingExecutor(HttpExecutor):
    """送信せずに (url, params) を記録し、完了済み Future を返すテスト用トランスポート"""

    def __init__(self, response: Any = None) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.response = {"status": "ok"} if response is None else response
        self.shut_down = False

    def get(self, url: str, params: Mapping[str, Any]) -> Future:
        self.calls.append((url, dict(params)))
        future: Future = Future()
        future.set_result(self.response)
        return future

    def shutdown(self, wait: bool = True) -> None:
        self.shut_down = True


@pytest.fixture
def wg_config() -> WgApiConfig:
    """テスト用 WgApiConfig (na リージョン)"""
    return WgApiConfig(application_id="abc123", region="na", timeout=5)


@pytest.fixture
def recorder() -> RecordingExecutor:
    return RecordingExecutor()
