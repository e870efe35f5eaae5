"""World of Tanks クライアント

Wargaming.net 共通メソッド (アカウント / クラン / WGTV / サーバー) を提供する。
"""
from __future__ import annotations

from concurrent.futures import Future
from typing import Any, Mapping, Optional

from wargamingApi.base import BaseWgClient, query_operation
from wargamingApi.config import TANKS

Queries = Optional[Mapping[str, Any]]


class TanksClient(BaseWgClient):
    """World of Tanks APIクライアント

    各メソッドは queries (追加の任意パラメータ) を受け取り、
    パース済みJSONを結果とする Future を返す。
    リスト値はカンマ区切り文字列にしてから渡すこと。
    """

    PRODUCT = TANKS

    # ------------------------------------------------------------------
    # Account
    # ------------------------------------------------------------------
    def get_list_of_accounts(self, search: str, queries: Queries = None) -> Future:
        """プレイヤー名で検索したアカウント一覧 (名前順)

        Args:
            search: プレイヤー名の検索文字列 (最大24文字)。
                type=exact の場合はカンマ区切りで複数指定可
            queries: 追加パラメータ
        """
        return self.invoke("account.list", queries, search=search)

    def get_account_information(self, account_id: Any, queries: Queries = None) -> Future:
        """アカウント詳細

        Args:
            account_id: プレイヤーID (最大100件、カンマ区切り)
            queries: 追加パラメータ
        """
        return self.invoke("account.info", queries, account_id=account_id)

    # ------------------------------------------------------------------
    # Clans
    # ------------------------------------------------------------------
    get_clans = query_operation(
        "clans.list",
        "クラン検索。タグ完全一致 -> 名前完全一致 -> 部分一致 の順に並ぶ (大文字小文字無視)",
    )

    def get_clan_details(self, clan_id: Any, queries: Queries = None) -> Future:
        """クラン詳細 (clan_id は最大100件)"""
        return self.invoke("clans.info", queries, clan_id=clan_id)

    def get_clan_member_details(self, account_id: Any, queries: Queries = None) -> Future:
        """クランメンバー情報とクランの概要 (account_id は最大100件)"""
        return self.invoke("clans.membersinfo", queries, account_id=account_id)

    get_clan_glossary = query_operation("clans.glossary", "クラン関連の用語一覧")

    def get_message_board(self, access_token: str, queries: Queries = None) -> Future:
        """クラン掲示板のメッセージ

        Args:
            access_token: 認証メソッドで取得したアクセストークン
            queries: 追加パラメータ
        """
        return self.invoke("clans.messageboard", queries, access_token=access_token)

    def get_players_clan_history(self, account_id: Any, queries: Queries = None) -> Future:
        """プレイヤーのクラン所属履歴 (直近10件)"""
        return self.invoke("clans.memberhistory", queries, account_id=account_id)

    # ------------------------------------------------------------------
    # WGTV
    # ------------------------------------------------------------------
    get_wgtv_tags = query_operation("wgtv.wgs", "ゲームプロジェクト・カテゴリ・番組の一覧")
    get_wgtv_list_of_videos = query_operation("wgtv.videos", "条件で絞り込んだ動画一覧")
    get_wgtv_vehicles = query_operation("wgtv.vehicles", "動画で扱われている車両の一覧")

    # ------------------------------------------------------------------
    # Servers
    # ------------------------------------------------------------------
    get_server_online_players = query_operation("servers.info", "サーバーごとのオンライン人数")
