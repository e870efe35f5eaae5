"""World of Warships クライアント

全オペレーションはリモート仕様が未定義のため、
呼び出すと NotImplementedOperationError で失敗済みの Future を返す。
"""
from __future__ import annotations

from wargamingApi.base import BaseWgClient, query_operation
from wargamingApi.config import WARSHIPS


class WarshipsClient(BaseWgClient):
    """World of Warships APIクライアント"""

    PRODUCT = WARSHIPS

    # Account
    get_players = query_operation("account.list")
    get_player_personal_data = query_operation("account.info")
    get_players_achievements = query_operation("account.achievements")
    get_player_statistics = query_operation("account.statsbydate")

    # Encyclopedia
    get_encyclo_information = query_operation("encyclopedia.info")
    get_encyclo_warships = query_operation("encyclopedia.ships")
    get_encyclo_achievements = query_operation("encyclopedia.achievements")
    get_encyclo_ship_parameters = query_operation("encyclopedia.shipprofile")
    get_encyclo_modules = query_operation("encyclopedia.modules")
    get_encyclo_service_record_information = query_operation("encyclopedia.accountlevels")
    get_encyclo_commanders = query_operation("encyclopedia.crews")
    get_encyclo_commander_skills = query_operation("encyclopedia.crewskills")
    get_encyclo_commander_ranks = query_operation("encyclopedia.crewranks")
    get_encyclo_battle_types = query_operation("encyclopedia.battletypes")
    get_encyclo_consumables = query_operation("encyclopedia.consumables")
    get_encyclo_collections = query_operation("encyclopedia.collections")
    get_encyclo_collection_items = query_operation("encyclopedia.collectioncards")
    get_encyclo_maps = query_operation("encyclopedia.battlearenas")

    # Warships
    get_statistics_of_players_ships = query_operation("ships.stats")

    # Seasons
    get_ranked_battles_seasons = query_operation("seasons.info")
    get_ship_statistics_in_ranked_battles = query_operation("seasons.shipstats")
    get_players_statistics_in_ranked_battles = query_operation("seasons.accountinfo")

    # Clans
    get_clans = query_operation("clans.list")
    get_clan_details = query_operation("clans.info")
    get_player_clan_data = query_operation("clans.accountinfo")
    get_clan_glossary = query_operation("clans.glossary")
    get_clan_battle_seasons = query_operation("clans.season")
