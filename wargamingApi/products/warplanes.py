"""World of Warplanes クライアント (全オペレーション未実装)"""
from __future__ import annotations

from wargamingApi.base import BaseWgClient, query_operation
from wargamingApi.config import WARPLANES


class WarplanesClient(BaseWgClient):

    PRODUCT = WARPLANES

    # Account
    get_players = query_operation("account.list")
    get_player_personal_data = query_operation("account.info")
    get_player_planes = query_operation("account.planes")
    get_players_achievements = query_operation("account.achievements")

    # Encyclopedia
    get_encyclo_planes = query_operation("encyclopedia.planes")
    get_encyclo_plane_information = query_operation("encyclopedia.planeinfo")
    get_encyclo_plane_modules = query_operation("encyclopedia.planemodules")
    get_encyclo_plane_upgrades = query_operation("encyclopedia.planeupgrades")
    get_encyclo_plane_specification = query_operation("encyclopedia.planespecification")
    get_encyclo_achievements = query_operation("encyclopedia.achievements")
    get_encyclo_information = query_operation("encyclopedia.info")

    # Ratings
    get_rating_types = query_operation("ratings.types")
    get_player_ratings = query_operation("ratings.accounts")
    get_adjacent_positions_in_ratings = query_operation("ratings.neighbors")
    get_top_players = query_operation("ratings.top")
    get_rating_dates = query_operation("ratings.dates")

    # Planes
    get_plane_statistics = query_operation("planes.stats")
    get_plane_achievements = query_operation("planes.achievements")
