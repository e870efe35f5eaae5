"""プロダクト (ゲームタイトル) 別クライアント"""

from .tanks import TanksClient
from .warplanes import WarplanesClient
from .warships import WarshipsClient

__all__ = [
    "TanksClient",
    "WarplanesClient",
    "WarshipsClient",
]
