"""wargamingApi - Wargaming.net 公開API (World of Tanks / Warplanes / Warships) 統合クライアント"""

__version__ = "1.0.0"

from .base import (
    BaseWgClient,
    HttpExecutor,
    NotImplementedOperationError,
    RequestsExecutor,
    UnknownOperationError,
    WgApiConfig,
    WgApiError,
)
from .client import WargamingClient
from .config import ProductConfig
from .endpoints import EndpointRegistry
from .products import TanksClient, WarplanesClient, WarshipsClient

__all__ = [
    "__version__",
    "WargamingClient",
    "WgApiConfig",
    "ProductConfig",
    "EndpointRegistry",
    "BaseWgClient",
    "HttpExecutor",
    "RequestsExecutor",
    "TanksClient",
    "WarplanesClient",
    "WarshipsClient",
    "WgApiError",
    "UnknownOperationError",
    "NotImplementedOperationError",
]
