"""wargamingApi ABC基盤モジュール"""

from .errors import NotImplementedOperationError, UnknownOperationError, WgApiError
from .executor import HttpExecutor, RequestsExecutor
from .params import merge_params
from .region import resolve_region
from .wg_client import BaseWgClient, WgApiConfig, WgRequest, query_operation

__all__ = [
    "BaseWgClient",
    "WgApiConfig",
    "WgRequest",
    "query_operation",
    "HttpExecutor",
    "RequestsExecutor",
    "merge_params",
    "resolve_region",
    "WgApiError",
    "UnknownOperationError",
    "NotImplementedOperationError",
]
