"""数据模型模块"""

from .credential import Credential
from .request import QueryParams, QueryValue, RequestBody, RequestOptions
from .response import ApiResponse

__all__ = [
    "Credential",
    "QueryParams",
    "QueryValue",
    "RequestBody",
    "RequestOptions",
    "ApiResponse",
]
