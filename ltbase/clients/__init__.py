"""LTBase 客户端模块"""

from .base_http_client import LtBaseHTTPClient
from .api_client import ApiClient
from .query import build_query_string, serialize_body, split_url, stringify_value
from .response_decoder import decode_body, extract_charset

__all__ = [
    "LtBaseHTTPClient",
    "ApiClient",
    "build_query_string",
    "serialize_body",
    "split_url",
    "stringify_value",
    "decode_body",
    "extract_charset",
]
