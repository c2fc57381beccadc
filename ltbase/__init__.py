"""
LTBase SDK

对 LTBase API 的每个请求进行 Ed25519 签名认证。
"""

from .auth import AuthSigner, SigningContext, build_signing_string, parse_authorization_header
from .clients import ApiClient, build_query_string, decode_body, serialize_body
from .config import Settings, configure_logging
from .errors import (
    ConfigurationError,
    DecodingError,
    HttpError,
    InvalidKeyFormat,
    InvalidRequestBody,
    LtBaseError,
    SigningFailure,
    TransportError,
)
from .models import ApiResponse, Credential, QueryParams, RequestBody, RequestOptions

__version__ = "0.1.0"

__all__ = [
    "AuthSigner",
    "SigningContext",
    "build_signing_string",
    "parse_authorization_header",
    "ApiClient",
    "build_query_string",
    "decode_body",
    "serialize_body",
    "Settings",
    "configure_logging",
    "ConfigurationError",
    "DecodingError",
    "HttpError",
    "InvalidKeyFormat",
    "InvalidRequestBody",
    "LtBaseError",
    "SigningFailure",
    "TransportError",
    "ApiResponse",
    "Credential",
    "QueryParams",
    "RequestBody",
    "RequestOptions",
]
