"""LTBase 常量定义"""

from .ltbase import (
    AUTH_SCHEME,
    SECRET_PREFIX,
    DEFAULT_BASE_URL,
    NONCE_SIZE,
    EMPTY_BODY_SHA256,
    LtBaseHeader,
    LtBaseAPI,
)

__all__ = [
    "AUTH_SCHEME",
    "SECRET_PREFIX",
    "DEFAULT_BASE_URL",
    "NONCE_SIZE",
    "EMPTY_BODY_SHA256",
    "LtBaseHeader",
    "LtBaseAPI",
]
