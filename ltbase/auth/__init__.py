"""请求签名模块"""

from .signing_string import SigningContext, build_signing_string, hash_body, trim_url
from .signer import AuthSigner, current_millis, parse_authorization_header

__all__ = [
    "SigningContext",
    "build_signing_string",
    "hash_body",
    "trim_url",
    "AuthSigner",
    "current_millis",
    "parse_authorization_header",
]
