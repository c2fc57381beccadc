"""工具模块"""

from .base64url import b64url_encode, b64url_decode
from .ed25519_signer import Ed25519Signer

__all__ = [
    "b64url_encode",
    "b64url_decode",
    "Ed25519Signer",
]
