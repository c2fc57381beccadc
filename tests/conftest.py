"""
测试配置

提供测试用的 Ed25519 密钥和凭证。
"""

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519

from ltbase.models.credential import Credential
from ltbase.utils.base64url import b64url_encode


def to_secret(private_key: ed25519.Ed25519PrivateKey) -> str:
    """将私钥编码为 SK_ 格式的 Access Secret"""
    der = private_key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    return "SK_" + b64url_encode(der)


@pytest.fixture
def private_key() -> ed25519.Ed25519PrivateKey:
    return ed25519.Ed25519PrivateKey.generate()


@pytest.fixture
def public_key(private_key) -> ed25519.Ed25519PublicKey:
    return private_key.public_key()


@pytest.fixture
def credential(private_key) -> Credential:
    return Credential(access_key_id="AK_test", access_secret=to_secret(private_key))
