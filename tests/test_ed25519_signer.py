"""
测试Ed25519签名工具模块

测试签名工具能够用PKCS#8私钥对签名串进行Ed25519签名：
- 签名流程：签名串(UTF-8) -> Ed25519私钥签名 -> 64字节原始签名
"""

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519, rsa


def to_der(private_key) -> bytes:
    return private_key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )


class TestEd25519Signer:
    """Ed25519签名工具测试"""

    def test_sign_returns_raw_signature(self):
        """测试签名返回64字节原始签名"""
        from ltbase.utils.ed25519_signer import Ed25519Signer

        private_key = ed25519.Ed25519PrivateKey.generate()
        signer = Ed25519Signer(to_der(private_key))

        result = signer.sign("GET\nhttps://api.example.com/v1/notes")

        assert isinstance(result, bytes)
        assert len(result) == 64  # Ed25519签名固定64字节

    def test_signature_verifies_with_public_key(self):
        """测试签名可以用公钥验证（签名前不做预哈希）"""
        from ltbase.utils.ed25519_signer import Ed25519Signer

        private_key = ed25519.Ed25519PrivateKey.generate()
        signer = Ed25519Signer(to_der(private_key))
        message = "POST\nhttps://api.example.com/v1/notes\n\nabc\n1700000000000\nnonce"

        signature = signer.sign(message)

        # 验证失败会抛出 InvalidSignature
        private_key.public_key().verify(signature, message.encode("utf-8"))

    def test_sign_encodes_utf8(self):
        """测试非ASCII签名串按UTF-8编码"""
        from ltbase.utils.ed25519_signer import Ed25519Signer

        private_key = ed25519.Ed25519PrivateKey.generate()
        signer = Ed25519Signer(to_der(private_key))
        message = "POST\nhttps://api.example.com/备注"

        signature = signer.sign(message)

        private_key.public_key().verify(signature, message.encode("utf-8"))

    def test_verify(self):
        """测试verify方法"""
        from ltbase.utils.ed25519_signer import Ed25519Signer

        signer = Ed25519Signer(to_der(ed25519.Ed25519PrivateKey.generate()))
        signature = signer.sign("payload")

        assert signer.verify("payload", signature) is True
        assert signer.verify("tampered", signature) is False
        assert signer.verify("payload", b"short") is False

    def test_accepts_pem(self):
        """测试兼容PEM格式私钥"""
        from ltbase.utils.ed25519_signer import Ed25519Signer

        private_key = ed25519.Ed25519PrivateKey.generate()
        private_pem = private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )

        signer = Ed25519Signer(private_pem)

        assert signer.public_key_bytes() == Ed25519Signer(to_der(private_key)).public_key_bytes()

    def test_invalid_key_raises(self):
        """测试无效私钥抛出 InvalidKeyFormat"""
        from ltbase.errors import ConfigurationError, InvalidKeyFormat
        from ltbase.utils.ed25519_signer import Ed25519Signer

        with pytest.raises(InvalidKeyFormat):
            Ed25519Signer(b"not a key")

        # InvalidKeyFormat 属于配置错误
        with pytest.raises(ConfigurationError):
            Ed25519Signer(b"\x30\x00")

    def test_non_ed25519_key_raises(self):
        """测试非Ed25519私钥被拒绝"""
        from ltbase.errors import InvalidKeyFormat
        from ltbase.utils.ed25519_signer import Ed25519Signer

        rsa_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)

        with pytest.raises(InvalidKeyFormat, match="not an Ed25519 key"):
            Ed25519Signer(to_der(rsa_key))

    def test_generate_keypair(self):
        """测试生成密钥对"""
        from ltbase.utils.ed25519_signer import Ed25519Signer

        private_der, public_raw = Ed25519Signer.generate_keypair()

        assert len(public_raw) == 32
        signer = Ed25519Signer(private_der)
        assert signer.public_key_bytes() == public_raw

        public_key = ed25519.Ed25519PublicKey.from_public_bytes(public_raw)
        public_key.verify(signer.sign("hello"), b"hello")
