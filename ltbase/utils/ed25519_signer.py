"""
Ed25519签名工具模块

用于对LTBase请求签名串进行Ed25519签名。

签名流程：
1. 签名串 (UTF-8) -> Ed25519私钥签名 -> 原始64字节签名
2. 由调用方负责 Base64Url 编码

Ed25519 算法内部自带哈希，调用方不能对消息预先做摘要。
"""

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519

from ..errors import InvalidKeyFormat, SigningFailure


class Ed25519Signer:
    """Ed25519签名器

    使用PKCS#8格式的Ed25519私钥对签名串进行签名。

    Args:
        private_key_der: Ed25519私钥（PKCS#8 DER格式，也兼容PEM）
    """

    def __init__(self, private_key_der: bytes) -> None:
        """初始化签名器

        Args:
            private_key_der: Ed25519私钥的PKCS#8 DER格式字节

        Raises:
            InvalidKeyFormat: 如果私钥无效或不是Ed25519密钥
        """
        try:
            private_key = serialization.load_der_private_key(private_key_der, password=None)
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            # 尝试作为PEM格式解析
            try:
                private_key = serialization.load_pem_private_key(private_key_der, password=None)
            except (ValueError, TypeError, UnsupportedAlgorithm):
                raise InvalidKeyFormat(f"Invalid Ed25519 private key: {e}") from e

        if not isinstance(private_key, ed25519.Ed25519PrivateKey):
            raise InvalidKeyFormat("Key is not an Ed25519 key")

        self._private_key = private_key

    def sign(self, message: str) -> bytes:
        """对签名串进行签名

        Args:
            message: 规范化后的签名串

        Returns:
            原始签名字节（固定64字节）

        Raises:
            SigningFailure: 如果签名原语执行失败
        """
        try:
            return self._private_key.sign(message.encode("utf-8"))
        except (ValueError, TypeError) as e:
            raise SigningFailure(f"Ed25519 signing failed: {e}") from e

    def verify(self, message: str, signature: bytes) -> bool:
        """验证签名

        Args:
            message: 原始签名串
            signature: 原始签名字节

        Returns:
            签名是否有效
        """
        try:
            self._private_key.public_key().verify(signature, message.encode("utf-8"))
            return True
        except InvalidSignature:
            return False
        except (ValueError, TypeError):
            return False

    def public_key_bytes(self) -> bytes:
        """返回32字节原始公钥"""
        return self._private_key.public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )

    @staticmethod
    def generate_keypair() -> tuple[bytes, bytes]:
        """生成Ed25519密钥对

        Returns:
            (私钥PKCS#8 DER, 32字节原始公钥)元组
        """
        private_key = ed25519.Ed25519PrivateKey.generate()

        private_der = private_key.private_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )

        public_raw = private_key.public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )

        return private_der, public_raw
