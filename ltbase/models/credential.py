"""
访问凭证模型

Access Secret 格式: `SK_` + Base64Url(PKCS#8 DER 编码的 Ed25519 私钥)。
前缀和密钥内容在签名时才校验，构造时不做检查。
"""

import binascii

from pydantic import BaseModel, ConfigDict, SecretStr

from ..constants import SECRET_PREFIX
from ..errors import ConfigurationError, InvalidKeyFormat
from ..utils.base64url import b64url_decode, b64url_encode
from ..utils.ed25519_signer import Ed25519Signer


class Credential(BaseModel):
    """访问凭证

    创建后不可修改，Secret 以 SecretStr 保存，不会出现在 repr 和日志中。
    """

    model_config = ConfigDict(frozen=True)

    access_key_id: str
    access_secret: SecretStr

    def private_key_der(self) -> bytes:
        """解码 Access Secret 得到 PKCS#8 DER 私钥

        Returns:
            DER 格式私钥字节

        Raises:
            ConfigurationError: Secret 缺少 `SK_` 前缀
            InvalidKeyFormat: 前缀之后的内容不是合法的 Base64Url
        """
        secret = self.access_secret.get_secret_value()
        if not secret.startswith(SECRET_PREFIX):
            raise ConfigurationError(
                f"Invalid access secret format. Must start with {SECRET_PREFIX}"
            )

        try:
            return b64url_decode(secret[len(SECRET_PREFIX):])
        except (binascii.Error, ValueError) as e:
            raise InvalidKeyFormat(f"Access secret is not valid base64url: {e}") from e

    def signer(self) -> Ed25519Signer:
        """构建 Ed25519 签名器"""
        return Ed25519Signer(self.private_key_der())

    @classmethod
    def generate(cls, access_key_id: str) -> "Credential":
        """生成新的凭证（开发和测试用）

        Args:
            access_key_id: Access Key ID

        Returns:
            包含新 Ed25519 私钥的凭证
        """
        private_der, _ = Ed25519Signer.generate_keypair()
        return cls(
            access_key_id=access_key_id,
            access_secret=SECRET_PREFIX + b64url_encode(private_der),
        )
