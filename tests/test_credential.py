"""
测试访问凭证模型
"""

import pytest
from pydantic import ValidationError

from ltbase.errors import ConfigurationError, InvalidKeyFormat
from ltbase.models.credential import Credential
from ltbase.utils.base64url import b64url_decode


class TestCredential:
    """Credential 测试"""

    def test_construction_does_not_validate_secret(self):
        """测试构造时不校验 Secret，延迟到签名时"""
        credential = Credential(access_key_id="AK_1", access_secret="not-a-secret")

        assert credential.access_key_id == "AK_1"
        with pytest.raises(ConfigurationError, match="Must start with SK_"):
            credential.private_key_der()

    def test_secret_hidden_in_repr(self, credential):
        """测试 Secret 不出现在 repr 中"""
        secret = credential.access_secret.get_secret_value()

        assert secret not in repr(credential)
        assert secret not in str(credential)

    def test_frozen(self, credential):
        """测试凭证不可修改"""
        with pytest.raises(ValidationError):
            credential.access_key_id = "AK_other"

    def test_private_key_der_decodes_secret(self, credential, private_key):
        """测试解码 Secret 得到 PKCS#8 DER"""
        from cryptography.hazmat.primitives import serialization

        expected = private_key.private_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )

        assert credential.private_key_der() == expected

    def test_invalid_base64_raises_invalid_key_format(self):
        """测试前缀正确但内容不是 Base64Url"""
        credential = Credential(access_key_id="AK_1", access_secret="SK_@@@@")

        with pytest.raises(InvalidKeyFormat):
            credential.private_key_der()

    def test_undecodable_key_raises_invalid_key_format(self):
        """测试 Base64Url 合法但不是私钥"""
        credential = Credential(access_key_id="AK_1", access_secret="SK_aGVsbG8")

        with pytest.raises(InvalidKeyFormat):
            credential.signer()

    def test_generate(self):
        """测试生成新凭证"""
        credential = Credential.generate("AK_new")
        secret = credential.access_secret.get_secret_value()

        assert credential.access_key_id == "AK_new"
        assert secret.startswith("SK_")
        assert "=" not in secret
        assert b64url_decode(secret[3:]) == credential.private_key_der()
        assert len(credential.signer().sign("x")) == 64
