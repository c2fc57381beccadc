"""
LTBase 请求签名器

生成 Authorization 头：

    LtBase <accessKeyId>:<signature>:<timestamp>:<nonce>

签名流程：
1. 取当前毫秒时间戳
2. 生成16字节安全随机数，Base64Url编码（无填充）作为nonce
3. 构建签名串
4. 使用Ed25519私钥签名
5. 签名结果Base64Url编码（无填充）
6. 拼接 Authorization 头

每个请求都重新生成时间戳和nonce，签名结果不缓存、不复用。
签名器本身不做防重放检查，重放窗口由服务端负责。
"""

import logging
import secrets
import time
from typing import Callable, Optional, Union

from ..constants import AUTH_SCHEME, NONCE_SIZE
from ..models.credential import Credential
from ..utils.base64url import b64url_encode
from .signing_string import SigningContext

logger = logging.getLogger(__name__)


def current_millis() -> int:
    """当前毫秒时间戳"""
    return int(time.time() * 1000)


def parse_authorization_header(value: str) -> tuple[str, str, int, str]:
    """拆解 Authorization 头

    Args:
        value: `LtBase <accessKeyId>:<signature>:<timestamp>:<nonce>`

    Returns:
        (access_key_id, signature, timestamp, nonce)元组

    Raises:
        ValueError: 格式不正确
    """
    scheme, _, credentials = value.partition(" ")
    if scheme != AUTH_SCHEME or not credentials:
        raise ValueError(f"Not an {AUTH_SCHEME} authorization header")

    parts = credentials.split(":")
    if len(parts) != 4 or not all(parts):
        raise ValueError("Authorization header must have 4 colon-separated fields")

    access_key_id, signature, timestamp, nonce = parts
    return access_key_id, signature, int(timestamp), nonce


class AuthSigner:
    """LTBase 请求签名器

    无可变状态，可在多个并发请求间共享。

    Args:
        credential: 访问凭证
        clock: 返回毫秒时间戳的函数，测试时可注入
        random_source: 返回指定长度安全随机字节的函数，测试时可注入
    """

    def __init__(
        self,
        credential: Credential,
        clock: Callable[[], int] = current_millis,
        random_source: Callable[[int], bytes] = secrets.token_bytes,
    ) -> None:
        self.credential = credential
        self._clock = clock
        self._random_source = random_source

    @property
    def access_key_id(self) -> str:
        return self.credential.access_key_id

    def generate_nonce(self) -> str:
        """生成Base64Url编码的16字节随机数"""
        return b64url_encode(self._random_source(NONCE_SIZE))

    def build_context(
        self,
        method: str,
        url: str,
        query_string: str,
        body: Union[str, bytes],
        timestamp: Optional[int] = None,
        nonce: Optional[str] = None,
    ) -> SigningContext:
        """构建签名上下文，未指定时新生成时间戳和nonce"""
        return SigningContext(
            method=method,
            url=url,
            query_string=query_string,
            body=body,
            timestamp=self._clock() if timestamp is None else timestamp,
            nonce=self.generate_nonce() if nonce is None else nonce,
        )

    def sign(self, signing_string: str) -> str:
        """对签名串签名

        Args:
            signing_string: 规范化后的签名串

        Returns:
            Base64Url编码（无填充）的签名

        Raises:
            ConfigurationError: Secret 格式错误
            InvalidKeyFormat: Secret 无法解码为 Ed25519 私钥
            SigningFailure: 签名原语执行失败
        """
        signature = self.credential.signer().sign(signing_string)
        return b64url_encode(signature)

    def generate_authorization_header(
        self,
        method: str,
        url: str,
        query_string: str,
        body: Union[str, bytes],
    ) -> str:
        """生成 Authorization 头

        Args:
            method: HTTP方法
            url: 不含查询串的绝对URL
            query_string: 规范化查询串
            body: 序列化后的请求体，无请求体时为空字符串

        Returns:
            `LtBase {accessKeyId}:{signature}:{timestamp}:{nonce}`
        """
        context = self.build_context(method, url, query_string, body)
        signing_string = context.canonical()
        logger.debug(f"签名串:\n{signing_string}")

        signature = self.sign(signing_string)
        return (
            f"{AUTH_SCHEME} {self.access_key_id}:{signature}:"
            f"{context.timestamp}:{context.nonce}"
        )
