"""
签名串构建

签名串由以下字段按顺序用 `\\n` 连接（末尾无换行）：

1. HTTP方法（大写）
2. 去掉末尾 `/` 和 `?` 的URL（不含查询串）
3. 规范化查询串（可能为空）
4. 请求体的 SHA-256 十六进制摘要
5. 毫秒时间戳
6. nonce
"""

import hashlib
from dataclasses import dataclass
from typing import Union


def trim_url(url: str) -> str:
    """去掉URL末尾所有的 `/` 和 `?`，中间的斜杠保持不变"""
    return url.rstrip("/?")


def hash_body(body: Union[str, bytes]) -> str:
    """计算请求体的 SHA-256 十六进制摘要

    Args:
        body: 实际发送的请求体，字符串按 UTF-8 编码

    Returns:
        小写十六进制摘要，空请求体返回 SHA-256("")
    """
    if isinstance(body, str):
        body = body.encode("utf-8")
    return hashlib.sha256(body).hexdigest()


def build_signing_string(
    method: str,
    url: str,
    query_string: str,
    body: Union[str, bytes],
    timestamp: int,
    nonce: str,
) -> str:
    """构建签名串

    Args:
        method: HTTP方法
        url: 不含查询串的绝对URL
        query_string: 规范化查询串
        body: 请求体
        timestamp: 毫秒时间戳
        nonce: Base64Url编码的随机数

    Returns:
        待签名的字符串
    """
    return "\n".join(
        [
            method.upper(),
            trim_url(url),
            query_string,
            hash_body(body),
            str(timestamp),
            nonce,
        ]
    )


@dataclass(frozen=True)
class SigningContext:
    """单次签名的上下文，每个请求新建，用完即弃"""

    method: str
    url: str
    query_string: str
    body: Union[str, bytes]
    timestamp: int
    nonce: str

    @property
    def body_digest(self) -> str:
        return hash_body(self.body)

    def canonical(self) -> str:
        return build_signing_string(
            method=self.method,
            url=self.url,
            query_string=self.query_string,
            body=self.body,
            timestamp=self.timestamp,
            nonce=self.nonce,
        )
