"""
异常定义

集中管理 SDK 对外抛出的异常类型：

- ConfigurationError: 配置错误（Secret 缺少前缀、密钥无法解码等），不可重试
- SigningFailure: 底层签名原语拒绝密钥或输入
- DecodingError: 响应字符集不支持或与内容不匹配，保留原始字节供调用方回退
- HttpError: 非 2xx 响应，仅在调用方显式要求时抛出
- TransportError: 网络错误，直接使用 httpx 的异常类型，不做包装
"""

from typing import Optional

import httpx


class LtBaseError(Exception):
    """SDK 异常基类"""


class ConfigurationError(LtBaseError, ValueError):
    """配置错误"""


class InvalidKeyFormat(ConfigurationError):
    """Access Secret 无法解码为 Ed25519 私钥"""


class SigningFailure(LtBaseError, RuntimeError):
    """签名失败"""


class InvalidRequestBody(LtBaseError, ValueError):
    """请求体无法序列化为 JSON"""


class DecodingError(LtBaseError):
    """响应体解码失败

    Attributes:
        raw_body: 原始响应字节
        charset: 响应声明的字符集
    """

    def __init__(self, message: str, raw_body: bytes, charset: Optional[str] = None) -> None:
        super().__init__(message)
        self.raw_body = raw_body
        self.charset = charset


class HttpError(LtBaseError):
    """非 2xx 响应"""

    def __init__(self, status: int, body: str, context: Optional[str] = None) -> None:
        message = f"{status} - {body}"
        if context:
            message = f"{context}: {message}"
        super().__init__(message)
        self.status = status
        self.body = body


# 网络错误原样透传
TransportError = httpx.TransportError
