"""
URL安全Base64工具

编码使用 `-_` 替换 `+/`，并去掉末尾的 `=` 填充。
"""

import base64


def b64url_encode(data: bytes) -> str:
    """编码为无填充的URL安全Base64

    Args:
        data: 原始字节

    Returns:
        编码后的字符串
    """
    encoded = base64.b64encode(data).decode("ascii")
    return encoded.replace("+", "-").replace("/", "_").rstrip("=")


def b64url_decode(value: str) -> bytes:
    """解码无填充的URL安全Base64

    Args:
        value: 编码字符串

    Returns:
        原始字节

    Raises:
        binascii.Error: 字符串不是合法的Base64
    """
    padding = "=" * (-len(value) % 4)
    standard = value.replace("-", "+").replace("_", "/") + padding
    return base64.b64decode(standard, validate=True)
