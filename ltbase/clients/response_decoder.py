"""
响应解码

按 Content-Type 中声明的 charset 解码响应体，未声明时按 UTF-8 解码。
"""

import codecs
import re
from typing import Mapping, Optional

from ..errors import DecodingError

_CHARSET_PATTERN = re.compile(r"charset=([^;]+)", re.IGNORECASE)


def extract_charset(content_type: Optional[str]) -> Optional[str]:
    """从 Content-Type 中提取 charset 参数"""
    if not content_type:
        return None
    match = _CHARSET_PATTERN.search(content_type)
    if not match:
        return None
    charset = match.group(1).strip().strip("\"'")
    return charset or None


def decode_body(headers: Mapping[str, str], raw: bytes) -> str:
    """解码响应体

    Args:
        headers: 响应头
        raw: 原始响应字节（已解压）

    Returns:
        响应文本

    Raises:
        DecodingError: 字符集不支持，或内容与声明的字符集不匹配
    """
    content_type = next(
        (value for key, value in headers.items() if key.lower() == "content-type"),
        None,
    )
    charset = extract_charset(content_type)

    if charset is None:
        return raw.decode("utf-8", errors="replace")

    try:
        codecs.lookup(charset)
    except LookupError as e:
        raise DecodingError(f"Unsupported charset: {charset}", raw, charset) from e

    try:
        return raw.decode(charset)
    except UnicodeDecodeError as e:
        raise DecodingError(
            f"Response body is not valid {charset}: {e}", raw, charset
        ) from e
