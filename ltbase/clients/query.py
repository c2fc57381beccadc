"""
请求规范化

生成规范化查询串和序列化请求体。规范化查询串既用于签名，也原样用于实际发送，
两者必须完全一致，否则服务端验签失败。

查询串按 application/x-www-form-urlencoded 规则编码：字母数字和 `*-._` 不编码，
空格编码为 `+`，其余字节（包括 `~`）编码为 `%XX`。
"""

import json
import math
from decimal import Decimal
from typing import Optional
from urllib.parse import parse_qsl, quote_plus, urlencode, urljoin

import httpx
from pydantic import BaseModel, JsonValue, TypeAdapter, ValidationError

from ..errors import InvalidRequestBody
from ..models.request import QueryParams, QueryValue, RequestBody

_JSON_VALUE_ADAPTER = TypeAdapter(JsonValue)

# 超出该指数范围时数字使用科学计数法
_MAX_DECIMAL_EXPONENT = 21
_MIN_DECIMAL_EXPONENT = -6


def _format_float(value: float) -> str:
    """按最短往返表示输出浮点数

    小数点位置在 (-6, 21] 之间时输出定点形式，否则输出 `1.5e-7` / `1e+21` 形式。
    """
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k

    if k <= n <= _MAX_DECIMAL_EXPONENT:
        text = digits + "0" * (n - k)
    elif 0 < n <= _MAX_DECIMAL_EXPONENT:
        text = f"{digits[:n]}.{digits[n:]}"
    elif _MIN_DECIMAL_EXPONENT < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        e = n - 1
        text = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"

    return sign + text


def stringify_value(value: QueryValue) -> str:
    """将查询参数值转换为字符串

    布尔值输出 `true`/`false`，整数值的浮点数不带 `.0`，
    很大或很小的浮点数输出科学计数法。
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return _format_float(value)
    return str(value)


def _form_quote(value, safe="", encoding=None, errors=None) -> str:
    # quote_plus 始终保留 `~`，表单编码需要编码为 %7E
    return quote_plus(value, safe="*", encoding=encoding, errors=errors).replace("~", "%7E")


def build_query_string(params: Optional[QueryParams]) -> str:
    """构建规范化查询串

    去掉值为 None 的参数，按键排序后进行表单式URL编码，用 `&` 连接。

    Args:
        params: 查询参数

    Returns:
        规范化查询串，无参数时返回空字符串
    """
    if not params:
        return ""

    entries = [(key, value) for key, value in params.items() if value is not None]
    entries.sort(key=lambda item: item[0])

    return urlencode(
        [(key, stringify_value(value)) for key, value in entries],
        encoding="UTF-8",
        quote_via=_form_quote,
    )


def serialize_body(body: Optional[RequestBody]) -> str:
    """序列化请求体

    Args:
        body: pydantic模型或任意JSON值，None 表示无请求体

    Returns:
        紧凑JSON字符串，无请求体时返回空字符串

    Raises:
        InvalidRequestBody: 请求体不是合法的JSON值（包括 NaN 和 Infinity）
    """
    if body is None:
        return ""
    if isinstance(body, BaseModel):
        return body.model_dump_json(by_alias=True)

    try:
        value = _JSON_VALUE_ADAPTER.validate_python(body)
    except ValidationError as e:
        raise InvalidRequestBody(f"Request body is not JSON serializable: {e}") from e

    try:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"), allow_nan=False)
    except ValueError as e:
        raise InvalidRequestBody(f"Request body is not valid JSON: {e}") from e


def split_url(base_url: str, path: str) -> tuple[str, list[tuple[str, str]]]:
    """将路径解析为绝对URL

    返回的URL路径已按 httpx 发送时的规则进行百分号编码，
    保证签名用的URL与实际发送的URL一致。

    Args:
        base_url: API 基础地址
        path: 请求路径，可以携带查询串

    Returns:
        (不含查询串和片段的URL, 路径中携带的查询参数)元组
    """
    url = httpx.URL(urljoin(base_url, path))
    raw_path = url.raw_path.split(b"?", 1)[0].decode("ascii") or "/"
    signed_url = f"{url.scheme}://{url.netloc.decode('ascii')}{raw_path}"
    return signed_url, parse_qsl(url.query.decode("ascii"), keep_blank_values=True)
