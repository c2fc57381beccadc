"""
请求描述模型

请求体使用 pydantic 的 JsonValue 作为可序列化的标签类型，
也可以直接传入 pydantic 模型。
"""

from dataclasses import dataclass
from typing import Mapping, Optional, Union

from pydantic import BaseModel, JsonValue

# 查询参数值，None 表示该参数不存在
QueryValue = Union[str, int, float, bool, None]

QueryParams = Mapping[str, QueryValue]

RequestBody = Union[BaseModel, JsonValue]


@dataclass(frozen=True)
class RequestOptions:
    """业务层传给传输层的请求描述"""

    method: str
    path: str
    query_params: Optional[QueryParams] = None
    body: Optional[RequestBody] = None
