"""
API 响应模型
"""

import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..errors import HttpError


@dataclass(frozen=True)
class ApiResponse:
    """统一的 API 响应

    Attributes:
        status: HTTP 状态码
        body: 已解码的响应文本
        headers: 响应头，键统一为小写
    """

    status: int
    body: str
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "headers",
            MappingProxyType({k.lower(): v for k, v in dict(self.headers).items()}),
        )

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """按名称获取响应头（大小写不敏感）"""
        return self.headers.get(name.lower(), default)

    def json(self) -> Any:
        """解析 JSON 响应体

        Returns:
            解析后的数据，响应体不是合法 JSON 时返回 None
        """
        try:
            return json.loads(self.body)
        except ValueError:
            return None

    def raise_for_status(self, context: Optional[str] = None) -> "ApiResponse":
        """非 2xx 响应时抛出 HttpError

        Args:
            context: 附加在错误信息前的说明

        Returns:
            响应本身，便于链式调用

        Raises:
            HttpError: 状态码不在 [200, 300) 区间
        """
        if not self.is_success:
            raise HttpError(self.status, self.body, context)
        return self

    def __str__(self) -> str:
        return f"ApiResponse(status: {self.status}, body: {self.body})"
