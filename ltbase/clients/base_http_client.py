"""
LTBase HTTP客户端基类

管理底层 httpx 连接，重试和连接池交给 httpx 处理。
"""

from typing import Optional

import httpx


class LtBaseHTTPClient:
    """LTBase HTTP客户端基类

    职责：
    - 管理HTTP连接
    - 提供异步上下文管理

    Args:
        timeout: 请求超时时间（秒）
        proxy_url: 可选的代理URL
        transport: 可选的 httpx 传输层，测试时注入 MockTransport
    """

    def __init__(
        self,
        timeout: float = 10.0,
        proxy_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        limits = httpx.Limits(max_keepalive_connections=5, max_connections=10)

        if transport is None and proxy_url:
            transport = httpx.AsyncHTTPTransport(proxy=proxy_url, limits=limits)

        self._client = httpx.AsyncClient(
            timeout=timeout,
            transport=transport,
            limits=limits,
        )

    async def __aenter__(self) -> "LtBaseHTTPClient":
        """异步上下文管理器入口"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """异步上下文管理器退出"""
        await self.close()

    async def close(self) -> None:
        """关闭HTTP客户端"""
        await self._client.aclose()
