"""
LTBase API 客户端

对每个请求执行完整的签名流程：

1. 将路径解析到 base_url，生成规范化查询串
2. 序列化请求体（无请求体时为空字符串）
3. 用不含查询串的URL、规范化查询串和请求体生成 Authorization 头
4. 发送请求（Authorization / Content-Type / Accept-Encoding）
5. 按 charset 解码响应，封装为 ApiResponse

非 2xx 响应不抛异常，由调用方根据 ApiResponse.is_success 处理。
网络错误（httpx.TransportError）原样抛出，不做重试。
"""

import logging
from typing import Optional

import httpx

from ..auth.signer import AuthSigner
from ..constants import DEFAULT_BASE_URL, LtBaseHeader
from ..models.request import QueryParams, RequestBody, RequestOptions
from ..models.response import ApiResponse
from .base_http_client import LtBaseHTTPClient
from .query import build_query_string, serialize_body, split_url
from .response_decoder import decode_body

logger = logging.getLogger(__name__)

_SEPARATOR = "━" * 40


class ApiClient(LtBaseHTTPClient):
    """LTBase API 客户端

    Args:
        signer: 请求签名器
        base_url: API 基础地址
        verbose: 是否输出请求/响应诊断日志，不影响请求行为
        timeout: 请求超时时间（秒）
        proxy_url: 可选的代理URL
        transport: 可选的 httpx 传输层
    """

    def __init__(
        self,
        signer: AuthSigner,
        base_url: str = DEFAULT_BASE_URL,
        verbose: bool = False,
        timeout: float = 10.0,
        proxy_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(timeout=timeout, proxy_url=proxy_url, transport=transport)
        self.base_url = base_url
        self.signer = signer
        self.verbose = verbose

    async def __aenter__(self) -> "ApiClient":
        return self

    async def request(
        self,
        method: str,
        path: str,
        query_params: Optional[QueryParams] = None,
        body: Optional[RequestBody] = None,
    ) -> ApiResponse:
        """发送签名请求

        Args:
            method: HTTP方法
            path: 相对 base_url 的请求路径
            query_params: 查询参数，值为 None 的参数会被忽略
            body: 请求体，None 表示无请求体

        Returns:
            统一的响应对象

        Raises:
            ConfigurationError: 凭证格式错误，此时不会发出网络请求
            InvalidRequestBody: 请求体无法序列化
            DecodingError: 响应字符集不支持或不匹配
            httpx.TransportError: 网络错误
        """
        method = method.upper()
        url_without_query, embedded_params = split_url(self.base_url, path)

        params: dict = dict(embedded_params)
        if query_params:
            params.update(query_params)
        query_string = build_query_string(params)

        url = f"{url_without_query}?{query_string}" if query_string else url_without_query
        body_string = serialize_body(body)

        auth_header = self.signer.generate_authorization_header(
            method=method,
            url=url_without_query,
            query_string=query_string,
            body=body_string,
        )

        if self.verbose:
            logger.info(_SEPARATOR)
            logger.info(f"Request: {method} {url}")
            logger.info(f"Authorization: {auth_header}")
            logger.info(f"URL: {url_without_query}")
            if body_string:
                logger.info(f"Body: {body_string}")
            if query_string:
                logger.info(f"Query: {query_string}")
            logger.info(_SEPARATOR)

        headers = {
            LtBaseHeader.AUTHORIZATION: auth_header,
            LtBaseHeader.CONTENT_TYPE: LtBaseHeader.JSON_CONTENT_TYPE,
            LtBaseHeader.ACCEPT_ENCODING: LtBaseHeader.GZIP,
        }

        response = await self._client.request(
            method=method,
            url=url,
            headers=headers,
            content=body_string.encode("utf-8") if body_string else None,
        )

        response_body = decode_body(response.headers, response.content)

        if self.verbose:
            logger.info(f"Response Status: {response.status_code}")
            logger.info(f"Response Body: {response_body}")
            logger.info(_SEPARATOR)

        return ApiResponse(
            status=response.status_code,
            body=response_body,
            headers=dict(response.headers.items()),
        )

    async def send(self, options: RequestOptions) -> ApiResponse:
        """按请求描述发送请求"""
        return await self.request(
            method=options.method,
            path=options.path,
            query_params=options.query_params,
            body=options.body,
        )

    async def get(self, path: str, query_params: Optional[QueryParams] = None) -> ApiResponse:
        return await self.request("GET", path, query_params=query_params)

    async def post(self, path: str, body: Optional[RequestBody] = None) -> ApiResponse:
        return await self.request("POST", path, body=body)

    async def put(self, path: str, body: Optional[RequestBody] = None) -> ApiResponse:
        return await self.request("PUT", path, body=body)

    async def delete(self, path: str) -> ApiResponse:
        return await self.request("DELETE", path)
