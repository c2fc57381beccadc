"""
LTBase 命令行工具

全局参数未指定时从环境变量（及 .env）读取，见 ltbase.config。

示例：
    ltbase --access-key-id AK_xxx --access-secret SK_xxx deepping --echo hello
    ltbase request GET /api/ai/v1/notes -q owner_id=u1 -q page=2
    ltbase request POST /api/v1/activity --data '{"type": "call"}'
    ltbase keygen --access-key-id AK_demo
"""

import argparse
import asyncio
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

import httpx

from .auth.signer import AuthSigner
from .clients.api_client import ApiClient
from .config import Settings, configure_logging
from .constants import LtBaseAPI
from .errors import LtBaseError
from .models.credential import Credential
from .models.response import ApiResponse
from .utils.base64url import b64url_encode
from .utils.ed25519_signer import Ed25519Signer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """构建参数解析器"""
    parser = argparse.ArgumentParser(
        prog="ltbase",
        description="LTBase API 命令行工具",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--access-key-id", help="Access Key ID (AK_xxx)")
    parser.add_argument("--access-secret", help="Access Secret (SK_xxx, base64url PKCS#8 Ed25519)")
    parser.add_argument("--base-url", help="API 基础地址")
    parser.add_argument("--timeout", type=float, help="请求超时时间（秒）")
    parser.add_argument("--proxy-url", help="HTTP代理地址")
    parser.add_argument("-v", "--verbose", action="store_true", help="输出请求/响应诊断日志")

    subparsers = parser.add_subparsers(dest="command", required=True)

    deepping = subparsers.add_parser("deepping", help="连通性检查")
    deepping.add_argument("--echo", help="回显文本")

    request = subparsers.add_parser("request", help="发送任意签名请求")
    request.add_argument("method", help="HTTP方法")
    request.add_argument("path", help="请求路径")
    request.add_argument(
        "-q", "--query", action="append", default=[], metavar="KEY=VALUE", help="查询参数，可重复"
    )
    body = request.add_mutually_exclusive_group()
    body.add_argument("--data", help="JSON 请求体")
    body.add_argument("--data-file", help="JSON 请求体文件")

    keygen = subparsers.add_parser("keygen", help="生成新的 Ed25519 凭证")
    keygen.add_argument("--access-key-id", dest="keygen_key_id", default="AK_local")

    return parser


def parse_query_pairs(pairs: Sequence[str]) -> dict[str, str]:
    """解析 KEY=VALUE 形式的查询参数

    Raises:
        ValueError: 参数缺少 `=`
    """
    params: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Invalid query parameter (expected KEY=VALUE): {pair}")
        params[key] = value
    return params


def load_body(data: Optional[str], data_file: Optional[str]) -> Any:
    """读取 JSON 请求体"""
    if data_file:
        data = Path(data_file).read_text(encoding="utf-8")
    if data is None:
        return None
    return json.loads(data)


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """命令行参数覆盖环境变量配置"""
    overrides = {
        "access_key_id": args.access_key_id,
        "access_secret": args.access_secret,
        "base_url": args.base_url,
        "timeout": args.timeout,
        "proxy_url": args.proxy_url,
    }
    changes = {key: value for key, value in overrides.items() if value is not None}
    if args.verbose:
        changes["verbose"] = True
    return dataclasses.replace(settings, **changes)


def print_response(response: ApiResponse) -> None:
    payload = response.json()
    if payload is None:
        print(response.body)
    else:
        print(json.dumps(payload, indent=2, ensure_ascii=False))


def keygen(access_key_id: str) -> None:
    """生成凭证并输出 Secret 和公钥"""
    credential = Credential.generate(access_key_id)
    public_key = Ed25519Signer(credential.private_key_der()).public_key_bytes()
    print(f"Access Key ID: {credential.access_key_id}")
    print(f"Access Secret: {credential.access_secret.get_secret_value()}")
    print(f"Public Key:    {b64url_encode(public_key)}")


async def run(
    args: argparse.Namespace,
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> None:
    """执行命令"""
    if args.command == "keygen":
        keygen(args.keygen_key_id)
        return

    signer = AuthSigner(settings.credential())
    async with ApiClient(
        signer=signer,
        base_url=settings.base_url,
        verbose=settings.verbose,
        timeout=settings.timeout,
        proxy_url=settings.proxy_url,
        transport=transport,
    ) as client:
        if args.command == "deepping":
            params = {"echo": args.echo} if args.echo else None
            response = await client.get(LtBaseAPI.DEEPPING, params)
            logger.debug(f"DeepPing response status: {response.status}")
            response.raise_for_status("DeepPing failed")
            print("✓ DeepPing successful")
            print_response(response)
        elif args.command == "request":
            response = await client.request(
                method=args.method,
                path=args.path,
                query_params=parse_query_pairs(args.query),
                body=load_body(args.data, args.data_file),
            )
            response.raise_for_status(f"{args.method.upper()} {args.path} failed")
            print_response(response)


def main(
    argv: Optional[Sequence[str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> int:
    """命令行入口

    Returns:
        进程退出码
    """
    args = build_parser().parse_args(argv)

    try:
        settings = apply_overrides(Settings.from_env(), args)
        configure_logging(settings.log_level)
        asyncio.run(run(args, settings, transport=transport))
    except (LtBaseError, httpx.HTTPError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("收到中断信号")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
