"""
LTBase SDK 配置

通过环境变量配置（启动时会先加载当前目录下的 .env）：
- LTBASE_ACCESS_KEY_ID: Access Key ID
- LTBASE_ACCESS_SECRET: Access Secret（SK_ 前缀）
- LTBASE_BASE_URL: API 基础地址（默认 https://api.example.com）
- LTBASE_VERBOSE: 是否输出请求/响应诊断日志（1/true/yes/on）
- LTBASE_TIMEOUT: 请求超时时间，单位秒（默认10）
- LTBASE_PROXY_URL: HTTP代理地址（可选）
- LOG_LEVEL: 日志级别（默认INFO）
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from .constants import DEFAULT_BASE_URL
from .errors import ConfigurationError
from .models.credential import Credential

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def configure_logging(level: str = "INFO") -> None:
    """配置根日志"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


def _parse_bool(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class Settings:
    """SDK 运行配置"""

    access_key_id: str = ""
    access_secret: str = ""
    base_url: str = DEFAULT_BASE_URL
    verbose: bool = False
    timeout: float = 10.0
    proxy_url: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """从环境变量读取配置

        Args:
            env: 环境变量映射，默认加载 .env 后读取 os.environ

        Returns:
            配置对象

        Raises:
            ConfigurationError: 数值配置无法解析
        """
        if env is None:
            load_dotenv(find_dotenv(usecwd=True))
            env = os.environ

        timeout_raw = env.get("LTBASE_TIMEOUT", "10")
        try:
            timeout = float(timeout_raw)
        except ValueError as e:
            raise ConfigurationError(f"Invalid LTBASE_TIMEOUT: {timeout_raw}") from e

        return cls(
            access_key_id=env.get("LTBASE_ACCESS_KEY_ID", ""),
            access_secret=env.get("LTBASE_ACCESS_SECRET", ""),
            base_url=env.get("LTBASE_BASE_URL") or DEFAULT_BASE_URL,
            verbose=_parse_bool(env.get("LTBASE_VERBOSE")),
            timeout=timeout,
            proxy_url=env.get("LTBASE_PROXY_URL") or None,
            log_level=env.get("LOG_LEVEL", "INFO"),
        )

    def credential(self) -> Credential:
        """构建访问凭证

        Raises:
            ConfigurationError: 缺少 Access Key ID 或 Access Secret
        """
        if not self.access_key_id:
            raise ConfigurationError("Missing access key id (LTBASE_ACCESS_KEY_ID)")
        if not self.access_secret:
            raise ConfigurationError("Missing access secret (LTBASE_ACCESS_SECRET)")
        return Credential(access_key_id=self.access_key_id, access_secret=self.access_secret)
