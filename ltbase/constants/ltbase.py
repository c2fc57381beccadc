"""
LTBase API 常量

集中管理认证协议和请求头相关的固定值，避免在代码中硬编码。
"""

# Authorization 头的认证方案名
AUTH_SCHEME = "LtBase"

# Access Secret 固定前缀
SECRET_PREFIX = "SK_"

DEFAULT_BASE_URL = "https://api.example.com"

# nonce 随机字节数
NONCE_SIZE = 16

# SHA-256("") 的十六进制摘要，空请求体的签名哈希
EMPTY_BODY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


class LtBaseHeader:
    """请求头名称与固定取值"""

    AUTHORIZATION = "Authorization"
    CONTENT_TYPE = "Content-Type"
    ACCEPT_ENCODING = "Accept-Encoding"

    JSON_CONTENT_TYPE = "application/json; charset=UTF-8"
    GZIP = "gzip"


class LtBaseAPI:
    """通用 API 路径"""

    DEEPPING = "/api/v1/deepping"
