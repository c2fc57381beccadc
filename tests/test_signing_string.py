"""
测试签名串构建
"""

import hashlib

import pytest

from ltbase.auth.signing_string import (
    SigningContext,
    build_signing_string,
    hash_body,
    trim_url,
)
from ltbase.constants import EMPTY_BODY_SHA256


class TestTrimUrl:
    """URL 末尾裁剪测试"""

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://h/path", "https://h/path"),
            ("https://h/path/", "https://h/path"),
            ("https://h/path///???", "https://h/path"),
            ("http://h/path//???", "http://h/path"),
            ("https://h/path?/?/", "https://h/path"),
            ("https://h/a//b", "https://h/a//b"),
            ("https://h/", "https://h"),
        ],
    )
    def test_trim(self, url, expected):
        assert trim_url(url) == expected

    def test_idempotent(self):
        """测试裁剪幂等"""
        once = trim_url("https://h/path///???")
        assert trim_url(once) == once


class TestHashBody:
    """请求体摘要测试"""

    def test_empty_body(self):
        """测试空请求体的摘要为 SHA-256("")"""
        assert hash_body("") == EMPTY_BODY_SHA256
        assert hash_body(b"") == EMPTY_BODY_SHA256

    def test_utf8_body(self):
        """测试字符串按 UTF-8 编码后计算摘要"""
        body = '{"summary":"你好"}'
        assert hash_body(body) == hashlib.sha256(body.encode("utf-8")).hexdigest()
        assert hash_body(body) == hash_body(body.encode("utf-8"))


class TestBuildSigningString:
    """签名串测试"""

    def test_layout(self):
        """测试字段顺序和换行连接"""
        result = build_signing_string(
            method="get",
            url="https://api.example.com/v1/notes/",
            query_string="owner_id=u1&page=2",
            body="",
            timestamp=1700000000000,
            nonce="abc_-",
        )

        assert result == "\n".join(
            [
                "GET",
                "https://api.example.com/v1/notes",
                "owner_id=u1&page=2",
                EMPTY_BODY_SHA256,
                "1700000000000",
                "abc_-",
            ]
        )
        assert not result.endswith("\n")

    def test_empty_query_keeps_empty_line(self):
        """测试查询串为空时保留空行"""
        result = build_signing_string("POST", "https://h/p", "", "{}", 1, "n")

        lines = result.split("\n")
        assert len(lines) == 6
        assert lines[2] == ""
        assert lines[3] == hashlib.sha256(b"{}").hexdigest()

    def test_trailing_characters_do_not_change_signing_string(self):
        """测试末尾 / 和 ? 不影响签名串"""
        a = build_signing_string("GET", "https://h/path///???", "", "", 1, "n")
        b = build_signing_string("GET", "https://h/path", "", "", 1, "n")
        assert a == b

    def test_deterministic(self):
        """测试相同输入得到相同签名串"""
        args = ("PUT", "https://h/p", "a=1", '{"x":1}', 42, "nonce")
        assert build_signing_string(*args) == build_signing_string(*args)


class TestSigningContext:
    """签名上下文测试"""

    def test_canonical_matches_builder(self):
        context = SigningContext(
            method="delete",
            url="https://h/p/",
            query_string="",
            body="",
            timestamp=5,
            nonce="n",
        )

        assert context.canonical() == build_signing_string("DELETE", "https://h/p", "", "", 5, "n")
        assert context.body_digest == EMPTY_BODY_SHA256
