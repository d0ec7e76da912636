"""Builders for share links used across the test suite."""

import base64
import json
import urllib.parse


def vmess_link(config) -> str:
    raw = json.dumps(config, ensure_ascii=False).encode("utf-8")
    return "vmess://" + base64.b64encode(raw).decode("ascii")


def vless_link(remark: str, host: str = "host:443") -> str:
    return f"vless://uuid@{host}?type=tcp#{urllib.parse.quote(remark)}"


def trojan_link(remark: str) -> str:
    return f"trojan://secret@example.com:443#{urllib.parse.quote(remark)}"


def _b64url(text: str) -> str:
    return base64.urlsafe_b64encode(text.encode("utf-8")).decode("ascii").rstrip("=")


def ssr_link(remark=None, remarks_value=None) -> str:
    inner = "example.com:8388:origin:aes-256-cfb:plain:" + _b64url("password") + "/?obfsparam="
    if remarks_value is not None:
        inner += "&remarks=" + remarks_value
    elif remark is not None:
        inner += "&remarks=" + _b64url(remark)
    return "ssr://" + _b64url(inner)
