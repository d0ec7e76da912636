"""Static constants for link decoding and remark classification."""

from typing import Dict

SUPPORTED_SCHEMES = ("vmess", "vless", "trojan", "ss", "ssr")
FRAGMENT_SCHEMES = {"vless", "trojan", "ss"}

VALID_RULED = "VALID_RULED"
VALID_UNRULED = "VALID_UNRULED"
INVALID = "INVALID"

STATUSES = (VALID_RULED, VALID_UNRULED, INVALID)

UNSUPPORTED_PROTOCOL = "UNSUPPORTED_PROTOCOL"
DECODE_FAILED = "DECODE_FAILED"
REMARK_MISSING = "REMARK_MISSING"
RULE_MISMATCH = "RULE_MISMATCH"
RULE_CONFLICT = "RULE_CONFLICT"

ERROR_KINDS = (UNSUPPORTED_PROTOCOL, DECODE_FAILED, REMARK_MISSING, RULE_CONFLICT)

MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        UNSUPPORTED_PROTOCOL: "unsupported link protocol",
        DECODE_FAILED: "link decode failure",
        REMARK_MISSING: "could not extract remark",
        RULE_CONFLICT: "rule conflict: sn requires sid",
        "error_tag": "[error]",
    },
    "zh": {
        UNSUPPORTED_PROTOCOL: "不支持的链接协议",
        DECODE_FAILED: "链接解码失败",
        REMARK_MISSING: "无法提取别名",
        RULE_CONFLICT: "别名规则冲突: 有sn时必须有sid",
        "error_tag": "[错误]",
    },
}

SS_DEFAULT_REMARK = "Shadowsocks Node"
