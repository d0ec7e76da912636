"""Link decoding and remark classification shared by every ordering stage."""

from .classify import classify_link, classify_text, error_message, split_links
from .constants import (
    DECODE_FAILED,
    INVALID,
    REMARK_MISSING,
    RULE_CONFLICT,
    RULE_MISMATCH,
    STATUSES,
    UNSUPPORTED_PROTOCOL,
    VALID_RULED,
    VALID_UNRULED,
)
from .decode import decode_link
from .models import (
    ClassifiedItem,
    DecodeError,
    DecodeOk,
    DecodeResult,
    InvalidNode,
    ParsedRemark,
    RuledNode,
    UnruledNode,
)
from .remarks import parse_remark

__all__ = [
    "classify_link",
    "classify_text",
    "error_message",
    "split_links",
    "decode_link",
    "parse_remark",
    "ClassifiedItem",
    "DecodeError",
    "DecodeOk",
    "DecodeResult",
    "InvalidNode",
    "ParsedRemark",
    "RuledNode",
    "UnruledNode",
    "STATUSES",
    "VALID_RULED",
    "VALID_UNRULED",
    "INVALID",
    "UNSUPPORTED_PROTOCOL",
    "DECODE_FAILED",
    "REMARK_MISSING",
    "RULE_MISMATCH",
    "RULE_CONFLICT",
]
