"""Remark extraction for proxy share links.

Every supported scheme carries its label differently:

- ``vmess://``  base64 JSON object, label in ``ps`` (or ``remark``)
- ``vless://``, ``trojan://``, ``ss://``  label in the URL fragment
- ``ssr://``  base64 URL whose query string holds a base64 ``remarks`` value

`decode_link` never raises; every failure comes back as a `DecodeError`.
"""

import base64
import json
import re
import urllib.parse

from .constants import (
    DECODE_FAILED,
    FRAGMENT_SCHEMES,
    REMARK_MISSING,
    SS_DEFAULT_REMARK,
    UNSUPPORTED_PROTOCOL,
)
from .models import DecodeError, DecodeOk, DecodeResult

B64_WHITESPACE_RE = re.compile(r"[\t\n\f\r ]")
B64_ALPHABET_RE = re.compile(r"[A-Za-z0-9+/]*")
BAD_PERCENT_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
URLSAFE_TO_STD = str.maketrans("-_", "+/")


def b64decode_lenient(data: str, urlsafe: bool = False) -> bytes:
    """Decode base64 the way browsers' ``atob`` does.

    Whitespace is ignored and trailing ``=`` padding is optional. A length of
    ``1 mod 4`` or any character outside the alphabet raises ``ValueError``.
    """
    compact = B64_WHITESPACE_RE.sub("", data)
    if urlsafe:
        compact = compact.translate(URLSAFE_TO_STD)
    if len(compact) % 4 == 0:
        if compact.endswith("=="):
            compact = compact[:-2]
        elif compact.endswith("="):
            compact = compact[:-1]
    if len(compact) % 4 == 1 or not B64_ALPHABET_RE.fullmatch(compact):
        raise ValueError("malformed base64 payload")
    return base64.b64decode(compact + "=" * (-len(compact) % 4), validate=True)


def decode_uri_component(value: str) -> str:
    if BAD_PERCENT_RE.search(value):
        raise ValueError("malformed percent escape")
    return urllib.parse.unquote_to_bytes(value).decode("utf-8")


def split_scheme(link: str):
    scheme, sep, rest = link.partition("://")
    if not sep:
        return link, ""
    return scheme, rest


def decode_link(link: str, ss_default_remark: str = SS_DEFAULT_REMARK) -> DecodeResult:
    scheme, payload = split_scheme(link)
    try:
        if scheme == "vmess":
            remark = _vmess_remark(payload)
        elif scheme in FRAGMENT_SCHEMES:
            remark = _fragment_remark(scheme, link, payload, ss_default_remark)
        elif scheme == "ssr":
            remark = _ssr_remark(payload)
        else:
            return DecodeError(UNSUPPORTED_PROTOCOL)
    except (ValueError, RecursionError):
        # binascii.Error, UnicodeError and JSONDecodeError are all ValueErrors.
        return DecodeError(DECODE_FAILED)

    if isinstance(remark, DecodeError):
        return remark
    if not remark:
        return DecodeError(REMARK_MISSING)
    return DecodeOk(remark)


def _vmess_remark(payload: str):
    config = json.loads(b64decode_lenient(payload).decode("utf-8"))
    if not isinstance(config, dict):
        return DecodeError(DECODE_FAILED)
    labels = [config.get(key) for key in ("ps", "remark")]
    for value in labels:
        if isinstance(value, str) and value:
            return value
    if "" in labels:
        return DecodeError(REMARK_MISSING)
    return DecodeError(DECODE_FAILED)


def _fragment_remark(scheme: str, link: str, payload: str, ss_default_remark: str):
    _, sep, fragment = link.partition("#")
    if sep:
        return decode_uri_component(fragment)
    if scheme != "ss" or not payload:
        return DecodeError(REMARK_MISSING)
    try:
        b64decode_lenient(payload)
    except ValueError:
        return DecodeError(REMARK_MISSING)
    return ss_default_remark


def _ssr_remark(payload: str):
    decoded = b64decode_lenient(payload, urlsafe=True).decode("utf-8")
    _, _, query = decoded.partition("/?")
    # Keep "+" literal: it is part of the base64 alphabet, not an encoded space.
    params = urllib.parse.parse_qsl(query.replace("+", "%2B"), keep_blank_values=True)
    for key, value in params:
        if key == "remarks":
            return b64decode_lenient(value, urlsafe=True).decode("utf-8")
    return DecodeError(REMARK_MISSING)
