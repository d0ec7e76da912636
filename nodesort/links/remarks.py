"""Naming-rule parser for node remarks.

A ruled remark looks like ``US-East-Tier1-sid:alpha-sn:2-flag:D``; the
``sid``, ``sn`` and ``flag`` suffixes are optional but must appear in that
order.
"""

import re
from typing import Optional

from .models import ParsedRemark

REMARK_RE = re.compile(
    r"(?P<country>[^-]+)-(?P<region>[^-]+)-Tier(?P<tier>[0-9]+)"
    r"(?:-sid:(?P<sid>[^-]+))?"
    r"(?:-sn:(?P<sn>[0-9]+))?"
    r"(?:-flag:(?P<flag>[A-Z]))?"
)


def parse_remark(remark: str) -> Optional[ParsedRemark]:
    match = REMARK_RE.fullmatch(remark)
    if match is None:
        return None
    sn = match.group("sn")
    return ParsedRemark(
        country=match.group("country"),
        region=match.group("region"),
        tier=int(match.group("tier"), 10),
        sid=match.group("sid"),
        sn=int(sn, 10) if sn is not None else None,
        flag=match.group("flag"),
    )


def has_rule_conflict(parsed: ParsedRemark) -> bool:
    return parsed.sn is not None and parsed.sid is None
