"""Priority ordering of classified nodes."""

from __future__ import annotations

import functools
import math
from typing import Dict, List, Optional, Sequence

from nodesort.config import merge_cfg
from nodesort.links.constants import INVALID, VALID_RULED, VALID_UNRULED
from nodesort.links.models import ClassifiedItem, ParsedRemark

from .collation import collate

STATUS_PRIORITY = {VALID_RULED: 1, VALID_UNRULED: 2, INVALID: 3}


def _sign(value: float) -> int:
    if value < 0:
        return -1
    if value > 0:
        return 1
    return 0


def _compare_parsed(pa: ParsedRemark, pb: ParsedRemark, mode: str, priority_flag: str) -> int:
    # Order: flag > sid > sn > tier > region > country
    a_flag = 1 if pa.flag == priority_flag else 0
    b_flag = 1 if pb.flag == priority_flag else 0
    if a_flag != b_flag:
        return _sign(b_flag - a_flag)

    if pa.sid is not None and pb.sid is None:
        return -1
    if pa.sid is None and pb.sid is not None:
        return 1
    if pa.sid is not None and pb.sid is not None:
        sid_cmp = collate(pa.sid, pb.sid, mode)
        if sid_cmp:
            return sid_cmp

    a_sn = math.inf if pa.sn is None else pa.sn
    b_sn = math.inf if pb.sn is None else pb.sn
    if a_sn != b_sn:
        return _sign(a_sn - b_sn)

    if pa.tier != pb.tier:
        return _sign(pa.tier - pb.tier)

    region_cmp = collate(pa.region, pb.region, mode)
    if region_cmp:
        return region_cmp
    return collate(pa.country, pb.country, mode)


def _compare(a: ClassifiedItem, b: ClassifiedItem, mode: str, priority_flag: str) -> int:
    status_diff = STATUS_PRIORITY[a.status] - STATUS_PRIORITY[b.status]
    if status_diff:
        return _sign(status_diff)

    if a.status == VALID_RULED and b.status == VALID_RULED:
        return _compare_parsed(a.parsed, b.parsed, mode, priority_flag)

    if a.remark and b.remark:
        return collate(a.remark, b.remark, mode)
    return 0


def compare_parsed(pa: ParsedRemark, pb: ParsedRemark, cfg: Optional[Dict] = None) -> int:
    merged = merge_cfg(cfg)
    return _compare_parsed(pa, pb, merged["collation"], merged["priorityFlag"])


def compare(a: ClassifiedItem, b: ClassifiedItem, cfg: Optional[Dict] = None) -> int:
    merged = merge_cfg(cfg)
    return _compare(a, b, merged["collation"], merged["priorityFlag"])


def sort_nodes(items: Sequence[ClassifiedItem], cfg: Optional[Dict] = None) -> List[ClassifiedItem]:
    """Return a new list in priority order; ties keep their input order."""
    merged = merge_cfg(cfg)
    mode, priority_flag = merged["collation"], merged["priorityFlag"]
    return sorted(items, key=functools.cmp_to_key(lambda a, b: _compare(a, b, mode, priority_flag)))
