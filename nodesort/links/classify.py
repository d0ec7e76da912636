"""Per-line node classification and raw text ingestion."""

from typing import Dict, List, Optional, Tuple

from nodesort.config import merge_cfg

from .constants import MESSAGES, RULE_CONFLICT
from .decode import decode_link
from .models import ClassifiedItem, DecodeError, InvalidNode, RuledNode, UnruledNode
from .remarks import has_rule_conflict, parse_remark


def error_message(kind: str, cfg: Optional[Dict] = None) -> str:
    merged = merge_cfg(cfg)
    return MESSAGES[merged["messageLocale"]][kind]


def classify_link(link: str, node_id: int = 0, cfg: Optional[Dict] = None) -> ClassifiedItem:
    merged = merge_cfg(cfg)
    messages = MESSAGES[merged["messageLocale"]]

    decoded = decode_link(link, ss_default_remark=str(merged["ssDefaultRemark"]))
    if isinstance(decoded, DecodeError):
        return InvalidNode(
            id=node_id,
            original_link=link,
            error_kind=decoded.kind,
            error=messages[decoded.kind],
        )

    remark = decoded.remark
    parsed = parse_remark(remark)
    if parsed is None:
        return UnruledNode(id=node_id, original_link=link, remark=remark)
    if has_rule_conflict(parsed):
        return InvalidNode(
            id=node_id,
            original_link=link,
            error_kind=RULE_CONFLICT,
            error=messages[RULE_CONFLICT],
            remark=remark,
        )
    return RuledNode(id=node_id, original_link=link, remark=remark, parsed=parsed)


def split_links(text: str) -> List[Tuple[int, str]]:
    """Return ``(id, link)`` pairs for every non-blank line, ids counted 0..n-1."""
    links: List[Tuple[int, str]] = []
    for line in (text or "").split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        if not line.replace("\ufeff", "").strip():
            continue
        links.append((len(links), line))
    return links


def classify_text(text: str, cfg: Optional[Dict] = None) -> List[ClassifiedItem]:
    merged = merge_cfg(cfg)
    return [classify_link(link, node_id, merged) for node_id, link in split_links(text)]
