"""Display labels for the node list."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from nodesort.config import merge_cfg
from nodesort.links.constants import INVALID, MESSAGES, VALID_RULED, VALID_UNRULED
from nodesort.links.models import ClassifiedItem

CSS_CLASSES = {
    VALID_RULED: "status-ruled",
    VALID_UNRULED: "status-unruled",
    INVALID: "error",
}


def link_preview(link: str, max_len: int) -> str:
    return f"{link[:max_len]}..."


def node_label(node: ClassifiedItem, cfg: Optional[Dict] = None) -> str:
    if node.status != INVALID:
        return node.remark
    merged = merge_cfg(cfg)
    messages = MESSAGES[merged["messageLocale"]]
    preview = link_preview(node.original_link, int(merged["previewMaxLen"]))
    return f"{messages['error_tag']} {messages[node.error_kind]} - ({preview})"


def node_css_class(node: ClassifiedItem) -> str:
    return CSS_CLASSES[node.status]


def render_list(items: Sequence[ClassifiedItem], cfg: Optional[Dict] = None) -> List[str]:
    merged = merge_cfg(cfg)
    return [node_label(item, merged) for item in items]
