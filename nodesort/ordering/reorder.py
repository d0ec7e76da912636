"""Manual reordering and raw text reconstruction."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from nodesort.links.models import ClassifiedItem


def reorder(items: Sequence[ClassifiedItem], new_id_order: Iterable[int]) -> List[ClassifiedItem]:
    by_id: Dict[int, ClassifiedItem] = {}
    for item in items:
        if item.id in by_id:
            raise ValueError(f"Duplicate node id in items: {item.id}")
        by_id[item.id] = item

    ordered: List[ClassifiedItem] = []
    seen = set()
    for node_id in new_id_order:
        if node_id in seen:
            raise ValueError(f"Duplicate node id in order: {node_id}")
        if node_id not in by_id:
            raise ValueError(f"Unknown node id in order: {node_id}")
        seen.add(node_id)
        ordered.append(by_id[node_id])

    if len(seen) != len(by_id):
        missing = sorted(set(by_id) - seen)
        raise ValueError(f"Order is missing node ids: {missing}")
    return ordered


def move_order(items: Sequence[ClassifiedItem], node_id: int, index: int) -> List[int]:
    """Id order after dragging `node_id` to position `index` (clamped)."""
    ids = [item.id for item in items]
    if node_id not in ids:
        raise ValueError(f"Unknown node id: {node_id}")
    ids.remove(node_id)
    index = max(0, min(int(index), len(ids)))
    ids.insert(index, node_id)
    return ids


def to_text(items: Sequence[ClassifiedItem]) -> str:
    return "\n".join(item.original_link for item in items)
