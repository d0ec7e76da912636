"""State container for the editable node list.

The list is rebuilt from scratch on every text change. Sorting and manual
moves replace it with a new permutation of the same nodes. Callers must not
interleave a rebuild with a pending reorder; passing the `generation` seen
when the reorder started turns that mistake into a `ValueError`.
"""

from __future__ import annotations

import sys
from typing import Dict, Iterable, List, Optional

from nodesort.config import merge_cfg
from nodesort.links.classify import classify_text
from nodesort.links.constants import STATUSES
from nodesort.links.models import ClassifiedItem

from .compare import sort_nodes
from .reorder import move_order, reorder, to_text
from .rendering import render_list


class NodeBoard:
    def __init__(self, cfg: Dict | None = None, stderr=None) -> None:
        self.cfg = merge_cfg(cfg)
        self.stderr = stderr if stderr is not None else sys.stderr
        self.items: List[ClassifiedItem] = []
        self.generation = 0
        self.sorted = False

    def rebuild(self, text: str) -> List[ClassifiedItem]:
        self.items = classify_text(text, self.cfg)
        self.generation += 1
        self.sorted = False
        return self.items

    def sort(self) -> List[ClassifiedItem]:
        self.items = sort_nodes(self.items, self.cfg)
        self.sorted = True
        return self.items

    def reorder(self, new_id_order: Iterable[int], generation: Optional[int] = None) -> List[ClassifiedItem]:
        if generation is not None and generation != self.generation:
            raise ValueError(
                f"Stale reorder: list was rebuilt (generation {generation} != {self.generation})"
            )
        self.items = reorder(self.items, new_id_order)
        self.sorted = False
        return self.items

    def move(self, node_id: int, index: int) -> List[ClassifiedItem]:
        return self.reorder(move_order(self.items, node_id, index))

    def text(self) -> str:
        return to_text(self.items)

    def labels(self) -> List[str]:
        return render_list(self.items, self.cfg)

    def counts(self) -> Dict[str, int]:
        counts = {status: 0 for status in STATUSES}
        for item in self.items:
            counts[item.status] += 1
        return counts

    def report_diagnostics(self) -> None:
        counts = self.counts()
        print(
            "nodesort diagnostics: "
            f"total={len(self.items)} "
            f"ruled={counts['VALID_RULED']} "
            f"unruled={counts['VALID_UNRULED']} "
            f"invalid={counts['INVALID']} "
            f"sorted={1 if self.sorted else 0} "
            f"generation={self.generation}",
            file=self.stderr,
        )
