"""FP-Tree stored as an index-addressed node arena."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .support import count_items

ROOT = 0


class FPNode:
    __slots__ = ("item", "count", "parent", "children", "link")

    def __init__(self, item: str | None, count: int, parent: int | None) -> None:
        self.item = item
        self.count = count
        self.parent = parent
        self.children: Dict[str, int] = {}
        self.link: int | None = None


@dataclass
class HeaderEntry:
    count: int = 0
    head: Optional[int] = None
    tail: Optional[int] = None


@dataclass
class FPTree:
    """Prefix tree over frequency-ordered transactions.

    ``nodes[0]`` is the root. ``parent`` and ``link`` hold arena indices; the
    header table threads every node carrying an item in creation order.
    """

    nodes: List[FPNode] = field(default_factory=lambda: [FPNode(None, 0, None)])
    header: Dict[str, HeaderEntry] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        transactions: Sequence[Sequence[str]],
        min_count: int,
        weights: Optional[Sequence[int]] = None,
    ) -> "FPTree":
        """Two passes: count items, then insert each transaction's frequent items in order."""
        item_counts = count_items(transactions, weights)
        frequent = {item: count for item, count in item_counts.items() if count >= min_count}
        tree = cls.with_items(frequent)
        for index, transaction in enumerate(transactions):
            weight = weights[index] if weights is not None else 1
            tree.insert(tree.order(set(transaction)), weight)
        return tree

    @classmethod
    def with_items(cls, item_counts: Dict[str, int]) -> "FPTree":
        tree = cls()
        for item, count in item_counts.items():
            tree.header[item] = HeaderEntry(count=count)
        return tree

    def order(self, items: Sequence[str] | set) -> List[str]:
        """Keep the items this tree tracks, by descending count then label."""
        kept = [item for item in items if item in self.header]
        kept.sort(key=lambda item: (-self.header[item].count, item))
        return kept

    def insert(self, items: Sequence[str], count: int = 1) -> None:
        current = ROOT
        for item in items:
            child = self.nodes[current].children.get(item)
            if child is None:
                child = len(self.nodes)
                self.nodes.append(FPNode(item, count, current))
                self.nodes[current].children[item] = child
                self._link(item, child)
            else:
                self.nodes[child].count += count
            current = child

    def _link(self, item: str, index: int) -> None:
        entry = self.header[item]
        if entry.head is None:
            entry.head = index
        else:
            self.nodes[entry.tail].link = index  # type: ignore[index]
        entry.tail = index

    @property
    def item_counts(self) -> Dict[str, int]:
        return {item: entry.count for item, entry in self.header.items()}

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    def is_empty(self) -> bool:
        return not self.nodes[ROOT].children

    def node_links(self, item: str) -> Iterator[int]:
        index = self.header[item].head if item in self.header else None
        while index is not None:
            yield index
            index = self.nodes[index].link

    def prefix_path(self, index: int) -> List[str]:
        """Ancestor items of ``index`` from just below the root down to its parent."""
        path: List[str] = []
        current = self.nodes[index].parent
        while current is not None and current != ROOT:
            node = self.nodes[current]
            path.append(node.item)  # type: ignore[arg-type]
            current = node.parent
        path.reverse()
        return path

    def conditional_pattern_base(self, item: str) -> List[Tuple[List[str], int]]:
        base: List[Tuple[List[str], int]] = []
        for index in self.node_links(item):
            path = self.prefix_path(index)
            if path:
                base.append((path, self.nodes[index].count))
        return base

    def to_dict(self) -> Dict[str, object]:
        """Flatten the tree into node and edge lists (depth-first, children in insertion order)."""
        nodes: List[Dict[str, object]] = []
        links: List[Dict[str, int]] = []
        stack: List[Tuple[int, int]] = [(ROOT, 0)]
        while stack:
            index, depth = stack.pop()
            node = self.nodes[index]
            nodes.append({"id": index, "item": node.item or "root", "count": node.count, "depth": depth})
            if node.parent is not None:
                links.append({"source": node.parent, "target": index})
            for child in reversed(list(node.children.values())):
                stack.append((child, depth + 1))
        return {"nodes": nodes, "links": links}


def conditional_tree(base: List[Tuple[List[str], int]], min_count: int) -> FPTree:
    """Build the conditional FP-Tree for one item from its pattern base."""
    counts: Counter = Counter()
    for path, count in base:
        for item in path:
            counts[item] += count
    tree = FPTree.with_items({item: count for item, count in counts.items() if count >= min_count})
    if not tree.header:
        return tree
    for path, count in base:
        ordered = tree.order(path)
        if ordered:
            tree.insert(ordered, count)
    return tree
