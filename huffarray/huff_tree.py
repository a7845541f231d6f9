from __future__ import annotations
import operator
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional

from huff_errors import InsufficientAlphabet

Less = Callable[[Any, Any], bool]
Combine = Callable[[Any, Any], Any]


@dataclass
class Node:
    weight: Any
    symbol: Optional[int] = None

    @property
    def is_leaf(self) -> bool:
        return self.symbol is not None


class Frontier:
    """
    Two ascending runs of one node list, consumed smallest-first.

    lo..lo_end is the leaf run, hi..hi_end the internal run. hi_end=None
    tracks the current end of the list, which grows while the tree is built.
    The high run is taken only when strictly smaller, so leaves win ties.
    """

    def __init__(self, nodes: List[Node], lo: int, lo_end: int,
                 hi: int, hi_end: Optional[int] = None, less: Less = operator.lt):
        self.nodes = nodes
        self.lo, self.lo_end = lo, lo_end
        self.hi, self.hi_end = hi, hi_end
        self.less = less

    def _take_lo(self) -> int:
        i = self.lo
        self.lo += 1
        return i

    def _take_hi(self) -> int:
        i = self.hi
        self.hi += 1
        return i

    def pop(self) -> int:
        hi_end = len(self.nodes) if self.hi_end is None else self.hi_end
        if self.hi >= hi_end:
            if self.lo >= self.lo_end:
                raise IndexError("both frontiers exhausted")
            return self._take_lo()
        if self.lo >= self.lo_end:
            return self._take_hi()
        if self.less(self.nodes[self.hi].weight, self.nodes[self.lo].weight):
            return self._take_hi()
        return self._take_lo()


def build_merge_array(nodes: List[Node], less: Less = operator.lt,
                      combine: Combine = operator.add) -> List[Node]:
    """
    Grow k leaves (sorted ascending by weight) in place into the 2k-1 node
    merge array: leaves first, then internal nodes in creation order, root last.
    """
    k = len(nodes)
    if k < 2:
        raise InsufficientAlphabet(f"need at least 2 distinct symbols, got {k}")
    for a, b in zip(nodes, nodes[1:]):
        if less(b.weight, a.weight):
            raise ValueError("Leaves must be sorted ascending by weight")

    n = 2 * k - 1
    # the first two leaves are the two smallest nodes overall
    nodes.append(Node(combine(nodes[0].weight, nodes[1].weight)))
    fr = Frontier(nodes, 2, k, k, None, less)
    while len(nodes) < n:
        x = fr.pop()
        y = fr.pop()
        nodes.append(Node(combine(nodes[x].weight, nodes[y].weight)))
    return nodes


def merge_order(nodes: List[Node], less: Less = operator.lt) -> Iterator[int]:
    """Indices of a complete merge array in construction (ascending weight) order."""
    k = len(nodes) // 2 + 1
    fr = Frontier(nodes, 0, k, k, len(nodes), less)
    for _ in range(len(nodes)):
        yield fr.pop()
