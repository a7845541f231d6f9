from __future__ import annotations
from collections import deque
from typing import Iterator, List, Tuple

from huff_errors import InsufficientAlphabet, MalformedHeader
from huff_tree import Frontier, Less, Node


def reverse_cmp(less: Less) -> Less:
    """Comparator for walking an encoder-built array from the root down."""
    return lambda a, b: not less(a, b)


def generate_codes(nodes: List[Node], n_leaves: int, cmp: Less) -> Iterator[Tuple[int, str]]:
    """
    Yield (index, code) for every leaf of a merge array.

    Children are not stored: walking from the root, each internal node takes
    the next two nodes picked from the reversed leaf run and the reversed
    internal run. The first pick gets '1', the second '0'.
    """
    if n_leaves < 2:
        raise InsufficientAlphabet(f"need at least 2 leaves, got {n_leaves}")
    total = len(nodes)
    n_internal = n_leaves - 1
    if total != n_leaves + n_internal:
        raise MalformedHeader(f"node count {total} does not match {n_leaves} leaves")

    # view[v] is nodes[total - 1 - v]; internals occupy [0, n_internal)
    view = nodes[::-1]
    fr = Frontier(view, n_internal, total, 1, n_internal, cmp)
    queue = deque([(0, "")])

    for _ in range(total):
        if not queue:
            raise MalformedHeader("tree shape is inconsistent (ran out of nodes)")
        v, code = queue.popleft()
        if v >= n_internal:
            yield total - 1 - v, code
            continue
        try:
            x = fr.pop()
            y = fr.pop()
        except IndexError:
            raise MalformedHeader("tree shape is inconsistent (missing children)") from None
        queue.append((x, code + "1"))
        queue.append((y, code + "0"))
