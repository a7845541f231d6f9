from __future__ import annotations
import operator
from typing import List, Tuple

from huff_errors import InvalidSymbolEncoding, MalformedHeader
from huff_tree import Less, Node, merge_order

# Header (bit string, MSB-first):
# node_count(16) then, per node in construction order:
#   leaf:     '1' symbol(8)
#   internal: '0'
COUNT_BITS = 16
SYMBOL_BITS = 8
MAX_NODES = (1 << COUNT_BITS) - 1


def symbol_to_bits(sym: int) -> str:
    if not (0 <= sym < (1 << SYMBOL_BITS)):
        raise InvalidSymbolEncoding(f"symbol out of range: {sym}")
    return format(sym, f"0{SYMBOL_BITS}b")


def bits_to_symbol(bits: str) -> int:
    if len(bits) != SYMBOL_BITS or set(bits) - {"0", "1"}:
        raise InvalidSymbolEncoding(f"bad symbol bits: {bits!r}")
    return int(bits, 2)


def header_size(n_leaves: int) -> int:
    """Header length in bits for a tree with n_leaves leaves."""
    return COUNT_BITS + (2 * n_leaves - 1) + SYMBOL_BITS * n_leaves


def write_header(nodes: List[Node], less: Less = operator.lt) -> str:
    n = len(nodes)
    if n > MAX_NODES:
        raise ValueError(f"too many nodes for header: {n}")
    k = n // 2 + 1
    out = [format(n, f"0{COUNT_BITS}b")]
    for i in merge_order(nodes, less):
        if i < k:
            out.append("1")
            out.append(symbol_to_bits(nodes[i].symbol))
        else:
            out.append("0")
    return "".join(out)


def read_header(bits: str) -> Tuple[List[Node], int]:
    """
    Rebuild the shape-only merge array from a header.

    Returns (nodes, pos): nodes[j] = Node(weight=i, symbol) where i is the
    node's position in the header, leaves first, then internals; pos is the
    index of the first payload bit.
    """
    if len(bits) < COUNT_BITS:
        raise MalformedHeader("header too short")
    count_bits = bits[:COUNT_BITS]
    if set(count_bits) - {"0", "1"}:
        raise MalformedHeader("node count is not binary")
    total = int(count_bits, 2)
    if total < 3 or total % 2 == 0:
        raise MalformedHeader(f"invalid node count: {total}")
    if COUNT_BITS + total > len(bits):
        raise MalformedHeader(f"node count {total} exceeds available bits")

    n_leaves = total // 2 + 1
    nodes: List[Node] = [None] * total
    lnodes = 0
    inodes = n_leaves
    seen = set()
    pos = COUNT_BITS
    for i in range(total):
        if pos >= len(bits):
            raise MalformedHeader("shape bits truncated")
        flag = bits[pos]
        pos += 1
        if flag == "1":
            if lnodes >= n_leaves:
                raise MalformedHeader("too many leaf nodes")
            if pos + SYMBOL_BITS > len(bits):
                raise MalformedHeader("leaf symbol truncated")
            sym = bits_to_symbol(bits[pos:pos + SYMBOL_BITS])
            pos += SYMBOL_BITS
            if sym in seen:
                raise MalformedHeader(f"duplicate leaf symbol: {sym}")
            seen.add(sym)
            nodes[lnodes] = Node(i, sym)
            lnodes += 1
        elif flag == "0":
            # an internal node consumes two nodes that precede it
            if i < 2 * (inodes - n_leaves + 1):
                raise MalformedHeader(f"internal node at {i} has no children")
            if inodes >= total:
                raise MalformedHeader("too many internal nodes")
            nodes[inodes] = Node(i)
            inodes += 1
        else:
            raise MalformedHeader(f"bad shape bit: {flag!r}")

    if lnodes != n_leaves:
        raise MalformedHeader(f"expected {n_leaves} leaves, got {lnodes}")
    return nodes, pos
