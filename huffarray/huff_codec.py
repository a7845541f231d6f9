from __future__ import annotations
import io
import operator
from typing import Dict, Tuple

from bitstream import read_container, write_container
from huff_codes import generate_codes, reverse_cmp
from huff_errors import InsufficientAlphabet, MalformedPayload
from huff_freq import frequency_table, to_symbols
from huff_header import read_header, write_header
from huff_tree import Node, build_merge_array


def _leaves(data):
    freqs = frequency_table(data)
    if len(freqs) < 2:
        raise InsufficientAlphabet(f"need at least 2 distinct symbols, got {len(freqs)}")
    # stable: equal counts stay in ascending symbol order
    freqs.sort(key=lambda cs: cs[0])
    return [Node(weight=c, symbol=s) for c, s in freqs]


def _encoder_tables(data) -> Tuple[str, Dict[int, str]]:
    less = operator.lt
    leaves = _leaves(data)
    k = len(leaves)
    nodes = build_merge_array(leaves, less=less, combine=operator.add)
    header = write_header(nodes, less)
    codes = {nodes[i].symbol: code for i, code in generate_codes(nodes, k, reverse_cmp(less))}
    return header, codes


def build_code_table(data) -> Dict[int, str]:
    """symbol -> prefix code for the given input."""
    return _encoder_tables(data)[1]


def compress(data) -> str:
    """
    Returns: header ++ payload as a '0'/'1' string
    Raises InsufficientAlphabet for fewer than 2 distinct symbols.
    """
    syms = to_symbols(data)
    header, codes = _encoder_tables(syms)
    return header + "".join([codes[s] for s in syms.tolist()])


def _decode_table(nodes) -> Dict[int, Dict[str, int]]:
    """code length -> {code: symbol}, lengths ascending."""
    k = len(nodes) // 2 + 1
    # header nodes carry their stream position as weight; positions are unique
    cmp = lambda a, b: not (a < b)
    table: Dict[int, Dict[str, int]] = {}
    for i, code in generate_codes(nodes, k, cmp):
        table.setdefault(len(code), {})[code] = nodes[i].symbol
    return dict(sorted(table.items()))


def decompress(bits: str) -> bytes:
    nodes, pos = read_header(bits)
    table = _decode_table(nodes)
    max_len = max(table)

    out = bytearray()
    n = len(bits)
    while pos < n:
        acc = ""
        for L, codes in table.items():
            # read just enough extra bits to compare against codes of length L
            need = L - len(acc)
            if pos + need > n:
                raise MalformedPayload(f"payload truncated at bit {pos} of {n}")
            acc += bits[pos:pos + need]
            pos += need
            sym = codes.get(acc)
            if sym is not None:
                out.append(sym)
                break
        else:
            raise MalformedPayload(f"no code matches {acc!r} (longest code is {max_len} bits)")
    return bytes(out)


def split(bits: str) -> Tuple[str, str]:
    """(header_bits, payload_bits) of a compressed stream."""
    _, pos = read_header(bits)
    return bits[:pos], bits[pos:]


def compress_text(text: str) -> str:
    return compress(text.encode("utf-8"))


def decompress_text(bits: str) -> str:
    return decompress(bits).decode("utf-8")


def compress_bytes(data) -> bytes:
    """Compressed stream packed into the HUFA container."""
    buf = io.BytesIO()
    write_container(buf, compress(data))
    return buf.getvalue()


def decompress_bytes(blob: bytes) -> bytes:
    return decompress(read_container(io.BytesIO(blob)))
