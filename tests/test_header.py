import pytest

from huff_codec import compress, split
from huff_errors import InvalidSymbolEncoding, MalformedHeader
from huff_header import bits_to_symbol, header_size, read_header, symbol_to_bits

A, B, C = "01100001", "01100010", "01100011"


def count(n):
    return format(n, "016b")


def test_header_layout():
    header, payload = split(compress(b"aabbbcccc"))
    assert header == count(5) + "1" + A + "1" + B + "1" + C + "00"
    assert payload == "10" * 2 + "11" * 3 + "0" * 4


@pytest.mark.parametrize("data", [b"ab", b"abracadabra", bytes(range(256)), b"hello world" * 3])
def test_header_size_law(data):
    k = len(set(data))
    header, _ = split(compress(data))
    assert len(header) == 16 + (2 * k - 1) + 8 * k == header_size(k)


def test_read_header_rebuilds_positions():
    nodes, pos = read_header(count(5) + "1" + A + "1" + B + "1" + C + "00" + "0110")
    assert pos == 16 + 5 + 24
    assert [(n.weight, n.symbol) for n in nodes] == [
        (0, 97), (1, 98), (2, 99), (3, None), (4, None),
    ]


def test_symbol_bits():
    assert symbol_to_bits(97) == A
    assert bits_to_symbol(A) == 97
    with pytest.raises(InvalidSymbolEncoding):
        bits_to_symbol("0110")
    with pytest.raises(InvalidSymbolEncoding):
        symbol_to_bits(256)


@pytest.mark.parametrize("bits", [
    "",
    "0101",
    # claims 255 nodes, has one bit
    count(255) + "1",
    # even and too-small node counts
    count(4) + "1" * 40,
    count(1) + "1" + A,
    # shape stream truncated
    count(3) + "1" + A + "1",
    # internal node before its children
    count(3) + "0" + "1" + A + "1" + B,
    # last node is a leaf
    count(3) + "1" + A + "0" + "1" + B,
    # too many leaves
    count(3) + "1" + A + "1" + B + "1" + C,
    # repeated symbol
    count(3) + "1" + A + "1" + A + "0",
    # bad shape bit
    count(3) + "x" + A + "1" + B + "0",
])
def test_malformed_headers(bits):
    with pytest.raises(MalformedHeader):
        read_header(bits)


def test_leaf_symbol_not_binary():
    with pytest.raises(InvalidSymbolEncoding):
        read_header(count(3) + "1" + "0120abcd" + "1" + B + "0")
