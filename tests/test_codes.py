import operator
import random

import pytest

from huff_codec import build_code_table
from huff_codes import generate_codes, reverse_cmp
from huff_errors import InsufficientAlphabet
from huff_tree import Node, build_merge_array


def is_prefix_free(codes):
    codes = sorted(codes)
    return all(not b.startswith(a) for a, b in zip(codes, codes[1:]))


def test_codes_for_small_tree():
    nodes = build_merge_array([Node(2, "a"), Node(3, "b"), Node(4, "c")])
    got = {nodes[i].symbol: c for i, c in generate_codes(nodes, 3, reverse_cmp(operator.lt))}
    assert got == {"c": "0", "b": "11", "a": "10"}


def test_codes_with_ties():
    assert build_code_table(b"abcd") == {
        ord("a"): "00", ord("b"): "01", ord("c"): "10", ord("d"): "11",
    }


def test_generate_codes_is_lazy():
    nodes = build_merge_array([Node(1, 0), Node(1, 1), Node(2, 2)])
    gen = generate_codes(nodes, 3, reverse_cmp(operator.lt))
    first = next(gen)
    assert first == (2, "0")
    assert len(list(gen)) == 2


def test_needs_two_leaves():
    with pytest.raises(InsufficientAlphabet):
        list(generate_codes([Node(1, 0)], 1, reverse_cmp(operator.lt)))


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_prefix_free_random(seed):
    rng = random.Random(seed)
    n_syms = rng.randint(2, 256)
    data = bytes(rng.randrange(n_syms) for _ in range(2000))
    table = build_code_table(data)
    assert set(table) == set(data)
    assert is_prefix_free(table.values())


def test_skewed_lengths_follow_weights():
    table = build_code_table(b"a" * 50 + b"b" * 20 + b"c" * 5 + b"d")
    a, b, c, d = (len(table[ord(x)]) for x in "abcd")
    assert a <= b <= c <= d
