import numpy as np
import pytest

from huff_freq import count_runs, frequency_table, to_symbols


def test_count_runs_sorted():
    assert count_runs([1, 1, 2, 5, 5, 5]) == [(2, 1), (1, 2), (3, 5)]


def test_count_runs_keeps_input_order():
    # only consecutive runs are merged
    assert count_runs([3, 3, 1, 3]) == [(2, 3), (1, 1), (1, 3)]


def test_count_runs_empty():
    assert count_runs([]) == []


def test_frequency_table_orders_by_symbol():
    assert frequency_table(b"banana") == [(3, ord("a")), (1, ord("b")), (2, ord("n"))]


def test_to_symbols_accepts_text_and_arrays():
    assert to_symbols("hé").tolist() == list("hé".encode("utf-8"))
    arr = np.array([7, 8], dtype=np.uint8)
    assert to_symbols(arr) is arr
    assert to_symbols(bytearray(b"ab")).tolist() == [97, 98]


def test_to_symbols_rejects_other_inputs():
    with pytest.raises(ValueError):
        to_symbols(np.array([1, 2], dtype=np.int32))
    with pytest.raises(TypeError):
        to_symbols([1, 2, 3])
