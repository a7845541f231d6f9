import numpy as np


def to_symbols(data) -> np.ndarray:
    """
    Input: bytes / bytearray / memoryview / str (UTF-8) / 1D uint8 array
    Output: 1D uint8 array of symbols
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return np.frombuffer(bytes(data), dtype=np.uint8)
    if isinstance(data, np.ndarray):
        if data.dtype != np.uint8 or data.ndim != 1:
            raise ValueError("Symbol array must be 1D uint8")
        return data
    raise TypeError(f"Unsupported input type: {type(data).__name__}")


def count_runs(sorted_syms):
    """
    Collapse consecutive equal symbols into (count, symbol) pairs.
    Input must already have equal symbols adjacent (e.g. sorted).
    """
    a = np.asarray(sorted_syms)
    if a.size == 0:
        return []
    starts = np.flatnonzero(np.r_[True, a[1:] != a[:-1]])
    counts = np.diff(np.r_[starts, a.size])
    return [(int(c), int(a[s])) for c, s in zip(counts, starts)]


def frequency_table(data):
    """(count, symbol) per distinct symbol, ordered by symbol."""
    syms = np.sort(to_symbols(data), kind="stable")
    return count_runs(syms)
