import numpy as np

from huff_errors import InvalidSymbolEncoding, MalformedHeader


def pack_bits(bits: str) -> bytes:
    """Pack a '0'/'1' string into bytes (MSB-first, last byte zero-padded)."""
    raw = np.frombuffer(bits.encode("ascii", errors="replace"), dtype=np.uint8)
    b = raw - ord("0")
    if np.any(b > 1):
        raise InvalidSymbolEncoding("bit string may only contain '0' and '1'")
    return np.packbits(b).tobytes()


def unpack_bits(data: bytes, nbits: int) -> str:
    """Unpack bytes -> '0'/'1' string of length nbits (MSB-first)."""
    if nbits < 0 or nbits > 8 * len(data):
        raise MalformedHeader(f"bit count {nbits} exceeds {len(data)} bytes")
    b = np.unpackbits(np.frombuffer(data, dtype=np.uint8), count=nbits)
    return (b + ord("0")).tobytes().decode("ascii")
