import struct

from bitpack import pack_bits, unpack_bits

MAGIC = b"HUFA"   # 4 bytes
VERSION = 1       # 1 byte

# Container header (little-endian):
# magic(4) version(1) nbits(u32)
# followed by ceil(nbits / 8) bytes of packed bits
HDR_FMT = "<4sBI"
HDR_SIZE = struct.calcsize(HDR_FMT)


def write_container(f, bits: str) -> int:
    """Write bits to f; returns the number of bytes written."""
    data = pack_bits(bits)
    f.write(struct.pack(HDR_FMT, MAGIC, VERSION, len(bits)))
    f.write(data)
    return HDR_SIZE + len(data)


def read_container(f) -> str:
    data = f.read(HDR_SIZE)
    if len(data) != HDR_SIZE:
        raise ValueError("Malformed stream: header too short")
    magic, ver, nbits = struct.unpack(HDR_FMT, data)
    if magic != MAGIC:
        raise ValueError("Bad magic number (not HUFA)")
    if ver != VERSION:
        raise ValueError(f"Unsupported version: {ver}")
    nbytes = (nbits + 7) // 8
    body = f.read(nbytes)
    if len(body) != nbytes:
        raise ValueError("Malformed stream: payload truncated")
    return unpack_bits(body, nbits)
