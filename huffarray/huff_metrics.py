from huff_codec import split
from huff_freq import to_symbols


def size_report(data, bits: str) -> dict:
    """Sizes in bits of the raw input (8 per symbol) and of its compressed stream."""
    header, payload = split(bits)
    input_bits = 8 * len(to_symbols(data))
    output_bits = len(bits)
    return {
        "input_bits": input_bits,
        "output_bits": output_bits,
        "header_bits": len(header),
        "payload_bits": len(payload),
        "ratio": float(input_bits) / output_bits if output_bits else float("inf"),
    }
