import argparse
import os

from bitstream import write_container
from huff_codec import compress
from huff_metrics import size_report


def main(argv=None):
    ap = argparse.ArgumentParser(description="Huffman-compress a file into a .hufa container")
    ap.add_argument("--input", required=True, help="path to any file")
    ap.add_argument("--output", required=True, help="path to .hufa")
    args = ap.parse_args(argv)

    with open(args.input, "rb") as f:
        data = f.read()

    bits = compress(data)

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.output, "wb") as f:
        nbytes = write_container(f, bits)

    r = size_report(data, bits)
    print(f"[encode] wrote {args.output}")
    print(f"[encode] input={len(data)} bytes, output={nbytes} bytes")
    print(f"[encode] header_bits={r['header_bits']}, payload_bits={r['payload_bits']}, ratio={r['ratio']:.3f}")


if __name__ == "__main__":
    main()
