import argparse
import os

from bitstream import read_container
from huff_codec import decompress


def main(argv=None):
    ap = argparse.ArgumentParser(description="Decode a .hufa container back to the original bytes")
    ap.add_argument("--input", required=True, help="path to .hufa")
    ap.add_argument("--output", required=True, help="path to output file")
    args = ap.parse_args(argv)

    with open(args.input, "rb") as f:
        bits = read_container(f)

    data = decompress(bits)

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.output, "wb") as f:
        f.write(data)
    print(f"[decode] wrote {args.output} ({len(data)} bytes from {len(bits)} bits)")


if __name__ == "__main__":
    main()
