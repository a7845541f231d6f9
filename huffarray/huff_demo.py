import sys

from huff_codec import compress, decompress
from huff_errors import HuffmanError
from huff_metrics import size_report


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("expected one argument")
        return 1

    msg = args[0]
    print("--Input Message--")
    print(msg)

    try:
        data = msg.encode("utf-8")
        compressed = compress(data)
        result = decompress(compressed)
    except HuffmanError as exc:
        print(f"[error] {exc}")
        return 2

    print("\n--Compressed Message--")
    print(compressed)

    print("\n--Decompressed Message--")
    print(result.decode("utf-8"))

    r = size_report(data, compressed)
    print("\n--Compression Results--")
    print(f"Input Size: {r['input_bits']} bits")
    print(f"Output Size (including header): {r['output_bits']} bits")
    print(f"  header={r['header_bits']} payload={r['payload_bits']} ratio={r['ratio']:.3f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
