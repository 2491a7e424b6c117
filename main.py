import argparse
import sys

from png_errors import PngError
from png_funs import decode_message, encode_message, print_png, remove_message


def build_parser():
    parser = argparse.ArgumentParser(
        "pngchunks", description="Hide, read and remove messages in PNG chunks."
    )
    parser.add_argument(
        "-p", "--png", required=True, metavar="FILE", help="path to target png file"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="add message into a png file")
    encode_parser.add_argument("chunk_type", help="4 letter chunk type, e.g. ruSt")
    encode_parser.add_argument("message")
    encode_parser.add_argument(
        "-o", "--output", metavar="FILE", help="write to FILE instead of in place"
    )

    decode_parser = subparsers.add_parser("decode", help="get a message from a png file")
    decode_parser.add_argument("chunk_type")

    remove_parser = subparsers.add_parser(
        "remove", help="remove a message from a png file"
    )
    remove_parser.add_argument("chunk_type")

    print_parser = subparsers.add_parser("print", help="print given png file")
    print_parser.add_argument(
        "--raw", action="store_true", help="also dump the raw bytes"
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        if args.command == "encode":
            encode_message(args.png, args.chunk_type, args.message, args.output)
        elif args.command == "decode":
            print(decode_message(args.png, args.chunk_type))
        elif args.command == "remove":
            remove_message(args.png, args.chunk_type)
        elif args.command == "print":
            print_png(args.png, args.raw)
    except (PngError, OSError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
