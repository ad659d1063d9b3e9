"""
Static Huffman encoder / decoder for 7-bit ASCII text.

Encoding produces two artifacts: the packed bitstream and the code book text.
Decoding needs both.

How to run:
  python huffman_codec.py encode --input input.txt --output output-mada.dat --code-book dec_tab-mada.txt
  python huffman_codec.py decode --input output-mada.dat --code-book dec_tab-mada.txt --output decompress.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from huffman_bits import pack_bits, unpack_bits
from huffman_codebook import deserialize_code_book, serialize_code_book
from huffman_errors import HuffmanError
from huffman_tree import build_code_map

logger = logging.getLogger(__name__)

DEFAULT_ASCII_INPUT = "input.txt"
DEFAULT_COMPRESSED = "output-mada.dat"
DEFAULT_CODE_BOOK = "dec_tab-mada.txt"
DEFAULT_DECOMPRESSED = "decompress.txt"


def encode(data: bytes) -> Tuple[bytes, str]:
    """Returns (packed bytes, code book text)."""
    code_map = build_code_map(data)
    return pack_bits(data, code_map), serialize_code_book(code_map)


def decode(packed: bytes, code_book_text: str) -> bytes:
    code_map = deserialize_code_book(code_book_text)
    return unpack_bits(packed, code_map)


def decode_text(packed: bytes, code_book_text: str) -> str:
    return decode(packed, code_book_text).decode("ascii")


# File collaborators

def read_file_bytes(path: Path) -> bytes:
    return path.read_bytes()

def read_file_text(path: Path) -> str:
    return path.read_text(encoding="ascii")

def write_file_bytes(path: Path, data: bytes) -> None:
    path.write_bytes(data)

def write_file_text(path: Path, text: str) -> None:
    path.write_text(text, encoding="ascii")


def encode_file(ascii_input: Path, packed_output: Path, code_book_output: Path) -> Tuple[int, int]:
    """
    Encode `ascii_input`, write the packed data and the code book.

    Nothing is written unless encoding succeeds. Returns (input size, packed size).
    """
    data = read_file_bytes(ascii_input)
    packed, code_book_text = encode(data)

    write_file_text(code_book_output, code_book_text)
    try:
        write_file_bytes(packed_output, packed)
    except OSError:
        # the code book alone is useless
        code_book_output.unlink(missing_ok=True)
        raise
    logger.info("Encode: %s (%dB) -> %s (%dB), code book %s (%dB)",
                ascii_input, len(data), packed_output, len(packed), code_book_output, len(code_book_text))
    return len(data), len(packed)


def decode_file(packed_input: Path, code_book_input: Path, decompressed_output: Path) -> int:
    """
    Decode `packed_input` with the code book file. Returns the decoded size.
    """
    packed = read_file_bytes(packed_input)
    code_book_text = read_file_text(code_book_input).strip()
    decoded = decode(packed, code_book_text)

    write_file_bytes(decompressed_output, decoded)
    logger.info("Decode: %s (%dB) -> %s (%dB)", packed_input, len(packed), decompressed_output, len(decoded))
    return len(decoded)


# Main

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Static Huffman coding for 7-bit ASCII files")
    ap.add_argument("--verbose", "-v", action="store_true", help="Log debug details")
    sub = ap.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encode", help="Compress an ASCII file")
    enc.add_argument("--input", type=str, default=DEFAULT_ASCII_INPUT, help="ASCII file to compress")
    enc.add_argument("--output", type=str, default=DEFAULT_COMPRESSED, help="Packed data output file")
    enc.add_argument("--code-book", type=str, default=DEFAULT_CODE_BOOK, help="Code book output file")

    dec = sub.add_parser("decode", help="Decompress packed data with its code book")
    dec.add_argument("--input", type=str, default=DEFAULT_COMPRESSED, help="Packed data file")
    dec.add_argument("--code-book", type=str, default=DEFAULT_CODE_BOOK, help="Code book file")
    dec.add_argument("--output", type=str, default=DEFAULT_DECOMPRESSED, help="Decompressed output file")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        if args.command == "encode":
            encode_file(Path(args.input), Path(args.output), Path(args.code_book))
        else:
            decode_file(Path(args.input), Path(args.code_book), Path(args.output))
    except (HuffmanError, OSError, UnicodeError) as e:
        logger.error("%s failed: %s", args.command, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
