"""
Text form of a code book.

One `<symbol>:<path>` entry per symbol, symbols in ascending decimal order,
entries joined by `-`, e.g. `10:1010111-13:1010110`.
"""

import logging
import re
from typing import Dict

from huffman_errors import FormatError
from huffman_tree import ALPHABET_SIZE

logger = logging.getLogger(__name__)

ENTRY_SEPARATOR = "-"
PATH_SEPARATOR = ":"

_ENTRY_RE = re.compile(r"(0|[1-9][0-9]*):([01]+)")


def serialize_code_book(code_map: Dict[int, str]) -> str:
    return ENTRY_SEPARATOR.join(
        f"{symbol}{PATH_SEPARATOR}{code_map[symbol]}" for symbol in sorted(code_map)
    )


def _parse_entry(entry: str):
    if PATH_SEPARATOR not in entry:
        raise FormatError(f"entry {entry!r} has no {PATH_SEPARATOR!r} separator")
    match = _ENTRY_RE.fullmatch(entry)
    if match is None:
        raise FormatError(f"entry {entry!r} is not <decimal symbol>:<binary path>")
    symbol = int(match.group(1))
    if symbol >= ALPHABET_SIZE:
        raise FormatError(f"symbol {symbol} in entry {entry!r} is outside the alphabet")
    return symbol, match.group(2)


def deserialize_code_book(text: str) -> Dict[int, str]:
    if not text:
        raise FormatError("code book text is empty")

    code_map: Dict[int, str] = {}
    seen_paths = set()
    previous = -1
    for entry in text.split(ENTRY_SEPARATOR):
        symbol, path = _parse_entry(entry)
        if symbol in code_map:
            raise FormatError(f"duplicate symbol {symbol}")
        if symbol < previous:
            raise FormatError(f"symbol {symbol} is out of ascending order")
        if path in seen_paths:
            raise FormatError(f"duplicate path {path!r}")
        code_map[symbol] = path
        seen_paths.add(path)
        previous = symbol

    # sorted paths put any prefix directly before some path it prefixes
    paths = sorted(seen_paths)
    for shorter, longer in zip(paths, paths[1:]):
        if longer.startswith(shorter):
            raise FormatError(f"path {shorter!r} is a prefix of {longer!r}")

    logger.debug("loaded code book with %d entries", len(code_map))
    return code_map


def reverse_code_book(code_map: Dict[int, str]) -> Dict[str, int]: # path -> symbol, for decoding
    return {path: symbol for symbol, path in code_map.items()}
