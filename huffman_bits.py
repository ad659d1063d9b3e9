import logging
from typing import Dict

from huffman_codebook import reverse_code_book
from huffman_errors import IncompleteCodeError, MalformedStreamError, MissingCodeError

logger = logging.getLogger(__name__)

SENTINEL_BIT = "1"


def pack_bits(data: bytes, code_map: Dict[int, str]) -> bytes:
    """
    Converts Huffman codes into packed bytes, MSB first.

    The codes of `data` are followed by a single 1 bit and then by the fewest
    0 bits that fill the last byte.
    """
    out = bytearray()
    acc = 0
    acc_bits = 0

    def push(bits: str) -> None:
        nonlocal acc, acc_bits
        for ch in bits:
            acc = (acc << 1) | (1 if ch == '1' else 0)
            acc_bits += 1
            if acc_bits == 8:
                out.append(acc & 0xFF)
                acc = 0
                acc_bits = 0

    for b in data:
        bits = code_map.get(b)
        if bits is None:
            raise MissingCodeError(b)
        push(bits)
    push(SENTINEL_BIT)

    pad_bits = 0
    if acc_bits != 0:
        pad_bits = 8 - acc_bits
        acc = acc << pad_bits
        out.append(acc & 0xFF)

    logger.debug("packed %d symbols into %d bytes (%d pad bits)", len(data), len(out), pad_bits)
    return bytes(out)


def bytes_to_bits(packed: bytes) -> str:
    return "".join(f"{x:08b}" for x in packed)


def strip_sentinel(bits: str) -> str: # drop the last 1 bit and the padding after it
    cut = bits.rfind(SENTINEL_BIT)
    if cut < 0:
        raise MalformedStreamError("packed data contains no sentinel bit")
    return bits[:cut]


def unpack_bits(packed: bytes, code_map: Dict[int, str]) -> bytes:
    """
    Decode packed bytes with a code book (symbol -> path).
    """
    bits = strip_sentinel(bytes_to_bits(packed))
    reverse_codes = reverse_code_book(code_map)
    longest = max((len(path) for path in reverse_codes), default=0)

    decoded = bytearray()
    start = 0
    for i in range(len(bits)):
        candidate = bits[start:i + 1]
        symbol = reverse_codes.get(candidate)
        if symbol is not None:
            decoded.append(symbol)
            start = i + 1
        elif len(candidate) >= longest:
            # no code is this long, so the candidate can never match
            raise IncompleteCodeError(candidate, start)

    if start != len(bits):
        raise IncompleteCodeError(bits[start:], start)

    logger.debug("unpacked %d payload bits into %d symbols", len(bits), len(decoded))
    return bytes(decoded)
