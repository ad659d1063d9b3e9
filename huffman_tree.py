import heapq
import itertools
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from huffman_errors import EmptyInputError, InvalidSymbolError

logger = logging.getLogger(__name__)

ALPHABET_SIZE = 128 # 7-bit ASCII
SINGLE_SYMBOL_CODE = "0" # code of the lone leaf when the input has one distinct symbol


@dataclass(frozen=True)
class HuffmanNode: # Node for Huffman tree
    weight: int
    symbol: Optional[int] = None # byte for leaves, None for internal nodes
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.symbol is not None


def count_symbols(data: Iterable[int]) -> Dict[int, int]: # raw occurrence count per symbol
    counts: Dict[int, int] = {}
    for position, b in enumerate(data):
        if not 0 <= b < ALPHABET_SIZE:
            raise InvalidSymbolError(b, position)
        counts[b] = counts.get(b, 0) + 1
    return counts


def build_frequency_table(data: bytes) -> Dict[int, int]:
    """
    Normalized histogram over the whole alphabet.

    Each present symbol gets ceil(count / len(data) * 100), so every symbol
    that occurs weighs at least 1; absent symbols weigh 0.
    """
    if len(data) == 0:
        raise EmptyInputError("cannot build a frequency table from empty input")

    counts = count_symbols(data)
    total = len(data)
    table = {symbol: 0 for symbol in range(ALPHABET_SIZE)}
    for symbol, count in counts.items():
        table[symbol] = -(-count * 100 // total) # integer ceil
    return table


def build_huffman_tree(frequency_table: Dict[int, int]) -> HuffmanNode: # frequency_table: dict of symbol -> weight
    # heap entries are (weight, insertion order, node): equal weights pop in insertion order
    order = itertools.count()
    priority_queue = [
        (weight, next(order), HuffmanNode(weight, symbol=symbol))
        for symbol, weight in sorted(frequency_table.items())
        if weight > 0
    ]
    if not priority_queue:
        raise EmptyInputError("frequency table has no symbol with a nonzero weight")
    heapq.heapify(priority_queue)

    # Build the tree
    while len(priority_queue) > 1:
        left_weight, _, left = heapq.heappop(priority_queue)
        right_weight, _, right = heapq.heappop(priority_queue)
        merged_weight = left_weight + right_weight
        merged_node = HuffmanNode(merged_weight, left=left, right=right) # internal node with combined weight
        heapq.heappush(priority_queue, (merged_weight, next(order), merged_node))

    root = priority_queue[0][2]
    logger.debug("built Huffman tree with root weight %d", root.weight)
    return root # root of the tree


def generate_huffman_codes(root: HuffmanNode) -> Dict[int, str]: # root: root of the Huffman tree
    if root.is_leaf:
        # one distinct symbol: an empty path can't be packed
        return {root.symbol: SINGLE_SYMBOL_CODE}

    codes: Dict[int, str] = {}
    def generate_codes_helper(node, current_code): # recursive helper function to traverse the tree and generate codes
        # Leaf node -> assign code
        if node.is_leaf:
            codes[node.symbol] = current_code
            return

        generate_codes_helper(node.left, current_code + '0')
        generate_codes_helper(node.right, current_code + '1')

    generate_codes_helper(root, '')
    logger.debug("derived %d codes", len(codes))
    return codes # return the mapping of symbols to their corresponding Huffman codes


def build_code_map(data: bytes) -> Dict[int, str]: # frequency table -> tree -> codes in one step
    return generate_huffman_codes(build_huffman_tree(build_frequency_table(data)))
