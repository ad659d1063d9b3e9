import pytest

from huffman_codebook import deserialize_code_book, reverse_code_book, serialize_code_book
from huffman_errors import FormatError
from huffman_tree import build_code_map


def test_serialize_sorts_by_symbol():
    assert serialize_code_book({98: "1", 97: "0"}) == "97:0-98:1"
    assert serialize_code_book({13: "1010110", 10: "1010111"}) == "10:1010111-13:1010110"


def test_deserialize_reads_entries():
    assert deserialize_code_book("10:1010111-13:1010110") == {10: "1010111", 13: "1010110"}


def test_deserialize_restores_derived_book():
    code_map = build_code_map(b"Hello, World! 0123456789\n")
    assert deserialize_code_book(serialize_code_book(code_map)) == code_map


def test_single_entry_book():
    assert deserialize_code_book("97:0") == {97: "0"}


def test_duplicate_symbol_rejected():
    with pytest.raises(FormatError):
        deserialize_code_book("5:10-5:01")


@pytest.mark.parametrize("text", [
    "",
    "5",
    "5:",
    ":01",
    "a:01",
    "5:012",
    "5:0:1",
    "200:0",
    " 5:0",
    "5:0-",
    "5:0--6:1",
])
def test_malformed_book_rejected(text):
    with pytest.raises(FormatError):
        deserialize_code_book(text)


@pytest.mark.parametrize("text", ["097:0-098:1", "97:0-098:1", "00:0"])
def test_leading_zero_symbol_rejected(text):
    with pytest.raises(FormatError):
        deserialize_code_book(text)


def test_entries_out_of_order_rejected():
    with pytest.raises(FormatError):
        deserialize_code_book("98:1-97:0")


def test_symbol_zero_accepted():
    assert deserialize_code_book("0:0-1:1") == {0: "0", 1: "1"}


def test_canonical_text_survives_reload():
    text = "10:1010111-13:1010110-32:0-101:11"
    assert serialize_code_book(deserialize_code_book(text)) == text


def test_duplicate_path_rejected():
    with pytest.raises(FormatError):
        deserialize_code_book("5:01-6:01")


def test_prefix_path_rejected():
    with pytest.raises(FormatError):
        deserialize_code_book("5:0-6:01-7:1")


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        deserialize_code_book("x")


def test_reverse_code_book():
    assert reverse_code_book({97: "0", 98: "1"}) == {"0": 97, "1": 98}
