import pytest

from dskit.huffman import build_huffman_tree, decode, huffman_codes, parse_code_table

TABLE_LINES = ["1:111", "2:0", "", "+:110", "*:1010", "=:1011", "8:100"]


def test_codes_for_sample_weights():
    codes = huffman_codes(["A", "B", "C", "D"], [1, 3, 5, 7])
    assert codes == {"A": "100", "B": "101", "C": "11", "D": "0"}


def test_root_weight_is_total():
    root = build_huffman_tree(["a", "b", "c"], [2, 5, 4])
    assert root.weight == 11
    assert root.symbol is None


def test_codes_are_prefix_free():
    symbols = list("abcdefgh")
    codes = huffman_codes(symbols, [5, 9, 12, 13, 16, 45, 1, 1])
    values = list(codes.values())
    for first in values:
        for second in values:
            if first is not second:
                assert not second.startswith(first)


def test_heavier_symbol_never_gets_longer_code():
    symbols = list("wxyz")
    weights = [1, 2, 4, 8]
    codes = huffman_codes(symbols, weights)
    lengths = [len(codes[s]) for s in symbols]
    assert lengths == sorted(lengths, reverse=True)


def test_encode_decode_round_trip():
    symbols = list("abcde")
    codes = huffman_codes(symbols, [3, 1, 4, 1, 5])
    text = "badcabeed"
    bits = "".join(codes[c] for c in text)
    assert decode(bits, codes) == text


def test_single_symbol_has_empty_code():
    assert huffman_codes(["q"], [3]) == {"q": ""}


def test_bad_inputs():
    with pytest.raises(ValueError):
        build_huffman_tree(["a"], [1, 2])
    with pytest.raises(ValueError):
        build_huffman_tree([], [])
    with pytest.raises(ValueError):
        build_huffman_tree(["a", "a"], [1, 2])


def test_parse_code_table_skips_blank_lines():
    table = parse_code_table(TABLE_LINES)
    assert len(table) == 6
    assert table["1"] == "111"
    assert table["*"] == "1010"


def test_parse_code_table_rejects_malformed_line():
    with pytest.raises(ValueError):
        parse_code_table(["ab"])


def test_decode_with_parsed_table():
    table = parse_code_table(TABLE_LINES)
    bits = table["1"] + table["8"] + table["="] + table["2"]
    assert decode(bits, table) == "18=2"


def test_decode_ignores_incomplete_tail():
    table = parse_code_table(TABLE_LINES)
    assert decode("1111", table) == "1"