import logging
from itertools import product

import pytest

from idshuffle.codec.alphabet import chunk_alphabet, shuffle
from idshuffle.codec.blocklist import is_blocked
from idshuffle.codec.engine import decode_id, encode_numbers
from idshuffle.codec.numeral import to_symbols
from idshuffle.config import build_config
from idshuffle.exceptions import EncodingError, NumberOutOfRangeError, RetryExhaustedError


@pytest.fixture(scope="module")
def cfg():
    return build_config()


@pytest.fixture(scope="module")
def open_cfg():
    return build_config(blocklist=[])


def test_known_ids(cfg):
    assert encode_numbers(cfg, [1, 2, 3]) == "86Rf07"
    assert decode_id(cfg, "86Rf07") == [1, 2, 3]


def test_empty_input(cfg):
    assert encode_numbers(cfg, []) == ""
    assert decode_id(cfg, "") == []


def test_zero_round_trips(cfg):
    id_ = encode_numbers(cfg, [0])
    assert id_
    assert decode_id(cfg, id_) == [0]


@pytest.mark.parametrize(
    "numbers",
    [
        [0, 0, 0],
        [1, 2, 3],
        [100, 200, 300],
        [2**63 - 1],
        [2**80, 0, 7],
        list(range(50)),
    ],
)
def test_round_trip(cfg, numbers):
    assert decode_id(cfg, encode_numbers(cfg, numbers)) == numbers


def test_negative_number_is_rejected(cfg):
    with pytest.raises(NumberOutOfRangeError) as excinfo:
        encode_numbers(cfg, [1, -2, 3])
    assert excinfo.value.index == 1
    assert excinfo.value.value == -2
    assert isinstance(excinfo.value, EncodingError)


@pytest.mark.parametrize("bad", [1.5, "3", True, None])
def test_non_integer_is_rejected(cfg, bad):
    with pytest.raises(EncodingError):
        encode_numbers(cfg, [1, bad])


def test_foreign_character_anywhere_yields_empty(cfg):
    id_ = encode_numbers(cfg, [1, 2, 3])
    assert decode_id(cfg, "*" + id_) == []
    assert decode_id(cfg, id_[:3] + "*" + id_[3:]) == []
    assert decode_id(cfg, id_ + "*") == []


def test_decode_rejects_non_string(cfg):
    with pytest.raises(TypeError):
        decode_id(cfg, 123)


def test_leading_separator_yields_empty(open_cfg):
    prefix = open_cfg.alphabet[5]
    separator = chunk_alphabet(open_cfg.alphabet, 5)[0]
    assert decode_id(open_cfg, prefix + separator + "abc") == []


def test_empty_chunk_returns_partial_result(open_cfg):
    id_ = encode_numbers(open_cfg, [7, 8])
    alphabet = chunk_alphabet(open_cfg.alphabet, open_cfg.alphabet.index(id_[0]))
    first_chunk = to_symbols(7, alphabet[1:])
    second_separator = shuffle(alphabet)[0]

    malformed = id_[0] + first_chunk + alphabet[0] + second_separator + first_chunk
    assert decode_id(open_cfg, malformed) == [7]


def test_trailing_separator_is_ignored(open_cfg):
    id_ = encode_numbers(open_cfg, [42])
    separator = chunk_alphabet(open_cfg.alphabet, open_cfg.alphabet.index(id_[0]))[0]
    assert decode_id(open_cfg, id_ + separator) == [42]


@pytest.mark.parametrize("min_length", [1, 5, 10, 62, 100, 255])
def test_min_length_is_honoured(min_length):
    cfg = build_config(min_length=min_length)
    for numbers in ([0], [1], [1, 2, 3], [10**12, 5]):
        id_ = encode_numbers(cfg, numbers)
        assert len(id_) >= min_length
        assert decode_id(cfg, id_) == numbers


def test_min_length_equal_to_alphabet():
    cfg = build_config(min_length=62)
    assert (
        encode_numbers(cfg, [1, 2, 3])
        == "86Rf07xd4zBmiJXQG6otHEbew02c3PWsUOLZxADhCpKj7aVFv9I8RquYrNlSTM"
    )


def test_default_blocklist_forces_retry(cfg, open_cfg, caplog):
    assert decode_id(cfg, "aho1e") == [4572721]
    assert encode_numbers(open_cfg, [4572721]) == "aho1e"

    with caplog.at_level(logging.DEBUG, logger="idshuffle.codec.engine"):
        assert encode_numbers(cfg, [4572721]) == "JExTR"
    assert "blocked" in caplog.text


def test_custom_blocklist():
    cfg = build_config(blocklist=["JSwXFaosAN", "OCjV9JK64o", "rBHf", "79SM", "7tE6"])
    assert encode_numbers(cfg, [1_000_000, 2_000_000]) == "1aYeB7bRUt"
    assert decode_id(cfg, "1aYeB7bRUt") == [1_000_000, 2_000_000]


def test_blocked_id_is_regenerated():
    blocked = encode_numbers(build_config(min_length=6, blocklist=[]), [0])
    cfg = build_config(min_length=6, blocklist=[blocked])

    id_ = encode_numbers(cfg, [0])
    assert id_ != blocked
    assert decode_id(cfg, id_) == [0]
    assert decode_id(cfg, blocked) == [0]


def test_retry_exhaustion_raises():
    every_word = ["".join(chars) for chars in product("abc", repeat=3)]
    cfg = build_config(alphabet="abc", min_length=3, blocklist=every_word)

    with pytest.raises(RetryExhaustedError) as excinfo:
        encode_numbers(cfg, [0])
    assert excinfo.value.attempts == 4
    assert excinfo.value.numbers == [0]


def test_encoded_ids_are_never_blocked(cfg):
    for value in range(2000):
        assert not is_blocked(encode_numbers(cfg, [value]), cfg.blocklist)


def test_distinct_sequences_give_distinct_ids(cfg):
    sequences = [[i] for i in range(500)] + [[i, i % 7] for i in range(500)]
    ids = {encode_numbers(cfg, numbers) for numbers in sequences}
    assert len(ids) == 1000


def test_small_alphabet_round_trip():
    cfg = build_config(alphabet="abc", blocklist=[])
    for numbers in ([0], [1, 2], [99, 0, 3]):
        assert decode_id(cfg, encode_numbers(cfg, numbers)) == numbers
