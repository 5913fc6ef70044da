from idshuffle.codec.alphabet import chunk_alphabet, rotate, shuffle
from idshuffle.defaults import DEFAULT_ALPHABET


def test_shuffle_known_value():
    assert shuffle("abcd") == "bcad"


def test_shuffle_is_deterministic_permutation():
    first = shuffle(DEFAULT_ALPHABET)
    second = shuffle(DEFAULT_ALPHABET)

    assert first == second
    assert sorted(first) == sorted(DEFAULT_ALPHABET)
    assert first != DEFAULT_ALPHABET


def test_shuffle_accepts_any_symbol_sequence():
    assert shuffle(list("abcd")) == shuffle("abcd")


def test_shuffle_depends_on_input_order():
    assert shuffle("abcdef") != shuffle("fedcba")


def test_rotate_wraps_around():
    assert rotate("abcdef", 0) == "abcdef"
    assert rotate("abcdef", 2) == "cdefab"
    assert rotate("abcdef", 5) == "fabcde"


def test_chunk_alphabet_reverses_rotation():
    assert chunk_alphabet("abcdef", 2) == "bafedc"
