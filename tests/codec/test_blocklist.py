from idshuffle.codec.blocklist import filter_blocklist, is_blocked


def test_filter_drops_short_and_foreign_words():
    words = ["ab", "abc", "ABD", "xyz", "FaCe", "cafe!"]
    assert filter_blocklist(words, "abcdef") == frozenset({"abc", "abd", "face"})


def test_filter_compares_case_insensitively():
    assert filter_blocklist(["CAB"], "aBc") == frozenset({"cab"})


def test_short_candidate_requires_exact_match():
    blocklist = frozenset({"abc"})
    assert is_blocked("abc", blocklist)
    assert is_blocked("ABC", blocklist)
    assert not is_blocked("xab", blocklist)


def test_short_word_requires_exact_match():
    blocklist = frozenset({"abc"})
    assert not is_blocked("xabcx", blocklist)
    assert is_blocked("aBc", blocklist)


def test_numeric_word_only_matches_at_either_end():
    blocklist = frozenset({"1234"})
    assert is_blocked("1234xy", blocklist)
    assert is_blocked("xy1234", blocklist)
    assert not is_blocked("x1234y", blocklist)


def test_word_matches_anywhere_inside():
    blocklist = frozenset({"face"})
    assert is_blocked("xxFACExx", blocklist)
    assert is_blocked("face", blocklist)
    assert not is_blocked("fac", blocklist)
    assert not is_blocked("xxfacxex", blocklist)


def test_longer_word_never_matches():
    assert not is_blocked("abcd", frozenset({"abcde"}))


def test_empty_blocklist_blocks_nothing():
    assert not is_blocked("anything", frozenset())
