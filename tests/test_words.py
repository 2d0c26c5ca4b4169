import pytest

from algosuite.words import is_anagram, is_valid_word


@pytest.mark.parametrize(
    "s,t,expected",
    [
        ("anagram", "nagaram", True),
        ("rat", "car", False),
        ("ab", "abc", False),
        ("", "", True),
        ("aab", "abb", False),
    ],
)
def test_is_anagram(s, t, expected):
    assert is_anagram(s, t) is expected


def test_is_anagram_symmetric():
    assert is_anagram("listen", "silent") == is_anagram("silent", "listen")


@pytest.mark.parametrize(
    "word,expected",
    [
        ("234Adas", True),
        ("b3", False),
        ("a3$e", False),
        ("bcd1", False),
        ("aei", False),
        ("AbC", True),
        ("b\u00e4b", False),
        ("ab-c", False),
    ],
)
def test_is_valid_word(word, expected):
    assert is_valid_word(word) is expected