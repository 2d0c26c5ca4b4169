"""Checks on words: anagrams and simple validity rules."""

from collections import Counter

_VOWELS = frozenset("aeiou")


def is_anagram(s: str, t: str) -> bool:
    """Report whether ``t`` is a rearrangement of the characters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def is_valid_word(word: str) -> bool:
    """Check a word is at least three ASCII letters or digits with a vowel and a consonant."""
    if len(word) < 3:
        return False
    has_vowel = has_consonant = False
    for ch in word:
        if not (ch.isascii() and ch.isalnum()):
            return False
        if ch.isalpha():
            if ch.lower() in _VOWELS:
                has_vowel = True
            else:
                has_consonant = True
    return has_vowel and has_consonant