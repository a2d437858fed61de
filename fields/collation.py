"""
Turkish string ordering and case folding.

Product names are sorted in Turkish alphabet order
(a b c ç d e f g ğ h ı i j k l m n o ö p r s ş t u ü v y z),
so "Çilek" sorts between "Ceviz" and "Domates" and "ıhlamur"
sorts before "incir".

tr_sort_key() ranks spaces and punctuation first, then digits, then
letters; any other character sorts last. Accented Latin letters outside
the Turkish alphabet are placed by their base letter.
"""

from __future__ import annotations

import unicodedata
from typing import Tuple

TURKISH_ALPHABET = "abcçdefgğhıijklmnoöpqrsştuüvwxyz"

_LETTER_RANK = {ch: pos for pos, ch in enumerate(TURKISH_ALPHABET)}
_COMBINING_DOT_ABOVE = "\u0307"

_BAND_SEPARATOR = 0
_BAND_DIGIT = 1
_BAND_LETTER = 2
_BAND_OTHER = 3


def casefold_simple(text: str) -> str:
    """Plain lowercase, used for substring search on names."""
    return (text or "").lower()


def _char_rank(ch: str) -> Tuple[int, int]:
    if ch in _LETTER_RANK:
        return (_BAND_LETTER, _LETTER_RANK[ch])
    if ch.isdigit():
        return (_BAND_DIGIT, unicodedata.digit(ch, 0))
    if ch.isspace() or unicodedata.category(ch).startswith(("P", "S", "Z")):
        return (_BAND_SEPARATOR, ord(ch))

    base = unicodedata.normalize("NFD", ch)[0]
    if base in _LETTER_RANK:
        return (_BAND_LETTER, _LETTER_RANK[base])
    return (_BAND_OTHER, ord(ch))


def tr_sort_key(text: str) -> Tuple[Tuple[Tuple[int, int], ...], str]:
    """
    Sort key for Turkish collation of lowercase text.

    The primary part ranks each character; the original text breaks ties
    so that distinct strings never compare equal.
    """
    lowered = casefold_simple(text)
    # "İ".lower() yields "i" + U+0307; the dot is not a separate letter.
    primary = tuple(
        _char_rank(ch)
        for ch in unicodedata.normalize("NFC", lowered)
        if ch != _COMBINING_DOT_ABOVE
    )
    return (primary, lowered)
