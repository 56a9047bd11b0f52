"""
Character tables for width and kana conversion.

This module holds the static mapping data used by the converters in
:mod:`kanaconv.convert`. All tables are built once on import and exposed as
read-only mappings, so they can be shared freely between threads.

Tables are built from parallel sequences: the n-th source character maps to
the n-th target string. Each table is checked for injectivity when it is
built, which keeps round trips between the two directions well defined.

Unicode blocks involved:
    - Basic Latin (U+0021..U+007E) and its full-width forms (U+FF01..U+FF5E)
    - Hiragana (U+3041..U+309F)
    - Katakana (U+30A0..U+30FF)
    - Half-width katakana (U+FF61..U+FF9F)

Example:
    >>> from kanaconv.tables import KANA_Z2H, classify, CharClass
    >>> KANA_Z2H["ガ"]
    'ｶﾞ'
    >>> classify("ｱ") is CharClass.HALF_KATAKANA
    True
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Sequence

from .exceptions import TableError

logger = logging.getLogger(__name__)


# =============================================================================
# Character classification
# =============================================================================

class CharClass(Enum):
    """Character class of a single code point, derived from its Unicode block."""

    ASCII = "ascii"
    DIGIT = "digit"
    FULL_ASCII = "full_ascii"
    FULL_DIGIT = "full_digit"
    HIRAGANA = "hiragana"
    KATAKANA = "katakana"
    HALF_KATAKANA = "half_katakana"
    OTHER = "other"


def classify(char: str) -> CharClass:
    """
    Return the character class of a single character.

    The ideographic space (U+3000) counts as full-width ASCII since it is the
    full-width counterpart of the ASCII space.

    Args:
        char: A string of length 1.

    Returns:
        CharClass: The class of the character, ``CharClass.OTHER`` when it
        falls outside every recognised block.

    Example:
        >>> classify("a")
        <CharClass.ASCII: 'ascii'>
        >>> classify("ア")
        <CharClass.KATAKANA: 'katakana'>
    """
    if len(char) != 1:
        return CharClass.OTHER
    if '0' <= char <= '9':
        return CharClass.DIGIT
    if ' ' <= char <= '~':
        return CharClass.ASCII
    if '０' <= char <= '９':
        return CharClass.FULL_DIGIT
    if '！' <= char <= '～' or char == '　':
        return CharClass.FULL_ASCII
    if 'ぁ' <= char <= 'ゟ':
        return CharClass.HIRAGANA
    if '゠' <= char <= 'ヿ':
        return CharClass.KATAKANA
    if '｡' <= char <= 'ﾟ':
        return CharClass.HALF_KATAKANA
    return CharClass.OTHER


# =============================================================================
# Source data
# =============================================================================

# ASCII without digits; the space pairs with the ideographic space.
HALF_ASCII = "".join(chr(c) for c in range(0x21, 0x7F) if not 0x30 <= c <= 0x39) + " "
FULL_ASCII = "".join(chr(c) for c in range(0xFF01, 0xFF5F) if not 0xFF10 <= c <= 0xFF19) + "　"

HALF_DIGIT = "0123456789"
FULL_DIGIT = "".join(chr(c) for c in range(0xFF10, 0xFF1A))

HALF_DAKUTEN = "ﾞ"
HALF_HANDAKUTEN = "ﾟ"

# Katakana with a one-character half-width form, including kana punctuation
# and the spacing voicing marks.
FULL_KANA_SEION = (
    "ァアィイゥウェエォオカキクケコサシスセソタチッツテト"
    "ナニヌネノハヒフヘホマミムメモャヤュユョヨラリルレロ"
    "ワヲンー・「」。、゛゜"
)
HALF_KANA_SEION = (
    "ｧｱｨｲｩｳｪｴｫｵｶｷｸｹｺｻｼｽｾｿﾀﾁｯﾂﾃﾄ"
    "ﾅﾆﾇﾈﾉﾊﾋﾌﾍﾎﾏﾐﾑﾒﾓｬﾔｭﾕｮﾖﾗﾘﾙﾚﾛ"
    "ﾜｦﾝｰ･｢｣｡､ﾞﾟ"
)

# Voiced katakana and their half-width base + mark pairs.
FULL_KANA_VOICED = "ガギグゲゴザジズゼゾダヂヅデドバビブベボヴパピプペポ"
HALF_KANA_VOICED = (
    tuple(base + HALF_DAKUTEN for base in "ｶｷｸｹｺｻｼｽｾｿﾀﾁﾂﾃﾄﾊﾋﾌﾍﾎｳ")
    + tuple(base + HALF_HANDAKUTEN for base in "ﾊﾋﾌﾍﾎ")
)

# Kana punctuation that both the hiragana and katakana texts use.
KANA_SYMBOLS = "ー・「」。、"

# Offset between a hiragana and its katakana counterpart.
HIRA_KATA_OFFSET = 0x60

HIRAGANA = "".join(chr(c) for c in range(0x3041, 0x3097)) + "ゝゞ"


# =============================================================================
# Table construction
# =============================================================================

def _make_table(keys: Sequence[str], values: Sequence[str]) -> Dict[str, str]:
    """Zip parallel sequences into a dict, rejecting non-injective input."""
    if len(keys) != len(values):
        raise TableError(
            f"Source and target lengths differ: {len(keys)} != {len(values)}"
        )

    table: Dict[str, str] = {}
    seen = set()
    for key, value in zip(keys, values):
        if key in table or value in seen:
            raise TableError(f"Duplicate mapping {key!r} -> {value!r}")
        table[key] = value
        seen.add(value)
    return table


def _invert(table: Mapping[str, str]) -> Dict[str, str]:
    return _make_table(list(table.values()), list(table.keys()))


def _freeze(table: Dict[str, str]) -> Mapping[str, str]:
    return MappingProxyType(table)


def _merge(*tables: Mapping[str, str]) -> Dict[str, str]:
    merged: Dict[str, str] = {}
    for table in tables:
        merged.update(table)
    return merged


_hira_to_kata = _make_table(
    HIRAGANA, [chr(ord(c) + HIRA_KATA_OFFSET) for c in HIRAGANA]
)
_kana_h2z = _make_table(HALF_KANA_SEION, FULL_KANA_SEION)
_kana_h2z_voiced = _make_table(HALF_KANA_VOICED, FULL_KANA_VOICED)
_kana_z2h = _merge(_invert(_kana_h2z), _invert(_kana_h2z_voiced))

#: Half-width ASCII to full-width ASCII (digits excluded).
ASCII_H2Z = _freeze(_make_table(HALF_ASCII, FULL_ASCII))
#: Full-width ASCII to half-width ASCII (digits excluded).
ASCII_Z2H = _freeze(_invert(ASCII_H2Z))

#: Half-width digits to full-width digits.
DIGIT_H2Z = _freeze(_make_table(HALF_DIGIT, FULL_DIGIT))
#: Full-width digits to half-width digits.
DIGIT_Z2H = _freeze(_invert(DIGIT_H2Z))

#: Single half-width katakana to full-width katakana.
KANA_H2Z = _freeze(_kana_h2z)
#: Half-width base + voicing mark pairs to full-width voiced katakana.
KANA_H2Z_VOICED = _freeze(_kana_h2z_voiced)
#: Full-width katakana to half-width katakana; voiced forms map to two characters.
KANA_Z2H = _freeze(_kana_z2h)

#: Hiragana to full-width katakana.
HIRA_TO_KATA = _freeze(_hira_to_kata)
#: Full-width katakana to hiragana.
KATA_TO_HIRA = _freeze(_invert(_hira_to_kata))

#: Hiragana (and shared kana punctuation) to half-width katakana.
HIRA_TO_HALF_KATA = _freeze(_merge(
    {hira: _kana_z2h.get(kata, kata) for hira, kata in _hira_to_kata.items()},
    {symbol: _kana_z2h[symbol] for symbol in KANA_SYMBOLS},
))

#: Half-width katakana to hiragana, going through the full-width form.
HALF_KATA_TO_HIRA = _freeze(
    {half: KATA_TO_HIRA.get(full, full) for half, full in _kana_h2z.items()}
)
#: Half-width voiced pairs to hiragana.
HALF_KATA_VOICED_TO_HIRA = _freeze(
    {pair: KATA_TO_HIRA.get(full, full) for pair, full in _kana_h2z_voiced.items()}
)


def table_sizes() -> Dict[str, int]:
    """Return the number of entries in each public table, keyed by name."""
    return {name: len(table) for name, table in _public_tables()}


def _public_tables() -> Iterable:
    return (
        ("ASCII_H2Z", ASCII_H2Z),
        ("ASCII_Z2H", ASCII_Z2H),
        ("DIGIT_H2Z", DIGIT_H2Z),
        ("DIGIT_Z2H", DIGIT_Z2H),
        ("KANA_H2Z", KANA_H2Z),
        ("KANA_H2Z_VOICED", KANA_H2Z_VOICED),
        ("KANA_Z2H", KANA_Z2H),
        ("HIRA_TO_KATA", HIRA_TO_KATA),
        ("KATA_TO_HIRA", KATA_TO_HIRA),
        ("HIRA_TO_HALF_KATA", HIRA_TO_HALF_KATA),
        ("HALF_KATA_TO_HIRA", HALF_KATA_TO_HIRA),
        ("HALF_KATA_VOICED_TO_HIRA", HALF_KATA_VOICED_TO_HIRA),
    )


logger.debug("Built conversion tables: %s", table_sizes())


__all__ = [
    "CharClass",
    "classify",
    "ASCII_H2Z",
    "ASCII_Z2H",
    "DIGIT_H2Z",
    "DIGIT_Z2H",
    "KANA_H2Z",
    "KANA_H2Z_VOICED",
    "KANA_Z2H",
    "HIRA_TO_KATA",
    "KATA_TO_HIRA",
    "HIRA_TO_HALF_KATA",
    "HALF_KATA_TO_HIRA",
    "HALF_KATA_VOICED_TO_HIRA",
    "table_sizes",
]
