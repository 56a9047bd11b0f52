"""
kanaconv: Japanese character width and kana conversion.

kanaconv converts text between full-width and half-width forms and between
hiragana and katakana. It is meant to be used as one step of a larger text
normalization pipeline, for example before indexing text for search or when
cleaning up form input.

Key Features:
    - Full-width <-> half-width conversion of ASCII, digits and katakana
    - Voiced and semi-voiced marks composed and decomposed correctly
      (ｶﾞ <-> ガ, ﾊﾟ <-> パ)
    - Hiragana -> full-width or half-width katakana, katakana -> hiragana
    - Immutable option sets, shareable between threads
    - No dependencies outside the standard library

Quick Start:
    >>> from kanaconv import ConversionOptions, h2z, z2h, hira2kata, kata2hira
    >>>
    >>> options = (
    ...     ConversionOptions.build()
    ...     .enable_ascii()
    ...     .enable_digit()
    ...     .enable_kana()
    ...     .finalize()
    ... )
    >>> z2h("ＡＢＣ１２３アイウ", options)
    'ABC123ｱｲｳ'
    >>> h2z("ｶﾞｷﾞ", options)
    'ガギ'
    >>> hira2kata("あいうえお")
    'アイウエオ'
    >>> kata2hira("アイウエオ")
    'あいうえお'

Leaving characters untouched:
    >>> options = ConversionOptions.build().ignore("かこ").finalize()
    >>> hira2kata("かきくけこ", options)
    'かキクケこ'

Classes:
    ConversionOptions: Immutable set of conversion flags.
    ConversionOptionsBuilder: Fluent builder for ConversionOptions.
    CharClass: Character classes recognised by classify().

Functions:
    h2z: Half-width to full-width.
    z2h: Full-width to half-width.
    hira2kata: Hiragana to full-width katakana.
    hira2hkata: Hiragana to half-width katakana.
    kata2hira: Katakana to hiragana.
    get_converter: Look up a converter by pattern name.
    classify: Character class of a single character.
"""

__version__ = "0.1.0"
__author__ = "Noyu Ritsuji"

# Options
from .options import ConversionOptions, ConversionOptionsBuilder

# Converters
from .convert import h2z, z2h, hira2kata, hira2hkata, kata2hira, get_converter

# Character classification
from .tables import CharClass, classify

# Exceptions
from .exceptions import KanaconvError, OptionError, UnknownConversionError, TableError

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Options
    "ConversionOptions",
    "ConversionOptionsBuilder",
    # Converters
    "h2z",
    "z2h",
    "hira2kata",
    "hira2hkata",
    "kata2hira",
    "get_converter",
    # Classification
    "CharClass",
    "classify",
    # Exceptions
    "KanaconvError",
    "OptionError",
    "UnknownConversionError",
    "TableError",
]
