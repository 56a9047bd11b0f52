"""
Converters between character widths and kana kinds.

Each converter takes a string and a ConversionOptions value and returns a
new string. Characters with no mapping, or excluded by the options, are
passed through unchanged; no converter raises on any input.

Width conversions (``h2z`` and ``z2h``) honour the ``ascii``, ``digit`` and
``kana`` flags. The hiragana/katakana conversions always convert kana and
only look at the ``ignore`` set of the options.

Example:
    >>> from kanaconv import ConversionOptions, h2z, z2h, hira2kata
    >>> options = ConversionOptions.build().enable_kana().finalize()
    >>> h2z("ｶﾞｯｺｳ", options)
    'ガッコウ'
    >>> z2h("ガッコウ", options)
    'ｶﾞｯｺｳ'
    >>> hira2kata("ひらがな")
    'ヒラガナ'
"""

import logging
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from .exceptions import UnknownConversionError
from .options import ConversionOptions
from .tables import (
    ASCII_H2Z,
    ASCII_Z2H,
    DIGIT_H2Z,
    DIGIT_Z2H,
    HALF_KATA_TO_HIRA,
    HALF_KATA_VOICED_TO_HIRA,
    HIRA_TO_HALF_KATA,
    HIRA_TO_KATA,
    KANA_H2Z,
    KANA_H2Z_VOICED,
    KANA_Z2H,
    KATA_TO_HIRA,
)

logger = logging.getLogger(__name__)

Converter = Callable[[str, Optional[ConversionOptions]], str]

_DEFAULT_OPTIONS = ConversionOptions()


def _convert(
    text: str,
    tables: Sequence[Mapping[str, str]],
    options: ConversionOptions,
    pairs: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Convert text character by character.

    When ``pairs`` is given, a character and the one after it are first
    looked up together so a half-width base followed by a voicing mark is
    consumed as a single unit. Otherwise the first table containing the
    character wins.
    """
    ignore = options.ignore
    converted: List[str] = []
    length = len(text)
    i = 0

    while i < length:
        char = text[i]

        if char in ignore:
            converted.append(char)
            i += 1
            continue

        if pairs is not None and i + 1 < length and text[i + 1] not in ignore:
            pair = text[i:i + 2]
            if pair in pairs:
                converted.append(pairs[pair])
                i += 2
                continue

        for table in tables:
            if char in table:
                converted.append(table[char])
                break
        else:
            converted.append(char)
        i += 1

    return "".join(converted)


def h2z(text: str, options: Optional[ConversionOptions] = None) -> str:
    """
    Convert half-width characters to full-width.

    Args:
        text: The text to convert.
        options: Selects ascii, digit and kana conversion. Defaults to an
                 option set with every flag disabled.

    Returns:
        str: The converted text. With ``kana`` enabled a half-width base and
        a following voicing mark collapse into one character, so the result
        may be shorter than the input.

    Example:
        >>> options = ConversionOptions.build().enable_ascii().enable_kana().finalize()
        >>> h2z("ABC ﾊﾟﾝ", options)
        'ＡＢＣ　パン'
    """
    options = options or _DEFAULT_OPTIONS
    tables = []
    if options.ascii:
        tables.append(ASCII_H2Z)
    if options.digit:
        tables.append(DIGIT_H2Z)
    if options.kana:
        tables.append(KANA_H2Z)
    pairs = KANA_H2Z_VOICED if options.kana else None
    return _convert(text, tables, options, pairs)


def z2h(text: str, options: Optional[ConversionOptions] = None) -> str:
    """
    Convert full-width characters to half-width.

    Args:
        text: The text to convert.
        options: Selects ascii, digit and kana conversion. Defaults to an
                 option set with every flag disabled.

    Returns:
        str: The converted text. Voiced katakana expand to a base character
        followed by a half-width voicing mark.

    Example:
        >>> options = (ConversionOptions.build()
        ...            .enable_ascii().enable_digit().enable_kana().finalize())
        >>> z2h("ＡＢＣ１２３アイウ", options)
        'ABC123ｱｲｳ'
    """
    options = options or _DEFAULT_OPTIONS
    tables = []
    if options.ascii:
        tables.append(ASCII_Z2H)
    if options.digit:
        tables.append(DIGIT_Z2H)
    if options.kana:
        tables.append(KANA_Z2H)
    return _convert(text, tables, options)


def hira2kata(text: str, options: Optional[ConversionOptions] = None) -> str:
    """
    Convert hiragana to full-width katakana.

    Only the ``ignore`` set of the options is used.

    Example:
        >>> hira2kata("あいうえお")
        'アイウエオ'
    """
    return _convert(text, [HIRA_TO_KATA], options or _DEFAULT_OPTIONS)


def hira2hkata(text: str, options: Optional[ConversionOptions] = None) -> str:
    """
    Convert hiragana to half-width katakana.

    Voiced hiragana become a half-width base followed by a voicing mark.
    Kana punctuation (``ー・「」。、``) is narrowed as well. Only the
    ``ignore`` set of the options is used.

    Example:
        >>> hira2hkata("がっこう")
        'ｶﾞｯｺｳ'
    """
    return _convert(text, [HIRA_TO_HALF_KATA], options or _DEFAULT_OPTIONS)


def kata2hira(text: str, options: Optional[ConversionOptions] = None) -> str:
    """
    Convert katakana to hiragana.

    Full-width katakana are shifted onto the hiragana block. Half-width
    katakana are accepted too: a base and a following voicing mark are
    composed first, then shifted. Katakana with no hiragana counterpart are
    emitted in full-width form. Only the ``ignore`` set of the options is
    used.

    Example:
        >>> kata2hira("カタカナ")
        'かたかな'
        >>> kata2hira("ｶﾞｯｺｳ")
        'がっこう'
    """
    return _convert(
        text,
        [KATA_TO_HIRA, HALF_KATA_TO_HIRA],
        options or _DEFAULT_OPTIONS,
        HALF_KATA_VOICED_TO_HIRA,
    )


CONVERTERS: Dict[str, Converter] = {
    "h2z": h2z,
    "z2h": z2h,
    "h2k": hira2kata,
    "h2hk": hira2hkata,
    "k2h": kata2hira,
    "hira2kata": hira2kata,
    "hira2hkata": hira2hkata,
    "kata2hira": kata2hira,
}


def get_converter(name: str) -> Converter:
    """
    Look up a converter by pattern name.

    Args:
        name: One of ``h2z``, ``z2h``, ``h2k``, ``h2hk``, ``k2h`` or a
              converter function name such as ``hira2kata``.

    Returns:
        The converter function.

    Raises:
        UnknownConversionError: If the name is not recognised.
    """
    try:
        converter = CONVERTERS[name]
    except KeyError:
        raise UnknownConversionError(
            f"Unknown conversion {name!r}. Expected one of: {', '.join(CONVERTERS)}"
        ) from None
    logger.debug("Resolved conversion %r to %s", name, converter.__name__)
    return converter


__all__ = [
    "h2z",
    "z2h",
    "hira2kata",
    "hira2hkata",
    "kata2hira",
    "get_converter",
    "CONVERTERS",
]
