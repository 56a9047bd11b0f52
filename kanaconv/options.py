"""
Conversion options.

A ConversionOptions value selects which character classes take part in a
width conversion and which characters are left untouched. Options are built
with a fluent builder and frozen by an explicit ``finalize()`` call, so the
converters never see a half-configured value.

Example:
    >>> from kanaconv import ConversionOptions
    >>> options = (
    ...     ConversionOptions.build()
    ...     .enable_ascii()
    ...     .enable_kana()
    ...     .ignore("ア")
    ...     .finalize()
    ... )
    >>> options.ascii, options.digit, options.kana
    (True, False, True)
"""

from dataclasses import dataclass, field
from typing import FrozenSet

from .exceptions import OptionError


@dataclass(frozen=True)
class ConversionOptions:
    """
    Immutable option set passed to the converters.

    Attributes:
        ascii: Convert ASCII letters, punctuation and the space.
        digit: Convert the digits 0-9.
        kana: Convert katakana between half-width and full-width.
        ignore: Characters that are never converted.

    The ascii and digit tables are disjoint, so enabling only ``ascii``
    leaves digits alone.
    """

    ascii: bool = False
    digit: bool = False
    kana: bool = False
    ignore: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def build(cls) -> 'ConversionOptionsBuilder':
        """Return a builder with every flag disabled and nothing ignored."""
        return ConversionOptionsBuilder()

    def is_ignored(self, char: str) -> bool:
        return char in self.ignore


class ConversionOptionsBuilder:
    """
    Mutable accumulator for ConversionOptions.

    Every setter returns the builder itself so calls can be chained. The
    order of calls does not matter; only the final state is captured by
    ``finalize()``.
    """

    def __init__(self):
        self._ascii = False
        self._digit = False
        self._kana = False
        self._ignore: FrozenSet[str] = frozenset()

    def ascii(self, flag: bool = True) -> 'ConversionOptionsBuilder':
        self._ascii = bool(flag)
        return self

    def digit(self, flag: bool = True) -> 'ConversionOptionsBuilder':
        self._digit = bool(flag)
        return self

    def kana(self, flag: bool = True) -> 'ConversionOptionsBuilder':
        self._kana = bool(flag)
        return self

    def enable_ascii(self) -> 'ConversionOptionsBuilder':
        return self.ascii(True)

    def enable_digit(self) -> 'ConversionOptionsBuilder':
        return self.digit(True)

    def enable_kana(self) -> 'ConversionOptionsBuilder':
        return self.kana(True)

    def disable_ascii(self) -> 'ConversionOptionsBuilder':
        return self.ascii(False)

    def disable_digit(self) -> 'ConversionOptionsBuilder':
        return self.digit(False)

    def disable_kana(self) -> 'ConversionOptionsBuilder':
        return self.kana(False)

    def ignore(self, chars: str) -> 'ConversionOptionsBuilder':
        """
        Replace the set of characters that converters leave untouched.

        Args:
            chars: A string; each of its characters is ignored.

        Returns:
            ConversionOptionsBuilder: The builder, for chaining.

        Raises:
            OptionError: If chars is not a string.
        """
        if not isinstance(chars, str):
            raise OptionError(
                f"ignore expects a string of characters, got {type(chars).__name__}"
            )
        self._ignore = frozenset(chars)
        return self

    def finalize(self) -> ConversionOptions:
        """Return an immutable snapshot of the current builder state."""
        return ConversionOptions(
            ascii=self._ascii,
            digit=self._digit,
            kana=self._kana,
            ignore=self._ignore,
        )

    def __repr__(self) -> str:
        return (
            f"ConversionOptionsBuilder(ascii={self._ascii}, digit={self._digit}, "
            f"kana={self._kana}, ignore={''.join(sorted(self._ignore))!r})"
        )


__all__ = ["ConversionOptions", "ConversionOptionsBuilder"]
