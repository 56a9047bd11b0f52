"""
Custom exceptions for the kanaconv package.

Conversions themselves never raise: characters without a mapping are passed
through unchanged. The exceptions below cover the few places where a caller
or the package itself can be misconfigured.
"""


class KanaconvError(Exception):
    """
    Base exception class for all kanaconv-related errors.

    Example:
        >>> try:
        ...     convert = get_converter(name)
        ... except KanaconvError as e:
        ...     print(f"kanaconv error: {e}")
    """
    pass


class OptionError(KanaconvError):
    """
    Raised when a ConversionOptionsBuilder receives an invalid value.

    This exception is raised when:
    - The ignore set is given something other than a string
    """
    pass


class UnknownConversionError(KanaconvError):
    """
    Raised when a conversion pattern name is not recognised.

    The message lists the accepted pattern names.
    """
    pass


class TableError(KanaconvError):
    """
    Raised when a static conversion table is malformed.

    This exception is raised when:
    - Parallel source and target sequences differ in length
    - A table maps two source characters to the same target
    """
    pass
