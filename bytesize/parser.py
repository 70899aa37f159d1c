#
# Bytesize Parser
#

# Standard library -----------------------------------------------------------------------------------------------------
import math

# Local ----------------------------------------------------------------------------------------------------------------
from .config import Settings, get_settings
from .errors import InvalidNumberError, MalformedInputError, UnknownUnitError
from .sizes import ByteSize
from .units import Locale, get_units


# Methods --------------------------------------------------------------------------------------------------------------

def parse(text: str, *, settings: Settings | None = None) -> ByteSize:
    """
    Parse a byte size string such as "1024B", "1 MB" or "1.5 kilobytes".

    Uses the locale of settings, or of the active settings when omitted.
    Valid units are B, KB, MB, GB, TB, PB, EB and their long forms, any case.
    Under the Russian locale both Russian and English spellings are accepted.

    Raises:
        MalformedInputError: No number or no unit.
        UnknownUnitError: Unit is not known in the locale.
        InvalidNumberError: Number part is not a valid decimal number.

    Examples:
        >>> parse("1.5 MB")
        ByteSize(1572864)
    """
    settings = get_settings() if settings is None else settings
    return parse_with_locale(text, settings.locale)


def parse_with_locale(text: str, locale: Locale | str) -> ByteSize:
    """
    Parse a byte size string using the unit table of locale.

    The result is truncated toward zero: "1.5 B" -> 1.

    Raises:
        UnsupportedLocaleError: Locale is not supported.
        MalformedInputError, UnknownUnitError, InvalidNumberError: See parse().

    Examples:
        >>> parse_with_locale("2 КБ", "ru")
        ByteSize(2048)
        >>> parse_with_locale("1,5 МБ", Locale.RU)
        ByteSize(1572864)
    """
    units = get_units(locale)

    separators = "." + units.decimal_separator
    number, unit = split_size(text, decimal_separators=separators)

    magnitude = units.lookup(unit)
    if magnitude is None:
        raise UnknownUnitError(unit)

    if units.decimal_separator != ".":
        number = number.replace(units.decimal_separator, ".")

    try:
        value = float(number)
    except ValueError as exc:
        raise InvalidNumberError(number) from exc

    size = value * magnitude
    if not math.isfinite(size):
        raise InvalidNumberError(number, reason="number out of range")
    return ByteSize(size)


def split_size(text: str, decimal_separators: str = ".") -> tuple[str, str]:
    """
    Split text into its number and unit parts at the first character that is
    neither a decimal digit nor a decimal separator.

    Whitespace is stripped around the whole text and around both parts.

    Raises:
        TypeError: If text is not a str.
        MalformedInputError: No split point found, or either part is empty.

    Examples:
        >>> split_size(" 1.5  MB ")
        ('1.5', 'MB')
    """
    if not isinstance(text, str):
        raise TypeError(f"Byte size text must be a str, got {type(text).__name__}")

    stripped = text.strip()

    for i, char in enumerate(stripped):
        if not (char.isdecimal() or char in decimal_separators):
            number, unit = stripped[:i].strip(), stripped[i:].strip()
            break
    else:
        raise MalformedInputError(text)

    if not number or not unit:
        raise MalformedInputError(text)

    return number, unit
