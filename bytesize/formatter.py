#
# Bytesize Formatter
#

# Local ----------------------------------------------------------------------------------------------------------------
from .config import Settings, get_settings, render_number
from .errors import UnsupportedLocaleError
from .sizes import best_fit
from .units import Locale, LocaleUnits, PRIMARY_LOCALE, get_units


# Methods --------------------------------------------------------------------------------------------------------------

def format_size(size: int,
                number_format: str,
                unit: str = "",
                long_units: bool = False,
                *,
                settings: Settings | None = None) -> str:
    """
    Format size in the locale of settings, or of the active settings when omitted.

    See format_with_locale() for the meaning of the arguments.
    """
    settings = get_settings() if settings is None else settings
    return format_with_locale(size, number_format, unit, long_units, settings.locale)


def format_with_locale(size: int,
                       number_format: str,
                       unit: str = "",
                       long_units: bool = False,
                       locale: Locale | str | None = None) -> str:
    """
    Format size with an explicit number format, unit and locale.

    The value is shown in the largest unit not exceeding size, unless unit names
    one explicitly. Short units follow the number directly, "1.50MB"; long units
    are separated by a space and take the grammatical number of the value in the
    rendering locale, "2 килобайта", "1.50 megabytes".

    Formatting never raises for bad units: an unknown unit override returns the
    string "Unrecognized unit: <unit>". Unsupported locales fall back to English.

    Args:
        size: Number of bytes.
        number_format: printf-style or str.format-style float format, "%.2f".
        unit: Unit override in any spelling known to the locale, "" picks the best fit.
        long_units: Render "megabytes" instead of "MB".
        locale: Rendering locale, None uses the active locale.

    Raises:
        ValueError: If number_format can not format a float.

    Examples:
        >>> format_with_locale(1536, "%.1f", locale="en")
        '1.5KB'
        >>> format_with_locale(1536, "%.2f", "B", long_units=True, locale="en")
        '1536.00 bytes'
        >>> format_with_locale(1536, "%.2f", "XB")
        'Unrecognized unit: XB'
    """
    units = _resolve_units(locale)

    if unit:
        magnitude = units.lookup(unit)
        if magnitude is None:
            return f"Unrecognized unit: {unit}"
    else:
        magnitude = best_fit(size)

    value = int(size) / int(magnitude)
    number = render_number(number_format, value)

    if long_units:
        return f"{number} {units.long_unit(magnitude, value)}"
    return f"{number}{units.short_units[magnitude]}"


def to_string(size: int, *, settings: Settings | None = None) -> str:
    """Format size with the number format, unit style and locale of settings (or the active settings)."""
    settings = get_settings() if settings is None else settings
    return to_string_with_locale(size, settings.locale, settings=settings)


def to_string_with_locale(size: int, locale: Locale | str, *, settings: Settings | None = None) -> str:
    """Like to_string() but in the given locale."""
    settings = get_settings() if settings is None else settings
    return format_with_locale(size, settings.number_format, "", settings.long_units, locale)


def _resolve_units(locale: Locale | str | None) -> LocaleUnits:
    if locale is None:
        locale = get_settings().locale
    try:
        return get_units(locale)
    except UnsupportedLocaleError:
        return get_units(PRIMARY_LOCALE)
