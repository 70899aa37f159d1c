#
# Bytesize Configuration
#

# Standard library -----------------------------------------------------------------------------------------------------
import dataclasses
import os
import warnings
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Self

# Third-party ----------------------------------------------------------------------------------------------------------
import toml

# Local ----------------------------------------------------------------------------------------------------------------
from .units import Locale, PRIMARY_LOCALE, is_supported, to_locale

# @formatter:off

DEFAULT_NUMBER_FORMAT = "%.2f"
CONFIG_SECTION = "bytesize"

# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Settings:
    """
    Rendering and parsing options.

    Instances are immutable; pass one explicitly to parse/format calls or make it
    process-wide with set_settings(). Changing the active settings swaps a single
    reference, readers always see a consistent Settings object.

    Attributes:
        locale        : Locale used by parse() and the formatters.
        long_units    : Render "megabytes" instead of "MB".
        number_format : Number format, printf-style "%.2f" or str.format-style "{:.2f}".

    Raises:
        UnsupportedLocaleError: If locale is not supported.
        ValueError: If long_units is not a bool or number_format can not format a float.
    """
    locale: Locale = PRIMARY_LOCALE
    long_units: bool = False
    number_format: str = DEFAULT_NUMBER_FORMAT

    def __post_init__(self):
        object.__setattr__(self, "locale", to_locale(self.locale))
        if not isinstance(self.long_units, bool):
            raise ValueError(f"long_units must be True or False, got {self.long_units!r}")
        render_number(self.number_format, 1.0)

    def replace(self, **changes) -> Self:
        """Copy with the given fields changed."""
        return dataclasses.replace(self, **changes)

    def with_locale(self, locale: Locale | str) -> Self:
        """Copy with another locale; unsupported locales leave the settings unchanged."""
        if not is_supported(locale):
            return self
        return self.replace(locale=locale)


# Methods --------------------------------------------------------------------------------------------------------------

def render_number(number_format: str, value: float) -> str:
    """
    Apply a printf-style or str.format-style number format to value.

    Raises:
        ValueError: If the format is not a string or can not format a float.

    Examples:
        >>> render_number("%.2f", 1.5)
        '1.50'
        >>> render_number("{:.1f}", 1.5)
        '1.5'
    """
    if not isinstance(number_format, str):
        raise ValueError(f"number format must be a str, got {type(number_format).__name__}")
    try:
        if "%" not in number_format and "{" in number_format:
            return number_format.format(value)
        return number_format % value
    except (TypeError, ValueError, IndexError, KeyError) as exc:
        raise ValueError(f"invalid number format {number_format!r}: {exc}") from exc


def get_settings() -> Settings:
    """The process-wide active settings."""
    return _active


def set_settings(settings: Settings) -> None:
    """Make settings the process-wide active settings."""
    global _active
    if not isinstance(settings, Settings):
        raise TypeError(f"Settings required, got {type(settings).__name__}")
    _active = settings


def reset_settings() -> None:
    """Restore the default settings."""
    set_settings(Settings())


def get_locale() -> Locale:
    return _active.locale


def set_locale(locale: Locale | str) -> None:
    """Set the active locale; unsupported locales are ignored and the previous one is kept."""
    set_settings(_active.with_locale(locale))


def set_long_units(long_units: bool) -> None:
    set_settings(_active.replace(long_units=long_units))


def set_number_format(number_format: str) -> None:
    set_settings(_active.replace(number_format=number_format))


@contextmanager
def using(settings: Settings | None = None, **changes) -> Iterator[Settings]:
    """
    Context manager that temporarily changes the active settings.

    The previous settings are restored on exit, also on exceptions.

    Examples:
        >>> with using(locale="ru", long_units=True):
        ...     str(2 * KB)
        '2.00 килобайта'
    """
    previous = _active
    base = previous if settings is None else settings
    set_settings(base.replace(**changes) if changes else base)
    try:
        yield _active
    finally:
        set_settings(previous)


def settings_from_mapping(mapping: Mapping[str, Any], base: Settings | None = None) -> Settings:
    """
    Build Settings from a plain mapping, e.g. a parsed config file section.

    Unknown keys, unsupported locales and non-boolean long_units are ignored
    with a RuntimeWarning.
    """
    settings = Settings() if base is None else base
    changes: dict[str, Any] = {}

    for key, value in mapping.items():
        if key == "locale":
            if is_supported(value):
                changes["locale"] = value
            else:
                warnings.warn(
                    f"Unsupported locale {value!r} ignored, keeping '{settings.locale}'",
                    RuntimeWarning,
                    stacklevel=2
                )
        elif key == "long_units":
            if isinstance(value, bool):
                changes["long_units"] = value
            else:
                warnings.warn(
                    f"long_units must be true or false, got {value!r}, keeping {settings.long_units}",
                    RuntimeWarning,
                    stacklevel=2
                )
        elif key == "number_format":
            changes["number_format"] = value
        else:
            warnings.warn(f"Unknown bytesize setting {key!r} ignored", RuntimeWarning, stacklevel=2)

    return settings.replace(**changes)


def load_settings(path: str | os.PathLike[str],
                  section: str | None = CONFIG_SECTION,
                  base: Settings | None = None) -> Settings:
    """
    Load Settings from a TOML file.

    Example file:
        [bytesize]
        locale = "ru"
        long_units = true
        number_format = "%.1f"

    Args:
        path: TOML file path.
        section: Table holding the settings; None reads the top-level table.
        base: Settings to start from, defaults to Settings().

    Raises:
        OSError: If the file can not be read.
        toml.TomlDecodeError: If the file is not valid TOML.
    """
    document = toml.load(os.fspath(path))
    if section is not None:
        document = document.get(section, {})
    if not isinstance(document, Mapping):
        raise ValueError(f"[{section}] in {os.fspath(path)} must be a table")
    return settings_from_mapping(document, base=base)


_active = Settings()
