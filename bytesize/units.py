#
# Bytesize Locale Unit Tables
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, field
from enum import StrEnum, unique
from types import MappingProxyType
from typing import Any, Mapping

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import UnsupportedLocaleError
from .plurals import PluralForms, PluralRule, english_category, english_forms, russian_category
from .sizes import B, KB, MB, GB, TB, PB, EB, MAGNITUDES, ByteSize


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Locale(StrEnum):
    """
    Supported locales, the first one is the primary locale.

    Attributes:
        EN (str) : English, primary
        RU (str) : Russian, secondary; also accepts English unit spellings
    """
    EN = "en"
    RU = "ru"

    @classmethod
    def _missing_(cls, value):
        # Case-insensitive lookup, "RU" -> Locale.RU
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        return None


PRIMARY_LOCALE = Locale.EN


@dataclass(frozen=True)
class LocaleUnits:
    """
    Read-only unit table of a single locale.

    Attributes:
        locale            : The locale of this table.
        short_units       : Magnitude -> short symbol, "KB".
        long_forms        : Magnitude -> word forms of the long name.
        parse_map         : Uppercase spelling -> magnitude, for parsing.
        plural_rule       : Picks the word form for a display value.
        decimal_separator : Decimal separator accepted by the parser besides ".".
    """
    locale: Locale
    short_units: Mapping[ByteSize, str]
    long_forms: Mapping[ByteSize, PluralForms]
    parse_map: Mapping[str, ByteSize]
    plural_rule: PluralRule
    decimal_separator: str = "."

    long_units: Mapping[ByteSize, str] = field(init=False, repr=False)

    def __post_init__(self):
        long_units = {magnitude: forms.one for magnitude, forms in self.long_forms.items()}
        object.__setattr__(self, "short_units", MappingProxyType(dict(self.short_units)))
        object.__setattr__(self, "long_forms", MappingProxyType(dict(self.long_forms)))
        object.__setattr__(self, "parse_map", MappingProxyType(dict(self.parse_map)))
        object.__setattr__(self, "long_units", MappingProxyType(long_units))

    def long_unit(self, magnitude: int, value: float) -> str:
        """Long unit name in the grammatical number required by value."""
        return self.long_forms[magnitude].select(self.plural_rule(value))

    def lookup(self, spelling: str) -> ByteSize | None:
        """Case-insensitive unit lookup, None if the spelling is unknown."""
        return self.parse_map.get(spelling.upper())


# @formatter:off

_SHORT_UNITS = {
    Locale.EN: {B: "B", KB: "KB", MB: "MB", GB: "GB", TB: "TB", PB: "PB", EB: "EB"},
    Locale.RU: {B: "Б", KB: "КБ", MB: "МБ", GB: "ГБ", TB: "ТБ", PB: "ПБ", EB: "ЭБ"},
}

_LONG_FORMS = {
    Locale.EN: {
        B:  english_forms("byte"),
        KB: english_forms("kilobyte"),
        MB: english_forms("megabyte"),
        GB: english_forms("gigabyte"),
        TB: english_forms("terabyte"),
        PB: english_forms("petabyte"),
        EB: english_forms("exabyte"),
    },
    Locale.RU: {
        B:  PluralForms("байт",     "байта",     "байтов"),
        KB: PluralForms("килобайт", "килобайта", "килобайтов"),
        MB: PluralForms("мегабайт", "мегабайта", "мегабайтов"),
        GB: PluralForms("гигабайт", "гигабайта", "гигабайтов"),
        TB: PluralForms("терабайт", "терабайта", "терабайтов"),
        PB: PluralForms("петабайт", "петабайта", "петабайтов"),
        EB: PluralForms("эксабайт", "эксабайта", "эксабайтов"),
    },
}

# Spellings beyond the short symbol and the long forms
_EXTRA_SPELLINGS = {
    Locale.EN: {},
    Locale.RU: {
        "БАЙТЫ": B, "КИЛОБАЙТЫ": KB, "МЕГАБАЙТЫ": MB, "ГИГАБАЙТЫ": GB,
        "ТЕРАБАЙТЫ": TB, "ПЕТАБАЙТЫ": PB, "ЭКСАБАЙТЫ": EB,
    },
}

_PLURAL_RULES = {
    Locale.EN: english_category,
    Locale.RU: russian_category,
}

_DECIMAL_SEPARATORS = {
    Locale.EN: ".",
    Locale.RU: ",",
}

# @formatter:on


# Methods --------------------------------------------------------------------------------------------------------------

def get_units(locale: Locale | str) -> LocaleUnits:
    """
    Unit table of a locale.

    Raises:
        UnsupportedLocaleError: If the locale has no table.
    """
    return _REGISTRY[to_locale(locale)]


def is_supported(locale: Any) -> bool:
    """True if locale (a Locale or its string value) has a unit table."""
    try:
        to_locale(locale)
    except UnsupportedLocaleError:
        return False
    return True


def supported_locales() -> tuple[Locale, ...]:
    """Supported locales in declaration order, primary first."""
    return tuple(_REGISTRY.keys())


def to_locale(value: Any) -> Locale:
    """
    Coerce a Locale or its string value ("ru") to Locale.

    Raises:
        UnsupportedLocaleError: If value names no supported locale.
    """
    if isinstance(value, Locale):
        return value
    try:
        return Locale(value)
    except ValueError:
        raise UnsupportedLocaleError(value) from None


def _parse_spellings(locale: Locale) -> dict[str, ByteSize]:
    """Uppercase spellings of every unit: short symbol, all long forms and extras."""
    spellings: dict[str, ByteSize] = {}
    for magnitude in MAGNITUDES:
        spellings[_SHORT_UNITS[locale][magnitude].upper()] = magnitude
        for word in _LONG_FORMS[locale][magnitude]:
            spellings[word.upper()] = magnitude
    spellings.update(_EXTRA_SPELLINGS[locale])
    return spellings


def _build_registry() -> Mapping[Locale, LocaleUnits]:
    """
    Build the frozen unit tables of all locales.

    Every spelling of the primary locale missing in a secondary locale is copied
    into the secondary parse map, so English units parse under Russian. The copy
    is one-directional: Russian spellings stay unknown under English.
    """
    parse_maps = {locale: _parse_spellings(locale) for locale in Locale}

    primary_map = parse_maps[PRIMARY_LOCALE]
    for locale, parse_map in parse_maps.items():
        if locale is PRIMARY_LOCALE:
            continue
        for spelling, magnitude in primary_map.items():
            parse_map.setdefault(spelling, magnitude)

    registry = {
        locale: LocaleUnits(
            locale=locale,
            short_units=_SHORT_UNITS[locale],
            long_forms=_LONG_FORMS[locale],
            parse_map=parse_maps[locale],
            plural_rule=_PLURAL_RULES[locale],
            decimal_separator=_DECIMAL_SEPARATORS[locale],
        )
        for locale in Locale
    }
    return MappingProxyType(registry)


_REGISTRY = _build_registry()


# Module Sanity Checks -------------------------------------------------------------------------------------------------

# Every locale names every magnitude exactly once in each table.
for _locale, _units in _REGISTRY.items():
    if set(_units.short_units) != set(MAGNITUDES) or set(_units.long_forms) != set(MAGNITUDES):
        raise AssertionError(
            f"Configuration Error: locale '{_locale}' must define short and long units for all magnitudes."
        )
    if set(_units.parse_map.values()) != set(MAGNITUDES):
        raise AssertionError(
            f"Configuration Error: locale '{_locale}' parse map must cover all magnitudes."
        )
