#
# Bytesize Grammatical Number Rules
#

# Standard library -----------------------------------------------------------------------------------------------------
from enum import StrEnum, unique
from typing import Callable, NamedTuple


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class PluralCategory(StrEnum):
    """
    Grammatical number categories of a unit word.

    Attributes:
        ONE (str)  : Singular - 1 byte, 21 килобайт
        FEW (str)  : Paucal, Slavic 2-4 - 3 мегабайта
        MANY (str) : Plural - 2 bytes, 5 гигабайтов
    """
    ONE = "one"
    FEW = "few"
    MANY = "many"


class PluralForms(NamedTuple):
    """Word forms of a single unit, one per PluralCategory."""
    one: str
    few: str
    many: str

    def select(self, category: PluralCategory) -> str:
        return getattr(self, category.value)


PluralRule = Callable[[float], PluralCategory]


# Methods --------------------------------------------------------------------------------------------------------------

def english_category(value: float) -> PluralCategory:
    """
    English rule, plural for every positive value other than exactly 1.

    Zero keeps the singular form: 0 -> "0 byte".
    """
    if value > 0 and value != 1:
        return PluralCategory.MANY
    return PluralCategory.ONE


def russian_category(value: float) -> PluralCategory:
    """
    Slavic three-way rule on the integer part of value.

    Examples:
        >>> russian_category(1), russian_category(3), russian_category(11), russian_category(21)
        (<PluralCategory.ONE: 'one'>, <PluralCategory.FEW: 'few'>, <PluralCategory.MANY: 'many'>, <PluralCategory.ONE: 'one'>)
    """
    n = int(value)

    if 11 <= n % 100 <= 19:
        return PluralCategory.MANY

    last_digit = n % 10
    if last_digit == 1:
        return PluralCategory.ONE
    if last_digit in (2, 3, 4):
        return PluralCategory.FEW
    return PluralCategory.MANY


def english_forms(word: str) -> PluralForms:
    """Regular English forms, the plural is word + 's'."""
    return PluralForms(one=word, few=word + "s", many=word + "s")
