#
# Bytesize Errors
#

# Classes --------------------------------------------------------------------------------------------------------------

class ByteSizeError(ValueError):
    """Base class of all parsing and locale errors."""


class UnsupportedLocaleError(ByteSizeError):
    """The requested locale has no unit table."""

    def __init__(self, locale):
        self.locale = locale
        super().__init__(f"unsupported locale: {locale!r}")


class MalformedInputError(ByteSizeError):
    """No number/unit boundary, or one side of it is empty."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"malformed byte size {text!r}, expected a number followed by a unit")


class UnknownUnitError(ByteSizeError):
    """The unit part is not a known spelling in the locale."""

    def __init__(self, unit: str):
        self.unit = unit
        super().__init__(f"unrecognized size suffix: {unit!r}")


class InvalidNumberError(ByteSizeError):
    """The number part is not a valid decimal number."""

    def __init__(self, number: str, reason: str = "invalid decimal number"):
        self.number = number
        super().__init__(f"{reason}: {number!r}")
