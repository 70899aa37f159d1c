#
# Bytesize Value Type and Unit Magnitudes
#

# Standard library -----------------------------------------------------------------------------------------------------
import math
from numbers import Real
from typing import Self

# @formatter:off

UINT64_MODULUS = 1 << 64

# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

class ByteSize(int):
    """
    An unsigned 64-bit number of bytes.

    Construction truncates toward zero and wraps modulo 2**64, so negative inputs
    wrap around like an unsigned integer conversion. Arithmetic with integers keeps
    the ByteSize type, and so does float scaling with the ByteSize on the left
    (KB * 1.5). A float on the left (1.5 * KB) is handled by float itself and gives
    a float, wrap it in ByteSize() to truncate. Everything else behaves like int.

    Strings are not accepted by the constructor, use ByteSize.from_string() or
    ByteSize.from_text() which route through the parser.

    Examples:
        >>> ByteSize(1.5 * MB)
        ByteSize(1572864)
        >>> 2 * KB
        ByteSize(2048)
        >>> KB * 1.5, 1.5 * KB
        (ByteSize(1536), 1536.0)
        >>> ByteSize(-1) == UINT64_MODULUS - 1
        True
    """

    TYPE_NAME = "byte_size"

    def __new__(cls, value: Real | int = 0) -> Self:
        if isinstance(value, (str, bytes, bytearray)):
            raise TypeError(
                f"ByteSize() does not parse text, use ByteSize.from_string(): {value!r}"
            )
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError(f"ByteSize requires a finite value, got {value!r}")
        return super().__new__(cls, int(value) % UINT64_MODULUS)

    # ----- Integration hooks -----

    @classmethod
    def from_string(cls, text: str, locale=None) -> Self:
        """
        Parse a size string such as "1.5 GB" or "2 КБ".

        Uses the active locale unless locale is given. Usable as an argparse type.
        The reverse direction needs no hook, int(size) is the plain byte count.

        Raises:
            ByteSizeError subclasses (all ValueError) on unparsable input.
        """
        # Local import, the parser depends on this module
        from .parser import parse, parse_with_locale

        if locale is None:
            return parse(text)
        return parse_with_locale(text, locale)

    @classmethod
    def from_text(cls, data: bytes | bytearray | memoryview | str) -> Self:
        """
        Parse raw UTF-8 text, e.g. a value read from a config file.

        Raises:
            MalformedInputError: If data is not valid UTF-8.
            ByteSizeError subclasses on unparsable text, see from_string().
        """
        from .errors import MalformedInputError

        if isinstance(data, str):
            return cls.from_string(data)
        raw = bytes(data)
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedInputError(raw.decode("utf-8", errors="replace")) from exc
        return cls.from_string(text)

    def to_text(self) -> bytes:
        """The str() form encoded as UTF-8."""
        return str(self).encode("utf-8")

    def format(self, number_format: str, unit: str = "", long_units: bool = False, locale=None) -> str:
        """Render with an explicit number format, optional unit override and unit style."""
        from .formatter import format_size, format_with_locale

        if locale is None:
            return format_size(self, number_format, unit, long_units)
        return format_with_locale(self, number_format, unit, long_units, locale)

    # ----- Arithmetic -----

    def __add__(self, other):
        if isinstance(other, int):
            return ByteSize(int(self) + int(other))
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, int):
            return ByteSize(int(self) - int(other))
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, int):
            return ByteSize(int(other) - int(self))
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, int):
            return ByteSize(int(self) * int(other))
        if isinstance(other, float):
            return ByteSize(int(self) * other)
        return NotImplemented

    __rmul__ = __mul__

    def __floordiv__(self, other):
        if isinstance(other, int):
            return ByteSize(int(self) // int(other))
        return NotImplemented

    # ----- Representation -----

    def __repr__(self) -> str:
        return f"ByteSize({int(self)})"

    def __str__(self) -> str:
        from .formatter import to_string
        return to_string(self)

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return int(self).__format__(format_spec)


# @formatter:off

B  = ByteSize(1)
KB = ByteSize(1 << 10)
MB = ByteSize(1 << 20)
GB = ByteSize(1 << 30)
TB = ByteSize(1 << 40)
PB = ByteSize(1 << 50)
EB = ByteSize(1 << 60)

MAGNITUDES = (B, KB, MB, GB, TB, PB, EB)

# @formatter:on


# Methods --------------------------------------------------------------------------------------------------------------

def best_fit(size: int) -> ByteSize:
    """
    The largest unit magnitude not exceeding size, B for anything below 1 KB.

    Examples:
        >>> best_fit(1536)
        ByteSize(1024)
        >>> best_fit(0)
        ByteSize(1)
    """
    for magnitude in reversed(MAGNITUDES):
        if size >= magnitude:
            return magnitude
    return B
