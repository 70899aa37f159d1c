#
# Bytesize - Sizes Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
from decimal import Decimal

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bytesize.config import using
from bytesize.errors import MalformedInputError, UnknownUnitError
from bytesize.sizes import (
    B, KB, MB, GB, TB, PB, EB, MAGNITUDES, UINT64_MODULUS,
    ByteSize, best_fit,
)


# Tests ----------------------------------------------------------------------------------------------------------------

class TestByteSize:

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(0, 0, id="zero"),
            pytest.param(1024, 1024, id="int"),
            pytest.param(1.9, 1, id="float-truncates"),
            pytest.param(1.5 * MB, 1572864, id="scaled-float"),
            pytest.param(Decimal("2048.7"), 2048, id="decimal"),
            pytest.param(-1, UINT64_MODULUS - 1, id="negative-wraps"),
            pytest.param(UINT64_MODULUS + 5, 5, id="overflow-wraps"),
        ],
    )
    def test_construct(self, value, expected):
        size = ByteSize(value)
        assert size == expected
        assert isinstance(size, ByteSize)

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_rejected(self, value):
        with pytest.raises(ValueError, match="finite"):
            ByteSize(value)

    @pytest.mark.parametrize("value", ["1 MB", b"1 MB"])
    def test_text_rejected(self, value):
        with pytest.raises(TypeError, match="from_string"):
            ByteSize(value)

    def test_magnitudes(self):
        assert MAGNITUDES == (B, KB, MB, GB, TB, PB, EB)
        assert [int(m) for m in MAGNITUDES] == [1024 ** i for i in range(7)]
        assert all(isinstance(m, ByteSize) for m in MAGNITUDES)

    def test_arithmetic_keeps_type(self):
        assert isinstance(KB + KB, ByteSize) and KB + KB == 2048
        assert isinstance(1 + KB, ByteSize)
        assert isinstance(2 * KB, ByteSize) and 2 * KB == 2048
        assert isinstance(KB * 1.5, ByteSize) and KB * 1.5 == 1536
        assert isinstance(MB // 4, ByteSize) and MB // 4 == 256 * KB
        assert isinstance(MB - KB, ByteSize) and MB - KB == 1023 * KB

    def test_float_on_left_is_float(self):
        scaled = 1.5 * KB
        assert type(scaled) is float and scaled == 1536.0
        assert ByteSize(scaled) == KB * 1.5
        assert ByteSize(0.3 * KB) == 307

    def test_arithmetic_wraps(self):
        assert B - KB == UINT64_MODULUS - 1023
        assert 0 - B == UINT64_MODULUS - 1
        assert EB * 16 == 0

    def test_true_division_is_float(self):
        assert MB / KB == 1024.0
        assert isinstance(MB / KB, float)

    def test_repr(self):
        assert repr(MB) == "ByteSize(1048576)"

    def test_str_uses_active_settings(self):
        assert str(MB) == "1.00MB"
        with using(locale="ru", long_units=True, number_format="%.0f"):
            assert str(2 * KB) == "2 килобайта"

    def test_format_spec(self):
        assert f"{MB}" == "1.00MB"
        assert f"{MB:,}" == "1,048,576"
        assert f"{KB:>6d}" == "  1024"

    def test_format_method(self):
        assert (3 * MB).format("%.1f") == "3.0MB"
        assert (3 * MB).format("%.0f", "KB") == "3072KB"
        assert (3 * MB).format("%.0f", long_units=True, locale="ru") == "3 мегабайта"


class TestIntegrationHooks:

    def test_from_string(self):
        assert ByteSize.from_string("1.5 MB") == 1572864
        assert ByteSize.from_string("2 КБ", locale="ru") == 2048

    def test_from_string_uses_active_locale(self):
        with pytest.raises(UnknownUnitError):
            ByteSize.from_string("2 КБ")
        with using(locale="ru"):
            assert ByteSize.from_string("2 КБ") == 2048

    def test_from_text(self):
        assert ByteSize.from_text(b"10 GB") == 10 * GB
        assert ByteSize.from_text(bytearray("512 B", "utf-8")) == 512
        assert ByteSize.from_text("1 KB") == KB

    def test_from_text_malformed(self):
        with pytest.raises(MalformedInputError):
            ByteSize.from_text(b"1024")

    @pytest.mark.parametrize("data", [b"\xff KB", b"1 \xd0B", bytearray(b"\x80\x80")])
    def test_from_text_invalid_utf8(self, data):
        with pytest.raises(MalformedInputError) as excinfo:
            ByteSize.from_text(data)
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
        assert isinstance(excinfo.value, ValueError)

    def test_to_text(self):
        assert MB.to_text() == b"1.00MB"
        with using(locale="ru"):
            assert MB.to_text() == "1.00МБ".encode("utf-8")

    def test_text_round_trip(self):
        assert ByteSize.from_text((5 * GB).to_text()) == 5 * GB


class TestBestFit:

    @pytest.mark.parametrize(
        "size, expected",
        [
            pytest.param(0, B, id="zero"),
            pytest.param(1023, B, id="below-kb"),
            pytest.param(1024, KB, id="kb"),
            pytest.param(MB - 1, KB, id="below-mb"),
            pytest.param(int(1.5 * GB), GB, id="fractional-gb"),
            pytest.param(EB, EB, id="eb"),
            pytest.param(UINT64_MODULUS - 1, EB, id="max"),
        ],
    )
    def test_best_fit(self, size, expected):
        assert best_fit(size) == expected
