#
# Bytesize - Plural Rules Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bytesize.plurals import PluralCategory, PluralForms, english_category, english_forms, russian_category

ONE, FEW, MANY = PluralCategory.ONE, PluralCategory.FEW, PluralCategory.MANY


# Tests ----------------------------------------------------------------------------------------------------------------

class TestRussianCategory:

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1, ONE), (21, ONE), (31, ONE), (101, ONE), (1001, ONE),
            (2, FEW), (3, FEW), (4, FEW), (22, FEW), (23, FEW), (24, FEW), (104, FEW),
            (0, MANY), (5, MANY), (9, MANY), (10, MANY), (20, MANY), (25, MANY), (100, MANY),
            (11, MANY), (12, MANY), (14, MANY), (15, MANY), (19, MANY), (111, MANY), (114, MANY),
        ],
    )
    def test_integers(self, value, expected):
        assert russian_category(value) is expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(1.5, ONE, id="1.5"),
            pytest.param(2.99, FEW, id="2.99"),
            pytest.param(0.5, MANY, id="0.5"),
            pytest.param(11.9, MANY, id="11.9"),
        ],
    )
    def test_fractions_truncate(self, value, expected):
        assert russian_category(value) is expected


class TestEnglishCategory:

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(1, ONE, id="one"),
            pytest.param(1.0, ONE, id="one-float"),
            pytest.param(0, ONE, id="zero-singular"),
            pytest.param(2, MANY, id="two"),
            pytest.param(1.5, MANY, id="fraction"),
            pytest.param(0.5, MANY, id="below-one"),
            pytest.param(21, MANY, id="twenty-one"),
        ],
    )
    def test_category(self, value, expected):
        assert english_category(value) is expected


class TestPluralForms:

    def test_select(self):
        forms = PluralForms("килобайт", "килобайта", "килобайтов")
        assert forms.select(ONE) == "килобайт"
        assert forms.select(FEW) == "килобайта"
        assert forms.select(MANY) == "килобайтов"

    def test_english_forms(self):
        assert english_forms("byte") == PluralForms("byte", "bytes", "bytes")
