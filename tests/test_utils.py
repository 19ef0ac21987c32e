#
# Bytesize - Utils Tests
#

# Third party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bytesize.size import Size
from bytesize.units import Unit
from bytesize.utils import class_name, fmt_type, fmt_value


# Helpers --------------------------------------------------------------------------------------------------------------

class BrokenRepr:
    def __repr__(self):
        raise RuntimeError("no repr")


# Tests ----------------------------------------------------------------------------------------------------------------

class TestClassName:

    @pytest.mark.parametrize(
        "obj, fully_qualified, expected",
        [
            pytest.param(int, False, "int", id="builtin-class"),
            pytest.param(10, False, "int", id="builtin-instance"),
            pytest.param(10, True, "int", id="builtin-never-qualified"),
            pytest.param(None, False, "NoneType", id="none"),
            pytest.param(Size(1), False, "Size", id="instance"),
            pytest.param(Size, True, "bytesize.size.Size", id="class-fq"),
            pytest.param(Size(1), True, "bytesize.size.Size", id="instance-fq"),
            pytest.param(Unit.BYTE, True, "bytesize.units.Unit", id="enum-member-fq"),
        ],
    )
    def test_class_name(self, obj, fully_qualified, expected):
        assert class_name(obj, fully_qualified=fully_qualified) == expected


class TestFmtType:

    @pytest.mark.parametrize(
        "obj, expected",
        [
            pytest.param("1 KB", "<str>", id="str"),
            pytest.param(None, "<NoneType>", id="none"),
            pytest.param(Size(1), "<Size>", id="size"),
        ],
    )
    def test_fmt_type(self, obj, expected):
        assert fmt_type(obj) == expected


class TestFmtValue:

    @pytest.mark.parametrize(
        "obj, expected",
        [
            pytest.param(42, "<int: 42>", id="int"),
            pytest.param("12..34 MB", "<str: '12..34 MB'>", id="str"),
            pytest.param(Size(5), "<Size: Size(5 bytes)>", id="size"),
        ],
    )
    def test_fmt_value(self, obj, expected):
        assert fmt_value(obj) == expected

    def test_truncates_long_repr(self):
        res = fmt_value("x" * 200, max_repr=20)
        assert res == "<str: '" + "x" * 16 + "...>"
        assert len(res) == len("<str: >") + 20

    def test_broken_repr(self):
        res = fmt_value(BrokenRepr())
        assert res.startswith("<BrokenRepr:")
        assert "repr failed: RuntimeError" in res
