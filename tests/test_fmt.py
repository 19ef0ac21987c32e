#
# Bytesize - Formatting Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import FrozenInstanceError

# Third party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bytesize.fmt import SizeConf, SizeFormatter, format_bytes, format_number, format_unit
from bytesize.numeric import I64_MAX, I64_MIN
from bytesize.rules import BASE2_RULES
from bytesize.units import Base, Style, Unit, KB, GiB, KiB, MiB, EB


# Tests ----------------------------------------------------------------------------------------------------------------

class TestFormatBytes:

    @pytest.mark.parametrize(
        "bytes_, base, style, expected",
        [
            pytest.param(0, Base.BASE2, Style.DEFAULT, "0 bytes", id="zero"),
            pytest.param(1, Base.BASE2, Style.DEFAULT, "1 byte", id="one-byte-singular"),
            pytest.param(999, Base.BASE10, Style.DEFAULT, "999 bytes", id="999-bytes"),
            pytest.param(1000, Base.BASE10, Style.DEFAULT, "1.00 KB", id="1000-base10"),
            pytest.param(1000, Base.BASE2, Style.DEFAULT, "1000 bytes", id="1000-base2"),
            pytest.param(1_340_249, Base.BASE2, Style.DEFAULT, "1.28 MiB", id="1.28-mib"),
            pytest.param(1_340_249, Base.BASE10, Style.FULL_LOWERCASE, "1.34 megabytes", id="1.34-megabytes"),
            pytest.param(200 * KiB, Base.BASE2, Style.DEFAULT, "200 KiB", id="200-kib"),
            pytest.param(2 * MiB, Base.BASE2, Style.DEFAULT, "2.00 MiB", id="2-mib"),
            pytest.param(5 * GiB, Base.BASE2, Style.FULL, "5.00 Gibibytes", id="5-gibibytes"),
            pytest.param(1000, Base.BASE10, Style.FULL, "1.00 Kilobytes", id="full-plural-at-1.00"),
            pytest.param(1500, Base.BASE10, Style.FULL_LOWERCASE, "1.50 kilobytes", id="1.50-kilobytes"),
            pytest.param(1, Base.BASE2, Style.FULL, "1 Byte", id="full-byte"),
            pytest.param(1, Base.BASE2, Style.ABBREVIATED, "1 B", id="abbreviated-byte"),
            pytest.param(2, Base.BASE2, Style.ABBREVIATED_LOWERCASE, "2 b", id="abbreviated-lowercase-byte"),
            pytest.param(2 * MiB, Base.BASE2, Style.ABBREVIATED_LOWERCASE, "2.00 mib", id="lowercase-mib"),
        ],
    )
    def test_format(self, bytes_, base, style, expected):
        assert format_bytes(bytes_, base=base, style=style) == expected

    @pytest.mark.parametrize(
        "bytes_, expected",
        [
            pytest.param(1_234, "1.23 KB", id="two-digits"),
            pytest.param(12_345, "12.3 KB", id="one-digit"),
            pytest.param(123_456, "123 KB", id="no-digits"),
            pytest.param(10_000, "10.0 KB", id="exactly-10kb"),
            pytest.param(100_000, "100 KB", id="exactly-100kb"),
            pytest.param(EB, "1 EB", id="sentinel-exabyte"),
        ],
    )
    def test_bracket_precision(self, bytes_, expected):
        """Print 2, 1, then 0 decimal digits as the value grows within a unit."""
        assert format_bytes(bytes_, base=Base.BASE10) == expected

    @pytest.mark.parametrize(
        "bytes_, base, expected",
        [
            pytest.param(I64_MAX, Base.BASE2, "8 EiB", id="i64-max-base2"),
            pytest.param(I64_MIN, Base.BASE2, "-8 EiB", id="i64-min-base2"),
            pytest.param(I64_MAX, Base.BASE10, "9 EB", id="i64-max-base10"),
            pytest.param(I64_MIN, Base.BASE10, "-9 EB", id="i64-min-base10"),
        ],
    )
    def test_integral_limits(self, bytes_, base, expected):
        assert format_bytes(bytes_, base=base) == expected

    @pytest.mark.parametrize(
        "bytes_, expected",
        [
            pytest.param(-1, "-1 byte", id="minus-one"),
            pytest.param(-200, "-200 bytes", id="minus-200"),
            pytest.param(-200 * KiB, "-200 KiB", id="minus-200-kib"),
            pytest.param(-2 * MiB, "-2.00 MiB", id="minus-2-mib"),
        ],
    )
    def test_negative(self, bytes_, expected):
        assert format_bytes(bytes_) == expected

    @pytest.mark.parametrize(
        "bytes_",
        [
            pytest.param(1, id="1"),
            pytest.param(999, id="999"),
            pytest.param(KB, id="kb"),
            pytest.param(KiB, id="kib"),
            pytest.param(123_456_789, id="123456789"),
            pytest.param(10 ** 15, id="pb"),
            pytest.param(I64_MAX, id="i64-max"),
        ],
    )
    @pytest.mark.parametrize("base", list(Base))
    @pytest.mark.parametrize("style", list(Style))
    def test_sign_symmetry(self, bytes_, base, style):
        """Format a negative count as "-" followed by the text of its magnitude."""
        assert format_bytes(-bytes_, base, style) == "-" + format_bytes(bytes_, base, style)

    @pytest.mark.parametrize(
        "bytes_, base, style, scale, expected",
        [
            pytest.param(1024, Base.BASE10, Style.DEFAULT, 3, "1.024 KB", id="scale-3"),
            pytest.param(KiB, Base.BASE2, Style.DEFAULT, 0, "1 KiB", id="scale-0"),
            pytest.param(KiB, Base.BASE2, Style.FULL_LOWERCASE, 0, "1 kibibyte", id="scale-0-singular"),
            pytest.param(12_346, Base.BASE10, Style.DEFAULT, 2, "12.35 KB", id="scale-overrides-1-digit"),
            pytest.param(512, Base.BASE2, Style.DEFAULT, 2, "512 bytes", id="bytes-ignore-scale"),
        ],
    )
    def test_scale(self, bytes_, base, style, scale, expected):
        """Override the bracket precision for all brackets but bytes."""
        assert format_bytes(bytes_, base=base, style=style, scale=scale) == expected

    def test_string_options(self):
        assert format_bytes(-1000, base="base10", style="full_lowercase") == "-1.00 kilobytes"

    def test_default_base_from_conf(self, base10_conf):
        assert format_bytes(1000) == "1.00 KB"

    def test_default_style_from_conf(self, full_style_conf):
        assert format_bytes(2 * MiB) == "2.00 Mebibytes"

    def test_default_scale_from_conf(self, monkeypatch):
        monkeypatch.setattr(SizeConf, "DEFAULT_SCALE", 1)
        assert format_bytes(1_340_249) == "1.3 MiB"

    @pytest.mark.parametrize(
        "bytes_",
        [
            pytest.param(1.5, id="float"),
            pytest.param("1024", id="str"),
            pytest.param(True, id="bool"),
            pytest.param(None, id="none"),
        ],
    )
    def test_non_int_raises(self, bytes_):
        with pytest.raises(TypeError, match="int"):
            format_bytes(bytes_)

    @pytest.mark.parametrize(
        "bytes_",
        [
            pytest.param(I64_MAX + 1, id="above-i64"),
            pytest.param(I64_MIN - 1, id="below-i64"),
        ],
    )
    def test_out_of_range_raises(self, bytes_):
        with pytest.raises(ValueError, match="64-bit"):
            format_bytes(bytes_)

    @pytest.mark.parametrize(
        "kwargs, error",
        [
            pytest.param({"base": "base16"}, ValueError, id="unknown-base"),
            pytest.param({"style": "bold"}, ValueError, id="unknown-style"),
            pytest.param({"scale": -1}, ValueError, id="negative-scale"),
            pytest.param({"scale": 1.5}, TypeError, id="float-scale"),
        ],
    )
    def test_invalid_options_raise(self, kwargs, error):
        with pytest.raises(error):
            format_bytes(1024, **kwargs)


class TestFormatNumber:

    @pytest.mark.parametrize(
        "magnitude, rule, scale, expected",
        [
            pytest.param(7, BASE2_RULES[0], None, "7", id="bytes"),
            pytest.param(7, BASE2_RULES[0], 3, "7", id="bytes-with-scale"),
            pytest.param(1536, BASE2_RULES[1], None, "1.50", id="rule-precision"),
            pytest.param(1536, BASE2_RULES[1], 1, "1.5", id="scale-override"),
        ],
    )
    def test_format_number(self, magnitude, rule, scale, expected):
        assert format_number(magnitude, rule, scale) == expected


class TestFormatUnit:

    @pytest.mark.parametrize(
        "unit, number, style, expected",
        [
            pytest.param(Unit.BYTE, "1", Style.DEFAULT, "byte", id="byte-singular"),
            pytest.param(Unit.BYTE, "0", Style.DEFAULT, "bytes", id="byte-zero-plural"),
            pytest.param(Unit.MEBIBYTE, "1.00", Style.DEFAULT, "MiB", id="default-abbreviated"),
            pytest.param(Unit.KILOBYTE, "1", Style.FULL, "Kilobyte", id="full-singular"),
            pytest.param(Unit.KILOBYTE, "1.00", Style.FULL, "Kilobytes", id="full-plural-1.00"),
            pytest.param(Unit.GIGABYTE, "3", Style.FULL_LOWERCASE, "gigabytes", id="full-lowercase-plural"),
            pytest.param(Unit.MEBIBYTE, "2.00", Style.ABBREVIATED_LOWERCASE, "mib", id="abbreviated-no-plural"),
            pytest.param(Unit.EXBIBYTE, "8", "abbreviated", "EiB", id="string-style"),
        ],
    )
    def test_format_unit(self, unit, number, style, expected):
        assert format_unit(unit, number, style) == expected


class TestSizeFormatter:

    def test_defaults(self):
        formatter = SizeFormatter()
        assert formatter.base is Base.BASE2
        assert formatter.style is Style.DEFAULT
        assert formatter.scale is None

    def test_builder(self):
        formatter = SizeFormatter().with_base(Base.BASE10).with_style(Style.ABBREVIATED)
        assert [formatter.format(n) for n in (1024, 2048, 4096)] == ["1.02 KB", "2.05 KB", "4.10 KB"]

    def test_with_scale(self):
        formatter = SizeFormatter(base=Base.BASE10).with_scale(3)
        assert formatter.format(1024) == "1.024 KB"
        assert formatter.with_scale(None).format(1024) == "1.02 KB"

    def test_builder_returns_new_instance(self):
        formatter = SizeFormatter()
        decimal = formatter.with_base(Base.BASE10)
        assert decimal is not formatter
        assert formatter.base is Base.BASE2
        assert decimal.base is Base.BASE10

    def test_coerces_strings(self):
        formatter = SizeFormatter(base="base10", style="full")
        assert formatter.base is Base.BASE10
        assert formatter.style is Style.FULL
        assert formatter.format(2000) == "2.00 Kilobytes"

    def test_frozen(self):
        formatter = SizeFormatter()
        with pytest.raises(FrozenInstanceError):
            formatter.base = Base.BASE10

    def test_defaults_from_conf(self, base10_conf):
        assert SizeFormatter().base is Base.BASE10

    def test_equality(self):
        assert SizeFormatter(base="base10") == SizeFormatter().with_base(Base.BASE10)

    @pytest.mark.parametrize(
        "kwargs, error",
        [
            pytest.param({"base": "base16"}, ValueError, id="unknown-base"),
            pytest.param({"style": "bold"}, ValueError, id="unknown-style"),
            pytest.param({"scale": -2}, ValueError, id="negative-scale"),
        ],
    )
    def test_invalid_configuration_raises(self, kwargs, error):
        with pytest.raises(error):
            SizeFormatter(**kwargs)
