"""
Unit tests for converters and the converter registry.
"""

import math

import pytest

from interviewer.core.askable import (
    BOOL,
    CHAR,
    F32,
    F64,
    I8,
    I32,
    I128,
    INT,
    STRING,
    U8,
    U64,
    USIZE,
    Askable,
    ConverterRegistry,
    FunctionConverter,
    default_registry,
)
from interviewer.core.errors import ConversionError, UnknownTargetError


class TestStringAskable:
    def test_returns_input_unchanged(self) -> None:
        assert STRING.convert("  spaced  ") == "  spaced  "
        assert STRING.convert("") == ""


class TestBoolAskable:
    @pytest.mark.parametrize("text", ["Y", "yes", "t", "true", "1", " TRUE ", "Yes"])
    def test_true_words(self, text: str) -> None:
        assert BOOL.convert(text) is True

    @pytest.mark.parametrize("text", ["n", "no", "F", "false", "0", " No "])
    def test_false_words(self, text: str) -> None:
        assert BOOL.convert(text) is False

    def test_unknown_word_fails_naming_bool(self) -> None:
        with pytest.raises(ConversionError) as exc:
            BOOL.convert("maybe")

        assert exc.value.target == "bool"
        assert exc.value.origin == "maybe"
        assert str(exc.value) == 'Could not parse "maybe" as bool'


class TestCharAskable:
    def test_single_character_trimmed(self) -> None:
        assert CHAR.convert(" x ") == "x"
        assert CHAR.convert("é") == "é"

    @pytest.mark.parametrize("text", ["", "   ", "ab"])
    def test_rejects_other_lengths(self, text: str) -> None:
        with pytest.raises(ConversionError) as exc:
            CHAR.convert(text)

        assert exc.value.target == "char"


class TestIntegerAskable:
    def test_parses_signed_values(self) -> None:
        assert I32.convert(" -42 ") == -42
        assert I32.convert("+7") == 7

    def test_range_bounds(self) -> None:
        assert I8.convert("127") == 127
        assert I8.convert("-128") == -128
        assert U8.convert("255") == 255
        assert U64.convert(str(2**64 - 1)) == 2**64 - 1
        assert I128.convert(str(-(2**127))) == -(2**127)

    @pytest.mark.parametrize(
        ("askable", "text"),
        [(I8, "128"), (I8, "-129"), (U8, "256"), (USIZE, str(2**64))],
    )
    def test_overflow_fails(self, askable: Askable, text: str) -> None:
        with pytest.raises(ConversionError) as exc:
            askable.convert(text)

        assert exc.value.target == askable.name

    @pytest.mark.parametrize("text", ["", "1.5", "1_000", "0x10", "12a", "- 1", "+", "١٢"])
    def test_rejects_non_digits(self, text: str) -> None:
        with pytest.raises(ConversionError):
            I32.convert(text)

    def test_unsigned_rejects_minus_sign(self) -> None:
        with pytest.raises(ConversionError):
            U8.convert("-0")

    def test_error_keeps_untrimmed_origin(self) -> None:
        with pytest.raises(ConversionError) as exc:
            I32.convert(" abc ")

        assert exc.value.origin == " abc "
        assert exc.value.target == "i32"

    def test_unbounded_int(self) -> None:
        assert INT.convert(str(10**40)) == 10**40


class TestFloatAskable:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [("1.5", 1.5), ("-2", -2.0), ("1e3", 1000.0), (".5", 0.5), ("3.", 3.0), ("+1E-2", 0.01)],
    )
    def test_decimal_and_exponent(self, text: str, expected: float) -> None:
        assert F64.convert(text) == expected

    def test_special_values(self) -> None:
        assert F64.convert("inf") == math.inf
        assert F64.convert("-Infinity") == -math.inf
        assert math.isnan(F64.convert("NaN"))

    @pytest.mark.parametrize("text", ["", "abc", "1,5", "1_0", "e5", "1e", "0x1p3"])
    def test_rejects_malformed(self, text: str) -> None:
        with pytest.raises(ConversionError) as exc:
            F64.convert(text)

        assert exc.value.target == "f64"

    def test_single_precision_rounding(self) -> None:
        assert F32.convert("0.1") != 0.1
        assert F32.convert("0.5") == 0.5

    def test_single_precision_overflow_is_infinite(self) -> None:
        assert F32.convert("1e40") == math.inf
        assert F32.convert("-1e40") == -math.inf


class TestFunctionConverter:
    def test_wraps_callable(self) -> None:
        conv = FunctionConverter("point", lambda s: tuple(int(p) for p in s.split(",")))

        assert conv.convert("1,2") == (1, 2)

    def test_value_error_becomes_conversion_error(self) -> None:
        conv = FunctionConverter("point", lambda s: tuple(int(p) for p in s.split(",")))

        with pytest.raises(ConversionError) as exc:
            conv.convert("1,x")

        assert exc.value.target == "point"
        assert isinstance(exc.value.__cause__, ValueError)


class TestConverterRegistry:
    def test_default_registry_resolves_names_and_types(self) -> None:
        registry = default_registry()

        assert registry.resolve("i32") is I32
        assert registry.resolve(str) is STRING
        assert registry.resolve(bool) is BOOL
        assert registry.resolve(int) is INT
        assert registry.resolve(float) is F64
        assert registry.resolve("float") is F64

    def test_resolve_passes_askable_through(self) -> None:
        conv = FunctionConverter("custom", str.upper)

        assert ConverterRegistry().resolve(conv) is conv

    def test_unknown_target(self) -> None:
        registry = ConverterRegistry()

        with pytest.raises(UnknownTargetError):
            registry.resolve("i33")
        assert registry.get("i33") is None

    def test_unhashable_target_is_unknown(self) -> None:
        registry = default_registry()

        with pytest.raises(UnknownTargetError) as exc:
            registry.resolve([1])

        assert exc.value.target == [1]

    def test_register_custom_with_alias(self) -> None:
        registry = ConverterRegistry()
        conv = FunctionConverter("upper", str.upper)

        registry.register(conv, "UP")

        assert registry.get("upper") is conv
        assert registry.get("UP") is conv
        assert registry.list_names() == ["upper"]

    def test_list_names_sorted_and_complete(self) -> None:
        names = default_registry().list_names()

        assert names == sorted(names)
        assert {"str", "bool", "char", "i8", "u128", "isize", "usize", "f32", "f64", "int"} <= set(names)
