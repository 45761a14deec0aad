"""Typed conversion of input tokens.

Every supported target type is an ``Askable``: a pure ``str -> value``
converter with a name used in error messages. Converters are looked up
through a ``ConverterRegistry``.
"""

from __future__ import annotations

import math
import re
import struct
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Final

from interviewer.core.errors import ConversionError, UnknownTargetError

TRUE_WORDS: Final[frozenset[str]] = frozenset({"y", "yes", "t", "true", "1"})
FALSE_WORDS: Final[frozenset[str]] = frozenset({"n", "no", "f", "false", "0"})

_SIGNED_INT_RE: Final = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT_RE: Final = re.compile(r"\+?[0-9]+")
_FLOAT_RE: Final = re.compile(
    r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


class Askable(ABC):
    """Abstract base class for text-to-value converters."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Target type name reported in conversion errors."""

    @abstractmethod
    def convert(self, text: str) -> Any:
        """Convert a token to a value.

        Args:
            text: Token as produced by the tokenizer (not pre-trimmed)

        Returns:
            The converted value

        Raises:
            ConversionError: The token is not valid for this type
        """

    def _fail(self, text: str) -> ConversionError:
        return ConversionError(origin=text, target=self.name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class StringAskable(Askable):
    """Text: always succeeds and returns the token unchanged."""

    @property
    def name(self) -> str:
        return "str"

    def convert(self, text: str) -> str:
        return text


class BoolAskable(Askable):
    """Case-insensitive yes/no words."""

    @property
    def name(self) -> str:
        return "bool"

    def convert(self, text: str) -> bool:
        word = text.lower().strip()
        if word in TRUE_WORDS:
            return True
        if word in FALSE_WORDS:
            return False
        raise self._fail(text)


class CharAskable(Askable):
    """A single character, surrounding whitespace ignored."""

    @property
    def name(self) -> str:
        return "char"

    def convert(self, text: str) -> str:
        stripped = text.strip()
        if len(stripped) != 1:
            raise self._fail(text)
        return stripped


class IntegerAskable(Askable):
    """Decimal integer with an optional sign, checked against a value range.

    ``minimum``/``maximum`` of ``None`` leave that side unbounded.
    """

    def __init__(self, name: str, minimum: int | None, maximum: int | None) -> None:
        self._name = name
        self.minimum = minimum
        self.maximum = maximum
        signed = minimum is None or minimum < 0
        self._pattern = _SIGNED_INT_RE if signed else _UNSIGNED_INT_RE

    @classmethod
    def signed(cls, name: str, bits: int) -> IntegerAskable:
        return cls(name, -(1 << (bits - 1)), (1 << (bits - 1)) - 1)

    @classmethod
    def unsigned(cls, name: str, bits: int) -> IntegerAskable:
        return cls(name, 0, (1 << bits) - 1)

    @property
    def name(self) -> str:
        return self._name

    def convert(self, text: str) -> int:
        stripped = text.strip()
        if not self._pattern.fullmatch(stripped):
            raise self._fail(text)
        value = int(stripped)
        if self.minimum is not None and value < self.minimum:
            raise self._fail(text)
        if self.maximum is not None and value > self.maximum:
            raise self._fail(text)
        return value


class FloatAskable(Askable):
    """Decimal/exponent notation plus ``inf``, ``infinity`` and ``nan``.

    Single precision rounds through a 32-bit float; magnitudes beyond its
    range become infinities.
    """

    def __init__(self, name: str, *, single: bool = False) -> None:
        self._name = name
        self.single = single

    @property
    def name(self) -> str:
        return self._name

    def convert(self, text: str) -> float:
        stripped = text.strip()
        if not _FLOAT_RE.fullmatch(stripped):
            raise self._fail(text)
        value = float(stripped)
        if self.single:
            return _to_single(value)
        return value


def _to_single(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


class FunctionConverter(Askable):
    """Adapt a plain callable into an ``Askable``.

    ``ValueError`` and ``TypeError`` raised by the callable become a
    ``ConversionError`` naming this converter.
    """

    def __init__(self, name: str, func: Callable[[str], Any]) -> None:
        self._name = name
        self._func = func

    @property
    def name(self) -> str:
        return self._name

    def convert(self, text: str) -> Any:
        try:
            return self._func(text)
        except ConversionError:
            raise
        except (ValueError, TypeError) as exc:
            raise self._fail(text) from exc


STRING: Final[Askable] = StringAskable()
BOOL: Final[Askable] = BoolAskable()
CHAR: Final[Askable] = CharAskable()
I8: Final[Askable] = IntegerAskable.signed("i8", 8)
I16: Final[Askable] = IntegerAskable.signed("i16", 16)
I32: Final[Askable] = IntegerAskable.signed("i32", 32)
I64: Final[Askable] = IntegerAskable.signed("i64", 64)
I128: Final[Askable] = IntegerAskable.signed("i128", 128)
ISIZE: Final[Askable] = IntegerAskable.signed("isize", 64)
U8: Final[Askable] = IntegerAskable.unsigned("u8", 8)
U16: Final[Askable] = IntegerAskable.unsigned("u16", 16)
U32: Final[Askable] = IntegerAskable.unsigned("u32", 32)
U64: Final[Askable] = IntegerAskable.unsigned("u64", 64)
U128: Final[Askable] = IntegerAskable.unsigned("u128", 128)
USIZE: Final[Askable] = IntegerAskable.unsigned("usize", 64)
INT: Final[Askable] = IntegerAskable("int", None, None)
F32: Final[Askable] = FloatAskable("f32", single=True)
F64: Final[Askable] = FloatAskable("f64")
FLOAT: Final[Askable] = F64

BUILTIN_CONVERTERS: Final[tuple[Askable, ...]] = (
    STRING,
    BOOL,
    CHAR,
    I8,
    I16,
    I32,
    I64,
    I128,
    ISIZE,
    U8,
    U16,
    U32,
    U64,
    U128,
    USIZE,
    INT,
    F32,
    F64,
)


class ConverterRegistry:
    """Explicit converter registration and lookup by name or Python type."""

    def __init__(self) -> None:
        self._converters: dict[object, Askable] = {}

    def register(self, askable: Askable, *aliases: object) -> None:
        """Register a converter under its name and any extra keys.

        Args:
            askable: Converter to register
            aliases: Additional lookup keys (names or Python types)
        """
        self._converters[askable.name] = askable
        for alias in aliases:
            self._converters[alias] = askable

    def get(self, key: object) -> Askable | None:
        """Retrieve a converter by key, or None if not registered."""
        return self._converters.get(key)

    def resolve(self, target: object) -> Askable:
        """Turn a conversion target into a converter.

        Args:
            target: An ``Askable`` instance, a registered name, or a
                registered Python type

        Raises:
            UnknownTargetError: Nothing registered under ``target``
        """
        if isinstance(target, Askable):
            return target
        try:
            askable = self.get(target)
        except TypeError:
            # Unhashable targets can never be registered
            raise UnknownTargetError(target) from None
        if askable is None:
            raise UnknownTargetError(target)
        return askable

    def list_names(self) -> list[str]:
        """List all registered converter names."""
        return sorted({askable.name for askable in self._converters.values()})


def default_registry() -> ConverterRegistry:
    """Registry holding every built-in converter plus Python type aliases."""
    registry = ConverterRegistry()
    for askable in BUILTIN_CONVERTERS:
        registry.register(askable)
    registry.register(STRING, str)
    registry.register(BOOL, bool)
    registry.register(INT, int)
    registry.register(F64, float, "float")
    return registry
