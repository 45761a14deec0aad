"""
Separator strategies and line tokenization.

A ``Separator`` picks how one line is cut into tokens:

- ``WHITESPACE``: runs of whitespace, never producing empty tokens
- ``SEQUENCE``: every literal occurrence of ``seq``, tokens kept as-is
- ``SEQUENCE_TRIM`` / ``SEQUENCE_TRIM_START`` / ``SEQUENCE_TRIM_END``: the
  same split, with each token stripped on both ends / the start / the end

For every strategy a single trailing empty token is dropped, so ``"a,b,"``
reads as two values. Empty tokens in the middle are preserved.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from interviewer.core.quoting import preprocess_quotes, restore_whitespace


class SeparatorKind(Enum):
    """Closed set of tokenization strategies."""

    WHITESPACE = "whitespace"
    SEQUENCE = "sequence"
    SEQUENCE_TRIM = "trim"
    SEQUENCE_TRIM_START = "trim-start"
    SEQUENCE_TRIM_END = "trim-end"


_TRIMMERS: dict[SeparatorKind, Callable[[str], str]] = {
    SeparatorKind.SEQUENCE_TRIM: str.strip,
    SeparatorKind.SEQUENCE_TRIM_START: str.lstrip,
    SeparatorKind.SEQUENCE_TRIM_END: str.rstrip,
}


@dataclass(frozen=True)
class Separator:
    """
    Immutable separator selection.

    Attributes:
        kind: Tokenization strategy
        seq: Literal separator text; ``None`` for ``WHITESPACE``, otherwise
            a non-empty string
    """

    kind: SeparatorKind
    seq: str | None = None

    WHITESPACE: ClassVar[Separator]

    def __post_init__(self) -> None:
        if self.kind is SeparatorKind.WHITESPACE:
            if self.seq is not None:
                raise ValueError("whitespace separator takes no sequence")
            return
        if not isinstance(self.seq, str) or not self.seq:
            raise ValueError(f"{self.kind.value} separator requires a non-empty sequence")

    @classmethod
    def whitespace(cls) -> Separator:
        return cls(SeparatorKind.WHITESPACE)

    @classmethod
    def sequence(cls, seq: str) -> Separator:
        return cls(SeparatorKind.SEQUENCE, seq)

    @classmethod
    def sequence_trim(cls, seq: str) -> Separator:
        return cls(SeparatorKind.SEQUENCE_TRIM, seq)

    @classmethod
    def sequence_trim_start(cls, seq: str) -> Separator:
        return cls(SeparatorKind.SEQUENCE_TRIM_START, seq)

    @classmethod
    def sequence_trim_end(cls, seq: str) -> Separator:
        return cls(SeparatorKind.SEQUENCE_TRIM_END, seq)

    @classmethod
    def parse(cls, kind_name: str, seq: str | None = None) -> Separator:
        """
        Build a separator from its strategy name.

        Args:
            kind_name: One of ``whitespace``, ``sequence``, ``trim``,
                ``trim-start``, ``trim-end``
            seq: Literal separator for the sequence strategies

        Raises:
            ValueError: Unknown strategy name or missing sequence
        """
        try:
            kind = SeparatorKind(kind_name.strip().lower())
        except ValueError:
            names = ", ".join(k.value for k in SeparatorKind)
            raise ValueError(f"unknown separator {kind_name!r} (expected one of: {names})") from None
        if kind is SeparatorKind.WHITESPACE:
            return cls(kind)
        return cls(kind, seq)


Separator.WHITESPACE = Separator(SeparatorKind.WHITESPACE)


def _split_trimmed(text: str, seq: str, trim: Callable[[str], str]) -> list[str]:
    # Manual scan: each segment is trimmed before the separator is consumed,
    # and the cursor always skips exactly len(seq) characters.
    tokens: list[str] = []
    start = 0
    index = 0
    while index < len(text):
        if text.startswith(seq, index):
            tokens.append(trim(text[start:index]))
            index += len(seq)
            start = index
            continue
        index += 1
    tokens.append(trim(text[start:]))
    return tokens


def tokenize(text: str, separator: Separator) -> list[str]:
    """
    Split text into ordered tokens according to a separator strategy.

    Args:
        text: Line to split (already quote-preprocessed if needed)
        separator: Strategy to apply

    Returns:
        Tokens in input order, without a trailing empty token
    """
    kind = separator.kind
    if kind is SeparatorKind.WHITESPACE:
        tokens = text.split()
    elif kind is SeparatorKind.SEQUENCE:
        tokens = text.split(separator.seq)
    else:
        assert separator.seq is not None
        tokens = _split_trimmed(text, separator.seq, _TRIMMERS[kind])

    if tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


def split_line(line: str, separator: Separator, *, quotes: bool) -> list[str]:
    """
    Full multi-value pipeline: quote preprocessing, tokenization, restore.

    Args:
        line: Trimmed line from the line reader
        separator: Strategy to apply
        quotes: Snapshot of the quote mode for this acquisition

    Returns:
        Tokens with quoted whitespace restored
    """
    text = preprocess_quotes(line) if quotes else line
    return [restore_whitespace(token) for token in tokenize(text, separator)]
