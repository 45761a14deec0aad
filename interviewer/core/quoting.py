"""
Quote-aware escaping for multi-value input.

When consumable quotes are enabled, whitespace inside a ``"..."`` region is
swapped for a sentinel before tokenization so the region survives as a single
token, and the sentinel is turned back into a space afterwards.

The sentinel is an ordinary literal. If a user types it verbatim it is
restored to a single space like any quoted whitespace.
"""

import threading
from typing import Final

WHITESPACE_SENTINEL: Final[str] = "THIS___IS__A_REPR"
QUOTE_CHAR: Final[str] = '"'


class QuoteMode:
    """
    Thread-safe process-wide on/off cell for consumable quotes.

    Acquisitions read a snapshot once per call, so a change made while a
    prompt is open applies from the next call on.
    """

    def __init__(self, enabled: bool = False) -> None:
        self._enabled = enabled
        self._lock = threading.Lock()

    def get(self) -> bool:
        with self._lock:
            return self._enabled

    def set(self, enabled: bool) -> None:
        with self._lock:
            self._enabled = bool(enabled)


_QUOTE_MODE = QuoteMode()


def set_consumable_quotes(enabled: bool) -> None:
    """
    Turn quote escaping on or off for every following multi-value acquisition.

    With quotes on, ``a "b c d" e`` split on whitespace yields
    ``["a", "b c d", "e"]``; with quotes off the quote characters stay in the
    tokens and the quoted words split apart.
    """
    _QUOTE_MODE.set(enabled)


def consumable_quotes() -> bool:
    """Current quote mode."""
    return _QUOTE_MODE.get()


def preprocess_quotes(line: str) -> str:
    """
    Neutralize whitespace inside quoted regions and drop the quote characters.

    The quote state toggles on every ``"``; an unterminated quote keeps the
    rest of the line quoted. The rewritten line is stripped.

    Args:
        line: Raw line as typed by the user

    Returns:
        Line with quoted whitespace replaced by ``WHITESPACE_SENTINEL``
    """
    parts: list[str] = []
    in_quote = False
    for char in line:
        if char == QUOTE_CHAR:
            in_quote = not in_quote
            continue
        if in_quote and char.isspace():
            parts.append(WHITESPACE_SENTINEL)
        else:
            parts.append(char)
    return "".join(parts).strip()


def restore_whitespace(token: str) -> str:
    """Turn every sentinel in a token back into a single space."""
    return token.replace(WHITESPACE_SENTINEL, " ")
