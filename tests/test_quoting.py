"""
Unit tests for quote preprocessing and the quote mode cell.
"""

import threading

from interviewer.core.quoting import (
    WHITESPACE_SENTINEL,
    QuoteMode,
    consumable_quotes,
    preprocess_quotes,
    restore_whitespace,
    set_consumable_quotes,
)

S = WHITESPACE_SENTINEL


class TestPreprocessQuotes:
    """Tests for preprocess_quotes()."""

    def test_quoted_whitespace_replaced(self) -> None:
        assert preprocess_quotes('a "b c" d') == f"a b{S}c d"

    def test_quote_characters_removed(self) -> None:
        assert preprocess_quotes('"x"') == "x"
        assert '"' not in preprocess_quotes('say "hi" and "bye"')

    def test_unquoted_line_unchanged(self) -> None:
        assert preprocess_quotes("a b c") == "a b c"

    def test_result_trimmed(self) -> None:
        assert preprocess_quotes('  "a b"  ') == f"a{S}b"

    def test_unterminated_quote_stays_open(self) -> None:
        assert preprocess_quotes('a "b c d') == f"a b{S}c{S}d"

    def test_trailing_quoted_whitespace_survives_trim(self) -> None:
        assert preprocess_quotes('a "b ') == f"a b{S}"

    def test_every_whitespace_kind_replaced(self) -> None:
        assert preprocess_quotes('"a\tb"') == f"a{S}b"

    def test_adjacent_quoted_regions(self) -> None:
        assert preprocess_quotes('"a b""c d"') == f"a{S}bc{S}d"


class TestRestoreWhitespace:
    """Tests for restore_whitespace()."""

    def test_sentinel_becomes_single_space(self) -> None:
        assert restore_whitespace(f"a{S}{S}b") == "a  b"

    def test_plain_token_unchanged(self) -> None:
        assert restore_whitespace("plain") == "plain"


class TestQuoteMode:
    """Tests for the process-wide quote mode."""

    def test_default_off(self) -> None:
        assert QuoteMode().get() is False
        assert consumable_quotes() is False

    def test_setter_toggles_global_mode(self) -> None:
        set_consumable_quotes(True)
        assert consumable_quotes() is True

        set_consumable_quotes(False)
        assert consumable_quotes() is False

    def test_concurrent_writers_leave_valid_state(self) -> None:
        mode = QuoteMode()

        def worker(flag: bool) -> None:
            for _ in range(200):
                mode.set(flag)

        threads = [threading.Thread(target=worker, args=(i % 2 == 0,)) for i in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert mode.get() in (True, False)
