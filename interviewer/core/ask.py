"""
Acquisition policies: prompt, tokenize, convert, and decide what to do on failure.

Single-value policies:

- ``ask``: read once, return the value or raise ``ConversionError``
- ``ask_until``: re-prompt until the line converts
- ``ask_opt``: like ``ask_until``, but an empty line returns ``None``

Multi-value policies:

- ``ask_many``: read once, convert every token or raise the first failure
- ``ask_many_until``: re-prompt with a fresh line until every token converts
- ``ask_many_opt``: like ``ask_many_until``, but a line without tokens returns ``None``
- ``ask_many_opt_lazy``: read once, ``None`` in place of each bad token

Retry loops never mix values from different lines. An interrupt at the
prompt exits the process with status 0; a fatal read error prints the error
and exits with status 1.
"""

from __future__ import annotations

from typing import Any

from interviewer.core.askable import Askable, ConverterRegistry, default_registry
from interviewer.core.errors import ConversionError
from interviewer.core.line_reader import Fatal, Interrupted, LineReader, SharedLineReader
from interviewer.core.logging_config import get_logger
from interviewer.core.quoting import consumable_quotes
from interviewer.core.separator import Separator, split_line

logger = get_logger("ask")


class Interviewer:
    """
    Prompting front end combining a line reader with typed conversion.

    Conversion targets may be an ``Askable``, a registered name such as
    ``"i32"``, or a Python type such as ``int``.
    """

    def __init__(
        self,
        reader: LineReader | None = None,
        registry: ConverterRegistry | None = None,
    ) -> None:
        self._reader = reader if reader is not None else SharedLineReader()
        self._registry = registry if registry is not None else default_registry()

    @property
    def registry(self) -> ConverterRegistry:
        return self._registry

    def ask(self, prompt: str, target: object = str) -> Any:
        """Read one line and convert it; raises ``ConversionError`` on failure."""
        return self._single(prompt, self._registry.resolve(target), retry=False, stop_on_empty=False)

    def ask_until(self, prompt: str, target: object = str) -> Any:
        """Prompt repeatedly until the line converts."""
        return self._single(prompt, self._registry.resolve(target), retry=True, stop_on_empty=False)

    def ask_opt(self, prompt: str, target: object = str) -> Any | None:
        """Prompt until the line converts; an empty line returns ``None``."""
        return self._single(prompt, self._registry.resolve(target), retry=True, stop_on_empty=True)

    def ask_many(self, prompt: str, target: object = str, separator: Separator = Separator.WHITESPACE) -> list[Any]:
        """Read one line and convert every token; raises the first ``ConversionError``."""
        values = self._many(
            prompt, self._registry.resolve(target), separator, retry=False, stop_on_empty=False
        )
        assert values is not None
        return values

    def ask_many_until(
        self, prompt: str, target: object = str, separator: Separator = Separator.WHITESPACE
    ) -> list[Any]:
        """
        Prompt repeatedly until every token of one line converts.

        A line with no tokens is a valid, empty result.
        """
        values = self._many(
            prompt, self._registry.resolve(target), separator, retry=True, stop_on_empty=False
        )
        assert values is not None
        return values

    def ask_many_opt(
        self, prompt: str, target: object = str, separator: Separator = Separator.WHITESPACE
    ) -> list[Any] | None:
        """Prompt until every token of one line converts; a line without tokens returns ``None``."""
        return self._many(prompt, self._registry.resolve(target), separator, retry=True, stop_on_empty=True)

    def ask_many_opt_lazy(
        self, prompt: str, target: object = str, separator: Separator = Separator.WHITESPACE
    ) -> list[Any | None]:
        """Read one line; each token becomes its value or ``None`` when it does not convert."""
        askable = self._registry.resolve(target)
        values: list[Any | None] = []
        for token in self._tokens(prompt, separator):
            try:
                values.append(askable.convert(token))
            except ConversionError as exc:
                logger.debug("Token replaced by None: %s", exc)
                values.append(None)
        return values

    def _single(self, prompt: str, askable: Askable, *, retry: bool, stop_on_empty: bool) -> Any | None:
        while True:
            line = self._read(prompt)
            if stop_on_empty and not line:
                return None
            try:
                return askable.convert(line)
            except ConversionError as exc:
                if not retry:
                    raise
                logger.debug("Discarding input, prompting again: %s", exc)

    def _many(
        self,
        prompt: str,
        askable: Askable,
        separator: Separator,
        *,
        retry: bool,
        stop_on_empty: bool,
    ) -> list[Any] | None:
        while True:
            tokens = self._tokens(prompt, separator)
            if stop_on_empty and not tokens:
                return None
            try:
                return [askable.convert(token) for token in tokens]
            except ConversionError as exc:
                if not retry:
                    raise
                logger.debug("Discarding line, prompting again: %s", exc)

    def _tokens(self, prompt: str, separator: Separator) -> list[str]:
        quotes = consumable_quotes()
        return split_line(self._read(prompt), separator, quotes=quotes)

    def _read(self, prompt: str) -> str:
        result = self._reader.read_line(prompt)
        if isinstance(result, Interrupted):
            logger.info("Prompt interrupted, exiting")
            raise SystemExit(0)
        if isinstance(result, Fatal):
            print(f"Error: {result.error!r}")
            raise SystemExit(1)
        return result.text


_default_interviewer = Interviewer()


def ask(prompt: str, target: object = str) -> Any:
    """Read one line as ``target``; raises ``ConversionError`` on failure."""
    return _default_interviewer.ask(prompt, target)


def ask_until(prompt: str, target: object = str) -> Any:
    """Prompt until the line converts to ``target``."""
    return _default_interviewer.ask_until(prompt, target)


def ask_opt(prompt: str, target: object = str) -> Any | None:
    """Prompt until the line converts; ``None`` for an empty line."""
    return _default_interviewer.ask_opt(prompt, target)


def ask_many(prompt: str, target: object = str, separator: Separator = Separator.WHITESPACE) -> list[Any]:
    """Read one line of separated values; raises the first ``ConversionError``."""
    return _default_interviewer.ask_many(prompt, target, separator)


def ask_many_until(prompt: str, target: object = str, separator: Separator = Separator.WHITESPACE) -> list[Any]:
    """Prompt until every value on one line converts."""
    return _default_interviewer.ask_many_until(prompt, target, separator)


def ask_many_opt(
    prompt: str, target: object = str, separator: Separator = Separator.WHITESPACE
) -> list[Any] | None:
    """Prompt until every value on one line converts; ``None`` for a line without values."""
    return _default_interviewer.ask_many_opt(prompt, target, separator)


def ask_many_opt_lazy(
    prompt: str, target: object = str, separator: Separator = Separator.WHITESPACE
) -> list[Any | None]:
    """Read one line of separated values, ``None`` in place of each invalid one."""
    return _default_interviewer.ask_many_opt_lazy(prompt, target, separator)
