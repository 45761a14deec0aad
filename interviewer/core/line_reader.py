"""
Line acquisition for interactive prompts.

A ``LineReader`` shows a prompt and returns one of three outcomes:

- ``Line``: the trimmed text the user entered
- ``Interrupted``: the user pressed Ctrl-C
- ``Fatal``: reading failed (end of input, terminal errors)

The process shares one reader, a ``prompt_toolkit`` session when one can be
created, stdlib ``readline`` otherwise, and plain stdin as a last resort.
``read_line`` holds a process-wide lock for the whole prompt, so concurrent
callers are served one at a time.

Editor history keeps trimmed, non-empty lines, skips a line equal to the
previous entry, and holds at most ``HISTORY_LIMIT`` entries.
"""

from __future__ import annotations

import sys
import threading
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import islice
from pathlib import Path
from typing import Any, Final, TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory, InMemoryHistory

from interviewer.core.logging_config import get_logger

try:
    import readline
except ImportError:  # pragma: no cover - platform dependent
    readline = None  # type: ignore[assignment]

HISTORY_LIMIT: Final[int] = 100

logger = get_logger("line_reader")


@dataclass(frozen=True)
class Line:
    """A line of input, already trimmed."""

    text: str


@dataclass(frozen=True)
class Interrupted:
    """The user interrupted the prompt."""


@dataclass(frozen=True)
class Fatal:
    """Reading failed and no more input can be obtained."""

    error: BaseException


LineResult = Line | Interrupted | Fatal


class LineReader(ABC):
    """Abstract base class for prompt-driven line sources."""

    @abstractmethod
    def read_line(self, prompt: str) -> LineResult:
        """
        Show a prompt and read one line.

        Args:
            prompt: Text displayed before the cursor

        Returns:
            Line, Interrupted or Fatal
        """


class EditorUnavailableError(RuntimeError):
    """Raised when a line editor cannot be used."""


class _EditorHistoryMixin:
    """Trimmed, non-empty entries without consecutive duplicates."""

    def load_history_strings(self) -> Iterable[str]:
        # Newest first, so the cap keeps the most recent entries
        return islice(super().load_history_strings(), HISTORY_LIMIT)  # type: ignore[misc]

    def append_string(self, string: str) -> None:
        line = string.strip()
        if not line:
            return
        strings = self.get_strings()  # type: ignore[attr-defined]
        if strings and strings[-1] == line:
            return
        super().append_string(line)  # type: ignore[misc]


class EditorHistory(_EditorHistoryMixin, InMemoryHistory):
    """Session-only editor history."""


class EditorFileHistory(_EditorHistoryMixin, FileHistory):
    """Editor history persisted to a file; only the newest entries are loaded."""


class PromptToolkitLineReader(LineReader):
    """
    Line editing with history through a ``prompt_toolkit`` session.

    ``input``/``output`` are passed through to ``PromptSession``; leave them
    unset for the real terminal.
    """

    def __init__(
        self,
        *,
        history_file: Path | None = None,
        input: Any = None,
        output: Any = None,
    ) -> None:
        self.history = EditorFileHistory(str(history_file)) if history_file is not None else EditorHistory()
        self._session: PromptSession[str] = PromptSession(history=self.history, input=input, output=output)

    def read_line(self, prompt: str) -> LineResult:
        try:
            raw = self._session.prompt(prompt)
        except KeyboardInterrupt:
            return Interrupted()
        except (EOFError, OSError) as exc:
            return Fatal(exc)
        return Line(raw.strip())


class ReadlineLineReader(LineReader):
    """
    Line editing with history through the stdlib ``readline`` module.

    Automatic history is disabled so the trimmed line, not the raw one, is
    recorded.
    """

    def __init__(self, *, history_file: Path | None = None) -> None:
        if readline is None:
            raise EditorUnavailableError("readline module is not available")
        self._history_file = history_file
        readline.set_auto_history(False)
        readline.set_history_length(HISTORY_LIMIT)
        if history_file is not None and history_file.exists():
            readline.read_history_file(str(history_file))

    def read_line(self, prompt: str) -> LineResult:
        try:
            raw = input(prompt)
        except KeyboardInterrupt:
            return Interrupted()
        except (EOFError, OSError) as exc:
            return Fatal(exc)
        line = raw.strip()
        self._remember(line)
        return Line(line)

    def _remember(self, line: str) -> None:
        if not line:
            return
        length = readline.get_current_history_length()
        if length and readline.get_history_item(length) == line:
            return
        readline.add_history(line)
        if readline.get_current_history_length() > HISTORY_LIMIT:
            readline.remove_history_item(0)

    def save_history(self) -> None:
        """Write the session history to ``history_file`` if one was given."""
        if self._history_file is not None:
            readline.write_history_file(str(self._history_file))


class StdinLineReader(LineReader):
    """
    Plain fallback: print the prompt, flush, read one raw line, trim it.

    No history and no interrupt handling. End of input is reported as
    ``Fatal`` so retrying callers cannot spin on an exhausted stream.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    def read_line(self, prompt: str) -> LineResult:
        stdin = self._stdin if self._stdin is not None else sys.stdin
        stdout = self._stdout if self._stdout is not None else sys.stdout
        stdout.write(prompt)
        stdout.flush()
        raw = stdin.readline()
        if not raw:
            return Fatal(EOFError("end of input"))
        return Line(raw.strip())


class ScriptedLineReader(LineReader):
    """
    Replays a fixed sequence of lines, recording every prompt shown.

    Useful for embedding and tests. Lines are trimmed like real input; once
    the script is exhausted every read is ``Fatal(EOFError)``.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self._position = 0
        self.prompts: list[str] = []

    @property
    def remaining(self) -> int:
        return len(self._lines) - self._position

    def read_line(self, prompt: str) -> LineResult:
        self.prompts.append(prompt)
        if self._position >= len(self._lines):
            return Fatal(EOFError("script exhausted"))
        raw = self._lines[self._position]
        self._position += 1
        return Line(raw.strip())


_READER_LOCK = threading.Lock()
_shared_reader: LineReader | None = None


def _create_default_reader() -> LineReader:
    try:
        return PromptToolkitLineReader()
    except Exception as exc:  # noqa: BLE001
        # prompt_toolkit raises platform-specific errors without a terminal
        logger.warning("Could not create prompt_toolkit session, trying readline. Error: %s", exc)
    try:
        return ReadlineLineReader()
    except (EditorUnavailableError, OSError) as exc:
        logger.warning("Could not create line editor. Reverting to legacy mode. Error: %s", exc)
        return StdinLineReader()


def shared_reader() -> LineReader:
    """Process-wide reader, created on first use."""
    global _shared_reader
    with _READER_LOCK:
        if _shared_reader is None:
            _shared_reader = _create_default_reader()
        return _shared_reader


def set_shared_reader(reader: LineReader | None) -> None:
    """Replace the process-wide reader; ``None`` recreates the default lazily."""
    global _shared_reader
    with _READER_LOCK:
        _shared_reader = reader


def read_line(prompt: str) -> LineResult:
    """Read one line through the shared reader, holding the process-wide lock."""
    reader = shared_reader()
    with _READER_LOCK:
        return reader.read_line(prompt)


class SharedLineReader(LineReader):
    """``LineReader`` view of the process-wide reader and its lock."""

    def read_line(self, prompt: str) -> LineResult:
        return read_line(prompt)
