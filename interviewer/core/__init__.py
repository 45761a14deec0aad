"""Core of interviewer: tokenization, typed conversion and acquisition policies.

- Quote preprocessing and the process-wide quote mode
- Separator strategies and line tokenization
- Converter registry for primitive target types
- Line readers and the shared, lock-guarded prompt
- Acquisition policies (strict, retry, optional, lazy)
"""

from interviewer.core.ask import (
    Interviewer,
    ask,
    ask_many,
    ask_many_opt,
    ask_many_opt_lazy,
    ask_many_until,
    ask_opt,
    ask_until,
)
from interviewer.core.askable import Askable, ConverterRegistry, FunctionConverter, default_registry
from interviewer.core.errors import ConversionError, InterviewError, UnknownTargetError
from interviewer.core.line_reader import (
    Fatal,
    Interrupted,
    Line,
    LineReader,
    LineResult,
    PromptToolkitLineReader,
    ReadlineLineReader,
    ScriptedLineReader,
    StdinLineReader,
    set_shared_reader,
)
from interviewer.core.logging_config import get_logger, setup_logging
from interviewer.core.quoting import consumable_quotes, set_consumable_quotes
from interviewer.core.separator import Separator, SeparatorKind, split_line, tokenize

__all__ = [
    "Interviewer",
    "ask",
    "ask_until",
    "ask_opt",
    "ask_many",
    "ask_many_until",
    "ask_many_opt",
    "ask_many_opt_lazy",
    "Askable",
    "ConverterRegistry",
    "FunctionConverter",
    "default_registry",
    "InterviewError",
    "ConversionError",
    "UnknownTargetError",
    "LineReader",
    "LineResult",
    "Line",
    "Interrupted",
    "Fatal",
    "PromptToolkitLineReader",
    "ReadlineLineReader",
    "StdinLineReader",
    "ScriptedLineReader",
    "set_shared_reader",
    "Separator",
    "SeparatorKind",
    "tokenize",
    "split_line",
    "set_consumable_quotes",
    "consumable_quotes",
    "setup_logging",
    "get_logger",
]
