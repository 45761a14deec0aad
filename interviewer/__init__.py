"""
interviewer - typed, line-based prompting for interactive programs.

Ask the user for a value (or several, split by a separator) and get them
back already converted to the requested type.
"""

from typing import Final

from interviewer.core import (
    ConversionError,
    Interviewer,
    Separator,
    ask,
    ask_many,
    ask_many_opt,
    ask_many_opt_lazy,
    ask_many_until,
    ask_opt,
    ask_until,
    set_consumable_quotes,
)

__version__: Final[str] = "0.1.0"
__all__: list[str] = [
    "__version__",
    "ConversionError",
    "Interviewer",
    "Separator",
    "ask",
    "ask_until",
    "ask_opt",
    "ask_many",
    "ask_many_until",
    "ask_many_opt",
    "ask_many_opt_lazy",
    "set_consumable_quotes",
]
