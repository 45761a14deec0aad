"""Exception hierarchy for input conversion and converter lookup."""


class InterviewError(Exception):
    """Base exception for interviewer errors."""


class ConversionError(InterviewError, ValueError):
    """Raised when a token cannot be parsed as the requested type.

    Never carries a partial value: only the offending text and the target
    type name.
    """

    def __init__(self, *, origin: str, target: str) -> None:
        super().__init__(f'Could not parse "{origin}" as {target}')
        self.origin = origin
        self.target = target


class UnknownTargetError(InterviewError, KeyError):
    """Raised when a conversion target is not registered."""

    def __init__(self, target: object) -> None:
        super().__init__(target)
        self.target = target

    def __str__(self) -> str:
        return f"No converter registered for {self.target!r}"
