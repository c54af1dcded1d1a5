"""Per-file outcomes, error kinds, and the run result."""

from glyphscrub.outcomes.errors import ErrorKind, RootUnavailableError, classify_error
from glyphscrub.outcomes.models import FileOutcome, OutcomeKind, RunResult

__all__ = [
    "ErrorKind",
    "FileOutcome",
    "OutcomeKind",
    "RootUnavailableError",
    "RunResult",
    "classify_error",
]
