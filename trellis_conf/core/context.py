"""Parse context and result - the state shared by one parse of a config stream."""

from dataclasses import dataclass
from typing import Any

from loguru import logger

from trellis_conf.core.action import ConfigAction

DEFAULT_MAX_ERROR_LENGTH = 256


@dataclass(frozen=True)
class ParseResult:
    """Outcome of a parse.

    Truthy when the whole stream was consumed and every record accepted.

    Attributes
    ----------
    ok : bool
        Whether the parse succeeded.
    error : str | None
        Diagnostic of the failure, None on success.
    line : int | None
        Input line the failure was detected on, when known.
    """

    ok: bool
    error: str | None = None
    line: int | None = None

    def __bool__(self) -> bool:
        return self.ok

    def describe(self) -> str:
        """Return the diagnostic prefixed with its line, or ``"ok"``."""
        if self.ok:
            return "ok"
        if self.line is None:
            return f"{self.error}"
        return f"line {self.line}: {self.error}"


class ParseContext:
    """Holds the action, its cookie and the last diagnostic of a parse.

    A context may be reused for several parses one after another, but not by two
    parses at the same time. The error is cleared when a parse starts.

    Parameters
    ----------
    action : ConfigAction
        Sink receiving the records.
    cookie : Any, optional
        Opaque value passed unchanged to every callback.
    max_error_length : int, optional
        Longer diagnostics are truncated to this many characters.

    Attributes
    ----------
    error : str | None
        The most recent diagnostic, None if there was none.
    error_line : int | None
        Input line of the most recent diagnostic.
    """

    def __init__(
        self,
        action: ConfigAction,
        cookie: Any = None,
        max_error_length: int = DEFAULT_MAX_ERROR_LENGTH,
    ) -> None:
        if max_error_length < 1:
            raise ValueError("max_error_length must be positive")
        self.action = action
        self.cookie = cookie
        self.max_error_length = max_error_length
        self.error: str | None = None
        self.error_line: int | None = None

    def report(self, message: str, line: int | None = None) -> None:
        """Record a diagnostic, replacing the previous one."""
        self.error = message[: self.max_error_length]
        self.error_line = line
        logger.debug(f"trellis config error at line {line}: {self.error}")

    def clear(self) -> None:
        """Forget the last diagnostic."""
        self.error = None
        self.error_line = None

    def result(self, ok: bool) -> ParseResult:
        """Build the result of a parse from the current diagnostic."""
        if ok:
            return ParseResult(True)
        return ParseResult(False, self.error, self.error_line)
