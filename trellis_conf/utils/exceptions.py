"""Exceptions raised while reading trellis configuration text."""


class TrellisConfError(Exception):
    """Base class for all parse failures.

    Parameters
    ----------
    message : str
        Human readable diagnostic.
    line : int | None
        Line of the input the failure was detected on, if known.
    """

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line


class ConfigSyntaxError(TrellisConfError):
    """Exception raised for malformed entries, records or missing tokens."""

    pass


class ActionRejectedError(TrellisConfError):
    """Exception raised when an action callback refuses a record."""

    pass


class InvalidFileType(Exception):
    """Exception raised when the input path is not a readable file."""

    pass
