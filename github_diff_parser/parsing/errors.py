from enum import StrEnum


class MissingContext(StrEnum):
    DIFF = "diff"
    HUNK = "hunk"
    COMMIT = "commit"


_EXPECTED_HEADER = {
    MissingContext.DIFF: "a 'diff --git' header",
    MissingContext.HUNK: "a '@@ ... @@' range header",
    MissingContext.COMMIT: "a 'From <sha>' commit header",
}


class DiffParseError(Exception):
    def __init__(
        self,
        message: str,
        line_number: int,
        line: str,
    ):
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class OutOfContextError(DiffParseError):
    """A line needs an open diff, hunk or commit and none is open."""

    def __init__(
        self,
        line_number: int,
        line: str,
        missing: MissingContext,
    ):
        super().__init__(
            f"Line {line_number} ({line!r}) appeared before "
            f"{_EXPECTED_HEADER[missing]}: no {missing} is open",
            line_number,
            line,
        )
        self.missing = missing


class MultiplePatchesError(DiffParseError):
    """Raised by parse() when the input holds more than one commit."""

    def __init__(
        self,
        line_number: int,
        line: str,
    ):
        super().__init__(
            f"Line {line_number} ({line!r}) starts a second commit; "
            "use parse_series() for multi-commit patches",
            line_number,
            line,
        )


class NotAPatchSeriesError(DiffParseError):
    """Raised by parse_series() when diffs appear but no commit header does."""

    def __init__(
        self,
        line_number: int,
        line: str,
    ):
        super().__init__(
            f"Line {line_number} ({line!r}) starts a diff but the text has no "
            "'From <sha>' commit header; use parse() for plain diffs",
            line_number,
            line,
        )
