from github_diff_parser.parsing import (
    Diff,
    DiffParseError,
    DiffParser,
    FileMode,
    Hunk,
    Line,
    LineType,
    MissingContext,
    MultiplePatchesError,
    NotAPatchSeriesError,
    OutOfContextError,
    Patch,
    parse,
    parse_series,
)

__all__ = [
    "Diff",
    "DiffParseError",
    "DiffParser",
    "FileMode",
    "Hunk",
    "Line",
    "LineType",
    "MissingContext",
    "MultiplePatchesError",
    "NotAPatchSeriesError",
    "OutOfContextError",
    "Patch",
    "parse",
    "parse_series",
]
