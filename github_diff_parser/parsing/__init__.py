from github_diff_parser.parsing.classifier import (
    ClassifiedLine,
    classify_line,
    classify_lines,
    split_lines,
)
from github_diff_parser.parsing.errors import (
    DiffParseError,
    MissingContext,
    MultiplePatchesError,
    NotAPatchSeriesError,
    OutOfContextError,
)
from github_diff_parser.parsing.grammar import GRAMMAR, LineKind
from github_diff_parser.parsing.models import (
    Diff,
    FileMode,
    Hunk,
    Line,
    LineType,
    Patch,
)
from github_diff_parser.parsing.parser import DiffParser, parse, parse_series
from github_diff_parser.parsing.summary import DiffSummary, FileStat, summarize

__all__ = [
    "ClassifiedLine",
    "classify_line",
    "classify_lines",
    "split_lines",
    "DiffParseError",
    "MissingContext",
    "MultiplePatchesError",
    "NotAPatchSeriesError",
    "OutOfContextError",
    "GRAMMAR",
    "LineKind",
    "Diff",
    "FileMode",
    "Hunk",
    "Line",
    "LineType",
    "Patch",
    "DiffParser",
    "parse",
    "parse_series",
    "DiffSummary",
    "FileStat",
    "summarize",
]
