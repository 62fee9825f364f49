import logging
from collections.abc import Callable, Iterable

from github_diff_parser.parsing.classifier import (
    ClassifiedLine,
    classify_line,
    split_lines,
)
from github_diff_parser.parsing.errors import (
    MissingContext,
    MultiplePatchesError,
    NotAPatchSeriesError,
    OutOfContextError,
)
from github_diff_parser.parsing.grammar import LineKind
from github_diff_parser.parsing.models import (
    Diff,
    FileMode,
    Hunk,
    Line,
    LineType,
    Patch,
)
from github_diff_parser.settings import trace_enabled

logger = logging.getLogger(__name__)

# git format-patch closes each commit with "-- " followed by the git version.
SIGNATURE_SEPARATOR = "-- "

_CONTENT_TYPES = {
    "+": LineType.ADDITION,
    "-": LineType.DELETION,
    " ": LineType.CONTEXT,
}


class DiffParser:
    """
    Single-pass state machine turning classified diff lines into Diff objects.

    Feed lines one at a time with feed() (or all at once with feed_lines())
    and collect the result with finish(). A parser instance holds the state
    of one parse and is not reused.

    In patch mode (after a 'From <sha>' line) the free text between a commit
    header and its first 'diff --git' line is the commit message and is
    skipped, as is the trailer after the '-- ' signature separator.
    """

    def __init__(self, allow_series: bool = False, trace: bool | None = None):
        self.diffs: list[Diff] = []
        self.patches: list[Patch] = []
        self.current_diff: Diff | None = None
        self.current_hunk: Hunk | None = None
        self.current_patch: Patch | None = None

        self._allow_series = allow_series
        self._trace = trace if trace is not None else trace_enabled()
        self._line_number = 0
        self._in_commit_text = False
        self._first_diff_header: ClassifiedLine | None = None

        self._previous_lino = 0
        self._new_lino = 0
        self._previous_remaining = 0
        self._new_remaining = 0

        self._handlers: dict[LineKind, Callable[[ClassifiedLine], None]] = {
            LineKind.DIFF_HEADER: self._process_diff_header,
            LineKind.INDEX_HEADER: self._process_index,
            LineKind.MODE_HEADER: self._process_mode,
            LineKind.ORIGINAL_FILE_HEADER: self._process_file_header,
            LineKind.NEW_FILE_HEADER: self._process_file_header,
            LineKind.RANGE_HEADER: self._process_range,
            LineKind.CONTENT: self._process_content,
            LineKind.PATCH_COMMIT: self._process_commit,
            LineKind.PATCH_TIMESTAMP: self._process_timestamp,
        }

    @property
    def commit(self) -> str | None:
        return self.current_patch.commit_sha if self.current_patch else None

    @property
    def timestamp(self) -> str | None:
        return self.current_patch.timestamp if self.current_patch else None

    def feed(self, line: str) -> None:
        self._line_number += 1
        classified = classify_line(line, self._line_number)
        if self._trace:
            logger.debug(
                "Line %d classified as %s: %r",
                classified.line_number,
                classified.kind,
                classified.text,
            )

        if self._in_commit_text and classified.kind not in (
            LineKind.DIFF_HEADER,
            LineKind.PATCH_COMMIT,
            LineKind.PATCH_TIMESTAMP,
        ):
            return

        handler = self._handlers.get(classified.kind)
        if handler is None:
            return
        handler(classified)

    def feed_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.feed(line)

    def finish(self) -> list[Diff] | Patch:
        logger.debug(
            "Parsed %d diffs from %d lines (%d commits)",
            len(self.diffs),
            self._line_number,
            len(self.patches),
        )
        if not self.patches:
            return self.diffs
        return self.patches[0]

    def finish_series(self) -> list[Patch]:
        logger.debug(
            "Parsed %d commits from %d lines", len(self.patches), self._line_number
        )
        if not self.patches and self._first_diff_header is not None:
            raise NotAPatchSeriesError(
                self._first_diff_header.line_number, self._first_diff_header.text
            )
        return self.patches

    def _require_diff(self, classified: ClassifiedLine) -> Diff:
        if self.current_diff is None:
            raise OutOfContextError(
                classified.line_number, classified.text, MissingContext.DIFF
            )
        return self.current_diff

    def _require_hunk(self, classified: ClassifiedLine) -> Hunk:
        if self.current_hunk is None:
            raise OutOfContextError(
                classified.line_number, classified.text, MissingContext.HUNK
            )
        return self.current_hunk

    def _process_diff_header(self, classified: ClassifiedLine) -> None:
        diff = Diff(
            previous_filename=classified.captures["previous_filename"],
            new_filename=classified.captures["new_filename"],
        )
        if self._first_diff_header is None:
            self._first_diff_header = classified
        self.diffs.append(diff)
        if self.current_patch is not None:
            self.current_patch.diffs.append(diff)
        self.current_diff = diff
        self.current_hunk = None
        self._in_commit_text = False

    def _process_index(self, classified: ClassifiedLine) -> None:
        diff = self._require_diff(classified)
        diff.previous_index = classified.captures["previous_index"]
        diff.new_index = classified.captures["new_index"]

    def _process_mode(self, classified: ClassifiedLine) -> None:
        diff = self._require_diff(classified)
        diff.file_mode = FileMode(classified.captures["file_mode"])

    def _process_file_header(self, classified: ClassifiedLine) -> None:
        self._require_diff(classified)

    def _process_range(self, classified: ClassifiedLine) -> None:
        diff = self._require_diff(classified)
        captures = classified.captures
        hunk = Hunk(
            previous_line_start=int(captures["previous_line_start"]),
            new_line_start=int(captures["new_line_start"]),
        )
        diff.hunks.append(hunk)
        self.current_hunk = hunk

        self._previous_lino = hunk.previous_line_start
        self._new_lino = hunk.new_line_start
        self._previous_remaining = int(captures["previous_line_count"] or 1)
        self._new_remaining = int(captures["new_line_count"] or 1)

    def _process_content(self, classified: ClassifiedLine) -> None:
        if (
            self.current_patch is not None
            and classified.text == SIGNATURE_SEPARATOR
            and self._hunk_exhausted()
        ):
            self._close_commit_body()
            return

        hunk = self._require_hunk(classified)
        line_type = _CONTENT_TYPES[classified.captures["type"]]
        line = Line(type=line_type, content=classified.captures["line"])

        if line_type != LineType.ADDITION:
            line.previous_lino = self._previous_lino
            self._previous_lino += 1
            self._previous_remaining = max(self._previous_remaining - 1, 0)
        if line_type != LineType.DELETION:
            line.new_lino = self._new_lino
            self._new_lino += 1
            self._new_remaining = max(self._new_remaining - 1, 0)

        hunk.lines.append(line)

    def _process_commit(self, classified: ClassifiedLine) -> None:
        if self.patches and not self._allow_series:
            raise MultiplePatchesError(classified.line_number, classified.text)

        # Diffs seen before the first commit header belong to that commit.
        preceding = self.diffs if not self.patches else []
        patch = Patch(commit_sha=classified.captures["commit"], diffs=list(preceding))
        self.patches.append(patch)
        self.current_patch = patch
        self.current_diff = None
        self.current_hunk = None
        self._in_commit_text = True
        logger.debug("Started commit %s at line %d", patch.commit_sha, classified.line_number)

    def _process_timestamp(self, classified: ClassifiedLine) -> None:
        if self.current_patch is None:
            raise OutOfContextError(
                classified.line_number, classified.text, MissingContext.COMMIT
            )
        if self.current_patch.timestamp is not None:
            logger.debug(
                "Ignoring Date line %d: commit %s already has a timestamp",
                classified.line_number,
                self.current_patch.commit_sha,
            )
            return
        self.current_patch.timestamp = classified.captures["timestamp"]

    def _hunk_exhausted(self) -> bool:
        return (
            self.current_hunk is None
            or (self._previous_remaining == 0 and self._new_remaining == 0)
        )

    def _close_commit_body(self) -> None:
        self.current_diff = None
        self.current_hunk = None
        self._in_commit_text = True


def parse(text: str, trace: bool | None = None) -> list[Diff] | Patch:
    """
    Parse git diff text.

    Returns the list of Diff objects, or a Patch when the text is a single
    commit exported by git format-patch.

    Raises:
        OutOfContextError: a header or content line appeared without the
            diff, hunk or commit it belongs to.
        MultiplePatchesError: the text holds more than one commit.

    `trace` logs every classified line at debug level; None defers to
    the GITHUB_DIFF_PARSER_TRACE environment variable.
    """
    parser = DiffParser(trace=trace)
    parser.feed_lines(split_lines(text))
    return parser.finish()


def parse_series(text: str, trace: bool | None = None) -> list[Patch]:
    """
    Parse git format-patch output holding any number of commits.

    Raises:
        NotAPatchSeriesError: the text holds diffs but no commit header.
    """
    parser = DiffParser(allow_series=True, trace=trace)
    parser.feed_lines(split_lines(text))
    return parser.finish_series()
