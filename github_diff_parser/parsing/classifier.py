from collections.abc import Iterator
from dataclasses import dataclass, field

from github_diff_parser.parsing.grammar import GRAMMAR, LineKind


@dataclass(frozen=True)
class ClassifiedLine:
    kind: LineKind
    text: str
    line_number: int
    captures: dict[str, str | None] = field(default_factory=dict)


def split_lines(text: str) -> Iterator[str]:
    """
    Yield the lines of `text` without their line terminators.

    Only '\\n' ends a line; other characters that str.splitlines() treats
    as breaks, such as form feeds, are line content in a diff. A '\\r' before
    the newline is dropped only when every line of the text is CRLF
    terminated; in an LF diff of a CRLF file it belongs to the content.
    """
    if not text:
        return
    crlf = "\n" in text and text.count("\r\n") == text.count("\n")
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    for line in lines:
        yield line.removesuffix("\r") if crlf else line


def classify_line(text: str, line_number: int = 0) -> ClassifiedLine:
    for kind, pattern in GRAMMAR:
        match = pattern.fullmatch(text)
        if match is not None:
            return ClassifiedLine(
                kind=kind,
                text=text,
                line_number=line_number,
                captures=match.groupdict(),
            )
    return ClassifiedLine(kind=LineKind.UNMATCHED, text=text, line_number=line_number)


def classify_lines(text: str) -> Iterator[ClassifiedLine]:
    for line_number, line in enumerate(split_lines(text), start=1):
        yield classify_line(line, line_number)
