import pytest

from github_diff_parser.parsing.classifier import (
    classify_line,
    classify_lines,
    split_lines,
)
from github_diff_parser.parsing.grammar import GRAMMAR, LineKind


def test_split_lines_drops_trailing_newline():
    assert list(split_lines("a\nb\n")) == ["a", "b"]


def test_split_lines_strips_carriage_returns_of_crlf_text():
    assert list(split_lines("a\r\nb\r\n")) == ["a", "b"]


def test_split_lines_keeps_carriage_returns_in_lf_text():
    assert list(split_lines("@@ -1 +1 @@\n-x\r\n+y\r\n")) == [
        "@@ -1 +1 @@",
        "-x\r",
        "+y\r",
    ]


def test_split_lines_keeps_form_feed_inside_line():
    assert list(split_lines("+x\x0cy\n")) == ["+x\x0cy"]


def test_split_lines_empty_text():
    assert list(split_lines("")) == []


def test_split_lines_keeps_blank_lines():
    assert list(split_lines("a\n\nb")) == ["a", "", "b"]


def test_diff_header_captures_filenames():
    classified = classify_line("diff --git a/app/my_file.rb b/app/my_file.rb")
    assert classified.kind == LineKind.DIFF_HEADER
    assert classified.captures == {
        "previous_filename": "app/my_file.rb",
        "new_filename": "app/my_file.rb",
    }


def test_diff_header_filenames_with_spaces():
    classified = classify_line("diff --git a/my dir/old name.txt b/my dir/new name.txt")
    assert classified.kind == LineKind.DIFF_HEADER
    assert classified.captures["previous_filename"] == "my dir/old name.txt"
    assert classified.captures["new_filename"] == "my dir/new name.txt"


def test_index_header_with_mode():
    classified = classify_line("index d3dfbe4..ac0e8b3 100644")
    assert classified.kind == LineKind.INDEX_HEADER
    assert classified.captures == {"previous_index": "d3dfbe4", "new_index": "ac0e8b3"}


def test_index_header_without_mode():
    classified = classify_line("index 0000000..d3dfbe4")
    assert classified.kind == LineKind.INDEX_HEADER
    assert classified.captures["new_index"] == "d3dfbe4"


@pytest.mark.parametrize(
    "text, mode",
    [
        ("new file mode 100644", "new"),
        ("deleted file mode 100755", "deleted"),
    ],
)
def test_mode_header(text, mode):
    classified = classify_line(text)
    assert classified.kind == LineKind.MODE_HEADER
    assert classified.captures["file_mode"] == mode


def test_file_headers_are_not_content():
    assert classify_line("--- a/app/my_file.rb").kind == LineKind.ORIGINAL_FILE_HEADER
    assert classify_line("--- /dev/null").kind == LineKind.ORIGINAL_FILE_HEADER
    assert classify_line("+++ b/app/my_file.rb").kind == LineKind.NEW_FILE_HEADER
    assert classify_line("+++ /dev/null").kind == LineKind.NEW_FILE_HEADER


def test_range_header_with_counts_and_trailing_text():
    classified = classify_line("@@ -5,6 +7,8 @@ def test1")
    assert classified.kind == LineKind.RANGE_HEADER
    assert classified.captures["previous_line_start"] == "5"
    assert classified.captures["new_line_start"] == "7"
    assert classified.captures["previous_line_count"] == "6"
    assert classified.captures["new_line_count"] == "8"


def test_range_header_without_counts():
    classified = classify_line("@@ -5 +5 @@")
    assert classified.kind == LineKind.RANGE_HEADER
    assert classified.captures["previous_line_start"] == "5"
    assert classified.captures["previous_line_count"] is None


def test_malformed_range_header_is_unmatched():
    assert classify_line("@@ -a,1 +b,2 @@").kind == LineKind.UNMATCHED


@pytest.mark.parametrize(
    "text, marker, content",
    [
        ("+added", "+", "added"),
        ("-removed", "-", "removed"),
        (" kept", " ", "kept"),
        (" ", " ", ""),
        ("+", "+", ""),
        ("-", "-", ""),
        ("--", "-", "-"),
        ("++x", "+", "+x"),
    ],
)
def test_content_lines(text, marker, content):
    classified = classify_line(text)
    assert classified.kind == LineKind.CONTENT
    assert classified.captures == {"type": marker, "line": content}


def test_patch_commit_header():
    classified = classify_line(
        "From 21e02a7fd129a0c17e3dfbf39c6e69240c3dc3d2 Mon Sep 17 00:00:00 2001"
    )
    assert classified.kind == LineKind.PATCH_COMMIT
    assert classified.captures["commit"] == "21e02a7fd129a0c17e3dfbf39c6e69240c3dc3d2"


def test_commit_message_line_starting_with_from_is_not_a_commit_header():
    assert classify_line("From now on the parser is strict.").kind == LineKind.UNMATCHED


def test_author_line_is_not_a_commit_header():
    assert classify_line("From: Jane Doe <jane@example.com>").kind == LineKind.UNMATCHED


def test_patch_timestamp_is_verbatim():
    classified = classify_line("Date: Fri, 15 Apr 2022 12:22:33 +0200")
    assert classified.kind == LineKind.PATCH_TIMESTAMP
    assert classified.captures["timestamp"] == "Fri, 15 Apr 2022 12:22:33 +0200"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "\\ No newline at end of file",
        "similarity index 90%",
        "rename from old.txt",
        "Binary files a/x.png and b/x.png differ",
        "old mode 100644",
    ],
)
def test_noise_lines_are_unmatched(text):
    assert classify_line(text).kind == LineKind.UNMATCHED


def test_grammar_tries_content_last():
    assert GRAMMAR[-1][0] == LineKind.CONTENT
    assert [kind for kind, _ in GRAMMAR][:3] == [
        LineKind.DIFF_HEADER,
        LineKind.INDEX_HEADER,
        LineKind.MODE_HEADER,
    ]


def test_classify_lines_numbers_from_one():
    classified = list(classify_lines("diff --git a/x b/x\n+y\n"))
    assert [c.line_number for c in classified] == [1, 2]
    assert [c.kind for c in classified] == [LineKind.DIFF_HEADER, LineKind.CONTENT]
