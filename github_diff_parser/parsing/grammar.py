"""
Line grammar for git diff and git format-patch output.

Each entry pairs a line kind with the regex that recognizes it. Order is
priority: the first pattern that matches a line wins. The content pattern
accepts almost anything starting with '+', '-' or ' ', so it sits last to
keep '--- a/x' and '+++ b/x' classified as file headers.

    From 21e02a7fd129a0c17e3dfbf39c6e69240c3dc3d2 Mon Sep 17 00:00:00 2001
    Date: Fri, 15 Apr 2022 12:22:33 +0200
    diff --git a/app/my_file.rb b/app/my_file.rb
    new file mode 100644
    index d3dfbe4..ac0e8b3 100644
    --- a/app/my_file.rb
    +++ b/app/my_file.rb
    @@ -5,6 +5,6 @@ def test1
     context
    -removed
    +added
"""

import re
from enum import StrEnum


class LineKind(StrEnum):
    DIFF_HEADER = "diff_header"
    INDEX_HEADER = "index_header"
    MODE_HEADER = "mode_header"
    ORIGINAL_FILE_HEADER = "original_file_header"
    NEW_FILE_HEADER = "new_file_header"
    RANGE_HEADER = "range_header"
    PATCH_COMMIT = "patch_commit"
    PATCH_TIMESTAMP = "patch_timestamp"
    CONTENT = "content"
    UNMATCHED = "unmatched"


# Filenames may contain spaces; the lazy group splits at the first " b/".
DIFF_HEADER_RE = re.compile(
    r"diff --git a/(?P<previous_filename>.*?) b/(?P<new_filename>.*)"
)
INDEX_HEADER_RE = re.compile(
    r"index (?P<previous_index>\w+)\.\.(?P<new_index>\w+)(?: \d+)?"
)
MODE_HEADER_RE = re.compile(r"(?P<file_mode>new|deleted) file mode \d+")
ORIGINAL_FILE_HEADER_RE = re.compile(r"--- .*")
NEW_FILE_HEADER_RE = re.compile(r"\+\+\+ .*")
# Counts are optional in the header; git omits them when they are 1.
RANGE_HEADER_RE = re.compile(
    r"@@ -(?P<previous_line_start>\d+)(?:,(?P<previous_line_count>\d+))? "
    r"\+(?P<new_line_start>\d+)(?:,(?P<new_line_count>\d+))? @@.*"
)
# Hex sha only; a message line such as "From now on ..." is not a commit.
PATCH_COMMIT_RE = re.compile(r"From (?P<commit>[0-9a-f]{7,40}) .*")
PATCH_TIMESTAMP_RE = re.compile(r"Date: (?P<timestamp>.*)")
CONTENT_RE = re.compile(r"(?P<type>[+\- ])(?P<line>.*)")

GRAMMAR: tuple[tuple[LineKind, re.Pattern[str]], ...] = (
    (LineKind.DIFF_HEADER, DIFF_HEADER_RE),
    (LineKind.INDEX_HEADER, INDEX_HEADER_RE),
    (LineKind.MODE_HEADER, MODE_HEADER_RE),
    (LineKind.ORIGINAL_FILE_HEADER, ORIGINAL_FILE_HEADER_RE),
    (LineKind.NEW_FILE_HEADER, NEW_FILE_HEADER_RE),
    (LineKind.RANGE_HEADER, RANGE_HEADER_RE),
    (LineKind.PATCH_COMMIT, PATCH_COMMIT_RE),
    (LineKind.PATCH_TIMESTAMP, PATCH_TIMESTAMP_RE),
    (LineKind.CONTENT, CONTENT_RE),
)
