from enum import StrEnum

from pydantic import BaseModel, Field


class LineType(StrEnum):
    ADDITION = "addition"
    DELETION = "deletion"
    CONTEXT = "context"


class FileMode(StrEnum):
    UNCHANGED = "unchanged"
    NEW = "new"
    DELETED = "deleted"


class Line(BaseModel):
    type: LineType
    content: str
    previous_lino: int | None = None
    new_lino: int | None = None

    @property
    def is_addition(self) -> bool:
        return self.type == LineType.ADDITION

    @property
    def is_deletion(self) -> bool:
        return self.type == LineType.DELETION

    @property
    def is_context(self) -> bool:
        return self.type == LineType.CONTEXT


class Hunk(BaseModel):
    previous_line_start: int = Field(ge=0)
    new_line_start: int = Field(ge=0)
    lines: list[Line] = Field(default_factory=list)

    def addition_lines(self) -> list[Line]:
        return [line for line in self.lines if line.is_addition]

    def deletion_lines(self) -> list[Line]:
        return [line for line in self.lines if line.is_deletion]

    def context_lines(self) -> list[Line]:
        return [line for line in self.lines if line.is_context]

    @property
    def previous_line_count(self) -> int:
        """Lines this hunk spans in the previous file (context + deletions)."""
        return sum(1 for line in self.lines if not line.is_addition)

    @property
    def new_line_count(self) -> int:
        """Lines this hunk spans in the new file (context + additions)."""
        return sum(1 for line in self.lines if not line.is_deletion)

    def previous_range(self) -> range:
        return range(
            self.previous_line_start,
            self.previous_line_start + self.previous_line_count,
        )

    def new_range(self) -> range:
        return range(self.new_line_start, self.new_line_start + self.new_line_count)

    def find_previous_line(self, lino: int) -> Line | None:
        for line in self.lines:
            if line.previous_lino == lino:
                return line
        return None

    def find_new_line(self, lino: int) -> Line | None:
        for line in self.lines:
            if line.new_lino == lino:
                return line
        return None


class Diff(BaseModel):
    previous_filename: str
    new_filename: str
    previous_index: str | None = None
    new_index: str | None = None
    file_mode: FileMode = FileMode.UNCHANGED
    hunks: list[Hunk] = Field(default_factory=list)

    @property
    def is_new_file(self) -> bool:
        return self.file_mode == FileMode.NEW

    @property
    def is_deleted_file(self) -> bool:
        return self.file_mode == FileMode.DELETED

    @property
    def is_unchanged_mode(self) -> bool:
        return self.file_mode == FileMode.UNCHANGED

    @property
    def is_renamed(self) -> bool:
        return self.previous_filename != self.new_filename

    @property
    def path(self) -> str:
        if self.is_deleted_file:
            return self.previous_filename
        return self.new_filename

    @property
    def additions(self) -> int:
        return sum(len(hunk.addition_lines()) for hunk in self.hunks)

    @property
    def deletions(self) -> int:
        return sum(len(hunk.deletion_lines()) for hunk in self.hunks)

    def previous_line_number_is_now(self, previous_lino: int) -> int | None:
        """
        Map a line number of the previous file to its number in the new file.

        Lines inside a hunk are looked up directly; a deleted line has no new
        number and yields None. Lines outside every hunk move by the net
        number of lines added before them.
        """
        offset = 0
        for hunk in self.hunks:
            if previous_lino in hunk.previous_range():
                line = hunk.find_previous_line(previous_lino)
                if line is None:
                    return None
                return line.new_lino
            # A hunk with no previous lines sits after its start line.
            hunk_end = hunk.previous_line_start + max(hunk.previous_line_count, 1)
            if previous_lino < hunk_end:
                break
            offset += hunk.new_line_count - hunk.previous_line_count
        return previous_lino + offset


class Patch(BaseModel):
    commit_sha: str
    timestamp: str | None = None
    diffs: list[Diff] = Field(default_factory=list)
