from pydantic import BaseModel, Field

from github_diff_parser.parsing.models import Diff, FileMode


class FileStat(BaseModel):
    path: str
    file_mode: FileMode
    hunks: int
    additions: int
    deletions: int


class DiffSummary(BaseModel):
    files_changed: int
    additions: int
    deletions: int
    files: list[FileStat] = Field(default_factory=list)


def summarize(diffs: list[Diff]) -> DiffSummary:
    files = [compute_file_stat(diff) for diff in diffs]
    return DiffSummary(
        files_changed=len(files),
        additions=sum(f.additions for f in files),
        deletions=sum(f.deletions for f in files),
        files=files,
    )


def compute_file_stat(diff: Diff) -> FileStat:
    return FileStat(
        path=diff.path,
        file_mode=diff.file_mode,
        hunks=len(diff.hunks),
        additions=diff.additions,
        deletions=diff.deletions,
    )


def render_stat(summary: DiffSummary) -> str:
    """Render a `git diff --stat` style listing."""
    lines: list[str] = []
    width = max((len(f.path) for f in summary.files), default=0)
    for f in summary.files:
        changes = f.additions + f.deletions
        marker = ""
        if f.file_mode != FileMode.UNCHANGED:
            marker = f" ({f.file_mode})"
        lines.append(
            f" {f.path.ljust(width)} | {changes} "
            f"{'+' * f.additions}{'-' * f.deletions}{marker}"
        )
    lines.append(
        f" {summary.files_changed} file{'s' if summary.files_changed != 1 else ''} changed, "
        f"{summary.additions} insertions(+), {summary.deletions} deletions(-)"
    )
    return "\n".join(lines)
