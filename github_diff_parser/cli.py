import sys
from pathlib import Path
from typing import NoReturn

import typer
from dotenv import load_dotenv
from pydantic import TypeAdapter

from github_diff_parser.logging import setup_logging
from github_diff_parser.parsing import (
    Diff,
    DiffParseError,
    DiffParser,
    Patch,
    parse,
    parse_series,
    split_lines,
    summarize,
)
from github_diff_parser.parsing.summary import render_stat
from github_diff_parser.settings import load_settings

app = typer.Typer(no_args_is_help=True)

_DIFFS_ADAPTER = TypeAdapter(list[Diff])
_PATCHES_ADAPTER = TypeAdapter(list[Patch])


def _read_input(path: Path) -> str:
    if str(path) == "-":
        return sys.stdin.read()
    if not path.exists():
        raise typer.BadParameter(f"{path} does not exist")
    return path.read_text(encoding="utf-8")


def _fail(exc: DiffParseError) -> NoReturn:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


def _render_diffs(diffs: list[Diff]) -> list[str]:
    lines: list[str] = []
    for diff in diffs:
        header = diff.path
        if diff.is_renamed:
            header = f"{diff.previous_filename} -> {diff.new_filename}"
        if not diff.is_unchanged_mode:
            header += f" ({diff.file_mode})"
        lines.append(header)
        for hunk in diff.hunks:
            lines.append(
                f"  @@ -{hunk.previous_line_start} +{hunk.new_line_start} @@ "
                f"{len(hunk.lines)} lines "
                f"(+{len(hunk.addition_lines())} -{len(hunk.deletion_lines())})"
            )
    return lines


def _render_patch(patch: Patch) -> list[str]:
    lines = [f"commit {patch.commit_sha}"]
    if patch.timestamp:
        lines.append(f"Date: {patch.timestamp}")
    lines.extend(_render_diffs(patch.diffs))
    return lines


@app.command("parse")
def parse_cmd(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Diff or patch file, '-' for stdin"),
    format: str = typer.Option("text", "--format", help="Output format: text or json"),
    series: bool = typer.Option(
        False, "--series", help="Input is git format-patch output with several commits"
    ),
):
    """
    Parse a git diff and print its files and hunks.
    """
    if format not in ("text", "json"):
        raise typer.BadParameter(f"Unknown format: {format}", param_hint="--format")

    text = _read_input(path)
    trace = ctx.obj.trace
    try:
        result = (
            parse_series(text, trace=trace) if series else parse(text, trace=trace)
        )
    except DiffParseError as exc:
        _fail(exc)

    if format == "json":
        if isinstance(result, Patch):
            typer.echo(result.model_dump_json(indent=2))
        elif series:
            typer.echo(_PATCHES_ADAPTER.dump_json(result, indent=2).decode("utf-8"))
        else:
            typer.echo(_DIFFS_ADAPTER.dump_json(result, indent=2).decode("utf-8"))
        return

    if isinstance(result, Patch):
        output = _render_patch(result)
    elif series:
        output = [line for patch in result for line in _render_patch(patch)]
    else:
        output = _render_diffs(result)
    for line in output:
        typer.echo(line)


@app.command("stat")
def stat_cmd(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Diff or patch file, '-' for stdin"),
):
    """
    Print a diffstat summary of a git diff.
    """
    parser = DiffParser(allow_series=True, trace=ctx.obj.trace)
    try:
        parser.feed_lines(split_lines(_read_input(path)))
    except DiffParseError as exc:
        _fail(exc)

    typer.echo(render_stat(summarize(parser.diffs)))


@app.callback()
def main(ctx: typer.Context):
    """
    GitHub Diff Parser CLI
    """
    load_dotenv()
    settings = load_settings()
    setup_logging(level=settings.log_level)
    ctx.obj = settings


if __name__ == "__main__":
    app()
