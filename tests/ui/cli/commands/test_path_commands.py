"""Tests for the render, inspect, ls and where command executors."""

from __future__ import annotations

from io import StringIO
from typing import Any

import pytest
from pytest_mock import MockerFixture
from rich.console import Console

from segpath.features.path import Dialect, FilesystemError, PathQueries
from segpath.ui.cli.args.options import InspectArgs, ListArgs, RenderArgs, WhereArgs
from segpath.ui.cli.commands import InspectCommand, ListCommand, RenderCommand, WhereCommand
from segpath.ui.cli.display import PathDisplay


@pytest.fixture
def output() -> StringIO:
    return StringIO()


@pytest.fixture
def display(output: StringIO) -> PathDisplay:
    return PathDisplay(Console(file=output, force_terminal=False, width=120))


def test_render_converts_dialect(fake_queries: PathQueries, display: PathDisplay, output: StringIO) -> None:
    args = RenderArgs(
        command="render",
        path="C:\\Users\\x",
        dialect=Dialect.WINDOWS,
        target_dialect=Dialect.POSIX,
        verbose=False,
        quiet=False,
    )

    assert RenderCommand(args, fake_queries, display).execute() == 0
    assert output.getvalue().strip() == "C:/Users/x"


def test_inspect_builds_report(
    fake_filesystem: Any, fake_queries: PathQueries, display: PathDisplay, output: StringIO
) -> None:
    fake_filesystem.add_file("/srv/notes.txt", size=12)
    args = InspectArgs(
        command="inspect",
        path="/srv//notes.txt",
        dialect=Dialect.POSIX,
        verbose=False,
        quiet=False,
    )
    command = InspectCommand(args, fake_queries, display)

    report = command.build_report()

    assert report.rendered == "/srv/notes.txt"
    assert report.segments == ("srv", "notes.txt")
    assert report.is_absolute
    assert report.filename == "notes.txt"
    assert report.extension == ""
    assert report.exists and report.is_file and not report.is_directory
    assert report.size == 12

    assert command.execute() == 0
    rendered = output.getvalue()
    assert "notes.txt" in rendered
    assert "12" in rendered


def test_list_prints_children(
    fake_filesystem: Any, fake_queries: PathQueries, display: PathDisplay, output: StringIO
) -> None:
    fake_filesystem.add_directory("/data", ["a.txt", "b.txt"])
    args = ListArgs(command="ls", path="/data", dialect=Dialect.POSIX, verbose=False, quiet=False)

    assert ListCommand(args, fake_queries, display).execute() == 0
    assert output.getvalue().splitlines() == ["/data/a.txt", "/data/b.txt"]


def test_list_of_non_directory_fails(
    fake_queries: PathQueries, display: PathDisplay, output: StringIO
) -> None:
    args = ListArgs(command="ls", path="/missing", dialect=Dialect.POSIX, verbose=False, quiet=False)

    assert ListCommand(args, fake_queries, display).execute() == 1
    assert output.getvalue() == ""


def test_where_prints_locations(
    fake_queries: PathQueries, display: PathDisplay, output: StringIO
) -> None:
    args = WhereArgs(command="where", verbose=False, quiet=False)

    assert WhereCommand(args, fake_queries, display).execute() == 0
    rendered = output.getvalue()
    assert "Current directory: /work" in rendered
    assert "Executable: /usr/bin/python3" in rendered


def test_where_propagates_filesystem_error(
    fake_filesystem: Any, fake_queries: PathQueries, display: PathDisplay
) -> None:
    fake_filesystem.cwd = None
    args = WhereArgs(command="where", verbose=False, quiet=False)

    with pytest.raises(FilesystemError):
        _ = WhereCommand(args, fake_queries, display).execute()


def test_commands_default_to_local_queries(mocker: MockerFixture) -> None:
    default_queries = mocker.patch("segpath.ui.cli.commands.executor.default_queries")
    args = WhereArgs(command="where", verbose=False, quiet=False)

    command = WhereCommand(args)

    assert command.queries is default_queries.return_value
