"""Terminal rendering of an analysis :class:`~mea.report.Result`."""

from __future__ import annotations

from typing import Optional, TextIO

from rich import box
from rich.cells import cell_len
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from mea.report import Result

_PURPLE = "color(99)"
_GRAY = "color(245)"
_SUBTLE = "#383838"
_TABLE_WIDTH = 180
_CELL_WIDTH = 14

_TABLE_HEADERS = (
    "Table",
    "Access type",
    "Possible indexes",
    "Index",
    "Index key length",
    "Ref",
    "Rows examined per scan",
    "Filtered",
    "Scalability",
)

_BOLD = Style(bold=True)
_PLAIN = Style()


def _console(stream: TextIO) -> Console:
    return Console(
        file=stream,
        width=_TABLE_WIDTH,
        highlight=False,
        markup=False,
        emoji=False,
        soft_wrap=True,
    )


def print_title(stream: TextIO, title: str) -> None:
    """Print a highlighted section title preceded by a blank line."""
    console = _console(stream)
    style = Style(bold=True, color="#FAFAFA", bgcolor="#7D56F4")
    console.print()
    console.print(Text(" " * 4 + title + " " * 4, style=style))


def print_info(stream: TextIO, text: str) -> None:
    """Print a bold short answer underlined by a rule of the same width."""
    console = _console(stream)
    console.print(Text(text, style=_BOLD))
    console.print(Text("─" * cell_len(text), style=Style(color=_SUBTLE)))


def print_description(stream: TextIO, text: str) -> None:
    """Print a plain line of explanation."""
    _console(stream).print(Text(text))


def _cells(values: Optional[list[str]]) -> str:
    return ", ".join(values or [])


def print_explain_table(stream: TextIO, result: Result) -> None:
    """Print every analysed table as a bordered grid."""
    print_title(stream, "Explain table")
    grid = Table(
        box=box.SQUARE,
        show_lines=True,
        border_style=_PURPLE,
        header_style=Style(color=_PURPLE, bold=True),
        width=_TABLE_WIDTH,
        padding=(0, 1),
    )
    for header in _TABLE_HEADERS:
        grid.add_column(
            header,
            justify="left",
            style=Style(color=_GRAY),
            min_width=_CELL_WIDTH,
        )
    for table in result.tables:
        grid.add_row(
            table.name,
            table.access_type,
            _cells(table.possible_keys),
            table.key or "",
            "" if table.key_length is None else str(table.key_length),
            _cells(table.ref),
            str(table.rows),
            f"{table.filtered:.2f}",
            table.scalability,
        )
    for column in grid.columns:
        column.header = Text(str(column.header), justify="center")
    _console(stream).print(grid)


def print_full_table_scan_comments(stream: TextIO, result: Result) -> None:
    """Report the tables that are read in full."""
    print_title(stream, "Are there any full table scans?")
    tables = result.full_table_scan_tables
    if not tables:
        print_info(stream, "No")
        return
    print_info(stream, "Yes")
    print_description(
        stream,
        "以下のテーブルに対して全テーブルスキャンが行われています。MySQLはこれらのテーブルの全ての行を読み込んでいます。",
    )
    console = _console(stream)
    for table in tables:
        console.print(
            Text.assemble(
                ("- Table `", _PLAIN),
                (table.name, _BOLD),
                ("` with ", _PLAIN),
                (str(table.rows), _BOLD if table.rows > 10000 else _PLAIN),
                (" rows examined per scan.", _PLAIN),
            )
        )


def print_full_index_scan_comments(stream: TextIO, result: Result) -> None:
    """Report the tables whose whole index is read."""
    print_title(stream, "Are there any full index scans?")
    tables = result.full_index_scan_tables
    if not tables:
        print_info(stream, "No")
        return
    print_info(stream, "Yes")
    print_description(
        stream,
        "次のテーブルにおいて、全インデックススキャンが発生しています。MySQLはこれらのテーブルの全インデックスを読み取っています。",
    )
    console = _console(stream)
    for table in tables:
        console.print(
            Text.assemble(
                ("- Table `", _PLAIN),
                (table.name, _BOLD),
                ("` with index ", _PLAIN),
                (table.key or "", _BOLD),
            )
        )


def print_anything_else_comments(stream: TextIO, result: Result) -> None:
    """Report per-table comments and comments on the ordering step."""
    print_title(stream, "Is there anything else interesting?")
    tables = result.has_any_comments_tables
    if not tables:
        print_info(stream, "No")
        return
    print_info(stream, "Yes")
    console = _console(stream)
    for table in tables:
        console.print(
            Text.assemble(
                ("- Table `", _PLAIN),
                (table.name, _BOLD),
                (f"`: {table.comment}", _PLAIN),
            )
        )
    for comment in result.comments:
        console.print(Text(f"- {comment}"))


def write_report(stream: TextIO, result: Result) -> None:
    """Print the whole report: the table and all three sections."""
    print_explain_table(stream, result)
    print_full_table_scan_comments(stream, result)
    print_full_index_scan_comments(stream, result)
    print_anything_else_comments(stream, result)