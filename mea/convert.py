"""Turn a parsed EXPLAIN document into an analysis :class:`Result`."""

from __future__ import annotations

import math
import re
from enum import Enum
from typing import Iterable, NamedTuple, Optional

from mea.explain import Explain, NestedLoop, OrderingOperation, Table
from mea.report import Result, TableReport


class AccessType(str, Enum):
    """Access types reported by MySQL that the analysis knows about."""

    ALL = "ALL"
    INDEX = "index"
    REF = "ref"
    EQ_REF = "eq_ref"
    CONST = "const"
    RANGE = "range"
    INDEX_MERGE = "index_merge"


class AccessAnalysis(NamedTuple):
    """What the access type and key of a table reveal."""

    is_full_table_scan: bool
    is_full_index_scan: bool
    comment: str


_ACCESS_COMMENTS = {
    AccessType.RANGE.value: "インデックスを使って一定範囲の行にアクセスしています。",
    AccessType.REF.value: "インデックスを使ってマッチする行にアクセスしています。",
    AccessType.EQ_REF.value: "インデックスを使って最大1行にアクセスしています。",
    AccessType.CONST.value: "このテーブルは問い合わせの最初に1回読み込まれ、定数として扱われています。",
    AccessType.INDEX_MERGE.value: "MySQLが複数のインデックスを使用しています。",
}

_SCALABILITY = {
    AccessType.ALL.value: "N",
    AccessType.INDEX.value: "N",
    AccessType.REF.value: "log N",
    AccessType.EQ_REF.value: "log N",
    AccessType.CONST.value: "1",
}

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


def convert(explain: Explain) -> Result:
    """Analyse every table access in the plan."""
    block = explain.query_block
    tables: list[TableReport] = []
    if block.table.table_name:
        tables.append(convert_table(block.table))
    ordering = block.ordering_operation
    tables.extend(convert_nested_loops(ordering.duplicates_removal.nested_loop))
    tables.extend(convert_nested_loops(ordering.nested_loop))

    return Result(
        tables=tables,
        full_table_scan_tables=[t for t in tables if t.is_full_table_scan],
        full_index_scan_tables=[t for t in tables if t.is_full_index_scan],
        has_any_comments_tables=[t for t in tables if t.comment],
        comments=analyze_ordering_operation_comments(ordering),
    )


def analyze_ordering_operation_comments(ordering_operation: OrderingOperation) -> list[str]:
    """Comments about how the ORDER BY is carried out."""
    comments = []
    if ordering_operation.using_temporary_table:
        comments.append(
            "ソートのために一時テーブルを使用しています。データが設定したメモリのバッファーサイズに収まらないため非常に遅くなります。"
        )
    if ordering_operation.using_filesort:
        comments.append(
            "ソートのためにファイルソートを使用しています。インデックスを用いてソートが行われていません。"
        )
    return comments


def convert_nested_loops(nested_loops: Iterable[NestedLoop]) -> list[TableReport]:
    """Convert the table of each nested-loop step."""
    return [convert_table(loop.table) for loop in nested_loops]


def convert_table(table: Table) -> TableReport:
    """Build the report for one table access."""
    analysis = analyze_access_type(table)
    return TableReport(
        name=table.table_name,
        access_type=table.access_type,
        possible_keys=table.possible_keys,
        key=table.key or None,
        key_length=_parse_int(table.key_length),
        ref=table.ref or None,
        rows=table.rows_examined_per_scan,
        filtered=_parse_float(table.filtered),
        scalability=f"O({scalability(table.access_type)})",
        is_full_table_scan=analysis.is_full_table_scan,
        is_full_index_scan=analysis.is_full_index_scan,
        comment=analysis.comment,
    )


def analyze_access_type(table: Table) -> AccessAnalysis:
    """Classify the scan and describe how the key is used."""
    full_table = False
    full_index = False
    access = table.access_type
    key = table.key

    if access == AccessType.ALL.value:
        full_table = True
    elif access == AccessType.INDEX.value:
        # On InnoDB a scan of the primary key index reads the whole table.
        if key == "PRIMARY":
            full_table = True
        else:
            full_index = True
    comment = _ACCESS_COMMENTS.get(access, "")

    if key:
        if key == "PRIMARY":
            comment += "MySQLがPRIMARY KEYを使用しています。"
        elif access == AccessType.INDEX_MERGE.value:
            comment += "使用されているインデックスとマージタイプは " + key + " です。"
            if key.lower().startswith("intersect"):
                comment += "マージタイプが'intersect'のようです。WHERE句が複雑な場合、遅くなる可能性があります!"
        else:
            comment += "MySQL が '" + key + "' インデックスを使用しています。"

    return AccessAnalysis(full_table, full_index, comment)


def scalability(access_type: str) -> str:
    """Growth of the access cost with table size, e.g. ``"log N"``."""
    return _SCALABILITY.get(access_type, "?")


def _parse_int(text: str) -> Optional[int]:
    if not _INT_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def _parse_float(text: str) -> float:
    if not text or "_" in text or text != text.strip():
        return 0.0
    try:
        value = float(text)
    except ValueError:
        return 0.0
    if math.isinf(value) and text.lstrip("+-").lower() not in ("inf", "infinity"):
        return 0.0
    return value