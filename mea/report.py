"""Analysis results produced from an EXPLAIN document."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TableReport:
    name: str = ""
    access_type: str = ""
    possible_keys: list[str] = field(default_factory=list)
    key: str | None = None
    key_length: int | None = None
    ref: list[str] | None = None
    rows: int = 0
    filtered: float = 0.0
    scalability: str = ""
    is_full_table_scan: bool = False
    is_full_index_scan: bool = False
    comment: str = ""


@dataclass
class Result:
    tables: list[TableReport] = field(default_factory=list)
    full_table_scan_tables: list[TableReport] = field(default_factory=list)
    full_index_scan_tables: list[TableReport] = field(default_factory=list)
    has_any_comments_tables: list[TableReport] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)