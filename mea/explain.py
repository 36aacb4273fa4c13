"""Data model for MySQL ``EXPLAIN FORMAT=JSON`` documents."""

import json
from dataclasses import dataclass, field, fields, is_dataclass
from typing import IO, Any, get_args, get_origin


@dataclass
class TotalCostInfo:
    query_cost: str = ""


@dataclass
class SortCostInfo:
    sort_cost: str = ""


@dataclass
class CostInfo:
    read_cost: str = ""
    eval_cost: str = ""
    prefix_cost: str = ""
    data_read_per_join: str = ""


@dataclass
class Table:
    table_name: str = ""
    access_type: str = ""
    possible_keys: list[str] = field(default_factory=list)
    key: str = ""
    used_key_parts: list[str] = field(default_factory=list)
    key_length: str = ""
    rows_examined_per_scan: int = 0
    rows_produced_per_join: int = 0
    filtered: str = ""
    cost_info: CostInfo = field(default_factory=CostInfo)
    used_columns: list[str] = field(default_factory=list)
    attached_condition: str = ""
    ref: list[str] = field(default_factory=list)


@dataclass
class NestedLoop:
    table: Table = field(default_factory=Table)


@dataclass
class DuplicatesRemoval:
    using_temporary_table: bool = False
    using_filesort: bool = False
    nested_loop: list[NestedLoop] = field(default_factory=list)


@dataclass
class OrderingOperation:
    using_temporary_table: bool = False
    using_filesort: bool = False
    duplicates_removal: DuplicatesRemoval = field(default_factory=DuplicatesRemoval)
    sort_cost_info: SortCostInfo = field(
        default_factory=SortCostInfo, metadata={"json": "cost_info"}
    )
    nested_loop: list[NestedLoop] = field(default_factory=list)


@dataclass
class QueryBlock:
    select_id: int = 0
    cost_info: TotalCostInfo = field(default_factory=TotalCostInfo)
    ordering_operation: OrderingOperation = field(default_factory=OrderingOperation)
    table: Table = field(default_factory=Table)


@dataclass
class Explain:
    query_block: QueryBlock = field(default_factory=QueryBlock)


_JSON_NAMES = {str: "string", int: "integer", bool: "boolean"}


def _decode(tp: Any, value: Any, path: str) -> Any:
    if value is None:
        return tp() if is_dataclass(tp) else (get_origin(tp) or tp)()
    if is_dataclass(tp):
        if not isinstance(value, dict):
            raise ValueError(f"cannot decode {type(value).__name__} into object field {path}")
        return tp(**{
            f.name: _decode(f.type, value.get(f.metadata.get("json", f.name)),
                            f"{path}.{f.name}")
            for f in fields(tp)
        })
    if get_origin(tp) is list:
        if not isinstance(value, list):
            raise ValueError(f"cannot decode {type(value).__name__} into array field {path}")
        (item_type,) = get_args(tp)
        return [_decode(item_type, item, path) for item in value]
    if not isinstance(value, tp) or (tp is int and isinstance(value, bool)):
        raise ValueError(
            f"cannot decode {type(value).__name__} into {_JSON_NAMES[tp]} field {path}"
        )
    return value


def parse_explain(data: Any) -> Explain:
    """Build an :class:`Explain` from decoded JSON; wrong JSON types raise ValueError."""
    return _decode(Explain, data, "Explain")


def load_explain(fp: IO[Any]) -> Explain:
    """Read the first JSON value from a text or binary stream and parse it."""
    content = fp.read()
    if isinstance(content, (bytes, bytearray)):
        content = bytes(content).decode("utf-8")
    text = content.lstrip(" \t\r\n")
    if not text:
        raise ValueError("unexpected end of input")
    data, _ = json.JSONDecoder().raw_decode(text)
    return parse_explain(data)