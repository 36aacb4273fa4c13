import io
import json

import pytest

from mea.explain import (
    CostInfo,
    Explain,
    NestedLoop,
    Table,
    load_explain,
    parse_explain,
)


SAMPLE = {
    "query_block": {
        "select_id": 1,
        "cost_info": {"query_cost": "12.50"},
        "ordering_operation": {
            "using_temporary_table": True,
            "using_filesort": False,
            "cost_info": {"sort_cost": "3.00"},
            "duplicates_removal": {
                "using_filesort": True,
                "nested_loop": [{"table": {"table_name": "a", "access_type": "ALL"}}],
            },
            "nested_loop": [
                {
                    "table": {
                        "table_name": "users",
                        "access_type": "ref",
                        "possible_keys": ["PRIMARY", "idx_name"],
                        "key": "idx_name",
                        "used_key_parts": ["name"],
                        "key_length": "8",
                        "rows_examined_per_scan": 42,
                        "rows_produced_per_join": 7,
                        "filtered": "100.00",
                        "cost_info": {
                            "read_cost": "1.0",
                            "eval_cost": "2.0",
                            "prefix_cost": "3.0",
                            "data_read_per_join": "1K",
                        },
                        "used_columns": ["id", "name"],
                        "attached_condition": "(users.id > 1)",
                        "ref": ["const"],
                    }
                }
            ],
        },
        "table": {"table_name": "top", "access_type": "const"},
    }
}


def test_parse_full_document():
    explain = parse_explain(SAMPLE)
    qb = explain.query_block
    assert qb.select_id == 1
    assert qb.cost_info.query_cost == "12.50"
    op = qb.ordering_operation
    assert op.using_temporary_table is True
    assert op.using_filesort is False
    assert op.sort_cost_info.sort_cost == "3.00"
    assert op.duplicates_removal.using_filesort is True
    assert op.duplicates_removal.nested_loop[0].table.table_name == "a"
    users = op.nested_loop[0].table
    assert users.table_name == "users"
    assert users.possible_keys == ["PRIMARY", "idx_name"]
    assert users.key_length == "8"
    assert users.rows_examined_per_scan == 42
    assert users.rows_produced_per_join == 7
    assert users.cost_info == CostInfo("1.0", "2.0", "3.0", "1K")
    assert users.used_columns == ["id", "name"]
    assert users.attached_condition == "(users.id > 1)"
    assert users.ref == ["const"]
    assert qb.table.table_name == "top"


def test_missing_fields_take_empty_values():
    explain = parse_explain({})
    assert explain == Explain()
    assert explain.query_block.table == Table()
    assert explain.query_block.ordering_operation.nested_loop == []


def test_null_values_are_empty():
    explain = parse_explain(
        {"query_block": {"table": {"table_name": None, "ref": None, "rows_examined_per_scan": None}}}
    )
    table = explain.query_block.table
    assert table.table_name == ""
    assert table.ref == []
    assert table.rows_examined_per_scan == 0


def test_unknown_fields_are_ignored():
    explain = parse_explain({"query_block": {"select_id": 3, "extra": [1, 2]}, "other": 1})
    assert explain.query_block.select_id == 3


@pytest.mark.parametrize(
    "document",
    [
        {"query_block": {"select_id": "1"}},
        {"query_block": {"select_id": 1.5}},
        {"query_block": {"table": {"table_name": 5}}},
        {"query_block": {"table": {"possible_keys": "PRIMARY"}}},
        {"query_block": {"ordering_operation": {"using_filesort": "yes"}}},
        {"query_block": {"ordering_operation": {"nested_loop": [3]}}},
        {"query_block": []},
        [1, 2],
    ],
)
def test_wrong_types_raise(document):
    with pytest.raises(ValueError):
        parse_explain(document)


def test_load_explain_from_text_stream():
    explain = load_explain(io.StringIO(json.dumps(SAMPLE)))
    assert explain == parse_explain(SAMPLE)


def test_load_explain_from_binary_stream():
    raw = json.dumps(SAMPLE, ensure_ascii=False).encode("utf-8")
    explain = load_explain(io.BytesIO(raw))
    assert explain.query_block.ordering_operation.nested_loop[0] == NestedLoop(
        table=parse_explain(SAMPLE).query_block.ordering_operation.nested_loop[0].table
    )


def test_load_explain_reads_only_first_value():
    text = "  " + json.dumps({"query_block": {"select_id": 9}}) + " trailing"
    assert load_explain(io.StringIO(text)).query_block.select_id == 9


def test_load_explain_empty_input_raises():
    with pytest.raises(ValueError):
        load_explain(io.StringIO("   "))


def test_load_explain_invalid_json_raises():
    with pytest.raises(json.JSONDecodeError):
        load_explain(io.StringIO("{not json"))