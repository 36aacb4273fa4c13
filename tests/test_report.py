from mea.report import Result, TableReport


def test_table_report_defaults():
    report = TableReport()
    assert report.name == ""
    assert report.key is None
    assert report.key_length is None
    assert report.ref is None
    assert report.rows == 0
    assert report.filtered == 0.0
    assert report.is_full_table_scan is False
    assert report.is_full_index_scan is False
    assert report.comment == ""


def test_result_defaults_are_empty():
    result = Result()
    assert result.tables == []
    assert result.full_table_scan_tables == []
    assert result.full_index_scan_tables == []
    assert result.has_any_comments_tables == []
    assert result.comments == []


def test_result_default_lists_are_independent():
    first = Result()
    second = Result()
    first.tables.append(TableReport(name="users"))
    assert second.tables == []
    assert first.tables[0].name == "users"


def test_equality_compares_fields():
    a = TableReport(name="t", key="idx", key_length=8, rows=3)
    b = TableReport(name="t", key="idx", key_length=8, rows=3)
    c = TableReport(name="t", key="idx", key_length=4, rows=3)
    assert a == b
    assert (a == c) is False
    assert Result(tables=[a]) == Result(tables=[b])