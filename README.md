# mea

`mea` reads the JSON plan that MySQL produces for `EXPLAIN FORMAT=JSON` and prints a report on how each table is accessed.

The report has four sections:

- **Explain table**: one row per table in the plan, showing the table name, access type, possible indexes, chosen index, index key length, ref columns, rows examined per scan, the filtered percentage (two decimals) and a scalability estimate: `O(N)` for `ALL` and `index`, `O(log N)` for `ref` and `eq_ref`, `O(1)` for `const`, and `O(?)` for anything else.
- **Are there any full table scans?**: the tables read in full, meaning `ALL` access, or `index` access on `PRIMARY` (which on InnoDB costs as much as a full table scan). Row counts above 10000 are shown in bold.
- **Are there any full index scans?**: the tables where a whole secondary index is read, with the index name.
- **Is there anything else interesting?**: a note on each table's access type and index usage (including a warning for `intersect` index merges), followed by warnings when the ordering step uses a temporary table or a filesort. These notes are written in Japanese.

Each of the last three sections answers `Yes` or `No`.

## Installation

```
pip install .
```

## Usage

Pass a file to `mea`:

```
mea plan.json
```

Or pipe the plan in. With `-` or no argument at all, `mea` reads standard input:

```
cat plan.json | mea
cat plan.json | mea -
```

The output is styled when written to a terminal; the `NO_COLOR` environment variable turns colours off.

If the file cannot be opened or the JSON cannot be decoded (including a value of the wrong JSON type for a known field), `mea` prints an error to standard error and exits with status 1. Otherwise it exits with status 0.

## Using it from Python

```python
import sys

from mea.convert import convert
from mea.explain import load_explain
from mea.render import write_report

with open("plan.json", encoding="utf-8") as fp:
    explain = load_explain(fp)

result = convert(explain)
for table in result.full_table_scan_tables:
    print(table.name, table.rows)

write_report(sys.stdout, result)
```

- `mea.explain`: dataclasses for the plan (`Explain`, `QueryBlock`, `OrderingOperation`, `Table`, ...), `parse_explain(data)` for an already decoded JSON object, and `load_explain(fp)` for a text or binary stream. Both raise `ValueError` on bad input.
- `mea.convert`: `convert(explain)` returns a `mea.report.Result`; `convert_table`, `analyze_access_type`, `analyze_ordering_operation_comments` and `scalability` expose the individual steps. `AccessType` lists the access types that are recognised.
- `mea.report`: `Result` and `TableReport`, the analysis results.
- `mea.render`: `write_report(stream, result)` prints the whole report; each section also has its own `print_*` function.
- `mea.cli`: `CLI(stdin, stdout).run(args)` runs the command with `args[0]` as the program name, and `main(argv=None)` is the `mea` entry point.
- `mea.debug`: `debug_print(*args, stream=None)` pretty-prints values.

## What it does not do

`mea` does not connect to a database. You run `EXPLAIN FORMAT=JSON` yourself and hand it the result.

Only some parts of a plan are analysed: the table directly under `query_block`, and the nested loops under `ordering_operation` and `ordering_operation.duplicates_removal`. Tables inside other structures, such as grouping operations, a top-level nested loop or subqueries, do not appear in the report.

## Running the tests

```
pip install .[test]
pytest
```