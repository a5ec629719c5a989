"""Parquet report writer.

One row per (document, term), long format, so the table loads straight into
pandas / DuckDB for further analysis.
"""

from __future__ import annotations
import os
import pyarrow as pa
import pyarrow.parquet as pq
from .base import ReportWriter, Occurrences, Scores, iter_rows

def report_schema() -> pa.Schema:
    return pa.schema([
        ("doc", pa.string()),
        ("term", pa.string()),
        ("count", pa.int64()),
        ("tfidf", pa.float64()),
    ], metadata={"schema_version": "v1"})

class ParquetReportWriter(ReportWriter):
    name = "parquet"
    extension = ".parquet"

    def write(self, occurrences: Occurrences, tfidf: Scores, *, out_dir: str, basename: str) -> str:
        os.makedirs(out_dir, exist_ok=True)
        path = os.path.join(out_dir, basename + self.extension)
        table = pa.Table.from_pylist(list(iter_rows(occurrences, tfidf)), schema=report_schema())
        pq.write_table(table, path, compression="zstd")
        return path
