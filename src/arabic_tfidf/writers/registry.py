"""Writer registry.

Add new report formats without changing pipeline code by registering them here.
"""

from __future__ import annotations
from typing import Dict, List
from .base import ReportWriter
from .jsonl import JSONLReportWriter
from .parquet import ParquetReportWriter
from .text import TextReportWriter

_WRITERS: Dict[str, ReportWriter] = {
    "text": TextReportWriter(),
    "jsonl": JSONLReportWriter(),
    "parquet": ParquetReportWriter(),
}

def register_report_writer(name: str, writer: ReportWriter) -> None:
    """Register a new report writer dynamically."""
    if name in _WRITERS:
        raise ValueError(f"Report writer '{name}' already registered")
    _WRITERS[name] = writer

def list_report_writers() -> List[str]:
    """List all registered report writers."""
    return list(_WRITERS.keys())

def get_report_writer(name: str) -> ReportWriter:
    """Get report writer by name."""
    if name not in _WRITERS:
        raise KeyError(
            f"Unknown report writer: {name}. "
            f"Available: {list(_WRITERS)}. "
            f"Register with register_report_writer()"
        )
    return _WRITERS[name]
