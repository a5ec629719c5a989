"""Document source plugin interface.

Goal: allow new corpora formats without changing pipeline code.

All sources expose a unified `stream()` generator yielding RawDocument, in a
deterministic order; that order becomes the document order of every report.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Union

@dataclass
class RawDocument:
    raw_id: str
    text: str
    source: str
    extra: Dict[str, Any] = field(default_factory=dict)

@dataclass
class SourceSpec:
    name: str
    kind: str               # implementation key, e.g., local_text, local_jsonl, inline
    dataset: Union[str, List[str], None] = None  # file, list of files, directory or glob pattern
    doc_id: Optional[str] = None   # local_text: explicit document name for a single file
    text_field: str = "text"
    id_field: str = "id"
    encoding: str = "utf-8"
    documents: Optional[Dict[str, str]] = None  # inline: name -> text

class DataSource:
    """Base interface for all sources."""
    name: str

    def metadata(self) -> Dict[str, Any]:
        return {}

    def stream(self) -> Iterable[RawDocument]:
        raise NotImplementedError
