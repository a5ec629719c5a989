"""Core pipeline data model.

Document is the per-document record flowing through stages.
Stages fill in derived fields (`tokens`, `counts`) and append transform_chain
entries; the raw `text` is never rewritten.

Each Document is owned by exactly one stage run, so stages may write to it
without coordination even when documents are processed on worker threads.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional

@dataclass
class Document:
    # identity
    doc_id: str
    text: str
    source: str = ""

    # provenance
    source_file: Optional[str] = None

    # derived
    tokens: List[str] = field(default_factory=list)
    counts: Dict[str, int] = field(default_factory=dict)

    # governance
    transform_chain: List[str] = field(default_factory=list)

    @property
    def total_terms(self) -> int:
        return sum(self.counts.values())
