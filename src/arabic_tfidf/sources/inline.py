"""Inline source: documents written directly in the build config.

    sources:
      - name: demo
        kind: inline
        documents:
          d1: "كتب الكاتب كتابا"
          d2: "قرأ القارئ كتابا"
"""

from __future__ import annotations
from typing import Any, Dict, Iterable
from .base import DataSource, RawDocument, SourceSpec

class InlineSource(DataSource):
    def __init__(self, spec: SourceSpec):
        self.spec = spec
        self.name = spec.name
        self.documents = dict(spec.documents or {})

    def metadata(self) -> Dict[str, Any]:
        return {"kind": "inline", "doc_count": len(self.documents)}

    def stream(self) -> Iterable[RawDocument]:
        for raw_id, text in self.documents.items():
            yield RawDocument(raw_id=str(raw_id), text=text or "", source=self.spec.name)
