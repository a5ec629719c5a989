"""Local plain-text source: one UTF-8 file per document.

Document names come from `doc_id` (single file only) or the file stem, e.g.
`data/text1.txt` -> `text1`.
"""

from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable
from .base import DataSource, RawDocument, SourceSpec
from .files import resolve_files

log = logging.getLogger("arabic_tfidf.sources.local_text")

class LocalTextSource(DataSource):
    suffixes = (".txt",)

    def __init__(self, spec: SourceSpec):
        self.spec = spec
        self.name = spec.name
        self.files = resolve_files(spec.dataset, self.suffixes)
        if spec.doc_id and len(self.files) != 1:
            raise ValueError(f"Source {spec.name}: doc_id requires exactly one file, got {len(self.files)}")

    def metadata(self) -> Dict[str, Any]:
        return {
            "kind": "local_text",
            "files": self.files,
            "file_count": len(self.files),
            "total_size_bytes": sum(os.path.getsize(f) for f in self.files if os.path.exists(f)),
        }

    def stream(self) -> Iterable[RawDocument]:
        for file_path in self.files:
            with open(file_path, "r", encoding=self.spec.encoding) as f:
                text = f.read()
            raw_id = self.spec.doc_id or Path(file_path).stem
            log.debug(f"Read {file_path} as document {raw_id} ({len(text)} chars)")
            yield RawDocument(
                raw_id=raw_id,
                text=text,
                source=self.spec.name,
                extra={"source_file": file_path},
            )
