"""Local JSONL source.

Each line should be JSON with at least:
- text
Optional:
- id (defaults to `<file stem>_<line number>`)

Accepts the same dataset forms as `local_text` (file, list, directory, glob).
"""

from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable
from .base import DataSource, RawDocument, SourceSpec
from .files import resolve_files

log = logging.getLogger("arabic_tfidf.sources.local_jsonl")

class LocalJSONLSource(DataSource):
    suffixes = (".jsonl",)

    def __init__(self, spec: SourceSpec):
        self.spec = spec
        self.name = spec.name
        self.files = resolve_files(spec.dataset, self.suffixes)

    def metadata(self) -> Dict[str, Any]:
        return {
            "kind": "local_jsonl",
            "files": self.files,
            "file_count": len(self.files),
            "total_size_bytes": sum(os.path.getsize(f) for f in self.files if os.path.exists(f)),
        }

    def stream(self) -> Iterable[RawDocument]:
        """Stream documents from all configured JSONL files."""
        for file_path in self.files:
            with open(file_path, "r", encoding=self.spec.encoding) as f:
                for line_num, line in enumerate(f, start=1):
                    line = line.strip()
                    if not line:
                        continue
                    try:
                        ex = json.loads(line)
                    except json.JSONDecodeError as e:
                        log.warning(f"Invalid JSON in {file_path}:{line_num}: {e}")
                        continue
                    if not isinstance(ex, dict):
                        log.warning(f"Skipping non-object JSON in {file_path}:{line_num}")
                        continue
                    yield RawDocument(
                        raw_id=str(ex.get(self.spec.id_field, f"{Path(file_path).stem}_{line_num}")),
                        text=ex.get(self.spec.text_field, "") or "",
                        source=self.spec.name,
                        extra={"source_file": file_path, "source_line": line_num},
                    )
