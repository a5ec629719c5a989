"""Run manifest writer.

The manifest is the machine-readable record of a run: config path, tokenizer
actually used, per-document term totals, corpus summary and output paths.
"""

from __future__ import annotations
from typing import Dict, Any
import os
import json

def write_manifest(path: str, manifest: Dict[str, Any]) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, ensure_ascii=False)
