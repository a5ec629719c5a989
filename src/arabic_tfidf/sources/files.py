"""Dataset path resolution shared by file-backed sources.

Supports:
- Single file path (string)
- List of file paths (kept in the given order)
- Directory path (all files with a matching suffix, recursive, sorted)
- Glob pattern (sorted)
"""

from __future__ import annotations
import glob
import os
from pathlib import Path
from typing import List, Sequence, Union

def resolve_files(dataset: Union[str, List[str], None], suffixes: Sequence[str]) -> List[str]:
    if dataset is None:
        return []

    if isinstance(dataset, list):
        files: List[str] = []
        for item in dataset:
            files.extend(resolve_files(item, suffixes))
        return files

    dataset = str(dataset)
    if "*" in dataset or "?" in dataset or "[" in dataset:
        matched = glob.glob(dataset, recursive=True)
        return sorted(f for f in matched if os.path.isfile(f) and f.endswith(tuple(suffixes)))

    path = Path(dataset)
    if path.is_dir():
        found = {str(f) for f in path.glob("**/*") if f.is_file() and f.suffix in suffixes}
        return sorted(found)

    # Single file; a missing path is returned as-is and fails when read.
    return [dataset]
