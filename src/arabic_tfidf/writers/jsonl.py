from __future__ import annotations
import os, json
from .base import ReportWriter, Occurrences, Scores, iter_rows

class JSONLReportWriter(ReportWriter):
    name = "jsonl"
    extension = ".jsonl"

    def write(self, occurrences: Occurrences, tfidf: Scores, *, out_dir: str, basename: str) -> str:
        os.makedirs(out_dir, exist_ok=True)
        path = os.path.join(out_dir, basename + self.extension)
        with open(path, "w", encoding="utf-8") as f:
            for row in iter_rows(occurrences, tfidf):
                f.write(json.dumps(row, ensure_ascii=False) + "\n")
        return path
