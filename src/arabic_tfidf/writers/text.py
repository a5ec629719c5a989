from __future__ import annotations
import os
from .base import ReportWriter, Occurrences, Scores, SCORE_DECIMALS

OCCURRENCE_HEADER = "===== MAP D'OCCURRENCE ====="
TFIDF_HEADER = "===== MAP TF-IDF ====="

def format_report(occurrences: Occurrences, tfidf: Scores) -> str:
    lines = [OCCURRENCE_HEADER, ""]
    for doc, counts in occurrences.items():
        lines.append(f"Document: {doc}")
        for term, count in counts.items():
            lines.append(f"  {term} : {count}")
        lines.append("")

    lines.extend([TFIDF_HEADER, ""])
    for doc, scores in tfidf.items():
        lines.append(f"Document: {doc}")
        for term, score in scores.items():
            lines.append(f"  {term} : {score:.{SCORE_DECIMALS}f}")
        lines.append("")
    return "\n".join(lines) + "\n"

class TextReportWriter(ReportWriter):
    name = "text"
    extension = ".txt"

    def write(self, occurrences: Occurrences, tfidf: Scores, *, out_dir: str, basename: str) -> str:
        os.makedirs(out_dir, exist_ok=True)
        path = os.path.join(out_dir, basename + self.extension)
        with open(path, "w", encoding="utf-8") as f:
            f.write(format_report(occurrences, tfidf))
        return path
