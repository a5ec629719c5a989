"""Report writers.

A run produces two ordered nested mappings:
- occurrences: document -> term -> count
- tfidf:       document -> term -> score

Writers serialize both to one destination. Document order and per-document term
order are preserved in every format.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, Mapping

Occurrences = Mapping[str, Mapping[str, int]]
Scores = Mapping[str, Mapping[str, float]]

SCORE_DECIMALS = 6

class ReportWriter(ABC):
    """Writes the occurrence + TF-IDF report in a chosen format."""
    name: str
    extension: str

    @abstractmethod
    def write(self, occurrences: Occurrences, tfidf: Scores, *, out_dir: str, basename: str) -> str:
        """Write the report and return the output path."""
        raise NotImplementedError

def iter_rows(occurrences: Occurrences, tfidf: Scores) -> Iterator[Dict[str, Any]]:
    """Flatten both maps into one row per (document, term), in report order."""
    for doc, counts in occurrences.items():
        scores = tfidf.get(doc, {})
        for term, count in counts.items():
            yield {
                "doc": doc,
                "term": term,
                "count": int(count),
                "tfidf": float(scores.get(term, 0.0)),
            }
