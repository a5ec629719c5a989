"""Corpus-level run statistics.

Stored in the run manifest so runs can be compared without re-reading reports:
- document / empty-document counts
- vocabulary size (distinct terms across the corpus) and total counted terms
- TF-IDF score percentiles (p50/p90/p99) plus min/max
"""

from __future__ import annotations
from typing import Any, Dict, List, Mapping
import numpy as np

def _percentiles(xs: List[float], ps=(50, 90, 99)) -> Dict[str, float]:
    if not xs:
        return {}
    arr = np.array(xs, dtype=np.float64)
    out = {}
    for p in ps:
        out[f"p{p}"] = float(np.percentile(arr, p))
    out["min"] = float(arr.min())
    out["max"] = float(arr.max())
    return out

def corpus_summary(
    occurrences: Mapping[str, Mapping[str, int]],
    tfidf: Mapping[str, Mapping[str, float]],
) -> Dict[str, Any]:
    vocab = set()
    total_terms = 0
    empty_docs = 0
    for counts in occurrences.values():
        if not counts:
            empty_docs += 1
        vocab.update(counts)
        total_terms += sum(counts.values())

    scores = [s for doc_scores in tfidf.values() for s in doc_scores.values()]
    return {
        "docs": len(occurrences),
        "empty_docs": empty_docs,
        "vocab_size": len(vocab),
        "total_terms": total_terms,
        "tfidf": _percentiles(scores),
    }
