"""TF-IDF scoring over per-document term counts.

    tf(t, d)  = count(t, d) / sum(counts(d))
    idf(t)    = ln(N / (1 + df(t)))
    tfidf     = tf * idf

N counts every document, including ones with no terms. df is a presence count.
Because of the +1 in the denominator, a term present in more than half of the
documents gets a negative IDF; that is intended and kept as-is.

All functions are pure and keep insertion order: documents in corpus order,
terms in first-seen order.
"""

from __future__ import annotations
import math
from typing import Dict, Mapping, Optional

Counts = Mapping[str, int]
CorpusCounts = Mapping[str, Counts]

def compute_tf(counts: Counts) -> Dict[str, float]:
    """Term frequency per term; empty when the document has no terms."""
    total = sum(counts.values())
    if total == 0:
        return {}
    total = float(total)
    return {term: count / total for term, count in counts.items()}

def compute_idf(corpus: CorpusCounts) -> Dict[str, float]:
    """Inverse document frequency for every term that occurs in some document."""
    total_docs = len(corpus)
    doc_freq: Dict[str, int] = {}
    for counts in corpus.values():
        for term in counts:
            doc_freq[term] = doc_freq.get(term, 0) + 1
    return {term: math.log(total_docs / (1 + df)) for term, df in doc_freq.items()}

def compute_tfidf(corpus: CorpusCounts, idf: Optional[Mapping[str, float]] = None) -> Dict[str, Dict[str, float]]:
    """TF-IDF per document. IDF is computed once over the whole corpus unless given."""
    if idf is None:
        idf = compute_idf(corpus)
    out: Dict[str, Dict[str, float]] = {}
    for doc_id, counts in corpus.items():
        tf = compute_tf(counts)
        out[doc_id] = {term: value * idf.get(term, 0.0) for term, value in tf.items()}
    return out
