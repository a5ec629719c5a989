"""Term counting stage.

Each token is normalized, then dropped if blank or a stop word; survivors are
counted. Counts keep first-seen order so reports are deterministic.
"""

from __future__ import annotations
from typing import Dict, FrozenSet, Iterable

from ..pipeline.context import Document
from ..utils.text import normalize_arabic
from .base import Stage

def count_terms(tokens: Iterable[str], stop_words: FrozenSet[str] = frozenset()) -> Dict[str, int]:
    """Build a term -> count map from raw tokens.

    `stop_words` must already be normalized (see `policies.stop_words.build_stop_words`).
    """
    counts: Dict[str, int] = {}
    for token in tokens:
        term = normalize_arabic(token)
        if not term or not term.strip():
            continue
        if term in stop_words:
            continue
        counts[term] = counts.get(term, 0) + 1
    return counts

class CountStage(Stage):
    name = "count"

    def __init__(self, stop_words: FrozenSet[str] = frozenset()):
        self.stop_words = frozenset(stop_words)

    def apply(self, doc: Document) -> None:
        doc.counts = count_terms(doc.tokens, self.stop_words)
        doc.transform_chain.append("count_v1")
