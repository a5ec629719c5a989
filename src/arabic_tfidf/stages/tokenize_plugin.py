"""Tokenization stage (plugin-driven).

- Uses a TokenizerAdapter from `arabic_tfidf.plugins.registry` when one is available.
- Falls back to `split_text` when no adapter is configured, or when the adapter
  raises / returns nothing for a given text.

The adapter is a soft dependency: its failures are logged and never propagated.
"""

from __future__ import annotations
import logging
from typing import List, Optional, Tuple

from ..pipeline.context import Document
from ..plugins.tokenizer import TokenizerAdapter
from ..utils.text import split_text
from .base import Stage

log = logging.getLogger("arabic_tfidf.tokenize")

FALLBACK = "fallback"

def _try_adapter(text: str, adapter: TokenizerAdapter) -> Optional[List[str]]:
    """Run the adapter; None means 'no usable result'."""
    try:
        tokens = adapter.tokenize(text)
    except Exception as e:
        log.debug(f"Tokenizer {adapter.info.name} failed ({type(e).__name__}: {e}); falling back")
        return None
    if not tokens:
        return None
    return list(tokens)

def tokenize_with_origin(text: Optional[str], adapter: Optional[TokenizerAdapter] = None) -> Tuple[List[str], str]:
    """Tokenize and report which tokenizer produced the result (adapter name or FALLBACK)."""
    if not text or not text.strip():
        return [], FALLBACK
    if adapter is not None:
        tokens = _try_adapter(text, adapter)
        if tokens is not None:
            return tokens, adapter.info.name
    return split_text(text), FALLBACK

def tokenize(text: Optional[str], adapter: Optional[TokenizerAdapter] = None) -> List[str]:
    """Split `text` into tokens, preferring `adapter` and falling back to `split_text`."""
    tokens, _ = tokenize_with_origin(text, adapter)
    return tokens

class TokenizeStage(Stage):
    name = "tokenize"

    def __init__(self, adapter: Optional[TokenizerAdapter] = None):
        self.adapter = adapter

    def apply(self, doc: Document) -> None:
        doc.tokens, origin = tokenize_with_origin(doc.text, self.adapter)
        doc.transform_chain.append(f"tokenize_{origin}_v1")
