"""Tokenizer adapter plugin.

External tokenizers are optional collaborators. Implement this interface in a
separate package or in this repo, and register it via `arabic_tfidf.plugins.registry`.

Design goals:
- The pipeline runs without knowing tokenizer internals
- A tokenizer that is missing or broken never aborts a run: the caller falls back
  to `arabic_tfidf.utils.text.split_text`

Contract:
- tokenize(text) -> list[str]
- raising or returning an empty result is allowed; the caller falls back
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

@dataclass(frozen=True)
class TokenizerInfo:
    name: str
    type: str  # whitespace | external

class TokenizerAdapter(ABC):
    """Base tokenizer adapter."""
    info: TokenizerInfo

    @abstractmethod
    def tokenize(self, text: str) -> List[str]:
        """Split a string into word tokens."""
        raise NotImplementedError

class WhitespaceTokenizer(TokenizerAdapter):
    """Splits on whitespace only; punctuation stays attached to tokens."""
    info = TokenizerInfo(name="whitespace", type="whitespace")

    def tokenize(self, text: str) -> List[str]:
        return text.split()
