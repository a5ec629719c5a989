"""CAMeL Tools word tokenizer adapter.

Wraps `camel_tools.tokenizers.word.simple_word_tokenize`, which splits Arabic
text on whitespace and emits punctuation as separate tokens.

camel-tools is an optional extra (`pip install arabic-tfidf[camel]`). The import
happens at construction time so a missing install surfaces as a construction
failure, which `plugins.registry.make_tokenizer` turns into "no tokenizer".
"""

from __future__ import annotations
from typing import List
from .tokenizer import TokenizerAdapter, TokenizerInfo

class CamelTokenizer(TokenizerAdapter):
    info = TokenizerInfo(name="camel", type="external")

    def __init__(self, split_digits: bool = False):
        from camel_tools.tokenizers.word import simple_word_tokenize
        self._tokenize = simple_word_tokenize
        self.split_digits = bool(split_digits)

    def tokenize(self, text: str) -> List[str]:
        return list(self._tokenize(text, split_digits=self.split_digits))
