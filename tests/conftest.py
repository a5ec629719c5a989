from __future__ import annotations
from typing import List

import pytest

from arabic_tfidf.plugins.tokenizer import TokenizerAdapter, TokenizerInfo


class FixedTokenizer(TokenizerAdapter):
    info = TokenizerInfo(name="fixed", type="external")

    def __init__(self, tokens):
        self.tokens = tokens
        self.calls = 0

    def tokenize(self, text: str) -> List[str]:
        self.calls += 1
        return self.tokens


class BrokenTokenizer(TokenizerAdapter):
    info = TokenizerInfo(name="broken", type="external")

    def tokenize(self, text: str) -> List[str]:
        raise RuntimeError("tokenizer crashed")


@pytest.fixture
def kitab_corpus():
    return {
        "d1": "كتب الكاتب كتابا",
        "d2": "قرأ القارئ كتابا",
        "d3": "كتابا كتابا",
    }


@pytest.fixture
def write_text(tmp_path):
    def _write(name: str, content: str):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path
    return _write
