import logging

import pytest

from arabic_tfidf.pipeline.context import Document
from arabic_tfidf.plugins.registry import make_tokenizer, register_tokenizer, unregister_tokenizer
from arabic_tfidf.plugins.tokenizer import WhitespaceTokenizer
from arabic_tfidf.stages.tokenize_plugin import FALLBACK, TokenizeStage, tokenize, tokenize_with_origin
from conftest import BrokenTokenizer, FixedTokenizer


def test_uses_adapter_result_verbatim():
    adapter = FixedTokenizer(["Word", "،", "كتاب"])
    assert tokenize("ignored text", adapter) == ["Word", "،", "كتاب"]
    assert adapter.calls == 1


def test_no_adapter_uses_fallback():
    assert tokenize("Hello كتاب، (قلم)") == ["hello", "كتاب،", "قلم"]


@pytest.mark.parametrize("adapter", [BrokenTokenizer(), FixedTokenizer([]), FixedTokenizer(None)])
def test_adapter_failure_falls_back(adapter):
    tokens, origin = tokenize_with_origin("كتب الكاتب", adapter)
    assert tokens == ["كتب", "الكاتب"]
    assert origin == FALLBACK


def test_adapter_failure_is_logged_not_raised(caplog):
    with caplog.at_level(logging.DEBUG, logger="arabic_tfidf.tokenize"):
        assert tokenize("كتاب", BrokenTokenizer()) == ["كتاب"]
    assert "tokenizer crashed" in caplog.text


@pytest.mark.parametrize("text", [None, "", "  \n "])
def test_blank_text_yields_no_tokens(text):
    adapter = FixedTokenizer(["x"])
    assert tokenize(text, adapter) == []
    assert adapter.calls == 0


def test_stage_records_origin():
    doc = Document(doc_id="d1", text="كتب الكاتب")
    TokenizeStage(FixedTokenizer(["كتب"])).apply(doc)
    assert doc.tokens == ["كتب"]
    assert doc.transform_chain == ["tokenize_fixed_v1"]

    doc = Document(doc_id="d2", text="كتب الكاتب")
    TokenizeStage(BrokenTokenizer()).apply(doc)
    assert doc.tokens == ["كتب", "الكاتب"]
    assert doc.transform_chain == ["tokenize_fallback_v1"]


class TestTokenizerRegistry:

    @pytest.mark.parametrize("name", [None, "none", "fallback", ""])
    def test_no_tokenizer_requested(self, name):
        assert make_tokenizer(name) is None

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="Unknown tokenizer"):
            make_tokenizer("does-not-exist")

    def test_builtin_whitespace(self):
        tok = make_tokenizer("whitespace")
        assert isinstance(tok, WhitespaceTokenizer)
        assert tok.tokenize("كتب  الكاتب،") == ["كتب", "الكاتب،"]

    def test_construction_failure_means_no_tokenizer(self, caplog):
        def _boom():
            raise ImportError("no module named safar")

        register_tokenizer("boom", _boom)
        try:
            with caplog.at_level(logging.WARNING, logger="arabic_tfidf.plugins"):
                assert make_tokenizer("boom") is None
            assert "unavailable" in caplog.text
        finally:
            unregister_tokenizer("boom")

    def test_camel_is_optional(self):
        tok = make_tokenizer("camel")
        assert tok is None or tok.info.name == "camel"
