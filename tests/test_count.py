from arabic_tfidf.pipeline.context import Document
from arabic_tfidf.policies.stop_words import build_stop_words, load_stop_words
from arabic_tfidf.stages.count import CountStage, count_terms


def test_counts_normalized_terms():
    counts = count_terms(["الكتاب", "كتاب", "والكتاب", "قلم"])
    assert counts == {"كتاب": 3, "قلم": 1}


def test_first_seen_order():
    counts = count_terms(["قلم", "كتاب", "قلم", "علم"])
    assert list(counts) == ["قلم", "كتاب", "علم"]


def test_drops_tokens_that_normalize_to_blank():
    assert count_terms(["،", "123", ".", "  "]) == {}


def test_stop_words_compared_after_normalization():
    stop_words = build_stop_words(["من"])
    counts = count_terms(["ومن", "من", "كتاب"], stop_words)
    assert counts == {"كتاب": 1}


def test_stop_word_and_token_follow_the_same_rules():
    # "في" loses its leading ف as a particle, "وفي" only loses the و
    stop_words = build_stop_words(["في"])
    assert stop_words == frozenset({"ي"})
    assert count_terms(["وفي", "في"], stop_words) == {"في": 1}


def test_never_contains_empty_or_stop_word_keys():
    stop_words = build_stop_words(["على", "هذا"])
    counts = count_terms(["على", "هذا", "", "!", "كتب", "وعلى"], stop_words)
    assert "" not in counts
    assert not set(counts) & stop_words
    assert counts == {"كتب": 1}


def test_build_stop_words_trims_and_skips_blank_lines():
    words = build_stop_words(["  من ", "", "الذي", "\n", "؟"])
    assert words == frozenset({"من", "ذي"})
    assert isinstance(words, frozenset)


def test_load_stop_words(write_text):
    path = write_text("stop.txt", "من\n\nإلى\nالذي\n")
    assert load_stop_words(str(path)) == frozenset({"من", "ي", "ذي"})


def test_load_stop_words_without_path():
    assert load_stop_words(None) == frozenset()


def test_count_stage():
    doc = Document(doc_id="d1", text="", tokens=["الكتاب", "من", "كتابه"])
    CountStage(build_stop_words(["من"])).apply(doc)
    assert doc.counts == {"كتاب": 2}
    assert doc.total_terms == 2
    assert doc.transform_chain == ["count_v1"]
