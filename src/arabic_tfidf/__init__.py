"""arabic_tfidf

TF-IDF scoring for small Arabic corpora, with a fixed token normalization and
light-stemming chain applied before counting.

Public API surface:
- arabic_tfidf.cli.main : CLI entrypoint
- arabic_tfidf.utils.text.normalize_arabic : token normalizer
- arabic_tfidf.scoring.tfidf : compute_tf / compute_idf / compute_tfidf
- arabic_tfidf.pipeline.build.score_corpus / build_local : run pipeline
- arabic_tfidf.sources / plugins / writers : add corpora, tokenizers, report formats
"""
__all__ = ["__version__"]
__version__ = "0.1.0"
