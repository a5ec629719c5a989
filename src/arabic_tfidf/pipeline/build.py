"""Pipeline build runner.

Local runner:
- loads stop words and the corpus (ordered, names unique)
- runs per-document stages (tokenize -> count), optionally on a thread pool
- computes IDF once over the whole corpus, then TF-IDF per document
- writes the configured report formats and a run manifest

`score_corpus` is the in-memory entrypoint (no files, no logging setup);
`build_local` is what the CLI runs.
"""

from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Tuple
import logging
import os
import time
from tqdm import tqdm

from ..analytics.summary import corpus_summary
from ..pipeline.context import Document
from ..plugins.registry import make_tokenizer
from ..plugins.tokenizer import TokenizerAdapter
from ..policies.stop_words import load_stop_words
from ..run_id import resolve_out_dir, resolve_run_id
from ..scoring.tfidf import compute_idf, compute_tfidf
from ..sources.base import SourceSpec
from ..sources.registry import make_source
from ..stages.base import Stage
from ..stages.registry import make_stages
from ..storage.writer import write_manifest
from ..writers.registry import get_report_writer

log = logging.getLogger("arabic_tfidf.build")

Occurrences = Dict[str, Dict[str, int]]
Scores = Dict[str, Dict[str, float]]

@dataclass
class RunResult:
    run_id: str
    out_dir: str
    occurrences: Occurrences
    idf: Dict[str, float]
    tfidf: Scores
    tokenizer: str
    reports: Dict[str, str] = field(default_factory=dict)
    manifest_path: Optional[str] = None

def load_corpus(source_cfgs: List[Dict[str, Any]]) -> List[Document]:
    """Read all configured sources into Documents, in config order."""
    if not source_cfgs:
        raise ValueError("No sources configured. Add at least one entry under `sources`.")

    docs: List[Document] = []
    seen: Dict[str, str] = {}
    for s_cfg in source_cfgs:
        spec = SourceSpec(**s_cfg)
        src = make_source(spec)
        log.info(f"Reading source={spec.name} kind={spec.kind} meta={src.metadata()}")
        for raw in src.stream():
            if raw.raw_id in seen:
                raise ValueError(
                    f"Duplicate document name '{raw.raw_id}' "
                    f"(sources {seen[raw.raw_id]} and {spec.name})"
                )
            seen[raw.raw_id] = spec.name
            docs.append(Document(
                doc_id=raw.raw_id,
                text=raw.text,
                source=raw.source,
                source_file=raw.extra.get("source_file"),
            ))
    log.info(f"Corpus loaded: {len(docs)} documents")
    return docs

def _apply_stages(doc: Document, stages: List[Stage]) -> Document:
    for st in stages:
        st.apply(doc)
    return doc

def process_documents(
    docs: List[Document],
    stages: List[Stage],
    *,
    workers: int = 1,
    progress: bool = False,
) -> List[Document]:
    """Run stages on every document. Output order always equals input order."""
    if workers <= 1 or len(docs) <= 1:
        return [_apply_stages(d, stages) for d in tqdm(docs, desc="documents", disable=not progress)]

    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = pool.map(lambda d: _apply_stages(d, stages), docs)
        return list(tqdm(results, total=len(docs), desc="documents", disable=not progress))

def score_documents(docs: List[Document]) -> Tuple[Occurrences, Dict[str, float], Scores]:
    """Occurrence map, IDF and TF-IDF for already-counted documents."""
    occurrences: Occurrences = {d.doc_id: d.counts for d in docs}
    idf = compute_idf(occurrences)
    tfidf = compute_tfidf(occurrences, idf=idf)
    return occurrences, idf, tfidf

def score_corpus(
    corpus: Mapping[str, str],
    *,
    stop_words: FrozenSet[str] = frozenset(),
    tokenizer: Optional[TokenizerAdapter] = None,
    workers: int = 1,
) -> Tuple[Occurrences, Scores]:
    """Score an in-memory corpus (name -> raw text). Returns (occurrences, tfidf)."""
    docs = [Document(doc_id=name, text=text or "") for name, text in corpus.items()]
    stages = make_stages(None, stop_words=stop_words, tokenizer=tokenizer)
    process_documents(docs, stages, workers=workers)
    occurrences, _, tfidf = score_documents(docs)
    return occurrences, tfidf

def build_local(
    cfg: Dict[str, Any],
    *,
    run_id: Optional[str] = None,
    out_dir: Optional[str] = None,
    config_path: Optional[str] = None,
) -> RunResult:
    run_id = run_id or resolve_run_id(cfg)
    out_dir = out_dir or resolve_out_dir(cfg, run_id)
    start_time_ms = int(time.time() * 1000)

    execution = cfg.get("execution") or {}
    workers = int(execution.get("workers", 1))
    progress = bool(execution.get("progress", False))

    output = cfg.get("output") or {}
    formats = output.get("formats") or ["text"]
    basename = output.get("report_name") or "resultats_tfidf"
    # Resolve writers before any work so a typo fails fast.
    writers = [get_report_writer(f) for f in formats]

    stop_words = load_stop_words(cfg.get("stop_words"))

    tokenizer_name = (cfg.get("tokenizer") or {}).get("name", "camel")
    tokenizer = make_tokenizer(tokenizer_name)
    tokenizer_used = tokenizer.info.name if tokenizer is not None else "fallback"
    log.info(f"Tokenizer requested={tokenizer_name} using={tokenizer_used}")

    stages = make_stages(cfg.get("stages"), stop_words=stop_words, tokenizer=tokenizer)
    docs = load_corpus(cfg.get("sources") or [])

    log.info(f"Processing {len(docs)} documents with workers={workers}")
    process_documents(docs, stages, workers=workers, progress=progress)
    for d in docs:
        log.debug(f"doc={d.doc_id} tokens={len(d.tokens)} terms={len(d.counts)} chain={d.transform_chain}")
        if not d.counts:
            log.warning(f"Document {d.doc_id} has no terms after normalization and stop-word removal")

    occurrences, idf, tfidf = score_documents(docs)
    log.info(f"Scored corpus: docs={len(occurrences)} vocab={len(idf)}")

    reports_dir = os.path.join(out_dir, "reports")
    reports: Dict[str, str] = {}
    for w in writers:
        path = w.write(occurrences, tfidf, out_dir=reports_dir, basename=basename)
        reports[w.name] = path
        log.info(f"Report written format={w.name} path={path}")

    manifest_path = os.path.join(out_dir, "manifests", f"{run_id}.json")
    manifest = {
        "run_id": run_id,
        "start_time_ms": start_time_ms,
        "end_time_ms": int(time.time() * 1000),
        "config_path": config_path,
        "tokenizer": {"requested": tokenizer_name, "used": tokenizer_used},
        "stop_words": {"path": cfg.get("stop_words"), "count": len(stop_words)},
        "documents": [
            {
                "doc_id": d.doc_id,
                "source": d.source,
                "source_file": d.source_file,
                "tokens": len(d.tokens),
                "terms": len(d.counts),
                "total_terms": d.total_terms,
                "transform_chain": d.transform_chain,
            }
            for d in docs
        ],
        "summary": corpus_summary(occurrences, tfidf),
        "outputs": reports,
    }
    write_manifest(manifest_path, manifest)
    log.info(f"Build complete. manifest={manifest_path}")

    return RunResult(
        run_id=run_id,
        out_dir=out_dir,
        occurrences=occurrences,
        idf=idf,
        tfidf=tfidf,
        tokenizer=tokenizer_used,
        reports=reports,
        manifest_path=manifest_path,
    )
