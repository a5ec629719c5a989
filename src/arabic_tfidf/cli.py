"""CLI entrypoint.

Commands:
- `arabic-tfidf build --config configs/build.yaml [--workers N] [--format text --format parquet]`
- `arabic-tfidf normalize WORD [WORD ...]`
- `arabic-tfidf list-plugins`
"""

from __future__ import annotations
import argparse
import os
from .logging_ import setup_logging
from .pipeline.build import build_local
from .plugins.registry import list_tokenizers
from .policies.loader import load_yaml
from .run_id import resolve_out_dir, resolve_run_id
from .sources.registry import list_sources
from .utils.text import normalize_arabic
from .writers.registry import list_report_writers

def main() -> None:
    p = argparse.ArgumentParser(prog="arabic-tfidf")
    sub = p.add_subparsers(dest="cmd", required=True)

    pb = sub.add_parser("build", help="Score a corpus and write reports")
    pb.add_argument("--config", required=True)
    pb.add_argument("--workers", type=int, default=None, help="Override execution.workers")
    pb.add_argument("--format", action="append", dest="formats", metavar="NAME", help="Report format (repeatable); overrides output.formats")
    pb.add_argument("--tokenizer", default=None, help="Override tokenizer.name (use 'none' for the fallback splitter)")

    pn = sub.add_parser("normalize", help="Show the normalized form of words")
    pn.add_argument("words", nargs="+")

    sub.add_parser("list-plugins", help="List registered sources, tokenizers and report writers")

    args = p.parse_args()

    if args.cmd == "normalize":
        for w in args.words:
            print(f"{w}\t{normalize_arabic(w)}")
        return

    if args.cmd == "list-plugins":
        print("sources:   " + ", ".join(f"{k} ({v})" for k, v in list_sources().items()))
        print("tokenizers: " + ", ".join(list_tokenizers()))
        print("writers:   " + ", ".join(list_report_writers()))
        return

    cfg = load_yaml(args.config)
    if args.workers is not None:
        cfg["execution"] = {**(cfg.get("execution") or {}), "workers": args.workers}
    if args.formats:
        cfg["output"] = {**(cfg.get("output") or {}), "formats": args.formats}
    if args.tokenizer is not None:
        cfg["tokenizer"] = {"name": args.tokenizer}

    run_id = resolve_run_id(cfg)
    out_dir = resolve_out_dir(cfg, run_id)
    setup_logging(out_dir=out_dir, run_id=run_id)

    result = build_local(cfg, run_id=run_id, out_dir=out_dir, config_path=os.path.abspath(args.config))
    for fmt, path in result.reports.items():
        print(f"{fmt}: {path}")
