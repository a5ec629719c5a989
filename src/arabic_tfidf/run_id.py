"""Run ID resolution: explicit or auto-generated from config.

Auto-generation uses:
- prefix_digits / suffix_digits: first/last N digits of a compact timestamp
- include_input_name: name of the first source
"""

from __future__ import annotations
import re
from datetime import datetime, timezone
from typing import Any, Dict


def _timestamp_digits(prefix: int = 8, suffix: int = 6) -> tuple[str, str]:
    """Compact timestamp YYYYMMDDHHMMSS; return (first prefix digits, last suffix digits)."""
    ts = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")
    a = ts[: min(prefix, len(ts))]
    b = ts[-min(suffix, len(ts)) :] if suffix else ""
    return (a, b)


def _input_name(cfg: Dict[str, Any]) -> str:
    sources = cfg.get("sources") or []
    name = (sources[0].get("name") if sources else None) or "run"
    name = re.sub(r"[^\w\-]", "_", str(name))
    return name or "run"


def generate_run_id(cfg: Dict[str, Any], auto_cfg: Dict[str, Any]) -> str:
    """Build run_id from run.run_id_auto config.

    auto_cfg may contain:
    - prefix_digits: first N digits of timestamp (default 8 -> date)
    - suffix_digits: last N digits of timestamp (default 6 -> time)
    - include_input_name: bool, include name of first source (default True)
    - separator: string between parts (default "_")
    """
    prefix_digits = int(auto_cfg.get("prefix_digits", 8))
    suffix_digits = int(auto_cfg.get("suffix_digits", 6))
    include_input_name = auto_cfg.get("include_input_name", True)
    separator = str(auto_cfg.get("separator", "_"))

    parts: list[str] = []
    if include_input_name:
        parts.append(_input_name(cfg))
    pre, suf = _timestamp_digits(prefix_digits, suffix_digits)
    if pre:
        parts.append(pre)
    if suf:
        parts.append(suf)
    return separator.join(parts) if parts else "run"


def resolve_run_id(cfg: Dict[str, Any]) -> str:
    """Return run_id: explicit run.run_id, or auto-generated from run.run_id_auto, or 'run'."""
    run = cfg.get("run") or {}
    explicit = run.get("run_id")
    if explicit is not None and str(explicit).strip():
        return str(explicit).strip()
    auto_cfg = run.get("run_id_auto")
    if isinstance(auto_cfg, dict) and auto_cfg.get("enabled", True):
        return generate_run_id(cfg, auto_cfg)
    return "run"


def resolve_out_dir(cfg: Dict[str, Any], run_id: str) -> str:
    """Return out_dir with {run_id} placeholder replaced by the resolved run_id."""
    run = cfg.get("run") or {}
    out_dir = run.get("out_dir") or "storage"
    return out_dir.replace("{run_id}", run_id)
