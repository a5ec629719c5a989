"""Source registry.

Adding a new source:
1) implement a DataSource subclass in `arabic_tfidf.sources.*`
2) register it here under a new `kind` key (static) OR use register_source() (dynamic)
3) reference it in build.yaml
"""

from __future__ import annotations
from typing import Callable, Dict
from .base import DataSource, SourceSpec
from .inline import InlineSource
from .local_jsonl import LocalJSONLSource
from .local_text import LocalTextSource

# Static registry (built-in sources)
_STATIC_REGISTRY: Dict[str, Callable[[SourceSpec], DataSource]] = {
    "inline": lambda spec: InlineSource(spec),
    "local_jsonl": lambda spec: LocalJSONLSource(spec),
    "local_text": lambda spec: LocalTextSource(spec),
}

# Dynamic registry (plugins/extensions)
_DYNAMIC_REGISTRY: Dict[str, Callable[[SourceSpec], DataSource]] = {}

def register_source(kind: str, factory: Callable[[SourceSpec], DataSource]) -> None:
    """Register a new source type dynamically.

    Example:
        from arabic_tfidf.sources.registry import register_source

        register_source("s3_text", lambda spec: S3TextSource(spec))
    """
    if kind in _STATIC_REGISTRY:
        raise ValueError(f"Source kind '{kind}' is already registered statically. Use a different name.")
    _DYNAMIC_REGISTRY[kind] = factory

def unregister_source(kind: str) -> None:
    """Unregister a dynamically registered source."""
    _DYNAMIC_REGISTRY.pop(kind, None)

def list_sources() -> Dict[str, str]:
    """List all registered sources (static + dynamic)."""
    all_sources = {kind: "static" for kind in _STATIC_REGISTRY}
    all_sources.update({kind: "dynamic" for kind in _DYNAMIC_REGISTRY})
    return all_sources

def make_source(spec: SourceSpec) -> DataSource:
    """Create a source instance from spec. Static registry wins over dynamic."""
    if spec.kind in _STATIC_REGISTRY:
        return _STATIC_REGISTRY[spec.kind](spec)
    if spec.kind in _DYNAMIC_REGISTRY:
        return _DYNAMIC_REGISTRY[spec.kind](spec)

    available = list(_STATIC_REGISTRY.keys()) + list(_DYNAMIC_REGISTRY.keys())
    raise ValueError(
        f"Unknown source kind: {spec.kind}. "
        f"Available: {available}. "
        f"Register dynamically with register_source() or add to registry.py"
    )
