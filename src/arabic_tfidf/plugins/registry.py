"""Plugin registry.

This enables new tokenizers without modifying core pipeline code.

Tokenizers are registered as factories, not instances: an external tokenizer may
fail while it is being constructed (missing package, missing model data), and
that failure has to be observable here so it can be downgraded to "no tokenizer".

For now, we keep a simple in-process registry.
"""

from __future__ import annotations
import logging
from typing import Callable, Dict, List, Optional
from .tokenizer import TokenizerAdapter, WhitespaceTokenizer

log = logging.getLogger("arabic_tfidf.plugins")

TokenizerFactory = Callable[[], TokenizerAdapter]

def _make_camel() -> TokenizerAdapter:
    from .camel import CamelTokenizer
    return CamelTokenizer()

_TOKENIZERS: Dict[str, TokenizerFactory] = {
    "camel": _make_camel,
    "whitespace": WhitespaceTokenizer,
}

# Names that explicitly select the built-in fallback splitter.
_NO_TOKENIZER = {"", "none", "fallback"}

def register_tokenizer(name: str, factory: TokenizerFactory) -> None:
    """Register a tokenizer factory under `name` (replaces an existing one)."""
    _TOKENIZERS[name] = factory

def unregister_tokenizer(name: str) -> None:
    _TOKENIZERS.pop(name, None)

def list_tokenizers() -> List[str]:
    return list(_TOKENIZERS.keys())

def make_tokenizer(name: Optional[str]) -> Optional[TokenizerAdapter]:
    """Construct the tokenizer registered under `name`.

    Returns None when no tokenizer is requested or when construction fails;
    callers then use the fallback splitter. Unknown names are configuration
    errors and raise.
    """
    if name is None or name.strip().lower() in _NO_TOKENIZER:
        return None
    if name not in _TOKENIZERS:
        raise ValueError(
            f"Unknown tokenizer: {name}. "
            f"Available: {list(_TOKENIZERS)}. "
            f"Register with register_tokenizer()"
        )
    try:
        return _TOKENIZERS[name]()
    except Exception as e:
        log.warning(f"Tokenizer '{name}' unavailable ({type(e).__name__}: {e}); using fallback splitter")
        return None
