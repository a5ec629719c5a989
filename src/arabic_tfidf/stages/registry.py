"""Stage registry.

Stages are configured by name in `build.yaml` (`stages: [tokenize, count]`).
Both stages are required for a TF-IDF run; the list exists so extra per-document
stages can be slotted in without touching the runner.
"""

from __future__ import annotations
from typing import Dict, FrozenSet, List, Optional
from ..plugins.tokenizer import TokenizerAdapter
from .base import Stage
from .count import CountStage
from .tokenize_plugin import TokenizeStage

DEFAULT_STAGES = ["tokenize", "count"]

def make_stages(
    stage_names: Optional[List[str]],
    *,
    stop_words: FrozenSet[str] = frozenset(),
    tokenizer: Optional[TokenizerAdapter] = None,
) -> List[Stage]:
    """Create processing stages from configuration, in the configured order."""
    stage_names = stage_names or DEFAULT_STAGES
    name_to_stage: Dict[str, Stage] = {
        "tokenize": TokenizeStage(adapter=tokenizer),
        "count": CountStage(stop_words=stop_words),
    }

    stages = []
    for n in stage_names:
        if n not in name_to_stage:
            raise ValueError(f"Unknown stage: {n}. Register it in arabic_tfidf.stages.registry")
        stages.append(name_to_stage[n])
    return stages
