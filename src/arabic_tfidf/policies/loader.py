"""Config loader.

Build configs are YAML files with simple keys read through `dict.get` defaults.
Keeping them in YAML allows:
- versioned configuration across runs
- swapping corpora / stop-word lists without code changes
"""

from __future__ import annotations
from typing import Any, Dict
import yaml

def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}
