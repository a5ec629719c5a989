"""Stage plugin interface.

Stages must:
- accept a Document
- fill in the derived field they own
- emit a transform_chain entry (for auditability)

Stages never drop documents: an empty document still counts toward the corpus
size used by IDF.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from ..pipeline.context import Document

class Stage(ABC):
    name: str = "stage"

    @abstractmethod
    def apply(self, doc: Document) -> None:
        ...
