# core/domain.py
"""Domain models and enumerations shared across the application."""
from enum import Enum

from dataclasses import dataclass, field
from typing import List, Tuple

# ============= Enums =============

class ErrorCode(str, Enum):
    """Error codes for user-facing error messages."""
    NO_DOCUMENTS = "NO_DOCUMENTS"
    NO_TERMS = "NO_TERMS"


# ============= Exceptions =============

class SearchPreconditionError(Exception):
    """Raised when the corpus is not in a state that allows searching"""

    def __init__(self, message: str, error_code: ErrorCode):
        self.message = message
        self.error_code = error_code
        super().__init__(message)

    def __str__(self):
        # Format used for logging
        return f"[{self.error_code.value}] {self.message}"


# ============= Domain Models =============

@dataclass(frozen=True)
class Document:
    """A stored text document. Content is lower-cased at ingestion."""
    name: str
    content: str


@dataclass(frozen=True)
class CorpusSnapshot:
    """Read-only view of the store, valid while the store lock is held"""
    documents: Tuple[Document, ...] = ()
    terms: Tuple[str, ...] = ()


@dataclass
class SearchResult:
    """Ranked search hit"""
    file_name: str
    score: float


@dataclass
class UploadReport:
    """Outcome of an upload batch: every stored name plus per-file rejections"""
    documents: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


# ============= Boolean Query AST =============

@dataclass(frozen=True)
class Literal:
    term: str
    negated: bool = False


@dataclass
class Conjunct:
    """AND-group of literals"""
    literals: List[Literal] = field(default_factory=list)


@dataclass
class BooleanQuery:
    """OR of AND-groups (disjunctive normal form)"""
    conjuncts: List[Conjunct] = field(default_factory=list)
