# core/interfaces.py
"""Core interfaces for the document search system"""
from abc import ABC, abstractmethod
from typing import AsyncContextManager, Dict, Any, List

from fastapi import UploadFile

from core.domain import CorpusSnapshot, Document, SearchResult, UploadReport

# ============= Document Store Interface =============
class IDocumentStore(ABC):
    """
    Interface for the shared document corpus and recognized-terms list.

    One exclusive lock guards every read and write. Implementations must hold
    it for the whole `read()` block so callers see a corpus that cannot change
    mid-computation.
    """

    @abstractmethod
    async def add_documents(self, documents: List[Document]) -> List[str]:
        """
        Append documents whose name is not stored yet (later duplicates are dropped).

        Returns:
            All document names in insertion order after the batch.
        """
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Remove every document. Recognized terms are kept."""
        pass

    @abstractmethod
    async def set_terms(self, terms: List[str]) -> None:
        """Replace the recognized-terms list"""
        pass

    @abstractmethod
    def read(self) -> AsyncContextManager[CorpusSnapshot]:
        """Acquire the lock and yield a snapshot; released when the block exits."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Get number of stored documents"""
        pass

    @abstractmethod
    async def list_names(self) -> List[str]:
        """List document names in insertion order"""
        pass

# ============= Service Layer Interfaces =============
class ISearchService(ABC):
    """High-level upload and search operations"""

    store: IDocumentStore

    @abstractmethod
    async def upload_documents(self, files: List[UploadFile]) -> UploadReport:
        """Validate and store uploaded files; rejected files are reported, not raised."""
        pass

    @abstractmethod
    async def clear_documents(self) -> None:
        """Clear the corpus"""
        pass

    @abstractmethod
    async def update_terms(self, raw_terms: str) -> int:
        """Replace recognized terms from free text, returns the new term count"""
        pass

    @abstractmethod
    async def boolean_search(self, query: str) -> List[str]:
        """Names of documents matching a DNF boolean query"""
        pass

    @abstractmethod
    async def vector_search(self, query: str) -> List[SearchResult]:
        """Documents ranked by cosine similarity, best first"""
        pass

    @abstractmethod
    async def list_documents(self) -> List[str]:
        """List stored document names"""
        pass

    @abstractmethod
    async def get_status(self) -> Dict[str, Any]:
        """Get system status"""
        pass
