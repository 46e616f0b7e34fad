# services/factory.py
from fastapi import Depends

from core.interfaces import IDocumentStore, ISearchService
from infrastructure.document_store import InMemoryDocumentStore
from services.search_service import SearchService

# Global instance: the corpus lives for the lifetime of the process
document_store = InMemoryDocumentStore()

def get_document_store() -> IDocumentStore:
    """Return the process-wide document store."""
    return document_store

# Main service provider using FastAPI DI
def get_search_service(
    store: IDocumentStore = Depends(get_document_store),
) -> ISearchService:
    """
    Create search service with injected store.

    Override get_document_store in app.dependency_overrides to give tests an isolated corpus.
    """
    return SearchService(store=store)
