# infrastructure/document_store.py
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List

from core.domain import CorpusSnapshot, Document
from core.interfaces import IDocumentStore
from config import settings

logger = logging.getLogger(settings.LOGGER_NAME)

class InMemoryDocumentStore(IDocumentStore):
    """
    In-memory corpus guarded by a single asyncio.Lock().

    - Reads and writes share the same exclusive lock
    - Insertion order is preserved; names are unique
    - Lost on server restart
    """

    def __init__(self):
        self._documents: List[Document] = []
        self._terms: List[str] = []
        self._lock = asyncio.Lock()  # Protects documents and terms

    async def add_documents(self, documents: List[Document]) -> List[str]:
        async with self._lock:
            known = {doc.name for doc in self._documents}
            added = 0
            for doc in documents:
                if doc.name in known:
                    logger.debug(f"Skipping duplicate document '{doc.name}'")
                    continue
                self._documents.append(doc)
                known.add(doc.name)
                added += 1

            logger.info(f"Stored {added} new document(s), corpus size is {len(self._documents)}")
            return [doc.name for doc in self._documents]

    async def clear(self) -> None:
        async with self._lock:
            removed = len(self._documents)
            self._documents = []
        logger.info(f"Cleared {removed} document(s)")

    async def set_terms(self, terms: List[str]) -> None:
        async with self._lock:
            self._terms = list(terms)

    @asynccontextmanager
    async def read(self) -> AsyncIterator[CorpusSnapshot]:
        async with self._lock:
            yield CorpusSnapshot(documents=tuple(self._documents), terms=tuple(self._terms))

    async def count(self) -> int:
        async with self._lock:
            return len(self._documents)

    async def list_names(self) -> List[str]:
        async with self._lock:
            return [doc.name for doc in self._documents]
