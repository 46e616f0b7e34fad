# services/search_service.py
import logging
from typing import List, Dict, Any

from fastapi import UploadFile

from config import settings
from core.domain import (
    CorpusSnapshot, Document, ErrorCode, SearchPreconditionError, SearchResult, UploadReport
)
from core.interfaces import IDocumentStore, ISearchService
from services.boolean_search import evaluate_boolean
from services.vector_search import rank_by_similarity
from utils.common import normalize_content, validate_document_content
from utils.text import tokenize

logger = logging.getLogger(settings.LOGGER_NAME)

NO_TERMS_MESSAGE = "Error: No terms defined. Please enter terms first."
NO_DOCUMENTS_MESSAGE = "Error: No documents uploaded. Please add documents first."


class SearchService(ISearchService):
    def __init__(self, store: IDocumentStore):
        self.store = store

    async def _read_upload(self, file: UploadFile) -> Document:
        """Reads one upload into a Document. Raises ValueError with a user-facing message."""
        name = file.filename or ""
        try:
            if file.size and file.size > settings.MAX_FILE_SIZE:
                raise ValueError(f"File '{name}' is too large")
            try:
                raw = await file.read()
            except Exception as e:
                logger.warning(f"Failed to read upload '{name}': {e}")
                raise ValueError(f"Error reading {name}") from e
        finally:
            await file.close()

        if len(raw) > settings.MAX_FILE_SIZE:
            raise ValueError(f"File '{name}' is too large")

        content = normalize_content(raw)
        error = validate_document_content(name, content)
        if error:
            raise ValueError(error)
        return Document(name=name, content=content)

    async def upload_documents(self, files: List[UploadFile]) -> UploadReport:
        report = UploadReport()
        accepted: List[Document] = []

        for file in files:
            try:
                accepted.append(await self._read_upload(file))
            except ValueError as e:
                logger.warning(str(e))
                report.errors.append(str(e))

        report.documents = await self.store.add_documents(accepted)
        logger.info(
            f"Upload batch: {len(files)} file(s), {len(accepted)} accepted, {len(report.errors)} rejected"
        )
        return report

    async def clear_documents(self) -> None:
        await self.store.clear()

    async def update_terms(self, raw_terms: str) -> int:
        terms = tokenize(raw_terms.lower())
        await self.store.set_terms(terms)
        logger.info(f"Terms updated. Count: {len(terms)}")
        return len(terms)

    def _check_ready(self, snapshot: CorpusSnapshot, require_terms: bool) -> None:
        if require_terms and not snapshot.terms:
            raise SearchPreconditionError(NO_TERMS_MESSAGE, ErrorCode.NO_TERMS)
        if not snapshot.documents:
            raise SearchPreconditionError(NO_DOCUMENTS_MESSAGE, ErrorCode.NO_DOCUMENTS)

    async def boolean_search(self, query: str) -> List[str]:
        async with self.store.read() as snapshot:
            self._check_ready(snapshot, require_terms=settings.REQUIRE_TERMS_FOR_BOOLEAN)
            matched = evaluate_boolean(query, snapshot.documents)

        logger.info(f"Boolean search {query!r} matched {len(matched)} document(s)")
        return sorted(matched)

    async def vector_search(self, query: str) -> List[SearchResult]:
        async with self.store.read() as snapshot:
            self._check_ready(snapshot, require_terms=False)
            results = rank_by_similarity(query, snapshot.documents)

        logger.info(f"Vector search {query!r} returned {len(results)} result(s)")
        return results

    async def list_documents(self) -> List[str]:
        return await self.store.list_names()

    async def get_status(self) -> Dict[str, Any]:
        async with self.store.read() as snapshot:
            documents_count = len(snapshot.documents)
            terms_count = len(snapshot.terms)
        return {
            "documents_count": documents_count,
            "terms_count": terms_count,
            "ready_for_queries": documents_count > 0,
        }
