# api/endpoints.py
"""
API endpoints for the document search service.

The corpus is held in memory only: uploads are lost on restart and there is
no per-document deletion, only a full clear.
"""
from datetime import datetime, timezone
from typing import List

from fastapi import APIRouter, UploadFile, File, HTTPException, Depends

from config import settings
from core.domain import SearchPreconditionError
from core.interfaces import ISearchService
from services.factory import get_search_service
from api.schemas import (
    UpdateTermsRequest,
    UpdateTermsResponse,
    SearchRequest,
    RankedDocument,
    BooleanSearchResponse,
    VectorSearchResponse,
    UploadResponse,
    DocumentsListResponse,
    StatusResponse,
    ClearResponse,
)

router = APIRouter()


# ---------- Helper: query length guard ----------
def _validate_query(query: str) -> None:
    if len(query) > settings.MAX_QUERY_LENGTH:
        raise HTTPException(
            status_code=422,
            detail=f"Search query must be at most {settings.MAX_QUERY_LENGTH} characters",
        )


# ---------- Terms ----------
@router.post("/api/update-terms", response_model=UpdateTermsResponse)
async def update_terms(
    request: UpdateTermsRequest,
    search_service: ISearchService = Depends(get_search_service),
) -> UpdateTermsResponse:
    count = await search_service.update_terms(request.raw_terms)
    return UpdateTermsResponse(status="success", terms_count=count)


# ---------- Upload ----------
@router.post("/api/upload-doc", response_model=UploadResponse)
async def upload_documents(
    documents: List[UploadFile] = File(...),
    search_service: ISearchService = Depends(get_search_service),
) -> UploadResponse:
    # Rejected files are reported in `errors`; the request itself still succeeds
    report = await search_service.upload_documents(documents)
    return UploadResponse(documents=report.documents, errors=report.errors)


# ---------- Clear all documents ----------
@router.post("/api/clear-docs", response_model=ClearResponse)
async def clear_documents(
    search_service: ISearchService = Depends(get_search_service),
) -> ClearResponse:
    await search_service.clear_documents()
    return ClearResponse(status="success", message="All documents cleared successfully")


# ---------- Search (boolean) ----------
@router.post("/api/search/boolean", response_model=BooleanSearchResponse)
async def boolean_search(
    request: SearchRequest,
    search_service: ISearchService = Depends(get_search_service),
) -> BooleanSearchResponse:
    _validate_query(request.query)
    try:
        names = await search_service.boolean_search(request.query)
    except SearchPreconditionError as e:
        raise HTTPException(status_code=400, detail=e.message)

    return BooleanSearchResponse(query=request.query, documents=names, total_results=len(names))


# ---------- Search (vector space) ----------
@router.post("/api/search/vector", response_model=VectorSearchResponse)
async def vector_search(
    request: SearchRequest,
    search_service: ISearchService = Depends(get_search_service),
) -> VectorSearchResponse:
    _validate_query(request.query)
    try:
        results = await search_service.vector_search(request.query)
    except SearchPreconditionError as e:
        raise HTTPException(status_code=400, detail=e.message)

    ranked = [RankedDocument(file_name=r.file_name, score=r.score) for r in results]
    return VectorSearchResponse(query=request.query, results=ranked, total_results=len(ranked))


# ---------- List documents ----------
@router.get("/api/documents", response_model=DocumentsListResponse)
async def list_documents(
    search_service: ISearchService = Depends(get_search_service),
) -> DocumentsListResponse:
    return DocumentsListResponse(documents=await search_service.list_documents())


# ---------- Service status ----------
@router.get("/api/status", response_model=StatusResponse)
async def get_status(
    search_service: ISearchService = Depends(get_search_service),
) -> StatusResponse:
    status = await search_service.get_status()
    return StatusResponse(**status)


# ---------- Health Check ----------
@router.get("/health")
async def health_check(search_service: ISearchService = Depends(get_search_service)):
    """
    System health check endpoint.

    Returns:
        - status: healthy
        - timestamp: When check was performed
        - documents_indexed: Number of documents in the corpus
    """
    status = await search_service.get_status()
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "documents_indexed": status["documents_count"],
    }
