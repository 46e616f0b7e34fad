# api/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import List

class UpdateTermsRequest(BaseModel):
    raw_terms: str

class UpdateTermsResponse(BaseModel):
    status: str
    terms_count: int

class SearchRequest(BaseModel):
    query: str

class RankedDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    file_name: str = Field(alias="fileName")
    score: float

class BooleanSearchResponse(BaseModel):
    query: str
    documents: List[str]
    total_results: int

class VectorSearchResponse(BaseModel):
    query: str
    results: List[RankedDocument]
    total_results: int

class UploadResponse(BaseModel):
    documents: List[str]
    errors: List[str]

class DocumentsListResponse(BaseModel):
    documents: List[str]

class StatusResponse(BaseModel):
    documents_count: int = 0
    terms_count: int = 0
    ready_for_queries: bool = False

class ClearResponse(BaseModel):
    status: str
    message: str
