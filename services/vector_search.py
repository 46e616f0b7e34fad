# services/vector_search.py
"""Vector-space ranking: term-frequency vectors compared by cosine similarity"""
import logging
from collections import Counter
from typing import List, Sequence

import numpy as np

from config import settings
from core.domain import Document, SearchResult
from utils.text import tokenize

logger = logging.getLogger(settings.LOGGER_NAME)

QUERY_DOCUMENT_NAME = "query"


def build_vocabulary(corpus: Sequence[Document], query_terms: Sequence[str]) -> List[str]:
    """Distinct corpus and query terms in sorted order. Rebuilt for every query."""
    vocabulary = set(query_terms)
    for doc in corpus:
        vocabulary.update(tokenize(doc.content))
    return sorted(vocabulary)


def term_frequency(term: str, document: Document) -> float:
    """Occurrences of `term` divided by the document's term count (0.0 for an empty document)."""
    terms = tokenize(document.content)
    if not terms:
        return 0.0
    return terms.count(term) / len(terms)


def inverse_document_frequency(term: str, corpus: Sequence[Document]) -> float:
    # Constant weighting: ranking uses raw term frequency only
    return 1.0


def term_vector(document: Document, vocabulary: Sequence[str], corpus: Sequence[Document]) -> np.ndarray:
    """TF * IDF coordinates of `document` over `vocabulary`, in vocabulary order."""
    terms = tokenize(document.content)
    vector = np.zeros(len(vocabulary), dtype=np.float64)
    if not terms:
        return vector

    counts = Counter(terms)
    total = len(terms)
    for i, term in enumerate(vocabulary):
        vector[i] = (counts[term] / total) * inverse_document_frequency(term, corpus)
    return vector


def cosine_similarity(query_vector: np.ndarray, doc_vector: np.ndarray) -> float:
    """dot(q, d) / (|q| * |d|); 0.0 for mismatched lengths or zero-magnitude vectors."""
    if query_vector.shape != doc_vector.shape:
        return 0.0

    query_norm = np.linalg.norm(query_vector)
    doc_norm = np.linalg.norm(doc_vector)
    if query_norm == 0.0 or doc_norm == 0.0:
        return 0.0

    return float(np.dot(query_vector, doc_vector) / (query_norm * doc_norm))


def rank_by_similarity(query: str, corpus: Sequence[Document]) -> List[SearchResult]:
    """
    Score every document against the query and return positive hits.

    Args:
        query: Raw query text, lower-cased here
        corpus: Documents to rank; the caller holds the store lock

    Returns:
        Results sorted by score descending, then by file name
    """
    query_terms = tokenize(query.lower())
    if not query_terms:
        return []

    vocabulary = build_vocabulary(corpus, query_terms)
    query_doc = Document(name=QUERY_DOCUMENT_NAME, content=" ".join(query_terms))
    query_vector = term_vector(query_doc, vocabulary, corpus)
    logger.debug(f"Ranking {len(corpus)} document(s) over {len(vocabulary)} vocabulary terms")

    results: List[SearchResult] = []
    for doc in corpus:
        score = cosine_similarity(query_vector, term_vector(doc, vocabulary, corpus))
        if score > 0.0:
            # Rounding can push identical directions just past 1.0
            results.append(SearchResult(file_name=doc.name, score=min(score, 1.0)))

    results.sort(key=lambda r: (-r.score, r.file_name))
    return results
