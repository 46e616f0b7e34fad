# services/boolean_search.py
"""
Boolean keyword search over the in-memory corpus.

Grammar (disjunctive normal form, no nesting):

    query    := conjunct ("or" conjunct)*
    conjunct := literal ("and" literal)*
    literal  := term | "not(" term ")"

`or` and `and` are operators only as standalone words, so terms such as
"sandbox" or "fork" are never split. The one exception is `and` written
straight after a closing `not(...)`, as in "not(red)and not(blue)".
`not(...)` wraps exactly one term: no nested parentheses, no operators.
Words written next to each other without an operator form one literal
("red blue"), which cannot match a single term.
"""
import re
import logging
from typing import List, Optional, Sequence, Set

from config import settings
from core.domain import BooleanQuery, Conjunct, Document, Literal
from utils.text import tokenize

logger = logging.getLogger(settings.LOGGER_NAME)

# A not(...) group holds one term, optionally padded with whitespace, and ends
# at whitespace, end of input or a glued "and"
_TOKEN_RE = re.compile(r"not\(\s*[^()\s]*\s*\)(?=\s|$|and(?:\s|$))|\S+")
_NOT_RE = re.compile(r"not\((?P<term>\s*[^()\s]*\s*)\)")

OR_OPERATOR = "or"
AND_OPERATOR = "and"


def _build_literal(tokens: List[str]) -> Optional[Literal]:
    if not tokens:
        return None
    if len(tokens) == 1:
        negation = _NOT_RE.fullmatch(tokens[0])
        if negation:
            return Literal(term=negation.group("term").strip(), negated=True)
    return Literal(term=" ".join(tokens))


def parse_boolean_query(query: str) -> BooleanQuery:
    """Lower-cases and parses a query into OR-of-AND-groups. Never raises."""
    parsed = BooleanQuery()
    literals: List[Literal] = []
    pending: List[str] = []

    def flush() -> None:
        literal = _build_literal(pending)
        if literal is not None:
            literals.append(literal)
        pending.clear()

    for token in _TOKEN_RE.findall(query.lower()):
        if token == OR_OPERATOR:
            flush()
            parsed.conjuncts.append(Conjunct(literals))
            literals = []
        elif token == AND_OPERATOR:
            flush()
        else:
            pending.append(token)

    flush()
    parsed.conjuncts.append(Conjunct(literals))
    return parsed


def get_docs_for_term(term: str, negated: bool, corpus: Sequence[Document]) -> Set[str]:
    """Names of documents that contain `term`, or that lack it when negated."""
    return {
        doc.name
        for doc in corpus
        if (term in tokenize(doc.content)) != negated
    }


def evaluate_conjunct(conjunct: Conjunct, corpus: Sequence[Document]) -> Set[str]:
    result: Optional[Set[str]] = None
    for literal in conjunct.literals:
        docs = get_docs_for_term(literal.term, literal.negated, corpus)
        result = docs if result is None else result & docs
    return result if result is not None else set()


def evaluate_boolean(query: str, corpus: Sequence[Document]) -> Set[str]:
    """
    Evaluate a boolean query against the corpus.

    Args:
        query: Raw query text, lower-cased here
        corpus: Documents to match; the caller holds the store lock

    Returns:
        Unordered set of matching document names
    """
    parsed = parse_boolean_query(query)
    matched: Set[str] = set()
    for conjunct in parsed.conjuncts:
        matched |= evaluate_conjunct(conjunct, corpus)

    logger.debug(
        f"Boolean query {query!r}: {len(parsed.conjuncts)} conjunct(s), {len(matched)} match(es)"
    )
    return matched
