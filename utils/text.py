# utils/text.py
from typing import List


def tokenize(text: str) -> List[str]:
    """Splits text on runs of whitespace. No punctuation stripping, no case folding."""
    return text.split()
