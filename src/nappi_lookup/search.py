"""
Multi-keyword AND matching over the product name index.

The index maps a lower-cased product name to the positions of every record
carrying that name. A query is split on whitespace; keywords shorter than
MIN_KEYWORD_LENGTH are ignored, and a record is returned only when every
remaining keyword occurs somewhere inside its name.
"""

from collections import defaultdict
from typing import Dict, List, Mapping, Sequence, Set

from .errors import InvalidQueryError

MIN_KEYWORD_LENGTH = 3
MIN_TERM_LENGTH = 3


def tokenize(query: str) -> List[str]:
    """Split a raw query on whitespace, keeping order."""
    return query.split()


def surviving_keywords(tokens: Sequence[str]) -> Set[str]:
    """Lower-cased keywords long enough to take part in matching."""
    return {token.lower() for token in tokens if len(token) >= MIN_KEYWORD_LENGTH}


def validate_term(term: str) -> str:
    """
    Gate applied by callers before searching.

    Raises:
        InvalidQueryError: If the term is empty or shorter than MIN_TERM_LENGTH.
    """
    if not term:
        raise InvalidQueryError("Search term is required")
    if len(term) < MIN_TERM_LENGTH:
        raise InvalidQueryError(
            f"Search term must be at least {MIN_TERM_LENGTH} characters long"
        )
    return term


def find_matching_positions(index: Mapping[str, Sequence[int]], query: str) -> List[int]:
    """
    Return the record positions whose indexed name contains every keyword.

    Every distinct indexed name is scanned for every keyword, so the cost is
    proportional to the number of distinct names. Result order follows the
    index iteration order and carries no meaning.

    Args:
        index: Lower-cased name -> record positions.
        query: Raw query string.

    Returns:
        Matching positions. Empty when the query has no keyword of
        MIN_KEYWORD_LENGTH or more characters.
    """
    tokens = tokenize(query)
    if not tokens:
        return []

    keywords = surviving_keywords(tokens)
    if not keywords:
        return []

    # position -> keywords found in its name
    matched: Dict[int, Set[str]] = defaultdict(set)

    for name, positions in index.items():
        for keyword in keywords:
            if keyword in name:
                for position in positions:
                    matched[position].add(keyword)

    return [
        position
        for position, found in matched.items()
        if len(found) == len(keywords)
    ]
