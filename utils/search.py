# utils/search.py
from enum import Enum
import re

_WHITESPACE = re.compile(r'\s+')


class SearchMode(str, Enum):
    EXACT = 'exact'
    ALL_WORDS = 'all_words'

    @classmethod
    def parse(cls, value):
        """Accept a SearchMode or one of its spellings ('allWords', 'all-words', ...)"""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace('-', '_')
        if key == 'allwords':
            key = 'all_words'
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown search mode: {value!r}") from None


def split_terms(query):
    """Lowercase the query and split it on runs of whitespace"""
    return [term for term in _WHITESPACE.split(query.lower()) if term]


def compile_matcher(query, mode):
    """Build a predicate over verse text for the given query and mode.

    Returns None when the query can never match (empty or all whitespace),
    so callers can skip the scan entirely.
    """
    mode = SearchMode.parse(mode)

    if mode is SearchMode.EXACT:
        if not query.strip():
            return None
        needle = query.lower()
        return lambda text: needle in text.lower()

    terms = split_terms(query)
    if not terms:
        return None

    def match_all(text):
        lowered = text.lower()
        return all(term in lowered for term in terms)

    return match_all


def matches(text, query, mode=SearchMode.EXACT):
    matcher = compile_matcher(query, mode)
    return matcher is not None and matcher(text)
