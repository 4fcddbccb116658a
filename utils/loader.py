# utils/loader.py
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Union
import json
import logging

from .errors import CorpusUnavailable, InvalidCorpus
from .verse_index import VerseIndex

logger = logging.getLogger(__name__)

Corpus = Dict[str, Dict[str, Dict[str, str]]]


@dataclass(frozen=True)
class CorpusLoaded:
    corpus: Corpus
    source: str
    ok = True


@dataclass(frozen=True)
class CorpusLoadFailed:
    source: str
    reason: str
    ok = False


LoadResult = Union[CorpusLoaded, CorpusLoadFailed]


def _shape_error(data):
    """Describe the first place the document departs from book -> chapter -> verse -> text"""
    if not isinstance(data, dict):
        return "top-level value must be an object of books"
    for book, chapters in data.items():
        if not isinstance(chapters, dict):
            return f"book {book!r} must be an object of chapters"
        for chapter, verses in chapters.items():
            if not isinstance(verses, dict):
                return f"chapter {book} {chapter} must be an object of verses"
            for verse, text in verses.items():
                if not isinstance(text, str) or not text.strip():
                    return f"verse {book} {chapter}:{verse} must be non-empty text"
    return None


def load_corpus(path) -> LoadResult:
    """Read a Bible JSON document, preserving its key order.

    Never raises for a missing file, bad JSON or a malformed document;
    the failure is returned instead.
    """
    source = str(path)
    try:
        with open(Path(path), 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.error(f"Bible data file not found: {source}")
        return CorpusLoadFailed(source, "file not found")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading Bible data from {source}: {str(e)}")
        return CorpusLoadFailed(source, f"unreadable: {e}")
    except json.JSONDecodeError as e:
        logger.error(f"Error loading Bible data: invalid JSON in {source}: {str(e)}")
        return CorpusLoadFailed(source, f"invalid JSON: {e}")

    problem = _shape_error(data)
    if problem:
        logger.error(f"Error loading Bible data from {source}: {problem}")
        return CorpusLoadFailed(source, problem)

    verse_count = sum(len(verses) for chapters in data.values() for verses in chapters.values())
    logger.info(f"Bible data loaded successfully: {len(data)} books, {verse_count} verses from {source}")
    return CorpusLoaded(data, source)


def build_index(path):
    """Load the corpus at path and index it, or raise CorpusUnavailable"""
    result = load_corpus(path)
    if not result.ok:
        raise CorpusUnavailable(result.source, result.reason)
    try:
        return VerseIndex(result.corpus)
    except InvalidCorpus as e:
        logger.error(f"Bible data from {result.source} rejected: {str(e)}")
        raise CorpusUnavailable(result.source, str(e)) from e
