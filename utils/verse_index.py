# utils/verse_index.py
from collections.abc import Mapping
from types import MappingProxyType
import math

from models.bible import SearchMatch
from .errors import (
    InvalidCorpus,
    InvalidPageRequest,
    UnknownBook,
    UnknownChapter,
    UnknownVerse,
)
from .search import SearchMode, compile_matcher


def _freeze(corpus):
    """Copy the corpus into read-only mappings, validating that nothing is empty"""
    if not isinstance(corpus, Mapping) or not corpus:
        raise InvalidCorpus("Corpus contains no books")

    books = {}
    for book, chapters in corpus.items():
        if not isinstance(chapters, Mapping) or not chapters:
            raise InvalidCorpus(f"Book {book!r} has no chapters")
        frozen_chapters = {}
        for chapter, verses in chapters.items():
            if not isinstance(verses, Mapping) or not verses:
                raise InvalidCorpus(f"Chapter {book} {chapter} has no verses")
            if str(chapter) in frozen_chapters:
                raise InvalidCorpus(f"Book {book!r} has duplicate chapter {chapter}")
            frozen_verses = {}
            for verse, text in verses.items():
                if str(verse) in frozen_verses:
                    raise InvalidCorpus(f"Chapter {book} {chapter} has duplicate verse {verse}")
                frozen_verses[str(verse)] = text
            frozen_chapters[str(chapter)] = MappingProxyType(frozen_verses)
        books[book] = MappingProxyType(frozen_chapters)
    return MappingProxyType(books)


class VerseIndex:
    """Read-only queries over a loaded Bible corpus.

    The corpus is a key-ordered mapping of book -> chapter -> verse -> text.
    It is copied on construction; every query reads from that copy and
    nothing is cached between calls. Chapter and verse keys are strings,
    but integers are accepted and converted.
    """

    def __init__(self, corpus):
        self._corpus = _freeze(corpus)

    def __len__(self):
        return len(self._corpus)

    def _book(self, book):
        try:
            return self._corpus[book]
        except (KeyError, TypeError):
            raise UnknownBook(book) from None

    def _chapter(self, book, chapter):
        chapters = self._book(book)
        try:
            return chapters[str(chapter)]
        except KeyError:
            raise UnknownChapter(book, str(chapter)) from None

    def list_books(self):
        return list(self._corpus)

    def list_chapters(self, book):
        return list(self._book(book))

    def list_verses(self, book, chapter):
        return list(self._chapter(book, chapter).items())

    def verse_count(self, book, chapter):
        return len(self._chapter(book, chapter))

    def get_verse(self, book, chapter, verse):
        verses = self._chapter(book, chapter)
        try:
            return verses[str(verse)]
        except KeyError:
            raise UnknownVerse(book, str(chapter), str(verse)) from None

    def paginate(self, book, chapter, page_size, page_index):
        """Return the verses on one page of a chapter.

        Pages past the end are empty rather than an error.
        """
        if page_size < 1 or page_index < 0:
            raise InvalidPageRequest(page_size, page_index)
        verses = self.list_verses(book, chapter)
        start = page_index * page_size
        return verses[start:start + page_size]

    def max_page_index(self, book, chapter, page_size):
        if page_size < 1:
            raise InvalidPageRequest(page_size, 0)
        count = self.verse_count(book, chapter)
        return max(math.ceil(count / page_size) - 1, 0)

    def page_index_of(self, book, chapter, verse, page_size):
        """Page (0-based) on which a verse appears for the given page size"""
        if page_size < 1:
            raise InvalidPageRequest(page_size, 0)
        verses = self._chapter(book, chapter)
        key = str(verse)
        if key not in verses:
            raise UnknownVerse(book, str(chapter), key)
        position = list(verses).index(key)
        return position // page_size

    def search(self, query, mode=SearchMode.EXACT):
        """Lazily yield every SearchMatch for the query in corpus order.

        The mode is checked immediately; each call starts a fresh scan.
        No result limit is applied here.
        """
        matcher = compile_matcher(query, mode)
        return self._scan(matcher)

    def _scan(self, matcher):
        if matcher is None:
            return
        for book, chapters in self._corpus.items():
            for chapter, verses in chapters.items():
                for verse, text in verses.items():
                    if matcher(text):
                        yield SearchMatch(book, chapter, verse, text)
