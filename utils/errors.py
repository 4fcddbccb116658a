# utils/errors.py


class VerseIndexError(Exception):
    """Base class for every error raised by the verse index."""


class InvalidCorpus(VerseIndexError):
    pass


class CorpusUnavailable(VerseIndexError):
    """The corpus could not be loaded or indexed at startup."""

    def __init__(self, source, reason):
        self.source = source
        self.reason = reason
        super().__init__(f"Bible data unavailable from {source}: {reason}")


class UnknownBook(VerseIndexError, LookupError):
    kind = 'unknown_book'

    def __init__(self, book):
        self.book = book
        super().__init__(f"Book not found: {book}")


class UnknownChapter(VerseIndexError, LookupError):
    kind = 'unknown_chapter'

    def __init__(self, book, chapter):
        self.book = book
        self.chapter = chapter
        super().__init__(f"Chapter not found: {book} {chapter}")


class UnknownVerse(VerseIndexError, LookupError):
    kind = 'unknown_verse'

    def __init__(self, book, chapter, verse):
        self.book = book
        self.chapter = chapter
        self.verse = verse
        super().__init__(f"Verse not found: {book} {chapter}:{verse}")


class InvalidPageRequest(VerseIndexError, ValueError):
    def __init__(self, page_size, page_index):
        self.page_size = page_size
        self.page_index = page_index
        super().__init__(
            f"Invalid page request: size={page_size} (must be >= 1), "
            f"page={page_index} (must be >= 0)"
        )
