import pytest

from models.bible import SearchMatch
from utils.errors import (
    InvalidCorpus,
    InvalidPageRequest,
    UnknownBook,
    UnknownChapter,
    UnknownVerse,
)
from utils.search import SearchMode
from utils.verse_index import VerseIndex

GEN_ONLY = {"Gen": {"1": {"1": "In the beginning...", "2": "And the earth..."}}}


@pytest.mark.parametrize('corpus', [
    {},
    {"Gen": {}},
    {"Gen": {"1": {}}},
    {"Gen": {"1": {"1": "text"}}, "Exod": {}},
])
def test_construction_rejects_empty_parts(corpus):
    with pytest.raises(InvalidCorpus):
        VerseIndex(corpus)


@pytest.mark.parametrize('corpus, fragment', [
    ({"Gen": {1: {"1": "a"}, "1": {"1": "b", "2": "c"}}}, "duplicate chapter 1"),
    ({"Gen": {"1": {1: "a", "1": "b"}}}, "duplicate verse 1"),
])
def test_construction_rejects_keys_that_collide_as_text(corpus, fragment):
    with pytest.raises(InvalidCorpus) as exc:
        VerseIndex(corpus)
    assert fragment in str(exc.value)


def test_list_books_keeps_corpus_order(index):
    assert index.list_books() == ["Genesis", "Exodus", "John"]


def test_list_chapters(index):
    assert index.list_chapters("Genesis") == ["1", "2"]
    with pytest.raises(UnknownBook) as exc:
        index.list_chapters("Leviticus")
    assert exc.value.book == "Leviticus"


def test_list_verses(index):
    verses = index.list_verses("John", "3")
    assert [key for key, _ in verses] == ["16", "17"]
    with pytest.raises(UnknownChapter) as exc:
        index.list_verses("John", "4")
    assert (exc.value.book, exc.value.chapter) == ("John", "4")


def test_get_verse_reports_the_missing_key(index):
    assert index.get_verse("Genesis", "1", "3").startswith("And God said")
    with pytest.raises(UnknownBook):
        index.get_verse("Nope", "1", "1")
    with pytest.raises(UnknownChapter):
        index.get_verse("Genesis", "9", "1")
    with pytest.raises(UnknownVerse) as exc:
        index.get_verse("Genesis", "1", "99")
    assert exc.value.verse == "99"
    assert "Genesis 1:99" in str(exc.value)


def test_get_verse_agrees_with_list_verses(index):
    for book in index.list_books():
        for chapter in index.list_chapters(book):
            for verse, text in index.list_verses(book, chapter):
                assert index.get_verse(book, chapter, verse) == text


def test_integer_keys_are_accepted(index):
    assert index.get_verse("Genesis", 1, 1) == index.get_verse("Genesis", "1", "1")
    assert index.verse_count("Genesis", 1) == 3


def test_corpus_is_copied_on_construction(corpus):
    index = VerseIndex(corpus)
    corpus["Genesis"]["1"]["1"] = "changed"
    del corpus["Exodus"]
    assert index.get_verse("Genesis", "1", "1").startswith("In the beginning")
    assert "Exodus" in index.list_books()


def test_paginate_example():
    index = VerseIndex(GEN_ONLY)
    assert index.paginate("Gen", "1", 1, 0) == [("1", "In the beginning...")]
    assert index.paginate("Gen", "1", 1, 1) == [("2", "And the earth...")]
    assert index.max_page_index("Gen", "1", 1) == 1
    assert index.paginate("Gen", "1", 1, 2) == []


def test_paginate_last_page_may_be_short(index):
    assert index.paginate("Genesis", "1", 2, 0) == index.list_verses("Genesis", "1")[:2]
    assert index.paginate("Genesis", "1", 2, 1) == [index.list_verses("Genesis", "1")[2]]
    assert index.max_page_index("Genesis", "1", 2) == 1
    assert index.max_page_index("Genesis", "1", 10) == 0


@pytest.mark.parametrize('page_size', [1, 2, 3, 5])
def test_pages_cover_the_chapter(index, page_size):
    for book in index.list_books():
        for chapter in index.list_chapters(book):
            last = index.max_page_index(book, chapter, page_size)
            pages = [index.paginate(book, chapter, page_size, i) for i in range(last + 1)]
            assert sum(len(p) for p in pages) == len(index.list_verses(book, chapter))
            assert pages[-1]
            assert index.paginate(book, chapter, page_size, last + 1) == []


@pytest.mark.parametrize('page_size, page_index', [(0, 0), (-1, 0), (1, -1)])
def test_paginate_rejects_bad_requests(index, page_size, page_index):
    with pytest.raises(InvalidPageRequest):
        index.paginate("Genesis", "1", page_size, page_index)


def test_paginate_unknown_chapter(index):
    with pytest.raises(UnknownChapter):
        index.paginate("Genesis", "7", 2, 0)
    with pytest.raises(UnknownBook):
        index.max_page_index("Nope", "1", 2)


def test_page_index_of(index):
    assert index.page_index_of("Genesis", "1", "1", 2) == 0
    assert index.page_index_of("Genesis", "1", "3", 2) == 1
    assert index.page_index_of("John", "3", "17", 1) == 1
    with pytest.raises(UnknownVerse):
        index.page_index_of("John", "3", "1", 2)


def test_search_example():
    index = VerseIndex(GEN_ONLY)
    assert list(index.search("earth", "exact")) == [
        SearchMatch("Gen", "1", "2", "And the earth...")
    ]


def test_search_is_case_insensitive_and_ordered(index):
    refs = [m.reference for m in index.search("EARTH", SearchMode.EXACT)]
    assert refs == ["Genesis 1:1", "Genesis 1:2", "Genesis 2:1"]


def test_search_exact_needs_contiguous_text(index):
    assert list(index.search("God so loved", "exact"))[0].reference == "John 3:16"
    assert list(index.search("loved God", "exact")) == []


def test_search_all_words_matches_terms_anywhere(index):
    refs = [m.reference for m in index.search("world  Son\tgod", "allWords")]
    assert refs == ["John 3:16", "John 3:17"]
    assert list(index.search("world israel", SearchMode.ALL_WORDS)) == []


@pytest.mark.parametrize('mode', ["exact", "all_words"])
@pytest.mark.parametrize('query', ["", "   ", "\t\n"])
def test_search_empty_query_matches_nothing(index, query, mode):
    assert list(index.search(query, mode)) == []


def test_single_term_modes_agree(index):
    for term in ["light", "the", "Son", "xyz"]:
        assert list(index.search(term, "exact")) == list(index.search(term, "all_words"))


def test_search_is_lazy_and_restartable(index):
    results = index.search("the", "exact")
    assert next(results).reference == "Genesis 1:1"
    assert list(index.search("the", "exact")) == list(index.search("the", "exact"))


def test_search_rejects_unknown_mode(index):
    with pytest.raises(ValueError):
        index.search("earth", "fuzzy")
