import json

import pytest

from app import create_app
from utils.verse_index import VerseIndex

SAMPLE_CORPUS = {
    "Genesis": {
        "1": {
            "1": "In the beginning God created the heaven and the earth.",
            "2": "And the earth was without form, and void.",
            "3": "And God said, Let there be light: and there was light.",
        },
        "2": {
            "1": "Thus the heavens and the earth were finished.",
        },
    },
    "Exodus": {
        "1": {
            "1": "Now these are the names of the children of Israel.",
            "2": "Reuben, Simeon, Levi, and Judah,",
        },
    },
    "John": {
        "3": {
            "16": "For God so loved the world, that he gave his only begotten Son.",
            "17": "For God sent not his Son into the world to condemn the world.",
        },
    },
}


class SampleConfig:
    TESTING = True
    BIBLE_DATA_PATH = 'unused.json'
    VERSES_PER_PAGE = 2
    SEARCH_RESULT_LIMIT = 3
    MAX_SEARCH_RESULT_LIMIT = 4
    PORT = 5001


@pytest.fixture
def corpus():
    return json.loads(json.dumps(SAMPLE_CORPUS))


@pytest.fixture
def index(corpus):
    return VerseIndex(corpus)


@pytest.fixture
def app(index):
    return create_app(SampleConfig, index=index)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def corpus_file(tmp_path, corpus):
    path = tmp_path / 'bible_data.json'
    path.write_text(json.dumps(corpus), encoding='utf-8')
    return path


@pytest.fixture
def config_class():
    return SampleConfig
