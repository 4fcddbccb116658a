# routes/bible.py
from flask import Blueprint, current_app, jsonify, request
from itertools import islice
from pydantic import ValidationError
import logging
import sys

from schemas.bible_schemas import PageQuery, SearchQuery, ShareRequest
from utils.errors import InvalidPageRequest, UnknownBook, UnknownChapter, UnknownVerse
from utils.share import format_reference, format_selection

bible_bp = Blueprint('bible', __name__)

# Configure logging to output to stdout
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

NOT_FOUND = (UnknownBook, UnknownChapter, UnknownVerse)


def get_index():
    return current_app.extensions['verse_index']


def not_found(err):
    return jsonify({"error": str(err), "kind": err.kind}), 404


def bad_request(err):
    if isinstance(err, ValidationError):
        message = "; ".join(
            f"{'.'.join(str(part) for part in e['loc']) or 'body'}: {e['msg']}" for e in err.errors()
        )
    else:
        message = str(err)
    return jsonify({"error": message}), 400


def verse_json(book, chapter, verse, text):
    return {
        "book": book,
        "chapter": chapter,
        "verse": verse,
        "text": text
    }


@bible_bp.route('/books', methods=['GET'])
def get_books():
    return jsonify(get_index().list_books())


@bible_bp.route('/chapters/<book>', methods=['GET'])
def get_chapters(book):
    try:
        return jsonify(get_index().list_chapters(book))
    except UnknownBook as e:
        return not_found(e)


@bible_bp.route('/verses/<book>/<chapter>', methods=['GET'])
def get_verses(book, chapter):
    try:
        verses = get_index().list_verses(book, chapter)
    except NOT_FOUND as e:
        return not_found(e)

    return jsonify([verse_json(book, chapter, verse, text) for verse, text in verses])


@bible_bp.route('/verse/<book>/<chapter>/<verse>', methods=['GET'])
def get_single_verse(book, chapter, verse):
    try:
        text = get_index().get_verse(book, chapter, verse)
    except NOT_FOUND as e:
        return not_found(e)

    return jsonify(verse_json(book, chapter, verse, text))


@bible_bp.route('/page/<book>/<chapter>', methods=['GET'])
def get_page(book, chapter):
    try:
        params = PageQuery(
            size=request.args.get('size', current_app.config['VERSES_PER_PAGE']),
            page=request.args.get('page', 0)
        )
    except ValidationError as e:
        return bad_request(e)

    index = get_index()
    try:
        verses = index.paginate(book, chapter, params.size, params.page)
        max_page = index.max_page_index(book, chapter, params.size)
    except NOT_FOUND as e:
        return not_found(e)
    except InvalidPageRequest as e:
        return bad_request(e)

    return jsonify({
        "book": book,
        "chapter": chapter,
        "page": params.page,
        "size": params.size,
        "max_page": max_page,
        "verses": [verse_json(book, chapter, verse, text) for verse, text in verses]
    })


@bible_bp.route('/search', methods=['GET'])
def search_bible():
    try:
        params = SearchQuery(
            q=request.args.get('q', ''),
            mode=request.args.get('mode', 'exact'),
            limit=request.args.get('limit', current_app.config['SEARCH_RESULT_LIMIT']),
            size=request.args.get('size', current_app.config['VERSES_PER_PAGE'])
        )
    except ValidationError as e:
        return bad_request(e)

    index = get_index()
    limit = min(params.limit, current_app.config['MAX_SEARCH_RESULT_LIMIT'])

    try:
        found = list(islice(index.search(params.q, params.mode), limit + 1))
    except Exception as e:
        logger.error(f"Search error: {str(e)}", exc_info=True)
        return jsonify({'error': 'An error occurred during search.'}), 500

    truncated = len(found) > limit
    results = [
        dict(
            match.to_json(),
            reference=match.reference,
            page=index.page_index_of(match.book, match.chapter, match.verse, params.size)
        )
        for match in found[:limit]
    ]
    logger.info(f"Search for {params.q!r} ({params.mode.value}) returned {len(results)} result(s)")

    return jsonify({
        "query": params.q,
        "mode": params.mode.value,
        "limit": limit,
        "size": params.size,
        "truncated": truncated,
        "results": results
    })


@bible_bp.route('/share', methods=['POST'])
def share_selection():
    data = request.get_json(silent=True)
    if not data:
        return jsonify({"error": "Invalid JSON payload"}), 400

    try:
        params = ShareRequest.model_validate(data)
    except ValidationError as e:
        return bad_request(e)

    try:
        text = format_selection(get_index(), params.book, params.chapter, params.verses)
    except NOT_FOUND as e:
        return not_found(e)

    return jsonify({
        "reference": format_reference(params.book, params.chapter, params.verses),
        "text": text
    })
