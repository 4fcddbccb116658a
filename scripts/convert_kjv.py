# scripts/convert_kjv.py
import json
import sys
from pathlib import Path

# Canonical order; alternate names map onto the same book
BOOK_ORDER = [
    'Genesis', 'Exodus', 'Leviticus', 'Numbers', 'Deuteronomy',
    'Joshua', 'Judges', 'Ruth', '1 Samuel', '2 Samuel', '1 Kings',
    '2 Kings', '1 Chronicles', '2 Chronicles', 'Ezra', 'Nehemiah',
    'Esther', 'Job', 'Psalms', 'Proverbs', 'Ecclesiastes',
    'Song of Solomon', 'Isaiah', 'Jeremiah', 'Lamentations',
    'Ezekiel', 'Daniel', 'Hosea', 'Joel', 'Amos', 'Obadiah',
    'Jonah', 'Micah', 'Nahum', 'Habakkuk', 'Zephaniah', 'Haggai',
    'Zechariah', 'Malachi',
    'Matthew', 'Mark', 'Luke', 'John', 'Acts', 'Romans',
    '1 Corinthians', '2 Corinthians', 'Galatians', 'Ephesians',
    'Philippians', 'Colossians', '1 Thessalonians', '2 Thessalonians',
    '1 Timothy', '2 Timothy', 'Titus', 'Philemon', 'Hebrews',
    'James', '1 Peter', '2 Peter', '1 John', '2 John', '3 John',
    'Jude', 'Revelation'
]

BOOK_ALIASES = {
    "Solomon's Song": 'Song of Solomon',
    'Psalm': 'Psalms',
}

def parse_reference(ref):
    """Parse a reference like 'Genesis 1:1' into (book_name, chapter, verse)"""
    book_chapter, verse = ref.rsplit(':', 1)
    book_parts = book_chapter.rsplit(' ', 1)
    chapter = book_parts[-1]
    book_name = ' '.join(book_parts[:-1])
    return BOOK_ALIASES.get(book_name, book_name), int(chapter), int(verse)

def clean_verse_text(text):
    """Clean verse text by removing any leading '#' and trimming whitespace"""
    return text.lstrip('#').strip()

def convert_kjv_data(verses_data):
    """Turn {'Genesis 1:1': text, ...} into book -> chapter -> verse -> text.

    Books come out in canonical order, chapters and verses in numeric order.
    Returns the nested corpus and the references that were skipped.
    """
    collected = {}
    skipped = []

    for ref, text in verses_data.items():
        try:
            book_name, chapter, verse = parse_reference(ref)
        except ValueError:
            skipped.append(ref)
            print(f"Warning: Could not parse reference '{ref}'")
            continue

        if not isinstance(text, str):
            skipped.append(ref)
            print(f"Warning: Skipping '{ref}' (verse text is not a string)")
            continue

        clean_text = clean_verse_text(text)
        if book_name not in BOOK_ORDER or not clean_text:
            skipped.append(ref)
            print(f"Warning: Skipping '{ref}' (unknown book or empty text)")
            continue

        collected.setdefault(book_name, {}).setdefault(chapter, {})[verse] = clean_text

    corpus = {}
    for book_name in BOOK_ORDER:
        if book_name not in collected:
            continue
        chapters = collected[book_name]
        corpus[book_name] = {
            str(chapter): {str(verse): chapters[chapter][verse] for verse in sorted(chapters[chapter])}
            for chapter in sorted(chapters)
        }

    return corpus, skipped

def main(argv):
    if len(argv) != 3:
        print("Usage: python convert_kjv.py <path_to_kjv.json> <output_bible_data.json>")
        return 1

    source, target = Path(argv[1]), Path(argv[2])
    print(f"Reading JSON file from: {source}")
    with open(source, 'r', encoding='utf-8') as f:
        verses_data = json.load(f)

    corpus, skipped = convert_kjv_data(verses_data)

    with open(target, 'w', encoding='utf-8') as f:
        json.dump(corpus, f, ensure_ascii=False)

    verse_count = sum(len(v) for chapters in corpus.values() for v in chapters.values())
    print(f"\nConversion complete!")
    print(f"Wrote {len(corpus)} books, {verse_count} verses to {target}")
    if skipped:
        print(f"Skipped {len(skipped)} references")
    return 0

if __name__ == '__main__':
    sys.exit(main(sys.argv))
