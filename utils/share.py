# utils/share.py


def _sort_key(verse_key):
    return (0, int(verse_key), verse_key) if verse_key.isdigit() else (1, 0, verse_key)


def format_reference(book, chapter, verse_keys):
    """Compact verse keys into a reference like 'John 3:16-18,20'"""
    keys = sorted({str(v) for v in verse_keys}, key=_sort_key)
    if not keys:
        return f"{book} {chapter}"

    parts = []
    run_start = run_end = None
    for key in keys:
        if key.isdigit() and run_end is not None and run_end.isdigit() and int(key) == int(run_end) + 1:
            run_end = key
            continue
        if run_start is not None:
            parts.append(run_start if run_start == run_end else f"{run_start}-{run_end}")
        run_start = run_end = key
    parts.append(run_start if run_start == run_end else f"{run_start}-{run_end}")

    return f"{book} {chapter}:{','.join(parts)}"


def format_selection(index, book, chapter, verse_keys):
    """Build shareable text for selected verses of one chapter.

    Verses appear once each, in chapter order. Unknown keys raise the
    index's lookup errors.
    """
    wanted = {str(v) for v in verse_keys}
    for key in sorted(wanted, key=_sort_key):
        index.get_verse(book, chapter, key)

    lines = [f"{verse} {text}" for verse, text in index.list_verses(book, chapter) if verse in wanted]
    reference = format_reference(book, chapter, wanted)
    return "\n".join([reference, ""] + lines)
