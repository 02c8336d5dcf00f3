"""
core/search.py
──────────────
The search box behaviour shared by every list page.

Each searchable record exposes a `search_text` attribute (or key, for plain
dicts) holding the concatenation of the fields a user may search on.
Matching is a case-insensitive substring test over that text, applied to the
full result set. There is no pagination and no index.
"""


def _haystack(record):
    if isinstance(record, dict):
        return record.get('search_text', '')
    return getattr(record, 'search_text', '')


def matches(record, query):
    """True when *query* occurs in the record's search text, ignoring case."""
    if not query:
        return True
    return query.casefold() in str(_haystack(record)).casefold()


def filter_records(records, query):
    """Return the records of *records* that match *query*, in their original order."""
    query = (query or '').strip()
    if not query:
        return list(records)
    return [record for record in records if matches(record, query)]
