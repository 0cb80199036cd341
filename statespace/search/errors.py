"""
Search Errors Module - Exceptions raised by the reachability engine.

Only engine defects are exceptions. An exhausted search is reported as a
SearchResult with status NOT_FOUND, see result.py.
"""


class SearchError(Exception):
    """Base class for errors raised by the search engine."""


class TraceError(SearchError):
    """
    Trace map is inconsistent with the states that were discovered.

    Raised while rebuilding a path when a state has no recorded predecessor
    or the predecessor chain never reaches the initial state. Indicates a bug
    in the engine or a state type whose equality/hash is not consistent.
    """
