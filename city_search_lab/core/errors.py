# city_search_lab/core/errors.py
# Error taxonomy: bad user input, bad graph data, and engine bugs.
# "No path found" and "cancelled" are NOT errors; they are SearchOutcome statuses.
from __future__ import annotations


class SearchLabError(Exception):
    pass


class ConfigurationError(SearchLabError, ValueError):
    """Rejected search request (unknown strategy, unknown city, bad depth limit...)."""


class GraphDataError(SearchLabError, ValueError):
    """The graph document is malformed; no partial graph is ever returned."""


class InvariantViolation(SearchLabError, AssertionError):
    """Something the engine guarantees did not hold. Always a bug."""
