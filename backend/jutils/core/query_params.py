"""Query Parameters — read one parameter from the current location's query string.

Invariants:
    - Returns "" when the parameter is absent (never None, never raises)
    - First occurrence wins
    - Value is percent-decoded; "+" is NOT turned into a space
    - Incomplete "%" escapes ("100%", "%G1") are returned as-is
    - Escapes that decode to invalid UTF-8 ("%FF") decode with U+FFFD replacement characters

Design Decisions:
    - The query string comes from a QueryProvider so this stays pure and testable
      without an HTTP request (implementation: infrastructure/request_query.py)
"""

from urllib.parse import unquote

from jutils.core.boundary_protocols import QueryProvider
from jutils.core.patterns import query_param_re


def get_query_by_name(name: str, provider: QueryProvider) -> str:
    """Return the decoded value of ``name`` from ``provider.search()``, or ""."""
    match = query_param_re(name).search(provider.search())
    return unquote(match.group(1)) if match else ""
