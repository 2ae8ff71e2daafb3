"""Submission status configuration parameters."""

from os import environ

LOGLEVEL = int(environ.get('LOGLEVEL', '20'))
"""
Logging verbosity.

See `https://docs.python.org/3/library/logging.html#levels`_.
"""

PASS_SEARCH_LIMIT = int(environ.get('PASS_SEARCH_LIMIT', '200'))
"""
Maximum number of identifiers returned by an attribute search.

Applies when the caller does not pass an explicit ``limit``.
"""

PASS_BASE_URI = environ.get('PASS_BASE_URI', 'memory:/')
"""Prefix for identifiers minted by the in-memory record store."""
