"""Exceptions raised at the core boundary.

Not-found and validation outcomes are returned as values; only failures of
the persistence substrate are raised.
"""


class CityInfoError(Exception):
    """Base class for application errors."""
    pass


class PersistenceFailure(CityInfoError):
    """The store rejected a commit of pending changes."""
    pass
