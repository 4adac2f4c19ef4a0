"""Exceptions raised by Data Access Objects (DAO).

DAO callers only ever see these exceptions, never the driver's own:

    DAOError
    ├── ShortURLNotFoundError   no record is stored under the alias
    └── DataStoreError          the store is unreachable or rejected a command

Example:
    >>> from urlalias.dao.exceptions import ShortURLNotFoundError
    >>> raise ShortURLNotFoundError('abc123')
    Traceback (most recent call last):
        ...
    urlalias.dao.exceptions.ShortURLNotFoundError: Short URL with code 'abc123' not found.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""


class ShortURLNotFoundError(DAOError):
    """No URL record is stored under the requested alias.

    Attributes:
        short_url (str): the alias that was looked up.
    """

    def __init__(self, short_url: str):
        self.short_url = short_url
        super().__init__(f"Short URL with code '{short_url}' not found.")


class DataStoreError(DAOError):
    """The data store failed (connection refused, timeout, OOM, WRONGTYPE, ...)."""
