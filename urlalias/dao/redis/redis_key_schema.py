"""Redis key layout for URL records.

Every alias owns one hash:

    [<prefix>:]links:<short_url>  ->  {id, long_url, short_url[, exp]}

The prefix namespaces all keys of one deployment, e.g. 'urlalias:prod', so that
several environments can share a single Redis database.
"""

__all__ = ['RedisKeySchema']


class RedisKeySchema:
    """Build namespaced Redis key names.

    Attributes:
        prefix (str | None):
            Namespace prepended to every key, None for bare keys.
    """

    SEPARATOR = ':'
    LINKS = 'links'

    def __init__(self, prefix: str | None = None):
        if prefix is not None and not isinstance(prefix, str):
            raise TypeError(f'Prefix must be of type string (given type: {type(prefix)}).')

        self.prefix = prefix

    def namespaced(self, *parts: str) -> str:
        if self.prefix is not None:
            parts = (self.prefix, *parts)
        return self.SEPARATOR.join(parts)

    def link_key(self, short_url: str) -> str:
        """Key of the hash holding the URL record for `short_url`."""
        return self.namespaced(self.LINKS, short_url)
