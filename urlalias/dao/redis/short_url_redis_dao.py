"""Data Access Object (DAO) implementation for managing URL records in Redis

This module provides a Redis-based implementation of ShortURLBaseDAO for
upserting and retrieving URLRecordModel instances.

Each record is stored as a Redis hash keyed by its alias:

    <prefix>:links:<short_url>  ->  {id, long_url, short_url, exp?}

Responsibilities:
    - Upsert URL records by alias (create-or-replace-fields, last-write-wins);
    - Retrieve URL records by alias;
    - Assign a stable identifier the first time an alias is written;
    - Raise appropriate DAO exceptions.

Classes:
    ShortURLRedisDAO:
        DAO for storing and retrieving URLRecordModel in a Redis datastore.

Example:
    >>> from urlalias.models import URLRecordModel
    >>> from urlalias.dao.redis import ShortURLRedisDAO

    >>> dao = ShortURLRedisDAO(redis_url="redis://localhost:6379/0", prefix="app:dev")

    >>> dao.upsert(URLRecordModel(long_url="https://example.com/page", short_url="abc123"))
    URLRecordModel(long_url='https://example.com/page', short_url='abc123', exp=None, id='4b6f...')

    >>> retrieved = dao.get("abc123")
    >>> retrieved.long_url
    'https://example.com/page'
    >>> retrieved.exp is None
    True
"""

import uuid
from dataclasses import replace

from beartype import beartype

from urlalias.models import URLRecordModel
from urlalias.dao.base import ShortURLBaseDAO
from urlalias.dao.redis.mixins import RedisClientMixin
from urlalias.dao.redis.helpers import handle_redis_errors
from urlalias.dao.exceptions import ShortURLNotFoundError


class ShortURLRedisDAO(RedisClientMixin, ShortURLBaseDAO):
    """Redis-based Data Access Object (DAO) for managing URL records

    This class implements the ShortURLBaseDAO interface using Redis hashes as documents.

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        upsert(record: URLRecordModel, **kwargs) -> URLRecordModel:
            Create or replace the record stored under the record's alias.
            Raises DataStoreError on Redis failures.

        get(short_url: str, **kwargs) -> URLRecordModel:
            Retrieve the record stored under an alias.
            Raises ShortURLNotFoundError when the alias doesn't exist.
            Raises DataStoreError on Redis failures.

    Example:
        >>> dao = ShortURLRedisDAO(redis_url="redis://localhost:6379/0", prefix="urlalias:test")
        >>> dao.upsert(URLRecordModel(long_url="https://example.com", short_url="abc123", exp=1767225600))
        URLRecordModel(long_url='https://example.com', short_url='abc123', exp=1767225600, id='...')
        >>> dao.get("abc123").long_url
        'https://example.com'
    """

    @handle_redis_errors
    @beartype
    def upsert(self, record: URLRecordModel, **kwargs) -> URLRecordModel:
        """Create or replace a URL record keyed by its alias

        The upsert is performed via a Redis transaction (MULTI/EXEC) so that a
        concurrent reader never observes a half-written record. There is no
        read-before-write: two concurrent upserts of the same alias interleave
        and the last one wins.

        Args:
            record (URLRecordModel):
                Record to store. Its `id` is ignored.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            URLRecordModel: the record as stored, with its store-assigned id.

        Raises:
            DataStoreError:
                If a Redis connection issue occurs during the transaction.

        Example:
            >>> dao.upsert(URLRecordModel(long_url='https://example.com', short_url='abc123'))
            URLRecordModel(long_url='https://example.com', short_url='abc123', exp=None, id='...')
        """
        link_key = self.keys.link_key(record.short_url)
        fields = {'long_url': record.long_url, 'short_url': record.short_url}
        if record.exp is not None:
            fields['exp'] = record.exp

        # NOTE: HSETNX keeps the id assigned by the first write of this alias,
        #       while HSET/HDEL replace every client-controlled field. A record
        #       overwritten without an expiry must lose its previous `exp`.
        with self.redis.pipeline(transaction=True) as pipe:
            pipe.hsetnx(link_key, 'id', uuid.uuid4().hex)
            pipe.hset(link_key, mapping=fields)
            if record.exp is None:
                pipe.hdel(link_key, 'exp')
            pipe.hget(link_key, 'id')
            *_, record_id = pipe.execute()

        return replace(record, id=record_id)

    @handle_redis_errors
    @beartype
    def get(self, short_url: str, **kwargs) -> URLRecordModel:
        """Retrieve a stored URL record by alias

        Expired records are returned as-is. Deciding whether a record is still
        valid is the caller's responsibility.

        Args:
            short_url (str):
                The alias of the URL record.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            URLRecordModel:
                The retrieved record if found.

        Raises:
            ShortURLNotFoundError:
                If the alias does not exist in Redis.
            DataStoreError:
                If Redis connectivity issues occur.

        Example:
            >>> dao.get('abc123')
            URLRecordModel(long_url='https://example.com', short_url='abc123', exp=None, id='...')
        """
        document = self.redis.hgetall(self.keys.link_key(short_url))
        if not document:
            raise ShortURLNotFoundError(short_url)

        exp = document.get('exp')
        return URLRecordModel(
            long_url=document['long_url'],
            short_url=document.get('short_url', short_url),
            exp=int(exp) if exp is not None else None,
            id=document.get('id'),
        )
