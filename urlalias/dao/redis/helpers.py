import functools
import redis
from typing import TypeVar, Any
from collections.abc import Callable

from urlalias.dao.exceptions import DataStoreError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def describe_connection(client: redis.Redis) -> str:
    """Return 'host:port/db' of a Redis client, for error messages."""
    info = client.connection_pool.connection_kwargs
    return f"{info.get('host')}:{info.get('port')}/{info.get('db')}"


def handle_redis_errors[F](method: F) -> F:
    """Translate Redis failures raised by a DAO method into DataStoreError

    The decorated method must belong to an object exposing its client as
    `self.redis` (see RedisClientMixin).

    Mapping:
        redis ConnectionError -> DataStoreError("Can't connect to Redis at ...")
        redis TimeoutError    -> DataStoreError("Timed out waiting for Redis at ...")
        any other RedisError  -> DataStoreError("Redis command failed: ...")

    Example:
        >>> @handle_redis_errors
        ... def get(self, short_url):
        ...     return self.redis.hgetall(self.keys.link_key(short_url))
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except redis.exceptions.ConnectionError as e:
            raise DataStoreError(f"Can't connect to Redis at {describe_connection(self.redis)}.") from e
        except redis.exceptions.TimeoutError as e:
            raise DataStoreError(f'Timed out waiting for Redis at {describe_connection(self.redis)}.') from e
        except redis.exceptions.RedisError as e:
            raise DataStoreError(f'Redis command failed: {e}') from e

    return wrapper
