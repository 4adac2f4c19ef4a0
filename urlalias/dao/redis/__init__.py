from urlalias.dao.redis.redis_key_schema import RedisKeySchema
from urlalias.dao.redis.mixins import RedisClientMixin
from urlalias.dao.redis.short_url_redis_dao import ShortURLRedisDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'ShortURLRedisDAO',
]
