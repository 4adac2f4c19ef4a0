"""Unit tests for the RedisKeySchema class in redis_key_schema.py.

Test coverage includes:

1. Link key generation
   - Ensures link_key() generates correct Redis keys for a given alias.

2. Prefix behavior
   - Confirms keys are not prefixed when no prefix is provided.
   - Confirms keys are correctly prefixed when a valid prefix is provided.

3. Invalid prefix types
   - Ensures improper prefix types raise TypeError.
"""

import pytest

from urlalias.dao.redis.redis_key_schema import RedisKeySchema


# -------------------------------
# 1. Link key generation
# -------------------------------


@pytest.mark.parametrize(
    'short_url, expected',
    [
        ('abc123', 'links:abc123'),
        ('XyZ789', 'links:XyZ789'),
        ('my-custom/alias', 'links:my-custom/alias'),
    ],
)
def test_link_key(short_url, expected):
    """Ensure link_key() generates valid Redis keys."""
    keys = RedisKeySchema()
    assert keys.link_key(short_url) == expected


# -------------------------------
# 2. Prefix behavior
# -------------------------------


def test_no_key_prefix_by_default():
    """Ensure keys are not prefixed when no prefix is provided."""
    keys = RedisKeySchema()
    assert keys.prefix is None
    assert keys.link_key('abc123') == 'links:abc123'


def test_custom_key_prefix():
    """Ensure keys are prefixed with the provided namespace."""
    keys = RedisKeySchema(prefix='urlalias:prod')
    assert keys.link_key('abc123') == 'urlalias:prod:links:abc123'


# -------------------------------
# 3. Invalid prefix types
# -------------------------------


@pytest.mark.parametrize('prefix', [123, 4.5, ['urlalias'], {'app': 'urlalias'}])
def test_invalid_prefix_type(prefix):
    """Ensure non-string prefixes raise TypeError."""
    with pytest.raises(TypeError, match='Prefix must be of type string'):
        RedisKeySchema(prefix=prefix)


def test_namespaced_joins_parts():
    """Ensure arbitrary key parts are joined under the prefix."""
    assert RedisKeySchema(prefix='urlalias:dev').namespaced('links', 'abc123') == 'urlalias:dev:links:abc123'
    assert RedisKeySchema().namespaced('links', 'abc123') == 'links:abc123'
