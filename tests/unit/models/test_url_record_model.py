"""Unit tests for URLRecordModel.

Test coverage includes:

1. Construction defaults
   - Ensures optional fields default to None.

2. Immutability
   - Ensures records cannot be mutated after creation.

3. Expiry evaluation
   - Ensures expired() honors the strict "now > exp" boundary.
   - Ensures records without exp never expire.
"""

import dataclasses

import pytest

from urlalias.models import URLRecordModel


# -------------------------------
# 1. Construction defaults
# -------------------------------


def test_optional_fields_default_to_none():
    """Ensure exp and id default to None."""
    record = URLRecordModel(long_url='https://example.com', short_url='abc123')

    assert record.long_url == 'https://example.com'
    assert record.short_url == 'abc123'
    assert record.exp is None
    assert record.id is None


# -------------------------------
# 2. Immutability
# -------------------------------


def test_record_is_frozen():
    """Ensure URLRecordModel instances are immutable."""
    record = URLRecordModel(long_url='https://example.com', short_url='abc123')

    with pytest.raises(dataclasses.FrozenInstanceError):
        record.long_url = 'https://evil.example.com'


# -------------------------------
# 3. Expiry evaluation
# -------------------------------


@pytest.mark.parametrize(
    'now, expected',
    [
        (1_760_000_000 - 1, False),
        (1_760_000_000, False),
        (1_760_000_000 + 1, True),
    ],
)
def test_expired_boundary(now, expected):
    """Ensure a record is expired only once the current time exceeds exp."""
    record = URLRecordModel(long_url='https://example.com', short_url='abc123', exp=1_760_000_000)
    assert record.expired(now) is expected


def test_record_without_exp_never_expires():
    """Ensure records without exp are never expired."""
    record = URLRecordModel(long_url='https://example.com', short_url='abc123')
    assert record.expired(10**12) is False
