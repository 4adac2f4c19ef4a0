from dataclasses import replace

import pytest

from urlalias.models import URLRecordModel
from urlalias.dao.base import ShortURLBaseDAO
from urlalias.dao.exceptions import ShortURLNotFoundError


class InMemoryShortURLDAO(ShortURLBaseDAO):
    """Dict-backed stand-in for ShortURLRedisDAO with the same upsert semantics."""

    def __init__(self):
        self.records: dict[str, URLRecordModel] = {}
        self.writes = 0

    def upsert(self, record: URLRecordModel, **kwargs) -> URLRecordModel:
        self.writes += 1
        existing = self.records.get(record.short_url)
        record_id = existing.id if existing is not None else f'id-{len(self.records) + 1}'
        stored = replace(record, id=record_id)
        self.records[record.short_url] = stored
        return stored

    def get(self, short_url: str, **kwargs) -> URLRecordModel:
        try:
            return self.records[short_url]
        except KeyError:
            raise ShortURLNotFoundError(short_url) from None


@pytest.fixture
def memory_dao() -> InMemoryShortURLDAO:
    return InMemoryShortURLDAO()


@pytest.fixture
def api_token() -> str:
    return 'test-token'
