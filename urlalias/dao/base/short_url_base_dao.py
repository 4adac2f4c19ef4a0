"""Abstract base class for URL record data access objects (DAOs).

This class establishes a consistent contract for all URL record DAO implementations,
regardless of the underlying storage mechanism (e.g., Redis, MongoDB, DynamoDB).

Responsibilities:
    - Provide an interface for upserting and retrieving URLRecordModel objects by alias.
    - Standardize error handling across multiple data store implementations.
    - Enforce a consistent API for use by Lambda functions.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from urlalias.models import URLRecordModel
        >>> from urlalias.dao.redis import ShortURLRedisDAO

        >>> dao = ShortURLRedisDAO(...)

        >>> record = URLRecordModel(
        ...     long_url="https://example.com/blog/article-123",
        ...     short_url="a1b2c3",
        ... )
        >>> dao.upsert(record)
        URLRecordModel(long_url='https://example.com/blog/article-123', short_url='a1b2c3', exp=None, id='9f1c...')

        >>> retrieved = dao.get("a1b2c3")
        >>> print(retrieved.long_url)
        https://example.com/blog/article-123

        >>> print(retrieved.exp)
        None
"""

from abc import ABC, abstractmethod

from urlalias.models import URLRecordModel


class ShortURLBaseDAO(ABC):
    """Interface for URL record data access objects (DAOs).

    Methods:
        upsert(record: URLRecordModel, **kwargs) -> URLRecordModel:
            Create the record, or replace the fields of the record with the same alias.
            Raises DataStoreError on connection or write failure.

        get(short_url: str, **kwargs) -> URLRecordModel:
            Retrieve a URLRecordModel from the data store by alias.
            Raises ShortURLNotFoundError if the entry does not exist.
            Raises DataStoreError on connection or read failure.

    Subclassing:
        Datastore-specific implementations (e.g., ShortURLRedisDAO) must extend
        this class and implement all abstract methods.

    NOTE:
        - Records are never deleted. Expired records stay in the data store and
          it is up to the caller to treat them as gone.
        - Upserts are last-write-wins. No read-before-write happens, so two
          concurrent upserts of the same alias simply interleave.
    """

    @abstractmethod
    def upsert(self, record: URLRecordModel, **kwargs) -> URLRecordModel:
        """Create or replace a URL record keyed by its alias.

        The `long_url`, `short_url` and `exp` fields of an existing record are
        replaced. A missing `exp` removes any previously stored expiry. The
        store-assigned `id` of an existing record is kept.

        Args:
            record (URLRecordModel):
                The record to store. Its `id` is ignored.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            URLRecordModel: The record as stored, including its store-assigned `id`.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, short_url: str, **kwargs) -> URLRecordModel:
        """Retrieve a URLRecordModel from the data store by its alias.

        Args:
            short_url (str):
                The alias of the URL record to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            URLRecordModel: The stored record, expired or not.

        Raises:
            ShortURLNotFoundError:
                If no record with the given alias exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass
