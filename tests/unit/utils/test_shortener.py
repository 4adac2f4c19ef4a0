"""Unit tests for the generate_alias function in shortener.py.

Test coverage includes:

1. Basic functionality
   - Ensures the function returns a string of the expected length.

2. Output format
   - All characters must belong to the Base62 alphabet (letters and digits only).

3. Randomness sanity
   - Repeated calls produce many distinct aliases and use the whole alphabet.

4. Error handling
   - Ensures invalid lengths raise appropriate exceptions.
"""

import re
import threading

import pytest

from urlalias.constants import Alias
from urlalias.utils import generate_alias


BASE62 = re.compile(r'[A-Za-z0-9]+')


# -------------------------------
# 1. Basic functionality
# -------------------------------


def test_generate_alias_returns_string():
    """Ensure generate_alias() returns a 6 character string by default."""
    result = generate_alias()
    assert isinstance(result, str)
    assert len(result) == 6


@pytest.mark.parametrize('length', [1, 6, 12, 64])
def test_generate_alias_respects_length(length):
    assert len(generate_alias(length)) == length


# -------------------------------
# 2. Output format
# -------------------------------


def test_alphabet_is_base62():
    assert len(Alias.ALPHABET) == 62
    assert len(set(Alias.ALPHABET)) == 62
    assert BASE62.fullmatch(Alias.ALPHABET)


def test_generate_alias_uses_base62_only():
    for _ in range(1000):
        assert BASE62.fullmatch(generate_alias())


# -------------------------------
# 3. Randomness sanity
# -------------------------------


def test_generate_alias_is_not_constant():
    aliases = {generate_alias() for _ in range(1000)}
    # 1000 draws out of 62^6 should practically never collide
    assert len(aliases) > 990


def test_generate_alias_covers_alphabet():
    seen = set(''.join(generate_alias() for _ in range(2000)))
    assert seen == set(Alias.ALPHABET)


def test_generate_alias_is_thread_safe():
    """Ensure concurrent callers always receive well-formed aliases."""
    results = []
    lock = threading.Lock()

    def worker():
        batch = [generate_alias() for _ in range(200)]
        with lock:
            results.extend(batch)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 1600
    assert all(len(a) == 6 and BASE62.fullmatch(a) for a in results)


# -------------------------------
# 4. Error handling
# -------------------------------


@pytest.mark.parametrize('length', ['6', 6.0, None, True])
def test_generate_alias_with_invalid_type(length):
    with pytest.raises(TypeError):
        generate_alias(length)


@pytest.mark.parametrize('length', [0, -1])
def test_generate_alias_with_invalid_value(length):
    with pytest.raises(ValueError):
        generate_alias(length)
