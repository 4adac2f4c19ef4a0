"""Random alias generation utility

This module provides a helper function for generating short random aliases
drawn uniformly from the Base62 alphabet.

Functions:
    generate_alias(length=6):
        Generate a random alias suitable for use as a URL slug.

Example:
    >>> from urlalias.utils import generate_alias
    >>> generate_alias()
    'q3ZkP0'
"""

import random
import threading

from urlalias.constants import Alias


# One generator per process, seeded once from OS entropy
_rng = random.Random()
_rng_lock = threading.Lock()


def generate_alias(length: int = Alias.LENGTH) -> str:
    """Generate a random alias of `length` Base62 characters.

    Every character is drawn independently and uniformly from
    [a-zA-Z0-9]. With the default length this gives 62^6 (~5.68e10)
    possible aliases.

    Args:
        length (int, optional):
            Number of characters in the alias. Defaults to 6.

    Returns:
        str: A random alphanumeric alias.

    Raises:
        TypeError: If length is not an integer.
        ValueError: If length is not positive.

    Example:
        >>> alias = generate_alias()
        >>> len(alias)
        6

    NOTE:
        - No uniqueness is guaranteed. Generating an alias that already exists
          in the data store overwrites the existing record on upsert.
        - The generator is not cryptographically secure; aliases are not secrets.
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length <= 0:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')

    with _rng_lock:
        return ''.join(_rng.choices(Alias.ALPHABET, k=length))
