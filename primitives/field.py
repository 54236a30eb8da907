"""Finite fields GF(q) for prime powers q.

Uses galois library for all field arithmetic. Field classes are created by
galois.GF() and reused; elements are galois FieldArray scalars, and a
FieldArray of q values is the enumeration of the whole field.

Elements are compared and hashed through their integer representation
(0..q-1), which galois uses for both prime fields and extension fields.
"""

from typing import Iterable, List, Optional, Union

import galois
import numpy as np

# Type alias for the galois field class returned by get_field()
FieldType = type


def get_field(q: int) -> FieldType:
    """Return the galois field class for GF(q).

    Args:
        q: Field order, must be a prime power

    Returns:
        galois FieldArray subclass for GF(q)

    Raises:
        ValueError: If q is not a prime power
    """
    q = int(q)
    if not is_field_order(q):
        raise ValueError(f"q must be a prime power, got {q}")
    return galois.GF(q)


def is_field_order(q: int) -> bool:
    """True if a finite field of order q exists (q is a prime power)."""
    return q >= 2 and bool(galois.is_prime_power(q))


def field_elements(field: FieldType):
    """All q elements of the field, in integer representation order."""
    return field.elements


def make_rng(seed: Optional[Union[int, np.random.Generator]] = None) -> np.random.Generator:
    """Return a numpy Generator; an existing Generator is passed through."""
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def random_element(field: FieldType, rng: np.random.Generator):
    """Uniform random element of the field."""
    return field.Random(seed=rng)


def random_elements(field: FieldType, count: int, rng: np.random.Generator):
    """FieldArray of `count` independent uniform random elements."""
    return field.Random(count, seed=rng)


def random_choice(field: FieldType, subset, rng: np.random.Generator):
    """Uniform random element of a nonempty subset of the field.

    Raises:
        ValueError: If subset is empty
    """
    values = to_ints(subset)
    if len(values) == 0:
        raise ValueError("cannot sample from an empty subset of the field")
    return field(int(rng.choice(values)))


def to_ints(values: Iterable) -> List[int]:
    """Canonical integer representation of field elements."""
    if isinstance(values, galois.FieldArray):
        return np.atleast_1d(values.view(np.ndarray)).tolist()
    return [int(v) for v in values]
