"""n'th power residues of GF(q).

The n'th-power set is the image of a -> a^n over the whole field, including
0 = 0^n. It decides whether y^n = c has a solution y in GF(q): it does exactly
when c is in the set. Searches compute it once per (n, q) pair and reuse it
for every candidate polynomial.
"""

from dataclasses import dataclass
from math import gcd
from typing import FrozenSet

import numpy as np

from primitives.field import FieldType, field_elements, get_field, to_ints


@dataclass(frozen=True)
class NthPowerSet:
    """Distinct values a^n for a in GF(q).

    Attributes:
        n: Exponent
        field: galois field class for GF(q)
        members: Integer representations of the n'th powers
    """
    n: int
    field: FieldType
    members: FrozenSet[int]

    @classmethod
    def compute(cls, n: int, field: FieldType) -> 'NthPowerSet':
        """Enumerate the field and collect the distinct n'th powers.

        Args:
            n: Exponent, n >= 1
            field: galois field class, or a field order q

        Returns:
            NthPowerSet for (n, q)
        """
        if n < 1:
            raise ValueError(f"n must be >= 1, got {n}")
        if isinstance(field, int):
            field = get_field(field)
        powers = set()
        for value in to_ints(field_elements(field) ** n):
            if value not in powers:
                powers.add(value)
        return cls(n=n, field=field, members=frozenset(powers))

    @property
    def order(self) -> int:
        """Order q of the underlying field."""
        return self.field.order

    def __len__(self) -> int:
        return len(self.members)

    def __contains__(self, x) -> bool:
        return int(x) in self.members

    def values(self):
        """The n'th powers as a FieldArray, ascending integer order."""
        return self.field(sorted(self.members))

    def complement(self):
        """Non-n'th-powers as a FieldArray, ascending integer order.

        Never contains 0. Empty when every element is an n'th power, which
        happens exactly when gcd(n, q - 1) == 1.
        """
        rest = [v for v in range(self.order) if v not in self.members]
        return self.field(np.array(rest, dtype=np.int64))


def expected_size(n: int, q: int) -> int:
    """Size of the n'th-power set of GF(q): (q-1)/gcd(n, q-1) nonzero powers plus 0."""
    return (q - 1) // gcd(n, q - 1) + 1
