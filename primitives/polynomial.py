"""Random separable polynomials over GF(q).

Polynomials are galois.Poly objects. Galois stores coefficients in descending
order; the helpers here take and return ascending order [c0, c1, ..., cd]
where cd is the leading coefficient.

The sampler draws c0..c(d-1) uniformly from the field and cd uniformly from a
restricted leading set, then rejects the draw unless the polynomial is
separable. The rejection loop has no retry cap: it ends with probability 1
whenever separable polynomials of degree d exist over the field, but a caller
that supplies an unsatisfiable configuration will loop forever.
"""

from typing import List, Optional

import galois
import numpy as np

from primitives.field import FieldType, random_choice, random_elements, to_ints


def is_separable(f: galois.Poly) -> bool:
    """True if gcd(f, f') is a nonzero constant.

    A polynomial whose formal derivative vanishes (only x^(kp) terms in
    characteristic p) has gcd(f, 0) = f and is not separable unless it is a
    nonzero constant.
    """
    if f.degree == 0:
        return bool(f.coeffs[0] != 0)
    return galois.gcd(f, f.derivative()).degree == 0


def evaluate_all(f: galois.Poly, field: FieldType):
    """f(a) for every a in the field, in element enumeration order."""
    return f(field.elements)


def from_coefficients(coeffs, field: FieldType) -> galois.Poly:
    """Construct a polynomial from ascending-order coefficients [c0, ..., cd]."""
    return galois.Poly(field(to_ints(coeffs)), order="asc")


def coefficients_ascending(f: galois.Poly, degree: Optional[int] = None) -> List[int]:
    """Extract ascending-order integer coefficients [c0, ..., cd], zero padded to degree."""
    coeffs = to_ints(f.coeffs)[::-1]
    if degree is not None and len(coeffs) < degree + 1:
        coeffs += [0] * (degree + 1 - len(coeffs))
    return coeffs


class PolynomialSampler:
    """Rejection sampler for separable polynomials with a restricted leading term.

    Attributes:
        field: galois field class for GF(q)
        leading: FieldArray the leading coefficient is drawn from
        attempts: Total draws made by this sampler (diagnostic)
        last_attempts: Draws made by the most recent sample() call

    Usage:
        sampler = PolynomialSampler(GF, nth_powers.complement(), rng)
        f = sampler.sample(6)
    """

    def __init__(self, field: FieldType, leading, rng: np.random.Generator):
        """
        Args:
            field: galois field class
            leading: Nonempty subset of nonzero field elements
            rng: Source of randomness shared with the caller

        Raises:
            ValueError: If leading is empty or contains 0
        """
        leading = field(to_ints(leading))
        if leading.size == 0:
            raise ValueError("leading coefficient set must be nonempty")
        if np.any(leading == 0):
            raise ValueError("leading coefficient set must not contain 0")
        self.field = field
        self.leading = leading
        self.rng = rng
        self.attempts = 0
        self.last_attempts = 0

    def draw(self, degree: int) -> galois.Poly:
        """One draw of a degree-`degree` polynomial, separable or not."""
        lower = random_elements(self.field, degree, self.rng)
        lead = random_choice(self.field, self.leading, self.rng)
        coeffs = self.field(to_ints(lower) + [int(lead)])
        return galois.Poly(coeffs, order="asc")

    def sample(self, degree: int) -> galois.Poly:
        """Draw until the polynomial is separable and return it.

        Raises:
            ValueError: If degree < 1
        """
        if degree < 1:
            raise ValueError(f"degree must be >= 1, got {degree}")
        self.last_attempts = 0
        while True:
            f = self.draw(degree)
            self.attempts += 1
            self.last_attempts += 1
            if is_separable(f):
                return f


def random_separable_poly(
    degree: int,
    field: FieldType,
    leading,
    rng: np.random.Generator,
) -> galois.Poly:
    """Random separable polynomial of exact degree with leading coefficient from `leading`."""
    return PolynomialSampler(field, leading, rng).sample(degree)
