"""Primitives - finite fields, power residues and polynomial sampling."""

from primitives.field import (
    field_elements,
    get_field,
    is_field_order,
    make_rng,
    random_choice,
    random_element,
    random_elements,
    to_ints,
)
from primitives.polynomial import (
    PolynomialSampler,
    coefficients_ascending,
    evaluate_all,
    from_coefficients,
    is_separable,
    random_separable_poly,
)
from primitives.power_residues import NthPowerSet, expected_size

__all__ = [
    # Field
    "get_field",
    "is_field_order",
    "field_elements",
    "make_rng",
    "random_element",
    "random_elements",
    "random_choice",
    "to_ints",
    # Power residues
    "NthPowerSet",
    "expected_size",
    # Polynomials
    "PolynomialSampler",
    "random_separable_poly",
    "is_separable",
    "evaluate_all",
    "from_coefficients",
    "coefficients_ascending",
]
