"""Chemical equations and the balance predicates derived from their coefficients.

An equation is "balanced" when every term's coefficient is the same multiple
N of its balanced coefficient, with N > 0 and no coefficient equal to zero. It
is "balanced and simplified" when N is exactly 1.

The balanced coefficients are supplied by the caller; this module never solves
stoichiometry, it only verifies at construction time that the supplied values
conserve every element and are in lowest terms.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Callable, Dict, List, Sequence, Tuple

import numpy as np

from chembalance.constants import RIGHT_ARROW
from chembalance.counting import composition_matrix, count_atoms, distinct_elements
from chembalance.logging import logger
from chembalance.models import AtomCount, CoefficientRange, EquationState, Molecule, TermSpec
from chembalance.observable import DerivedValue, Listener
from chembalance.terms import EquationTerm


class InconsistentEquationError(ValueError):
    """Raised when an equation's balanced coefficients cannot balance it."""


def verify_balanced_coefficients(reactants: Sequence[TermSpec], products: Sequence[TermSpec]) -> None:
    """Check that the balanced coefficients conserve atoms and share no common factor.

    Raises:
        InconsistentEquationError: if either side is empty, an element is not
            conserved, or the coefficients are not in lowest terms.
    """
    if not reactants or not products:
        raise InconsistentEquationError("An equation needs at least one reactant and one product.")

    specs = list(reactants) + list(products)
    for spec in specs:
        value = spec.balanced_coefficient
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise InconsistentEquationError(
                f"Balanced coefficient for {spec.molecule.symbol_plain} must be a positive integer, got {value!r}"
            )

    molecules = [spec.molecule for spec in specs]
    elements = distinct_elements(molecules)
    matrix = composition_matrix(molecules, elements)

    # Reactants count positive, products negative; a balanced set sums to zero per element.
    signed = np.array(
        [spec.balanced_coefficient for spec in reactants] + [-spec.balanced_coefficient for spec in products],
        dtype=np.int64,
    )
    difference = matrix @ signed
    if np.any(difference != 0):
        unbalanced = [element.symbol for element, delta in zip(elements, difference, strict=True) if delta != 0]
        raise InconsistentEquationError(
            f"{_format(reactants, products)} does not conserve {', '.join(unbalanced)}"
        )

    divisor = int(np.gcd.reduce(np.abs(signed)))
    if divisor != 1:
        raise InconsistentEquationError(
            f"{_format(reactants, products)} is not in lowest terms (common factor {divisor})"
        )


def _format(reactants: Sequence[TermSpec], products: Sequence[TermSpec]) -> str:
    left = " + ".join(f"{spec.balanced_coefficient} {spec.molecule.symbol_plain}" for spec in reactants)
    right = " + ".join(f"{spec.balanced_coefficient} {spec.molecule.symbol_plain}" for spec in products)
    return f"{left} {RIGHT_ARROW} {right}"


class Equation:
    """A chemical equation: reactant terms on the left, product terms on the right.

    Equations own their terms and are compared by identity. The derived facts
    `is_balanced`, `is_simplified` and `has_nonzero_coefficient` are observable
    values recomputed whenever any coefficient changes.
    """

    def __init__(
        self,
        reactants: Sequence[TermSpec],
        products: Sequence[TermSpec],
        coefficient_range: CoefficientRange,
        initial_coefficient: int = 0,
    ) -> None:
        verify_balanced_coefficients(reactants, products)
        for spec in list(reactants) + list(products):
            if not coefficient_range.contains(spec.balanced_coefficient):
                raise InconsistentEquationError(
                    f"Balanced coefficient {spec.balanced_coefficient} for {spec.molecule.symbol_plain} "
                    f"is outside [{coefficient_range.min}, {coefficient_range.max}]"
                )

        self.coefficient_range = coefficient_range
        self.reactants: Tuple[EquationTerm, ...] = tuple(
            EquationTerm(spec.balanced_coefficient, spec.molecule, coefficient_range, initial_coefficient)
            for spec in reactants
        )
        self.products: Tuple[EquationTerm, ...] = tuple(
            EquationTerm(spec.balanced_coefficient, spec.molecule, coefficient_range, initial_coefficient)
            for spec in products
        )
        self.terms: Tuple[EquationTerm, ...] = self.reactants + self.products

        coefficients = [term.coefficient_observable for term in self.terms]
        self.balanced_observable: DerivedValue[bool] = DerivedValue(coefficients, self._compute_balanced)
        self.simplified_observable: DerivedValue[bool] = DerivedValue(coefficients, self._compute_simplified)
        self.nonzero_coefficient_observable: DerivedValue[bool] = DerivedValue(
            coefficients, self._compute_nonzero_coefficient
        )

        self._observers: Dict[Callable[[], None], Listener] = {}
        logger.debug("Created equation %s", self.key)

    # Factories for the three shapes used by the catalogs.

    @staticmethod
    def create_2_reactants_1_product(
        r1: int, reactant1: Molecule,
        r2: int, reactant2: Molecule,
        p1: int, product1: Molecule,
        coefficient_range: CoefficientRange,
        initial_coefficient: int = 0,
    ) -> Equation:
        return Equation(
            [TermSpec(r1, reactant1), TermSpec(r2, reactant2)],
            [TermSpec(p1, product1)],
            coefficient_range,
            initial_coefficient,
        )

    @staticmethod
    def create_1_reactant_2_products(
        r1: int, reactant1: Molecule,
        p1: int, product1: Molecule,
        p2: int, product2: Molecule,
        coefficient_range: CoefficientRange,
        initial_coefficient: int = 0,
    ) -> Equation:
        return Equation(
            [TermSpec(r1, reactant1)],
            [TermSpec(p1, product1), TermSpec(p2, product2)],
            coefficient_range,
            initial_coefficient,
        )

    @staticmethod
    def create_2_reactants_2_products(
        r1: int, reactant1: Molecule,
        r2: int, reactant2: Molecule,
        p1: int, product1: Molecule,
        p2: int, product2: Molecule,
        coefficient_range: CoefficientRange,
        initial_coefficient: int = 0,
    ) -> Equation:
        return Equation(
            [TermSpec(r1, reactant1), TermSpec(r2, reactant2)],
            [TermSpec(p1, product1), TermSpec(p2, product2)],
            coefficient_range,
            initial_coefficient,
        )

    # Derived facts

    def _compute_balanced(self) -> bool:
        first = self.reactants[0]
        multiplier = Fraction(first.coefficient, first.balanced_coefficient)
        return all(
            term.coefficient != 0 and term.coefficient == multiplier * term.balanced_coefficient
            for term in self.terms
        )

    def _compute_simplified(self) -> bool:
        return all(term.coefficient == term.balanced_coefficient for term in self.terms)

    def _compute_nonzero_coefficient(self) -> bool:
        return any(term.coefficient != 0 for term in self.terms)

    @property
    def is_balanced(self) -> bool:
        return self.balanced_observable.value

    @property
    def is_simplified(self) -> bool:
        return self.simplified_observable.value

    @property
    def has_nonzero_coefficient(self) -> bool:
        return self.nonzero_coefficient_observable.value

    # Operations

    def reset(self) -> None:
        for term in self.terms:
            term.reset()

    def balance(self) -> None:
        """Set every coefficient to its balanced coefficient."""
        for term in self.terms:
            term.coefficient = term.balanced_coefficient
        logger.debug("Balanced %s", self.key)

    def set_coefficients(self, coefficients: Sequence[int]) -> None:
        """Assign all coefficients at once, reactants first, after validating every value."""
        if len(coefficients) != len(self.terms):
            raise ValueError(f"{self.key} has {len(self.terms)} terms, got {len(coefficients)} coefficients")
        for term, value in zip(self.terms, coefficients, strict=True):
            term.validate(value)
        for term, value in zip(self.terms, coefficients, strict=True):
            term.coefficient = value

    def set_initial_coefficients(self, initial_coefficient: int) -> None:
        """Change the value that `reset` restores; current coefficients are left alone."""
        for term in self.terms:
            term.validate(initial_coefficient)
        for term in self.terms:
            term.initial_coefficient = initial_coefficient

    def get_atom_counts(self) -> List[AtomCount]:
        return count_atoms(self)

    def has_big_molecule(self) -> bool:
        """Does this equation contain at least one "big" molecule?"""
        return any(term.molecule.is_big() for term in self.terms)

    def add_coefficients_observer(self, observer: Callable[[], None]) -> None:
        """Call `observer()` now and whenever any coefficient changes."""
        if observer in self._observers:
            raise ValueError(f"Observer {observer!r} is already registered.")

        def listener(_new: int, _old: int) -> None:
            observer()

        self._observers[observer] = listener
        for term in self.terms:
            term.subscribe(listener)
        observer()

    def remove_coefficients_observer(self, observer: Callable[[], None]) -> None:
        listener = self._observers.pop(observer, None)
        if listener is None:
            raise ValueError(f"Observer {observer!r} is not registered.")
        for term in self.terms:
            term.unsubscribe(listener)

    # Formatting and identity

    def get_answer_string(self) -> str:
        """Balanced coefficients only, e.g. ``1 + 3 → 2``."""
        left = " + ".join(str(term.balanced_coefficient) for term in self.reactants)
        right = " + ".join(str(term.balanced_coefficient) for term in self.products)
        return f"{left} {RIGHT_ARROW} {right}"

    def get_display_string(self) -> str:
        """Balanced equation with plain symbols, e.g. ``1 N2 + 3 H2 → 2 NH3``."""
        left = " + ".join(f"{term.balanced_coefficient} {term.molecule.symbol_plain}" for term in self.reactants)
        right = " + ".join(f"{term.balanced_coefficient} {term.molecule.symbol_plain}" for term in self.products)
        return f"{left} {RIGHT_ARROW} {right}"

    @property
    def key(self) -> str:
        """Identity string such as ``N2_3H2_2NH3``, used to save and restore state."""
        parts = []
        for term in self.terms:
            prefix = "" if term.balanced_coefficient == 1 else str(term.balanced_coefficient)
            parts.append(prefix + term.molecule.symbol_plain)
        return "_".join(parts)

    def get_state(self) -> EquationState:
        return EquationState(
            key=self.key,
            coefficients=tuple(term.coefficient for term in self.terms),
            initial_coefficients=tuple(term.initial_coefficient for term in self.terms),
        )

    def validate_state(self, state: EquationState) -> None:
        """Raise `ValueError` unless `state` can be applied to this equation as a whole."""
        if state.key != self.key:
            raise ValueError(f"State for {state.key} cannot be applied to {self.key}")
        checks = (("coefficients", state.coefficients), ("initial_coefficients", state.initial_coefficients))
        for name, values in checks:
            if len(values) != len(self.terms):
                raise ValueError(f"{self.key} has {len(self.terms)} terms, state has {len(values)} {name}")
            for term, value in zip(self.terms, values, strict=True):
                term.validate(value)

    def set_state(self, state: EquationState) -> None:
        """Restore coefficients and initial coefficients from a snapshot; nothing is written if invalid."""
        self.validate_state(state)
        # Initial values first, so that the restored current values are the last write.
        for term, value in zip(self.terms, state.initial_coefficients, strict=True):
            term.initial_coefficient = value
        for term, value in zip(self.terms, state.coefficients, strict=True):
            term.coefficient = value

    def __str__(self) -> str:
        return self.get_display_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key})"
