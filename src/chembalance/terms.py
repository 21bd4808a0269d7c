"""A coefficient-bearing occurrence of a molecule in an equation."""

from __future__ import annotations

from chembalance.models import CoefficientRange, Molecule
from chembalance.observable import Listener, ObservableValue


class EquationTerm:
    """A term in a chemical equation.

    The balanced coefficient is the lowest coefficient value that balances the
    equation and never changes. The coefficient is set by the user, and must be
    an integer inside `coefficient_range`.
    """

    def __init__(
        self,
        balanced_coefficient: int,
        molecule: Molecule,
        coefficient_range: CoefficientRange,
        initial_coefficient: int = 0,
    ) -> None:
        if isinstance(balanced_coefficient, bool) or not isinstance(balanced_coefficient, int):
            raise ValueError(f"Balanced coefficient must be an integer, got {balanced_coefficient!r}")
        if balanced_coefficient < 1:
            raise ValueError(f"Balanced coefficient must be >= 1, got {balanced_coefficient}")

        self.balanced_coefficient = balanced_coefficient
        self.molecule = molecule
        self.coefficient_range = coefficient_range
        self.coefficient_observable: ObservableValue[int] = ObservableValue(
            initial_coefficient, validator=self.validate
        )

    def validate(self, value: int) -> None:
        """Raise `ValueError` unless `value` is an acceptable coefficient."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Coefficient for {self.molecule.symbol_plain} must be an integer, got {value!r}")
        if not self.coefficient_range.contains(value):
            raise ValueError(
                f"Coefficient {value} for {self.molecule.symbol_plain} is outside "
                f"[{self.coefficient_range.min}, {self.coefficient_range.max}]"
            )

    @property
    def coefficient(self) -> int:
        return self.coefficient_observable.value

    @coefficient.setter
    def coefficient(self, value: int) -> None:
        self.coefficient_observable.value = value

    @property
    def initial_coefficient(self) -> int:
        return self.coefficient_observable.initial_value

    @initial_coefficient.setter
    def initial_coefficient(self, value: int) -> None:
        self.coefficient_observable.initial_value = value

    def reset(self) -> None:
        self.coefficient_observable.reset()

    def subscribe(self, listener: Listener) -> None:
        self.coefficient_observable.subscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self.coefficient_observable.unsubscribe(listener)

    def __repr__(self) -> str:
        return (
            f"EquationTerm({self.molecule.symbol_plain}, coefficient={self.coefficient}, "
            f"balanced={self.balanced_coefficient})"
        )
