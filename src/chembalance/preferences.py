"""Preferences and keyed collections of equations that follow them."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List

from chembalance.constants import INITIAL_COEFFICIENT_VALUES
from chembalance.equations import Equation
from chembalance.logging import logger
from chembalance.observable import ObservableValue


def validate_initial_coefficient(value: int) -> None:
    """Raise `ValueError` unless `value` is an allowed initial coefficient."""
    if isinstance(value, bool) or value not in INITIAL_COEFFICIENT_VALUES:
        raise ValueError(f"Initial coefficient must be one of {INITIAL_COEFFICIENT_VALUES}, got {value!r}")


class Preferences:
    """User preferences shared by every equation set they are passed to."""

    def __init__(self, initial_coefficient: int = 0) -> None:
        self.initial_coefficient_observable: ObservableValue[int] = ObservableValue(
            initial_coefficient, validator=validate_initial_coefficient
        )

    @property
    def initial_coefficient(self) -> int:
        return self.initial_coefficient_observable.value

    @initial_coefficient.setter
    def initial_coefficient(self, value: int) -> None:
        self.initial_coefficient_observable.value = value


class EquationSet:
    """An ordered collection of equations, addressable by equation key.

    The set follows `preferences`: when the initial coefficient preference
    changes, every equation's initial coefficient is rewritten. Current
    coefficients are not touched until the next `reset`.
    """

    def __init__(self, equations: Iterable[Equation], preferences: Preferences) -> None:
        self._equations: Dict[str, Equation] = {}
        for equation in equations:
            if equation.key in self._equations:
                raise ValueError(f"Duplicate equation {equation.key}")
            self._equations[equation.key] = equation

        self.preferences = preferences
        preferences.initial_coefficient_observable.subscribe(self._on_initial_coefficient_changed)

    def _on_initial_coefficient_changed(self, initial_coefficient: int, _old: int) -> None:
        logger.debug("Initial coefficient changed to %d for %d equations", initial_coefficient, len(self))
        for equation in self._equations.values():
            equation.set_initial_coefficients(initial_coefficient)

    def get(self, key: str) -> Equation:
        try:
            return self._equations[key]
        except KeyError:
            raise KeyError(f"Unknown equation {key}; expected one of {', '.join(self._equations)}") from None

    def keys(self) -> List[str]:
        return list(self._equations)

    def reset(self) -> None:
        for equation in self._equations.values():
            equation.reset()

    def dispose(self) -> None:
        """Stop following the preferences."""
        self.preferences.initial_coefficient_observable.unsubscribe(self._on_initial_coefficient_changed)

    def __iter__(self) -> Iterator[Equation]:
        return iter(self._equations.values())

    def __len__(self) -> int:
        return len(self._equations)

    def __contains__(self, key: object) -> bool:
        return key in self._equations
