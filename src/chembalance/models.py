"""Data structures for molecules, atom counts and equation construction."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from itertools import groupby
from typing import Dict, List, Tuple

from chembalance.constants import BIG_MOLECULE_ATOMS, SUBSCRIPT_DIGITS
from chembalance.elements import Element


@dataclass(frozen=True, eq=False)
class Molecule:
    """An immutable chemical species, one element reference per atom.

    Molecules are shared by every equation that uses them and compared by
    identity. The display symbol is built by collapsing runs of adjacent equal
    elements, so ``[C, C, H, H, H, H, H, O, H]`` reads ``C₂H₅OH``.
    """

    atoms: Tuple[Element, ...]

    def __post_init__(self) -> None:
        if not self.atoms:
            raise ValueError("A molecule needs at least one atom.")
        object.__setattr__(self, "atoms", tuple(self.atoms))

    @cached_property
    def _runs(self) -> List[Tuple[str, int]]:
        return [(element.symbol, len(list(run))) for element, run in groupby(self.atoms)]

    @cached_property
    def symbol(self) -> str:
        """Symbol with ``<sub>`` markup for subscripts."""
        return "".join(s if n == 1 else f"{s}<sub>{n}</sub>" for s, n in self._runs)

    @cached_property
    def symbol_plain(self) -> str:
        """Symbol without markup, e.g. ``C2H5OH``."""
        return "".join(s if n == 1 else f"{s}{n}" for s, n in self._runs)

    @cached_property
    def symbol_unicode(self) -> str:
        """Symbol with unicode subscript digits, e.g. ``C₂H₅OH``."""
        return "".join(s if n == 1 else s + str(n).translate(SUBSCRIPT_DIGITS) for s, n in self._runs)

    def is_big(self) -> bool:
        return len(self.atoms) > BIG_MOLECULE_ATOMS

    def element_counts(self) -> Dict[Element, int]:
        """Occurrences of each element, in first-occurrence order."""
        counts: Dict[Element, int] = {}
        for element in self.atoms:
            counts[element] = counts.get(element, 0) + 1
        return counts

    def __repr__(self) -> str:
        return f"Molecule({self.symbol_plain})"


@dataclass
class AtomCount:
    """Atoms of one element on each side of an equation."""

    element: Element
    reactants_total: int = 0
    products_total: int = 0

    @property
    def is_balanced(self) -> bool:
        return self.reactants_total == self.products_total


@dataclass(frozen=True)
class CoefficientRange:
    """Inclusive range of values a coefficient may take."""

    min: int = 0
    max: int = 1

    def __post_init__(self) -> None:
        if self.min < 0 or self.max < self.min:
            raise ValueError(f"Invalid coefficient range [{self.min}, {self.max}].")

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max


@dataclass(frozen=True)
class TermSpec:
    """One (balanced coefficient, molecule) pair used to build an equation."""

    balanced_coefficient: int
    molecule: Molecule


@dataclass(frozen=True)
class EquationState:
    """Coefficient state of one equation, keyed by the equation's identity string."""

    key: str
    coefficients: Tuple[int, ...]
    initial_coefficients: Tuple[int, ...]
