"""Atom counting for chemical equations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterable, List, Sequence

import numpy as np

from chembalance.elements import Element
from chembalance.models import AtomCount, Molecule

if TYPE_CHECKING:
    from chembalance.equations import Equation
    from chembalance.terms import EquationTerm


def count_atoms(equation: Equation) -> List[AtomCount]:
    """Count each type of atom on both sides of `equation`, using current coefficients.

    The order of the returned counts is the order in which elements are first
    encountered scanning the reactants left to right (atoms left to right within
    each molecule), then the products. For CH4 + 2 O2 -> CO2 + 2 H2O the order
    is [C, H, O].
    """
    counts: Dict[Element, AtomCount] = {}
    _append_to_counts(counts, equation.reactants, is_reactants=True)
    _append_to_counts(counts, equation.products, is_reactants=False)
    return list(counts.values())


def _append_to_counts(
    counts: Dict[Element, AtomCount],
    terms: Iterable[EquationTerm],
    is_reactants: bool,
) -> None:
    for term in terms:
        coefficient = term.coefficient
        for element in term.molecule.atoms:
            atom_count = counts.get(element)
            if atom_count is None:
                atom_count = AtomCount(element)
                counts[element] = atom_count
            if is_reactants:
                atom_count.reactants_total += coefficient
            else:
                atom_count.products_total += coefficient


def distinct_elements(molecules: Iterable[Molecule]) -> List[Element]:
    """Elements of `molecules` in first-occurrence order."""
    seen: Dict[Element, None] = {}
    for molecule in molecules:
        for element in molecule.atoms:
            seen.setdefault(element, None)
    return list(seen)


def composition_matrix(molecules: Sequence[Molecule], elements: Sequence[Element]) -> np.ndarray:
    """Atom occurrences as an (elements x molecules) integer matrix."""
    matrix = np.zeros((len(elements), len(molecules)), dtype=np.int64)
    row = {element: index for index, element in enumerate(elements)}
    for column, molecule in enumerate(molecules):
        for element, occurrences in molecule.element_counts().items():
            matrix[row[element], column] = occurrences
    return matrix
