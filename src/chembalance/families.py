"""Equation families: synthesis, decomposition and displacement.

These add no behaviour to `Equation`; they fix the number of reactants and
products, and provide named constructors for commonly used equations.
"""

from __future__ import annotations

from chembalance import molecules as m
from chembalance.constants import INTRO_COEFFICIENT_MAX
from chembalance.equations import Equation
from chembalance.models import CoefficientRange, Molecule, TermSpec

DEFAULT_RANGE = CoefficientRange(0, INTRO_COEFFICIENT_MAX)


class SynthesisEquation(Equation):
    """Two reactants combine to form one more complex product."""

    def __init__(
        self,
        r1: int, reactant1: Molecule,
        r2: int, reactant2: Molecule,
        p1: int, product1: Molecule,
        coefficient_range: CoefficientRange = DEFAULT_RANGE,
        initial_coefficient: int = 0,
    ) -> None:
        super().__init__(
            [TermSpec(r1, reactant1), TermSpec(r2, reactant2)],
            [TermSpec(p1, product1)],
            coefficient_range,
            initial_coefficient,
        )

    @classmethod
    def create_N2_3H2_2NH3(cls, coefficient_range: CoefficientRange = DEFAULT_RANGE, initial_coefficient: int = 0):
        return cls(1, m.N2, 3, m.H2, 2, m.NH3, coefficient_range, initial_coefficient)

    @classmethod
    def create_2H2_O2_2H2O(cls, coefficient_range: CoefficientRange = DEFAULT_RANGE, initial_coefficient: int = 0):
        return cls(2, m.H2, 1, m.O2, 2, m.H2O, coefficient_range, initial_coefficient)

    @classmethod
    def create_H2_F2_2HF(cls, coefficient_range: CoefficientRange = DEFAULT_RANGE, initial_coefficient: int = 0):
        return cls(1, m.H2, 1, m.F2, 2, m.HF, coefficient_range, initial_coefficient)

    @classmethod
    def create_C_O2_CO2(cls, coefficient_range: CoefficientRange = DEFAULT_RANGE, initial_coefficient: int = 0):
        return cls(1, m.C_, 1, m.O2, 1, m.CO2, coefficient_range, initial_coefficient)


class DecompositionEquation(Equation):
    """One reactant breaks down into two simpler products."""

    def __init__(
        self,
        r1: int, reactant1: Molecule,
        p1: int, product1: Molecule,
        p2: int, product2: Molecule,
        coefficient_range: CoefficientRange = DEFAULT_RANGE,
        initial_coefficient: int = 0,
    ) -> None:
        super().__init__(
            [TermSpec(r1, reactant1)],
            [TermSpec(p1, product1), TermSpec(p2, product2)],
            coefficient_range,
            initial_coefficient,
        )

    @classmethod
    def create_2H2O_2H2_O2(cls, coefficient_range: CoefficientRange = DEFAULT_RANGE, initial_coefficient: int = 0):
        return cls(2, m.H2O, 2, m.H2, 1, m.O2, coefficient_range, initial_coefficient)

    @classmethod
    def create_2NH3_N2_3H2(cls, coefficient_range: CoefficientRange = DEFAULT_RANGE, initial_coefficient: int = 0):
        return cls(2, m.NH3, 1, m.N2, 3, m.H2, coefficient_range, initial_coefficient)

    @classmethod
    def create_PCl5_PCl3_Cl2(cls, coefficient_range: CoefficientRange = DEFAULT_RANGE, initial_coefficient: int = 0):
        return cls(1, m.PCl5, 1, m.PCl3, 1, m.Cl2, coefficient_range, initial_coefficient)


class DisplacementEquation(Equation):
    """Two compounds exchange bonds to form two different compounds.

    Combustion equations are displacement equations with O2 as a reactant.
    """

    def __init__(
        self,
        r1: int, reactant1: Molecule,
        r2: int, reactant2: Molecule,
        p1: int, product1: Molecule,
        p2: int, product2: Molecule,
        coefficient_range: CoefficientRange = DEFAULT_RANGE,
        initial_coefficient: int = 0,
    ) -> None:
        super().__init__(
            [TermSpec(r1, reactant1), TermSpec(r2, reactant2)],
            [TermSpec(p1, product1), TermSpec(p2, product2)],
            coefficient_range,
            initial_coefficient,
        )

    @classmethod
    def create_CH4_2O2_CO2_2H2O(cls, coefficient_range: CoefficientRange = DEFAULT_RANGE, initial_coefficient: int = 0):
        return cls(1, m.CH4, 2, m.O2, 1, m.CO2, 2, m.H2O, coefficient_range, initial_coefficient)

    @classmethod
    def create_CH4_H2O_3H2_CO(cls, coefficient_range: CoefficientRange = DEFAULT_RANGE, initial_coefficient: int = 0):
        return cls(1, m.CH4, 1, m.H2O, 3, m.H2, 1, m.CO, coefficient_range, initial_coefficient)
