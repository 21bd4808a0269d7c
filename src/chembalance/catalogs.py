"""Fixed equation catalogs.

Each builder creates fresh equations (terms are never shared between
catalogs) with the coefficient range of the screen they belong to, and wraps
them in an `EquationSet` that follows the given preferences.
"""

from __future__ import annotations

from typing import Callable, Dict

from chembalance import molecules as m
from chembalance.constants import EQUATIONS_COEFFICIENT_MAX, GAME_COEFFICIENT_MAX, INTRO_COEFFICIENT_MAX
from chembalance.families import DecompositionEquation, DisplacementEquation, SynthesisEquation
from chembalance.models import CoefficientRange
from chembalance.preferences import EquationSet, Preferences

INTRO_RANGE = CoefficientRange(0, INTRO_COEFFICIENT_MAX)
EQUATIONS_RANGE = CoefficientRange(0, EQUATIONS_COEFFICIENT_MAX)
GAME_RANGE = CoefficientRange(0, GAME_COEFFICIENT_MAX)


def create_intro_set(preferences: Preferences) -> EquationSet:
    """Make ammonia, separate water, combust methane."""
    initial = preferences.initial_coefficient
    return EquationSet(
        [
            SynthesisEquation.create_N2_3H2_2NH3(INTRO_RANGE, initial),
            DecompositionEquation.create_2H2O_2H2_O2(INTRO_RANGE, initial),
            DisplacementEquation.create_CH4_2O2_CO2_2H2O(INTRO_RANGE, initial),
        ],
        preferences,
    )


def create_synthesis_set(preferences: Preferences) -> EquationSet:
    initial = preferences.initial_coefficient
    return EquationSet(
        [
            SynthesisEquation(2, m.C_, 1, m.O2, 2, m.CO, EQUATIONS_RANGE, initial),
            SynthesisEquation(2, m.N2, 5, m.O2, 2, m.N2O5, EQUATIONS_RANGE, initial),
            SynthesisEquation(4, m.P_, 5, m.O2, 2, m.P2O5, EQUATIONS_RANGE, initial),
            SynthesisEquation(1, m.C2H2, 2, m.H2, 1, m.C2H6, EQUATIONS_RANGE, initial),
        ],
        preferences,
    )


def create_decomposition_set(preferences: Preferences) -> EquationSet:
    initial = preferences.initial_coefficient
    return EquationSet(
        [
            DecompositionEquation(1, m.CH3OH, 1, m.CO, 2, m.H2, EQUATIONS_RANGE, initial),
            DecompositionEquation(2, m.NO2, 2, m.NO, 1, m.O2, EQUATIONS_RANGE, initial),
            DecompositionEquation(2, m.PCl3, 2, m.P_, 3, m.Cl2, EQUATIONS_RANGE, initial),
            DecompositionEquation(2, m.H2O2, 2, m.H2O, 1, m.O2, EQUATIONS_RANGE, initial),
        ],
        preferences,
    )


def create_combustion_set(preferences: Preferences) -> EquationSet:
    initial = preferences.initial_coefficient
    return EquationSet(
        [
            DisplacementEquation(1, m.C2H4, 3, m.O2, 2, m.CO2, 2, m.H2O, EQUATIONS_RANGE, initial),
            DisplacementEquation(1, m.C2H5OH, 3, m.O2, 2, m.CO2, 3, m.H2O, EQUATIONS_RANGE, initial),
            DisplacementEquation(2, m.CH3OH, 3, m.O2, 2, m.CO2, 4, m.H2O, EQUATIONS_RANGE, initial),
            DisplacementEquation(2, m.C2H2, 5, m.O2, 4, m.CO2, 2, m.H2O, EQUATIONS_RANGE, initial),
        ],
        preferences,
    )


def create_game_level1_set(preferences: Preferences) -> EquationSet:
    """Synthesis and decomposition equations with small coefficients."""
    initial = preferences.initial_coefficient

    def decomposition(r1, reactant1, p1, product1, p2, product2):
        return DecompositionEquation(r1, reactant1, p1, product1, p2, product2, GAME_RANGE, initial)

    def synthesis(r1, reactant1, r2, reactant2, p1, product1):
        return SynthesisEquation(r1, reactant1, r2, reactant2, p1, product1, GAME_RANGE, initial)

    return EquationSet(
        [
            decomposition(1, m.PCl5, 1, m.PCl3, 1, m.Cl2),
            decomposition(1, m.CH3OH, 1, m.CO, 2, m.H2),
            synthesis(2, m.H2, 1, m.O2, 2, m.H2O),
            synthesis(1, m.H2, 1, m.F2, 2, m.HF),
            decomposition(2, m.HCl, 1, m.H2, 1, m.Cl2),
            synthesis(1, m.CH2O, 1, m.H2, 1, m.CH3OH),
            decomposition(1, m.C2H6, 1, m.C2H4, 1, m.H2),
            synthesis(1, m.C2H2, 2, m.H2, 1, m.C2H6),
            synthesis(1, m.C_, 1, m.O2, 1, m.CO2),
            synthesis(2, m.C_, 1, m.O2, 2, m.CO),
            decomposition(2, m.CO2, 2, m.CO, 1, m.O2),
            decomposition(2, m.CO, 1, m.C_, 1, m.CO2),
            synthesis(1, m.C_, 2, m.S_, 1, m.CS2),
            decomposition(2, m.NH3, 1, m.N2, 3, m.H2),
            decomposition(2, m.NO, 1, m.N2, 1, m.O2),
            decomposition(2, m.NO2, 2, m.NO, 1, m.O2),
            synthesis(2, m.N2, 1, m.O2, 2, m.N2O),
            synthesis(1, m.P4, 6, m.H2, 4, m.PH3),
            synthesis(1, m.P4, 6, m.F2, 4, m.PF3),
            decomposition(4, m.PCl3, 1, m.P4, 6, m.Cl2),
            decomposition(2, m.SO3, 2, m.SO2, 1, m.O2),
        ],
        preferences,
    )


def _displacement_set(rows, preferences: Preferences) -> EquationSet:
    initial = preferences.initial_coefficient
    return EquationSet(
        [DisplacementEquation(*row, GAME_RANGE, initial) for row in rows],
        preferences,
    )


def create_game_level2_set(preferences: Preferences) -> EquationSet:
    return _displacement_set(
        [
            (2, m.C_, 2, m.H2O, 1, m.CH4, 1, m.CO2),
            (1, m.CH4, 1, m.H2O, 3, m.H2, 1, m.CO),
            (1, m.CH4, 2, m.O2, 1, m.CO2, 2, m.H2O),
            (1, m.C2H4, 3, m.O2, 2, m.CO2, 2, m.H2O),
            (1, m.C2H6, 1, m.Cl2, 1, m.C2H5Cl, 1, m.HCl),
            (1, m.CH4, 4, m.S_, 1, m.CS2, 2, m.H2S),
            (1, m.CS2, 3, m.O2, 1, m.CO2, 2, m.SO2),
            (1, m.SO2, 2, m.H2, 1, m.S_, 2, m.H2O),
            (1, m.SO2, 3, m.H2, 1, m.H2S, 2, m.H2O),
            (2, m.F2, 1, m.H2O, 1, m.OF2, 2, m.HF),
            (1, m.OF2, 1, m.H2O, 1, m.O2, 2, m.HF),
        ],
        preferences,
    )


def create_game_level3_set(preferences: Preferences) -> EquationSet:
    """Combustion-style equations and their reverses, with larger coefficients."""
    return _displacement_set(
        [
            (1, m.C2H5OH, 3, m.O2, 2, m.CO2, 3, m.H2O),
            (2, m.CO2, 3, m.H2O, 1, m.C2H5OH, 3, m.O2),
            (2, m.C2H6, 7, m.O2, 4, m.CO2, 6, m.H2O),
            (4, m.CO2, 6, m.H2O, 2, m.C2H6, 7, m.O2),
            (2, m.C2H2, 5, m.O2, 4, m.CO2, 2, m.H2O),
            (4, m.CO2, 2, m.H2O, 2, m.C2H2, 5, m.O2),
            (4, m.NH3, 3, m.O2, 2, m.N2, 6, m.H2O),
            (2, m.N2, 6, m.H2O, 4, m.NH3, 3, m.O2),
            (4, m.NH3, 5, m.O2, 4, m.NO, 6, m.H2O),
            (4, m.NO, 6, m.H2O, 4, m.NH3, 5, m.O2),
            (4, m.NH3, 7, m.O2, 4, m.NO2, 6, m.H2O),
            (4, m.NO2, 6, m.H2O, 4, m.NH3, 7, m.O2),
            (4, m.NH3, 6, m.NO, 5, m.N2, 6, m.H2O),
            (5, m.N2, 6, m.H2O, 4, m.NH3, 6, m.NO),
        ],
        preferences,
    )


COLLECTIONS: Dict[str, Callable[[Preferences], EquationSet]] = {
    "intro": create_intro_set,
    "synthesis": create_synthesis_set,
    "decomposition": create_decomposition_set,
    "combustion": create_combustion_set,
    "game1": create_game_level1_set,
    "game2": create_game_level2_set,
    "game3": create_game_level3_set,
}


def create_collection(name: str, preferences: Preferences) -> EquationSet:
    try:
        builder = COLLECTIONS[name]
    except KeyError:
        raise KeyError(f"Unknown collection {name}; expected one of {', '.join(COLLECTIONS)}") from None
    return builder(preferences)
