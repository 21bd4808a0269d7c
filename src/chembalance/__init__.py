"""chembalance core package."""

from chembalance.counting import count_atoms
from chembalance.equations import Equation, InconsistentEquationError
from chembalance.families import DecompositionEquation, DisplacementEquation, SynthesisEquation
from chembalance.models import AtomCount, CoefficientRange, EquationState, Molecule, TermSpec
from chembalance.preferences import EquationSet, Preferences
from chembalance.terms import EquationTerm

__all__ = [
    "AtomCount",
    "CoefficientRange",
    "DecompositionEquation",
    "DisplacementEquation",
    "Equation",
    "EquationSet",
    "EquationState",
    "EquationTerm",
    "InconsistentEquationError",
    "Molecule",
    "Preferences",
    "SynthesisEquation",
    "TermSpec",
    "count_atoms",
]
