"""Shared constants for chembalance."""

from __future__ import annotations

# A molecule with more atoms than this is "big" (affects game difficulty).
BIG_MOLECULE_ATOMS = 5

# Valid values for the initial coefficient preference.
INITIAL_COEFFICIENT_VALUES = (0, 1)

# Inclusive coefficient ranges used by the fixed catalogs.
INTRO_COEFFICIENT_MAX = 3
EQUATIONS_COEFFICIENT_MAX = 6
GAME_COEFFICIENT_MAX = 7

RIGHT_ARROW = "→"

SUBSCRIPT_DIGITS = str.maketrans("0123456789", "₀₁₂₃₄₅₆₇₈₉")
