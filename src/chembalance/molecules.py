"""Fixed catalog of molecules, built once at import time."""

from __future__ import annotations

from typing import Dict

from chembalance.elements import C, Cl, F, H, N, O, P, S
from chembalance.models import Molecule

C_ = Molecule((C,))
Cl2 = Molecule((Cl, Cl))
C2H2 = Molecule((C, C, H, H))
C2H4 = Molecule((C, C, H, H, H, H))
C2H5Cl = Molecule((C, C, H, H, H, H, H, Cl))
C2H5OH = Molecule((C, C, H, H, H, H, H, O, H))
C2H6 = Molecule((C, C, H, H, H, H, H, H))
CH2O = Molecule((C, H, H, O))
CH3OH = Molecule((C, H, H, H, O, H))
CH4 = Molecule((C, H, H, H, H))
CO = Molecule((C, O))
CO2 = Molecule((C, O, O))
CS2 = Molecule((C, S, S))
F2 = Molecule((F, F))
H2 = Molecule((H, H))
H2O = Molecule((H, H, O))
H2O2 = Molecule((H, H, O, O))
H2S = Molecule((H, H, S))
HF = Molecule((H, F))
HCl = Molecule((H, Cl))
N2 = Molecule((N, N))
N2O = Molecule((N, N, O))
N2O5 = Molecule((N, N, O, O, O, O, O))
NH3 = Molecule((N, H, H, H))
NO = Molecule((N, O))
NO2 = Molecule((N, O, O))
O2 = Molecule((O, O))
OF2 = Molecule((O, F, F))
P_ = Molecule((P,))
P2O5 = Molecule((P, P, O, O, O, O, O))
P4 = Molecule((P, P, P, P))
PH3 = Molecule((P, H, H, H))
PCl3 = Molecule((P, Cl, Cl, Cl))
PCl5 = Molecule((P, Cl, Cl, Cl, Cl, Cl))
PF3 = Molecule((P, F, F, F))
S_ = Molecule((S,))
SO2 = Molecule((S, O, O))
SO3 = Molecule((S, O, O, O))

# Single-atom species share their name with the element, hence the trailing underscore.
MOLECULES: Dict[str, Molecule] = {
    molecule.symbol_plain: molecule
    for molecule in (
        C_, Cl2, C2H2, C2H4, C2H5Cl, C2H5OH, C2H6, CH2O, CH3OH, CH4, CO, CO2, CS2,
        F2, H2, H2O, H2O2, H2S, HF, HCl, N2, N2O, N2O5, NH3, NO, NO2, O2, OF2,
        P_, P2O5, P4, PH3, PCl3, PCl5, PF3, S_, SO2, SO3,
    )
}


def by_symbol(symbol: str) -> Molecule:
    """Look up a catalog molecule by its plain symbol, e.g. ``"H2O"``."""
    try:
        return MOLECULES[symbol]
    except KeyError:
        raise KeyError(f"Unknown molecule: {symbol}") from None
