"""Chemical elements used by the molecule catalog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True, eq=False)
class Element:
    """An element, compared by identity rather than by symbol."""

    symbol: str
    name: str
    atomic_number: int


C = Element("C", "carbon", 6)
Cl = Element("Cl", "chlorine", 17)
F = Element("F", "fluorine", 9)
H = Element("H", "hydrogen", 1)
N = Element("N", "nitrogen", 7)
O = Element("O", "oxygen", 8)  # noqa: E741
P = Element("P", "phosphorus", 15)
S = Element("S", "sulfur", 16)

ELEMENTS: Dict[str, Element] = {element.symbol: element for element in (C, Cl, F, H, N, O, P, S)}


def by_symbol(symbol: str) -> Element:
    """Look up an element of the catalog by its symbol."""
    try:
        return ELEMENTS[symbol]
    except KeyError:
        raise KeyError(f"Unknown element symbol: {symbol}") from None
