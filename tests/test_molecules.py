import unittest

from chembalance import elements, molecules
from chembalance.models import Molecule


class TestMolecule(unittest.TestCase):
    def test_symbol_collapses_adjacent_runs(self):
        self.assertEqual(molecules.C2H5OH.symbol_plain, "C2H5OH")
        self.assertEqual(molecules.C2H5OH.symbol, "C<sub>2</sub>H<sub>5</sub>OH")
        self.assertEqual(molecules.C2H5OH.symbol_unicode, "C₂H₅OH")

    def test_non_adjacent_elements_are_not_merged(self):
        # CH3OH has hydrogens on both sides of the oxygen.
        self.assertEqual(molecules.CH3OH.symbol_plain, "CH3OH")
        self.assertEqual(molecules.CH3OH.element_counts()[elements.H], 4)

    def test_single_atom(self):
        self.assertEqual(molecules.C_.symbol, "C")
        self.assertEqual(molecules.C_.symbol_unicode, "C")

    def test_is_big(self):
        self.assertFalse(molecules.CH4.is_big())  # 5 atoms
        self.assertTrue(molecules.CH3OH.is_big())  # 6 atoms
        self.assertTrue(molecules.PCl5.is_big())

    def test_identity_equality(self):
        copy = Molecule((elements.H, elements.H, elements.O))
        self.assertEqual(copy.symbol_plain, molecules.H2O.symbol_plain)
        self.assertNotEqual(copy, molecules.H2O)
        self.assertIs(molecules.by_symbol("H2O"), molecules.H2O)

    def test_empty_molecule_rejected(self):
        with self.assertRaises(ValueError):
            Molecule(())

    def test_unknown_lookups(self):
        with self.assertRaises(KeyError):
            molecules.by_symbol("XeF4")
        with self.assertRaises(KeyError):
            elements.by_symbol("Xe")


if __name__ == '__main__':
    unittest.main()
