import unittest

import numpy as np

from chembalance import elements as e
from chembalance import molecules as m
from chembalance.catalogs import COLLECTIONS
from chembalance.counting import composition_matrix, count_atoms, distinct_elements
from chembalance.families import DisplacementEquation, SynthesisEquation
from chembalance.models import CoefficientRange
from chembalance.preferences import Preferences


class TestCountAtoms(unittest.TestCase):
    def test_methane_combustion_order_and_totals(self):
        equation = DisplacementEquation.create_CH4_2O2_CO2_2H2O(CoefficientRange(0, 3))
        equation.set_coefficients([1, 2, 1, 2])

        counts = count_atoms(equation)
        self.assertEqual([count.element for count in counts], [e.C, e.H, e.O])
        self.assertEqual(
            [(count.reactants_total, count.products_total) for count in counts],
            [(1, 1), (4, 4), (4, 4)],
        )

    def test_elements_first_seen_in_products_are_appended(self):
        # Reversed reaction: products introduce no new elements, reactants order is C, O, H.
        equation = DisplacementEquation(1, m.CO2, 2, m.H2O, 1, m.CH4, 2, m.O2, CoefficientRange(0, 3))
        self.assertEqual([count.element for count in equation.get_atom_counts()], [e.C, e.O, e.H])

    def test_counts_use_current_coefficients(self):
        equation = SynthesisEquation.create_N2_3H2_2NH3()
        equation.set_coefficients([1, 0, 2])

        counts = {count.element: count for count in equation.get_atom_counts()}
        self.assertEqual(counts[e.N].reactants_total, 2)
        self.assertEqual(counts[e.N].products_total, 2)
        self.assertEqual(counts[e.H].reactants_total, 0)
        self.assertEqual(counts[e.H].products_total, 6)
        self.assertFalse(counts[e.H].is_balanced)

    def test_zero_coefficients_still_list_every_element(self):
        equation = SynthesisEquation.create_N2_3H2_2NH3()
        counts = equation.get_atom_counts()
        self.assertEqual([count.element for count in counts], [e.N, e.H])
        self.assertTrue(all(c.reactants_total == 0 and c.products_total == 0 for c in counts))

    def test_every_catalog_equation_balances_atoms(self):
        preferences = Preferences()
        for name, builder in COLLECTIONS.items():
            for equation in builder(preferences):
                with self.subTest(collection=name, equation=equation.key):
                    equation.balance()
                    for count in equation.get_atom_counts():
                        self.assertEqual(count.reactants_total, count.products_total)


class TestCompositionMatrix(unittest.TestCase):
    def test_matrix(self):
        molecules = [m.CH4, m.O2, m.CO2, m.H2O]
        elements = distinct_elements(molecules)
        self.assertEqual(elements, [e.C, e.H, e.O])

        matrix = composition_matrix(molecules, elements)
        expected = np.array([
            [1, 0, 1, 0],
            [4, 0, 0, 2],
            [0, 2, 2, 1],
        ])
        np.testing.assert_array_equal(matrix, expected)


if __name__ == '__main__':
    unittest.main()
