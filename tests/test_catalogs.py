import unittest

from chembalance.catalogs import COLLECTIONS, create_collection
from chembalance.families import DecompositionEquation, DisplacementEquation, SynthesisEquation
from chembalance.preferences import Preferences

SHAPES = {
    SynthesisEquation: (2, 1),
    DecompositionEquation: (1, 2),
    DisplacementEquation: (2, 2),
}


class TestCatalogs(unittest.TestCase):
    def setUp(self):
        self.preferences = Preferences()

    def test_collection_sizes(self):
        sizes = {name: len(builder(self.preferences)) for name, builder in COLLECTIONS.items()}
        self.assertEqual(
            sizes,
            {
                "intro": 3,
                "synthesis": 4,
                "decomposition": 4,
                "combustion": 4,
                "game1": 21,
                "game2": 11,
                "game3": 14,
            },
        )

    def test_family_shapes(self):
        for name, builder in COLLECTIONS.items():
            for equation in builder(self.preferences):
                with self.subTest(collection=name, equation=equation.key):
                    expected = SHAPES[type(equation)]
                    self.assertEqual((len(equation.reactants), len(equation.products)), expected)

    def test_balance_reaches_simplified_state(self):
        for name, builder in COLLECTIONS.items():
            for equation in builder(self.preferences):
                with self.subTest(collection=name, equation=equation.key):
                    self.assertFalse(equation.is_balanced)
                    equation.balance()
                    self.assertTrue(equation.is_balanced)
                    self.assertTrue(equation.is_simplified)

    def test_builders_create_fresh_equations(self):
        first = create_collection("intro", self.preferences)
        second = create_collection("intro", self.preferences)
        first.get("N2_3H2_2NH3").balance()
        self.assertFalse(second.get("N2_3H2_2NH3").is_balanced)

    def test_molecules_are_shared(self):
        game = create_collection("game1", self.preferences)
        h2 = [term.molecule for equation in game for term in equation.terms if term.molecule.symbol_plain == "H2"]
        self.assertGreater(len(h2), 1)
        self.assertTrue(all(molecule is h2[0] for molecule in h2))

    def test_level1_contains_big_molecules(self):
        game = create_collection("game1", self.preferences)
        self.assertTrue(game.get("PCl5_PCl3_Cl2").has_big_molecule())
        self.assertFalse(game.get("2H2_O2_2H2O").has_big_molecule())

    def test_unknown_collection(self):
        with self.assertRaises(KeyError):
            create_collection("game4", self.preferences)


if __name__ == '__main__':
    unittest.main()
