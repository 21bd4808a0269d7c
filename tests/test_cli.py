import json
import tempfile
import unittest
from pathlib import Path

from typer.testing import CliRunner

from chembalance.cli import app


class TestCli(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()

    def test_catalog(self):
        result = self.runner.invoke(app, ["catalog", "--collection", "intro"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("N2_3H2_2NH3\t1 N2 + 3 H2 → 2 NH3", result.output)

    def test_answer(self):
        result = self.runner.invoke(app, ["answer", "CH4_2O2_CO2_2H2O"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.strip(), "1 + 2 → 1 + 2")

    def test_check_balanced(self):
        result = self.runner.invoke(app, ["check", "CH4_2O2_CO2_2H2O", "1", "2", "1", "2"])
        self.assertEqual(result.exit_code, 0, result.output)

        payload = json.loads(result.output)
        self.assertTrue(payload["balanced"])
        self.assertTrue(payload["simplified"])
        self.assertEqual(
            payload["atom_counts"],
            [
                {"element": "C", "reactants": 1, "products": 1},
                {"element": "H", "reactants": 4, "products": 4},
                {"element": "O", "reactants": 4, "products": 4},
            ],
        )

    def test_check_rejects_out_of_range(self):
        result = self.runner.invoke(app, ["check", "N2_3H2_2NH3", "1", "9", "2"])
        self.assertEqual(result.exit_code, 2)

    def test_check_rejects_unknown_equation(self):
        result = self.runner.invoke(app, ["check", "H2_Cl2_2HCl", "1", "1", "2"])
        self.assertEqual(result.exit_code, 2)

    def test_check_then_restore(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            project_file = Path(tmpdir) / "project.sqlite"
            result = self.runner.invoke(
                app,
                [
                    "check", "2C_O2_2CO", "4", "2", "4",
                    "--collection", "synthesis",
                    "--project-file", str(project_file),
                ],
            )
            self.assertEqual(result.exit_code, 0, result.output)
            payload = json.loads(result.output)
            self.assertTrue(payload["balanced"])
            self.assertFalse(payload["simplified"])

            result = self.runner.invoke(
                app,
                ["restore", str(project_file), str(payload["snapshot_id"]), "--collection", "synthesis"],
            )
            self.assertEqual(result.exit_code, 0, result.output)
            restored = {item["equation"]: item for item in json.loads(result.output)}
            self.assertEqual(restored["2C_O2_2CO"]["coefficients"], [4, 2, 4])
            self.assertTrue(restored["2C_O2_2CO"]["balanced"])
            self.assertFalse(restored["2N2_5O2_2N2O5"]["has_nonzero_coefficient"])

    def test_config_initial_coefficient(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_file = Path(tmpdir) / "config.json"
            config_file.write_text(json.dumps({"initial_coefficient": 1}))
            result = self.runner.invoke(
                app, ["--config", str(config_file), "check", "N2_3H2_2NH3", "1", "1", "1"]
            )
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertTrue(json.loads(result.output)["has_nonzero_coefficient"])

    def test_config_errors_are_usage_errors(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            missing = Path(tmpdir) / "missing.json"
            result = self.runner.invoke(app, ["--config", str(missing), "catalog"])
            self.assertEqual(result.exit_code, 2)

            config_file = Path(tmpdir) / "config.json"
            config_file.write_text(json.dumps({"initial_coefficient": 1.7}))
            result = self.runner.invoke(app, ["--config", str(config_file), "catalog"])
            self.assertEqual(result.exit_code, 2)


if __name__ == '__main__':
    unittest.main()
