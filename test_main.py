import unittest
from unittest.mock import patch
import main

OPTIONS = [("Cobre", "cu"), ("Aluminio", "al"), ("Plata", "ag")]

class TestAskChoice(unittest.TestCase):
    def choose(self, typed, default=1):
        with patch("builtins.input", return_value=typed), patch("builtins.print"):
            return main.ask_choice("Material", OPTIONS, default)

    def test_valid_choice(self):
        self.assertEqual(self.choose("2"), "al")
        self.assertEqual(self.choose("3"), "ag")

    def test_empty_uses_default(self):
        self.assertEqual(self.choose("", default=2), "al")

    def test_zero_and_negative_use_default(self):
        # Python would otherwise index from the end of the list
        for typed in ["0", "-1", "-3"]:
            self.assertEqual(self.choose(typed), "cu", typed)

    def test_out_of_range_and_text_use_default(self):
        for typed in ["4", "99", "abc", "1.5"]:
            self.assertEqual(self.choose(typed, default=3), "ag", typed)

class TestMenu(unittest.TestCase):
    def test_every_calculator_is_callable(self):
        names = [name for name, _ in main.CALCULATORS]
        self.assertEqual(len(names), len(set(names)))
        self.assertTrue(all(callable(runner) for _, runner in main.CALCULATORS))

    def test_ohms_law_runner(self):
        answers = iter(["24", "", "", "12"])
        with patch("builtins.input", side_effect=lambda _: next(answers)), patch("builtins.print"):
            rows = main.run_ohms_law()
        self.assertEqual(dict(rows)["R"], 48)

    def test_invalid_menu_entry_is_skipped(self):
        with patch("builtins.input", side_effect=["0", "-2", "x", ""]), patch("builtins.print"):
            with self.assertRaises(SystemExit):
                main.main()

if __name__ == '__main__':
    unittest.main()
