import math
import unittest
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from config.config import EVALUATOR_CONFIG
from core.line_evaluator import CalcState, LineEvaluator
from core.token_system import Operation


def run_lines(lines, state=None):
    state = state if state is not None else CalcState()
    for line in lines:
        state = LineEvaluator.process_line(state, line)
    return state


class TestCalcState(unittest.TestCase):
    def test_defaults(self):
        state = CalcState()
        self.assertEqual(state.current, 0.0)
        self.assertFalse(state.rad_on)

    def test_is_immutable(self):
        with self.assertRaises(AttributeError):
            CalcState().current = 1.0


class TestEvaluate(unittest.TestCase):
    def test_nullary(self):
        state = LineEvaluator.evaluate(CalcState(2.0), Operation.RAD)
        self.assertEqual(state, CalcState(2.0, True))
        state = LineEvaluator.evaluate(state, Operation.DEG)
        self.assertEqual(state, CalcState(2.0, False))

    def test_error_is_noop(self):
        state = CalcState(5.0, True)
        self.assertEqual(LineEvaluator.evaluate(state, Operation.ERR), state)

    def test_binary_uses_current_as_left(self):
        self.assertEqual(LineEvaluator.evaluate(CalcState(10.0), Operation.SUB, 4.0).current, 6.0)

    def test_binary_without_argument(self):
        with self.assertLogs("core.line_evaluator", level="ERROR"):
            state = LineEvaluator.evaluate(CalcState(3.0), Operation.ADD)
        self.assertEqual(state.current, 3.0)


class TestProcessLine(unittest.TestCase):
    def test_set_add_mul(self):
        self.assertEqual(run_lines(["5", "+3", "*2"]).current, 16.0)

    def test_set_is_exact(self):
        for line, value in (("2.5", 2.5), ("0.1", 0.1), ("42", 42.0), ("0.125", 0.125)):
            self.assertEqual(run_lines([line], CalcState(-1.0)).current, value)

    def test_whitespace_between_operator_and_argument(self):
        self.assertEqual(run_lines(["1", "+ \t 2"]).current, 3.0)

    def test_missing_argument_is_zero(self):
        self.assertEqual(run_lines(["7", "*"]).current, 0.0)

    def test_unary_ignores_trailing_text(self):
        self.assertEqual(run_lines(["3", "_ 9"]).current, -3.0)

    def test_unknown_token_keeps_state(self):
        state = CalcState(4.0, True)
        with self.assertLogs(level="ERROR") as cm:
            self.assertEqual(LineEvaluator.process_line(state, "XYZ"), state)
        self.assertEqual(len(cm.records), 1)

    def test_angle_mode_persists(self):
        state = run_lines(["RAD", "0", "+3", "_", "_"])
        self.assertTrue(state.rad_on)
        state = run_lines(["1.5707963", "SIN"], state)
        self.assertAlmostEqual(state.current, 1.0)
        state = run_lines(["DEG", "90", "SIN"], state)
        self.assertFalse(state.rad_on)
        self.assertAlmostEqual(state.current, 1.0)

    def test_rad_is_idempotent(self):
        self.assertEqual(run_lines(["RAD", "RAD"]), run_lines(["RAD"]))

    def test_sin_of_half_pi_in_radians(self):
        with self.assertLogs("core.literal_parser", level="WARNING"):
            state = run_lines(["RAD", "1.5707963268", "SIN"])
        self.assertAlmostEqual(state.current, 1.0, places=15)

    def test_sqrt_of_negative(self):
        with self.assertLogs("core.operators", level="ERROR"):
            self.assertEqual(run_lines(["SQRT"], CalcState(-4.0)).current, -4.0)

    def test_division_by_zero(self):
        with self.assertLogs("core.operators", level="ERROR"):
            self.assertEqual(run_lines(["/0"], CalcState(10.0)).current, 10.0)

    def test_asin_sentinel_replaces_accumulator(self):
        with self.assertLogs("core.operators", level="ERROR"):
            self.assertEqual(run_lines(["5", "ASIN"]).current, math.inf)

    def test_infinite_accumulator_through_trig(self):
        # ASIN out of domain leaves inf in the accumulator
        with self.assertLogs("core.operators", level="ERROR"):
            self.assertTrue(math.isnan(run_lines(["5", "ASIN", "SIN"]).current))
        with self.assertLogs("core.operators", level="ERROR"):
            self.assertTrue(math.isnan(run_lines(["5", "ASIN", "COS"]).current))
        with self.assertLogs("core.operators", level="ERROR"):
            self.assertEqual(run_lines(["5", "ASIN", "TAN"]).current,
                             EVALUATOR_CONFIG["tan_pole_value"])
        with self.assertLogs("core.operators", level="ERROR"):
            self.assertEqual(run_lines(["5", "ASIN", "CTN"]).current, math.inf)

    def test_sqrt_of_nan_passes_through(self):
        with self.assertLogs("core.operators", level="ERROR") as cm:
            state = run_lines(["5", "ASIN", "SIN", "SQRT"])
        self.assertTrue(math.isnan(state.current))
        self.assertEqual(len(cm.records), 2)
        self.assertIn("SQRT", cm.output[-1])

    def test_pow_nan_is_kept(self):
        self.assertTrue(math.isnan(run_lines(["8", "_", "^0.5"]).current))


if __name__ == "__main__":
    unittest.main()
