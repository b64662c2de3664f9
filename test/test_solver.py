import unittest
from unittest import mock

from cvc5_sugar import *


class TestSolver(unittest.TestCase):
    def setUp(self):
        self.ctx = Context()
        self.x, self.y, self.z = self.ctx.Ints("x y z")
        self.s = self.ctx.Solver()

    def test_linear_system(self):
        x, y, z = self.x, self.y, self.z
        e1 = 3 * x + 2 * y - z
        e2 = 2 * x - 2 * y + 4 * z
        e3 = -x + y / 2 - z
        self.s.add(e1 == 1, e2 == -2, e3 == 0)
        self.assertEqual(self.s.check(), sat)
        m = self.s.model()
        self.assertEqual(m.to_int(e1), 1)
        self.assertEqual(m.to_int(e2), -2)
        self.assertEqual(m.to_int(e3), 0)
        self.assertEqual((m.to_int(x), m.to_int(y), m.to_int(z)), (1, -2, -2))

    def test_conflicting_equalities(self):
        self.s.add(self.x == 1)
        self.s.add(self.x == 2)
        self.assertEqual(self.s.check(), unsat)
        with self.assertRaises(UnsatError) as cm:
            with self.s.check_model():
                pass
        self.assertEqual(str(cm.exception), "UNSAT")
        self.assertIsInstance(cm.exception, SolverResultError)
        self.assertIsInstance(cm.exception, SMTException)

    def test_check_model_yields_model(self):
        self.s.add(self.x > 4, self.x < 6)
        with self.s.check_model() as m:
            self.assertEqual(m.to_int(self.x), 5)

    def test_check_with_assumptions(self):
        self.s.add(self.x > 0)
        self.assertEqual(self.s.check(self.x < 0), unsat)
        self.assertEqual(self.s.check(), sat)

    def test_literal_assertions(self):
        self.s.add(True)
        self.assertEqual(self.s.check(), sat)
        self.s += False
        self.assertEqual(self.s.check(), unsat)

    def test_asserting_non_boolean_is_native_error(self):
        with self.assertRaises(SMTException) as cm:
            self.s.add(self.x + 1)
        self.assertTrue(len(str(cm.exception)) > 0)
        self.assertEqual(self.s.assertions(), [])

    def test_push_pop(self):
        self.s.add(self.x > 0)
        self.s.push()
        self.s.add(self.x < 0)
        self.assertEqual(self.s.num_scopes(), 1)
        self.assertEqual(self.s.check(), unsat)
        self.s.pop()
        self.assertEqual(self.s.num_scopes(), 0)
        self.assertEqual(self.s.check(), sat)
        self.assertEqual(len(self.s.assertions()), 1)

    def test_pop_too_many(self):
        with self.assertRaises(SMTException):
            self.s.pop()

    def test_scope_restores_assertions(self):
        self.s.add(self.x > 0)
        before = str(self.s)
        with self.s.scope():
            self.s.add(self.x < 0)
            self.assertEqual(self.s.num_scopes(), 1)
        self.assertEqual(str(self.s), before)
        self.assertEqual(self.s.num_scopes(), 0)
        self.assertEqual(self.s.check(), sat)

    def test_scope_pops_on_exception(self):
        self.s.add(self.x > 0)
        with self.assertRaises(KeyError):
            with self.s.scope():
                self.s.add(self.x < 0)
                raise KeyError("leave")
        self.assertEqual(self.s.num_scopes(), 0)
        self.assertEqual(self.s.check(), sat)

    def test_nested_scopes(self):
        with self.s.scope():
            self.s.add(self.x > 0)
            with self.s.scope():
                self.s.add(self.x < 0)
                self.assertEqual(self.s.num_scopes(), 2)
                self.assertEqual(self.s.check(), unsat)
            self.assertEqual(self.s.check(), sat)
        self.assertEqual(self.s.assertions(), [])

    def test_reset_assertions(self):
        self.s.add(self.x > 0)
        self.s.push()
        self.s.reset_assertions()
        self.assertEqual(self.s.num_scopes(), 0)
        self.assertEqual(self.s.assertions(), [])

    def test_rendering(self):
        self.s.add(self.x > 0, self.y == 2)
        self.assertEqual(repr(self.s), "[(> x 0), (= y 2)]")
        self.assertEqual(self.s.sexpr(), "(and (> x 0) (= y 2))")

    def test_is_sat(self):
        self.assertTrue(is_sat(self.x > 0))
        self.assertFalse(is_sat(self.x > 0, self.x < 0))

    def test_result_literals(self):
        r = self.s.check()
        self.assertEqual(r, sat)
        self.assertNotEqual(r, unsat)
        self.assertEqual(repr(r), "sat")


class TestOptimizer(unittest.TestCase):
    def setUp(self):
        self.ctx = Context()
        self.x, self.y = self.ctx.Ints("x y")
        self.o = self.ctx.Optimizer()

    def test_maximize(self):
        self.o.add(self.x + self.y <= 10, self.x >= 0, self.y >= 2)
        h = self.o.maximize(self.x)
        self.assertEqual(h.index, 0)
        self.assertEqual(self.o.check(), sat)
        self.assertEqual(self.o.model().to_int(self.x), 8)
        self.assertEqual(str(h.value()), "8")

    def test_minimize(self):
        self.o.add(self.x >= 3)
        self.o.minimize(self.x * 2)
        with self.o.check_model() as m:
            self.assertEqual(m.to_int(self.x), 3)

    def test_objectives_are_lexicographic(self):
        self.o.add(self.x + self.y <= 10, self.x >= 0, self.y >= 0, self.x - self.y <= 4)
        hx = self.o.maximize(self.x)
        hy = self.o.minimize(self.y)
        self.assertEqual(hy.index, 1)
        self.assertEqual(self.o.objectives(), [hx, hy])
        self.assertEqual(self.o.check(), sat)
        self.assertEqual(str(hx.value()), "7")
        self.assertEqual(str(hy.value()), "3")

    def test_unsat(self):
        self.o.add(self.x > 0, self.x < 0)
        self.o.maximize(self.x)
        self.assertEqual(self.o.check(), unsat)
        with self.assertRaises(UnsatError):
            with self.o.check_model():
                pass

    def test_unbounded_objective_stops(self):
        o = self.ctx.Optimizer(max_rounds=5)
        o.add(self.x >= 0)
        h = o.maximize(self.x)
        self.assertEqual(o.check(), unknown)
        self.assertIn("max_rounds", o.reason_unknown())
        self.assertEqual(o.model().to_int(self.x), int(str(h.value())))
        with self.assertRaises(UnknownError):
            with o.check_model():
                pass

    def test_internal_scope_is_released(self):
        self.o.add(self.x >= 0, self.x <= 5)
        self.o.maximize(self.x)
        self.o.check()
        self.assertEqual(self.o.num_scopes(), 0)
        # The optimum is not kept as an assertion once the optimizer changes
        self.o.add(self.x <= 2)
        self.assertEqual(self.o.check(), sat)
        self.assertEqual(self.o.model().to_int(self.x), 2)
        with self.o.scope():
            self.o.add(self.x < 1)
            self.o.check()
            self.assertEqual(self.o.model().to_int(self.x), 0)
        self.o.check()
        self.assertEqual(self.o.model().to_int(self.x), 2)

    def test_objective_must_be_integer(self):
        with self.assertRaises(SMTException):
            self.o.maximize(self.ctx.Bool("p"))

    def test_value_before_check(self):
        h = self.o.minimize(self.x)
        with self.assertRaises(SMTException):
            h.value()

    def test_two_independent_objectives(self):
        self.o.add(self.x >= 0, self.x <= 3, self.y >= 1, self.y <= 4)
        hx = self.o.maximize(self.x)
        hy = self.o.minimize(self.y)
        self.assertEqual(self.o.check(), sat)
        m = self.o.model()
        self.assertEqual((m.to_int(self.x), m.to_int(self.y)), (3, 1))
        self.assertEqual((str(hx.value()), str(hy.value())), ("3", "1"))
        self.assertEqual(self.o.num_scopes(), 0)

    def test_unknown_step_is_not_converged(self):
        self.o.add(self.x >= 0, self.x <= 5)
        h = self.o.maximize(self.x)
        undecided = mock.Mock()
        undecided.isSat.return_value = False
        undecided.isUnsat.return_value = False
        undecided.isUnknown.return_value = True
        undecided.getUnknownExplanation.return_value = "TIMEOUT"
        real_check = self.o._check_native
        calls = []

        def check_native(asts):
            calls.append(asts)
            # The first improvement step comes right after the initial check
            if len(calls) == 2:
                return undecided
            return real_check(asts)

        with mock.patch.object(self.o, "_check_native", side_effect=check_native):
            self.assertEqual(self.o.check(), unknown)
        self.assertIn("TIMEOUT", self.o.reason_unknown())
        self.assertEqual(self.o.model().to_int(self.x), int(str(h.value())))
        self.assertEqual(self.o.check(), sat)
        self.assertEqual(self.o.model().to_int(self.x), 5)

    def test_without_objectives(self):
        self.o.add(self.x == 4)
        self.assertEqual(self.o.check(), sat)
        self.assertEqual(self.o.model().to_int(self.x), 4)


if __name__ == "__main__":
    unittest.main()
