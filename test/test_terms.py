import unittest

from cvc5_sugar import *


class TestLiterals(unittest.TestCase):
    def setUp(self):
        self.ctx = Context()

    def test_bool(self):
        self.assertTrue(is_true(self.ctx.val(True)))
        self.assertTrue(is_false(self.ctx.val(False)))

    def test_int(self):
        v = self.ctx.val(42)
        self.assertTrue(is_int_value(v))
        self.assertEqual(str(v), "42")

    def test_big_int_is_not_truncated(self):
        v = self.ctx.val(2 ** 100)
        self.assertEqual(str(v), str(2 ** 100))

    def test_float(self):
        v = self.ctx.val(0.1)
        self.assertTrue(is_fp_value(v))
        self.assertEqual((v.ebits(), v.sbits()), (11, 53))

    def test_term_passes_through(self):
        x = self.ctx.Int("x")
        self.assertIs(self.ctx.val(x), x)

    def test_rejects_other_values(self):
        with self.assertRaises(SMTException):
            self.ctx.val("1")
        with self.assertRaises(SMTException):
            self.ctx.val(None)

    def test_int_next_to_float_term_becomes_float(self):
        x = self.ctx.Float("x")
        self.assertTrue(eq(x + 1, x + 1.0))
        self.assertTrue(eq(2 * x, 2.0 * x))

    def test_huge_int_next_to_float_term(self):
        f = self.ctx.Float("f")
        with self.assertRaises(SMTException):
            f + 2 ** 2000
        with self.assertRaises(SMTException):
            FPVal(-(2 ** 2000), self.ctx)


class TestOperators(unittest.TestCase):
    def setUp(self):
        self.ctx = Context()
        self.x, self.y = self.ctx.Ints("x y")
        self.p, self.q = self.ctx.Bools("p q")
        self.f, self.g = self.ctx.Floats("f g")

    def test_operand_orders_build_same_kind(self):
        x = self.x
        one = self.ctx.IntVal(1)
        for term in [x + one, x + 1, 1 + x]:
            self.assertEqual(term.kind(), Kind.ADD)
            self.assertTrue(is_int(term))

    def test_int_kinds(self):
        x, y = self.x, self.y
        cases = [
            (x - y, Kind.SUB),
            (x * y, Kind.MULT),
            (x / y, Kind.INTS_DIVISION),
            (x // 2, Kind.INTS_DIVISION),
            (x % 3, Kind.INTS_MODULUS),
            (-x, Kind.NEG),
            (x < y, Kind.LT),
            (x <= y, Kind.LEQ),
            (x > y, Kind.GT),
            (x >= y, Kind.GEQ),
            (x == y, Kind.EQUAL),
            (x != y, Kind.DISTINCT),
        ]
        for term, kind in cases:
            self.assertEqual(term.kind(), kind, str(term))

    def test_reflected_operand_order(self):
        x = self.x
        self.assertEqual(str(10 - x), "(- 10 x)")
        self.assertEqual(str(10 / x), "(div 10 x)")
        self.assertEqual(str(10 % x), "(mod 10 x)")

    def test_bool_kinds(self):
        p, q = self.p, self.q
        cases = [
            (p & q, Kind.AND),
            (p | q, Kind.OR),
            (p ^ q, Kind.XOR),
            (~p, Kind.NOT),
            (Not(p), Kind.NOT),
            (Implies(p, q), Kind.IMPLIES),
            (Iff(p, q), Kind.EQUAL),
            (p == True, Kind.EQUAL),
            (True & p, Kind.AND),
        ]
        for term, kind in cases:
            self.assertEqual(term.kind(), kind, str(term))
            self.assertTrue(is_bool(term))

    def test_nary(self):
        p, q = self.p, self.q
        r = self.ctx.Bool("r")
        self.assertEqual(And(p, q, r).num_args(), 3)
        self.assertEqual(Or([p, q, r]).num_args(), 3)
        self.assertEqual(Sum(self.x, self.y, 1).num_args(), 3)
        self.assertEqual(Product(self.x, 2).kind(), Kind.MULT)
        self.assertEqual(Distinct(self.x, self.y, 3).kind(), Kind.DISTINCT)
        self.assertIs(And(p), p)
        self.assertTrue(is_true(Distinct(self.x)))

    def test_nary_without_terms_needs_context(self):
        with self.assertRaises(SMTException):
            And(True, False)
        self.assertEqual(And(True, False, self.ctx).kind(), Kind.AND)

    def test_fp_kinds(self):
        f, g = self.f, self.g
        cases = [
            (f + g, Kind.FLOATINGPOINT_ADD),
            (f - 1.0, Kind.FLOATINGPOINT_SUB),
            (2.0 * f, Kind.FLOATINGPOINT_MULT),
            (f / g, Kind.FLOATINGPOINT_DIV),
            (-f, Kind.FLOATINGPOINT_NEG),
            (f < g, Kind.FLOATINGPOINT_LT),
            (f <= g, Kind.FLOATINGPOINT_LEQ),
            (f > g, Kind.FLOATINGPOINT_GT),
            (f >= g, Kind.FLOATINGPOINT_GEQ),
            (f == g, Kind.FLOATINGPOINT_EQ),
            (fpMax(f, g), Kind.FLOATINGPOINT_MAX),
            (fpMin(f, 0.0), Kind.FLOATINGPOINT_MIN),
            (fpAbs(f), Kind.FLOATINGPOINT_ABS),
        ]
        for term, kind in cases:
            self.assertEqual(term.kind(), kind, str(term))

    def test_fp_arith_uses_context_rounding_mode(self):
        t = self.f + self.g
        self.assertEqual(t.num_args(), 3)
        self.assertTrue(eq(t.arg(0), self.ctx.rm))
        t = fpMul(RTZ(self.ctx), self.f, self.g)
        self.assertTrue(eq(t.arg(0), RTZ(self.ctx)))

    def test_if(self):
        t = If(self.x > self.y, self.x, 0)
        self.assertEqual(t.kind(), Kind.ITE)
        self.assertTrue(is_int(t))

    def test_sort_mismatch_is_native_error(self):
        with self.assertRaises(SMTException) as cm:
            self.x + self.p
        self.assertTrue(len(str(cm.exception)) > 0)
        self.assertIsNotNone(cm.exception.__cause__)

    def test_bool_of_symbolic(self):
        self.assertTrue(bool(self.x == self.x))
        self.assertFalse(bool(self.x == self.y))
        self.assertTrue(bool(self.f == self.f))
        with self.assertRaises(SMTException):
            bool(self.x < self.y)

    def test_terms_are_hashable(self):
        d = {self.x: 1, self.y: 2}
        self.assertEqual(d[self.ctx.Int("x")], 1)
        self.assertIn(self.f, {self.f})

    def test_rendering(self):
        x, y = self.x, self.y
        self.assertEqual(str(3 * x + 2 * y), "(+ (* 3 x) (* 2 y))")
        self.assertEqual(repr(x == 1), "(= x 1)")
        self.assertEqual((x > 0).sexpr(), "(> x 0)")
        self.assertEqual(str(x.sort()), "Int")
        self.assertEqual(str(self.p.sort()), "Bool")


if __name__ == "__main__":
    unittest.main()
