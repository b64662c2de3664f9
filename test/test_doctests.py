import doctest
import unittest

import cvc5_sugar.cvc5_sugar


class TestDoc(unittest.TestCase):
    def test_doctests(self):
        n_failed, _ = doctest.testmod(cvc5_sugar.cvc5_sugar)
        self.assertEqual(n_failed, 0)


if __name__ == "__main__":
    unittest.main()
