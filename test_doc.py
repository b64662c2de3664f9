#!/usr/bin/env python3

import sys

if __name__ == "__main__":
    import doctest
    import cvc5_sugar

    n_failed, _ = doctest.testmod(cvc5_sugar.cvc5_sugar)
    if n_failed > 0:
        sys.exit(1)
