from cvc5_sugar import *

if __name__ == "__main__":
    ctx = Context()
    x = ctx.Int("x")
    p = ctx.Bool("p")

    try:
        # type error, reported by cvc5
        x + p
    except SMTException as ex:
        print("native error:", len(str(ex)) > 0)

    s = ctx.Solver()
    try:
        # an integer is not a formula
        s.add(x + 1)
    except SMTException as ex:
        print("native error:", len(str(ex)) > 0)

    s += BoolVal(False, ctx)
    try:
        with s.check_model():
            print("unreachable")
    except UnsatError as ex:
        print("unsat:", ex)

    try:
        s.model()
    except EvaluationError:
        print("no model")

    ctx.close()
    try:
        s.check()
    except SMTException as ex:
        print(ex)
