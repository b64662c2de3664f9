from cvc5_sugar import *

with Context() as ctx:
    x, y = ctx.Ints("x y")
    o = ctx.Optimizer()
    o.add(x + y <= 10, x >= 0, y >= 0, x - y <= 4)
    hx = o.maximize(x)
    hy = o.minimize(y)
    print(hx.index, hy.index)
    print(o.check())
    print(hx.value(), hy.value())
    with o.check_model() as m:
        print(m.to_int(x), m.to_int(y))
