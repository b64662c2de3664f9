############################################
# Copyright (c) 2021 The cvc5 Developers
#               2012 The Microsoft Corporation
#
# cvc5 sugar: an ergonomic binding over cvc5's Python API
############################################

"""
cvc5 is an SMT solver.

This is a thin binding over its Python API that adds three things:
an explicit context object that is captured once instead of being passed to
every native call, operator overloading for building constraints, and
automatic conversion of Python ``bool``, ``int`` and ``float`` values into
solver terms.

Small example:

>>> with Context() as ctx:
...     x, y, z = ctx.Ints("x y z")
...     s = ctx.Solver()
...     s.add(3 * x + 2 * y - z == 1)
...     s.add(2 * x - 2 * y + 4 * z == -2)
...     s.add(-x + y / 2 - z == 0)
...     with s.check_model() as m:
...         print(m.to_int(x), m.to_int(y), m.to_int(z))
1 -2 -2

SMT exceptions:

>>> ctx = Context()
>>> try:
...     ctx.Int("x") + ctx.Bool("p")
... except SMTException as ex:
...     print("failed")
failed

A context, and every term, solver and model created from it, is meant to be
used from a single thread.
"""
from contextlib import contextmanager
import ctypes
import functools as ft
import logging

import cvc5 as pc
from cvc5 import Kind

logger = logging.getLogger(__name__)

DEBUG = __debug__

# Exceptions raised by the cvc5 bindings when a native call fails
_NATIVE_ERRORS = (RuntimeError, ValueError)

_DEFAULT_OPTIONS = {"produce-models": "true", "incremental": "true"}


def debugging():
    global DEBUG
    return DEBUG


def _is_int(v):
    """int testing"""
    return isinstance(v, int) and not isinstance(v, bool)


class SMTException(Exception):
    def __init__(self, value):
        self.value = value

    def __str__(self):
        return str(self.value)


class SolverResultError(SMTException):
    """A check did not produce a model."""


class UnsatError(SolverResultError):
    """The assertions are unsatisfiable."""


class UnknownError(SolverResultError):
    """The solver could not decide the assertions."""


class EvaluationError(SMTException):
    """A term could not be evaluated in a model."""


# We use _assert instead of the assert command because we want to
# use our own exception class
def _assert(cond, msg, exc=SMTException):
    if not cond:
        raise exc(msg)


# Hack for having nary functions that can receive one argument that is the
# list of arguments.
# Use this when function takes a single list of arguments
def _get_args(args):
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        return list(args[0])
    else:
        return list(args)


def _option_value(v):
    if isinstance(v, bool):
        return "true" if v else "false"
    elif not isinstance(v, str):
        return str(v)
    return v


def _options_to_strings(options):
    r = {}
    for k, v in options.items():
        _assert(isinstance(k, str), "non-string key " + str(k))
        r[k.replace("_", "-")] = _option_value(v)
    return r


def instance_check(item, instance):
    _assert(
        isinstance(item, instance),
        "Expected {}, but got a {}".format(instance, type(item)),
    )


#########################################
#
# Context
#
#########################################


class _Guarded(object):
    """Forwards calls to a native cvc5 object.

    Errors raised by the native call are re-raised as `SMTException` at the
    call site, carrying cvc5's own message.
    """

    def __init__(self, native):
        self.native = native

    def __getattr__(self, name):
        attr = getattr(self.native, name)
        if not callable(attr):
            return attr

        def call(*args, **kwargs):
            try:
                return attr(*args, **kwargs)
            except _NATIVE_ERRORS as ex:
                raise SMTException(str(ex) or type(ex).__name__) from ex

        return call


class Context(object):
    """A Context owns all terms, solvers and models built from it.

    It wraps one cvc5 term manager. Solver options given to the constructor
    are applied to every solver created from this context, on top of
    ``produce-models`` and ``incremental``, which are always enabled.

    A context is a context manager; leaving the ``with`` block closes it.

    >>> with Context() as ctx:
    ...     p = ctx.Bool("p")
    ...     print(p)
    p
    >>> ctx.closed
    True
    >>> try:
    ...     ctx.Bool("q")
    ... except SMTException as ex:
    ...     print("failed: %s" % ex)
    failed: context is closed
    """

    def __init__(self, **options):
        self._tm = _Guarded(pc.TermManager())
        self.options = dict(_DEFAULT_OPTIONS)
        self.options.update(_options_to_strings(options))
        # Map from (name, sort) pairs to constant terms
        self.vars = {}
        # An increasing identifier used to make fresh identifiers
        self.next_fresh_var = 0
        self._simplifier = None
        self.rm = FPRMRef(
            self._tm.mkRoundingMode(pc.RoundingMode.ROUND_NEAREST_TIES_TO_EVEN), self
        )
        logger.debug("created context with options %s", self.options)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, tb):
        self.close()
        return False

    @property
    def closed(self):
        return self._tm is None

    def close(self):
        """Drop the native handles. Closing twice is a no-op."""
        if self._tm is None:
            return
        self._tm = None
        self._simplifier = None
        self.vars = {}
        self.rm = None
        logger.debug("closed context")

    def check_open(self):
        _assert(self._tm is not None, "context is closed")

    @property
    def tm(self):
        """The guarded native term manager."""
        self.check_open()
        return self._tm

    def mk_solver(self, options=None):
        """Create a native solver configured with this context's options."""
        solver = _Guarded(pc.Solver(self.tm.native))
        opts = dict(self.options)
        if options:
            opts.update(_options_to_strings(options))
        for k, v in opts.items():
            solver.setOption(k, v)
        return solver

    def simplifier(self):
        if self._simplifier is None:
            self._simplifier = self.mk_solver()
        self.check_open()
        return self._simplifier

    def get_var(self, name, sort):
        """Get the variable identified by `name`.

        If no variable of that name (with that sort) has been created, creates
        one.

        Returns a Term
        """
        key = (name, sort.ast)
        if key not in self.vars:
            self.vars[key] = self.tm.mkConst(sort.ast, name)
        return self.vars[key]

    def next_fresh(self, sort, prefix):
        """Make a name such that (name, sort) is fresh.

        The name will be prefixed by `prefix`"""
        name = "{}{}".format(prefix, self.next_fresh_var)
        while (name, sort.ast) in self.vars:
            self.next_fresh_var += 1
            name = "{}{}".format(prefix, self.next_fresh_var)
        return name

    # Constructors bound to this context

    def BoolSort(self):
        return BoolSort(self)

    def IntSort(self):
        return IntSort(self)

    def Float64(self):
        return Float64(self)

    def RoundingModeSort(self):
        return RoundingModeSort(self)

    def Bool(self, name):
        return Bool(name, self)

    def Int(self, name):
        return Int(name, self)

    def Float(self, name):
        return Float(name, self)

    def Bools(self, names):
        return Bools(names, self)

    def Ints(self, names):
        return Ints(names, self)

    def Floats(self, names):
        return Floats(names, self)

    def BoolVal(self, val):
        return BoolVal(val, self)

    def IntVal(self, val):
        return IntVal(val, self)

    def FPVal(self, val):
        return FPVal(val, self)

    def val(self, v):
        """Convert a Python value into a term of this context.

        >>> ctx = Context()
        >>> ctx.val(True)
        true
        >>> ctx.val(7)
        7
        >>> ctx.val(1.5).sort()
        (_ FloatingPoint 11 53)
        """
        return _py2expr(v, self)

    def Solver(self, **options):
        return Solver(self, **options)

    def Optimizer(self, max_rounds=1000, **options):
        return Optimizer(self, max_rounds=max_rounds, **options)


def _get_ctx(ctx):
    _assert(ctx is not None, "an explicit Context is required")
    instance_check(ctx, Context)
    ctx.check_open()
    return ctx


def get_ctx(ctx):
    """
    Returns `ctx` after checking that it is an open context.

    >>> ctx = Context()
    >>> get_ctx(ctx) is ctx
    True
    """
    return _get_ctx(ctx)


#########################################
#
# Term base class
#
#########################################


class ExprRef(object):
    """Constraints, formulas and terms are expressions."""

    def __init__(self, ast, ctx):
        self.ast = ast
        self.ctx = ctx
        assert isinstance(self.ast, pc.Term)
        assert isinstance(self.ctx, Context)

    def __str__(self):
        return self.sexpr()

    def __repr__(self):
        return self.sexpr()

    def __bool__(self):
        """ Convert this expression to a python boolean.

        Produces
        * the appropriate value for a BoolVal.
        * whether structural equality holds for an equality node

        >>> ctx = Context()
        >>> bool(ctx.BoolVal(True))
        True
        >>> bool(ctx.BoolVal(False) == ctx.BoolVal(False))
        True
        >>> try:
        ...   bool(ctx.Int('y'))
        ... except SMTException as ex:
        ...   print("failed: %s" % ex)
        failed: Symbolic expressions cannot be cast to concrete Boolean values.
        """
        if is_true(self):
            return True
        elif is_false(self):
            return False
        elif (
            is_eq(self) or is_app_of(self, Kind.FLOATINGPOINT_EQ)
        ) and self.num_args() == 2:
            # Special case so that expressions bool(x == y) yield a Python boolean.
            # Symbolic terms must stay hashable, and in Python hashable objects
            # must support an == that is castable to a Python boolean.
            return self.arg(0).eq(self.arg(1))
        else:
            raise SMTException(
                "Symbolic expressions cannot be cast to concrete Boolean values."
            )

    def sexpr(self):
        """Return a string representing the AST node in s-expression notation.

        >>> x = Context().Int('x')
        >>> ((x + 1)*x).sexpr()
        '(* (+ x 1) x)'
        """
        self.ctx.check_open()
        return str(self.ast)

    def as_ast(self):
        """Return a pointer to the underlying Term object."""
        return self.ast

    def get_id(self):
        """Return unique identifier for object.

        >>> ctx = Context()
        >>> ctx.BoolVal(True).get_id() == ctx.BoolVal(True).get_id()
        True
        """
        return self.ast.getId()

    def eq(self, other):
        """Return `True` if `self` and `other` are structurally identical.

        >>> x = Context().Int('x')
        >>> n1 = x + 1
        >>> n2 = 1 + x
        >>> n1.eq(n2)
        False
        >>> n1.eq(x + 1)
        True
        """
        if debugging():
            _assert(is_expr(other), "SMT expression expected")
        return self.ctx is other.ctx and self.ast == other.ast

    def hash(self):
        return self.ast.__hash__()

    def sort(self):
        """Return the sort of expression `self`.

        >>> x = Context().Int('x')
        >>> (x + 1).sort()
        Int
        >>> (x > 1).sort()
        Bool
        """
        return SortRef(self.ast.getSort(), self.ctx)

    def __eq__(self, other):
        """Return an SMT expression that represents the constraint `self == other`.

        If `other` is `None`, then this method simply returns `False`.

        >>> ctx = Context()
        >>> a, b = ctx.Ints('a b')
        >>> a == b
        (= a b)
        >>> a == 3
        (= a 3)
        >>> a == None
        False
        """
        if other is None:
            return False
        return _mk_bin(Kind.EQUAL, self, other)

    def __hash__(self):
        """Hash code."""
        return self.ast.__hash__()

    def __ne__(self, other):
        """Return an SMT expression that represents the constraint `self != other`.

        If `other` is `None`, then this method simply returns `True`.

        >>> ctx = Context()
        >>> a, b = ctx.Ints('a b')
        >>> a != b
        (distinct a b)
        >>> a != None
        True
        """
        if other is None:
            return True
        return _mk_bin(Kind.DISTINCT, self, other)

    def kind(self):
        """Return the Kind of this term

        >>> x = Context().Int('x')
        >>> (x + 1).kind() == Kind.ADD
        True
        """
        return self.ast.getKind()

    def num_args(self):
        """Return the number of arguments of an SMT application.

        >>> a, b = Context().Ints('a b')
        >>> (a + b).num_args()
        2
        >>> a.num_args()
        0
        """
        return self.ast.getNumChildren()

    def arg(self, idx):
        """Return argument `idx` of the application `self`.

        >>> a, b = Context().Ints('a b')
        >>> (a + b).arg(1)
        b
        """
        if debugging():
            _assert(idx < self.num_args(), "Invalid argument index")
        return _to_expr_ref(self.ast[idx], self.ctx)

    def children(self):
        """Return a list containing the children of the given expression

        >>> a, b = Context().Ints('a b')
        >>> (a * b + 1).children()
        [(* a b), 1]
        """
        return [self.arg(i) for i in range(self.num_args())]

    def is_int(self):
        return False

    def is_bool(self):
        return False


def is_expr(a):
    """Return `True` if `a` is an SMT expression.

    >>> a = Context().Int('a')
    >>> is_expr(a)
    True
    >>> is_expr(a + 1)
    True
    >>> is_expr(1)
    False
    """
    return isinstance(a, ExprRef)


def is_const(a):
    """Return `True` if `a` is a free constant.

    >>> a = Context().Int('a')
    >>> is_const(a)
    True
    >>> is_const(a + 1)
    False
    """
    return is_expr(a) and a.ast.getKind() == Kind.CONSTANT


def is_app_of(a, k):
    """Return `True` if `a` is an application of the given kind `k`.

    >>> x = Context().Int('x')
    >>> n = x + 1
    >>> is_app_of(n, Kind.ADD)
    True
    >>> is_app_of(n, Kind.MULT)
    False
    """
    return is_expr(a) and a.ast.getKind() == k


def eq(a, b):
    """Return `True` if `a` and `b` are structurally identical AST nodes.

    >>> x, y = Context().Ints('x y')
    >>> eq(x, y)
    False
    >>> eq(x + 1, x + 1)
    True
    >>> eq(x + 1, 1 + x)
    False
    """
    if debugging():
        _assert(is_expr(a) and is_expr(b), "SMT expressions expected")
    return a.eq(b)


def _ctx_from_ast_arg_list(args, default_ctx=None):
    ctx = None
    for a in args:
        if is_expr(a):
            if ctx is None:
                ctx = a.ctx
            else:
                if debugging():
                    _assert(ctx is a.ctx, "Context mismatch")
    if ctx is None:
        ctx = default_ctx
    return ctx


#########################################
#
# Sorts
#
#########################################


class SortRef(object):
    """A Sort is essentially a type. Every term has a sort"""

    def __init__(self, ast, ctx):
        self.ast = ast
        self.ctx = ctx
        assert isinstance(self.ast, pc.Sort)
        assert isinstance(self.ctx, Context)

    def __str__(self):
        return str(self.ast)

    def __repr__(self):
        return str(self.ast)

    def __eq__(self, other):
        return isinstance(other, SortRef) and self.ast == other.ast

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return self.ast.__hash__()

    def name(self):
        return str(self.ast)

    def is_bool(self):
        return self.ast.isBoolean()

    def is_int(self):
        return self.ast.isInteger()

    def is_fp(self):
        return self.ast.isFloatingPoint()

    def ebits(self):
        return self.ast.getFloatingPointExponentSize()

    def sbits(self):
        return self.ast.getFloatingPointSignificandSize()


def BoolSort(ctx):
    """Return the Boolean sort.

    >>> BoolSort(Context())
    Bool
    """
    ctx = _get_ctx(ctx)
    return SortRef(ctx.tm.getBooleanSort(), ctx)


def IntSort(ctx):
    """Return the integer sort.

    >>> IntSort(Context())
    Int
    """
    ctx = _get_ctx(ctx)
    return SortRef(ctx.tm.getIntegerSort(), ctx)


def Float64(ctx):
    """Return the IEEE double precision floating point sort.

    >>> Float64(Context())
    (_ FloatingPoint 11 53)
    """
    ctx = _get_ctx(ctx)
    return SortRef(ctx.tm.mkFloatingPointSort(11, 53), ctx)


def RoundingModeSort(ctx):
    ctx = _get_ctx(ctx)
    return SortRef(ctx.tm.getRoundingModeSort(), ctx)


#########################################
#
# Expressions
#
#########################################


def _to_expr_ref(a, ctx):
    """Construct the correct ExprRef subclass for the native term `a`,
    based on its sort."""
    if isinstance(a, ExprRef):
        a = a.ast
    instance_check(a, pc.Term)
    sort = a.getSort()
    if sort.isBoolean():
        return BoolRef(a, ctx)
    if sort.isInteger():
        return ArithRef(a, ctx)
    if sort.isFloatingPoint():
        return FPRef(a, ctx)
    if sort.isRoundingMode():
        return FPRMRef(a, ctx)
    return ExprRef(a, ctx)


def _py2expr(a, ctx):
    """Convert a Python literal to a term; terms pass through unchanged.

    >>> ctx = Context()
    >>> _py2expr(False, ctx)
    false
    >>> try:
    ...     _py2expr("x", ctx)
    ... except SMTException as ex:
    ...     print("failed: %s" % ex)
    failed: Python bool, int or float expected
    """
    if isinstance(a, bool):
        return BoolVal(a, ctx)
    if _is_int(a):
        return IntVal(a, ctx)
    if isinstance(a, float):
        return FPVal(a, ctx)
    if is_expr(a):
        return a
    _assert(False, "Python bool, int or float expected")


def _cast_to(a, like):
    """Convert the literal `a` to a term, guided by the sort of the term
    `like`. Numbers facing a floating point term become floating point
    numerals; everything else follows the plain literal rules."""
    if is_expr(a):
        return a
    if is_fp(like) and isinstance(a, (int, float)) and not isinstance(a, bool):
        return FPVal(a, like.ctx)
    return _py2expr(a, like.ctx)


def _coerce_exprs(a, b, ctx=None):
    """ Convert the literal side(s) of a binary application to terms.

    >>> ctx = Context()
    >>> x = ctx.Int('x')
    >>> _coerce_exprs(x, 2)
    (x, 2)
    >>> _coerce_exprs(True, 1, ctx)
    (true, 1)
    >>> try:
    ...  _coerce_exprs(1, 2)
    ... except SMTException as e:
    ...  print("failed: %s" % e)
    failed: At least one of the arguments must be an SMT expression
    """
    if not is_expr(a) and not is_expr(b):
        _assert(
            ctx is not None, "At least one of the arguments must be an SMT expression"
        )
        ctx = _get_ctx(ctx)
        return (_py2expr(a, ctx), _py2expr(b, ctx))
    if not is_expr(a):
        a = _cast_to(a, b)
    if not is_expr(b):
        b = _cast_to(b, a)
    if debugging():
        _assert(a.ctx is b.ctx, "Context mismatch")
    return (a, b)


def _coerce_expr_list(alist, ctx=None):
    """ Convert every literal in the list to a term.

    Used in n-ary term-maker functions.

    >>> a = Context().Int('a')
    >>> _coerce_expr_list([a, 1, 2])
    [a, 1, 2]
    """
    like = None
    for a in alist:
        if is_expr(a):
            like = a
            break
    if like is None:
        _assert(
            ctx is not None, "At least one of the arguments must be an SMT expression"
        )
        return [_py2expr(a, ctx) for a in alist]
    return [_cast_to(a, like) for a in alist]


def _mk_bin(kind, a, b, ctx=None):
    a, b = _coerce_exprs(a, b, ctx)
    ctx = a.ctx
    return _to_expr_ref(ctx.tm.mkTerm(kind, a.ast, b.ast), ctx)


def _mk_unary(kind, a, ctx=None):
    ctx = _get_ctx(_ctx_from_ast_arg_list([a], ctx))
    a = _py2expr(a, ctx)
    return _to_expr_ref(ctx.tm.mkTerm(kind, a.ast), ctx)


def _nary_kind_builder(kind, *args):
    """ Helper for defining n-ary builders where args can represent a list of
    expressions, either as a python list or tuple, or as a var-arg sequence of
    expressions.

    The args list can also terminate in a context, which will be used if
    present. If missing, then a context will be infered from the other
    arguments.
    """
    ctx = None
    if len(args) > 0 and isinstance(args[-1], Context):
        ctx = args[-1]
        args = args[:-1]
    args = _get_args(args)
    ctx = _ctx_from_ast_arg_list(args, ctx)
    _assert(ctx is not None, "At least one of the arguments must be an SMT expression")
    ctx = _get_ctx(ctx)
    args = _coerce_expr_list(args, ctx)
    if len(args) == 1:
        return args[0]
    return _to_expr_ref(ctx.tm.mkTerm(kind, *[a.ast for a in args]), ctx)


def If(a, b, c, ctx=None):
    """Create an SMT if-then-else expression.

    >>> x, y = Context().Ints('x y')
    >>> If(x > y, x, y)
    (ite (> x y) x y)
    """
    ctx = _get_ctx(_ctx_from_ast_arg_list([a, b, c], ctx))
    a = _py2expr(a, ctx)
    b, c = _coerce_exprs(b, c, ctx)
    return _to_expr_ref(ctx.tm.mkTerm(Kind.ITE, a.ast, b.ast, c.ast), ctx)


def Distinct(*args):
    """Create an SMT distinct expression.

    >>> x, y, z = Context().Ints('x y z')
    >>> Distinct(x, y, z)
    (distinct x y z)
    >>> Distinct([x, 1])
    (distinct x 1)
    """
    args = list(args)
    ctx = None
    if len(args) > 0 and isinstance(args[-1], Context):
        ctx = args.pop()
    args = _get_args(args)
    if len(args) == 1:
        return BoolVal(True, _ctx_from_ast_arg_list(args, ctx))
    if ctx is not None:
        args.append(ctx)
    return _nary_kind_builder(Kind.DISTINCT, *args)


def simplify(a):
    """Simplify the expression `a` with cvc5's rewriter.

    >>> ctx = Context()
    >>> simplify(ctx.IntVal(1) + 2)
    3
    >>> simplify(And(ctx.Bool('p'), True))
    p
    """
    if debugging():
        _assert(is_expr(a), "SMT expression expected")
    return _to_expr_ref(a.ctx.simplifier().simplify(a.ast), a.ctx)


#########################################
#
# Booleans
#
#########################################


class BoolRef(ExprRef):
    """All Boolean expressions are instances of this class."""

    def is_bool(self):
        return True

    def __and__(self, other):
        """
        >>> p, q = Context().Bools('p q')
        >>> p & q
        (and p q)
        """
        return And(self, other)

    def __rand__(self, other):
        return And(other, self)

    def __or__(self, other):
        """
        >>> p, q = Context().Bools('p q')
        >>> p | q
        (or p q)
        >>> False | p
        (or false p)
        """
        return Or(self, other)

    def __ror__(self, other):
        return Or(other, self)

    def __xor__(self, other):
        return Xor(self, other)

    def __rxor__(self, other):
        return Xor(other, self)

    def __invert__(self):
        """
        >>> ~Context().Bool('p')
        (not p)
        """
        return Not(self)


def is_bool(a):
    """Return `True` if `a` is an SMT Boolean expression.

    >>> ctx = Context()
    >>> is_bool(ctx.Bool('p'))
    True
    >>> x = ctx.Int('x')
    >>> is_bool(x)
    False
    >>> is_bool(x == 0)
    True
    """
    return isinstance(a, BoolRef)


def is_true(a):
    """Return `True` if `a` is the SMT true expression.

    >>> ctx = Context()
    >>> is_true(ctx.BoolVal(True))
    True
    >>> is_true(True)
    False
    """
    return (
        is_app_of(a, Kind.CONST_BOOLEAN)
        and a.ast.isBooleanValue()
        and a.ast.getBooleanValue()
    )


def is_false(a):
    """Return `True` if `a` is the SMT false expression."""
    return (
        is_app_of(a, Kind.CONST_BOOLEAN)
        and a.ast.isBooleanValue()
        and not a.ast.getBooleanValue()
    )


def is_not(a):
    return is_app_of(a, Kind.NOT)


def is_eq(a):
    """Return `True` if `a` is an SMT equality expression.

    >>> x, y = Context().Ints('x y')
    >>> is_eq(x == y)
    True
    """
    return is_app_of(a, Kind.EQUAL)


def BoolVal(val, ctx):
    """Return the Boolean value `True` or `False`.

    >>> ctx = Context()
    >>> BoolVal(True, ctx)
    true
    >>> is_false(BoolVal(False, ctx))
    True
    """
    ctx = _get_ctx(ctx)
    if not val:
        return BoolRef(ctx.tm.mkFalse(), ctx)
    else:
        return BoolRef(ctx.tm.mkTrue(), ctx)


def Bool(name, ctx):
    """Return a Boolean constant named `name`.

    >>> ctx = Context()
    >>> p = Bool('p', ctx)
    >>> eq(p, ctx.Bool('p'))
    True
    """
    ctx = _get_ctx(ctx)
    e = ctx.get_var(name, BoolSort(ctx))
    return BoolRef(e, ctx)


def Bools(names, ctx):
    """Return a list of Boolean constants.

    `names` is a single string containing all names separated by blank spaces.

    >>> p, q, r = Bools('p q r', Context())
    >>> And(p, Or(q, r))
    (and p (or q r))
    """
    ctx = _get_ctx(ctx)
    if isinstance(names, str):
        names = names.split()
    return [Bool(name, ctx) for name in names]


def FreshBool(ctx, prefix="b"):
    """Return a fresh Boolean constant using the given prefix.

    >>> ctx = Context()
    >>> eq(FreshBool(ctx), FreshBool(ctx))
    False
    """
    ctx = _get_ctx(ctx)
    sort = BoolSort(ctx)
    name = ctx.next_fresh(sort, prefix)
    return Bool(name, ctx)


def Implies(a, b, ctx=None):
    """Create an SMT implies expression.

    >>> p, q = Context().Bools('p q')
    >>> Implies(p, q)
    (=> p q)
    """
    return _mk_bin(Kind.IMPLIES, a, b, ctx)


def Xor(a, b, ctx=None):
    """Create an SMT Xor expression.

    >>> p, q = Context().Bools('p q')
    >>> Xor(p, q)
    (xor p q)
    >>> p ^ True
    (xor p true)
    """
    return _mk_bin(Kind.XOR, a, b, ctx)


def Iff(a, b, ctx=None):
    """Create the equivalence of two Boolean expressions.

    >>> p, q = Context().Bools('p q')
    >>> Iff(p, q)
    (= p q)
    """
    return _mk_bin(Kind.EQUAL, a, b, ctx)


def Not(a, ctx=None):
    """Create an SMT not expression.

    >>> p = Context().Bool('p')
    >>> Not(Not(p))
    (not (not p))
    """
    return _mk_unary(Kind.NOT, a, ctx)


def And(*args):
    """Create an SMT and-expression.

    >>> ctx = Context()
    >>> p, q, r = ctx.Bools('p q r')
    >>> And(p, q, r)
    (and p q r)
    >>> And([p, True])
    (and p true)
    >>> And(ctx)
    true
    """
    if len(args) == 1 and isinstance(args[0], Context):
        return BoolVal(True, args[0])
    return _nary_kind_builder(Kind.AND, *args)


def Or(*args):
    """Create an SMT or-expression.

    >>> ctx = Context()
    >>> p, q, r = ctx.Bools('p q r')
    >>> Or(p, q, r)
    (or p q r)
    >>> Or(ctx)
    false
    """
    if len(args) == 1 and isinstance(args[0], Context):
        return BoolVal(False, args[0])
    return _nary_kind_builder(Kind.OR, *args)


#########################################
#
# Arithmetic
#
#########################################


class ArithRef(ExprRef):
    """Integer expressions."""

    def is_int(self):
        """Return `True` if `self` is an integer expression.

        >>> x = Context().Int('x')
        >>> x.is_int()
        True
        """
        return True

    def __add__(self, other):
        """Create the SMT expression `self + other`.

        >>> x, y = Context().Ints('x y')
        >>> x + y
        (+ x y)
        >>> (x + y).sort()
        Int
        """
        return _mk_bin(Kind.ADD, self, other)

    def __radd__(self, other):
        """Create the SMT expression `other + self`.

        >>> x = Context().Int('x')
        >>> 10 + x
        (+ 10 x)
        """
        return _mk_bin(Kind.ADD, other, self)

    def __mul__(self, other):
        """Create the SMT expression `self * other`.

        >>> x, y = Context().Ints('x y')
        >>> x * y
        (* x y)
        """
        return _mk_bin(Kind.MULT, self, other)

    def __rmul__(self, other):
        """Create the SMT expression `other * self`.

        >>> x = Context().Int('x')
        >>> 10 * x
        (* 10 x)
        """
        return _mk_bin(Kind.MULT, other, self)

    def __sub__(self, other):
        """Create the SMT expression `self - other`.

        >>> x, y = Context().Ints('x y')
        >>> x - y
        (- x y)
        """
        return _mk_bin(Kind.SUB, self, other)

    def __rsub__(self, other):
        """Create the SMT expression `other - self`.

        >>> x = Context().Int('x')
        >>> 10 - x
        (- 10 x)
        """
        return _mk_bin(Kind.SUB, other, self)

    def __truediv__(self, other):
        """Create the SMT expression `self / other` (integer division).

        >>> x, y = Context().Ints('x y')
        >>> x / y
        (div x y)
        >>> x // 2
        (div x 2)
        """
        return _mk_bin(Kind.INTS_DIVISION, self, other)

    def __rtruediv__(self, other):
        """Create the SMT expression `other / self`.

        >>> x = Context().Int('x')
        >>> 10 / x
        (div 10 x)
        """
        return _mk_bin(Kind.INTS_DIVISION, other, self)

    __floordiv__ = __truediv__
    __rfloordiv__ = __rtruediv__

    def __mod__(self, other):
        """Create the SMT expression `self % other`.

        >>> x, y = Context().Ints('x y')
        >>> x % y
        (mod x y)
        """
        return _mk_bin(Kind.INTS_MODULUS, self, other)

    def __rmod__(self, other):
        return _mk_bin(Kind.INTS_MODULUS, other, self)

    def __neg__(self):
        """Return an expression representing `-self`.

        >>> x = Context().Int('x')
        >>> -x
        (- x)
        """
        return _to_expr_ref(self.ctx.tm.mkTerm(Kind.NEG, self.ast), self.ctx)

    def __pos__(self):
        return self

    def __le__(self, other):
        """Create the SMT expression `self <= other`.

        >>> x, y = Context().Ints('x y')
        >>> x <= y
        (<= x y)
        """
        return _mk_bin(Kind.LEQ, self, other)

    def __lt__(self, other):
        """Create the SMT expression `self < other`.

        >>> x = Context().Int('x')
        >>> x < 3
        (< x 3)
        >>> 3 < x
        (> x 3)
        """
        return _mk_bin(Kind.LT, self, other)

    def __gt__(self, other):
        return _mk_bin(Kind.GT, self, other)

    def __ge__(self, other):
        return _mk_bin(Kind.GEQ, self, other)


def is_arith(a):
    return isinstance(a, ArithRef)


def is_int(a):
    """Return `True` if `a` is an integer expression.

    >>> ctx = Context()
    >>> is_int(ctx.Int('x') + 1)
    True
    >>> is_int(ctx.Bool('p'))
    False
    """
    return is_arith(a)


def is_int_value(a):
    """Return `True` if `a` is an integer numeral.

    >>> ctx = Context()
    >>> is_int_value(ctx.IntVal(1))
    True
    >>> is_int_value(ctx.Int('x'))
    False
    """
    return is_arith(a) and a.ast.isIntegerValue()


def IntVal(val, ctx):
    """Return an SMT integer value.

    >>> ctx = Context()
    >>> IntVal(1, ctx)
    1
    >>> IntVal(2 ** 80, ctx)
    1208925819614629174706176
    """
    ctx = _get_ctx(ctx)
    _assert(_is_int(val), "Python int expected")
    return ArithRef(ctx.tm.mkInteger(str(val)), ctx)


def Int(name, ctx):
    """Return an integer constant named `name`.

    >>> x = Int('x', Context())
    >>> x.sort()
    Int
    """
    ctx = _get_ctx(ctx)
    return ArithRef(ctx.get_var(name, IntSort(ctx)), ctx)


def Ints(names, ctx):
    """Return a list of integer constants.

    >>> x, y, z = Ints('x y z', Context())
    >>> Sum(x, y, z)
    (+ x y z)
    """
    ctx = _get_ctx(ctx)
    if isinstance(names, str):
        names = names.split()
    return [Int(name, ctx) for name in names]


def FreshInt(ctx, prefix="x"):
    ctx = _get_ctx(ctx)
    name = ctx.next_fresh(IntSort(ctx), prefix)
    return Int(name, ctx)


def Sum(*args):
    """Create the sum of the SMT expressions.

    >>> a, b, c = Context().Ints('a b c')
    >>> Sum(a, b, c)
    (+ a b c)
    >>> Sum([a, 1])
    (+ a 1)
    >>> Sum()
    0
    """
    args = _get_args(args)
    if len(args) == 0:
        return 0
    return _nary_kind_builder(Kind.ADD, *args)


def Product(*args):
    """Create the product of the SMT expressions.

    >>> a, b, c = Context().Ints('a b c')
    >>> Product(a, b, c)
    (* a b c)
    >>> Product()
    1
    """
    args = _get_args(args)
    if len(args) == 0:
        return 1
    return _nary_kind_builder(Kind.MULT, *args)


#########################################
#
# Floating-Point Arithmetic
#
#########################################


class FPRef(ExprRef):
    """Floating-point expressions.

    The binary arithmetic operators use the context's shared
    round-nearest-ties-to-even mode.
    """

    def ebits(self):
        return self.sort().ebits()

    def sbits(self):
        return self.sort().sbits()

    def as_string(self):
        """Return a SMT floating point expression as a Python string."""
        return str(self.ast)

    def __eq__(self, other):
        """IEEE equality, so NaN differs from itself and +0.0 equals -0.0.

        >>> x = Context().Float('x')
        >>> x == x
        (fp.eq x x)
        """
        if other is None:
            return False
        return fpEQ(self, other)

    def __ne__(self, other):
        if other is None:
            return True
        return fpNEQ(self, other)

    def __hash__(self):
        return self.ast.__hash__()

    def __le__(self, other):
        return fpLEQ(self, other)

    def __lt__(self, other):
        return fpLT(self, other)

    def __ge__(self, other):
        return fpGEQ(self, other)

    def __gt__(self, other):
        return fpGT(self, other)

    def __add__(self, other):
        """Create the SMT expression `self + other`.

        >>> x, y = Context().Floats('x y')
        >>> (x + y).sort()
        (_ FloatingPoint 11 53)
        >>> (x + y).kind() == Kind.FLOATINGPOINT_ADD
        True
        """
        return fpAdd(None, self, other)

    def __radd__(self, other):
        return fpAdd(None, other, self)

    def __sub__(self, other):
        return fpSub(None, self, other)

    def __rsub__(self, other):
        return fpSub(None, other, self)

    def __mul__(self, other):
        return fpMul(None, self, other)

    def __rmul__(self, other):
        return fpMul(None, other, self)

    def __truediv__(self, other):
        return fpDiv(None, self, other)

    def __rtruediv__(self, other):
        return fpDiv(None, other, self)

    def __pos__(self):
        return self

    def __neg__(self):
        """Create the SMT expression `-self`.

        >>> x = Context().Float('x')
        >>> -x
        (fp.neg x)
        """
        return fpNeg(self)


class FPRMRef(ExprRef):
    """Floating-point rounding mode expressions"""

    def as_string(self):
        return str(self.ast)


def is_fp(a):
    """Return `True` if `a` is a floating point expression.

    >>> ctx = Context()
    >>> is_fp(ctx.Float('x'))
    True
    >>> is_fp(ctx.Int('x'))
    False
    """
    return isinstance(a, FPRef)


def is_fprm(a):
    return isinstance(a, FPRMRef)


def is_fp_value(a):
    return is_fp(a) and a.ast.isFloatingPointValue()


def _double_to_bits(val):
    # In (sign, exp, significand) order
    bv_str = bin(ctypes.c_uint64.from_buffer(ctypes.c_double(val)).value)[2:]
    return "0" * (64 - len(bv_str)) + bv_str


def _bits_to_double(bv_str):
    return ctypes.c_double.from_buffer(ctypes.c_uint64(int(bv_str, 2))).value


def FPVal(val, ctx):
    """Return a 64-bit floating-point value.

    The numeral is built from the exact bit pattern of the Python float, so
    NaN, the infinities and both zeros are represented faithfully.

    >>> ctx = Context()
    >>> v = FPVal(2.25, ctx)
    >>> is_fp_value(v)
    True
    >>> v.sort()
    (_ FloatingPoint 11 53)
    >>> try:
    ...     FPVal(2 ** 2000, ctx)
    ... except SMTException as ex:
    ...     print("failed: %s" % ex)
    failed: int too large for a 64-bit float
    """
    ctx = _get_ctx(ctx)
    _assert(
        isinstance(val, (int, float)) and not isinstance(val, bool),
        "Python float expected",
    )
    try:
        val = float(val)
    except OverflowError as ex:
        raise SMTException("int too large for a 64-bit float") from ex
    bv = ctx.tm.mkBitVector(64, _double_to_bits(val), 2)
    return FPRef(ctx.tm.mkFloatingPoint(11, 53, bv), ctx)


def Float(name, ctx):
    """Return a 64-bit floating-point constant named `name`.

    >>> x = Float('x', Context())
    >>> x.ebits(), x.sbits()
    (11, 53)
    """
    ctx = _get_ctx(ctx)
    return FPRef(ctx.get_var(name, Float64(ctx)), ctx)


def Floats(names, ctx):
    ctx = _get_ctx(ctx)
    if isinstance(names, str):
        names = names.split()
    return [Float(name, ctx) for name in names]


def _mk_rm(mode, ctx):
    ctx = _get_ctx(ctx)
    return FPRMRef(ctx.tm.mkRoundingMode(mode), ctx)


def RNE(ctx):
    """Round to nearest, ties to even.

    >>> ctx = Context()
    >>> eq(RNE(ctx), ctx.rm)
    True
    """
    return _mk_rm(pc.RoundingMode.ROUND_NEAREST_TIES_TO_EVEN, ctx)


def RNA(ctx):
    return _mk_rm(pc.RoundingMode.ROUND_NEAREST_TIES_TO_AWAY, ctx)


def RTP(ctx):
    return _mk_rm(pc.RoundingMode.ROUND_TOWARD_POSITIVE, ctx)


def RTN(ctx):
    return _mk_rm(pc.RoundingMode.ROUND_TOWARD_NEGATIVE, ctx)


def RTZ(ctx):
    return _mk_rm(pc.RoundingMode.ROUND_TOWARD_ZERO, ctx)


def _mk_fp_bin(kind, rm, a, b, ctx=None):
    a, b = _coerce_exprs(a, b, ctx)
    ctx = a.ctx
    if rm is None:
        rm = ctx.rm
    if debugging():
        _assert(is_fprm(rm), "rounding mode expected")
    return _to_expr_ref(ctx.tm.mkTerm(kind, rm.ast, a.ast, b.ast), ctx)


def fpAdd(rm, a, b, ctx=None):
    """Create an SMT floating-point addition expression. A `None` rounding
    mode selects the context's default.

    >>> ctx = Context()
    >>> x = ctx.Float('x')
    >>> eq(fpAdd(RNE(ctx), x, 1.0), x + 1.0)
    True
    """
    return _mk_fp_bin(Kind.FLOATINGPOINT_ADD, rm, a, b, ctx)


def fpSub(rm, a, b, ctx=None):
    return _mk_fp_bin(Kind.FLOATINGPOINT_SUB, rm, a, b, ctx)


def fpMul(rm, a, b, ctx=None):
    return _mk_fp_bin(Kind.FLOATINGPOINT_MULT, rm, a, b, ctx)


def fpDiv(rm, a, b, ctx=None):
    return _mk_fp_bin(Kind.FLOATINGPOINT_DIV, rm, a, b, ctx)


def fpMax(a, b, ctx=None):
    """Create an SMT floating-point maximum expression.

    >>> x, y = Context().Floats('x y')
    >>> fpMax(x, y)
    (fp.max x y)
    """
    return _mk_bin(Kind.FLOATINGPOINT_MAX, a, b, ctx)


def fpMin(a, b, ctx=None):
    """Create an SMT floating-point minimum expression.

    >>> x, y = Context().Floats('x y')
    >>> fpMin(x, y)
    (fp.min x y)
    """
    return _mk_bin(Kind.FLOATINGPOINT_MIN, a, b, ctx)


def fpNeg(a, ctx=None):
    return _mk_unary(Kind.FLOATINGPOINT_NEG, a, ctx)


def fpAbs(a, ctx=None):
    """Create an SMT floating-point absolute value expression.

    >>> x = Context().Float('x')
    >>> fpAbs(x)
    (fp.abs x)
    """
    return _mk_unary(Kind.FLOATINGPOINT_ABS, a, ctx)


def fpLT(a, b, ctx=None):
    """Create the SMT floating-point expression `a < b`.

    >>> x, y = Context().Floats('x y')
    >>> fpLT(x, y)
    (fp.lt x y)
    >>> x < y
    (fp.lt x y)
    """
    return _mk_bin(Kind.FLOATINGPOINT_LT, a, b, ctx)


def fpLEQ(a, b, ctx=None):
    return _mk_bin(Kind.FLOATINGPOINT_LEQ, a, b, ctx)


def fpGT(a, b, ctx=None):
    return _mk_bin(Kind.FLOATINGPOINT_GT, a, b, ctx)


def fpGEQ(a, b, ctx=None):
    return _mk_bin(Kind.FLOATINGPOINT_GEQ, a, b, ctx)


def fpEQ(a, b, ctx=None):
    return _mk_bin(Kind.FLOATINGPOINT_EQ, a, b, ctx)


def fpNEQ(a, b, ctx=None):
    """Create the SMT floating-point expression `Not(fpEQ(a, b))`.

    >>> x, y = Context().Floats('x y')
    >>> fpNEQ(x, y)
    (not (fp.eq x y))
    """
    return Not(fpEQ(a, b, ctx))


#########################################
#
# Solver
#
#########################################
class CheckSatResult(object):
    """Represents the result of a satisfiability check: sat, unsat, unknown.

    >>> s = Context().Solver()
    >>> r = s.check()
    >>> r
    sat
    >>> isinstance(r, CheckSatResult)
    True
    """

    def __init__(self, r):
        instance_check(r, pc.Result)
        self.r = r

    def __eq__(self, other):
        return repr(self) == repr(other)

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(repr(self))

    def __repr__(self):
        if self.r.isSat():
            return "sat"
        elif self.r.isUnsat():
            return "unsat"
        else:
            return "unknown"


class CheckSatResultLiteral(CheckSatResult):
    """Represents the literal result of a satisfiability check: sat, unsat,
    unknown.

    >>> s = Context().Solver()
    >>> s.check() == CheckSatResultLiteral("sat")
    True
    >>> s.check() != sat
    False
    """

    def __init__(self, string):
        self.string = string

    def __repr__(self):
        return self.string


sat = CheckSatResultLiteral("sat")
unsat = CheckSatResultLiteral("unsat")
unknown = CheckSatResultLiteral("unknown")


class Solver(object):
    """Solver API provides methods for implementing the main SMT 2.0 commands:

    * push,
    * pop,
    * check,
    * get-model,
    * etc.

    Every solver runs on a native cvc5 solver created from the context's
    term manager and configured with the context's options. Keyword options
    given here are applied to this solver only.
    """

    def __init__(self, ctx, **options):
        self.ctx = _get_ctx(ctx)
        self.solver = self.ctx.mk_solver(options)
        self.scopes = 0
        self.assertions_ = [[]]
        self.last_result = None
        # Bumped on every change; models remember the value they were taken at
        self.generation = 0
        logger.debug("created %s", type(self).__name__)

    def _native(self):
        self.ctx.check_open()
        return self.solver

    def _release(self):
        """Hook run before the assertion stack changes."""

    def _touch(self):
        self._release()
        self.generation += 1
        self.last_result = None

    def _check_native(self, asts):
        if asts:
            return self._native().checkSatAssuming(*asts)
        return self._native().checkSat()

    def push(self):
        """Create a backtracking point.

        >>> ctx = Context()
        >>> x = ctx.Int('x')
        >>> s = ctx.Solver()
        >>> s.add(x > 0)
        >>> s.push()
        >>> s.add(x < 1)
        >>> s
        [(> x 0), (< x 1)]
        >>> s.check()
        unsat
        >>> s.pop()
        >>> s.check()
        sat
        >>> s
        [(> x 0)]
        """
        self._touch()
        self._native().push(1)
        self.scopes += 1
        self.assertions_.append([])

    def pop(self, num=1):
        """Backtrack num backtracking points."""
        _assert(num <= self.scopes, "cannot pop {} of {} scopes".format(num, self.scopes))
        self._touch()
        self._native().pop(num)
        self.scopes -= num
        for _ in range(num):
            self.assertions_.pop()

    @contextmanager
    def scope(self):
        """Push a backtracking point for the duration of a ``with`` block.

        Exactly one `pop()` runs when the block is left, also when it is left
        by an exception.

        >>> ctx = Context()
        >>> x = ctx.Int('x')
        >>> s = ctx.Solver()
        >>> s.add(x > 0)
        >>> with s.scope():
        ...     s.add(x < 0)
        ...     print(s.check())
        unsat
        >>> s.num_scopes()
        0
        >>> s.check()
        sat
        """
        self.push()
        try:
            yield self
        finally:
            self.pop()

    def num_scopes(self):
        """Return the current number of backtracking points.

        >>> s = Context().Solver()
        >>> s.num_scopes()
        0
        >>> s.push()
        >>> s.num_scopes()
        1
        """
        return self.scopes

    def reset_assertions(self):
        """Remove all asserted constraints and backtracking points created
        using `push()`.

        >>> ctx = Context()
        >>> s = ctx.Solver()
        >>> s.add(ctx.Int('x') > 0)
        >>> s.reset_assertions()
        >>> s
        []
        """
        self._touch()
        self._native().resetAssertions()
        self.scopes = 0
        self.assertions_ = [[]]

    resetAssertions = reset_assertions

    def assert_exprs(self, *args):
        """Assert constraints into the solver.

        Python literals are converted first. Terms that are not Boolean are
        rejected by cvc5.

        >>> ctx = Context()
        >>> x = ctx.Int('x')
        >>> s = ctx.Solver()
        >>> s.assert_exprs(x > 0, x < 2)
        >>> s
        [(> x 0), (< x 2)]
        """
        args = _get_args(args)
        self._touch()
        for arg in args:
            arg = _py2expr(arg, self.ctx)
            self._native().assertFormula(arg.ast)
            self.assertions_[-1].append(arg)

    def add(self, *args):
        """Assert constraints into the solver.

        >>> ctx = Context()
        >>> x = ctx.Int('x')
        >>> s = ctx.Solver()
        >>> s.add(x > 0, x < 2)
        >>> s
        [(> x 0), (< x 2)]
        """
        self.assert_exprs(*args)

    def __iadd__(self, fml):
        """Assert constraints into the solver.

        >>> ctx = Context()
        >>> s = ctx.Solver()
        >>> s += ctx.Int('x') > 0
        >>> s
        [(> x 0)]
        """
        self.add(fml)
        return self

    def append(self, *args):
        self.assert_exprs(*args)

    def insert(self, *args):
        self.assert_exprs(*args)

    def check(self, *assumptions):
        """Check whether the assertions in the given solver plus the optional
        assumptions are consistent or not.

        >>> ctx = Context()
        >>> x = ctx.Int('x')
        >>> s = ctx.Solver()
        >>> s.check()
        sat
        >>> s.add(x > 0, x < 2)
        >>> s.check()
        sat
        >>> s.check(x > 1)
        unsat
        """
        assumptions = [_py2expr(a, self.ctx) for a in _get_args(assumptions)]
        self._touch()
        r = CheckSatResult(self._check_native([a.ast for a in assumptions]))
        self.last_result = r
        logger.debug("check: %r", r)
        return r

    def model(self):
        """Return a model for the last `check()`.

        This function raises `EvaluationError` if a model is not available,
        e.g., the last `check()` returned unsat, or the solver changed since.

        >>> ctx = Context()
        >>> a = ctx.Int('a')
        >>> s = ctx.Solver()
        >>> s.add(a + 2 == 5)
        >>> s.check()
        sat
        >>> s.model()
        [a = 3]
        """
        _assert(
            self.last_result is not None,
            "model is not available: no check since the last change",
            EvaluationError,
        )
        _assert(
            self.last_result != unsat,
            "model is not available: the last check returned unsat",
            EvaluationError,
        )
        return ModelRef(self, self.ctx)

    @contextmanager
    def check_model(self, *assumptions):
        """Check, and give the model to the ``with`` block.

        Raises `UnsatError` when the assertions are unsatisfiable and
        `UnknownError` when cvc5 cannot decide them.

        >>> ctx = Context()
        >>> x = ctx.Int('x')
        >>> s = ctx.Solver()
        >>> s.add(x == 1, x == 2)
        >>> try:
        ...     with s.check_model() as m:
        ...         pass
        ... except UnsatError as ex:
        ...     print(ex)
        UNSAT
        """
        r = self.check(*assumptions)
        if r == unsat:
            raise UnsatError("UNSAT")
        if r == unknown:
            raise UnknownError("UNKNOWN: {}".format(self.reason_unknown()))
        yield self.model()

    def assertions(self):
        """Return a list containing all added constraints.

        >>> ctx = Context()
        >>> s = ctx.Solver()
        >>> s.assertions()
        []
        >>> a = ctx.Int('a')
        >>> s.add(a > 0)
        >>> s.add(a < 10)
        >>> s.assertions()
        [(> a 0), (< a 10)]
        """
        return ft.reduce(lambda a, b: a + b, self.assertions_, [])

    def reason_unknown(self):
        """Return a string describing why the last `check()` returned `unknown`."""
        if self.last_result is None or not hasattr(self.last_result, "r"):
            raise SMTException("No previous check-sat call, so no reason for unknown")
        return str(self.last_result.r.getUnknownExplanation())

    def __repr__(self):
        """Return a formatted string with all added constraints."""
        return "[" + ", ".join(str(a) for a in self.assertions()) + "]"

    def sexpr(self):
        """Return a formatted string (in Lisp-like format) with all added
        constraints. We say the string is in s-expression format.

        >>> ctx = Context()
        >>> x = ctx.Int('x')
        >>> s = ctx.Solver()
        >>> s.add(x > 0)
        >>> s.add(x < 2)
        >>> s.sexpr()
        '(and (> x 0) (< x 2))'
        """
        return "(and " + " ".join(a.sexpr() for a in self.assertions()) + ")"

    def set(self, *args, **kwargs):
        """Set an option on the solver. Wraps ``setOption()``."""
        self.setOption(*args, **kwargs)

    def setOption(self, name=None, value=None, **kwargs):
        """Set options on the solver. Options can either be set via the ``name``
        and ``value`` arguments in the form ``setOption('foo', 'bar')``, or as
        keyword arguments using the syntax ``setOption(foo='bar')``.
        Booleans become ``"true"``/``"false"``, other values are ``str()``-ed.

        >>> s = Context().Solver()
        >>> s.setOption('produce-unsat-cores', True)
        >>> s.getOption('produce-unsat-cores')
        'true'
        """
        if name is not None:
            kwargs[name] = value
        for k, v in _options_to_strings(kwargs).items():
            self._native().setOption(k, v)

    def getOption(self, name):
        return self._native().getOption(name)

    def statistics(self):
        """Return the statistics of this solver."""
        return self._native().getStatistics()


class OptimizeObjective(object):
    """An objective added with `Optimizer.minimize()` or
    `Optimizer.maximize()`."""

    def __init__(self, opt, index, term, is_max):
        self._opt = opt
        self.index = index
        self.term = term
        self.is_max = is_max
        self._value = None

    def value(self):
        """The optimum found by the last `check()`."""
        _assert(self._value is not None, "objective has not been optimized yet")
        return _to_expr_ref(self._value, self._opt.ctx)

    def __repr__(self):
        return "{}({})".format("maximize" if self.is_max else "minimize", self.term)


class Optimizer(Solver):
    """A solver with integer objectives.

    cvc5 has no optimization entry point, so `check()` searches for the
    optimum with incremental checks: each step asks for a strictly better
    objective value inside a temporary backtracking point. Objectives are
    optimized one after another in the order they were added, each one fixed
    at its optimum before the next is considered. At most `max_rounds`
    improving steps are taken per objective; when that bound is reached the
    result is `unknown` and the best model found is kept.

    >>> ctx = Context()
    >>> x, y = ctx.Ints('x y')
    >>> o = ctx.Optimizer()
    >>> o.add(x + y <= 10, x >= 0, y >= 2)
    >>> h = o.maximize(x)
    >>> h.index
    0
    >>> o.check()
    sat
    >>> o.model().to_int(x)
    8
    >>> h.value()
    8
    """

    def __init__(self, ctx, max_rounds=1000, **options):
        super(Optimizer, self).__init__(ctx, **options)
        self.max_rounds = max_rounds
        self.objectives_ = []
        self._internal_scopes = 0
        self._reason = None

    def _release(self):
        if self._internal_scopes > 0:
            self._native().pop(self._internal_scopes)
            self._internal_scopes = 0
        self._reason = None

    def _add_objective(self, term, is_max):
        term = _py2expr(term, self.ctx)
        _assert(is_int(term), "integer objective expected")
        self._touch()
        obj = OptimizeObjective(self, len(self.objectives_), term, is_max)
        self.objectives_.append(obj)
        return obj

    def minimize(self, arg):
        """Add objective function to minimize."""
        return self._add_objective(arg, False)

    def maximize(self, arg):
        """Add objective function to maximize."""
        return self._add_objective(arg, True)

    def objectives(self):
        return list(self.objectives_)

    def _optimize(self, obj, asts):
        """Improve `obj` from the current sat model, then fix it at the best
        value found. Returns whether the optimum was proven."""
        native = self._native()
        tm = self.ctx.tm
        better = Kind.GT if obj.is_max else Kind.LT
        best = native.getValue(obj.term.ast)
        rounds = 0
        converged = True
        while True:
            if rounds >= self.max_rounds:
                logger.warning(
                    "objective %r stopped after %d rounds at %s", obj, rounds, best
                )
                self._reason = "max_rounds reached before an objective converged"
                converged = False
                break
            rounds += 1
            native.push(1)
            try:
                native.assertFormula(tm.mkTerm(better, obj.term.ast, best))
                r = self._check_native(asts)
                if r.isSat():
                    best = native.getValue(obj.term.ast)
                    logger.debug("objective %r improved to %s", obj, best)
            finally:
                native.pop(1)
            if r.isUnknown():
                logger.warning("objective %r stopped at %s: unknown", obj, best)
                self._reason = "unknown while improving an objective: {}".format(
                    r.getUnknownExplanation()
                )
                converged = False
                break
            if not r.isSat():
                break
        obj._value = best
        native.assertFormula(tm.mkTerm(Kind.EQUAL, obj.term.ast, best))
        return converged

    def check(self, *assumptions):
        """Check the assertions and optimize the objectives.

        The model of the optimum stays available until the optimizer is
        changed.
        """
        assumptions = [_py2expr(a, self.ctx) for a in _get_args(assumptions)]
        asts = [a.ast for a in assumptions]
        self._touch()
        for obj in self.objectives_:
            obj._value = None
        self._native().push(1)
        self._internal_scopes = 1
        r = self._check_native(asts)
        converged = True
        for obj in self.objectives_:
            if not r.isSat():
                break
            converged = self._optimize(obj, asts) and converged
            # Each objective is fixed at its optimum; this check gives the
            # next objective its starting model and the caller the final one.
            r = self._check_native(asts)
        self.last_result = CheckSatResult(r)
        if r.isSat() and not converged:
            self.last_result = unknown
        logger.debug("optimize: %r", self.last_result)
        return self.last_result

    def reason_unknown(self):
        if self._reason is not None:
            return self._reason
        return super(Optimizer, self).reason_unknown()


def is_sat(*args):
    """Return whether these constraints are satisfiable.

    Prints nothing.

    >>> a = Context().Int('a')
    >>> is_sat(a > 0, a < 2)
    True
    """
    args = _get_args(args)
    ctx = _ctx_from_ast_arg_list(args)
    _assert(ctx is not None, "At least one of the arguments must be an SMT expression")
    s = Solver(ctx)
    s.add(args)
    r = s.check()
    _assert(r != unknown, "Unknown result in is_sat")
    return r == sat


def solve(*args, **kwargs):
    """Solve the constraints `*args`.

    This is a simple function for creating demonstrations. It creates a solver,
    configure it using the options in `kwargs`, adds the constraints
    in `args`, and invokes check.

    >>> a = Context().Int('a')
    >>> solve(a > 0, a < 2)
    [a = 1]
    >>> solve(a > 0, a < 0)
    no solution
    """
    args = _get_args(args)
    ctx = _ctx_from_ast_arg_list(args)
    _assert(ctx is not None, "At least one of the arguments must be an SMT expression")
    show = kwargs.pop("show", False)
    s = Solver(ctx, **kwargs)
    s.add(*args)
    if show:
        print("Problem:")
        print(s)
    r = s.check()
    if r == unsat:
        print("no solution")
    elif r == unknown:
        print("failed to solve")
    else:
        if show:
            print("Solution:")
        print(s.model())


def prove(claim, **keywords):
    """Try to prove the given claim.

    This is a simple function for creating demonstrations.  It tries to prove
    `claim` by showing the negation is unsatisfiable.

    >>> p, q = Context().Bools('p q')
    >>> prove(Iff(Not(And(p, q)), Or(Not(p), Not(q))))
    proved
    """
    if debugging():
        _assert(is_bool(claim), "SMT Boolean expression expected")
    s = Solver(claim.ctx)
    s.add(Not(claim))
    if keywords.get("show", False):
        print(s)
    r = s.check()
    if r == unsat:
        print("proved")
    elif r == unknown:
        print("failed to prove")
    else:
        print("counterexample")
        print(s.model())


#########################################
#
# Models
#
#########################################


class ModelRef(object):
    """Model/Solution of a satisfiability problem (aka system of constraints).

    A model is only valid until its solver changes; evaluating a term in a
    stale model raises `EvaluationError`.
    """

    def __init__(self, solver, ctx):
        assert solver is not None
        assert ctx is not None
        self.solver = solver
        self.ctx = ctx
        self.generation = solver.generation

    def _check_valid(self):
        _assert(not self.ctx.closed, "context is closed", EvaluationError)
        _assert(
            self.generation == self.solver.generation,
            "model is stale: the solver changed after the check that produced it",
            EvaluationError,
        )

    def vars(self):
        """Returns the free constants in the assertions, as terms"""
        visit = {a: True for a in self.solver.assertions()}
        q = list(visit.keys())
        vars_ = set()
        while len(q) > 0:
            a = q.pop()
            if is_const(a):
                vars_.add(a)
            else:
                for c in a.children():
                    if c not in visit:
                        visit[c] = True
                        q.append(c)
        return vars_

    def decls(self):
        """Return a list with all constants that appear in the assertions.

        >>> ctx = Context()
        >>> x, y = ctx.Ints('x y')
        >>> s = ctx.Solver()
        >>> s.add(x > 0, y == x)
        >>> s.check()
        sat
        >>> s.model().decls()
        [x, y]
        """
        return sorted(self.vars(), key=lambda v: str(v))

    def __len__(self):
        return len(self.decls())

    def __repr__(self):
        var_vals = [(str(v), self.eval(v)) for v in self.decls()]
        inner = ", ".join(v + " = " + str(val) for v, val in var_vals)
        return "[" + inner + "]"

    def __getitem__(self, idx):
        """If `idx` is an integer, then the constant at position `idx` in the
        model `self` is returned. If `idx` is an expression, its value is
        returned."""
        if _is_int(idx):
            return self.decls()[idx]
        return self.eval(idx)

    def eval(self, t, model_completion=True):
        """Evaluate the expression `t` in the model `self`. Symbols without
        an interpretation get a default one; cvc5 always completes models.

        >>> ctx = Context()
        >>> x = ctx.Int('x')
        >>> s = ctx.Solver()
        >>> s.add(x > 0, x < 2)
        >>> s.check()
        sat
        >>> m = s.model()
        >>> m.eval(x + 1)
        2
        >>> m.eval(x == 1)
        true
        >>> s.add(x > 5)
        >>> try:
        ...     m.eval(x)
        ... except EvaluationError as ex:
        ...     print("failed: %s" % ex)
        failed: model is stale: the solver changed after the check that produced it
        """
        self._check_valid()
        t = _py2expr(t, self.ctx)
        _assert(t.ctx is self.ctx, "Context mismatch", EvaluationError)
        try:
            v = self.solver._native().getValue(t.ast)
        except SMTException as ex:
            raise EvaluationError("Can not evaluate {}: {}".format(t, ex)) from ex
        return _to_expr_ref(v, self.ctx)

    def evaluate(self, t, model_completion=True):
        """Alias for `eval`."""
        return self.eval(t, model_completion)

    def eval_str(self, t):
        """Evaluate `t` and render the value as text.

        >>> ctx = Context()
        >>> p = ctx.Bool('p')
        >>> s = ctx.Solver()
        >>> s.add(p)
        >>> s.check()
        sat
        >>> s.model().eval_str(p)
        'true'
        """
        return str(self.eval(t))

    def to_bool(self, t):
        """Evaluate `t` to a Python bool."""
        v = self.eval(t)
        _assert(
            v.ast.isBooleanValue(), "Can not convert {} to bool".format(v), EvaluationError
        )
        return v.ast.getBooleanValue()

    def to_int(self, t):
        """Evaluate `t` to a Python int.

        >>> ctx = Context()
        >>> x = ctx.Int('x')
        >>> s = ctx.Solver()
        >>> s.add(x * 3 == 12)
        >>> with s.check_model() as m:
        ...     print(m.to_int(x))
        4
        """
        v = self.eval(t)
        _assert(
            v.ast.isIntegerValue(), "Can not convert {} to int".format(v), EvaluationError
        )
        return v.ast.getIntegerValue()

    def to_float(self, t):
        """Evaluate a 64-bit floating point term to a Python float.

        >>> ctx = Context()
        >>> x = ctx.Float('x')
        >>> s = ctx.Solver()
        >>> s.add(x == 0.5 + 0.25)
        >>> with s.check_model() as m:
        ...     print(m.to_float(x))
        0.75
        """
        v = self.eval(t)
        _assert(
            v.ast.isFloatingPointValue(),
            "Can not convert {} to float".format(v),
            EvaluationError,
        )
        ebits, sbits, bv = v.ast.getFloatingPointValue()
        _assert(
            (ebits, sbits) == (11, 53),
            "Can not convert FloatingPoint {} {} to float".format(ebits, sbits),
            EvaluationError,
        )
        return _bits_to_double(bv.getBitVectorValue(2))
