"""
Forward-mode tangents vs analytic rules and central finite differences.
"""

import numpy as np
import pytest

from dual_density.ad import FVar, value_of, tangent_of, is_constant, variable, constant
from dual_density.ad import derivative, partials, central_difference, central_gradient
from dual_density.ad import ops


def _rel_close(a, b, tol=1e-6):
    return abs(a - b) <= tol * max(1.0, abs(b))


def test_arithmetic_rules():
    a = FVar(3.0, 1.0)
    b = FVar(2.0, 0.5)

    s = a + b
    assert s.val == 5.0 and s.dot == 1.5

    d = a - b
    assert d.val == 1.0 and d.dot == 0.5

    p = a * b
    # a.dot*b.val + a.val*b.dot
    assert p.val == 6.0 and p.dot == 1.0 * 2.0 + 3.0 * 0.5

    q = a / b
    assert q.val == 1.5
    assert q.dot == pytest.approx((1.0 * 2.0 - 3.0 * 0.5) / 4.0)

    n = -a
    assert n.val == -3.0 and n.dot == -1.0


def test_mixed_plain_operands_both_orders():
    x = FVar(2.0, 1.0)
    for y in (x + 1.0, 1.0 + x, x - 1.0, 1.0 - x, x * 3.0, 3.0 * x, x / 4.0, 4.0 / x):
        assert isinstance(y, FVar)
    assert (1.0 - x).dot == -1.0
    assert (3.0 * x).dot == 3.0
    assert (4.0 / x).dot == pytest.approx(-4.0 / 4.0)


def test_numpy_scalars_and_arrays_defer_to_fvar():
    x = FVar(2.0, 1.0)
    y = np.float64(3.0) * x
    assert isinstance(y, FVar)
    assert y.dot == 3.0
    z = np.float64(1.0) - x
    assert isinstance(z, FVar) and z.dot == -1.0


@pytest.mark.parametrize("op", ["add", "sub", "mul", "div"])
def test_binary_ops_match_finite_difference(op):
    f = getattr(ops, op)
    a0, b0 = 1.7, -0.6

    # d/da with b held fixed
    fa = lambda a: f(a, b0)
    _, da = derivative(fa, a0)
    assert _rel_close(da, central_difference(fa, a0))

    # d/db with a held fixed
    fb = lambda b: f(a0, b)
    _, db = derivative(fb, b0)
    assert _rel_close(db, central_difference(fb, b0))


@pytest.mark.parametrize("name, x0", [
    ("exp", 0.3), ("log", 1.4), ("log10", 2.5), ("sqrt", 2.0), ("log1p", 0.2),
    ("expm1", 0.4), ("square", -1.3), ("inv", 0.7), ("inv_sqrt", 1.9),
    ("fabs", -0.8), ("sin", 0.9), ("cos", 0.9), ("tan", 0.4),
    ("asin", 0.3), ("acos", 0.3), ("atan", 1.1), ("sinh", 0.5), ("cosh", 0.5),
    ("tanh", 0.5), ("erf", 0.6), ("erfc", 0.6), ("Phi", -0.4),
    ("lgamma", 2.3), ("digamma", 2.3), ("log1m", 0.35),
])
def test_elementary_functions_match_finite_difference(name, x0):
    f = getattr(ops, name)
    val, dot = derivative(f, x0)
    assert val == pytest.approx(f(x0))
    assert _rel_close(dot, central_difference(f, x0), tol=1e-6)


def test_plain_inputs_stay_plain():
    assert not isinstance(ops.exp(1.0), FVar)
    assert not isinstance(ops.mul(2.0, 3.0), FVar)
    assert ops.log(np.e) == pytest.approx(1.0)


def test_pow_rules():
    x = FVar(2.0, 1.0)
    y = x ** 3
    assert y.val == 8.0 and y.dot == pytest.approx(12.0)

    # negative base with constant integer exponent keeps a finite tangent
    z = FVar(-2.0, 1.0) ** 2
    assert z.val == 4.0 and z.dot == pytest.approx(-4.0)

    # same with the exponent lifted to a zero-tangent FVar
    w = FVar(-2.0, 1.0) ** FVar(2.0, 0.0)
    assert w.val == 4.0 and w.dot == pytest.approx(-4.0)
    w = FVar(-2.0, 1.0) ** constant(3.0)
    assert w.val == -8.0 and w.dot == pytest.approx(12.0)

    e = 2.0 ** FVar(3.0, 1.0)
    assert e.val == 8.0 and e.dot == pytest.approx(8.0 * np.log(2.0))

    val, dot = derivative(lambda t: t ** t, 1.5)
    assert _rel_close(dot, central_difference(lambda t: t ** t, 1.5))


def test_domain_errors_propagate_nan_inf():
    with np.errstate(all="ignore"):
        r = ops.log(FVar(-1.0, 1.0))
        assert np.isnan(r.val)
        q = FVar(1.0, 1.0) / 0.0
        assert np.isinf(q.val)
        s = ops.sqrt(FVar(0.0, 1.0))
        assert np.isinf(s.dot)


def test_comparisons_use_value_only():
    a = FVar(1.0, 5.0)
    b = FVar(1.0, -3.0)
    assert a == b
    assert a == 1.0
    assert FVar(0.5) < a <= b
    assert a > 0.0 and a >= 1.0
    assert a != 2.0
    assert hash(a) == hash(1.0)


def test_generic_function_runs_on_plain_and_dual():
    def logistic(x):
        return 1.0 / (1.0 + ops.exp(-x))

    plain = logistic(0.3)
    dual = logistic(FVar(0.3, 1.0))
    assert dual.val == pytest.approx(plain)
    assert dual.dot == pytest.approx(plain * (1.0 - plain))


def test_seed_helpers():
    assert is_constant(1.0)
    assert is_constant([1.0, 2.0])
    assert is_constant(np.array([1.0, 2.0]))
    assert not is_constant(FVar(1.0))
    assert not is_constant([1.0, FVar(2.0)])

    v = variable([1.0, 2.0])
    assert all(isinstance(e, FVar) and e.dot == 1.0 for e in v)
    c = constant(3.0)
    assert c.val == 3.0 and c.dot == 0.0

    np.testing.assert_array_equal(value_of([FVar(1.0, 2.0), 3.0]), [1.0, 3.0])
    np.testing.assert_array_equal(tangent_of([FVar(1.0, 2.0), 3.0]), [2.0, 0.0])


def test_partials_match_central_gradient():
    def f(v):
        return v["a"] * ops.sin(v["b"]) + ops.exp(v["a"] / v["c"])

    inputs = {"a": 0.7, "b": 1.2, "c": 2.0}
    f0, grad = partials(f, inputs)
    fd = central_gradient(f, inputs)
    assert f0 == pytest.approx(value_of(f(inputs)))
    for k in inputs:
        assert _rel_close(grad[k], fd[k])


def test_unary_plus_and_abs():
    x = FVar(-2.0, 1.0)
    assert +x is x
    a = abs(x)
    assert a.val == 2.0 and a.dot == -1.0


def test_operators_come_from_arithmetic_primitives():
    from dual_density.ad.ops import arithmetic
    x = FVar(1.5, 1.0)
    assert (x + 2.0).dot == arithmetic.add(x, 2.0).dot
    assert (2.0 ** x).dot == arithmetic.pow(2.0, x).dot
    assert (-x).dot == arithmetic.neg(x).dot


def test_fvar_does_not_nest():
    with pytest.raises(TypeError):
        FVar(FVar(1.0), 0.0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
