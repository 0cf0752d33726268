import numpy as np
import pytest

from lnsearch.errors import DimensionMismatch
from lnsearch.functions import FUNCTION_NAMES, get_function
from lnsearch.line_search import armijo
from lnsearch.line_search.backtracking import _cubic_step, _quadratic_step


def quadratic_fun(x: np.ndarray) -> float:
    return float(x.T @ x)


def quadratic_grad(x: np.ndarray) -> np.ndarray:
    return 2 * x


def test_full_step_accepted_when_sufficient():
    x = np.array([1.0, -2.0])
    alpha = armijo(x, -0.25 * quadratic_grad(x), quadratic_fun, quadratic_grad)
    assert alpha == 1.0


def test_quadratic_backtrack_is_exact_on_quadratic(counting):
    x = np.array([1.0, -2.0])
    f = counting(quadratic_fun)
    g = counting(quadratic_grad)
    alpha = armijo(x, -quadratic_grad(x), f, g)
    assert alpha == pytest.approx(0.5)
    assert f.calls == 3
    assert g.calls == 1


def test_quadratic_step_formula():
    # phi(a) = (a - 0.3)^2: f0 = 0.09, pad0 = -0.6, phi(1) = 0.49
    assert _quadratic_step(1.0, 0.09, 0.49, -0.6) == pytest.approx(0.3)


def test_cubic_step_formula():
    # phi(a) = a^3 - a: f0 = 0, pad0 = -1
    phi = lambda a: a**3 - a
    step = _cubic_step(2.0, 1.5, 0.0, phi(2.0), phi(1.5), -1.0)
    assert step == pytest.approx(1 / np.sqrt(3))


@pytest.mark.parametrize("name", FUNCTION_NAMES)
def test_sufficient_decrease_on_benchmarks(name):
    bench = get_function(name)
    x0 = bench.start_point(4)
    grad = bench.gradient(x0)
    d = -grad
    alpha = armijo(x0, d, bench.value, bench.gradient)
    assert alpha > 0
    assert bench.value(x0 + alpha * d) <= bench.value(x0) + 1e-4 * alpha * (grad @ d)


def test_steepness_controls_acceptance():
    x = np.array([1.0, -2.0])
    d = -0.4 * quadratic_grad(x)
    # phi(a) = 5 (1 - 0.8 a)^2 decreases by 96% at a = 1
    assert armijo(x, d, quadratic_fun, quadratic_grad, steepness=0.5) == 1.0
    assert armijo(x, d, quadratic_fun, quadratic_grad, steepness=0.99) < 1.0


def test_float32_precision_is_kept():
    x = np.array([1.0, -2.0], dtype=np.float32)
    alpha = armijo(x, -quadratic_grad(x), quadratic_fun, quadratic_grad)
    assert isinstance(alpha, np.float32)
    assert alpha == pytest.approx(0.5, rel=1e-6)


def test_max_iter_ceiling(log_stream):
    x = np.array([1.0])
    # An ascent direction never satisfies sufficient decrease.
    alpha = armijo(x, np.array([1.0]), quadratic_fun, quadratic_grad, max_iter=5)
    assert 0 < alpha < 1.0
    assert "armijo: no sufficient decrease after 5 trials" in log_stream.getvalue()


def cubic_ray_fun(x: np.ndarray) -> float:
    return float(x[0] + x[0] ** 3)


def cubic_ray_grad(x: np.ndarray) -> np.ndarray:
    return 1 + 3 * x**2


def test_cubic_step_without_real_minimizer():
    # phi(a) = a + a^3 through a = 1 and a = 0.5: cubic = 1, quad = 0, pad0 = 1
    with pytest.raises(ValueError):
        _cubic_step(1.0, 0.5, 0.0, 2.0, 0.625, 1.0)


def test_negative_discriminant_falls_back_to_halving(log_stream):
    # The fitted cubic equals phi(a) = a + a^3, whose slope never vanishes.
    alpha = armijo(
        np.array([0.0]), np.array([1.0]), cubic_ray_fun, cubic_ray_grad, max_iter=4
    )
    assert alpha == 0.125
    out = log_stream.getvalue()
    assert "interpolated step unusable at a=0.5; halving" in out
    assert "armijo: no sufficient decrease after 4 trials; returning a=0.125" in out


def test_raises_on_invalid_params():
    x = np.array([1.0])
    with pytest.raises(ValueError):
        armijo(x, -quadratic_grad(x), quadratic_fun, quadratic_grad, steepness=1.5)
    with pytest.raises(ValueError):
        armijo(x, -quadratic_grad(x), quadratic_fun, quadratic_grad, initial_step=0.0)
    with pytest.raises(ValueError):
        armijo(x, -quadratic_grad(x), quadratic_fun, quadratic_grad, max_iter=0)


def test_mismatched_direction():
    with pytest.raises(DimensionMismatch):
        armijo(np.zeros(3), np.ones(2), quadratic_fun, quadratic_grad)
