import importlib
from dataclasses import asdict

import numpy as np
import pytest

import lnsearch.line_search as line_search_pkg
from lnsearch.errors import UnknownMethod, UnknownOption
from lnsearch.line_search import (
    METHODS,
    ArmijoOptions,
    StrongWolfeOptions,
    WolfeOptions,
    default_options,
    line_search,
    resolve_options,
)


def quadratic_fun(x: np.ndarray) -> float:
    return float(x.T @ x)


def quadratic_grad(x: np.ndarray) -> np.ndarray:
    return 2 * x


X0 = np.array([1.0, -2.0])


def test_registry_is_fixed():
    assert set(METHODS) == {
        "armijo",
        "wolfe",
        "strong_wolfe",
        "goldstein",
        "fixed_line_search",
        "binary",
    }


@pytest.mark.parametrize(
    "method, expected",
    [
        ("armijo", {"steepness": 1e-4, "initial_step": 1.0, "max_iter": None}),
        (
            "wolfe",
            {
                "steepness": 1e-4,
                "initial_step": 1.0,
                "sigma": 0.9,
                "xi": 1e-3,
                "max_step": 1e10,
                "step_factor": 10.0,
                "max_iter": None,
            },
        ),
        (
            "strong_wolfe",
            {
                "steepness": 1e-4,
                "initial_step": 1.0,
                "sigma": 0.1,
                "xi": 1e-3,
                "max_step": 1e10,
                "step_factor": 10.0,
                "max_iter": None,
            },
        ),
        (
            "goldstein",
            {"steepness": 1e-4, "initial_step": 1.0, "gamma": 1.1, "max_iter": 52},
        ),
        ("fixed_line_search", {"initial_step": 1.0}),
        ("binary", {"initial_step": 1.0, "max_iter": None}),
    ],
)
def test_default_options(method, expected):
    assert asdict(default_options(method)) == expected


def test_override_replaces_only_named_fields():
    opts = resolve_options("wolfe", {"sigma": 0.5})
    assert opts == WolfeOptions(sigma=0.5)
    assert opts.steepness == 1e-4
    assert opts.initial_step == 1.0
    assert opts.xi == 1e-3
    assert opts.max_step == 1e10
    assert opts.step_factor == 10.0


def test_override_reaches_the_algorithm():
    # phi(a) = 5 (1 - 0.02 a)^2: sigma = 0.9 accepts a = 10 while
    # sigma = 0.5 needs the zoom down to the minimizer a = 50.
    d = -0.01 * quadratic_grad(X0)
    assert line_search("wolfe", X0, d, quadratic_fun, quadratic_grad) == pytest.approx(10.0)
    alpha = line_search("wolfe", X0, d, quadratic_fun, quadratic_grad, {"sigma": 0.5})
    assert alpha == pytest.approx(50.0, rel=1e-6)


def test_strong_wolfe_defaults_differ_only_in_sigma():
    weak, strong = asdict(WolfeOptions()), asdict(StrongWolfeOptions())
    assert weak.pop("sigma") == 0.9
    assert strong.pop("sigma") == 0.1
    assert weak == strong


def test_empty_overrides_keep_defaults():
    assert resolve_options("armijo", {}) == ArmijoOptions()
    assert resolve_options("armijo", None) == ArmijoOptions()


@pytest.mark.parametrize("method", ["armijo", "wolfe", "strong_wolfe", "goldstein"])
def test_sufficient_decrease_through_dispatcher(method):
    d = -quadratic_grad(X0)
    alpha = line_search(method, X0, d, quadratic_fun, quadratic_grad)
    assert quadratic_fun(X0 + alpha * d) <= quadratic_fun(X0) + 1e-4 * alpha * (
        quadratic_grad(X0) @ d
    )


def test_fixed_line_search_makes_no_oracle_calls(counting):
    f = counting(quadratic_fun)
    g = counting(quadratic_grad)
    alpha = line_search("fixed_line_search", X0, -X0, f, g, {"initial_step": 0.37})
    assert alpha == 0.37
    assert f.calls == 0
    assert g.calls == 0


def test_binary_ignores_gradient(counting):
    g = counting(quadratic_grad)
    alpha = line_search("binary", X0, -X0 / 8, quadratic_fun, g)
    assert alpha == pytest.approx(8.0)
    assert g.calls == 0


@pytest.mark.parametrize("name", ["not_a_method", "", "Armijo", "newton"])
def test_unknown_method(name):
    with pytest.raises(UnknownMethod) as excinfo:
        line_search(name, X0, -X0, quadratic_fun, quadratic_grad)
    assert excinfo.value.name == name
    with pytest.raises(UnknownMethod):
        default_options(name)


def test_unknown_option():
    with pytest.raises(UnknownOption) as excinfo:
        line_search("armijo", X0, -X0, quadratic_fun, quadratic_grad, {"sigma": 0.5})
    assert excinfo.value.method == "armijo"
    assert excinfo.value.key == "sigma"


def test_invalid_override_value():
    with pytest.raises(ValueError):
        line_search("goldstein", X0, -X0, quadratic_fun, quadratic_grad, {"gamma": 0.5})


@pytest.mark.parametrize(
    "module, names",
    [
        ("backtracking", ["armijo"]),
        ("bracketing", ["wolfe", "strong_wolfe"]),
        ("bisection", ["goldstein"]),
        ("baselines", ["binary", "fixed_line_search"]),
    ],
)
def test_method_modules_import_by_path(module, names):
    mod = importlib.import_module(f"lnsearch.line_search.{module}")
    for name in names:
        assert getattr(mod, name) is getattr(line_search_pkg, name)


def test_import_as_binds_the_module():
    import lnsearch.line_search.bracketing as bracketing

    assert bracketing.strong_wolfe is line_search_pkg.strong_wolfe
    assert line_search_pkg.wolfe is not bracketing
