import pytest

from lnsearch.errors import (
    DimensionMismatch,
    ErrorKind,
    InvalidDimension,
    LnsearchError,
    UnknownFunction,
    UnknownMethod,
    UnknownOption,
)


@pytest.mark.parametrize(
    "error, kind",
    [
        (InvalidDimension("extended_psc1", "even and positive", 3), ErrorKind.INVALID_DIMENSION),
        (UnknownMethod("newton", ("armijo",)), ErrorKind.UNKNOWN_METHOD),
        (UnknownFunction("rosenbrock", ("pp_quad",)), ErrorKind.UNKNOWN_FUNCTION),
        (DimensionMismatch((3,), (2,)), ErrorKind.DIMENSION_MISMATCH),
        (UnknownOption("wolfe", "c2", ("sigma",)), ErrorKind.UNKNOWN_OPTION),
    ],
)
def test_errors_carry_kind(error, kind):
    assert error.kind is kind
    assert isinstance(error, LnsearchError)
    assert isinstance(error, ValueError)


def test_invalid_dimension_context():
    err = InvalidDimension("extended_psc1", "even and positive", 3)
    assert err.name == "extended_psc1"
    assert err.expected == "even and positive"
    assert err.actual == 3
    assert "n=3" in str(err)


def test_unknown_method_lists_alternatives():
    err = UnknownMethod("newton", ("armijo", "wolfe"))
    assert err.name == "newton"
    assert err.available == ("armijo", "wolfe")
    assert "armijo, wolfe" in str(err)


def test_dimension_mismatch_shapes():
    err = DimensionMismatch((3,), (2,))
    assert err.expected == (3,)
    assert err.actual == (2,)
