import math

import pytest

from sinusplot.expression import ExpressionError, evaluate, is_well_formed, normalize


@pytest.mark.parametrize(
    "source, folded",
    [
        ("sin(2)", "s(2)"),
        ("cos(2)", "c(2)"),
        ("tg(2)", "t(2)"),
        ("sqrt(2)", "q(2)"),
        ("ln(2)", "l(2)"),
    ],
)
def test_normalize_folds_function_names(source, folded):
    assert normalize(source) == folded


def test_normalize_rewrites_unary_minus():
    assert normalize("-1") == "0-1"
    assert normalize("2*(-3)") == "2*(0-3)"


def test_normalize_keeps_plain_arithmetic():
    text = "1+2*3"
    assert normalize(text) == text


@pytest.mark.parametrize("text", ["1+2", "s(1)", "(1+2)*3", "1+.", "0-5"])
def test_well_formed_accepts(text):
    assert is_well_formed(text) is True


@pytest.mark.parametrize(
    "text",
    ["", "*1", "1+", "s1", "2^-1", "()", "1)", "x", "(+1)", "1 + 2", ".5", "(*2)"],
)
def test_well_formed_rejects(text):
    assert is_well_formed(text) is False


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1+2*3", 1 + 2 * 3),
        ("(1+2)*3", (1 + 2) * 3),
        ("10-4-3", 10 - 4 - 3),
        ("8/4/2", 8 / 4 / 2),
        ("2^3", 2**3),
        ("2^3^2", (2**3) ** 2),
        ("-5+2", -5 + 2),
        ("2*(-3)", 2 * (-3)),
        ("1.5+2.25", 1.5 + 2.25),
    ],
)
def test_evaluate_arithmetic(text, expected):
    assert evaluate(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["42", "3.75", "0.5", "1000"])
def test_evaluate_number_round_trip(text):
    assert evaluate(text) == float(text)


def test_trailing_decimal_point_is_ignored():
    assert evaluate("1.") == evaluate("1")
    assert evaluate("1+.") == evaluate("1")


@pytest.mark.parametrize(
    "text, function, argument",
    [
        ("sin(1)", math.sin, 1),
        ("cos(1)", math.cos, 1),
        ("tg(1)", math.tan, 1),
        ("sqrt(16)", math.sqrt, 16),
        ("ln(2)", math.log, 2),
    ],
)
def test_evaluate_functions(text, function, argument):
    assert evaluate(text) == pytest.approx(function(argument))


def test_pythagorean_identity():
    assert evaluate("sin(1)^2+cos(1)^2") == pytest.approx(1.0)


def test_function_binds_tighter_than_addition():
    assert evaluate("sqrt(4)+1") == pytest.approx(math.sqrt(4) + 1)


def test_log_of_zero_is_negative_infinity():
    assert evaluate("ln(0)") == -math.inf


def test_fractional_power_of_negative_is_nan():
    result = evaluate("(-8)^0.5")
    assert str(result) == "nan"


@pytest.mark.parametrize(
    "text",
    [
        "1/0",
        "1/(2-2)",
        "ln(-1)",
        "sqrt(-4)",
        "1.2.3",
        "",
        "abc",
        "2^-1",
        "1*-2",
        "(1+2",
    ],
)
def test_evaluate_errors(text):
    with pytest.raises(ExpressionError):
        evaluate(text)


def test_expression_error_is_value_error():
    with pytest.raises(ValueError):
        evaluate("1/0")