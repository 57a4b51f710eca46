"""Tests for math text formatting helpers."""

import pytest

from formatting.text_cleaner import clean_math_text, format_duration, format_linear, signed


@pytest.mark.parametrize(
    "raw, cleaned",
    [
        ("x^2 + y^2", "x² + y²"),
        ("x^{10}", "x¹⁰"),
        ("i^47", "i⁴⁷"),
        (r"\sqrt{17}", "√17"),
        (r"\sqrt{25 - 8}", "√(25 - 8)"),
        (r"(5 \pm \sqrt{17}) / 4", "(5 ± √17) / 4"),
        ("log_2 8", "log₂ 8"),
        ("a_{12}", "a₁₂"),
        (r"lim(n \to \infty)", "lim(n → ∞)"),
        (r"\int x^3 dx", "∫ x³ dx"),
        (r"3 \times 4", "3 × 4"),
        (r"\frac{3}{4}", "3/4"),
        ("nx^{n-1}", "nxⁿ⁻¹"),
        ("plain   text ", "plain text"),
        ("", ""),
    ],
)
def test_clean_math_text(raw, cleaned):
    assert clean_math_text(raw) == cleaned


@pytest.mark.parametrize(
    "coefficient, constant, expected",
    [
        (2, 1, "2x + 1"),
        (1, -3, "x - 3"),
        (-1, 0, "-x"),
        (0, 5, "5"),
        (-2, 4, "-2x + 4"),
    ],
)
def test_format_linear(coefficient, constant, expected):
    assert format_linear(coefficient, constant) == expected


def test_signed():
    assert signed(3) == "+ 3"
    assert signed(0) == "+ 0"
    assert signed(-7) == "- 7"


def test_format_duration():
    assert format_duration(125) == "2m 5s"
    assert format_duration(0) == "0m 0s"
    assert format_duration(-4) == "0m 0s"
