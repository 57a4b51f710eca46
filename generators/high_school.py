"""
high_school.py

Problem generators for the three high-school grades. Calculus items lean on
SymPy for the symbolic step so the stated answer and the explanation come
from the same computation.
"""

from __future__ import annotations

import random

from sympy import Symbol, diff, integrate

from formatting.text_cleaner import format_linear
from generators.base import Difficulty, ProblemDraft, monomial, power, register

X = Symbol("x")

POWERS_OF_I = ["1", "i", "-1", "-i"]

SPECIAL_ANGLES = {
    ("sin", 30): "1/2",
    ("sin", 45): r"\sqrt{2}/2",
    ("sin", 60): r"\sqrt{3}/2",
    ("cos", 30): r"\sqrt{3}/2",
    ("cos", 45): r"\sqrt{2}/2",
    ("cos", 60): "1/2",
}
TRIG_VALUES = ["1/2", r"\sqrt{2}/2", r"\sqrt{3}/2", "1"]


# ------------------------------------------------------------------ #
# High 1
# ------------------------------------------------------------------ #


@register("h1_polynomial")
def h1_polynomial(rng: random.Random) -> ProblemDraft:
    a = rng.randint(1, 5)
    b = rng.randint(1, 5)
    remainder = 1 + a + b
    return ProblemDraft(
        question=f"What is the remainder when P(x) = x^3 + {a}x + {b} is divided by x - 1?",
        answer=remainder,
        candidates=[remainder + 1, remainder - 1, remainder + 2],
        explanation=f"By the remainder theorem the remainder is P(1) = 1 + {a} + {b} = {remainder}.",
    )


@register("h1_polynomial_adv", Difficulty.ADVANCED)
def h1_polynomial_adv(rng: random.Random) -> ProblemDraft:
    r1 = rng.randint(1, 9)
    r2 = rng.choice([r for r in range(1, 10) if r != r1])
    # remainder ax + b with a + b = r1 and 2a + b = r2
    a = r2 - r1
    b = r1 - a
    answer = format_linear(a, b)
    return ProblemDraft(
        question=(
            f"P(x) leaves remainder {r1} when divided by x - 1 and remainder {r2} when "
            f"divided by x - 2. What is the remainder when P(x) is divided by (x - 1)(x - 2)?"
        ),
        answer=answer,
        candidates=[format_linear(b, a), format_linear(a, -b), format_linear(-a, b)],
        spares=[format_linear(a + 1, b - 1), format_linear(r1, r2), format_linear(r2, r1)],
        explanation=(
            f"Write the remainder as ax + b. Then a + b = {r1} and 2a + b = {r2}, "
            f"so a = {a} and b = {b}."
        ),
    )


@register("h1_complex")
def h1_complex(rng: random.Random) -> ProblemDraft:
    n = rng.randint(10, 100)
    remainder = n % 4
    answer = POWERS_OF_I[remainder]
    return ProblemDraft(
        question=rf"What is the value of i^{n}? (i = \sqrt{{-1}})",
        answer=answer,
        candidates=[],
        fixed_order=["1", "-1", "i", "-i"],
        explanation=(
            f"Powers of i cycle through i, -1, -i, 1. Since {n} = 4k + {remainder}, "
            f"i^{n} = {answer}."
        ),
    )


@register("h1_inequality")
def h1_inequality(rng: random.Random) -> ProblemDraft:
    a = rng.randint(2, 9)
    answer = f"-{a} < x < {a}"
    return ProblemDraft(
        question=f"Solve the inequality |x| < {a}.",
        answer=answer,
        candidates=[f"x < -{a} or x > {a}", f"x < {a}", f"x > -{a}"],
        explanation=f"|x| < {a} means x lies within {a} of zero: {answer}.",
    )


# ------------------------------------------------------------------ #
# High 2
# ------------------------------------------------------------------ #


@register("h2_exponent")
def h2_exponent(rng: random.Random) -> ProblemDraft:
    exponent = rng.randint(2, 5)
    value = 2 ** exponent
    return ProblemDraft(
        question=f"What is the value of log_2 {value}?",
        answer=exponent,
        candidates=[exponent + 1, exponent - 1, exponent * 2],
        explanation=f"2^{exponent} = {value}, so log_2 {value} = {exponent}.",
    )


@register("h2_trigonometry")
def h2_trigonometry(rng: random.Random) -> ProblemDraft:
    angle = rng.choice([30, 45, 60])
    func = rng.choice(["sin", "cos"])
    answer = SPECIAL_ANGLES[(func, angle)]
    return ProblemDraft(
        question=f"What is the value of {func}({angle}°)?",
        answer=answer,
        candidates=[value for value in TRIG_VALUES if value != answer],
        explanation=f"{func}({angle}°) = {answer} is one of the special-angle values.",
    )


@register("h2_sequence")
def h2_sequence(rng: random.Random) -> ProblemDraft:
    a = rng.randint(1, 5)
    d = rng.randint(2, 5)
    n = rng.randint(5, 10)
    term = a + (n - 1) * d
    return ProblemDraft(
        question=(
            f"An arithmetic sequence has first term {a} and common difference {d}. "
            f"What is term {n}?"
        ),
        answer=term,
        candidates=[term + d, term - d, term + 1],
        explanation=f"a_{{{n}}} = {a} + ({n} - 1) × {d} = {term}",
    )


@register("h2_sequence_adv", Difficulty.ADVANCED)
def h2_sequence_adv(rng: random.Random) -> ProblemDraft:
    first = rng.randint(1, 5)
    d = rng.randint(1, 4)
    count = 10
    last = first + (count - 1) * d
    total = count * (first + last) // 2
    return ProblemDraft(
        question=(
            f"An arithmetic sequence has first term {first} and term {count} equal to {last}. "
            f"What is the sum of the first {count} terms?"
        ),
        answer=total,
        candidates=[total - 10, total + 10, count * (first + last)],
        explanation=f"S_{{{count}}} = {count}({first} + {last}) / 2 = {total}",
    )


# ------------------------------------------------------------------ #
# High 3
# ------------------------------------------------------------------ #


@register("h3_limit")
def h3_limit(rng: random.Random) -> ProblemDraft:
    a = rng.randint(2, 5)
    b = rng.randint(1, 5)
    c = rng.randint(1, 5)
    return ProblemDraft(
        question=rf"What is lim(n \to \infty) ({a}n + {b}) / (n + {c})?",
        answer=a,
        candidates=[a + 1, 0, 1],
        explanation=f"Divide through by n: the limit is the ratio of leading coefficients, {a}/1 = {a}.",
    )


@register("h3_differentiation")
def h3_differentiation(rng: random.Random) -> ProblemDraft:
    n = rng.randint(2, 5)
    derivative = diff(X ** n, X)
    coefficient = int(derivative.coeff(X, n - 1))
    answer = monomial(coefficient, "x", n - 1)
    return ProblemDraft(
        question=f"If f(x) = x^{n}, what is f'(x)?",
        answer=answer,
        candidates=[power("x", n - 1), monomial(n, "x", n), monomial(n - 1, "x", n)],
        spares=[monomial(n + 1, "x", n - 1), monomial(coefficient, "x", n + 1)],
        explanation=f"By the power rule (x^n)' = nx^{{n-1}}, so f'(x) = {answer}.",
    )


@register("h3_differentiation_adv", Difficulty.ADVANCED)
def h3_differentiation_adv(rng: random.Random) -> ProblemDraft:
    p = rng.randint(1, 5)
    k = rng.randint(1, 3)
    curve = X ** 2 + p * X
    y_value = int(curve.subs(X, k))
    slope = int(diff(curve, X).subs(X, k))
    return ProblemDraft(
        question=(
            f"What is the slope of the tangent line to y = x^2 + {p}x at the point ({k}, {y_value})?"
        ),
        answer=slope,
        candidates=[y_value, 2 * k, p],
        explanation=f"y' = 2x + {p}, so at x = {k} the slope is 2({k}) + {p} = {slope}.",
    )


@register("h3_integration")
def h3_integration(rng: random.Random) -> ProblemDraft:
    n = rng.randint(1, 4)
    antiderivative = integrate(X ** n, X)
    coefficient = antiderivative.coeff(X, n + 1)
    raised = power("x", n + 1)
    answer = f"({coefficient}){raised} + C"
    return ProblemDraft(
        question=rf"\int {power('x', n)} dx = ? (C is the constant of integration)",
        answer=answer,
        candidates=[
            f"{raised} + C",
            f"{monomial(n, 'x', n - 1)} + C",
            f"(1/{n}){raised} + C" if n > 1 else f"2{raised} + C",
        ],
        spares=[f"({coefficient}){power('x', n)} + C", f"{n + 1}{raised} + C"],
        explanation=rf"\int x^n dx = (1/(n + 1))x^{{n+1}} + C, so the answer is {answer}.",
    )
