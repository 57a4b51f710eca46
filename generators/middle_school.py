"""
middle_school.py

Problem generators for the three middle-school grades. Every function samples
its own parameters from the shared random source and returns a
``ProblemDraft``; distinctness and shuffling of the options happen in
``ProblemDraft.finalize``.
"""

from __future__ import annotations

import random
from math import gcd

from sympy import factorint

from formatting.text_cleaner import format_linear, signed
from generators.base import Difficulty, ProblemDraft, register

QUADRANTS = ["Quadrant I", "Quadrant II", "Quadrant III", "Quadrant IV"]

TERMINATING_DENOMINATORS = [2, 4, 5, 8, 10, 16, 20, 25, 40, 50]
REPEATING_DENOMINATORS = [3, 6, 7, 9, 11, 12, 13, 14, 15, 18]


def _nonzero(rng: random.Random, low: int, high: int) -> int:
    return rng.choice([n for n in range(low, high + 1) if n != 0])


def _reduced_fraction(rng: random.Random, denominator: int) -> str:
    numerator = rng.choice([n for n in range(1, denominator) if gcd(n, denominator) == 1])
    return f"{numerator}/{denominator}"


def _factor_text(n: int) -> str:
    return r" \times ".join(
        str(prime) if exp == 1 else f"{prime}^{exp}" for prime, exp in sorted(factorint(n).items())
    )


# ------------------------------------------------------------------ #
# Middle 1
# ------------------------------------------------------------------ #


@register("m1_integer")
def m1_integer(rng: random.Random) -> ProblemDraft:
    a = rng.randint(-10, 10)
    b = rng.randint(-10, 10)
    op = rng.choice(["+", "-"])
    answer = a + b if op == "+" else a - b
    return ProblemDraft(
        question=f"Calculate: {a} {op} ({b})",
        answer=answer,
        candidates=[answer + 1, answer - 1, answer + 2],
        explanation=f"{a} {op} ({b}) = {answer}",
    )


@register("m1_integer_adv", Difficulty.ADVANCED)
def m1_integer_adv(rng: random.Random) -> ProblemDraft:
    a, b, c, d = (rng.randint(2, 5) for _ in range(4))
    # -a^2 is -(a^2), not (-a)^2
    square = -(a * a)
    product = -b * c
    answer = square + product + d
    return ProblemDraft(
        question=rf"Calculate: -{a}^2 + (-{b}) \times {c} - (-{d})",
        answer=answer,
        # sign slip on the square, then magnitude slips
        candidates=[answer + 2 * a * a, answer + 10, answer - 10, -answer],
        explanation=(
            rf"-{a}^2 = {square}, (-{b}) \times {c} = {product}, -(-{d}) = +{d}, "
            f"so {square} + ({product}) + {d} = {answer}"
        ),
    )


@register("m1_equation")
def m1_equation(rng: random.Random) -> ProblemDraft:
    x = rng.randint(-5, 5)
    a = rng.randint(2, 5) * rng.choice([1, -1])
    b = rng.randint(-10, 10)
    c = a * x + b
    lhs = format_linear(a, b)
    return ProblemDraft(
        question=f"Solve the linear equation: {lhs} = {c}",
        answer=x,
        candidates=[x + 1, x - 1, -x],
        explanation=f"{a}x = {c - b}, so x = {x}",
    )


@register("m1_equation_adv", Difficulty.ADVANCED)
def m1_equation_adv(rng: random.Random) -> ProblemDraft:
    walk_speed = rng.randint(3, 5)
    walk_hours = rng.choice([2, 3])
    total = walk_speed * walk_hours + (walk_speed + 2)
    answer = f"{walk_hours}x + (x + 2) = {total}"
    return ProblemDraft(
        question=(
            f"A student walked at x km/h for {walk_hours} hours, then ran at (x + 2) km/h "
            f"for 1 hour, covering {total} km in total. Which equation finds the walking "
            f"speed x? (Here x = {walk_speed}.)"
        ),
        answer=answer,
        candidates=[
            f"{walk_hours}(x + 2) + x = {total}",
            f"x/{walk_hours} + (x + 2) = {total}",
            f"{walk_hours}x - (x + 2) = {total}",
        ],
        explanation=(
            f"Distance = speed × time, so walking distance {walk_hours}x plus running "
            f"distance 1(x + 2) equals {total}."
        ),
    )


@register("m1_function")
def m1_function(rng: random.Random) -> ProblemDraft:
    x = _nonzero(rng, -10, 10)
    y = _nonzero(rng, -10, 10)
    if x > 0 and y > 0:
        quadrant = QUADRANTS[0]
    elif x < 0 and y > 0:
        quadrant = QUADRANTS[1]
    elif x < 0 and y < 0:
        quadrant = QUADRANTS[2]
    else:
        quadrant = QUADRANTS[3]
    return ProblemDraft(
        question=f"In which quadrant does the point ({x}, {y}) lie?",
        answer=quadrant,
        candidates=[],
        fixed_order=QUADRANTS,
        explanation=(
            f"The x-coordinate is {'positive' if x > 0 else 'negative'} and the "
            f"y-coordinate is {'positive' if y > 0 else 'negative'}, so the point is in {quadrant}."
        ),
    )


# ------------------------------------------------------------------ #
# Middle 2
# ------------------------------------------------------------------ #


@register("m2_rational")
def m2_rational(rng: random.Random) -> ProblemDraft:
    denominator = rng.choice(TERMINATING_DENOMINATORS)
    answer = _reduced_fraction(rng, denominator)
    others = rng.sample(REPEATING_DENOMINATORS, 5)
    return ProblemDraft(
        question="Which of the following fractions can be written as a terminating decimal?",
        answer=answer,
        candidates=[_reduced_fraction(rng, d) for d in others[:3]],
        spares=[_reduced_fraction(rng, d) for d in others[3:]],
        explanation=(
            f"In lowest terms the denominator is {denominator} = {_factor_text(denominator)}, "
            f"which has no prime factors other than 2 and 5, so {answer} is a terminating decimal."
        ),
    )


@register("m2_inequality")
def m2_inequality(rng: random.Random) -> ProblemDraft:
    target = rng.randint(-5, 5)
    coeff = -2
    rhs = coeff * target
    answer = f"x > {target}"
    return ProblemDraft(
        question=f"Solve the inequality {coeff}x < {rhs}.",
        answer=answer,
        candidates=[f"x < {target}", f"x > {-target}", f"x < {-target}"],
        spares=[f"x > {target + 1}", f"x < {target - 1}"],
        explanation=f"Dividing both sides by {coeff} reverses the inequality, giving {answer}.",
    )


@register("m2_inequality_adv", Difficulty.ADVANCED)
def m2_inequality_adv(rng: random.Random) -> ProblemDraft:
    c = rng.randint(1, 4)
    bound = 3 * c + 1
    answer = f"x > {bound}"
    return ProblemDraft(
        question=f"Solve the linear inequality 0.5x - 1/3 > (1/6)x + {c}.",
        answer=answer,
        candidates=[f"x < {bound}", f"x > {-bound}", f"x < {-bound}"],
        explanation=(
            f"Multiplying both sides by 6 gives 3x - 2 > x + {6 * c}, so 2x > {6 * c + 2} "
            f"and {answer}."
        ),
    )


@register("m2_linear_function")
def m2_linear_function(rng: random.Random) -> ProblemDraft:
    a = _nonzero(rng, -5, 5)
    b = rng.randint(-5, 5)
    answer = f"slope {a}, y-intercept {b}"
    return ProblemDraft(
        question=f"What are the slope and y-intercept of y = {format_linear(a, b)}?",
        answer=answer,
        candidates=[
            f"slope {b}, y-intercept {a}",
            f"slope {-a}, y-intercept {b}",
            f"slope {a}, y-intercept {-b}",
        ],
        spares=[
            f"slope {-a}, y-intercept {-b}",
            f"slope {a + 1}, y-intercept {b}",
            f"slope {a}, y-intercept {b + 1}",
        ],
        explanation="For y = ax + b the slope is a and the y-intercept is b.",
    )


@register("m2_linear_function_adv", Difficulty.ADVANCED)
def m2_linear_function_adv(rng: random.Random) -> ProblemDraft:
    a = rng.randint(1, 3)
    x_intercept = rng.randint(1, 4)
    b = a * x_intercept
    doubled = x_intercept * b
    # keep the area an integer
    if doubled % 2:
        x_intercept += 1
        b = a * x_intercept
        doubled = x_intercept * b
    area = doubled // 2
    return ProblemDraft(
        question=(
            f"What is the area of the triangle enclosed by the graph of "
            f"y = {format_linear(-a, b)} and the x- and y-axes?"
        ),
        answer=area,
        candidates=[doubled, x_intercept + b, b],
        explanation=(
            f"The x-intercept is {x_intercept} and the y-intercept is {b}, so the area is "
            rf"1/2 \times {x_intercept} \times {b} = {area}."
        ),
    )


# ------------------------------------------------------------------ #
# Middle 3
# ------------------------------------------------------------------ #


@register("m3_root")
def m3_root(rng: random.Random) -> ProblemDraft:
    base = rng.randint(2, 9)
    square = base * base
    return ProblemDraft(
        question=rf"What is the value of \sqrt{{{square}}}?",
        answer=base,
        candidates=[-base, square, base * 2],
        explanation=rf"{base}^2 = {square}, so \sqrt{{{square}}} = {base}.",
    )


@register("m3_factorization")
def m3_factorization(rng: random.Random) -> ProblemDraft:
    a = rng.randint(1, 5)
    b = rng.randint(1, 5)
    total = a + b
    product = a * b
    answer = f"(x + {a})(x + {b})"
    return ProblemDraft(
        question=f"Factor x^2 + {total}x + {product}.",
        answer=answer,
        candidates=[f"(x - {a})(x - {b})", f"(x + {a})(x - {b})", f"(x - {a})(x + {b})"],
        spares=[f"(x + {product})(x + 1)", f"(x + {total})(x + 1)", f"(x - {product})(x - 1)"],
        explanation=f"The two numbers with sum {total} and product {product} are {a} and {b}.",
    )


@register("m3_quadratic")
def m3_quadratic(rng: random.Random) -> ProblemDraft:
    a = rng.randint(2, 9)
    square = a * a
    answer = rf"x = \pm{a}"
    return ProblemDraft(
        question=f"Solve the quadratic equation x^2 - {square} = 0.",
        answer=answer,
        candidates=[f"x = {a}", f"x = -{a}", rf"x = \pm{square}"],
        explanation=rf"x^2 = {square}, so x = \pm{a}.",
    )


@register("m3_quadratic_adv", Difficulty.ADVANCED)
def m3_quadratic_adv(rng: random.Random) -> ProblemDraft:
    while True:
        a = rng.randint(1, 3)
        b = -rng.choice([3, 5, 7])
        c = rng.randint(1, 3)
        discriminant = b * b - 4 * a * c
        if discriminant > 0 and int(discriminant ** 0.5) ** 2 != discriminant:
            break
    denominator = 2 * a
    leading = "x^2" if a == 1 else f"{a}x^2"
    answer = rf"({-b} \pm \sqrt{{{discriminant}}}) / {denominator}"
    return ProblemDraft(
        question=f"Solve {leading} {signed(b)}x {signed(c)} = 0.",
        answer=answer,
        candidates=[
            rf"({-b} \pm \sqrt{{{b * b + 4 * a * c}}}) / {denominator}",
            rf"({b} \pm \sqrt{{{discriminant}}}) / {denominator}",
            rf"({-b} \pm \sqrt{{{discriminant}}}) / {a}",
        ],
        explanation=(
            rf"By the quadratic formula x = ({-b} \pm \sqrt{{{b * b} - {4 * a * c}}}) / {denominator} "
            rf"= ({-b} \pm \sqrt{{{discriminant}}}) / {denominator}."
        ),
    )
