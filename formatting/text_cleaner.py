"""
text_cleaner.py

Utilities for turning the compact notation the generators write (``x^3``,
``log_2``, ``\\sqrt{17}``, ``\\pm``) into readable plain text with Unicode
symbols, plus small helpers for signed terms and durations.
"""

import re

SUPERSCRIPT_MAP = {
    '0': '⁰', '1': '¹', '2': '²', '3': '³', '4': '⁴',
    '5': '⁵', '6': '⁶', '7': '⁷', '8': '⁸', '9': '⁹',
    '-': '⁻', '+': '⁺', '=': '⁼', '(': '⁽', ')': '⁾',
    'n': 'ⁿ',
}

SUBSCRIPT_MAP = {
    '0': '₀', '1': '₁', '2': '₂', '3': '₃', '4': '₄',
    '5': '₅', '6': '₆', '7': '₇', '8': '₈', '9': '₉',
    '-': '₋', '+': '₊', '=': '₌', '(': '₍', ')': '₎',
}

LATEX_TO_UNICODE = {
    r'\\pi': 'π',
    r'\\approx': '≈',
    r'\\times': '×',
    r'\\div': '÷',
    r'\\leq': '≤',
    r'\\geq': '≥',
    r'\\neq': '≠',
    r'\\pm': '±',
    r'\\infty': '∞',
    r'\\to': '→',
    r'\\degree': '°',
    r'\\cdot': '·',
    r'\\int': '∫',
    r'\\sqrt': '√',
}


def clean_math_text(text: str) -> str:
    """
    Converts the generators' LaTeX-flavoured notation to readable plain text.

    Examples:
        "x^2 + y^2" -> "x² + y²"
        "\\sqrt{17}" -> "√17"
        "log_2 8" -> "log₂ 8"
        "x^{10}" -> "x¹⁰"
    """
    if not text:
        return text

    # \sqrt{17} -> √17 (braces kept only when the radicand is compound)
    def replace_sqrt(match):
        radicand = match.group(1)
        if re.fullmatch(r'\w+', radicand):
            return f"√{radicand}"
        return f"√({radicand})"

    text = re.sub(r'\\sqrt\{([^}]+)\}', replace_sqrt, text)

    for latex, unicode_char in LATEX_TO_UNICODE.items():
        text = re.sub(latex + r'(?![A-Za-z])', unicode_char, text)

    def replace_frac(match):
        return f"{match.group(1)}/{match.group(2)}"

    text = re.sub(r'\\frac\{([^}]+)\}\{([^}]+)\}', replace_frac, text)

    def replace_superscript(match):
        base = match.group(1) or ''
        exp = match.group(2)
        if all(c in SUPERSCRIPT_MAP for c in exp):
            return base + ''.join(SUPERSCRIPT_MAP[c] for c in exp)
        # Fall back to caret notation for complex exponents
        return f"{base}^({exp})"

    text = re.sub(r'(\w?)\^\{([^}]+)\}', replace_superscript, text)
    text = re.sub(r'(\w?)\^(-?\d+|n)', replace_superscript, text)

    def replace_subscript(match):
        base = match.group(1) or ''
        sub = match.group(2)
        if all(c in SUBSCRIPT_MAP for c in sub):
            return base + ''.join(SUBSCRIPT_MAP[c] for c in sub)
        return f"{base}_({sub})"

    text = re.sub(r'(\w?)_\{([^}]+)\}', replace_subscript, text)
    text = re.sub(r'([A-Za-z])_(\d+)', replace_subscript, text)

    # Clean up any remaining backslashes from LaTeX commands
    text = re.sub(r'\\([a-zA-Z]+)', r'\1', text)

    text = re.sub(r'\s+', ' ', text)
    return text.strip()


def signed(value: int) -> str:
    """Formats a trailing term: 3 -> '+ 3', -3 -> '- 3'."""
    return f"+ {value}" if value >= 0 else f"- {abs(value)}"


def format_linear(coefficient: int, constant: int, variable: str = "x") -> str:
    """
    Renders ``coefficient*x + constant`` the way a textbook would.

    Examples:
        (2, 1) -> "2x + 1"
        (1, -3) -> "x - 3"
        (-1, 0) -> "-x"
        (0, 5) -> "5"
    """
    if coefficient == 0:
        return str(constant)
    if coefficient == 1:
        head = variable
    elif coefficient == -1:
        head = f"-{variable}"
    else:
        head = f"{coefficient}{variable}"
    if constant == 0:
        return head
    return f"{head} {signed(constant)}"


def format_duration(seconds: int) -> str:
    """125 -> '2m 5s'."""
    minutes, remainder = divmod(max(int(seconds), 0), 60)
    return f"{minutes}m {remainder}s"


if __name__ == "__main__":
    test_cases = [
        "f(x) = x^3 + 2x",
        "(5 \\pm \\sqrt{17}) / 4",
        "log_2 32",
        "\\int x^{4} dx",
        "lim(n \\to \\infty)",
    ]

    print("Math Text Cleaner Test Cases:")
    print("=" * 60)
    for test in test_cases:
        print(f"Input:  {test}")
        print(f"Output: {clean_math_text(test)}")
        print("-" * 60)
