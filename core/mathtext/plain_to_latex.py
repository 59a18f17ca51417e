r"""
Plain Math to LaTeX Converter

Converts plain text math notation (sqrt(x)/2 + beta^2) to LaTeX for the
math renderer and the math input field, and back again for editing.

The conversion is a pure string rewrite. It does not parse the expression,
so output for unusual input is best effort:

    >>> to_latex("alpha + beta")
    '\\alpha + \\beta'
    >>> to_latex("x^12")
    'x^{12}'
    >>> from_latex("\\frac{a}{b}")
    '(a)/(b)'
"""

import logging
from typing import Dict

import regex

logger = logging.getLogger(__name__)


GREEK_LETTERS: Dict[str, str] = {
    'alpha': r'\alpha',
    'beta': r'\beta',
    'gamma': r'\gamma',
    'delta': r'\delta',
    'epsilon': r'\epsilon',
    'zeta': r'\zeta',
    'eta': r'\eta',
    'theta': r'\theta',
    'iota': r'\iota',
    'kappa': r'\kappa',
    'lambda': r'\lambda',
    'mu': r'\mu',
    'nu': r'\nu',
    'xi': r'\xi',
    'pi': r'\pi',
    'rho': r'\rho',
    'sigma': r'\sigma',
    'tau': r'\tau',
    'upsilon': r'\upsilon',
    'phi': r'\phi',
    'chi': r'\chi',
    'psi': r'\psi',
    'omega': r'\omega',
    # Capitals
    'Gamma': r'\Gamma',
    'Delta': r'\Delta',
    'Theta': r'\Theta',
    'Lambda': r'\Lambda',
    'Xi': r'\Xi',
    'Pi': r'\Pi',
    'Sigma': r'\Sigma',
    'Phi': r'\Phi',
    'Psi': r'\Psi',
    'Omega': r'\Omega',
}

FUNCTIONS: Dict[str, str] = {
    'sqrt': r'\sqrt',
    'sin': r'\sin',
    'cos': r'\cos',
    'tan': r'\tan',
    'log': r'\log',
    'ln': r'\ln',
    'exp': r'\exp',
    'lim': r'\lim',
    'sum': r'\sum',
    'prod': r'\prod',
    'int': r'\int',
}

SYMBOLS: Dict[str, str] = {
    '>=': r'\geq',
    '<=': r'\leq',
    '!=': r'\neq',
    '+-': r'\pm',
    '-+': r'\mp',
    '...': r'\ldots',
    'inf': r'\infty',
    'infinity': r'\infty',
}

_REGEX_SPECIALS = regex.compile(r'[.*+?^${}()|\[\]\\]')

# Single-level paren group, digit run or letter. A letter that ends a
# command such as \pi is not a numerator. The web editor's converter has
# no such guard and turns pi/2 into \p\frac{i}{2}; keep the lookbehind.
_FRACTION = regex.compile(
    r'(?<!\\[A-Za-z]*)(\d+|\([^)]+\)|[a-zA-Z])\s*/\s*(\d+|\([^)]+\)|[a-zA-Z])',
    regex.ASCII
)
_WRAPPED = regex.compile(r'\((.+)\)')

_MULTI_DIGIT_EXPONENT = regex.compile(r'\^(\d{2,})', regex.ASCII)
_NEGATIVE_EXPONENT = regex.compile(r'\^(-\d+)', regex.ASCII)
_PAREN_EXPONENT = regex.compile(r'\^\(([^)]+)\)')
_MULTI_DIGIT_SUBSCRIPT = regex.compile(r'_(\d{2,})', regex.ASCII)
_PAREN_SUBSCRIPT = regex.compile(r'_\(([^)]+)\)')

_EQUALS = regex.compile(r'\s*=\s*')
_PLUS = regex.compile(r'([^{^_])\s*\+\s*([^}])')
_MINUS = regex.compile(r'([^{^_])\s*-\s*([^}])')

_LATEX_FRACTION = regex.compile(r'\\frac\{([^}]+)\}\{([^}]+)\}')
_SINGLE_BRACES = regex.compile(r'\{([^{}]+)\}')


def escape_regex(text: str) -> str:
    """Escape special regex characters"""
    return _REGEX_SPECIALS.sub(lambda m: '\\' + m.group(0), text)


def _symbol_pattern(plain: str):
    # Word tokens (inf) must not match inside longer words or commands
    if plain.isalpha():
        return regex.compile(r'\b' + escape_regex(plain) + r'\b', regex.ASCII)
    return regex.compile(escape_regex(plain))


# Longest first so "infinity" is not read as "inf" + "inity"
_SYMBOL_RULES = [
    (_symbol_pattern(plain), tex)
    for plain, tex in sorted(SYMBOLS.items(), key=lambda item: -len(item[0]))
]
_GREEK_RULES = [
    (regex.compile(r'\b' + name + r'\b', regex.ASCII), tex)
    for name, tex in GREEK_LETTERS.items()
]
_FUNCTION_RULES = [
    (regex.compile(escape_regex(name) + r'\s*\(([^)]+)\)', regex.IGNORECASE), tex)
    for name, tex in FUNCTIONS.items()
]


def _fraction(match) -> str:
    numerator, denominator = match.group(1), match.group(2)
    # Remove parentheses if they wrap the whole operand
    wrapped = _WRAPPED.fullmatch(numerator)
    if wrapped:
        numerator = wrapped.group(1)
    wrapped = _WRAPPED.fullmatch(denominator)
    if wrapped:
        denominator = wrapped.group(1)
    return '\\frac{' + numerator + '}{' + denominator + '}'


def to_latex(plain_math: str) -> str:
    """
    Convert plain text math to LaTeX

    Input that already contains a backslash is treated as LaTeX and only
    has its surrounding $ delimiters removed.

    Args:
        plain_math: Plain notation such as "sqrt(x) + x^12"

    Returns:
        LaTeX string such as "\\sqrt{x} + x^{12}"
    """
    latex = plain_math.strip()

    if latex.startswith('$') and latex.endswith('$'):
        latex = latex[1:-1]

    if '\\' in latex:
        return latex

    for pattern, tex in _SYMBOL_RULES:
        latex = pattern.sub(lambda m, tex=tex: tex, latex)

    for pattern, tex in _GREEK_RULES:
        latex = pattern.sub(lambda m, tex=tex: tex, latex)

    # sqrt(x) -> \sqrt{x}; nested parentheses are not supported
    for pattern, tex in _FUNCTION_RULES:
        latex = pattern.sub(lambda m, tex=tex: tex + '{' + m.group(1) + '}', latex)

    latex = _FRACTION.sub(_fraction, latex)

    # x^2 stays as is, x^12 -> x^{12}, x^-2 -> x^{-2}, x^(n+1) -> x^{n+1}
    latex = _MULTI_DIGIT_EXPONENT.sub(r'^{\1}', latex)
    latex = _NEGATIVE_EXPONENT.sub(r'^{\1}', latex)
    latex = _PAREN_EXPONENT.sub(r'^{\1}', latex)

    latex = _MULTI_DIGIT_SUBSCRIPT.sub(r'_{\1}', latex)
    latex = _PAREN_SUBSCRIPT.sub(r'_{\1}', latex)

    latex = _EQUALS.sub(' = ', latex)
    latex = _PLUS.sub(r'\1 + \2', latex)
    latex = _MINUS.sub(r'\1 - \2', latex)

    return latex.strip()


def from_latex(latex: str) -> str:
    """
    Convert LaTeX back to plain text for editing

    This is not an exact inverse of to_latex: fractions come back fully
    parenthesised and unknown commands lose their backslash.
    """
    plain = latex

    for name, tex in GREEK_LETTERS.items():
        plain = regex.sub(escape_regex(tex), lambda m, name=name: name, plain)

    plain = _LATEX_FRACTION.sub(r'(\1)/(\2)', plain)

    for name, tex in FUNCTIONS.items():
        plain = regex.sub(escape_regex(tex) + r'\{([^}]+)\}',
                          lambda m, name=name: name + '(' + m.group(1) + ')', plain)

    for plain_symbol, tex in SYMBOLS.items():
        plain = regex.sub(escape_regex(tex), lambda m, s=plain_symbol: s, plain)

    # Unrecognized commands
    plain = plain.replace('\\', '')

    plain = _SINGLE_BRACES.sub(r'\1', plain)

    return plain.strip()


def is_latex(text: str) -> bool:
    """Check if a string is already LaTeX"""
    return '\\' in text or '{' in text or '}' in text


def normalize_latex(latex: str) -> str:
    """Normalize LaTeX whitespace for consistent storage"""
    normalized = regex.sub(r'\s+', ' ', latex).strip()

    normalized = regex.sub(r'\s*([=+])\s*', r' \1 ', normalized)
    # A minus right before } or a digit belongs to a negative exponent or number
    normalized = regex.sub(r'\s*(-)\s*(?![}\d])', r' \1 ', normalized, flags=regex.ASCII)

    return normalized
