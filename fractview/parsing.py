"""Command-line value parsing and the usage text."""

from __future__ import annotations

__all__ = ["ArgumentError", "canonical_name", "parse_iterations", "parse_constant", "usage"]

MIN_ITERATIONS = 10
MAX_ITERATIONS = 30000

ITERATIONS_MESSAGE = "Allowed number of iterations: 10 to 30,000."
CONSTANT_MESSAGE = "Wrong constant number!"

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = "0123456789"

_USAGE = (
    "Usage: fractview [FRACTAL SET] [OPTIONS]\n\n"
    "  Options:\n  <cr> - Real value of constant (for Julia set).\n"
    "  <ci> - Imaginary value of constant (for Julia set).\n"
    "  <i>  - Number of iterations\n\n"
    "  Available Fractal Sets:\n\n"
    "   Mandelbrot Set\n"
    "\tSyntax: fractview mandelbrot <i>\n"
    "\tExample: fractview mandelbrot 1000\n"
    "   Julia Set\n"
    "\tSyntax: fractview julia <cr> <ci> <i>\n"
    "\tExample: fractview julia -0.8 0.156 500\n"
    "   Burning Ship Set\n"
    "\tSyntax: fractview burningship <i>\n"
    "\tExample: fractview burningship 200\n"
)


class ArgumentError(ValueError):
    """Raised when command-line arguments are missing or malformed."""


def canonical_name(name: str) -> str:
    """Lower-case ASCII letters, then capitalise the first one: "mANDELBROT" -> "Mandelbrot"."""
    lowered = "".join(chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in name)
    if lowered and "a" <= lowered[0] <= "z":
        lowered = chr(ord(lowered[0]) - 32) + lowered[1:]
    return lowered


def _skip_space(text: str) -> str:
    return text.lstrip(_WHITESPACE)


def _leading_digits(text: str) -> tuple[str, str]:
    end = 0
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    return text[:end], text[end:]


def parse_iterations(text: str) -> int:
    """Parse an iteration count; it must be an integer above 10 and at most 30000."""
    rest = _skip_space(text)
    if rest.startswith("+"):
        rest = rest[1:]
    if not rest:
        raise ArgumentError(ITERATIONS_MESSAGE)
    digits, rest = _leading_digits(rest)
    value = int(digits) if digits else 0
    if rest or value <= MIN_ITERATIONS or value > MAX_ITERATIONS:
        raise ArgumentError(ITERATIONS_MESSAGE)
    return value


def parse_constant(text: str) -> float:
    """Parse a plain decimal number such as "-0.8"; exponents are not accepted."""
    rest = _skip_space(text)
    sign = 1.0
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1.0
        rest = rest[1:]
    if not rest or rest.startswith("."):
        raise ArgumentError(CONSTANT_MESSAGE)
    result = 0.0
    digits, rest = _leading_digits(rest)
    for digit in digits:
        result = result * 10.0 + int(digit)
    if rest.startswith("."):
        fraction, rest = _leading_digits(rest[1:])
        scale = 1.0
        for digit in fraction:
            scale *= 0.1
            result += int(digit) * scale
    if rest:
        raise ArgumentError(CONSTANT_MESSAGE)
    return result * sign


def usage() -> str:
    """Return the usage text."""
    return _USAGE