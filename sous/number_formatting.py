"""
Formatting of (possibly scaled) ingredient amounts for display.

Amounts in recipe files are plain YAML numbers. When an integer amount is
rescaled the result is kept as an exact :py:class:`~fractions.Fraction` and
displayed as a fraction where one reads naturally (e.g. '1 1/2'). Floating
point amounts are displayed as short decimals.

.. autofunction:: format_number

.. autofunction:: format_decimal

.. autofunction:: format_fraction
"""

from typing import Callable, FrozenSet, Union

from fractions import Fraction


__all__ = [
    "Number",
    "format_decimal",
    "format_fraction",
    "format_number",
]


Number = Union[int, float, Fraction]

KITCHEN_DENOMINATORS: FrozenSet[int] = frozenset([2, 3, 4, 5, 6, 7, 8, 12, 16])
"""Denominators of fractions which are shown as fractions, not decimals."""


def format_decimal(number: float, significant_figures: int = 3) -> str:
    """
    Format a float concisely.

    Up to ``significant_figures`` digits are shown after the decimal point,
    one fewer for every digit in the integer part (digits before the decimal
    point are never dropped). Trailing zeros and a trailing decimal point are
    removed and scientific notation is never used, so ``1.0`` becomes ``'1'``
    and ``1.2345`` becomes ``'1.23'``.
    """
    whole_digits = len(str(abs(int(number)))) if int(number) else 0
    decimal_places = max(0, significant_figures - whole_digits)

    text = f"{number:.{decimal_places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")

    # Small negative values round to "-0"
    return "0" if text == "-0" else text


def format_fraction(
    number: Union[int, Fraction],
    allowed_denominators: FrozenSet[int] = KITCHEN_DENOMINATORS,
    format_decimal: Callable[[float], str] = format_decimal,
) -> str:
    """
    Format an integer or :py:class:`~fractions.Fraction` as '3', '3/4' or
    '1 3/4'. Fractions with unusual denominators (e.g. 1/20) are shown as
    decimals using ``format_decimal``.
    """
    number = Fraction(number)

    if number.denominator == 1:
        return str(number.numerator)
    if number.denominator not in allowed_denominators:
        return format_decimal(float(number))

    whole, remainder = divmod(abs(number.numerator), number.denominator)
    sign = "-" if number < 0 else ""
    if whole:
        return f"{sign}{whole} {remainder}/{number.denominator}"
    else:
        return f"{sign}{remainder}/{number.denominator}"


def format_number(number: Number) -> str:
    """
    Format an amount for display, dispatching to :py:func:`format_decimal`
    for floats and :py:func:`format_fraction` for integers and fractions.
    """
    if isinstance(number, float):
        return format_decimal(number)
    else:
        return format_fraction(number)
