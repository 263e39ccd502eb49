"""
Function wrappers applied to column or value expressions.

A common use case is lower(...) on both sides of a comparison to get
case insensitive text matching:

    query.equals("email", email, column_functions=[LOWER], value_functions=[LOWER])
    # lower(email) = lower({email})
"""

from dataclasses import dataclass
from typing import Iterable, Union


@dataclass(frozen=True)
class Lower:
    """SQL lower()."""

    def __str__(self) -> str:
        return "lower"


@dataclass(frozen=True)
class Trim:
    """SQL trim()."""

    def __str__(self) -> str:
        return "trim"


@dataclass(frozen=True)
class Custom:
    """Any other single-argument SQL function, e.g. Custom("upper")."""

    name: str

    def __str__(self) -> str:
        return self.name


Function = Union[Lower, Trim, Custom]

LOWER = Lower()
TRIM = Trim()


def wrap(expression: str, functions: Iterable[Function] = ()) -> str:
    """
    Wrap an SQL expression in each function, in the order supplied.

    The first function is the innermost call:

        >>> wrap("name", [LOWER, TRIM])
        'trim(lower(name))'
    """
    for function in functions:
        expression = f"{function}({expression})"
    return expression
