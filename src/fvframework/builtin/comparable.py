"""
Validators for values which support the comparison operators, e.g. numbers, strings or dates
"""
from typing import TypeVar

from fvframework.validated import Invalid, Valid, Validated
from fvframework.validator import Validator

# any type implementing `<`, `<=`, `>` and `>=`
ComparableT = TypeVar("ComparableT")


def is_greater_than(lower_bound: ComparableT) -> Validator[ComparableT, str]:
    """
    Accepts values strictly greater than `lower_bound`
    """

    def check(value: ComparableT) -> Validated[ComparableT, str]:
        if value > lower_bound:
            return Valid(value)
        return Invalid(f"must be greater than {lower_bound}")

    return Validator(check)


def is_less_than(upper_bound: ComparableT) -> Validator[ComparableT, str]:
    """
    Accepts values strictly less than `upper_bound`
    """

    def check(value: ComparableT) -> Validated[ComparableT, str]:
        if value < upper_bound:
            return Valid(value)
        return Invalid(f"must be less than {upper_bound}")

    return Validator(check)


def is_at_least(minimum: ComparableT) -> Validator[ComparableT, str]:
    """
    Accepts values greater than or equal to `minimum`
    """

    def check(value: ComparableT) -> Validated[ComparableT, str]:
        if value >= minimum:
            return Valid(value)
        return Invalid(f"must be at least {minimum}")

    return Validator(check)


def is_at_most(maximum: ComparableT) -> Validator[ComparableT, str]:
    """
    Accepts values less than or equal to `maximum`
    """

    def check(value: ComparableT) -> Validated[ComparableT, str]:
        if value <= maximum:
            return Valid(value)
        return Invalid(f"must be at most {maximum}")

    return Validator(check)


def is_in_closed_range(lower_bound: ComparableT, upper_bound: ComparableT) -> Validator[ComparableT, str]:
    """
    Accepts values in the range `lower_bound...upper_bound`, both bounds included
    """

    def check(value: ComparableT) -> Validated[ComparableT, str]:
        if lower_bound <= value <= upper_bound:
            return Valid(value)
        return Invalid(f"must be in range {lower_bound}...{upper_bound}")

    return Validator(check)


def is_in_range(lower_bound: ComparableT, upper_bound: ComparableT) -> Validator[ComparableT, str]:
    """
    Accepts values in the half-open range `lower_bound..<upper_bound`, i.e. `upper_bound` itself is excluded
    (like the built-in `range`).
    """

    def check(value: ComparableT) -> Validated[ComparableT, str]:
        if lower_bound <= value < upper_bound:
            return Valid(value)
        return Invalid(f"must be in range {lower_bound}..<{upper_bound}")

    return Validator(check)
