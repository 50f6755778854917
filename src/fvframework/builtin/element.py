"""
Validators checking the membership of a value in a given list or set of values.
Lists (or any other sequence) are shown in the error message, sets are not.
"""
from collections.abc import Sequence, Set
from typing import Any

from fvframework.validated import Invalid, Valid, Validated
from fvframework.validator import Validator


def _describe(values: Sequence[Any] | Set[Any]) -> str:
    if isinstance(values, Set):
        return "set"
    return str(list(values))


def is_included(in_: Sequence[Any] | Set[Any]) -> Validator[Any, str]:
    """
    Accepts values which are one of `in_`
    """
    description = _describe(in_)

    def check(value: Any) -> Validated[Any, str]:
        if value in in_:
            return Valid(value)
        return Invalid(f"must be included in {description}")

    return Validator(check)


def is_excluded(from_: Sequence[Any] | Set[Any]) -> Validator[Any, str]:
    """
    Accepts values which are none of `from_`
    """
    return is_included(from_).negated(f"must be excluded from {_describe(from_)}")
