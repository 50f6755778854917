"""
Validators for sized collections like lists, tuples, strings or dicts
"""
from typing import Any, Collection

from fvframework.validated import Invalid, Valid, Validated
from fvframework.validator import Validator


def has_length_of(validator: Validator[int, str]) -> Validator[Collection[Any], str]:
    """
    Validates the length of a collection using `validator`, e.g. `has_length_of(is_at_most(3))`.
    """
    return validator.pullback(len)


def contains(element: Any) -> Validator[Collection[Any], str]:
    """
    Accepts collections containing `element`
    """

    def check(value: Collection[Any]) -> Validated[Collection[Any], str]:
        if element in value:
            return Valid(value)
        return Invalid(f"must contain {element}")

    return Validator(check)
