"""
Validators based on equality
"""
from typing import Any

from fvframework.validated import Invalid, Valid, Validated
from fvframework.validator import Validator


def is_equal_to(other: Any) -> Validator[Any, str]:
    """
    Accepts values equal to `other`
    """

    def check(value: Any) -> Validated[Any, str]:
        if value == other:
            return Valid(value)
        return Invalid(f"must be equal to '{other}'")

    return Validator(check)
