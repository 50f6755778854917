"""
Validators for integers
"""
from fvframework.validated import Invalid, Valid, Validated
from fvframework.validator import Validator

from .equality import is_equal_to


def is_exactly(amount: int) -> Validator[int, str]:
    """
    Accepts only `amount`
    """
    return is_equal_to(amount).map_errors(lambda _: f"must be exactly {amount}")


def _check_odd(value: int) -> Validated[int, str]:
    if value % 2 == 1:
        return Valid(value)
    return Invalid("must be odd")


def _check_even(value: int) -> Validated[int, str]:
    if value % 2 == 0:
        return Valid(value)
    return Invalid("must be even")


is_odd: Validator[int, str] = Validator(_check_odd)
is_even: Validator[int, str] = Validator(_check_even)
