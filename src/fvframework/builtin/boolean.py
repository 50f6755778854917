"""
Validators for booleans
"""
from fvframework.validated import Invalid, Valid, Validated
from fvframework.validator import Validator


def _check_true(value: bool) -> Validated[bool, str]:
    if value is True:
        return Valid(value)
    return Invalid("must be true")


is_true: Validator[bool, str] = Validator(_check_true)
is_false: Validator[bool, str] = is_true.negated("must be false")
