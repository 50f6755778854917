"""
Contains the reactive bindings `Validating` and `OptionalValidating`. A binding holds a value together with a fixed
validator and the result of validating the current value. The result is recomputed on every assignment, so it never
lags behind the value. Use them as attributes of your own classes:
```
class Registration:
    def __init__(self, user_name: str = "", age: Optional[int] = None):
        self.user_name = Validating(user_name, its_length(is_at_least(3)), begins_with("@"))
        self.age = OptionalValidating(age, is_at_least(18), required=False)

    def is_valid(self) -> bool:
        return zip_validated(self.user_name.result, self.age.result).is_valid
```
Bindings are not thread safe; synchronize access yourself if you share one between threads.
"""
import logging
from typing import Generic, Optional

from .types import ErrorT, ValueT
from .validated import Validated
from .validator import DEFAULT_REQUIRED_ERROR, Validator, combine

_logger = logging.getLogger(__name__)


def _combine_if_necessary(validators: tuple[Validator[ValueT, ErrorT], ...]) -> Validator[ValueT, ErrorT]:
    if len(validators) == 1:
        return validators[0]
    return combine(*validators)


class Validating(Generic[ValueT, ErrorT]):
    """
    Pairs a value with a validator. The value gets validated on construction and on every assignment to `value`.
    Multiple validators are combined into one.
    """

    def __init__(self, value: ValueT, *validators: Validator[ValueT, ErrorT]):
        self._validator: Validator[ValueT, ErrorT] = _combine_if_necessary(validators)
        self._value: ValueT = value
        self._result: Validated[ValueT, ErrorT] = self._validator.validate(value)

    @property
    def value(self) -> ValueT:
        """The current value"""
        return self._value

    @value.setter
    def value(self, value: ValueT):
        self._value = value
        self._result = self._validator.validate(value)
        _logger.debug("Revalidated %r: %r", value, self._result)

    @property
    def validator(self) -> Validator[ValueT, ErrorT]:
        """The validator fixed on construction"""
        return self._validator

    @property
    def result(self) -> Validated[ValueT, ErrorT]:
        """The result of validating the current value. Reading it does not trigger a validation."""
        return self._result

    def is_valid(self) -> bool:
        """True if the current value is valid"""
        return self._result.is_valid

    def errors(self) -> Optional[tuple[ErrorT, ...]]:
        """The errors of the current value or None if it is valid"""
        return self._result.errors

    def __repr__(self):
        return f"{self.__class__.__name__}({self._value!r}, {self._result!r})"


class OptionalValidating(Validating[Optional[ValueT], ErrorT]):
    """
    Like `Validating` but for optional values. The validators are only applied to present values.
    If `required` is True, `None` is invalid with `required_error` (defaults to "is required").
    If `required` is False, `None` is always valid.
    Passing a `required_error` together with `required=False` raises a ValueError.
    The policy is fixed on construction.
    """

    def __init__(
        self,
        value: Optional[ValueT],
        *validators: Validator[ValueT, ErrorT],
        required: bool = True,
        required_error: Optional[ErrorT] = None,
    ):
        if not required and required_error is not None:
            raise ValueError("A required_error can only be used with required=True")
        self._required = required
        inner_validator = _combine_if_necessary(validators)
        if required:
            if required_error is None:
                required_error = DEFAULT_REQUIRED_ERROR  # type: ignore[assignment]
            lifted_validator = inner_validator.optional(required_error)
        else:
            lifted_validator = inner_validator.optional()
        super().__init__(value, lifted_validator)

    @property
    def required(self) -> bool:
        """True if `None` is a validation failure"""
        return self._required
