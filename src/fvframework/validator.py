"""
Contains the `Validator` class and the functions to compose validators.
A validator wraps a pure function which checks a value and returns a `Validated` result. Validators never transform
the value: a valid result always holds the value passed to `validate`.
"""
from typing import Callable, Generic, Optional

from .types import AccumulatorT, ErrorT, LocalErrorT, LocalValueT, ValueT
from .validated import Invalid, Valid, Validated

DEFAULT_REQUIRED_ERROR = "is required"


class Validator(Generic[ValueT, ErrorT]):
    """
    An immutable wrapper around a validation function `value -> Validated[value, error]`.
    The function is executed on every call of `validate`; the validator itself caches nothing.
    """

    __slots__ = ("_function",)

    def __init__(self, function: Callable[[ValueT], Validated[ValueT, ErrorT]]):
        self._function = function

    def validate(self, value: ValueT) -> Validated[ValueT, ErrorT]:
        """
        Runs the wrapped function against `value`.
        """
        return self._function(value)

    def pullback(self, transform: Callable[[LocalValueT], ValueT]) -> "Validator[LocalValueT, ErrorT]":
        """
        Adapts this validator to another input type. The returned validator validates `transform(local_value)` and
        returns `local_value` itself on success, e.g.:
        ```
        is_long_enough: Validator[str, str] = is_at_least(5).pullback(len)
        ```
        Exceptions raised by `transform` are not caught.
        """

        def validate_local(local_value: LocalValueT) -> Validated[LocalValueT, ErrorT]:
            return self.validate(transform(local_value)).map(lambda _: local_value)

        return Validator(validate_local)

    def negated(self, error: ErrorT) -> "Validator[ValueT, ErrorT]":
        """
        Returns the logical inverse of this validator. If this validator succeeds, the negated one fails with `error`.
        If this validator fails, the negated one succeeds and the original errors are dropped.
        """

        def validate_negated(value: ValueT) -> Validated[ValueT, ErrorT]:
            if self.validate(value).is_valid:
                return Invalid(error)
            return Valid(value)

        return Validator(validate_negated)

    def map_errors(self, transform: Callable[[ErrorT], LocalErrorT]) -> "Validator[ValueT, LocalErrorT]":
        """
        Applies `transform` to every error this validator returns.
        """
        return Validator(lambda value: self.validate(value).map_errors(transform))

    def reduce_errors(
        self, initial: AccumulatorT, reducer: Callable[[AccumulatorT, ErrorT], AccumulatorT]
    ) -> "Validator[ValueT, AccumulatorT]":
        """
        Folds all errors this validator returns into a single error, e.g. to join them into one message:
        ```
        validator.reduce_errors("", lambda message, error: f"{message}{error}; ")
        ```
        """
        return Validator(lambda value: self.validate(value).reduce_errors(initial, reducer))

    def optional(self, error_on_none: Optional[ErrorT] = None) -> "Validator[Optional[ValueT], ErrorT]":
        """
        Lifts this validator to optional values. Present values are validated by this validator. `None` is invalid
        with `error_on_none` if one is given and valid otherwise.
        """

        def validate_optional(value: Optional[ValueT]) -> Validated[Optional[ValueT], ErrorT]:
            if value is None:
                if error_on_none is None:
                    return Valid(None)
                return Invalid(error_on_none)
            return self.validate(value)

        return Validator(validate_optional)

    def optional_policy(self, allow_none: bool) -> "Validator[Optional[ValueT], ErrorT]":
        """
        Lifts this validator to optional values using a boolean policy. If `allow_none` is False, `None` is invalid
        with the error "is required". Meant for validators with string errors.
        """
        if allow_none:
            return self.optional()
        return self.optional(DEFAULT_REQUIRED_ERROR)  # type: ignore[arg-type]

    @staticmethod
    def combine(*validators: "Validator[ValueT, ErrorT]") -> "Validator[ValueT, ErrorT]":
        """
        see `combine`
        """
        return combine(*validators)


def combine(*validators: Validator[ValueT, ErrorT]) -> Validator[ValueT, ErrorT]:
    """
    Combines the validators into one. Every validator is run against the same value (there is no short-circuiting)
    and the errors of all failing validators are collected in the order of `validators`.
    Combining no validators at all results in a validator which accepts every value.
    """
    validators_tuple = tuple(validators)

    def validate_combined(value: ValueT) -> Validated[ValueT, ErrorT]:
        validated: Validated[ValueT, ErrorT] = Valid(value)
        for validator in validators_tuple:
            validated = validated.zip(validator.validate(value)).map(lambda _: value)
        return validated

    return Validator(validate_combined)


def its(
    transform: Callable[[LocalValueT], ValueT], validator: Validator[ValueT, ErrorT]
) -> Validator[LocalValueT, ErrorT]:
    """
    Reads nicer than `pullback` in some places, e.g. `its(lambda numbers: numbers[0], is_equal_to(1))`.
    """
    return validator.pullback(transform)
