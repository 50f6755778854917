"""
Contains the result type of a validation. A `Validated` is either `Valid`, holding the validated value, or `Invalid`,
holding a non-empty ordered tuple of errors.
"""
import functools
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Optional, TypeVar

from .errors import EmptyErrorsError
from .types import AccumulatorT, ErrorT, LocalErrorT, ValueT

_MappedValueT = TypeVar("_MappedValueT")
_OtherValueT = TypeVar("_OtherValueT")


class Validated(ABC, Generic[ValueT, ErrorT]):
    """
    Abstract base class of `Valid` and `Invalid`.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def is_valid(self) -> bool:
        """True if this is a `Valid` result"""

    @property
    def is_invalid(self) -> bool:
        """True if this is an `Invalid` result"""
        return not self.is_valid

    @property
    @abstractmethod
    def value(self) -> Optional[ValueT]:
        """The validated value or None if the result is invalid"""

    @property
    @abstractmethod
    def errors(self) -> Optional[tuple[ErrorT, ...]]:
        """The errors in insertion order or None if the result is valid"""

    @abstractmethod
    def map(self, transform: Callable[[ValueT], _MappedValueT]) -> "Validated[_MappedValueT, ErrorT]":
        """
        Applies `transform` to the value of a valid result. Invalid results are returned as they are.
        """

    @abstractmethod
    def map_errors(self, transform: Callable[[ErrorT], LocalErrorT]) -> "Validated[ValueT, LocalErrorT]":
        """
        Applies `transform` to every error of an invalid result, keeping their order.
        Valid results are returned as they are.
        """

    @abstractmethod
    def reduce_errors(
        self, initial: AccumulatorT, reducer: Callable[[AccumulatorT, ErrorT], AccumulatorT]
    ) -> "Validated[ValueT, AccumulatorT]":
        """
        Folds the errors of an invalid result into a single error starting with `initial`.
        Valid results are returned as they are.
        """

    def zip(self, other: "Validated[_OtherValueT, ErrorT]") -> "Validated[tuple[ValueT, _OtherValueT], ErrorT]":
        """
        Merges two results. The merged result is valid with both values if both sides are valid. Otherwise, it is
        invalid with the errors of this result followed by the errors of `other`.
        """
        if self.is_valid and other.is_valid:
            return Valid((self.value, other.value))  # type: ignore[arg-type]
        return Invalid(*(self.errors or ()), *(other.errors or ()))


class Valid(Validated[ValueT, ErrorT]):
    """
    A successful validation result holding the validated value.
    """

    __slots__ = ("_value",)

    def __init__(self, value: ValueT):
        self._value = value

    @property
    def is_valid(self) -> bool:
        return True

    @property
    def value(self) -> ValueT:
        return self._value

    @property
    def errors(self) -> None:
        return None

    def map(self, transform: Callable[[ValueT], _MappedValueT]) -> "Valid[_MappedValueT, ErrorT]":
        return Valid(transform(self._value))

    def map_errors(self, transform: Callable[[ErrorT], LocalErrorT]) -> "Valid[ValueT, LocalErrorT]":
        return Valid(self._value)

    def reduce_errors(
        self, initial: AccumulatorT, reducer: Callable[[AccumulatorT, ErrorT], AccumulatorT]
    ) -> "Valid[ValueT, AccumulatorT]":
        return Valid(self._value)

    def __eq__(self, other):
        return isinstance(other, Valid) and self._value == other._value

    def __hash__(self):
        return hash((Valid, self._value))

    def __repr__(self):
        return f"Valid({self._value!r})"


class Invalid(Validated[ValueT, ErrorT]):
    """
    A failed validation result holding one or more errors. The errors are passed as positional arguments:
    `Invalid("must be even")` or `Invalid(*errors)`. Creating an instance without any error raises `EmptyErrorsError`.
    """

    __slots__ = ("_errors",)

    def __init__(self, *errors: ErrorT):
        if len(errors) == 0:
            raise EmptyErrorsError()
        self._errors: tuple[ErrorT, ...] = errors

    @property
    def is_valid(self) -> bool:
        return False

    @property
    def value(self) -> None:
        return None

    @property
    def errors(self) -> tuple[ErrorT, ...]:
        return self._errors

    def map(self, transform: Callable[[ValueT], _MappedValueT]) -> "Invalid[_MappedValueT, ErrorT]":
        return Invalid(*self._errors)

    def map_errors(self, transform: Callable[[ErrorT], LocalErrorT]) -> "Invalid[ValueT, LocalErrorT]":
        return Invalid(*(transform(error) for error in self._errors))

    def reduce_errors(
        self, initial: AccumulatorT, reducer: Callable[[AccumulatorT, ErrorT], AccumulatorT]
    ) -> "Invalid[ValueT, AccumulatorT]":
        return Invalid(functools.reduce(reducer, self._errors, initial))

    def __eq__(self, other):
        return isinstance(other, Invalid) and self._errors == other._errors

    def __hash__(self):
        return hash((Invalid, self._errors))

    def __repr__(self):
        return f"Invalid({', '.join(repr(error) for error in self._errors)})"


def zip_validated(*results: Validated[Any, ErrorT]) -> Validated[tuple[Any, ...], ErrorT]:
    """
    Merges any number of results into one. The merged result is valid with the tuple of all values if every result
    is valid. Otherwise, it is invalid with the errors of all invalid results in the order of `results`.
    No results at all give a valid empty tuple.
    """
    errors = [error for result in results if result.is_invalid for error in result.errors or ()]
    if len(errors) > 0:
        return Invalid(*errors)
    return Valid(tuple(result.value for result in results))
