"""
Validators for strings
"""
import enum
import re

from fvframework.validated import Invalid, Valid, Validated
from fvframework.validator import Validator

from .numeric import is_exactly


class CompareOptions(enum.Flag):
    """
    Configures how `matches_pattern` compares the pattern with the value. Combine them with `|`, e.g.
    `CompareOptions.REGULAR_EXPRESSION | CompareOptions.CASE_INSENSITIVE`.
    """

    #: The pattern is a plain substring
    LITERAL = 0
    #: The pattern is a regular expression (`re` syntax)
    REGULAR_EXPRESSION = enum.auto()
    CASE_INSENSITIVE = enum.auto()
    #: The pattern has to match at the beginning of the value
    ANCHORED = enum.auto()


def begins_with(prefix: str) -> Validator[str, str]:
    """
    Accepts strings starting with `prefix`
    """

    def check(value: str) -> Validated[str, str]:
        if value.startswith(prefix):
            return Valid(value)
        return Invalid(f"must begin with '{prefix}'")

    return Validator(check)


def ends_with(suffix: str) -> Validator[str, str]:
    """
    Accepts strings ending with `suffix`
    """

    def check(value: str) -> Validated[str, str]:
        if value.endswith(suffix):
            return Valid(value)
        return Invalid(f"must end with '{suffix}'")

    return Validator(check)


def its_length(validator: Validator[int, str]) -> Validator[str, str]:
    """
    Validates the length of a string using `validator`. The errors are prefixed with "length", e.g.
    `its_length(is_exactly(3))` fails with "length must be exactly 3".
    """
    return validator.pullback(len).map_errors(lambda error: f"length {error}")


def has_exact_length(length: int) -> Validator[str, str]:
    """
    Accepts strings with exactly `length` characters
    """
    return its_length(is_exactly(length))


def matches_pattern(pattern: str, options: CompareOptions = CompareOptions.REGULAR_EXPRESSION) -> Validator[str, str]:
    """
    Accepts strings containing a match of `pattern`. See `CompareOptions` for the comparison modes.
    """
    if CompareOptions.REGULAR_EXPRESSION in options:
        compiled = re.compile(pattern, re.IGNORECASE if CompareOptions.CASE_INSENSITIVE in options else 0)
        search = compiled.match if CompareOptions.ANCHORED in options else compiled.search

        def has_match(value: str) -> bool:
            return search(value) is not None

    else:
        ignore_case = CompareOptions.CASE_INSENSITIVE in options
        needle = pattern.casefold() if ignore_case else pattern
        anchored = CompareOptions.ANCHORED in options

        def has_match(value: str) -> bool:
            haystack = value.casefold() if ignore_case else value
            if anchored:
                return haystack.startswith(needle)
            return needle in haystack

    def check(value: str) -> Validated[str, str]:
        if has_match(value):
            return Valid(value)
        return Invalid("must match pattern")

    return Validator(check)


def _check_empty(value: str) -> Validated[str, str]:
    if value == "":
        return Valid(value)
    return Invalid("must be empty")


is_empty: Validator[str, str] = Validator(_check_empty)
is_not_empty: Validator[str, str] = is_empty.negated("must not be empty")
