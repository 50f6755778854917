"""
Contains ready-to-use validators with human-readable string errors.
They are built with the same algebra you can use for your own validators.
"""
from .boolean import is_false, is_true
from .collection import contains, has_length_of
from .comparable import is_at_least, is_at_most, is_greater_than, is_in_closed_range, is_in_range, is_less_than
from .element import is_excluded, is_included
from .equality import is_equal_to
from .numeric import is_even, is_exactly, is_odd
from .string import (
    CompareOptions,
    begins_with,
    ends_with,
    has_exact_length,
    is_empty,
    is_not_empty,
    its_length,
    matches_pattern,
)
