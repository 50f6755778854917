"""
Contains the type variables used in the validation framework
"""
from typing import TypeVar

ValueT = TypeVar("ValueT")
LocalValueT = TypeVar("LocalValueT")
ErrorT = TypeVar("ErrorT")
LocalErrorT = TypeVar("LocalErrorT")
AccumulatorT = TypeVar("AccumulatorT")
