"""
Contains functions to query (nested) attributes of arbitrary objects by a dotted path like "address.zip_code".
Mappings are queried by key instead of by attribute, so "contracts.c1.iban" works for a dict of contracts, too.
"""
from collections.abc import Mapping
from typing import Any, Optional, TypeVar, overload

from typeguard import TypeCheckError, check_type

AttrT = TypeVar("AttrT")


def _get_step(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        try:
            return obj[name]
        except KeyError as error:
            raise AttributeError(name) from error
    return getattr(obj, name)


@overload
def required_field(obj: Any, attribute_path: str, attribute_type: type[AttrT]) -> AttrT:
    ...


@overload
def required_field(obj: Any, attribute_path: str, attribute_type: Any) -> Any:
    ...


def required_field(obj: Any, attribute_path: str, attribute_type: Any) -> Any:
    """
    Returns the value at `attribute_path` of `obj`. Raises an AttributeError naming the first missing part of the
    path if it doesn't exist and a TypeCheckError if the value doesn't match `attribute_type`.
    """
    current_obj: Any = obj
    splitted_path = attribute_path.split(".")
    for index, attr_name in enumerate(splitted_path):
        try:
            current_obj = _get_step(current_obj, attr_name)
        except AttributeError as error:
            raise AttributeError(f"{'.'.join(splitted_path[: index + 1])}: Not found") from error
    try:
        check_type(current_obj, attribute_type)
    except TypeCheckError as error:
        raise TypeCheckError(f"{attribute_path}: {error}") from error
    return current_obj


def optional_field(obj: Any, attribute_path: str, attribute_type: type[AttrT]) -> Optional[AttrT]:
    """
    Like `required_field` but returns None if the path doesn't exist or the value has the wrong type.
    """
    try:
        return required_field(obj, attribute_path, attribute_type)
    except (AttributeError, TypeCheckError):
        return None
