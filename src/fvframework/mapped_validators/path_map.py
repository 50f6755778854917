"""
Contains the PathMappedValidator which validates several (nested) attributes of an object at once by mapping
attribute paths onto validators.
"""
import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional

from frozendict import frozendict

from fvframework.types import ErrorT
from fvframework.utils.query_object import required_field
from fvframework.validated import Invalid, Validated
from fvframework.validator import DEFAULT_REQUIRED_ERROR, Validator, combine

_logger = logging.getLogger(__name__)


class PathMappedValidator(Validator[Any, ErrorT]):
    """
    Validates the attributes of arbitrary objects. Every validator in `path_map` is pulled back onto the attribute
    found at its path and all of them are combined in the order of `path_map`:
    ```
    validate_customer = PathMappedValidator(
        {
            "name": is_not_empty,
            "address.zip_code": has_exact_length(5),
        },
        label_errors=lambda path, error: f"{path}: {error}",
    )
    ```
    If `label_errors` is given it is applied to every error together with the path it belongs to.
    `path_types` optionally maps paths onto the expected attribute types which get checked on every validation.
    A path which doesn't exist in the validated object is a validation failure with `missing_error` (defaults to
    "is required", labelled like every other error). A mismatch with an explicit `path_types` entry raises a
    TypeCheckError.
    """

    __slots__ = ("path_map", "path_types")

    def __init__(
        self,
        path_map: Mapping[str, Validator[Any, ErrorT]],
        label_errors: Optional[Callable[[str, ErrorT], ErrorT]] = None,
        path_types: Optional[Mapping[str, Any]] = None,
        missing_error: ErrorT = DEFAULT_REQUIRED_ERROR,  # type: ignore[assignment]
    ):
        if len(path_map) == 0:
            raise ValueError("The path map must contain at least one path")
        self.path_map: frozendict[str, Validator[Any, ErrorT]] = (
            path_map if isinstance(path_map, frozendict) else frozendict(path_map)
        )
        self.path_types: frozendict[str, Any] = frozendict(path_types or {})
        unknown_paths = set(self.path_types.keys()) - set(self.path_map.keys())
        if len(unknown_paths) > 0:
            raise ValueError(f"Types given for unmapped path(s) {unknown_paths}")
        mapped_validators = [
            self._map_path(path, validator, label_errors, missing_error) for path, validator in self.path_map.items()
        ]
        super().__init__(combine(*mapped_validators).validate)
        _logger.debug("Created %s", self)

    def _map_path(
        self,
        path: str,
        validator: Validator[Any, ErrorT],
        label_errors: Optional[Callable[[str, ErrorT], ErrorT]],
        missing_error: ErrorT,
    ) -> Validator[Any, ErrorT]:
        attribute_type = self.path_types.get(path, Any)

        def validate_path(obj: Any) -> Validated[Any, ErrorT]:
            try:
                attribute = required_field(obj, path, attribute_type)
            except AttributeError as error:
                _logger.debug("Path %s not provided: %s", path, error)
                return Invalid(missing_error)
            return validator.validate(attribute).map(lambda _: obj)

        mapped: Validator[Any, ErrorT] = Validator(validate_path)
        if label_errors is not None:
            return mapped.map_errors(lambda error: label_errors(path, error))
        return mapped

    def __str__(self):
        return f"PathMappedValidator({list(self.path_map.keys())})"
