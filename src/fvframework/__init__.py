"""
This package enables you to build validators from small, pure functions and to compose them algebraically.
Validators return `Valid`/`Invalid` results instead of raising, collect all errors and can be reused for other
types using `pullback`.
"""

from .errors import EmptyErrorsError
from .mapped_validators import PathMappedValidator
from .validated import Invalid, Valid, Validated, zip_validated
from .validating import OptionalValidating, Validating
from .validator import DEFAULT_REQUIRED_ERROR, Validator, combine, its
