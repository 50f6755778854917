"""
Contains the exceptions raised on misuse of the framework. Validation failures themselves are never raised, they are
returned as `Invalid` results.
"""


class EmptyErrorsError(ValueError):
    """
    Raised if an `Invalid` result should be created without any error. An invalid result always carries at least one
    error.
    """

    def __init__(self):
        super().__init__("An invalid result must contain at least one error")
