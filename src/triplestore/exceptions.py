"""Custom exceptions for the triple store."""


class InvalidArgumentError(ValueError):
    """Raised when a field or wildcard argument is None.

    This is the only error the store raises on its public surface. A query
    or removal that matches nothing is not an error; it returns an empty
    result instead.
    """

    pass
