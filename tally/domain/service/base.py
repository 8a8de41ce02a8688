"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the business rules that operate on a whole
    aggregate or document rather than on a single value.
    """

    pass
