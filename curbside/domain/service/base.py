"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business logic that spans several aggregates or
    doesn't naturally belong to a single entity.
    """

    pass
