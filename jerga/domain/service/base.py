"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business logic that spans entities or needs
    repositories, and open a logfire span per operation.
    """

    pass
