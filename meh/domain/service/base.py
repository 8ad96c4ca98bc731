"""Base class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business rules that don't belong to a single
    entity, such as moderation policy and token handling.
    """

    pass
