"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span several entities: ownership
    checks, cascades and the derived like/comment aggregates.
    """

    pass
