"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span more than one aggregate, such
    as a reaction on a post changing its author's points.
    """

    pass
