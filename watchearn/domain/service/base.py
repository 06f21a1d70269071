"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the reward ledger rules that span more than one
    entity, such as crediting an account for a vote.
    """

    pass
