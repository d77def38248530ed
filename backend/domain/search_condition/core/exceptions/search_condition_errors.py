"""Search condition domain exceptions."""

from domain.shared.errors import ConflictError, NotFoundError


class SearchConditionNotFoundError(NotFoundError):
    """Search condition does not exist or has been soft-deleted."""

    def __init__(self, identifier: str):
        super().__init__("search condition", identifier)


class DuplicateSearchConditionNameError(ConflictError):
    """Another stored search condition already uses this name."""

    MESSAGE = "A search condition with this name already exists"

    def __init__(self, identifier: str):
        super().__init__("search condition", identifier, self.MESSAGE)
