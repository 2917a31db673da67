"""Domain-level exceptions.

Every business rule violation is a subclass of DomainException so the
boundary layers (CLI, HTTP) can translate them uniformly. Store faults are
deliberately *not* part of this hierarchy and propagate untouched.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidNameError(ValidationError):
    """A product name is blank."""


class DuplicateNameError(ValidationError):
    """Another product already uses this exact name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Product with name '{name}' already exists")
        self.name = name


class InvalidQuantityError(ValidationError):
    """A quantity is negative or not an integer."""


class InvalidPriceError(ValidationError):
    """A price is negative or not a number."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product with ID {product_id} not found")
        self.product_id = product_id
