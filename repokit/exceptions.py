"""Error taxonomy.

Invalid arguments are reported with the built-in ValueError (pydantic's
ValidationError included, it subclasses ValueError). Everything below is
raised for lookups and conflicts.

Two not-found flavors exist on purpose:
- EntityNotFoundError comes from the generic repository
- CustomerNotFoundError comes from CustomerService

The customer store itself never raises on a miss, it returns None.
"""


class RepositoryError(Exception):
    """Base class for storage-level errors."""


class EntityNotFoundError(RepositoryError, LookupError):
    """No entity stored under the requested ID, or a filter matched nothing."""


class DuplicateCustomerError(RepositoryError):
    """A customer with the same ID is already stored."""


class CustomerNotFoundError(LookupError):
    """The requested customer is not registered."""
