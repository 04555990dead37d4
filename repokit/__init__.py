"""Generic repository building blocks.

A small in-process toolkit with:
- Single-value Container and key/value Pair
- Generic Repository with an in-memory implementation
- Specification-based filtering with AND/OR/NOT combinators
- Customer registration on top of a thread-safe customer store

Usage:
    from repokit import InMemoryRepository, StdLogger, get_logger

    repo = InMemoryRepository(StdLogger(get_logger(__name__)))
"""

from .exceptions import (
    RepositoryError,
    EntityNotFoundError,
    DuplicateCustomerError,
    CustomerNotFoundError,
)
from .filters import (
    Specification,
    AndSpecification,
    OrSpecification,
    NotSpecification,
    PredicateSpecification,
    CustomerFilter,
)
from .models import Container, Pair, Customer, CityCustomer
from .repositories import (
    Repository,
    InMemoryRepository,
    CustomerRepository,
    InMemoryCustomerRepository,
)
from .services import CustomerService
from .utils import AppLogger, StdLogger, NullLogger, get_logger, configure_logging

__all__ = [
    "RepositoryError",
    "EntityNotFoundError",
    "DuplicateCustomerError",
    "CustomerNotFoundError",
    "Specification",
    "AndSpecification",
    "OrSpecification",
    "NotSpecification",
    "PredicateSpecification",
    "CustomerFilter",
    "Container",
    "Pair",
    "Customer",
    "CityCustomer",
    "Repository",
    "InMemoryRepository",
    "CustomerRepository",
    "InMemoryCustomerRepository",
    "CustomerService",
    "AppLogger",
    "StdLogger",
    "NullLogger",
    "get_logger",
    "configure_logging",
]
