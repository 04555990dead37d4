"""Repository layer."""

from .base import Repository
from .memory_repository import InMemoryRepository
from .customer_repository import CustomerRepository, InMemoryCustomerRepository

__all__ = [
    "Repository",
    "InMemoryRepository",
    "CustomerRepository",
    "InMemoryCustomerRepository",
]
