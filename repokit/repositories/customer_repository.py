"""Customer repository - thread-safe in-memory implementation."""

import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from repokit.exceptions import DuplicateCustomerError
from repokit.models.domain import Customer
from repokit.utils.logger import AppLogger


class CustomerRepository(ABC):
    """
    Storage for registered customers, keyed by customer id.

    Unlike Repository, save never overwrites and lookups return None
    on a miss instead of raising.
    """

    @abstractmethod
    def save(self, customer: Customer) -> None:
        """Store a new customer. Raises DuplicateCustomerError if the id exists."""
        pass

    @abstractmethod
    def find_by_id(self, id: str) -> Optional[Customer]:
        """Get customer by id, or None."""
        pass

    @abstractmethod
    def find_all(self) -> List[Customer]:
        """Copy of all stored customers."""
        pass

    @abstractmethod
    def delete_by_id(self, id: str) -> bool:
        """Delete customer by id. Returns True if deleted, False if not found."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored customers."""
        pass


class InMemoryCustomerRepository(CustomerRepository):
    """
    Customer repository backed by a lock-guarded dict.

    The duplicate check and the insert happen under the same lock, so
    concurrent saves of one id succeed exactly once.
    """

    def __init__(self, logger: AppLogger):
        if logger is None:
            raise ValueError("Logger cannot be None")
        self.logger = logger
        self._customers: Dict[str, Customer] = {}
        self._lock = threading.Lock()
        self.logger.info("InMemoryCustomerRepository created")

    def save(self, customer: Customer) -> None:
        if customer is None:
            raise ValueError("Customer cannot be None")
        with self._lock:
            if customer.id in self._customers:
                self.logger.warn(f"Already existing customer with ID: {customer.id}")
                raise DuplicateCustomerError(f"Customer already exists: {customer.id}")
            self._customers[customer.id] = customer
        self.logger.info(f"Saved customer with ID: {customer.id}")

    def find_by_id(self, id: str) -> Optional[Customer]:
        with self._lock:
            customer = self._customers.get(id)
        if customer is None:
            self.logger.info(f"Customer with ID: {id} not found.")
        else:
            self.logger.info(f"Customer with ID: {id} found.")
        return customer

    def find_all(self) -> List[Customer]:
        with self._lock:
            customers = list(self._customers.values())
        self.logger.info(f"List of {len(customers)} customers found.")
        return customers

    def delete_by_id(self, id: str) -> bool:
        with self._lock:
            removed = self._customers.pop(id, None)
        if removed is None:
            self.logger.warn(f"Cannot delete - no customer with ID: {id}")
            return False
        self.logger.info(f"Deleted customer with ID: {id}")
        return True

    def count(self) -> int:
        with self._lock:
            return len(self._customers)
