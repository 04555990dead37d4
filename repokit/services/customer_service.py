"""Customer service - business logic for customer registration."""

from typing import List

from repokit.exceptions import CustomerNotFoundError
from repokit.models.domain import Customer
from repokit.repositories.customer_repository import CustomerRepository
from repokit.utils.logger import AppLogger


class CustomerService:
    """
    Service for customer registration.

    Responsibilities:
    - Build validated Customer instances
    - Delegate storage to the CustomerRepository
    - Turn missing customers into CustomerNotFoundError

    Does NOT:
    - Detect duplicates (the repository raises DuplicateCustomerError)
    """

    def __init__(self, customer_repo: CustomerRepository, logger: AppLogger):
        if customer_repo is None:
            raise ValueError("Customer repository cannot be None")
        if logger is None:
            raise ValueError("Logger cannot be None")
        self.customer_repo = customer_repo
        self.logger = logger

    def register_customer(self, id: str, name: str, email: str) -> Customer:
        """
        Register a new customer.

        Raises:
            pydantic.ValidationError: id, name or email is invalid
            DuplicateCustomerError: id is already registered
        """
        customer = Customer(id=id, name=name, email=email)
        self.customer_repo.save(customer)
        self.logger.info(f"Registered new customer with ID: {id}")
        return customer

    def get_customer(self, id: str) -> Customer:
        """Get a registered customer. Raises CustomerNotFoundError if absent."""
        customer = self.customer_repo.find_by_id(id)
        if customer is None:
            self.logger.warn(f"Customer with ID: {id} not found.")
            raise CustomerNotFoundError(f"Customer not found: {id}")
        self.logger.info(f"Customer with ID: {id} found.")
        return customer

    def list_customers(self) -> List[Customer]:
        """List all registered customers."""
        customers = self.customer_repo.find_all()
        self.logger.info(f"Returning a list of {len(customers)} customer(s)")
        return customers

    def remove_customer(self, id: str) -> None:
        """Remove a registered customer. Raises CustomerNotFoundError if absent."""
        if not self.customer_repo.delete_by_id(id):
            self.logger.warn(f"Cannot remove customer with ID: {id}, not found.")
            raise CustomerNotFoundError(f"Customer not found: {id}")
        self.logger.info(f"Removed customer with ID: {id}")
